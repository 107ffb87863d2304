from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from lexflow_ai.config import CONFIG_FILE_ENV, DEFAULTS, get_settings, reset_settings_cache


def test_defaults():
    settings = get_settings()
    assert settings.chunk_limit == DEFAULTS["chunk_limit"] == 1500  # nosec B101
    assert settings.create_timeout_ms == 60000  # nosec B101
    assert settings.supported_input_langs == ["en", "es", "ja"]  # nosec B101
    assert settings.retry_max_attempts == 1 and settings.max_input_chars == 0  # nosec B101


def test_yaml_file_section(tmp_path, monkeypatch):
    path = tmp_path / "ai.yaml"
    path.write_text("lexflow_ai:\n  chunk_limit: 1200\n  supported_input_langs: [en, pt]\n  unknown_key: 1\n")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    settings = get_settings()
    assert settings.chunk_limit == 1200  # nosec B101
    assert settings.supported_input_langs == ["en", "pt"]  # nosec B101


def test_json_file_is_cached_until_reset(tmp_path, monkeypatch):
    path = tmp_path / "ai.json"
    path.write_text(json.dumps({"create_timeout_ms": 5000}))
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_settings().create_timeout_ms == 5000  # nosec B101
    path.write_text(json.dumps({"create_timeout_ms": 7000}))
    assert get_settings().create_timeout_ms == 5000  # nosec B101
    reset_settings_cache()
    assert get_settings().create_timeout_ms == 7000  # nosec B101


def test_unparseable_or_missing_file_is_ignored(tmp_path, monkeypatch):
    path = tmp_path / "broken.yaml"
    path.write_text("key: [unclosed\n")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_settings().chunk_limit == 1500  # nosec B101
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "missing.yaml"))
    assert get_settings().chunk_limit == 1500  # nosec B101


def test_precedence_env_over_file_and_overrides_over_env(tmp_path, monkeypatch):
    path = tmp_path / "ai.json"
    path.write_text(json.dumps({"chunk_limit": 1000, "log_level": "debug"}))
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv("LEXFLOW_AI_CHUNK_LIMIT", "900")
    monkeypatch.setenv("LEXFLOW_AI_SUPPORTED_INPUT_LANGS", "en, pt ,")
    settings = get_settings()
    assert settings.chunk_limit == 900  # nosec B101
    assert settings.log_level == "DEBUG"  # nosec B101
    assert settings.supported_input_langs == ["en", "pt"]  # nosec B101
    assert get_settings({"chunk_limit": 800, "log_level": None}).chunk_limit == 800  # nosec B101


def test_invalid_values_raise(monkeypatch):
    monkeypatch.setenv("LEXFLOW_AI_CHUNK_LIMIT", "many")
    with pytest.raises(ValidationError):
        get_settings()
    monkeypatch.delenv("LEXFLOW_AI_CHUNK_LIMIT")
    with pytest.raises(ValidationError):
        get_settings({"retry_max_attempts": 0})


def test_settings_are_frozen():
    settings = get_settings()
    with pytest.raises(ValidationError):
        settings.chunk_limit = 10
