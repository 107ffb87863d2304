from __future__ import annotations

import pytest

from lexflow_ai.base.errors import AIError, FailureKind
from lexflow_ai.utils.input_size_guard import enforce_max_input, get_max_input_chars, is_guard_enabled


def test_noop_without_limit():
    enforce_max_input("x" * 100_000)


def test_explicit_limit():
    enforce_max_input("abcde", max_chars=5)
    with pytest.raises(AIError) as info:
        enforce_max_input("abcdef", max_chars=5, operation="translate_text")
    assert info.value.kind is FailureKind.INPUT_TOO_LARGE  # nosec B101
    assert info.value.operation == "translate_text"  # nosec B101
    assert str(info.value) == "Text is too long for this operation (6 > 5 characters)."  # nosec B101


def test_env_configuration(monkeypatch):
    monkeypatch.setenv("LEXFLOW_AI_MAX_INPUT_CHARS", "3")
    assert get_max_input_chars() == 3  # nosec B101
    with pytest.raises(AIError):
        enforce_max_input("abcd")
    monkeypatch.setenv("LEXFLOW_AI_MAX_INPUT_ENABLED", "off")
    assert is_guard_enabled() is False  # nosec B101
    enforce_max_input("abcd")
    enforce_max_input("abcd", max_chars=10, enabled=True)


def test_bad_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("LEXFLOW_AI_MAX_INPUT_CHARS", "lots")
    assert get_max_input_chars(default=7) == 7  # nosec B101
    monkeypatch.setenv("LEXFLOW_AI_MAX_INPUT_CHARS", "-4")
    assert get_max_input_chars() == 0  # nosec B101
