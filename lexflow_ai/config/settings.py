"""Orchestration settings model and loader.

Merge order (later wins):
    1. Built-in defaults (``config/defaults.py``)
    2. Optional external file (JSON or YAML) named by ``LEXFLOW_AI_CONFIG_FILE``;
       either a flat mapping or one nested under a ``lexflow_ai`` key
    3. Environment variables ``LEXFLOW_AI_<FIELD>`` (e.g. ``LEXFLOW_AI_CHUNK_LIMIT``)
    4. In-code overrides passed to :func:`get_settings`

Example file::

    lexflow_ai:
      chunk_limit: 1200
      create_timeout_ms: 30000
      supported_input_langs: [en, es, pt]
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import DEFAULTS

CONFIG_FILE_ENV = "LEXFLOW_AI_CONFIG_FILE"
ENV_PREFIX = "LEXFLOW_AI_"
FILE_SECTION = "lexflow_ai"

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


class AISettings(BaseModel):
    """Validated orchestration settings."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    chunk_limit: int = Field(default=DEFAULTS["chunk_limit"], gt=0)
    chunk_concurrency: int = Field(default=DEFAULTS["chunk_concurrency"], ge=1)
    create_timeout_ms: int = Field(default=DEFAULTS["create_timeout_ms"], gt=0)
    default_output_lang: str = Field(default=DEFAULTS["default_output_lang"], min_length=1)
    supported_input_langs: List[str] = Field(default_factory=lambda: list(DEFAULTS["supported_input_langs"]))
    max_translate_chars: int = Field(default=DEFAULTS["max_translate_chars"], gt=0)
    max_input_chars: int = Field(default=DEFAULTS["max_input_chars"], ge=0)
    retry_max_attempts: int = Field(default=DEFAULTS["retry_max_attempts"], ge=1)
    retry_delay_base: float = Field(default=DEFAULTS["retry_delay_base"], ge=0)
    log_level: str = DEFAULTS["log_level"]

    @field_validator("supported_input_langs", mode="before")
    @classmethod
    def _split_langs(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


def _parse_file(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        return {}
    section = data.get(FILE_SECTION)
    return dict(section) if isinstance(section, dict) else data


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603 - module cache
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.is_file():
            data = _parse_file(p.read_text(encoding="utf-8"))
    _FILE_CACHE, _FILE_CACHE_PATH = data, path
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in AISettings.model_fields:
        val = os.getenv(f"{ENV_PREFIX}{field.upper()}")
        if val is not None and val.strip():
            out[field] = val
    return out


def reset_settings_cache() -> None:
    """Forget the parsed config file (tests swap files between cases)."""
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603 - module cache
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> AISettings:
    """Return merged, validated settings.

    Raises
    ------
    pydantic.ValidationError
        When a merged value fails validation (e.g. a non-numeric
        ``LEXFLOW_AI_CHUNK_LIMIT``).
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in AISettings.model_fields}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return AISettings(**cfg)


__all__ = ["AISettings", "get_settings", "reset_settings_cache", "CONFIG_FILE_ENV"]
