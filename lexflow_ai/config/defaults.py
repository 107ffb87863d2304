"""Built-in defaults for the orchestration settings.

Values mirror ``lexflow_ai.base.constants`` so the constants stay the single
place where limits are defined.
"""
from __future__ import annotations

from typing import Any, Dict

from lexflow_ai.base.constants import (
    DEFAULT_CHUNK_LIMIT,
    DEFAULT_CREATE_TIMEOUT_MS,
    DEFAULT_MAX_TRANSLATE_CHARS,
    DEFAULT_OUTPUT_LANG,
    SUPPORTED_INPUT_LANGS,
)

DEFAULT_RETRY_MAX_ATTEMPTS = 1
DEFAULT_RETRY_DELAY_BASE = 2.0
DEFAULT_LOG_LEVEL = "INFO"

DEFAULTS: Dict[str, Any] = {
    "chunk_limit": DEFAULT_CHUNK_LIMIT,
    "chunk_concurrency": 1,
    "create_timeout_ms": DEFAULT_CREATE_TIMEOUT_MS,
    "default_output_lang": DEFAULT_OUTPUT_LANG,
    "supported_input_langs": list(SUPPORTED_INPUT_LANGS),
    "max_translate_chars": DEFAULT_MAX_TRANSLATE_CHARS,
    "max_input_chars": 0,
    "retry_max_attempts": DEFAULT_RETRY_MAX_ATTEMPTS,
    "retry_delay_base": DEFAULT_RETRY_DELAY_BASE,
    "log_level": DEFAULT_LOG_LEVEL,
}

__all__ = [
    "DEFAULTS",
    "DEFAULT_RETRY_MAX_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_BASE",
    "DEFAULT_LOG_LEVEL",
]
