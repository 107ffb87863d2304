"""
Normalized failure kinds (taxonomy).

Defines the `FailureKind` enumeration used by the classifier and carried on
every `Failure` result. Values are lowercase snake_case and are considered a
stable public contract for the presentation layer and logging.
"""
from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Enumerated failure categories surfaced to callers."""

    AI_NOT_AVAILABLE = "ai_not_available"
    RATE_LIMITED = "rate_limited"
    MODEL_LOADING = "model_loading"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    INPUT_TOO_LARGE = "input_too_large"
    UNKNOWN = "unknown"


__all__ = ["FailureKind"]
