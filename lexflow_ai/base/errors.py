"""Unified failure taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``lexflow_ai.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.failure_kind import FailureKind
from .errors_parts.recovery_action import RecoveryAction
from .errors_parts.ai_error import AIError
from .errors_parts.ai_timeout_error import AITimeoutError
from .errors_parts.classification import classify, classify_exception, failure_for

__all__ = [
    "FailureKind",
    "RecoveryAction",
    "AIError",
    "AITimeoutError",
    "classify",
    "classify_exception",
    "failure_for",
]
