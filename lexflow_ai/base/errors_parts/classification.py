"""
Error classification helpers mapping exceptions to typed ``Failure`` results.

Implements the passthrough for already-typed :class:`AIError` instances, the
timeout mapping, and the message-based heuristics used for everything the
host throws at us (host errors carry no status codes, only text).
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple

from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models_parts.failure import Failure
from .ai_error import AIError
from .failure_kind import FailureKind
from .recovery_action import RecoveryAction

# kind -> (retryable, suggested action, user-facing message)
_KIND_POLICY: Dict[FailureKind, Tuple[bool, RecoveryAction, str]] = {
    FailureKind.AI_NOT_AVAILABLE: (
        False,
        RecoveryAction.SETUP_REQUIRED,
        "On-device AI is not available. Check the browser settings and experimental flags.",
    ),
    FailureKind.RATE_LIMITED: (
        True,
        RecoveryAction.RETRY_LATER,
        "AI usage limit reached. Please try again in a few minutes.",
    ),
    FailureKind.MODEL_LOADING: (
        True,
        RecoveryAction.RETRY_LATER,
        "AI model not available. The model may still be downloading.",
    ),
    FailureKind.NETWORK_ERROR: (
        True,
        RecoveryAction.RETRY,
        "Network error. Please check your connection.",
    ),
    FailureKind.TIMEOUT: (
        True,
        RecoveryAction.RETRY,
        "Timed out while creating the model. Please try again.",
    ),
    FailureKind.INPUT_TOO_LARGE: (
        False,
        RecoveryAction.RETRY_SHORTER,
        "Input is too large for this operation. Try again with shorter text.",
    ),
    FailureKind.UNKNOWN: (
        True,
        RecoveryAction.RETRY,
        "Unexpected AI error. Please try again.",
    ),
}

# First match wins; order is part of the contract.
_PATTERN_GROUPS: Tuple[Tuple[FailureKind, Tuple[str, ...]], ...] = (
    (FailureKind.AI_NOT_AVAILABLE, ("not available", "undefined")),
    (FailureKind.RATE_LIMITED, ("quota", "limit")),
    (FailureKind.MODEL_LOADING, ("model",)),
    (FailureKind.NETWORK_ERROR, ("network", "fetch")),
)


def _heuristic_from_message(msg: str) -> Optional[FailureKind]:
    """Substring heuristic mapping for untyped host exceptions."""
    for kind, patterns in _PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return kind
    return None


def _message_of(exc: BaseException) -> str:
    try:
        return str(getattr(exc, "message", None) or exc)
    except Exception:  # pragma: no cover - exotic __str__
        return repr(exc)


def classify_exception(exc: BaseException) -> FailureKind:
    """Classify an exception into a normalized :class:`FailureKind`.

    Precedence:
        1. AIError passthrough.
        2. Timeout exceptions (sync/async).
        3. Substring heuristics on the message.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, AIError):
        return exc.kind
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return FailureKind.TIMEOUT
    code = _heuristic_from_message(_message_of(exc).lower())
    return code if code is not None else FailureKind.UNKNOWN


def failure_for(
    kind: FailureKind,
    *,
    message: Optional[str] = None,
    operation: Optional[str] = None,
    detail: Optional[str] = None,
    retryable: Optional[bool] = None,
    action: Optional[RecoveryAction] = None,
) -> Failure:
    """Build a :class:`Failure` using the kind's default policy for gaps."""
    default_retry, default_action, default_message = _KIND_POLICY[kind]
    return Failure(
        kind=kind,
        message=message or default_message,
        suggested_action=action or default_action,
        retryable=default_retry if retryable is None else retryable,
        operation=operation,
        detail=detail,
    )


def classify(exc: BaseException, operation: str) -> Failure:
    """Map any exception to a structured :class:`Failure`. Never raises.

    Typed :class:`AIError` instances keep their own message (it was written
    for the user); everything else gets the kind's canned message and keeps
    the original text in ``detail``.
    """
    try:
        kind = classify_exception(exc)
        if isinstance(exc, AIError):
            failure = failure_for(
                kind,
                message=exc.message,
                operation=exc.operation or operation,
                detail=_message_of(exc.raw) if exc.raw is not None else None,
                retryable=exc.retryable,
                action=exc.action,
            )
        else:
            failure = failure_for(kind, operation=operation, detail=_message_of(exc))
    except Exception:  # pragma: no cover - last line of defence
        failure = failure_for(FailureKind.UNKNOWN, operation=operation)
    log_event(
        get_logger("lexflow_ai.errors"),
        "classify",
        LogContext(operation=operation),
        kind=failure.kind.value,
        retryable=failure.retryable,
        error_type=type(exc).__name__,
        detail=failure.detail,
    )
    return failure


__all__ = [
    "classify",
    "classify_exception",
    "failure_for",
    "_KIND_POLICY",
]
