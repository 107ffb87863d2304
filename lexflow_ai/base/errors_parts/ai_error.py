"""
Structured AI error exception type.

Raised inside the orchestration layer when a failure has already been
understood (capability missing, forced attempt failed, input too large).
The classifier passes these through unchanged instead of re-deriving the
kind from the message text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .failure_kind import FailureKind
from .recovery_action import RecoveryAction


@dataclass
class AIError(Exception):
    """Represents an orchestration failure with a normalized kind.

    Attributes:
        kind: Normalized :class:`FailureKind` for the failure.
        message: Human-readable message, surfaced verbatim to the caller.
        retryable: Optional override of the kind's default retry hint.
        action: Optional override of the kind's default recovery action.
        operation: Operation name where the error originated (``"analyze"``).
        raw: Optional original exception for diagnostics.
    """

    kind: FailureKind
    message: str
    retryable: Optional[bool] = None
    action: Optional[RecoveryAction] = None
    operation: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["AIError"]
