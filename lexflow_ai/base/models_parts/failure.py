"""
Failure variant of the invocation result union.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..errors_parts.failure_kind import FailureKind
from ..errors_parts.recovery_action import RecoveryAction


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Failure:
    """A capability call failed; always produced by the error classifier.

    Attributes:
        kind: Normalized failure category.
        message: User-facing message.
        suggested_action: What the caller should offer next.
        retryable: Whether retrying the same call may succeed.
        timestamp: ISO-8601 UTC timestamp.
        operation: Operation name (``analyze``, ``summarize``...).
        detail: Original exception text, for diagnostics only.
    """

    kind: FailureKind
    message: str
    suggested_action: RecoveryAction
    retryable: bool
    timestamp: str = field(default_factory=_utc_now)
    operation: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.kind.value,
            "message": self.message,
            "fallback": self.suggested_action.value,
            "retryable": self.retryable,
            "timestamp": self.timestamp,
            "operation": self.operation,
            "detail": self.detail,
        }


__all__ = ["Failure"]
