"""Timeout raised by :func:`lexflow_ai.base.timeouts.bounded_invoke`."""
from __future__ import annotations

from dataclasses import dataclass

from .ai_error import AIError
from .failure_kind import FailureKind


@dataclass
class AITimeoutError(AIError):
    """A capability-creation call did not settle within its budget.

    Attributes:
        timeout_ms: The budget that elapsed, in milliseconds.
    """

    kind: FailureKind = FailureKind.TIMEOUT
    message: str = "Timed out while creating the model. Please try again."
    timeout_ms: int = 0


__all__ = ["AITimeoutError"]
