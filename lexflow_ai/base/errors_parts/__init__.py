"""Errors parts package public surface.

Re-exports the taxonomy types for optional direct imports. Classification
helpers live in ``errors_parts.classification`` and depend on the models
package, so they are exposed through `lexflow_ai.base.errors` only.
"""

from .failure_kind import FailureKind
from .recovery_action import RecoveryAction
from .ai_error import AIError
from .ai_timeout_error import AITimeoutError

__all__ = [
    "FailureKind",
    "RecoveryAction",
    "AIError",
    "AITimeoutError",
]
