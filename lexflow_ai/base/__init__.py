"""
Orchestration Base Package

Exports the host-agnostic building blocks of the AI invocation layer:

- Models: capability report, availability, invocation results
- Errors: failure taxonomy and the classifier
- Capabilities: injected host surface and the memoizing prober
- Invocation: creation deadline, progress relay, routing, chunk/reduce
"""

from .errors import AIError, AITimeoutError, FailureKind, RecoveryAction, classify
from .models import (
    AvailabilityState,
    BindingGeneration,
    CapabilityFamily,
    CapabilityReport,
    DownloadTerminal,
    Failure,
    FamilyStatus,
    InvocationResult,
    ProgressEvent,
    Success,
)
from .capabilities import CapabilityProber, FamilyBinding, HostSurface
from .chunking import ChunkReduceExecutor, split_payload
from .dto import InvocationRequest, TaskKind
from .intent import TaskSelection, detect_task
from .language import LanguageServices
from .progress import NotificationBus, ProgressRelay, get_notification_bus
from .resilience import RetryConfig, run_with_retry
from .routing import RequestRouter
from .timeouts import TimeoutConfig, bounded_invoke, get_timeout_config

__all__ = [
    # Models
    "AvailabilityState",
    "BindingGeneration",
    "CapabilityFamily",
    "CapabilityReport",
    "FamilyStatus",
    "Success",
    "Failure",
    "InvocationResult",
    "ProgressEvent",
    "DownloadTerminal",
    "InvocationRequest",
    "TaskKind",
    # Errors
    "AIError",
    "AITimeoutError",
    "FailureKind",
    "RecoveryAction",
    "classify",
    # Components
    "HostSurface",
    "FamilyBinding",
    "CapabilityProber",
    "TimeoutConfig",
    "get_timeout_config",
    "bounded_invoke",
    "NotificationBus",
    "get_notification_bus",
    "ProgressRelay",
    "RequestRouter",
    "ChunkReduceExecutor",
    "split_payload",
    "LanguageServices",
    "RetryConfig",
    "run_with_retry",
    "TaskSelection",
    "detect_task",
]
