"""lexflow_ai package

AI invocation orchestration for on-device language-model capabilities.

Purpose:
    Probe which capability families a host exposes, route analyze and
    summarize requests across the two overlapping binding generations, bound
    every session creation with a timeout, chunk oversized payloads, relay
    download progress and turn every failure into a typed result.

Public API (re-exported):
    - Version: ``__version__``
    - Facade: :class:`AIOrchestrator`
    - Host: :class:`HostSurface`
    - Results: :class:`Success`, :class:`Failure`, :class:`CapabilityReport`
    - Errors: :class:`AIError`, :class:`FailureKind`, :func:`classify`
    - Configuration: :func:`get_settings`
"""

from .base.capabilities import CapabilityProber, HostSurface
from .base.errors import AIError, AITimeoutError, FailureKind, RecoveryAction, classify
from .base.models import (
    AvailabilityState,
    BindingGeneration,
    CapabilityFamily,
    CapabilityReport,
    Failure,
    InvocationResult,
    Success,
)
from .config import AISettings, get_settings
from .service.orchestrator import AIOrchestrator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AIOrchestrator",
    "HostSurface",
    "CapabilityProber",
    "AvailabilityState",
    "BindingGeneration",
    "CapabilityFamily",
    "CapabilityReport",
    "Success",
    "Failure",
    "InvocationResult",
    "AIError",
    "AITimeoutError",
    "FailureKind",
    "RecoveryAction",
    "classify",
    "AISettings",
    "get_settings",
]
