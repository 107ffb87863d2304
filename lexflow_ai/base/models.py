"""
Domain models public surface.

This module re-exports the one-class-per-file implementations under
``lexflow_ai.base.models_parts`` to keep imports stable for upstream code.
"""

from .models_parts.availability_state import AvailabilityState
from .models_parts.binding_generation import BindingGeneration
from .models_parts.capability_family import CapabilityFamily
from .models_parts.family_status import FamilyStatus
from .models_parts.capability_report import CapabilityReport
from .models_parts.success import Success
from .models_parts.failure import Failure
from .models_parts.invocation_result import InvocationResult
from .models_parts.progress_event import ProgressEvent
from .models_parts.download_terminal import DownloadTerminal

__all__ = [
    "AvailabilityState",
    "BindingGeneration",
    "CapabilityFamily",
    "FamilyStatus",
    "CapabilityReport",
    "Success",
    "Failure",
    "InvocationResult",
    "ProgressEvent",
    "DownloadTerminal",
]
