"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`lexflow_ai.base.models_parts` if needed, while `lexflow_ai.base.models`
remains the primary stable import path.
"""

from .availability_state import AvailabilityState
from .binding_generation import BindingGeneration
from .capability_family import CapabilityFamily
from .family_status import FamilyStatus
from .capability_report import CapabilityReport
from .success import Success
from .failure import Failure
from .invocation_result import InvocationResult
from .progress_event import ProgressEvent
from .download_terminal import DownloadTerminal

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
