"""
Per-family entry of a :class:`CapabilityReport`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .availability_state import AvailabilityState
from .binding_generation import BindingGeneration
from .capability_family import CapabilityFamily


@dataclass(frozen=True)
class FamilyStatus:
    """What the prober learned about one capability family.

    Attributes:
        family: The family described.
        namespaced: Whether the newer namespaced binding exists.
        top_level: Whether the older top-level binding exists.
        functional: Smoke-test verdict; ``None`` when no smoke test applies
            to the family or no binding exists.
        namespaced_functional: Smoke-test verdict for the newer binding alone
            (``None`` when it was not tested).
        verified_generation: Generation whose smoke test succeeded, if any.
        top_level_availability: Availability reported by the older binding
            during probing, if it was queried.
        error: Message of the last smoke-test failure, if any.
    """

    family: CapabilityFamily
    namespaced: bool = False
    top_level: bool = False
    functional: Optional[bool] = None
    namespaced_functional: Optional[bool] = None
    verified_generation: Optional[BindingGeneration] = None
    top_level_availability: Optional[AvailabilityState] = None
    error: Optional[str] = None

    @property
    def exists(self) -> bool:
        return self.namespaced or self.top_level

    @property
    def routable(self) -> bool:
        """True when the router has any path worth trying for this family.

        A family is routable when a smoke test passed, or when the older
        binding exists and reported anything better than ``unavailable``
        (a model that is still downloading can be reached through a forced
        attempt).
        """
        if self.functional:
            return True
        if self.top_level and self.top_level_availability is not None:
            return self.top_level_availability is not AvailabilityState.UNAVAILABLE
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "family": self.family.value,
            "namespaced": self.namespaced,
            "top_level": self.top_level,
            "functional": self.functional,
            "namespaced_functional": self.namespaced_functional,
            "verified_generation": self.verified_generation.value if self.verified_generation else None,
            "top_level_availability": self.top_level_availability.value if self.top_level_availability else None,
            "error": self.error,
        }


__all__ = ["FamilyStatus"]
