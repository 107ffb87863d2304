"""Host surface and generation-tagged bindings.

The host is injected as a :class:`HostSurface`: a plain container mapping
each :class:`CapabilityFamily` to the binding exposed under each API
generation. Nothing here inspects globals; tests and the mock host build a
surface explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..interfaces import CapabilityBinding
from ..models import AvailabilityState, BindingGeneration, CapabilityFamily
from ..utils.awaitables import resolve


def _no_activation() -> bool:
    return False


@dataclass(frozen=True)
class FamilyBinding:
    """A binding tagged with the family and generation it serves."""

    family: CapabilityFamily
    generation: BindingGeneration
    handle: CapabilityBinding

    @property
    def is_newer(self) -> bool:
        return self.generation is BindingGeneration.NAMESPACED

    async def availability(self, options: Optional[Mapping[str, Any]] = None) -> AvailabilityState:
        """Query and normalize availability.

        Prefers ``availability(options)``. Older bindings that only expose
        ``capabilities()`` are read through its ``{"available": ...}``
        payload. A binding with neither method is treated as available once
        it exists; newer namespaced bindings commonly omit both.
        """
        query = getattr(self.handle, "availability", None)
        if query is not None:
            raw = await resolve(query() if options is None else query(options))
            return AvailabilityState.parse(raw)
        legacy = getattr(self.handle, "capabilities", None)
        if legacy is not None:
            return AvailabilityState.parse(await resolve(legacy()))
        return AvailabilityState.AVAILABLE

    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Start a creation call; pair with ``bounded_invoke`` for a deadline."""
        return self.handle.create() if options is None else self.handle.create(options)


@dataclass
class HostSurface:
    """Capabilities exposed by the host runtime.

    Attributes:
        namespaced: Newer-generation bindings by family.
        top_level: Older-generation bindings by family.
        user_activation: Predicate reporting whether a user gesture is
            currently active (required for forced model downloads).
        version: Optional host build identifier.
    """

    namespaced: Dict[CapabilityFamily, CapabilityBinding] = field(default_factory=dict)
    top_level: Dict[CapabilityFamily, CapabilityBinding] = field(default_factory=dict)
    user_activation: Callable[[], bool] = _no_activation
    version: Optional[str] = None

    def binding(self, family: CapabilityFamily, generation: BindingGeneration) -> Optional[FamilyBinding]:
        table = self.namespaced if generation is BindingGeneration.NAMESPACED else self.top_level
        handle = table.get(family)
        if handle is None:
            return None
        return FamilyBinding(family=family, generation=generation, handle=handle)

    def resolve(self, family: CapabilityFamily) -> List[FamilyBinding]:
        """Return the bindings for ``family`` ranked newest-first."""
        found = (self.binding(family, g) for g in sorted(BindingGeneration, key=lambda g: g.preference))
        return [b for b in found if b is not None]

    def exposes(self, family: CapabilityFamily, generation: BindingGeneration) -> bool:
        return self.binding(family, generation) is not None

    def has_user_activation(self) -> bool:
        """Evaluate the activation predicate; a failing predicate means no."""
        try:
            return bool(self.user_activation())
        except Exception:
            return False


__all__ = ["FamilyBinding", "HostSurface"]
