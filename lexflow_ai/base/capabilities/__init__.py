"""Host capability surface and prober."""

from .core import FamilyBinding, HostSurface
from .prober import CapabilityProber, release_session

__all__ = ["FamilyBinding", "HostSurface", "CapabilityProber", "release_session"]
