"""
CapabilityReport DTO produced by the capability prober.

The report is computed once per prober and never mutated afterwards; asking
for a fresh one is an explicit ``probe(refresh=True)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .capability_family import CapabilityFamily
from .family_status import FamilyStatus


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class CapabilityReport:
    """Which capabilities exist on the host and which were verified to work.

    Attributes:
        families: Status per :class:`CapabilityFamily`.
        functional: True iff at least one family passed its smoke test.
        host_version: Optional host build identifier (informational).
        checked_at: ISO-8601 UTC timestamp of the probe.
    """

    families: Mapping[CapabilityFamily, FamilyStatus]
    functional: bool = False
    host_version: Optional[str] = None
    checked_at: str = field(default_factory=_utc_now)

    @classmethod
    def unavailable(cls, host_version: Optional[str] = None) -> "CapabilityReport":
        """Report for a host exposing no capability at all."""
        return cls(
            families={f: FamilyStatus(family=f) for f in CapabilityFamily},
            functional=False,
            host_version=host_version,
        )

    def status(self, family: CapabilityFamily) -> FamilyStatus:
        return self.families.get(family) or FamilyStatus(family=family)

    @property
    def any_exists(self) -> bool:
        return any(s.exists for s in self.families.values())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the report."""
        return {
            "functional": self.functional,
            "host_version": self.host_version,
            "checked_at": self.checked_at,
            "families": {f.value: s.to_dict() for f, s in self.families.items()},
        }


__all__ = ["CapabilityReport"]
