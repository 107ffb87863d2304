"""
Tri-state availability reported by the host before a session exists.

Hosts have spelled these values differently across releases (``readily`` /
``no`` on older builds, ``downloadable`` / ``downloading`` on newer ones).
:meth:`AvailabilityState.parse` folds every known spelling onto the three
canonical states so the router can compare them with a single ordering.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

_RANK = {"unavailable": 0, "after-download": 1, "available": 2}

_ALIASES = {
    "available": "available",
    "readily": "available",
    "after-download": "after-download",
    "downloadable": "after-download",
    "downloading": "after-download",
    "unavailable": "unavailable",
    "no": "unavailable",
}


class AvailabilityState(str, Enum):
    """Ordered availability: ``UNAVAILABLE < AFTER_DOWNLOAD < AVAILABLE``."""

    UNAVAILABLE = "unavailable"
    AFTER_DOWNLOAD = "after-download"
    AVAILABLE = "available"

    @property
    def rank(self) -> int:
        return _RANK[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AvailabilityState):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AvailabilityState):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AvailabilityState):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AvailabilityState):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Any) -> "AvailabilityState":
        """Normalize a raw host value; unknown or missing values are unavailable.

        Accepts an ``AvailabilityState``, a string, or a mapping carrying an
        ``available`` key (the legacy ``capabilities()`` shape).
        """
        if isinstance(value, AvailabilityState):
            return value
        if isinstance(value, dict):
            value = value.get("available")
        if not isinstance(value, str):
            return cls.UNAVAILABLE
        return cls(_ALIASES.get(value.strip().lower(), "unavailable"))


__all__ = ["AvailabilityState"]
