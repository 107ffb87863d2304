"""MonitorTarget Protocol (single-class module).

The object the host hands to a ``monitor`` callback during creation; it
emits ``downloadprogress``, ``downloadcomplete`` and ``error`` events.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class MonitorTarget(Protocol):
    def add_event_listener(self, name: str, callback: Callable[[Any], None]) -> None:
        ...
