"""Progress relay: host download monitors to bus notifications.

``ProgressRelay.monitor_for(label)`` returns a handler to pass as the
``monitor`` creation option. The host calls it with a target exposing
``add_event_listener``; the relay listens for ``downloadprogress``,
``downloadcomplete`` and ``error`` and republishes them as
:class:`ProgressEvent` / :class:`DownloadTerminal` notifications.

Per registration:
- the first progress event is always published;
- a percent equal to the previous one is dropped;
- ``complete`` and ``error`` are terminal, published at most once, and
  nothing at all is published after either.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional

from ..constants import TOPIC_DOWNLOAD_COMPLETE, TOPIC_DOWNLOAD_ERROR, TOPIC_DOWNLOAD_PROGRESS
from ..interfaces import MonitorTarget
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import DownloadTerminal, ProgressEvent
from .bus import NotificationBus, get_notification_bus

_UNSET = object()


def _field(event: Any, name: str) -> Any:
    if isinstance(event, dict):
        return event.get(name)
    return getattr(event, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_percent(loaded: Any, total: Any) -> Optional[int]:
    """Percent for a progress event, or ``None`` when it cannot be computed.

    ``loaded / total * 100`` when both are numbers and ``total > 0``;
    ``loaded * 100`` when only ``loaded`` is a number (hosts that report a
    0..1 fraction); otherwise ``None``.
    """
    try:
        if _is_number(loaded) and _is_number(total) and total > 0:
            value = loaded / total * 100
        elif _is_number(loaded):
            value = loaded * 100
        else:
            return None
        if not math.isfinite(value):
            return None
        return _half_up(value)
    except (ArithmeticError, TypeError, ValueError):
        return None


def _error_text(event: Any) -> str:
    err = _field(event, "error")
    if err is None:
        err = _field(event, "message")
    if err is None:
        err = event
    msg = _field(err, "message") if not isinstance(err, str) else err
    return str(msg if msg is not None else err)


class _Registration:
    """State for one monitor attachment."""

    def __init__(self, relay: "ProgressRelay", source_label: str) -> None:
        self.relay = relay
        self.source_label = source_label
        self.last_percent: Any = _UNSET
        self.finished = False

    def on_progress(self, event: Any) -> None:
        if self.finished:
            return
        loaded, total = _field(event, "loaded"), _field(event, "total")
        percent = compute_percent(loaded, total)
        if self.last_percent is not _UNSET and percent == self.last_percent:
            return
        self.last_percent = percent
        self.relay._emit(
            TOPIC_DOWNLOAD_PROGRESS,
            ProgressEvent(source_label=self.source_label, percent=percent, loaded=loaded, total=total),
        )

    def on_complete(self, event: Any = None) -> None:
        if self.finished:
            return
        self.finished = True
        self.relay._emit(TOPIC_DOWNLOAD_COMPLETE, DownloadTerminal(source_label=self.source_label))

    def on_error(self, event: Any = None) -> None:
        if self.finished:
            return
        self.finished = True
        self.relay._emit(
            TOPIC_DOWNLOAD_ERROR,
            DownloadTerminal(source_label=self.source_label, error=_error_text(event)),
        )


class ProgressRelay:
    """Translate host monitor events into bus notifications."""

    def __init__(self, bus: Optional[NotificationBus] = None) -> None:
        self._bus = bus or get_notification_bus()
        self._logger = get_logger("lexflow_ai.progress")

    @property
    def bus(self) -> NotificationBus:
        return self._bus

    def monitor_for(self, source_label: str) -> Callable[[MonitorTarget], None]:
        """Return a ``monitor`` handler tagged with ``source_label``.

        Each call to the returned handler is an independent registration
        with its own duplicate and terminal state.
        """

        def _monitor(target: MonitorTarget) -> None:
            reg = _Registration(self, source_label)
            target.add_event_listener("downloadprogress", reg.on_progress)
            target.add_event_listener("downloadcomplete", reg.on_complete)
            target.add_event_listener("error", reg.on_error)

        return _monitor

    def _emit(self, topic: str, payload: Any) -> None:
        log_event(
            self._logger,
            topic,
            LogContext(source_label=getattr(payload, "source_label", None)),
            level=logging.DEBUG,
            **{k: v for k, v in payload.to_dict().items() if k != "source_label"},
        )
        self._bus.publish(topic, payload)


__all__ = ["ProgressRelay", "compute_percent"]
