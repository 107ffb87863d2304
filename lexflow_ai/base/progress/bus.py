"""In-process notification bus for download progress.

Publishing is synchronous and fire-and-forget: host event listeners call the
relay from inside their own dispatch, so subscribers run inline and a failing
subscriber is logged and skipped rather than bubbling into the host.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Optional

from ..log_support import LogContext
from ..logging import get_logger, log_event

Subscriber = Callable[[Any], None]


class NotificationBus:
    """Topic-keyed subscriber registry."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = {}
        self._lock = threading.Lock()
        self._logger = get_logger("lexflow_ai.progress.bus")

    def subscribe(self, topic: str, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for ``topic``; returns an unsubscribe function."""
        with self._lock:
            self._subscribers.setdefault(topic, []).append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                callbacks = self._subscribers.get(topic, [])
                if callback in callbacks:
                    callbacks.remove(callback)
                if not callbacks:
                    self._subscribers.pop(topic, None)

        return _unsubscribe

    def publish(self, topic: str, payload: Any) -> int:
        """Deliver ``payload`` to every subscriber of ``topic``.

        Returns the number of subscribers that accepted the payload.
        """
        with self._lock:
            callbacks = list(self._subscribers.get(topic, []))
        delivered = 0
        for callback in callbacks:
            try:
                callback(payload)
                delivered += 1
            except Exception as exc:
                log_event(
                    self._logger,
                    "bus.subscriber_failed",
                    LogContext(operation="publish"),
                    topic=topic,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
        return delivered

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, []))


_DEFAULT_BUS: Optional[NotificationBus] = None


def get_notification_bus() -> NotificationBus:
    """Return the process-wide default bus."""
    global _DEFAULT_BUS  # noqa: PLW0603 - process singleton
    if _DEFAULT_BUS is None:
        _DEFAULT_BUS = NotificationBus()
    return _DEFAULT_BUS


__all__ = ["NotificationBus", "Subscriber", "get_notification_bus"]
