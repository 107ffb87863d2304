"""Download progress relay and notification bus."""

from .bus import NotificationBus, get_notification_bus
from .relay import ProgressRelay, compute_percent

__all__ = ["NotificationBus", "get_notification_bus", "ProgressRelay", "compute_percent"]
