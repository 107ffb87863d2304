"""Interfaces parts package: one Protocol per module."""

from .capability_binding import CapabilityBinding
from .ai_session import AISession
from .language_session import DetectorSession, TranslatorSession
from .monitor_target import MonitorTarget

__all__ = [
    "CapabilityBinding",
    "AISession",
    "DetectorSession",
    "TranslatorSession",
    "MonitorTarget",
]
