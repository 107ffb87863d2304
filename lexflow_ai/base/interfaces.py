"""
Host-facing interfaces (Protocols) for the orchestration layer.

Re-exports the single-class modules under ``lexflow_ai.base.interfaces_parts``
so upstream code has one stable import path.
"""

from __future__ import annotations

from .interfaces_parts import (
    AISession,
    CapabilityBinding,
    DetectorSession,
    MonitorTarget,
    TranslatorSession,
)

__all__ = [
    "CapabilityBinding",
    "AISession",
    "DetectorSession",
    "TranslatorSession",
    "MonitorTarget",
]
