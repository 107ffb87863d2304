"""Capability families the host may expose."""
from __future__ import annotations

from enum import Enum


class CapabilityFamily(str, Enum):
    """One entry per kind of on-device model API."""

    PROMPT = "prompt"
    SUMMARIZER = "summarizer"
    LANGUAGE_DETECTOR = "language_detector"
    TRANSLATOR = "translator"


__all__ = ["CapabilityFamily"]
