"""Suggested recovery actions attached to failures.

The presentation layer maps these onto buttons or hints (open the setup
guide, retry later, retry now, ...). Values are stable strings.
"""
from __future__ import annotations

from enum import Enum


class RecoveryAction(str, Enum):
    """What the user (or an automatic retry loop) should do next."""

    SETUP_REQUIRED = "setup_required"
    RETRY_LATER = "retry_later"
    RETRY = "retry"
    RETRY_SHORTER = "retry_shorter"
    ALLOW_DOWNLOAD = "allow_download"
    CHECK_INPUT = "check_input"


__all__ = ["RecoveryAction"]
