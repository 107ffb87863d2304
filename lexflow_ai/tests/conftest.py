"""Pytest configuration for the orchestration test suite."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from lexflow_ai.base import timeouts
from lexflow_ai.base.progress import NotificationBus
from lexflow_ai.config import reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment-driven config from leaking between tests."""
    for name in [k for k in os.environ if k.startswith("LEXFLOW_AI_")]:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    monkeypatch.setattr(timeouts, "_CACHED", None)
    yield
    reset_settings_cache()


@pytest.fixture()
def bus() -> NotificationBus:
    """A private bus so tests never observe each other's notifications."""
    return NotificationBus()
