from __future__ import annotations

import math

import pytest

from lexflow_ai.base.constants import (
    TOPIC_DOWNLOAD_COMPLETE,
    TOPIC_DOWNLOAD_ERROR,
    TOPIC_DOWNLOAD_PROGRESS,
)
from lexflow_ai.base.models import DownloadTerminal, ProgressEvent
from lexflow_ai.base.progress import NotificationBus, ProgressRelay, compute_percent
from lexflow_ai.tests.fakes import FakeMonitorTarget, Recorder


def _attach(bus: NotificationBus, label: str = "LanguageModel"):
    progress, complete, error = Recorder(), Recorder(), Recorder()
    bus.subscribe(TOPIC_DOWNLOAD_PROGRESS, progress)
    bus.subscribe(TOPIC_DOWNLOAD_COMPLETE, complete)
    bus.subscribe(TOPIC_DOWNLOAD_ERROR, error)
    target = FakeMonitorTarget()
    ProgressRelay(bus).monitor_for(label)(target)
    return target, progress, complete, error


@pytest.mark.parametrize(
    "loaded,total,expected",
    [
        (50, 100, 50),
        (1, 3, 33),
        (2, 3, 67),
        (0.5, None, 50),
        (0.125, None, 13),
        (1, 0, 100),
        (None, 100, None),
        ("10", 100, None),
        (True, 100, None),
        (math.inf, None, None),
        (math.nan, 100, None),
    ],
)
def test_compute_percent(loaded, total, expected):
    assert compute_percent(loaded, total) == expected  # nosec B101


def test_duplicate_percents_are_suppressed(bus):
    target, progress, _complete, _error = _attach(bus)
    for loaded in (0, 25, 25, 60, 60, 100):
        target.fire("downloadprogress", {"loaded": loaded, "total": 100})
    assert [e.percent for e in progress.items] == [0, 25, 60, 100]  # nosec B101
    assert all(isinstance(e, ProgressEvent) for e in progress.items)  # nosec B101
    assert progress.items[0].source_label == "LanguageModel"  # nosec B101


def test_first_event_is_emitted_even_without_percent(bus):
    target, progress, _c, _e = _attach(bus)
    target.fire("downloadprogress", {})
    target.fire("downloadprogress", {})
    assert len(progress.items) == 1  # nosec B101
    assert progress.items[0].percent is None  # nosec B101


def test_attribute_style_events_are_read():
    class Evt:
        loaded = 0.42
        total = None

    bus = NotificationBus()
    target, progress, _c, _e = _attach(bus)
    target.fire("downloadprogress", Evt())
    assert progress.items[0].percent == 42  # nosec B101


def test_nothing_after_complete(bus):
    target, progress, complete, error = _attach(bus)
    target.fire("downloadprogress", {"loaded": 10, "total": 100})
    target.fire("downloadcomplete")
    target.fire("downloadcomplete")
    target.fire("downloadprogress", {"loaded": 90, "total": 100})
    target.fire("error", {"message": "late"})
    assert len(progress.items) == 1  # nosec B101
    assert complete.items == [DownloadTerminal(source_label="LanguageModel")]  # nosec B101
    assert error.items == []  # nosec B101


def test_error_is_terminal(bus):
    target, progress, complete, error = _attach(bus, "Summarizer")
    target.fire("error", {"error": {"message": "disk full"}})
    target.fire("downloadprogress", {"loaded": 1, "total": 2})
    target.fire("downloadcomplete")
    assert progress.items == [] and complete.items == []  # nosec B101
    assert error.items == [DownloadTerminal(source_label="Summarizer", error="disk full")]  # nosec B101


def test_registrations_are_independent(bus):
    progress = Recorder()
    bus.subscribe(TOPIC_DOWNLOAD_PROGRESS, progress)
    monitor = ProgressRelay(bus).monitor_for("Assistant")
    first, second = FakeMonitorTarget(), FakeMonitorTarget()
    monitor(first)
    monitor(second)
    first.fire("downloadprogress", {"loaded": 5, "total": 10})
    second.fire("downloadprogress", {"loaded": 5, "total": 10})
    first.fire("downloadcomplete")
    second.fire("downloadprogress", {"loaded": 10, "total": 10})
    assert [e.percent for e in progress.items] == [50, 50, 100]  # nosec B101


def test_bus_skips_failing_subscriber(bus):
    seen = Recorder()

    def broken(_payload):
        raise RuntimeError("boom")

    bus.subscribe("topic", broken)
    bus.subscribe("topic", seen)
    assert bus.publish("topic", 1) == 1  # nosec B101
    assert seen.items == [1]  # nosec B101


def test_bus_unsubscribe(bus):
    seen = Recorder()
    unsubscribe = bus.subscribe("topic", seen)
    assert bus.subscriber_count("topic") == 1  # nosec B101
    unsubscribe()
    unsubscribe()
    assert bus.subscriber_count("topic") == 0  # nosec B101
    assert bus.publish("topic", "x") == 0  # nosec B101
    assert seen.items == []  # nosec B101
