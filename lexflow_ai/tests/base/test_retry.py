from __future__ import annotations

import pytest

from lexflow_ai.base.errors import FailureKind, failure_for
from lexflow_ai.base.models import Success
from lexflow_ai.base.resilience import RetryConfig, run_with_retry


class _Script:
    """Return the queued results in order."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.results.pop(0)


class _Sleeps:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


def test_delays_are_exponential():
    assert list(RetryConfig(max_attempts=4, delay_base=2.0).delays()) == [1.0, 2.0, 4.0]  # nosec B101
    assert list(RetryConfig().delays()) == []  # nosec B101
    assert list(RetryConfig(max_attempts=0).delays()) == []  # nosec B101


@pytest.mark.asyncio
async def test_default_makes_single_attempt():
    script = _Script(failure_for(FailureKind.NETWORK_ERROR))
    result = await run_with_retry(script)
    assert script.calls == 1 and not result.ok  # nosec B101


@pytest.mark.asyncio
async def test_retries_retryable_failures_until_success():
    sleeps, retries = _Sleeps(), []
    script = _Script(
        failure_for(FailureKind.MODEL_LOADING),
        failure_for(FailureKind.RATE_LIMITED),
        Success(text="ok", source_label="chrome-ai-assistant"),
    )
    result = await run_with_retry(
        script,
        RetryConfig(max_attempts=3, delay_base=3.0),
        on_retry=lambda n, f: retries.append((n, f.kind)),
        sleep=sleeps,
    )
    assert result.ok  # nosec B101
    assert sleeps.delays == [1.0, 3.0]  # nosec B101
    assert retries == [(1, FailureKind.MODEL_LOADING), (2, FailureKind.RATE_LIMITED)]  # nosec B101


@pytest.mark.asyncio
async def test_non_retryable_failure_stops_immediately():
    sleeps = _Sleeps()
    script = _Script(failure_for(FailureKind.AI_NOT_AVAILABLE), Success(text="never", source_label="x"))
    result = await run_with_retry(script, RetryConfig(max_attempts=5), sleep=sleeps)
    assert result.kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101
    assert script.calls == 1 and sleeps.delays == []  # nosec B101


@pytest.mark.asyncio
async def test_attempts_exhausted_returns_last_failure():
    seen = []

    def attempt_logger(**kw):
        seen.append(kw)

    script = _Script(failure_for(FailureKind.TIMEOUT), failure_for(FailureKind.UNKNOWN))
    result = await run_with_retry(
        script, RetryConfig(max_attempts=2, attempt_logger=attempt_logger), sleep=_Sleeps()
    )
    assert result.kind is FailureKind.UNKNOWN  # nosec B101
    assert [s["attempt"] for s in seen] == [0, 1]  # nosec B101
    assert seen[0]["delay"] == 1.0 and seen[1]["delay"] is None  # nosec B101
