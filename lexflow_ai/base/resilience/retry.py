"""Retry policy for orchestration results.

Unlike exception-driven retry decorators, orchestration calls never raise;
they return ``Success`` or a classified ``Failure`` whose ``retryable`` flag
decides whether another attempt is made. Back-off is exponential
(``delay_base ** attempt``). The default policy makes a single attempt.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, Protocol

from ..models import Failure, InvocationResult


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        failure: Failure | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 1
    delay_base: float = 2.0  # exponential base (base ** attempt)
    attempt_logger: AttemptLogger | None = None

    def delays(self) -> Iterable[float]:
        for attempt in range(max(1, self.max_attempts) - 1):
            yield self.delay_base**attempt


DEFAULT_RETRY_CONFIG = RetryConfig()

Sleeper = Callable[[float], Awaitable[None]]


async def run_with_retry(
    call: Callable[[], Awaitable[InvocationResult]],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
    *,
    on_retry: Optional[Callable[[int, Failure], None]] = None,
    sleep: Sleeper = asyncio.sleep,
) -> InvocationResult:
    """Invoke ``call`` until it succeeds, fails non-retryably, or attempts run out.

    Parameters
    ----------
    call:
        Zero-argument coroutine function producing one result.
    config:
        Attempt budget and back-off base.
    on_retry:
        Invoked with ``(retry_number, failure)`` before each retry sleep.
    sleep:
        Awaitable sleep, injectable for tests.
    """
    result: InvocationResult
    for attempt, delay in enumerate(list(config.delays()) + [None]):  # final attempt has delay None
        result = await call()
        failure = None if result.ok else result
        if config.attempt_logger:
            config.attempt_logger(
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=delay if failure is not None else None,
                failure=failure,
            )
        if failure is None or not failure.retryable or delay is None:
            return result
        if on_retry is not None:
            on_retry(attempt + 1, failure)
        await sleep(delay)
    return result


__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG", "run_with_retry"]
