"""Timeout utilities for host capability creation.

This module centralizes the creation timeout used by the orchestration layer
and exposes :func:`bounded_invoke`, the single entry point every session or
instance creation goes through.

Key Components
--------------
TimeoutConfig
    Frozen dataclass holding the normalized creation timeout (milliseconds).

get_timeout_config()
    Returns a process-cached configuration. ``LEXFLOW_AI_CREATE_TIMEOUT_MS``
    overrides the default; the cache refreshes when that variable changes so
    tests can adjust it at runtime.

bounded_invoke(factory, options, timeout_ms)
    Races one host creation call against a deadline. The host call is
    shielded rather than cancelled: the host offers no cancellation, so a
    call that loses the race keeps running and its late outcome is dropped.

Failure Modes
-------------
``AITimeoutError`` (kind ``timeout``) when the deadline elapses first. Any
exception raised by the host call before the deadline propagates unchanged.
"""
from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional

from .constants import DEFAULT_CREATE_TIMEOUT_MS
from .errors import AITimeoutError
from .log_support import LogContext
from .logging import get_logger, log_event
from .utils.awaitables import resolve

CREATE_TIMEOUT_ENV = "LEXFLOW_AI_CREATE_TIMEOUT_MS"

_logger = get_logger("lexflow_ai.timeouts")


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values.

    Attributes:
        create_timeout_ms: Deadline for a single session/instance creation
            call, in milliseconds. Applied per call, never cumulatively.
    """

    create_timeout_ms: int = DEFAULT_CREATE_TIMEOUT_MS

    @property
    def create_timeout_seconds(self) -> float:
        return self.create_timeout_ms / 1000.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = int(float(raw))
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    cur_guard = os.getenv(CREATE_TIMEOUT_ENV, "")
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        create_timeout_ms=_parse_env_int(CREATE_TIMEOUT_ENV, DEFAULT_CREATE_TIMEOUT_MS)
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def _discard_late_outcome(task: "asyncio.Future[Any]") -> None:
    # Retrieve the exception so the loop does not report it as never retrieved.
    if not task.cancelled():
        task.exception()


async def bounded_invoke(
    factory: Callable[..., Awaitable[Any] | Any],
    options: Optional[Mapping[str, Any]] = None,
    timeout_ms: Optional[int] = None,
    *,
    label: Optional[str] = None,
) -> Any:
    """Invoke ``factory`` with a deadline.

    Parameters
    ----------
    factory:
        Host creation callable. Called as ``factory(options)`` or, when
        ``options`` is ``None``, as ``factory()``. May return an awaitable
        or a plain value.
    options:
        Creation options forwarded verbatim (e.g. ``systemPrompt``,
        ``monitor``).
    timeout_ms:
        Deadline in milliseconds; defaults to
        ``get_timeout_config().create_timeout_ms``.
    label:
        Optional name used in log events.

    Returns
    -------
    Any
        Whatever the factory produced, if it settles before the deadline.

    Raises
    ------
    AITimeoutError
        When the deadline elapses first.
    """
    effective_ms = timeout_ms if timeout_ms is not None else get_timeout_config().create_timeout_ms
    call = factory() if options is None else factory(options)
    task = asyncio.ensure_future(resolve(call))
    try:
        return await asyncio.wait_for(asyncio.shield(task), timeout=effective_ms / 1000.0)
    except asyncio.TimeoutError as exc:
        log_event(
            _logger,
            "invoke.timeout",
            LogContext(operation=label),
            timeout_ms=effective_ms,
        )
        raise AITimeoutError(timeout_ms=effective_ms) from exc
    finally:
        # Timed out or cancelled: the host call keeps running unobserved.
        if not task.done():
            task.add_done_callback(_discard_late_outcome)


__all__ = ["TimeoutConfig", "get_timeout_config", "bounded_invoke", "CREATE_TIMEOUT_ENV"]
