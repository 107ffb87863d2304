"""Input size guard utilities.

Purpose
-------
Reject inputs that are too large for an operation before any host call is
made, so the caller gets an ``input_too_large`` failure instead of a host
error or a silently truncated answer.

This module reads environment variables only when functions are invoked.

Environment Variables
---------------------
- ``LEXFLOW_AI_MAX_INPUT_ENABLED``: falsy values ("0", "false", "no", "off")
    disable the guard. Default: enabled.
- ``LEXFLOW_AI_MAX_INPUT_CHARS``: Maximum allowed character length.
    Default: 0 (interpreted as no-op even when enabled).

Examples
--------
>>> enforce_max_input("hello")  # no-op when no limit is configured
>>> enforce_max_input("x" * 10, max_chars=5)
Traceback (most recent call last):
    ...
lexflow_ai.base.errors_parts.ai_error.AIError: Text is too long for this operation (10 > 5 characters).
"""

from __future__ import annotations

import os
from typing import Optional

from lexflow_ai.base.errors import AIError, FailureKind

_FALSY = {"0", "false", "no", "off"}


def is_guard_enabled(default: bool = True) -> bool:
    """Return whether the guard is active according to the environment."""
    raw = os.getenv("LEXFLOW_AI_MAX_INPUT_ENABLED")
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSY


def get_max_input_chars(default: int = 0) -> int:
    """Return the configured max input size; non-positive means unlimited."""
    raw = os.getenv("LEXFLOW_AI_MAX_INPUT_CHARS")
    if not raw:
        return max(0, default)
    try:
        return max(0, int(raw))
    except ValueError:
        return max(0, default)


def enforce_max_input(
    value: str,
    *,
    max_chars: Optional[int] = None,
    enabled: Optional[bool] = None,
    operation: Optional[str] = None,
) -> None:
    """Raise ``AIError(input_too_large)`` when ``value`` exceeds the limit.

    Parameters
    ----------
    value: str
        The input to validate. It is measured as given, not trimmed.
    max_chars: Optional[int]
        Explicit limit. ``None`` reads :func:`get_max_input_chars`.
    enabled: Optional[bool]
        Override for :func:`is_guard_enabled`.
    operation: Optional[str]
        Operation name recorded on the error.
    """
    eff_enabled = is_guard_enabled() if enabled is None else bool(enabled)
    if not eff_enabled:
        return
    eff_max = get_max_input_chars() if max_chars is None else int(max_chars)
    if eff_max <= 0:
        return
    length = len(value or "")
    if length > eff_max:
        raise AIError(
            kind=FailureKind.INPUT_TOO_LARGE,
            message=f"Text is too long for this operation ({length} > {eff_max} characters).",
            operation=operation,
        )


__all__ = ["is_guard_enabled", "get_max_input_chars", "enforce_max_input"]
