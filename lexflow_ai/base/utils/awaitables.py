"""Helpers for host callables that may be sync or async.

Host bindings are free to return plain values or awaitables; every call site
goes through :func:`resolve` so the rest of the layer can assume ``await``.
"""
from __future__ import annotations

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


def text_of(value: Any) -> str:
    """Coerce a host result to text; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
