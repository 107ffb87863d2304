"""AISession Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AISession(Protocol):
    """Session created by a prompt or summarizer binding.

    Prompt sessions implement ``prompt``; summarizer instances implement
    ``summarize``. Either may return a coroutine.
    """

    def prompt(self, text: str) -> Any:  # pragma: no cover - structural
        ...

    def summarize(self, text: str) -> Any:  # pragma: no cover - structural
        ...
