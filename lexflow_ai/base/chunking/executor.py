"""Chunk/reduce executor for oversized prompt payloads.

Used only on the older top-level prompt path, whose sessions accept a limited
amount of input. The payload is cut into contiguous slices, each slice is
answered by a fresh session created with the caller's instruction, and the
partial answers are merged by one more session created with a fixed
synthesis instruction.

Any failure (creation timeout, prompt error) aborts the whole run; partial
answers are never returned.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, List

from ..constants import (
    DEFAULT_CHUNK_LIMIT,
    LANGUAGE_SUFFIX_TEMPLATE,
    PARTIAL_SEPARATOR,
    REDUCE_INSTRUCTION_LINES,
)
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..utils.awaitables import resolve, text_of

SessionFactory = Callable[[str], Awaitable[Any]]


def split_payload(text: str, limit: int) -> List[str]:
    """Cut ``text`` into contiguous slices of at most ``limit`` characters.

    The slices concatenate back to ``text``; only the last may be shorter.
    """
    if limit <= 0:
        raise ValueError("chunk limit must be positive")
    return [text[i : i + limit] for i in range(0, len(text), limit)]


def with_language(instruction: str, output_lang: str) -> str:
    """Append the output-language directive to an instruction."""
    return f"{instruction}{LANGUAGE_SUFFIX_TEMPLATE.format(lang=output_lang)}"


def reduce_instruction(output_lang: str) -> str:
    """Instruction for the session that merges partial answers."""
    return "\n".join(REDUCE_INSTRUCTION_LINES) + LANGUAGE_SUFFIX_TEMPLATE.format(lang=output_lang)


class ChunkReduceExecutor:
    """Answer a long payload slice by slice, then synthesize one answer.

    Parameters
    ----------
    create_session:
        Coroutine function taking a system instruction and returning a new
        prompt session. The router supplies one that goes through
        ``bounded_invoke`` with the configured timeout.
    chunk_limit:
        Maximum slice length in characters.
    max_concurrency:
        Slices in flight at once. ``1`` (default) runs them strictly in
        order; higher values dispatch concurrently but still hand partials
        to the reduction in slice order.
    """

    def __init__(
        self,
        create_session: SessionFactory,
        *,
        chunk_limit: int = DEFAULT_CHUNK_LIMIT,
        max_concurrency: int = 1,
    ) -> None:
        if chunk_limit <= 0:
            raise ValueError("chunk_limit must be positive")
        self._create_session = create_session
        self.chunk_limit = chunk_limit
        self.max_concurrency = max(1, int(max_concurrency))
        self._logger = get_logger("lexflow_ai.chunking")

    def needs_chunking(self, user_payload: str) -> bool:
        return len(user_payload) > self.chunk_limit

    async def run(self, user_payload: str, system_instruction: str, output_lang: str) -> str:
        """Return the synthesized answer for ``user_payload``.

        ``system_instruction`` must already carry the language directive; it
        is used verbatim for every slice session.
        """
        slices = split_payload(user_payload, self.chunk_limit)
        log_event(
            self._logger,
            "chunk.start",
            LogContext(operation="analyze"),
            slices=len(slices),
            chunk_limit=self.chunk_limit,
            concurrency=self.max_concurrency,
        )
        if self.max_concurrency == 1:
            partials = [await self._answer(s, system_instruction) for s in slices]
        else:
            partials = await self._answer_concurrently(slices, system_instruction)

        reducer = await self._create_session(reduce_instruction(output_lang))
        result = text_of(await resolve(reducer.prompt(PARTIAL_SEPARATOR.join(partials))))
        log_event(self._logger, "chunk.reduced", LogContext(operation="analyze"), partials=len(partials))
        return result

    async def _answer(self, piece: str, system_instruction: str) -> str:
        session = await self._create_session(system_instruction)
        return text_of(await resolve(session.prompt(piece)))

    async def _answer_concurrently(self, slices: List[str], system_instruction: str) -> List[str]:
        gate = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(piece: str) -> str:
            async with gate:
                return await self._answer(piece, system_instruction)

        tasks = [asyncio.ensure_future(_bounded(s)) for s in slices]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for t in tasks:
                if not t.done():
                    t.cancel()
            raise


__all__ = [
    "ChunkReduceExecutor",
    "SessionFactory",
    "split_payload",
    "with_language",
    "reduce_instruction",
]
