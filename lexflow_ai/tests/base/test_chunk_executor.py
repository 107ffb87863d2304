from __future__ import annotations

import pytest

from lexflow_ai.base.chunking import ChunkReduceExecutor, reduce_instruction, split_payload, with_language


class _Sessions:
    """Session factory recording the instruction and prompt of every session."""

    def __init__(self, fail_on=None):
        self.created = []
        self.fail_on = fail_on

    async def __call__(self, instruction):
        factory = self

        class _Session:
            async def prompt(self, text):
                factory.created.append((instruction, text))
                if factory.fail_on is not None and factory.fail_on in text:
                    raise RuntimeError("network down")
                return text[:2]

        return _Session()


def test_split_payload_is_contiguous():
    text = "abcdefghij"
    pieces = split_payload(text, 3)
    assert pieces == ["abc", "def", "ghi", "j"]  # nosec B101
    assert "".join(pieces) == text  # nosec B101
    assert split_payload("", 3) == []  # nosec B101


def test_split_payload_rejects_bad_limit():
    with pytest.raises(ValueError):
        split_payload("abc", 0)


def test_instructions():
    assert with_language("Do it.", "pt") == "Do it.\nRespond in the following language: pt."  # nosec B101
    assert reduce_instruction("en") == (  # nosec B101
        "You are a legal assistant. Synthesize the following partial answers into one coherent answer.\n"
        "Preserve citations in the format (LAW, ARTICLE).\n"
        "Respond in the following language: en."
    )


def test_needs_chunking_boundary():
    executor = ChunkReduceExecutor(_Sessions(), chunk_limit=10)
    assert executor.needs_chunking("x" * 10) is False  # nosec B101
    assert executor.needs_chunking("x" * 11) is True  # nosec B101
    with pytest.raises(ValueError):
        ChunkReduceExecutor(_Sessions(), chunk_limit=0)


@pytest.mark.asyncio
async def test_run_prompts_slices_in_order_then_reduces():
    sessions = _Sessions()
    executor = ChunkReduceExecutor(sessions, chunk_limit=4)
    result = await executor.run("AAAABBBBCC", "inst", "en")
    assert sessions.created[:3] == [("inst", "AAAA"), ("inst", "BBBB"), ("inst", "CC")]  # nosec B101
    assert sessions.created[3] == (reduce_instruction("en"), "AA\n\nBB\n\nCC")  # nosec B101
    assert result == "AA"  # nosec B101


@pytest.mark.asyncio
async def test_failure_aborts_before_reduction():
    sessions = _Sessions(fail_on="BBBB")
    executor = ChunkReduceExecutor(sessions, chunk_limit=4)
    with pytest.raises(RuntimeError):
        await executor.run("AAAABBBBCCCC", "inst", "en")
    assert [t for _, t in sessions.created] == ["AAAA", "BBBB"]  # nosec B101


@pytest.mark.asyncio
async def test_concurrent_failure_aborts_run():
    sessions = _Sessions(fail_on="CC")
    executor = ChunkReduceExecutor(sessions, chunk_limit=2, max_concurrency=4)
    with pytest.raises(RuntimeError):
        await executor.run("AABBCCDD", "inst", "en")
    assert all(inst == "inst" for inst, _ in sessions.created)  # nosec B101
