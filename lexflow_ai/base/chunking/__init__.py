"""Chunk/reduce synthesis for payloads above the session input limit."""

from .executor import ChunkReduceExecutor, reduce_instruction, split_payload, with_language

__all__ = ["ChunkReduceExecutor", "reduce_instruction", "split_payload", "with_language"]
