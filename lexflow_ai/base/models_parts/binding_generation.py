"""Host binding generations.

Two overlapping generations of bindings exist for the same family: the newer
namespaced form (``ai.assistant``, ``ai.summarizer``) and the older top-level
form (``LanguageModel``, ``Summarizer``). Ordering is by preference: newer
first.
"""
from __future__ import annotations

from enum import Enum


class BindingGeneration(str, Enum):
    """Binding generation, ranked newest first by :attr:`preference`."""

    NAMESPACED = "namespaced"
    TOP_LEVEL = "top_level"

    @property
    def preference(self) -> int:
        return 0 if self is BindingGeneration.NAMESPACED else 1


__all__ = ["BindingGeneration"]
