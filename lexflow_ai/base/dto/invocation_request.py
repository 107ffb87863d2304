"""Validated request object for one orchestration call.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump()``.

Notes
-----
- ``output_language`` is appended verbatim to the system instruction; it is
  not validated against a language list because hosts accept more tags than
  they advertise.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_OUTPUT_LANG, DEFAULT_SYSTEM_PROMPT, LANGUAGE_SUFFIX_TEMPLATE


class TaskKind(str, Enum):
    """Which capability entry point serves the request."""

    SUMMARIZE = "summarize"
    PROMPT = "prompt"


class InvocationRequest(BaseModel):
    """One analyze or summarize call.

    Attributes
    ----------
    task_kind:
        ``summarize`` routes to the summarizer family, ``prompt`` to the
        general prompt family.
    system_instruction:
        Instruction for prompt sessions (ignored for summaries).
    user_payload:
        Text to analyze or summarize.
    output_language:
        Language tag the answer should be written in.
    force_real:
        Attempt creation even when the older binding reports a model that
        still needs downloading (requires active user interaction).
    extra_options:
        Extra creation options forwarded to the host verbatim; they take
        precedence over the built-in defaults.
    """

    model_config = ConfigDict(use_enum_values=False)

    task_kind: TaskKind
    system_instruction: str = DEFAULT_SYSTEM_PROMPT
    user_payload: str
    output_language: str = Field(default=DEFAULT_OUTPUT_LANG, min_length=1)
    force_real: bool = False
    extra_options: Dict[str, Any] = Field(default_factory=dict)

    @property
    def operation(self) -> str:
        return "summarize" if self.task_kind is TaskKind.SUMMARIZE else "analyze"

    def instruction_with_language(self) -> str:
        """System instruction with the output-language directive appended."""
        return f"{self.system_instruction}{LANGUAGE_SUFFIX_TEMPLATE.format(lang=self.output_language)}"


__all__ = ["TaskKind", "InvocationRequest"]
