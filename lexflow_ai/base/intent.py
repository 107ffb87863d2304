"""Keyword-driven choice between the summarizer and the prompt family.

Used by callers that only have a free-text request and an optional preset
name (``resumo``, ``analise``, ``comparacao``, ``clausulas``). Summaries win
over analysis; anything unrecognized goes to the prompt family, which can
handle every task.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_OUTPUT_LANG
from .dto.invocation_request import TaskKind

_SUMMARY_PRESETS = frozenset({"resumo", "summary"})
_SUMMARY_KEYWORDS = (
    "resumo",
    "resumir",
    "síntese",
    "sintese",
    "pontos-chave",
    "pontos chave",
    "sintetizar",
    "summary",
    "summarize",
    "summarise",
    "key points",
)

_ANALYSIS_PRESETS = frozenset({"analise", "comparacao", "clausulas"})
_ANALYSIS_KEYWORDS = (
    "análise",
    "analise",
    "compare",
    "comparação",
    "comparacao",
    "cláusulas",
    "clausulas",
    "contrato",
    "interpretação",
    "interpretacao",
)

# Checked in order; first hit decides the output language.
_LANGUAGE_KEYWORDS = (
    ("pt", ("português", "portugues", "pt-br")),
    ("es", ("espanhol", "español")),
)


@dataclass(frozen=True)
class TaskSelection:
    """Chosen task and language; ``matched`` names the preset or keyword that decided."""

    task: TaskKind
    output_lang: str = DEFAULT_OUTPUT_LANG
    force_real: bool = False
    matched: Optional[str] = None


def detect_output_language(text: str, default: str = DEFAULT_OUTPUT_LANG) -> str:
    lowered = (text or "").lower()
    for lang, keywords in _LANGUAGE_KEYWORDS:
        if any(k in lowered for k in keywords):
            return lang
    return default


def _first_hit(text: str, preset: Optional[str], presets: frozenset, keywords: tuple) -> Optional[str]:
    if preset in presets:
        return preset
    return next((k for k in keywords if k in text), None)


def detect_task(prompt_text: str, preset: Optional[str] = None) -> TaskSelection:
    """Pick the task kind and output language for a free-text request."""
    lowered = (prompt_text or "").lower()
    lang = detect_output_language(lowered)
    hit = _first_hit(lowered, preset, _SUMMARY_PRESETS, _SUMMARY_KEYWORDS)
    if hit is not None:
        return TaskSelection(task=TaskKind.SUMMARIZE, output_lang=lang, matched=hit)
    hit = _first_hit(lowered, preset, _ANALYSIS_PRESETS, _ANALYSIS_KEYWORDS)
    return TaskSelection(task=TaskKind.PROMPT, output_lang=lang, matched=hit)


__all__ = ["TaskSelection", "detect_task", "detect_output_language"]
