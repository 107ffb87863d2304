"""Normalization of heterogeneous detector and translator results.

Hosts have returned several shapes over time:

* detection: ``{"languages": [{"language", "confidence"}, ...]}`` or the
  legacy ``{"detectedLanguage", "confidence"}``; entries may be objects
  with attributes instead of mappings.
* translation: a bare string, or ``{"text" | "translatedText",
  "detectedSourceLanguage" | "sourceLanguage"}``.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple


def _get(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _first(obj: Any, *keys: str) -> Any:
    for key in keys:
        value = _get(obj, key)
        if value is not None:
            return value
    return None


def _confidence(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def normalize_detection(result: Any) -> Tuple[Optional[str], Optional[float]]:
    """Return ``(language, confidence)`` for a raw detection result.

    The language is lower-cased; either element is ``None`` when missing.
    """
    if not result:
        return None, None
    candidates = result if isinstance(result, list) else _get(result, "languages")
    if isinstance(candidates, (list, tuple)) and candidates:
        top = candidates[0]
        language = _first(top, "language", "detectedLanguage")
        confidence = _confidence(_get(top, "confidence"))
    else:
        language = _first(result, "detectedLanguage", "language")
        confidence = _confidence(_get(result, "confidence"))
    if not language:
        return None, confidence
    return str(language).lower(), confidence


def normalize_translation(result: Any) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(translated_text, detected_source_language)``."""
    if isinstance(result, str):
        return (result or None), None
    text = _first(result, "text", "translatedText")
    detected = _first(result, "detectedSourceLanguage", "sourceLanguage")
    return (str(text) if text else None), (str(detected) if detected else None)


__all__ = ["normalize_detection", "normalize_translation"]
