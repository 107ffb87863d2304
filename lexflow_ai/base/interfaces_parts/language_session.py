"""Language detector / translator instance Protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DetectorSession(Protocol):
    """Instance returned by a language-detector binding."""

    def detect(self, text: str) -> Any:  # pragma: no cover - structural
        ...


@runtime_checkable
class TranslatorSession(Protocol):
    """Instance returned by a translator binding."""

    def translate(self, text: str) -> Any:  # pragma: no cover - structural
        ...
