"""CapabilityBinding Protocol (single-class module).

One host entry point for a capability family under one API generation
(``ai.assistant``, ``LanguageModel``, ``Summarizer``...).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class CapabilityBinding(Protocol):
    """Host binding able to report availability and create sessions.

    Both methods may be coroutines or plain callables; the orchestration
    layer awaits whatever they return. Bindings of the newer generation are
    not required to implement ``availability`` meaningfully.
    """

    def availability(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Return a raw availability value (string or ``{"available": ...}``)."""
        ...

    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Create a session or instance; may download a model first."""
        ...
