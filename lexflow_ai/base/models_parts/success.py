"""
Success variant of the invocation result union.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Success:
    """A capability call produced text.

    Attributes:
        text: The model output (or detected language code for detection).
        source_label: Which generation/path served the request. Used for
            observability only (``chrome-ai-language-model-chunked`` etc.).
        timestamp: ISO-8601 UTC timestamp.
        details: Optional JSON-serializable extras (confidence, languages).
    """

    text: str
    source_label: str
    timestamp: str = field(default_factory=_utc_now)
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "result": self.text,
            "source": self.source_label,
            "timestamp": self.timestamp,
            **({"details": dict(self.details)} if self.details else {}),
        }


__all__ = ["Success"]
