"""
Progress notification published by the progress relay.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProgressEvent:
    """Download progress for one host binding.

    Attributes:
        source_label: Binding that is downloading (``"LanguageModel"``).
        percent: Rounded percentage 0-100, or ``None`` when unknown.
        loaded: Raw ``loaded`` value reported by the host.
        total: Raw ``total`` value reported by the host.
    """

    source_label: str
    percent: Optional[int] = None
    loaded: Any = None
    total: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProgressEvent"]
