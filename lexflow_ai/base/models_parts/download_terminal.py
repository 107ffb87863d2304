"""
Terminal download notification published by the progress relay.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DownloadTerminal:
    """Download complete (``error is None``) or failed, for one binding.

    Attributes:
        source_label: Binding the notification refers to.
        error: Error text for a failed download.
    """

    source_label: str
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["DownloadTerminal"]
