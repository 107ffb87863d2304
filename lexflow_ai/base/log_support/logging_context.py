"""Structured logging context object for orchestration events.

This module defines :class:`LogContext`, a dataclass used to carry common
fields for orchestration logging events (capability family, binding
generation, operation, source label and extra metadata). ``to_dict`` merges
the ``extra`` mapping and prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for orchestration logging events."""

    family: Optional[str] = None
    generation: Optional[str] = None
    operation: Optional[str] = None
    source_label: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
