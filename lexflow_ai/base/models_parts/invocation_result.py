"""Discriminated union returned by every public orchestration call."""
from __future__ import annotations

from typing import Union

from .failure import Failure
from .success import Success

InvocationResult = Union[Success, Failure]

__all__ = ["InvocationResult"]
