"""Small shared helpers for the base layer."""

from .awaitables import resolve, text_of

__all__ = ["resolve", "text_of"]
