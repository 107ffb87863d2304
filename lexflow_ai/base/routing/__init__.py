"""Request routing across binding generations."""

from .router import RequestRouter

__all__ = ["RequestRouter"]
