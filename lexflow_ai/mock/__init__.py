"""Mock host package exposing deterministic fixtures for the CLI and tests."""

from .host import MockHost, load_fixture_catalog

__all__ = ["MockHost", "load_fixture_catalog"]
