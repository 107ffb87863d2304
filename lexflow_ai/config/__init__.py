"""Configuration layer for the orchestration package.

Single call site: ``get_settings(overrides=None) -> AISettings``.
"""

from .defaults import DEFAULTS
from .settings import AISettings, CONFIG_FILE_ENV, get_settings, reset_settings_cache

__all__ = ["DEFAULTS", "AISettings", "CONFIG_FILE_ENV", "get_settings", "reset_settings_cache"]
