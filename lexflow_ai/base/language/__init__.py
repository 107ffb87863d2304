"""Language detection and translation on top of host capabilities."""

from .normalize import normalize_detection, normalize_translation
from .services import LanguageServices

__all__ = ["LanguageServices", "normalize_detection", "normalize_translation"]
