"""Language detection and translation services.

Both operations share one flow:

1. Resolve the family's binding, newest generation first.
2. Validate the input (non-empty; translation is also size-capped).
3. Query availability once and cache it. ``unavailable`` fails with
   ``ai_not_available``; ``after-download`` fails with ``model_loading``
   unless the caller allowed the download.
4. Create the instance once per set of creation options (bounded by the
   creation timeout) and reuse it until ``force_new`` is passed or a call
   fails, which clears both caches.

Results are :class:`Success` values whose ``text`` is the detected language
code or the translation, with metadata in ``details``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from lexflow_ai.utils.input_size_guard import enforce_max_input

from ..capabilities.core import FamilyBinding, HostSurface
from ..constants import DEFAULT_MAX_TRANSLATE_CHARS, SOURCE_LANGUAGE_DETECTOR, SOURCE_TRANSLATOR
from ..errors import AIError, FailureKind, RecoveryAction, classify, failure_for
from ..interfaces import DetectorSession, TranslatorSession
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import AvailabilityState, CapabilityFamily, InvocationResult, Success
from ..timeouts import bounded_invoke
from ..utils.awaitables import resolve
from .normalize import normalize_detection, normalize_translation

_DISPLAY = {
    CapabilityFamily.LANGUAGE_DETECTOR: ("Language Detector API", "language detection"),
    CapabilityFamily.TRANSLATOR: ("Translator API", "translation"),
}


@dataclass
class _FamilyCache:
    availability: Optional[AvailabilityState] = None
    instance: Any = None
    options: Optional[Dict[str, Any]] = None

    def clear(self) -> None:
        self.availability = None
        self.instance = None
        self.options = None


class LanguageServices:
    """Detect the language of a text and translate it using host capabilities."""

    def __init__(
        self,
        host: HostSurface,
        *,
        timeout_ms: Optional[int] = None,
        max_translate_chars: int = DEFAULT_MAX_TRANSLATE_CHARS,
    ) -> None:
        self._host = host
        self._timeout_ms = timeout_ms
        self.max_translate_chars = max_translate_chars
        self._caches: Dict[CapabilityFamily, _FamilyCache] = {
            CapabilityFamily.LANGUAGE_DETECTOR: _FamilyCache(),
            CapabilityFamily.TRANSLATOR: _FamilyCache(),
        }
        self._logger = get_logger("lexflow_ai.language")

    def reset(self, family: Optional[CapabilityFamily] = None) -> None:
        """Drop cached instances and availability (one family or both)."""
        for fam, cache in self._caches.items():
            if family is None or fam is family:
                cache.clear()

    async def detect_language(
        self,
        text: str,
        *,
        allow_model_download: bool = False,
        force_new: bool = False,
        create_options: Optional[Mapping[str, Any]] = None,
    ) -> InvocationResult:
        """Detect the dominant language of ``text``.

        On success ``text`` holds the lower-cased language code and
        ``details`` carries ``confidence`` and ``availability``.
        """
        family = CapabilityFamily.LANGUAGE_DETECTOR
        operation = "detect_language"
        binding = self._binding(family)
        if binding is None:
            return self._not_exposed(family, operation)
        trimmed = (text or "").strip() if isinstance(text, str) else ""
        if not trimmed:
            return self._invalid_input(family, operation)

        try:
            state = await self._gate(binding, allow_model_download)
            detector: DetectorSession = await self._instance(binding, dict(create_options or {}), force_new)
            raw = await resolve(detector.detect(trimmed))
            language, confidence = normalize_detection(raw)
            if not language:
                raise AIError(
                    kind=FailureKind.UNKNOWN,
                    message="Could not identify the language of the content.",
                    operation=operation,
                )
        except Exception as exc:
            self._caches[family].clear()
            return classify(exc, operation)

        log_event(
            self._logger,
            "language.detected",
            LogContext(family=family.value, generation=binding.generation.value, operation=operation),
            language=language,
            confidence=confidence,
        )
        return Success(
            text=language,
            source_label=SOURCE_LANGUAGE_DETECTOR,
            details={"confidence": confidence, "availability": state.value},
        )

    async def translate_text(
        self,
        text: str,
        target_language: str,
        *,
        source_language: Optional[str] = None,
        allow_model_download: bool = False,
        force_new: bool = False,
        create_options: Optional[Mapping[str, Any]] = None,
    ) -> InvocationResult:
        """Translate ``text`` into ``target_language``.

        ``details`` carries ``from`` (detected or given source language),
        ``to`` and ``availability``.
        """
        family = CapabilityFamily.TRANSLATOR
        operation = "translate_text"
        binding = self._binding(family)
        if binding is None:
            return self._not_exposed(family, operation)
        if not target_language or not isinstance(target_language, str):
            return failure_for(
                FailureKind.UNKNOWN,
                message='Provide the target language (for example "pt").',
                operation=operation,
                retryable=False,
                action=RecoveryAction.CHECK_INPUT,
            )
        trimmed = (text or "").strip() if isinstance(text, str) else ""
        if not trimmed:
            return self._invalid_input(family, operation)
        try:
            enforce_max_input(trimmed, max_chars=self.max_translate_chars, enabled=True, operation=operation)
        except AIError as exc:
            return classify(exc, operation)

        options: Dict[str, Any] = {"targetLanguage": target_language}
        if source_language:
            options["sourceLanguage"] = source_language
        options.update(create_options or {})

        try:
            state = await self._gate(binding, allow_model_download)
            translator: TranslatorSession = await self._instance(binding, options, force_new)
            raw = await resolve(translator.translate(trimmed))
            translated, detected = normalize_translation(raw)
            if not translated:
                raise AIError(
                    kind=FailureKind.UNKNOWN,
                    message="Translation returned no usable result.",
                    operation=operation,
                )
        except Exception as exc:
            self._caches[family].clear()
            return classify(exc, operation)

        log_event(
            self._logger,
            "language.translated",
            LogContext(family=family.value, generation=binding.generation.value, operation=operation),
            target=target_language,
            chars_in=len(trimmed),
        )
        return Success(
            text=translated,
            source_label=SOURCE_TRANSLATOR,
            details={
                "from": detected or source_language,
                "to": target_language,
                "detected_language": detected,
                "availability": state.value,
            },
        )

    # ------------------------------------------------------------------
    def _binding(self, family: CapabilityFamily) -> Optional[FamilyBinding]:
        ranked = self._host.resolve(family)
        return ranked[0] if ranked else None

    async def _gate(self, binding: FamilyBinding, allow_model_download: bool) -> AvailabilityState:
        cache = self._caches[binding.family]
        if cache.availability is None:
            cache.availability = await binding.availability()
        state = cache.availability
        api_name, purpose = _DISPLAY[binding.family]
        if state is AvailabilityState.UNAVAILABLE:
            raise AIError(
                kind=FailureKind.AI_NOT_AVAILABLE,
                message=f"{api_name} not available. Check that the experimental flags are enabled.",
            )
        if state is AvailabilityState.AFTER_DOWNLOAD and not allow_model_download:
            raise AIError(
                kind=FailureKind.MODEL_LOADING,
                message=f"The {purpose} model must be downloaded. Allow the download to continue.",
                action=RecoveryAction.ALLOW_DOWNLOAD,
            )
        return state

    async def _instance(self, binding: FamilyBinding, options: Dict[str, Any], force_new: bool) -> Any:
        cache = self._caches[binding.family]
        if cache.instance is not None and not force_new and cache.options == options:
            return cache.instance
        cache.instance = await bounded_invoke(binding.create, options, self._timeout_ms, label=binding.family.value)
        cache.options = options
        return cache.instance

    def _not_exposed(self, family: CapabilityFamily, operation: str) -> InvocationResult:
        api_name, _ = _DISPLAY[family]
        return failure_for(
            FailureKind.AI_NOT_AVAILABLE,
            message=f"{api_name} not available in this host. Enable the required flags.",
            operation=operation,
        )

    def _invalid_input(self, family: CapabilityFamily, operation: str) -> InvocationResult:
        _, purpose = _DISPLAY[family]
        return failure_for(
            FailureKind.UNKNOWN,
            message=f"Provide non-empty text for {purpose}.",
            operation=operation,
            retryable=False,
            action=RecoveryAction.CHECK_INPUT,
        )


__all__ = ["LanguageServices"]
