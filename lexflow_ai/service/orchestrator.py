"""Top-level AI orchestrator.

Wires the prober, router, progress relay and language services around one
injected :class:`HostSurface` and applies the ambient policies the components
themselves do not own: input size limits, the retry policy and the retry
counter. Every public coroutine returns an ``InvocationResult``; nothing
raises to the caller.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from ..base.capabilities import CapabilityProber, HostSurface
from ..base.constants import DEFAULT_SYSTEM_PROMPT
from ..base.errors import AIError, classify
from ..base.intent import detect_task
from ..base.language import LanguageServices
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event
from ..base.models import CapabilityFamily, CapabilityReport, Failure, InvocationResult
from ..base.dto import TaskKind
from ..base.progress import NotificationBus, ProgressRelay
from ..base.resilience import RetryConfig, run_with_retry
from ..base.routing import RequestRouter
from ..config import AISettings, get_settings
from ..utils.input_size_guard import enforce_max_input
from .setup_guide import setup_instructions as _setup_instructions

SELF_TEST_SYSTEM_PROMPT = "You are a helpful assistant."
SELF_TEST_PROMPT = "Say hello in one short sentence."
SELF_TEST_SUMMARY_TEXT = (
    "This is a long text that needs to be summarized to test the built-in summarizer. "
    "It contains several important pieces of information that should be condensed into "
    "a concise and useful summary."
)


class AIOrchestrator:
    """Facade over the orchestration components for one host.

    Parameters
    ----------
    host:
        Injected host capability surface.
    settings:
        Resolved settings; defaults to :func:`get_settings`.
    bus:
        Notification bus for download progress; defaults to the process-wide bus.
    retry:
        Retry policy; defaults to the one described by ``settings``.
    """

    def __init__(
        self,
        host: HostSurface,
        *,
        settings: Optional[AISettings] = None,
        bus: Optional[NotificationBus] = None,
        retry: Optional[RetryConfig] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.host = host
        self.relay = ProgressRelay(bus)
        self.prober = CapabilityProber(host, timeout_ms=self.settings.create_timeout_ms)
        self.router = RequestRouter(
            self.prober,
            relay=self.relay,
            chunk_limit=self.settings.chunk_limit,
            timeout_ms=self.settings.create_timeout_ms,
            max_concurrency=self.settings.chunk_concurrency,
            input_languages=self.settings.supported_input_langs,
        )
        self.language = LanguageServices(
            host,
            timeout_ms=self.settings.create_timeout_ms,
            max_translate_chars=self.settings.max_translate_chars,
        )
        self.retry = retry or RetryConfig(
            max_attempts=self.settings.retry_max_attempts,
            delay_base=self.settings.retry_delay_base,
        )
        self._retry_count = 0
        self._logger = get_logger("lexflow_ai.orchestrator")

    @property
    def retry_count(self) -> int:
        """Retries spent on the most recent call; reset to 0 on success."""
        return self._retry_count

    async def probe(self, refresh: bool = False) -> CapabilityReport:
        return await self.prober.probe(refresh=refresh)

    async def analyze(
        self,
        system_prompt: str,
        user_text: str,
        *,
        output_lang: Optional[str] = None,
        force_real: bool = False,
        **extra: Any,
    ) -> InvocationResult:
        lang = output_lang or self.settings.default_output_lang
        return await self._guarded(
            "analyze",
            user_text,
            lambda: self.router.analyze(
                system_prompt, user_text, output_lang=lang, force_real=force_real, **extra
            ),
        )

    async def summarize(
        self,
        text: str,
        *,
        output_lang: Optional[str] = None,
        force_real: bool = False,
        **extra: Any,
    ) -> InvocationResult:
        lang = output_lang or self.settings.default_output_lang
        return await self._guarded(
            "summarize",
            text,
            lambda: self.router.summarize(text, output_lang=lang, force_real=force_real, **extra),
        )

    async def run(
        self,
        prompt_text: str,
        user_text: str,
        *,
        preset: Optional[str] = None,
        force_real: bool = False,
    ) -> InvocationResult:
        """Pick summarize or analyze from ``prompt_text`` and ``preset``, then run it."""
        selection = detect_task(prompt_text, preset)
        log_event(
            self._logger,
            "orchestrator.intent",
            LogContext(operation="run"),
            task=selection.task.value,
            output_lang=selection.output_lang,
            matched=selection.matched,
        )
        if selection.task is TaskKind.SUMMARIZE:
            return await self.summarize(user_text, output_lang=selection.output_lang, force_real=force_real)
        return await self.analyze(
            prompt_text or DEFAULT_SYSTEM_PROMPT,
            user_text,
            output_lang=selection.output_lang,
            force_real=force_real,
        )

    async def detect_language(self, text: str, **options: Any) -> InvocationResult:
        return await self.language.detect_language(text, **options)

    async def translate_text(self, text: str, target_language: str, **options: Any) -> InvocationResult:
        return await self.language.translate_text(text, target_language, **options)

    async def self_test(self) -> Dict[str, Any]:
        """Probe, then run one analyze and one summarize on fixed texts.

        A test is skipped (``None``) when its family has no routable binding.
        """
        report = await self.probe()
        results: Dict[str, Any] = {"availability": report.to_dict(), "prompt_test": None, "summarizer_test": None}
        if report.status(CapabilityFamily.PROMPT).routable:
            res = await self.analyze(SELF_TEST_SYSTEM_PROMPT, SELF_TEST_PROMPT)
            results["prompt_test"] = _test_entry(res)
        if report.status(CapabilityFamily.SUMMARIZER).routable:
            res = await self.summarize(SELF_TEST_SUMMARY_TEXT)
            results["summarizer_test"] = _test_entry(res)
        log_event(
            self._logger,
            "orchestrator.self_test",
            LogContext(operation="self_test"),
            functional=report.functional,
            prompt_ok=(results["prompt_test"] or {}).get("success"),
            summarizer_ok=(results["summarizer_test"] or {}).get("success"),
        )
        return results

    @staticmethod
    def setup_instructions() -> Dict[str, Any]:
        return _setup_instructions()

    # ------------------------------------------------------------------
    async def _guarded(
        self,
        operation: str,
        payload: str,
        call: Callable[[], Awaitable[InvocationResult]],
    ) -> InvocationResult:
        if self.settings.max_input_chars > 0:
            try:
                enforce_max_input(payload, max_chars=self.settings.max_input_chars, enabled=True, operation=operation)
            except AIError as exc:
                return classify(exc, operation)

        self._retry_count = 0

        def _on_retry(number: int, failure: Failure) -> None:
            self._retry_count = number
            log_event(
                self._logger,
                "orchestrator.retry",
                LogContext(operation=operation),
                retry=number,
                kind=failure.kind.value,
            )

        result = await run_with_retry(call, self.retry, on_retry=_on_retry)
        if result.ok:
            self._retry_count = 0
        return result


def _test_entry(result: InvocationResult) -> Dict[str, Any]:
    if result.ok:
        return {"success": True, "result": result.text, "source": result.source_label}
    return {"success": False, "result": result.message, "error": result.kind.value}


__all__ = ["AIOrchestrator"]
