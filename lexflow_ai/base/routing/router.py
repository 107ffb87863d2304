"""Request router: pick a binding generation and serve one request.

State flow for every request::

    ProbeAvailability -> SelectGeneration -> {Summarize | Prompt}
        -> (ChunkIfNeeded) -> Done | Failed

- The newer namespaced binding is preferred whenever it is exposed and its
  smoke test did not fail; otherwise the older top-level binding is used.
- Only the older binding is gated on availability. Below ``available`` the
  request fails unless ``force_real`` is set and the host reports active user
  interaction, in which case creation is attempted anyway.
- Oversized prompt payloads on the older path go through
  :class:`ChunkReduceExecutor`.

Every session creation is bounded by :func:`bounded_invoke`. Public methods
never raise: failures are returned as classified :class:`Failure` values.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from ..capabilities.core import FamilyBinding
from ..capabilities.prober import CapabilityProber
from ..chunking.executor import ChunkReduceExecutor
from ..constants import (
    DEFAULT_CHUNK_LIMIT,
    DEFAULT_OUTPUT_LANG,
    DEFAULT_SYSTEM_PROMPT,
    MONITOR_ASSISTANT,
    MONITOR_LANGUAGE_MODEL,
    MONITOR_SUMMARIZER,
    SOURCE_ASSISTANT,
    SOURCE_LANGUAGE_MODEL,
    SOURCE_LANGUAGE_MODEL_CHUNKED,
    SOURCE_LANGUAGE_MODEL_FORCED,
    SOURCE_SUMMARIZER,
    SOURCE_SUMMARIZER_FORCED,
    SOURCE_SUMMARIZER_OLD,
    SUMMARIZER_DEFAULTS,
    SUPPORTED_INPUT_LANGS,
)
from ..dto.invocation_request import InvocationRequest, TaskKind
from ..errors import AIError, FailureKind, classify
from ..interfaces import AISession
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import (
    AvailabilityState,
    BindingGeneration,
    CapabilityFamily,
    FamilyStatus,
    InvocationResult,
    Success,
)
from ..progress.relay import ProgressRelay
from ..timeouts import bounded_invoke
from ..utils.awaitables import resolve, text_of

_FAMILY_API_NAME = {
    CapabilityFamily.PROMPT: "Prompt API",
    CapabilityFamily.SUMMARIZER: "Summarizer API",
}
_TOP_LEVEL_NAME = {
    CapabilityFamily.PROMPT: "LanguageModel",
    CapabilityFamily.SUMMARIZER: "Summarizer",
}


def _not_exposed(family: CapabilityFamily) -> AIError:
    return AIError(
        kind=FailureKind.AI_NOT_AVAILABLE,
        message=f"{_FAMILY_API_NAME[family]} not available. Check the browser settings.",
    )


class RequestRouter:
    """Serve analyze/summarize requests against a probed host.

    Parameters
    ----------
    prober:
        Shared prober; its memoized report drives generation selection.
    relay:
        Progress relay whose monitors are attached to every creation.
    chunk_limit:
        Payload length above which the older prompt path chunks.
    timeout_ms:
        Creation deadline; ``None`` uses ``get_timeout_config()``.
    max_concurrency:
        Slice concurrency for the chunk executor.
    input_languages:
        Languages advertised in ``expectedInputs`` for prompt sessions.
    """

    def __init__(
        self,
        prober: CapabilityProber,
        *,
        relay: Optional[ProgressRelay] = None,
        chunk_limit: int = DEFAULT_CHUNK_LIMIT,
        timeout_ms: Optional[int] = None,
        max_concurrency: int = 1,
        input_languages: Sequence[str] = SUPPORTED_INPUT_LANGS,
    ) -> None:
        self._prober = prober
        self._relay = relay or ProgressRelay()
        self.chunk_limit = chunk_limit
        self.timeout_ms = timeout_ms
        self.max_concurrency = max_concurrency
        self.input_languages = list(input_languages)
        self._logger = get_logger("lexflow_ai.router")

    async def analyze(
        self,
        system_prompt: str,
        user_text: str,
        *,
        output_lang: str = DEFAULT_OUTPUT_LANG,
        force_real: bool = False,
        **extra: Any,
    ) -> InvocationResult:
        """Answer ``user_text`` under ``system_prompt`` with the prompt family."""
        try:
            request = InvocationRequest(
                task_kind=TaskKind.PROMPT,
                system_instruction=system_prompt or DEFAULT_SYSTEM_PROMPT,
                user_payload=user_text,
                output_language=output_lang,
                force_real=force_real,
                extra_options=extra,
            )
        except Exception as exc:
            return classify(exc, "analyze")
        return await self.execute(request)

    async def summarize(
        self,
        text: str,
        *,
        output_lang: str = DEFAULT_OUTPUT_LANG,
        force_real: bool = False,
        **extra: Any,
    ) -> InvocationResult:
        """Summarize ``text`` with the summarizer family."""
        try:
            request = InvocationRequest(
                task_kind=TaskKind.SUMMARIZE,
                user_payload=text,
                output_language=output_lang,
                force_real=force_real,
                extra_options=extra,
            )
        except Exception as exc:
            return classify(exc, "summarize")
        return await self.execute(request)

    async def execute(self, request: InvocationRequest) -> InvocationResult:
        """Route ``request``; returns ``Success`` or a classified ``Failure``."""
        operation = request.operation
        try:
            text, label = await self._dispatch(request)
        except Exception as exc:
            return classify(exc, operation)
        log_event(
            self._logger,
            "route.success",
            LogContext(operation=operation, source_label=label),
            chars_in=len(request.user_payload),
            chars_out=len(text),
        )
        return Success(text=text, source_label=label)

    # ------------------------------------------------------------------
    # selection
    # ------------------------------------------------------------------
    async def _dispatch(self, request: InvocationRequest) -> Tuple[str, str]:
        family = (
            CapabilityFamily.SUMMARIZER if request.task_kind is TaskKind.SUMMARIZE else CapabilityFamily.PROMPT
        )
        report = await self._prober.probe()
        status = report.status(family)
        if not status.routable:
            raise _not_exposed(family)
        binding = self.select_binding(status)
        if binding is None:
            raise _not_exposed(family)
        log_event(
            self._logger,
            "route.select",
            LogContext(family=family.value, generation=binding.generation.value, operation=request.operation),
        )
        if family is CapabilityFamily.SUMMARIZER:
            if binding.is_newer:
                return await self._summarize_newer(binding, request)
            return await self._summarize_older(binding, request)
        if binding.is_newer:
            return await self._prompt_newer(binding, request)
        return await self._prompt_older(binding, request)

    def select_binding(self, status: FamilyStatus) -> Optional[FamilyBinding]:
        """Newest binding that is exposed and not proven broken."""
        host = self._prober.host
        if status.namespaced and status.namespaced_functional is not False:
            return host.binding(status.family, BindingGeneration.NAMESPACED)
        if status.top_level:
            return host.binding(status.family, BindingGeneration.TOP_LEVEL)
        return None

    # ------------------------------------------------------------------
    # prompt family
    # ------------------------------------------------------------------
    def _prompt_options(self, request: InvocationRequest, monitor_label: str) -> Dict[str, Any]:
        return {
            "expectedInputs": [{"type": "text", "languages": list(self.input_languages)}],
            "expectedOutputs": [{"type": "text", "languages": [request.output_language]}],
            "monitor": self._relay.monitor_for(monitor_label),
            **request.extra_options,
        }

    async def _create(self, binding: FamilyBinding, options: Dict[str, Any], operation: str) -> AISession:
        return await bounded_invoke(binding.create, options, self.timeout_ms, label=operation)

    async def _prompt_newer(self, binding: FamilyBinding, request: InvocationRequest) -> Tuple[str, str]:
        options = {
            "systemPrompt": request.instruction_with_language(),
            **self._prompt_options(request, MONITOR_ASSISTANT),
        }
        session = await self._create(binding, options, request.operation)
        result = await resolve(session.prompt(request.user_payload))
        return text_of(result), SOURCE_ASSISTANT

    async def _prompt_older(self, binding: FamilyBinding, request: InvocationRequest) -> Tuple[str, str]:
        model_opts = self._prompt_options(request, MONITOR_LANGUAGE_MODEL)
        instruction = request.instruction_with_language()

        async def _session_for(system_text: str) -> Any:
            opts = {**model_opts, "initialPrompts": [{"role": "system", "content": system_text}]}
            return await self._create(binding, opts, request.operation)

        state = await binding.availability(model_opts)
        if state < AvailabilityState.AVAILABLE:
            return await self._escalate(
                binding,
                request,
                state,
                lambda: self._prompt_once(_session_for, instruction, request.user_payload),
                SOURCE_LANGUAGE_MODEL_FORCED,
            )

        executor = ChunkReduceExecutor(
            _session_for, chunk_limit=self.chunk_limit, max_concurrency=self.max_concurrency
        )
        if executor.needs_chunking(request.user_payload):
            text = await executor.run(request.user_payload, instruction, request.output_language)
            return text, SOURCE_LANGUAGE_MODEL_CHUNKED
        text = await self._prompt_once(_session_for, instruction, request.user_payload)
        return text, SOURCE_LANGUAGE_MODEL

    @staticmethod
    async def _prompt_once(session_for: Any, instruction: str, payload: str) -> str:
        session = await session_for(instruction)
        return text_of(await resolve(session.prompt(payload)))

    # ------------------------------------------------------------------
    # summarizer family
    # ------------------------------------------------------------------
    def _summarizer_options(self, request: InvocationRequest) -> Dict[str, Any]:
        return {
            **SUMMARIZER_DEFAULTS,
            "outputLanguage": request.output_language,
            "monitor": self._relay.monitor_for(MONITOR_SUMMARIZER),
            **request.extra_options,
        }

    async def _summarize_with(self, binding: FamilyBinding, options: Dict[str, Any], request: InvocationRequest) -> str:
        summarizer = await self._create(binding, options, request.operation)
        return text_of(await resolve(summarizer.summarize(request.user_payload)))

    async def _summarize_newer(self, binding: FamilyBinding, request: InvocationRequest) -> Tuple[str, str]:
        text = await self._summarize_with(binding, self._summarizer_options(request), request)
        return text, SOURCE_SUMMARIZER

    async def _summarize_older(self, binding: FamilyBinding, request: InvocationRequest) -> Tuple[str, str]:
        options = self._summarizer_options(request)
        state = await binding.availability(options)
        if state < AvailabilityState.AVAILABLE:
            return await self._escalate(
                binding,
                request,
                state,
                lambda: self._summarize_with(binding, options, request),
                SOURCE_SUMMARIZER_FORCED,
            )
        text = await self._summarize_with(binding, options, request)
        return text, SOURCE_SUMMARIZER_OLD

    # ------------------------------------------------------------------
    # escalation
    # ------------------------------------------------------------------
    async def _escalate(
        self,
        binding: FamilyBinding,
        request: InvocationRequest,
        state: AvailabilityState,
        attempt: Any,
        label: str,
    ) -> Tuple[str, str]:
        """Forced creation for a binding below ``available``.

        Reachable only when ``force_real`` is set and the host reports
        active user interaction; otherwise fails without creating anything.
        """
        name = _TOP_LEVEL_NAME[binding.family]
        ctx = LogContext(family=binding.family.value, generation=binding.generation.value, operation=request.operation)
        if not (request.force_real and self._prober.host.has_user_activation()):
            log_event(self._logger, "route.unavailable", ctx, availability=state.value, force_real=request.force_real)
            raise AIError(kind=FailureKind.AI_NOT_AVAILABLE, message=f"{name} not available on this device.")
        log_event(self._logger, "route.forced", ctx, availability=state.value)
        try:
            text = await attempt()
        except Exception as exc:
            raise AIError(
                kind=FailureKind.AI_NOT_AVAILABLE,
                message=f"{name} not available on this device. Forced attempt failed: {exc}",
                raw=exc,
            ) from exc
        return text, label


__all__ = ["RequestRouter"]
