"""Capability prober.

Determines which capability families the host exposes and whether the prompt
and summarizer families actually answer a trivial request. The result is a
:class:`CapabilityReport` computed once and shared: every later caller gets
the same report, and callers arriving while a probe is running wait for that
probe instead of starting another.

Smoke tests, per family:
    1. Newer binding (if exposed): create, run one trivial call, succeed on a
       non-empty string.
    2. Older binding (if the newer one is absent or failed): query
       availability; unless it is ``unavailable``, create and run the same
       trivial call.

Failures inside a smoke test are recorded on the family status and never
propagate out of :meth:`CapabilityProber.probe`.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Dict, Optional, Tuple

from ..constants import (
    SMOKE_PROMPT_TEXT,
    SMOKE_SUMMARY_TEXT,
    SMOKE_SYSTEM_PROMPT,
    SUMMARIZER_DEFAULTS,
)
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import (
    AvailabilityState,
    BindingGeneration,
    CapabilityFamily,
    CapabilityReport,
    FamilyStatus,
)
from ..timeouts import bounded_invoke
from ..utils.awaitables import resolve, text_of
from .core import FamilyBinding, HostSurface

SMOKE_TESTED_FAMILIES = (CapabilityFamily.PROMPT, CapabilityFamily.SUMMARIZER)


def _smoke_plan(family: CapabilityFamily) -> Tuple[Dict[str, Any], str, str]:
    """Creation options, session method and input text for a smoke test."""
    if family is CapabilityFamily.SUMMARIZER:
        return dict(SUMMARIZER_DEFAULTS), "summarize", SMOKE_SUMMARY_TEXT
    return {"systemPrompt": SMOKE_SYSTEM_PROMPT}, "prompt", SMOKE_PROMPT_TEXT


async def release_session(session: Any) -> None:
    """Destroy a host session if it supports it; cleanup errors are ignored."""
    destroy = getattr(session, "destroy", None)
    if destroy is None:
        return
    with contextlib.suppress(Exception):
        await resolve(destroy())


class CapabilityProber:
    """Probe a :class:`HostSurface` once and memoize the report."""

    def __init__(self, host: HostSurface, *, timeout_ms: Optional[int] = None) -> None:
        self._host = host
        self._timeout_ms = timeout_ms
        self._report: Optional[CapabilityReport] = None
        self._inflight: Optional["asyncio.Future[CapabilityReport]"] = None
        self._logger = get_logger("lexflow_ai.prober")

    @property
    def host(self) -> HostSurface:
        return self._host

    @property
    def cached(self) -> Optional[CapabilityReport]:
        """The memoized report, or ``None`` before the first probe completes."""
        return self._report

    def reset(self) -> None:
        """Forget the memoized report; the next probe recomputes it."""
        self._report = None
        self._inflight = None

    async def probe(self, refresh: bool = False) -> CapabilityReport:
        """Return the capability report, computing it at most once.

        Parameters
        ----------
        refresh:
            Discard the memoized report and probe again.
        """
        if refresh:
            self.reset()
        if self._report is not None:
            return self._report
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._compute())
        inflight = self._inflight
        try:
            report = await asyncio.shield(inflight)
        except Exception:
            if self._inflight is inflight:
                self._inflight = None
            raise
        if self._inflight is inflight:
            self._report = report
        return report

    async def _compute(self) -> CapabilityReport:
        host = self._host
        exposed = {
            f: (host.exposes(f, BindingGeneration.NAMESPACED), host.exposes(f, BindingGeneration.TOP_LEVEL))
            for f in CapabilityFamily
        }
        if not any(n or t for n, t in exposed.values()):
            log_event(self._logger, "probe.no_capabilities", LogContext(operation="probe"))
            return CapabilityReport.unavailable(host_version=host.version)

        families: Dict[CapabilityFamily, FamilyStatus] = {}
        for family, (namespaced, top_level) in exposed.items():
            if family in SMOKE_TESTED_FAMILIES and (namespaced or top_level):
                families[family] = await self._smoke_family(family, namespaced, top_level)
            else:
                families[family] = FamilyStatus(family=family, namespaced=namespaced, top_level=top_level)

        report = CapabilityReport(
            families=families,
            functional=any(s.functional for s in families.values()),
            host_version=host.version,
        )
        log_event(
            self._logger,
            "probe.complete",
            LogContext(operation="probe"),
            functional=report.functional,
            families={f.value: s.functional for f, s in families.items()},
        )
        return report

    async def _smoke_family(self, family: CapabilityFamily, namespaced: bool, top_level: bool) -> FamilyStatus:
        namespaced_ok: Optional[bool] = None
        top_state: Optional[AvailabilityState] = None
        error: Optional[str] = None

        if namespaced:
            binding = self._host.binding(family, BindingGeneration.NAMESPACED)
            try:
                namespaced_ok = await self._smoke_call(binding)
            except Exception as exc:
                namespaced_ok = False
                error = str(exc) or type(exc).__name__
                self._log_smoke_failure(binding, exc)
            if namespaced_ok:
                return FamilyStatus(
                    family=family,
                    namespaced=True,
                    top_level=top_level,
                    functional=True,
                    namespaced_functional=True,
                    verified_generation=BindingGeneration.NAMESPACED,
                )

        functional = False
        if top_level:
            binding = self._host.binding(family, BindingGeneration.TOP_LEVEL)
            try:
                options, _, _ = _smoke_plan(family)
                top_state = await binding.availability(options)
                if top_state is not AvailabilityState.UNAVAILABLE:
                    functional = await self._smoke_call(binding)
            except Exception as exc:
                functional = False
                error = str(exc) or type(exc).__name__
                self._log_smoke_failure(binding, exc)

        return FamilyStatus(
            family=family,
            namespaced=namespaced,
            top_level=top_level,
            functional=functional,
            namespaced_functional=namespaced_ok,
            verified_generation=BindingGeneration.TOP_LEVEL if functional else None,
            top_level_availability=top_state,
            error=None if functional else error,
        )

    async def _smoke_call(self, binding: FamilyBinding) -> bool:
        options, method, text = _smoke_plan(binding.family)
        session = await bounded_invoke(
            binding.create, options, self._timeout_ms, label=f"probe.{binding.family.value}"
        )
        try:
            result = await resolve(getattr(session, method)(text))
        finally:
            await release_session(session)
        ok = bool(text_of(result).strip())
        log_event(
            self._logger,
            "probe.smoke",
            LogContext(family=binding.family.value, generation=binding.generation.value, operation="probe"),
            functional=ok,
        )
        return ok

    def _log_smoke_failure(self, binding: Optional[FamilyBinding], exc: BaseException) -> None:
        log_event(
            self._logger,
            "probe.smoke_failed",
            LogContext(
                family=binding.family.value if binding else None,
                generation=binding.generation.value if binding else None,
                operation="probe",
            ),
            error_type=type(exc).__name__,
            error=str(exc),
        )


__all__ = ["CapabilityProber", "SMOKE_TESTED_FAMILIES", "release_session"]
