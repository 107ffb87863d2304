"""Deterministic mock host backed by JSON fixtures for offline use.

Purpose
-------
Build a :class:`HostSurface` whose bindings behave like the on-device APIs
without any model behind them: availability comes from the fixture profile,
creation replays the profile's download progress through the ``monitor``
option, and sessions answer with templated text. The CLI runs against it and
tests use it as an end-to-end host.

External dependencies
---------------------
Standard library only. Fixtures are loaded via ``importlib.resources``.
"""

from __future__ import annotations

import copy
import json
from collections import Counter
from importlib import resources
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..base.capabilities import HostSurface
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event
from ..base.models import BindingGeneration, CapabilityFamily

_FIXTURE_RESOURCE = "host_profiles.json"


def load_fixture_catalog(resource: str = _FIXTURE_RESOURCE) -> Dict[str, Any]:
    """Load the JSON host profiles bundled under ``lexflow_ai.mock.fixtures``."""
    package = "lexflow_ai.mock.fixtures"
    data = resources.files(package).joinpath(resource).read_text(encoding="utf-8")
    return json.loads(data)


class MockMonitorTarget:
    """Minimal event target handed to ``monitor`` callbacks."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[[Any], None]]] = {}

    def add_event_listener(self, name: str, callback: Callable[[Any], None]) -> None:
        self._listeners.setdefault(name, []).append(callback)

    def dispatch(self, name: str, event: Any = None) -> None:
        for callback in list(self._listeners.get(name, [])):
            callback(event)


class MockSession:
    """Session answering from the catalog's response templates."""

    def __init__(self, responses: Mapping[str, Any], options: Mapping[str, Any]) -> None:
        self._responses = responses
        self.options = dict(options)
        self.destroyed = False

    @staticmethod
    def _fill(template: str, text: str, **extra: Any) -> str:
        return template.format(chars=len(text), head=text[:60], text=text, **extra)

    async def prompt(self, text: str) -> str:
        return self._fill(self._responses["prompt"], text)

    async def summarize(self, text: str) -> str:
        return self._fill(self._responses["summarize"], text)

    async def detect(self, text: str) -> Any:
        return copy.deepcopy(self._responses["detect"])

    async def translate(self, text: str) -> Dict[str, Any]:
        spec = self._responses["translate"]
        target = self.options.get("targetLanguage", "")
        return {
            "text": self._fill(spec["template"], text, target=target),
            "detectedSourceLanguage": spec.get("detectedSourceLanguage"),
        }

    def destroy(self) -> None:
        self.destroyed = True


class MockBinding:
    """One family/generation binding driven by a profile entry."""

    def __init__(
        self,
        host: "MockHost",
        family: CapabilityFamily,
        generation: BindingGeneration,
        spec: Mapping[str, Any],
    ) -> None:
        self._host = host
        self.family = family
        self.generation = generation
        self._spec = dict(spec)

    async def availability(self, options: Optional[Mapping[str, Any]] = None) -> str:
        self._host.calls[(self.family, self.generation, "availability")] += 1
        return str(self._spec.get("availability", "available"))

    async def create(self, options: Optional[Mapping[str, Any]] = None) -> MockSession:
        opts = dict(options or {})
        self._host.calls[(self.family, self.generation, "create")] += 1
        error = self._spec.get("create_error")
        if error:
            raise RuntimeError(str(error))
        monitor = opts.pop("monitor", None)
        steps: List[Tuple[Any, Any]] = [tuple(s) for s in self._spec.get("download_steps", [])]
        if monitor is not None and steps:
            target = MockMonitorTarget()
            monitor(target)
            for loaded, total in steps:
                target.dispatch("downloadprogress", {"loaded": loaded, "total": total})
            target.dispatch("downloadcomplete", {})
        return MockSession(self._host.responses, opts)


class MockHost:
    """Fixture-driven host; ``surface()`` yields the injectable ``HostSurface``.

    Parameters
    ----------
    profile:
        Profile name from the catalog (``modern``, ``legacy``,
        ``downloading``, ``none``); defaults to the catalog's default.
    catalog:
        Pre-parsed catalog, mainly for tests.
    user_activation:
        Overrides the profile's user-activation flag.
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        *,
        catalog: Optional[Dict[str, Any]] = None,
        user_activation: Optional[bool] = None,
    ) -> None:
        self._catalog = catalog or load_fixture_catalog()
        self.profile_name = profile or self._catalog.get("default_profile", "modern")
        profiles = self._catalog.get("profiles", {})
        if self.profile_name not in profiles:
            raise KeyError(f"unknown mock host profile: {self.profile_name!r}")
        self._profile: Mapping[str, Any] = profiles[self.profile_name]
        self.responses: Mapping[str, Any] = self._catalog.get("responses", {})
        self.user_activation = bool(
            self._profile.get("user_activation", False) if user_activation is None else user_activation
        )
        self.calls: Counter = Counter()
        self._logger = get_logger("lexflow_ai.mock")

    @staticmethod
    def profiles(catalog: Optional[Dict[str, Any]] = None) -> List[str]:
        return sorted((catalog or load_fixture_catalog()).get("profiles", {}))

    def _bindings(self, generation: BindingGeneration) -> Dict[CapabilityFamily, MockBinding]:
        table = self._profile.get(generation.value, {}) or {}
        return {
            CapabilityFamily(name): MockBinding(self, CapabilityFamily(name), generation, spec or {})
            for name, spec in table.items()
        }

    def surface(self) -> HostSurface:
        surface = HostSurface(
            namespaced=self._bindings(BindingGeneration.NAMESPACED),
            top_level=self._bindings(BindingGeneration.TOP_LEVEL),
            user_activation=lambda: self.user_activation,
            version=self._catalog.get("version"),
        )
        log_event(
            self._logger,
            "mock.surface",
            LogContext(operation="mock"),
            profile=self.profile_name,
            namespaced=sorted(f.value for f in surface.namespaced),
            top_level=sorted(f.value for f in surface.top_level),
        )
        return surface

    def create_count(self, family: CapabilityFamily, generation: Optional[BindingGeneration] = None) -> int:
        return sum(
            n
            for (fam, gen, kind), n in self.calls.items()
            if kind == "create" and fam is family and (generation is None or gen is generation)
        )


__all__ = ["MockHost", "MockBinding", "MockSession", "MockMonitorTarget", "load_fixture_catalog"]
