"""CLI action handlers.

Each handler builds an :class:`AIOrchestrator` over the mock host, runs one
operation and prints the JSON result to stdout. Exit code is 0 when the
operation succeeded and 1 when it returned a failure.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Optional, TextIO

from ...base.logging import configure_logger
from ...config import get_settings
from ...mock import MockHost
from ..orchestrator import AIOrchestrator
from ..setup_guide import setup_instructions


def build_orchestrator(args: argparse.Namespace) -> AIOrchestrator:
    """Create the orchestrator for the selected mock profile."""
    overrides: Dict[str, Any] = {}
    if getattr(args, "log_level", None):
        overrides["log_level"] = args.log_level
    settings = get_settings(overrides)
    configure_logger(level=settings.log_level)
    host = MockHost(getattr(args, "profile", None), user_activation=getattr(args, "activation", None))
    return AIOrchestrator(host.surface(), settings=settings)


def emit(payload: Dict[str, Any], out: Optional[TextIO] = None) -> None:
    stream = out or sys.stdout
    stream.write(json.dumps(payload, ensure_ascii=False, indent=2, default=str) + "\n")


async def _dispatch(args: argparse.Namespace) -> Dict[str, Any]:
    orch = build_orchestrator(args)
    if args.cmd == "probe":
        report = await orch.probe()
        return {"success": report.functional, **report.to_dict()}
    if args.cmd == "self-test":
        results = await orch.self_test()
        ok = all(t is None or t.get("success") for t in (results["prompt_test"], results["summarizer_test"]))
        return {"success": ok, **results}
    if args.cmd == "analyze":
        res = await orch.analyze(
            args.system or "", args.text, output_lang=args.lang, force_real=args.force_real
        )
    elif args.cmd == "summarize":
        res = await orch.summarize(args.text, output_lang=args.lang, force_real=args.force_real)
    elif args.cmd == "run":
        res = await orch.run(args.prompt, args.text, preset=args.preset, force_real=args.force_real)
    elif args.cmd == "detect":
        res = await orch.detect_language(args.text, allow_model_download=args.allow_download)
    else:
        res = await orch.translate_text(
            args.text,
            args.target,
            source_language=args.source,
            allow_model_download=args.allow_download,
        )
    return res.to_dict()


def handle(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Run the parsed subcommand and print its JSON result."""
    if args.cmd == "setup":
        emit(setup_instructions(), out)
        return 0
    payload = asyncio.run(_dispatch(args))
    emit(payload, out)
    return 0 if payload.get("success") else 1


__all__ = ["build_orchestrator", "emit", "handle"]
