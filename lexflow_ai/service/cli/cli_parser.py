"""CLI parser construction for lexflow-ai.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--profile", default=None, help="Mock host profile (modern, legacy, downloading, none)")
    parser.add_argument("--no-activation", dest="activation", action="store_false", default=None,
                        help="Report no user activation to the router")
    parser.add_argument("--log-level", default=None)


def _add_invoke_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lang", default=None, help="Output language tag")
    parser.add_argument("--force-real", action="store_true")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Every subcommand runs against the bundled mock host and prints one JSON
    document to stdout.
    """
    p = argparse.ArgumentParser(prog="lexflow-ai", description="On-device AI orchestration CLI (mock host)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_probe = sub.add_parser("probe", help="Print the capability report")
    _add_common(p_probe)

    p_analyze = sub.add_parser("analyze", help="Analyze text with the prompt family")
    _add_common(p_analyze)
    _add_invoke_flags(p_analyze)
    p_analyze.add_argument("--system", default=None, help="System instruction")
    p_analyze.add_argument("text")

    p_sum = sub.add_parser("summarize", help="Summarize text with the summarizer family")
    _add_common(p_sum)
    _add_invoke_flags(p_sum)
    p_sum.add_argument("text")

    p_run = sub.add_parser("run", help="Pick summarize or analyze from the request text")
    _add_common(p_run)
    p_run.add_argument("--preset", default=None)
    p_run.add_argument("--force-real", action="store_true")
    p_run.add_argument("prompt")
    p_run.add_argument("text")

    p_detect = sub.add_parser("detect", help="Detect the language of a text")
    _add_common(p_detect)
    p_detect.add_argument("--allow-download", action="store_true")
    p_detect.add_argument("text")

    p_tr = sub.add_parser("translate", help="Translate a text")
    _add_common(p_tr)
    p_tr.add_argument("--to", dest="target", required=True)
    p_tr.add_argument("--from", dest="source", default=None)
    p_tr.add_argument("--allow-download", action="store_true")
    p_tr.add_argument("text")

    p_self = sub.add_parser("self-test", help="Probe and run one analyze and one summarize")
    _add_common(p_self)

    sub.add_parser("setup", help="Print the setup guide")
    return p


__all__ = ["build_parser"]
