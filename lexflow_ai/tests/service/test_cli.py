from __future__ import annotations

import io
import json

import pytest

from lexflow_ai.service.cli import main
from lexflow_ai.service.cli.cli_actions import handle
from lexflow_ai.service.cli.cli_parser import build_parser


def _run(*argv):
    out = io.StringIO()
    code = handle(build_parser().parse_args(list(argv)), out)
    return code, json.loads(out.getvalue())


def test_probe_modern_profile():
    code, payload = _run("probe", "--profile", "modern")
    assert code == 0  # nosec B101
    assert payload["functional"] is True  # nosec B101
    assert payload["families"]["prompt"]["verified_generation"] == "namespaced"  # nosec B101
    assert payload["host_version"] == "mock-host-1"  # nosec B101


def test_probe_empty_profile_exits_nonzero():
    code, payload = _run("probe", "--profile", "none")
    assert code == 1 and payload["success"] is False  # nosec B101


def test_analyze_legacy_profile():
    code, payload = _run("analyze", "--profile", "legacy", "--system", "Explain.", "--lang", "pt", "Art. 5")
    assert code == 0  # nosec B101
    assert payload["source"] == "chrome-ai-language-model"  # nosec B101
    assert payload["result"] == "Analysis (6 chars): Art. 5"  # nosec B101


def test_summarize_needs_activation_for_forced_download():
    code, payload = _run("summarize", "--profile", "downloading", "--force-real", "--no-activation", "text")
    assert code == 1  # nosec B101
    assert payload["error"] == "ai_not_available"  # nosec B101
    code, payload = _run("summarize", "--profile", "downloading", "--force-real", "text")
    assert code == 0 and payload["source"] == "chrome-ai-summarizer-forced"  # nosec B101


def test_run_detect_and_translate():
    code, payload = _run("run", "--profile", "modern", "Resumo em espanhol", "Texto legal")
    assert code == 0 and payload["source"] == "chrome-ai-summarizer"  # nosec B101

    code, payload = _run("detect", "--profile", "downloading", "hello")
    assert code == 1 and payload["fallback"] == "allow_download"  # nosec B101
    code, payload = _run("detect", "--profile", "downloading", "--allow-download", "hello")
    assert code == 0 and payload["result"] == "en"  # nosec B101

    code, payload = _run("translate", "--profile", "legacy", "--to", "es", "Hello")
    assert code == 0 and payload["result"] == "[es] Hello"  # nosec B101
    assert payload["details"]["from"] == "en"  # nosec B101


def test_self_test_and_setup():
    code, payload = _run("self-test", "--profile", "legacy")
    assert code == 0  # nosec B101
    assert payload["prompt_test"]["source"] == "chrome-ai-language-model"  # nosec B101
    code, payload = _run("setup")
    assert code == 0 and payload["steps"][0]["step"] == 1  # nosec B101


def test_main_parses_argv(capsys):
    assert main(["setup"]) == 0  # nosec B101
    assert "troubleshooting" in json.loads(capsys.readouterr().out)  # nosec B101


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bogus"])
