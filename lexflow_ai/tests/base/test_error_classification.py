from __future__ import annotations

import asyncio

import pytest

from lexflow_ai.base.errors import (
    AIError,
    AITimeoutError,
    FailureKind,
    RecoveryAction,
    classify,
    classify_exception,
)


def test_quota_message_is_rate_limited_and_retryable():
    failure = classify(Exception("quota exceeded"), "analyze")
    assert failure.kind is FailureKind.RATE_LIMITED  # nosec B101 - assert is appropriate in unit tests
    assert failure.retryable is True  # nosec B101 - assert is appropriate in unit tests
    assert failure.suggested_action is RecoveryAction.RETRY_LATER  # nosec B101 - assert is appropriate in unit tests
    assert failure.operation == "analyze"  # nosec B101 - assert is appropriate in unit tests


def test_undefined_message_is_not_available_and_final():
    failure = classify(TypeError("undefined is not a function"), "summarize")
    assert failure.kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101 - assert is appropriate in unit tests
    assert failure.retryable is False  # nosec B101 - assert is appropriate in unit tests
    assert failure.suggested_action is RecoveryAction.SETUP_REQUIRED  # nosec B101 - assert is appropriate in unit tests
    assert failure.detail == "undefined is not a function"  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize(
    "message, kind",
    [
        ("Feature not available", FailureKind.AI_NOT_AVAILABLE),
        ("usage limit reached", FailureKind.RATE_LIMITED),
        ("model is loading", FailureKind.MODEL_LOADING),
        ("network down", FailureKind.NETWORK_ERROR),
        ("failed to fetch", FailureKind.NETWORK_ERROR),
        ("something odd", FailureKind.UNKNOWN),
        ("", FailureKind.UNKNOWN),
    ],
)
def test_heuristics(message, kind):
    assert classify_exception(RuntimeError(message)) is kind  # nosec B101 - assert is appropriate in unit tests


def test_precedence_first_group_wins():
    # "not available" outranks "model"
    assert classify_exception(Exception("model not available")) is FailureKind.AI_NOT_AVAILABLE  # nosec B101
    # "limit" outranks "network"
    assert classify_exception(Exception("network limit")) is FailureKind.RATE_LIMITED  # nosec B101


def test_matching_is_case_insensitive():
    assert classify_exception(Exception("QUOTA exceeded")) is FailureKind.RATE_LIMITED  # nosec B101
    assert classify_exception(RuntimeError("Model execution failed")) is FailureKind.MODEL_LOADING  # nosec B101
    assert classify_exception(RuntimeError("NetworkError when attempting")) is FailureKind.NETWORK_ERROR  # nosec B101


def test_timeouts_map_to_timeout_kind():
    assert classify_exception(asyncio.TimeoutError()) is FailureKind.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError("slow")) is FailureKind.TIMEOUT  # nosec B101
    failure = classify(AITimeoutError(timeout_ms=50), "analyze")
    assert failure.kind is FailureKind.TIMEOUT  # nosec B101
    assert failure.retryable is True  # nosec B101


def test_ai_error_passthrough_keeps_message_and_overrides():
    err = AIError(
        kind=FailureKind.MODEL_LOADING,
        message="download first",
        action=RecoveryAction.ALLOW_DOWNLOAD,
        raw=RuntimeError("inner"),
    )
    failure = classify(err, "detect_language")
    assert failure.kind is FailureKind.MODEL_LOADING  # nosec B101
    assert failure.message == "download first"  # nosec B101
    assert failure.suggested_action is RecoveryAction.ALLOW_DOWNLOAD  # nosec B101
    assert failure.detail == "inner"  # nosec B101


def test_ai_error_message_is_not_reclassified():
    # the text would match "model", but the typed kind wins
    err = AIError(kind=FailureKind.AI_NOT_AVAILABLE, message="LanguageModel not available on this device.")
    assert classify(err, "analyze").kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101


def test_classify_never_raises_on_hostile_exception():
    class Weird(Exception):
        def __str__(self):
            raise RuntimeError("cannot render")

    failure = classify(Weird(), "analyze")
    assert failure.kind is FailureKind.UNKNOWN  # nosec B101
    assert failure.ok is False  # nosec B101


def test_failure_to_dict_shape():
    data = classify(Exception("quota"), "analyze").to_dict()
    assert data["success"] is False  # nosec B101
    assert data["error"] == "rate_limited"  # nosec B101
    assert data["fallback"] == "retry_later"  # nosec B101
    assert data["retryable"] is True  # nosec B101
    assert "timestamp" in data  # nosec B101
