from __future__ import annotations

import pytest

from lexflow_ai.base.constants import SOURCE_LANGUAGE_DETECTOR, SOURCE_TRANSLATOR
from lexflow_ai.base.errors import FailureKind, RecoveryAction
from lexflow_ai.base.language import LanguageServices
from lexflow_ai.base.models import CapabilityFamily, Failure, Success
from lexflow_ai.tests.fakes import FakeBinding, LegacyBinding, make_host

D = CapabilityFamily.LANGUAGE_DETECTOR
T = CapabilityFamily.TRANSLATOR

DETECTED = {"languages": [{"language": "PT", "confidence": 0.88}]}


def _services(**host_kwargs):
    return LanguageServices(make_host(**host_kwargs), timeout_ms=200, max_translate_chars=20)


@pytest.mark.asyncio
async def test_detect_without_binding():
    result = await _services().detect_language("texto")
    assert isinstance(result, Failure)  # nosec B101
    assert result.kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101
    assert result.operation == "detect_language"  # nosec B101


@pytest.mark.asyncio
async def test_detect_success_caches_instance():
    detector = FakeBinding(detect_result=DETECTED)
    services = _services(top_level={D: detector})
    first = await services.detect_language("  Olá mundo  ")
    second = await services.detect_language("Bom dia")
    assert isinstance(first, Success)  # nosec B101
    assert first.text == "pt" and first.source_label == SOURCE_LANGUAGE_DETECTOR  # nosec B101
    assert first.details == {"confidence": 0.88, "availability": "available"}  # nosec B101
    assert second.ok  # nosec B101
    assert len(detector.create_calls) == 1 and len(detector.availability_calls) == 1  # nosec B101
    assert detector.prompt_calls == ["Olá mundo", "Bom dia"]  # nosec B101

    await services.detect_language("de novo", force_new=True)
    assert len(detector.create_calls) == 2  # nosec B101


@pytest.mark.asyncio
async def test_newer_binding_is_used_first():
    newer = FakeBinding(detect_result=DETECTED)
    older = FakeBinding(detect_result=DETECTED)
    services = _services(namespaced={D: newer}, top_level={D: older})
    await services.detect_language("texto")
    assert newer.create_calls and not older.create_calls  # nosec B101


@pytest.mark.asyncio
async def test_empty_input_is_rejected_without_host_calls():
    detector = FakeBinding(detect_result=DETECTED)
    result = await _services(top_level={D: detector}).detect_language("   ")
    assert result.kind is FailureKind.UNKNOWN  # nosec B101
    assert result.retryable is False  # nosec B101
    assert result.suggested_action is RecoveryAction.CHECK_INPUT  # nosec B101
    assert detector.availability_calls == []  # nosec B101


@pytest.mark.asyncio
async def test_unavailable_detector():
    result = await _services(top_level={D: FakeBinding("no")}).detect_language("texto")
    assert result.kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101


@pytest.mark.asyncio
async def test_download_requires_permission():
    detector = FakeBinding("downloadable", detect_result=DETECTED)
    services = _services(top_level={D: detector})
    refused = await services.detect_language("texto")
    assert refused.kind is FailureKind.MODEL_LOADING  # nosec B101
    assert refused.suggested_action is RecoveryAction.ALLOW_DOWNLOAD  # nosec B101
    assert detector.create_calls == []  # nosec B101

    allowed = await services.detect_language("texto", allow_model_download=True)
    assert allowed.ok  # nosec B101
    assert allowed.details["availability"] == "after-download"  # nosec B101


@pytest.mark.asyncio
async def test_unrecognized_detection_fails_and_resets_cache():
    detector = FakeBinding(detect_result={"languages": []})
    services = _services(top_level={D: detector})
    result = await services.detect_language("???")
    assert result.kind is FailureKind.UNKNOWN  # nosec B101
    detector.detect_result = DETECTED
    assert (await services.detect_language("texto")).ok  # nosec B101
    assert len(detector.create_calls) == 2  # nosec B101


@pytest.mark.asyncio
async def test_translate_success():
    translator = FakeBinding(translate_result={"translatedText": "Hello", "detectedSourceLanguage": "pt"})
    services = _services(top_level={T: translator})
    result = await services.translate_text("Olá", "en", source_language="pt")
    assert isinstance(result, Success)  # nosec B101
    assert result.text == "Hello" and result.source_label == SOURCE_TRANSLATOR  # nosec B101
    assert result.details == {  # nosec B101
        "from": "pt",
        "to": "en",
        "detected_language": "pt",
        "availability": "available",
    }
    assert translator.create_calls == [{"targetLanguage": "en", "sourceLanguage": "pt"}]  # nosec B101


@pytest.mark.asyncio
async def test_translate_recreates_for_new_target():
    translator = FakeBinding(translate_result="ok")
    services = _services(top_level={T: translator})
    await services.translate_text("um", "en")
    await services.translate_text("dois", "en")
    await services.translate_text("tres", "es")
    assert [c["targetLanguage"] for c in translator.create_calls] == ["en", "es"]  # nosec B101


@pytest.mark.asyncio
async def test_translate_input_checks():
    translator = FakeBinding(translate_result="ok")
    services = _services(top_level={T: translator})
    no_target = await services.translate_text("texto", "")
    assert no_target.suggested_action is RecoveryAction.CHECK_INPUT  # nosec B101
    too_long = await services.translate_text("x" * 21, "en")
    assert too_long.kind is FailureKind.INPUT_TOO_LARGE  # nosec B101
    assert too_long.message == "Text is too long for this operation (21 > 20 characters)."  # nosec B101
    assert translator.create_calls == []  # nosec B101


@pytest.mark.asyncio
async def test_translate_creation_error_is_classified():
    translator = FakeBinding(create_error=RuntimeError("network unreachable"))
    result = await _services(top_level={T: translator}).translate_text("texto", "en")
    assert result.kind is FailureKind.NETWORK_ERROR  # nosec B101
    assert result.detail == "network unreachable"  # nosec B101


@pytest.mark.asyncio
async def test_capabilities_only_detector_refuses_when_unavailable():
    detector = LegacyBinding("no", detect_result=DETECTED)
    result = await _services(top_level={D: detector}).detect_language("hello world")
    assert isinstance(result, Failure)  # nosec B101
    assert result.kind is FailureKind.AI_NOT_AVAILABLE  # nosec B101
    assert detector.capabilities_calls == 1  # nosec B101
    assert detector.inner.create_calls == []  # nosec B101


@pytest.mark.asyncio
async def test_capabilities_only_translator_waits_for_download_permission():
    translator = LegacyBinding("after-download", translate_result="Hello")
    services = _services(top_level={T: translator})
    refused = await services.translate_text("Olá", "en")
    assert refused.kind is FailureKind.MODEL_LOADING  # nosec B101
    assert refused.suggested_action is RecoveryAction.ALLOW_DOWNLOAD  # nosec B101
    assert translator.inner.create_calls == []  # nosec B101

    allowed = await services.translate_text("Olá", "en", allow_model_download=True)
    assert allowed.ok and allowed.text == "Hello"  # nosec B101
    assert allowed.details["availability"] == "after-download"  # nosec B101
