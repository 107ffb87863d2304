from __future__ import annotations

from types import SimpleNamespace

import pytest

from lexflow_ai.base.language import normalize_detection, normalize_translation


@pytest.mark.parametrize(
    "raw,expected",
    [
        ({"languages": [{"language": "PT", "confidence": 0.91}, {"language": "es", "confidence": 0.05}]}, ("pt", 0.91)),
        ([{"detectedLanguage": "ja", "confidence": 1}], ("ja", 1.0)),
        ({"detectedLanguage": "EN", "confidence": "high"}, ("en", None)),
        ([SimpleNamespace(language="es", confidence=0.5)], ("es", 0.5)),
        ({"languages": []}, (None, None)),
        (None, (None, None)),
        ({"confidence": 0.3}, (None, 0.3)),
    ],
)
def test_normalize_detection(raw, expected):
    assert normalize_detection(raw) == expected  # nosec B101


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Olá", ("Olá", None)),
        ("", (None, None)),
        ({"text": "Hola", "detectedSourceLanguage": "en"}, ("Hola", "en")),
        ({"translatedText": "Hallo", "sourceLanguage": "nl"}, ("Hallo", "nl")),
        (SimpleNamespace(text="Ciao"), ("Ciao", None)),
        ({}, (None, None)),
        (None, (None, None)),
    ],
)
def test_normalize_translation(raw, expected):
    assert normalize_translation(raw) == expected  # nosec B101
