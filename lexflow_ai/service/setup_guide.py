"""Static setup guide shown when on-device AI is not available."""
from __future__ import annotations

import copy
from typing import Any, Dict

_GUIDE: Dict[str, Any] = {
    "title": "On-device AI setup (Gemini Nano)",
    "steps": [
        {
            "step": 1,
            "title": "Install Chrome Canary",
            "description": "Download and install Chrome Canary from the official Google page.",
            "url": "https://www.google.com/chrome/canary/",
        },
        {
            "step": 2,
            "title": "Enable experimental flags",
            "description": "Open chrome://flags and enable the following flags:",
            "flags": [
                "chrome://flags/#prompt-api-for-gemini-nano",
                "chrome://flags/#summarization-api-for-gemini-nano",
                "chrome://flags/#built-in-ai-api",
            ],
        },
        {
            "step": 3,
            "title": "Restart the browser",
            "description": "Restart Chrome Canary after enabling the flags.",
        },
        {
            "step": 4,
            "title": "Wait for the model download",
            "description": "The Gemini Nano model is downloaded automatically on first use.",
        },
    ],
    "troubleshooting": [
        {
            "problem": "APIs not available",
            "solution": "Check that you are on Chrome Canary 120+ and that the flags are enabled.",
        },
        {
            "problem": "Model does not load",
            "solution": "Wait a few minutes for the model download or restart the browser.",
        },
        {
            "problem": "Quota errors",
            "solution": "Wait a few minutes before trying again.",
        },
    ],
}


def setup_instructions() -> Dict[str, Any]:
    """Return a fresh copy of the setup guide (callers may mutate it)."""
    return copy.deepcopy(_GUIDE)


__all__ = ["setup_instructions"]
