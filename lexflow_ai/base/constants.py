"""Base shared constants for the AI orchestration layer.

Central location to avoid scattering magic strings and default numbers across
the prober, router and executors.
"""
from __future__ import annotations

# Default budget for a single capability-creation call (milliseconds)
DEFAULT_CREATE_TIMEOUT_MS = 60_000

# Payloads longer than this are split before prompting on the top-level path
DEFAULT_CHUNK_LIMIT = 1500

# Translation requests longer than this are rejected up front
DEFAULT_MAX_TRANSLATE_CHARS = 10_000

DEFAULT_OUTPUT_LANG = "en"
SUPPORTED_INPUT_LANGS = ("en", "es", "ja")

# Appended verbatim to every system instruction
LANGUAGE_SUFFIX_TEMPLATE = "\nRespond in the following language: {lang}."

REDUCE_INSTRUCTION_LINES = (
    "You are a legal assistant. Synthesize the following partial answers into one coherent answer.",
    "Preserve citations in the format (LAW, ARTICLE).",
)
PARTIAL_SEPARATOR = "\n\n"

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

# Smoke-test inputs used by the capability prober
SMOKE_SYSTEM_PROMPT = "You are a helpful assistant."
SMOKE_PROMPT_TEXT = "Reply with 'OK' only."
SMOKE_SUMMARY_TEXT = "This is a test text used to verify that the summarizer works correctly."

# Summarizer defaults shared by both generations
SUMMARIZER_DEFAULTS = {
    "type": "key-points",
    "format": "markdown",
    "length": "medium",
}

# Source labels reported on ``Success.source_label``
SOURCE_ASSISTANT = "chrome-ai-assistant"
SOURCE_LANGUAGE_MODEL = "chrome-ai-language-model"
SOURCE_LANGUAGE_MODEL_FORCED = "chrome-ai-language-model-forced"
SOURCE_LANGUAGE_MODEL_CHUNKED = "chrome-ai-language-model-chunked"
SOURCE_SUMMARIZER = "chrome-ai-summarizer"
SOURCE_SUMMARIZER_OLD = "chrome-ai-summarizer-old"
SOURCE_SUMMARIZER_FORCED = "chrome-ai-summarizer-forced"
SOURCE_LANGUAGE_DETECTOR = "chrome-ai-language-detector"
SOURCE_TRANSLATOR = "chrome-ai-translator"

# Progress relay labels (one per host binding that can download a model)
MONITOR_ASSISTANT = "Assistant"
MONITOR_LANGUAGE_MODEL = "LanguageModel"
MONITOR_SUMMARIZER = "Summarizer"

# Notification bus topics
TOPIC_DOWNLOAD_PROGRESS = "ai-download-progress"
TOPIC_DOWNLOAD_COMPLETE = "ai-download-complete"
TOPIC_DOWNLOAD_ERROR = "ai-download-error"

__all__ = [
    "DEFAULT_CREATE_TIMEOUT_MS",
    "DEFAULT_CHUNK_LIMIT",
    "DEFAULT_MAX_TRANSLATE_CHARS",
    "DEFAULT_OUTPUT_LANG",
    "SUPPORTED_INPUT_LANGS",
    "LANGUAGE_SUFFIX_TEMPLATE",
    "REDUCE_INSTRUCTION_LINES",
    "PARTIAL_SEPARATOR",
    "DEFAULT_SYSTEM_PROMPT",
    "SMOKE_SYSTEM_PROMPT",
    "SMOKE_PROMPT_TEXT",
    "SMOKE_SUMMARY_TEXT",
    "SUMMARIZER_DEFAULTS",
    "SOURCE_ASSISTANT",
    "SOURCE_LANGUAGE_MODEL",
    "SOURCE_LANGUAGE_MODEL_FORCED",
    "SOURCE_LANGUAGE_MODEL_CHUNKED",
    "SOURCE_SUMMARIZER",
    "SOURCE_SUMMARIZER_OLD",
    "SOURCE_SUMMARIZER_FORCED",
    "SOURCE_LANGUAGE_DETECTOR",
    "SOURCE_TRANSLATOR",
    "MONITOR_ASSISTANT",
    "MONITOR_LANGUAGE_MODEL",
    "MONITOR_SUMMARIZER",
    "TOPIC_DOWNLOAD_PROGRESS",
    "TOPIC_DOWNLOAD_COMPLETE",
    "TOPIC_DOWNLOAD_ERROR",
]
