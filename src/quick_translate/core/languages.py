"""Supported language codes."""

from typing import Dict, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("de", "en", "es", "fr", "it", "pt", "ru")

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "es"

LANGUAGE_NAMES: Dict[str, str] = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
}


def is_supported_language(code: str) -> bool:
    """Return True if code is one of the supported language codes."""
    return code in SUPPORTED_LANGUAGES
