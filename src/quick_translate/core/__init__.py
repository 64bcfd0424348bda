"""Domain layer - Pure values describing translation requests and their state."""

from .languages import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    is_supported_language,
)
from .request_state import ErrorKind, Failed, Idle, InFlight, RequestState, Succeeded
from .translation_request import TranslationRequest

__all__ = [
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "is_supported_language",
    "ErrorKind",
    "Failed",
    "Idle",
    "InFlight",
    "RequestState",
    "Succeeded",
    "TranslationRequest",
]
