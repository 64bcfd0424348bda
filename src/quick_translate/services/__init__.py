"""Services layer - configuration, workers and external integrations."""

from quick_translate.services.settings_manager import SettingsManager

# Translation services
from quick_translate.services.translation import (
    MyMemoryTranslationService,
    TranslationResult,
    TranslationService,
    decode_translation_response,
)

from quick_translate.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "TranslationResult",
    "MyMemoryTranslationService",
    "decode_translation_response",
    "TranslationWorker",
    "WorkerSignals",
]
