"""Translation services - abstract interface and MyMemory implementation."""

from quick_translate.services.translation.translation_service import TranslationService, TranslationResult
from quick_translate.services.translation.mymemory_translation_service import (
    MyMemoryTranslationService,
    decode_translation_response,
)

__all__ = [
    "TranslationService",
    "TranslationResult",
    "MyMemoryTranslationService",
    "decode_translation_response",
]
