"""Translation Service - Abstract interface for remote translation backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from quick_translate.core import ErrorKind, TranslationRequest


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: Optional[str]
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error_kind is not None

    @classmethod
    def success(cls, text: str) -> "TranslationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error_kind: ErrorKind, error: str) -> "TranslationResult":
        return cls(text=None, error_kind=error_kind, error=error)


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., MyMemoryTranslationService) handle the network call
    and report every expected failure through the returned result instead of
    raising.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request's text.

        Args:
            request: Text and language pair to translate.

        Returns:
            TranslationResult with translated text or error kind and message.
        """
        pass
