"""Translation Request entity - the immutable query sent to a translation service."""

from dataclasses import dataclass

from .languages import is_supported_language


@dataclass(frozen=True)
class TranslationRequest:
    """A single text to translate from one language into another."""

    source_text: str
    source_language: str
    target_language: str

    def __post_init__(self):
        if not self.source_text:
            raise ValueError("Cannot translate empty text")
        for code in (self.source_language, self.target_language):
            if not is_supported_language(code):
                raise ValueError(f"Unsupported language code: {code!r}")

    @property
    def langpair(self) -> str:
        """Language pair in the "<source>|<target>" form used by the query string."""
        return f"{self.source_language}|{self.target_language}"
