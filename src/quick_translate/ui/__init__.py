"""UI layer - PySide6 presentation components."""

from .translation_panel import TranslationPanel

__all__ = ["TranslationPanel"]
