"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_request_controller import TranslationRequestController

__all__ = [
    "TranslationRequestController",
]
