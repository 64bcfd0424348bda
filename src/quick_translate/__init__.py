"""
Quick Translate - A small desktop panel for machine translation.

This package provides a desktop application that:
- Translates text through the MyMemory web API
- Keeps a single translation request in flight at a time
- Supports swapping and cancelling requests
"""

__version__ = "0.1.0"

# Make key components available at package level
from quick_translate.core import ErrorKind, Failed, Idle, InFlight, RequestState, Succeeded, TranslationRequest

__all__ = [
    "ErrorKind",
    "Failed",
    "Idle",
    "InFlight",
    "RequestState",
    "Succeeded",
    "TranslationRequest",
]
