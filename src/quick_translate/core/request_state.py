"""Request State - the tagged variant published by the request controller."""

from dataclasses import dataclass
from enum import Enum

from .translation_request import TranslationRequest


class ErrorKind(Enum):
    """Why a translation request failed."""

    NETWORK_ERROR = "network_error"
    EMPTY_RESPONSE = "empty_response"
    DECODE_ERROR = "decode_error"
    TRANSLATION_UNAVAILABLE = "translation_unavailable"
    TIMEOUT = "timeout"


class RequestState:
    """
    Base class for the request lifecycle states.

    Exactly one state is current at a time:
    Idle -> InFlight -> Succeeded | Failed, with InFlight -> InFlight on
    supersede and InFlight -> Idle on cancel.
    """

    @property
    def is_busy(self) -> bool:
        return False


@dataclass(frozen=True)
class Idle(RequestState):
    """No request has been made, or the last one was cancelled."""


@dataclass(frozen=True)
class InFlight(RequestState):
    """A request is waiting for the translation service."""

    request: TranslationRequest

    @property
    def is_busy(self) -> bool:
        return True


@dataclass(frozen=True)
class Succeeded(RequestState):
    """The service returned a translation."""

    translated_text: str


@dataclass(frozen=True)
class Failed(RequestState):
    """The request ended with an error."""

    error_kind: ErrorKind
    message: str
