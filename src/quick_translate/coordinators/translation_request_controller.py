"""Translation Request Controller - Owns the single-flight translation request lifecycle."""

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from quick_translate.core import (
    ErrorKind,
    Failed,
    Idle,
    InFlight,
    RequestState,
    Succeeded,
    TranslationRequest,
)
from quick_translate.services import TranslationResult, TranslationService
from quick_translate.services.api_workers import TranslationWorker

logger = logging.getLogger(__name__)


class _PendingTranslation(QObject):
    """
    Holds the context of one started request and relays its worker signals.

    Lives on the controller's thread, so worker signals emitted from the pool
    are queued onto that thread before reaching the controller.
    """

    def __init__(
        self,
        request_id: int,
        worker: TranslationWorker,
        parent: "TranslationRequestController",
    ):
        super().__init__()
        self.request_id = request_id
        self.worker = worker
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        self.parent_ref._handle_translation_result(result, self.request_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        self.parent_ref._handle_translation_error(error, self.request_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._release(self.request_id)


class TranslationRequestController(QObject):
    """
    Orchestrates translation requests for the translation panel.

    Responsibilities:
    - Build a TranslationRequest from the user's text and language pair.
    - Run the service call on the thread pool, one current request at a time.
    - Supersede older requests: their results are discarded on arrival.
    - Publish every state transition through ``state_changed``.
    """

    state_changed = Signal(object)  # RequestState

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self._state: RequestState = Idle()

        # Results are applied only when their id matches the active one
        self._request_counter = 0
        self._active_request_id: Optional[int] = None

        # Handlers stay referenced until their worker finishes, superseded ones included
        self._pending: Dict[int, _PendingTranslation] = {}

    @property
    def state(self) -> RequestState:
        """Current request state."""
        return self._state

    @property
    def is_busy(self) -> bool:
        """True while a request is in flight."""
        return self._state.is_busy

    def submit(self, text: str, source_language: str, target_language: str) -> None:
        """
        Start translating text, superseding any request still in flight.

        Empty text is ignored. Raises ValueError for unsupported language codes.
        """
        if not text:
            logger.debug("Ignoring submit with empty text")
            return

        request = TranslationRequest(
            source_text=text,
            source_language=source_language,
            target_language=target_language,
        )

        if self._active_request_id is not None:
            logger.info("Superseding translation request %d", self._active_request_id)

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_state(InFlight(request))

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )

        pending = _PendingTranslation(request_id, worker, self)
        self._pending[request_id] = pending

        worker.signals.translation_result.connect(pending.on_translation_result)
        worker.signals.error.connect(pending.on_translation_error)
        worker.signals.finished.connect(pending.on_finished)

        logger.info("Started translation request %d (%s)", request_id, request.langpair)
        self.thread_pool.start(worker)

    def cancel(self) -> None:
        """Abandon the request in flight and return to Idle."""
        request_id = self._active_request_id
        if request_id is None:
            return

        self._active_request_id = None
        pending = self._pending.get(request_id)
        if pending is not None:
            pending.worker.cancel()
            if self.thread_pool.tryTake(pending.worker):
                # Never started, so it will not report finished
                self._release(request_id)

        logger.info("Cancelled translation request %d", request_id)
        self._set_state(Idle())

    def _handle_translation_result(self, result: TranslationResult, request_id: int) -> None:
        """
        Handle a service result (runs in the controller's thread).

        Args:
            result: Translation result object
            request_id: ID of the request that produced this result
        """
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale translation result (request %d, current %s)",
                request_id,
                self._active_request_id,
            )
            return

        self._active_request_id = None

        if result.is_error:
            self._fail(result.error_kind, result.error or "Unknown error", request_id)
            return

        logger.info("Translation request %d succeeded", request_id)
        self._set_state(Succeeded(result.text))

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        """
        Handle an unexpected worker exception.

        Args:
            error: Error message
            request_id: ID of the request that produced this error
        """
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale translation error (request %d, current %s)",
                request_id,
                self._active_request_id,
            )
            return

        self._active_request_id = None
        self._fail(ErrorKind.NETWORK_ERROR, error, request_id)

    def _fail(self, error_kind: ErrorKind, message: str, request_id: int) -> None:
        logger.info("Translation request %d failed (%s): %s", request_id, error_kind.value, message)
        self._set_state(Failed(error_kind, message))

    def _release(self, request_id: int) -> None:
        self._pending.pop(request_id, None)

    def _set_state(self, state: RequestState) -> None:
        logger.debug("State %s -> %s", type(self._state).__name__, type(state).__name__)
        self._state = state
        self.state_changed.emit(state)
