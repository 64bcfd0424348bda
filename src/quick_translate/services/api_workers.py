"""Async workers for non-blocking API calls using Qt threading."""

import logging
import threading

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from quick_translate.core import TranslationRequest
from quick_translate.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs a translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails. A cancelled worker
    still runs to completion if it already started, but only reports
    ``finished``.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self._cancelled = threading.Event()
        # Owner keeps the reference until finished so cancel()/tryTake() stay safe
        self.setAutoDelete(False)

    def cancel(self) -> None:
        """Stop this worker from reporting its result."""
        self._cancelled.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.request)
            if not self.is_cancelled:
                self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            logger.exception("Translation worker failed")
            if not self.is_cancelled:
                self.signals.error.emit(f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()
