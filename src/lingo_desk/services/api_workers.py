"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from lingo_desk.core import ProviderCredential, ProviderError, ProviderType, TranslationRequest
from lingo_desk.services.catalog import ModelCatalog
from lingo_desk.services.translation import TranslationService


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
    models_result = Signal(object)  # List[ModelDescriptor]


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation request in a background thread.

    Emits translation_result on success, error with a display string on failure.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.request)
            self.signals.translation_result.emit(result)
        except ProviderError as e:
            logger.info("Translation failed: %s", e.kind.value)
            self.signals.error.emit(str(e))
        except Exception as e:
            logger.exception("Unexpected translation error")
            self.signals.error.emit(f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()


class ModelListWorker(QRunnable):
    """Worker that fetches the model catalog for one provider."""

    def __init__(self, catalog: ModelCatalog, provider: ProviderType, credential: ProviderCredential):
        super().__init__()
        self.catalog = catalog
        self.provider = provider
        self.credential = credential
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the model listing call in background thread."""
        try:
            models = self.catalog.list_models(self.provider, self.credential)
            self.signals.models_result.emit(models)
        except ProviderError as e:
            self.signals.error.emit(f"Fetch Error: {e}")
        except Exception as e:
            logger.exception("Unexpected model listing error")
            self.signals.error.emit(f"Unexpected Error: {e}")
        finally:
            self.signals.finished.emit()
