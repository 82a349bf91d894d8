"""Translation Coordinator - debounced input pipeline between the main window and the translation service."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from lingo_desk.core import AUTO_DETECT, ENGLISH, AppSettings, Language
from lingo_desk.services import SpeechService, TranslationService, TranslationWorker


logger = logging.getLogger(__name__)

SWAP_AUTO_ERROR = "Cannot swap languages when 'Auto Detect' is selected as the source."


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, request_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.request_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.request_id)
            except RuntimeError:
                pass


class TranslationCoordinator(QObject):
    """
    Owns the main window's translation state.

    Responsibilities:
    - Coalesce rapid text edits into one translation after a quiet period.
    - Resolve no-op cases (blank text, identical languages) without a worker.
    - Run real translations on the thread pool, one request id per dispatch.
    - Drop responses whose request id is no longer the latest.
    """

    DEBOUNCE_INTERVAL_MS = 750
    TRANSIENT_ERROR_MS = 3000

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    loading_changed = Signal(bool)
    error_message_changed = Signal(str)
    character_count_changed = Signal(int)
    languages_changed = Signal(object, object)
    source_text_reset = Signal()

    def __init__(
        self,
        translation_service: TranslationService,
        settings: AppSettings,
        thread_pool: Optional[QThreadPool] = None,
        speech_service: Optional[SpeechService] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.settings = settings
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()
        self.speech_service = speech_service

        self.source_text = ""
        self.translated_text = ""
        self.source_language: Language = AUTO_DETECT
        self.target_language: Language = ENGLISH
        self.is_loading = False
        self.error_message: Optional[str] = None

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(self.DEBOUNCE_INTERVAL_MS)
        self._debounce_timer.timeout.connect(self.perform_translation)

        # Only the latest request may update state; older completions are stale.
        self._active_request_id: Optional[int] = None
        self._request_counter = 0
        self._request_helper: Optional[_TranslationRequest] = None

    def on_source_text_changed(self, text: str) -> None:
        """Called on every edit of the source pane; restarts the debounce timer."""
        self.source_text = text
        self.character_count_changed.emit(len(text))
        self._debounce_timer.start()

    def set_source_language(self, language: Language) -> None:
        if language == self.source_language:
            return
        self.source_language = language
        self.languages_changed.emit(self.source_language, self.target_language)
        self._schedule_if_text()

    def set_target_language(self, language: Language) -> None:
        if language == self.target_language:
            return
        self.target_language = language
        self.languages_changed.emit(self.source_language, self.target_language)
        self._schedule_if_text()

    def swap_languages(self) -> None:
        """Swap source and target; refused while the source is Auto Detect."""
        if self.source_language.is_auto:
            self._set_error(SWAP_AUTO_ERROR)
            QTimer.singleShot(self.TRANSIENT_ERROR_MS, self._clear_swap_error)
            return

        self.source_language, self.target_language = self.target_language, self.source_language
        self.languages_changed.emit(self.source_language, self.target_language)

        if self.source_text:
            self._debounce_timer.stop()
            self.perform_translation()

    def clear(self) -> None:
        """Clear both panes and forget any in-flight request."""
        self._debounce_timer.stop()
        self._active_request_id = None
        self.source_text = ""
        self.character_count_changed.emit(0)
        self.source_text_reset.emit()
        self._set_loading(False)
        self._set_translated("")

    def speak_translation(self) -> None:
        """Read the current translation aloud in the target language."""
        if self.speech_service is None or not self.translated_text:
            return
        self.speech_service.speak(self.translated_text, self.target_language.code)

    def on_settings_changed(self, settings: AppSettings) -> None:
        """Adopt a new settings snapshot and re-translate any existing text."""
        self.settings = settings
        if self.source_text:
            self._debounce_timer.stop()
            self.perform_translation()

    @Slot()
    def perform_translation(self) -> None:
        """Translate the current source text with the current settings."""
        request = self.settings.build_request(self.source_text, self.source_language, self.target_language)

        local = self.translation_service.local_result(request)
        if local is not None:
            self._active_request_id = None
            self._set_loading(False)
            self._set_translated(local.translated_text)
            return

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_error(None)
        self._set_loading(True)
        self.translation_started.emit()

        worker = TranslationWorker(translation_service=self.translation_service, request=request)

        # Keep a reference so the helper isn't garbage collected while the worker runs
        request_helper = _TranslationRequest(request_id, self)
        self._request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale translation result (request %s, current %s)",
                         request_id, self._active_request_id)
            return

        self._active_request_id = None
        self._set_loading(False)
        self._set_translated(result.translated_text)

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale translation error (request %s, current %s)",
                         request_id, self._active_request_id)
            return

        self._active_request_id = None
        self._set_loading(False)
        self.translated_text = ""
        self._set_error(error)
        self.translation_failed.emit(error)

    def _schedule_if_text(self) -> None:
        if self.source_text:
            self._debounce_timer.start()

    def _set_translated(self, text: str) -> None:
        self.translated_text = text
        self.translation_completed.emit(text)

    def _set_loading(self, loading: bool) -> None:
        if loading == self.is_loading:
            return
        self.is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, message: Optional[str]) -> None:
        self.error_message = message
        self.error_message_changed.emit(message or "")

    def _clear_swap_error(self) -> None:
        if self.error_message == SWAP_AUTO_ERROR:
            self._set_error(None)
