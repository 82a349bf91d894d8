"""Settings Coordinator - explicit state machine for provider settings and model discovery."""

import logging
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Deque, Dict, List, Optional, Tuple

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from lingo_desk.core import AppSettings, ModelDescriptor, ProviderType
from lingo_desk.services import ModelCatalog, ModelListWorker, SettingsManager, sort_models


logger = logging.getLogger(__name__)


class SettingsEventKind(Enum):
    SERVICE_CHANGED = "service_changed"
    CREDENTIAL_CHANGED = "credential_changed"
    HOST_CHANGED = "host_changed"


class ModelAction(Enum):
    CLEAR_MODELS = "clear_models"
    REFETCH_MODELS = "refetch_models"
    NOOP = "noop"


@dataclass(frozen=True)
class SettingsEvent:
    """A settings change; provider is set for CREDENTIAL_CHANGED."""

    kind: SettingsEventKind
    provider: Optional[ProviderType] = None


def _missing_key(provider: ProviderType) -> str:
    return f"{provider.value} API Key is missing."


MISSING_HOST = "OpenAI API Host is missing."
UNSUPPORTED_SERVICE = "The selected translation service is not supported."


def resolve_model_action(event: SettingsEvent, settings: AppSettings) -> Tuple[ModelAction, Optional[str]]:
    """
    Decide what to do with the model list after a settings event.

    Pure function of the event and the draft settings, so every ordering of
    events ends in the same state.

    Returns:
        (action, message) where message explains a CLEAR_MODELS action.
    """
    selected = settings.provider
    if selected is None:
        return ModelAction.CLEAR_MODELS, UNSUPPORTED_SERVICE

    if event.kind is SettingsEventKind.CREDENTIAL_CHANGED and event.provider is not selected:
        return ModelAction.NOOP, None
    if event.kind is SettingsEventKind.HOST_CHANGED and selected is not ProviderType.OPENAI:
        return ModelAction.NOOP, None

    has_key = bool(settings.api_key_for(selected).strip())
    has_host = selected is not ProviderType.OPENAI or bool(settings.openai_host.strip())

    if event.kind is SettingsEventKind.HOST_CHANGED and not has_host:
        return ModelAction.CLEAR_MODELS, MISSING_HOST
    if not has_key:
        return ModelAction.CLEAR_MODELS, _missing_key(selected)
    if not has_host:
        return ModelAction.CLEAR_MODELS, MISSING_HOST
    return ModelAction.REFETCH_MODELS, None


class _ModelListRequest(QObject):
    """Helper class to hold model fetch context and handle results safely."""

    def __init__(self, request_id: int, parent: "SettingsCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_models_result(self, models):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_models_result(models, self.request_id)
            except RuntimeError:
                pass

    @Slot(str)
    def on_models_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_models_error(error, self.request_id)
            except RuntimeError:
                pass


class SettingsCoordinator(QObject):
    """
    Orchestrates the settings dialog.

    Edits update a draft AppSettings. Service changes post an event at once;
    key and host edits are debounced and de-duplicated before posting. Events
    are drained serially from a queue and each one yields a ModelAction.
    """

    EDIT_DEBOUNCE_MS = 500

    draft_changed = Signal(object)  # AppSettings
    models_changed = Signal(object)  # List[ModelDescriptor]
    selected_model_changed = Signal(str)
    loading_changed = Signal(bool)
    model_error_changed = Signal(str)
    settings_saved = Signal(object)  # AppSettings

    def __init__(
        self,
        settings_manager: SettingsManager,
        catalog: ModelCatalog,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.settings_manager = settings_manager
        self.catalog = catalog
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self.draft: AppSettings = settings_manager.load()
        self.models: List[ModelDescriptor] = []
        self.is_loading_models = False
        self.model_error_message: Optional[str] = None

        self._queue: Deque[SettingsEvent] = deque()
        self._processing = False

        self._pending_edits: Dict[SettingsEvent, None] = {}
        self._last_posted: Dict[SettingsEvent, str] = {}
        self._edit_timer = QTimer(self)
        self._edit_timer.setSingleShot(True)
        self._edit_timer.setInterval(self.EDIT_DEBOUNCE_MS)
        self._edit_timer.timeout.connect(self.flush_pending_edits)

        self._active_fetch_id: Optional[int] = None
        self._fetch_counter = 0
        self._fetch_helper: Optional[_ModelListRequest] = None

    def start(self) -> None:
        """Load the models for the stored settings. Call once after wiring signals."""
        self._reset_draft(self.settings_manager.load())

    @property
    def is_model_selection_disabled(self) -> bool:
        provider = self.draft.provider
        if self.is_loading_models:
            return True
        if self.models:
            return False
        missing_host = provider is ProviderType.OPENAI and not self.draft.openai_host.strip()
        return not self.draft.api_key_for(provider).strip() or missing_host

    @property
    def selected_model_id(self) -> str:
        return self.draft.model_id_for(self.draft.provider)

    def set_provider(self, provider: ProviderType) -> None:
        if provider is self.draft.provider:
            return
        self.draft = replace(self.draft, provider=provider)
        self.post_event(SettingsEvent(SettingsEventKind.SERVICE_CHANGED))

    def set_api_key(self, provider: ProviderType, api_key: str) -> None:
        self.draft = self.draft.with_api_key(provider, api_key)
        self._schedule_edit(SettingsEvent(SettingsEventKind.CREDENTIAL_CHANGED, provider))

    def set_openai_host(self, host: str) -> None:
        self.draft = replace(self.draft, openai_host=host)
        self._schedule_edit(SettingsEvent(SettingsEventKind.HOST_CHANGED))

    def select_model(self, model_id: str) -> None:
        provider = self.draft.provider
        if provider is None or model_id == self.selected_model_id:
            return
        self.draft = self.draft.with_model_id(provider, model_id)
        self.selected_model_changed.emit(model_id)

    @Slot()
    def flush_pending_edits(self) -> None:
        """Post debounced key/host edits whose value actually changed."""
        self._edit_timer.stop()
        pending = list(self._pending_edits)
        self._pending_edits.clear()
        for event in pending:
            value = self._field_value(event)
            if self._last_posted.get(event) == value:
                continue
            self._last_posted[event] = value
            self.post_event(event)

    def post_event(self, event: SettingsEvent) -> None:
        """Enqueue an event; events are processed one at a time, in order."""
        self._queue.append(event)
        if self._processing:
            return
        self._processing = True
        try:
            while self._queue:
                self._process(self._queue.popleft())
        finally:
            self._processing = False

    def save(self) -> None:
        self.settings_manager.save(self.draft)
        self.settings_saved.emit(self.draft)

    def revert(self) -> None:
        """Discard unsaved edits and reload the stored settings."""
        self._reset_draft(self.settings_manager.load())

    def restore_defaults(self) -> None:
        defaults = self.settings_manager.restore_defaults()
        self._reset_draft(defaults)
        self.settings_saved.emit(self.draft)

    def _reset_draft(self, settings: AppSettings) -> None:
        self._edit_timer.stop()
        self._pending_edits.clear()
        self.draft = settings
        self._last_posted = {
            SettingsEvent(SettingsEventKind.CREDENTIAL_CHANGED, ProviderType.OPENAI): settings.openai_api_key,
            SettingsEvent(SettingsEventKind.CREDENTIAL_CHANGED, ProviderType.GEMINI): settings.gemini_api_key,
            SettingsEvent(SettingsEventKind.HOST_CHANGED): settings.openai_host,
        }
        self.draft_changed.emit(self.draft)
        self.post_event(SettingsEvent(SettingsEventKind.SERVICE_CHANGED))

    def _schedule_edit(self, event: SettingsEvent) -> None:
        self._pending_edits[event] = None
        self._edit_timer.start()

    def _field_value(self, event: SettingsEvent) -> str:
        if event.kind is SettingsEventKind.HOST_CHANGED:
            return self.draft.openai_host
        return self.draft.api_key_for(event.provider)

    def _process(self, event: SettingsEvent) -> None:
        action, message = resolve_model_action(event, self.draft)
        logger.debug("Settings event %s -> %s", event.kind.value, action.value)

        if event.kind is SettingsEventKind.SERVICE_CHANGED:
            self._set_models([])

        if action is ModelAction.CLEAR_MODELS:
            self._active_fetch_id = None
            self._set_models([])
            self._set_selected_model("")
            self._set_loading(False)
            self._set_model_error(message)
        elif action is ModelAction.REFETCH_MODELS:
            self._start_fetch()

    def _start_fetch(self) -> None:
        provider = self.draft.provider

        self._fetch_counter += 1
        fetch_id = self._fetch_counter
        self._active_fetch_id = fetch_id

        self._set_model_error(None)
        self._set_loading(True)

        worker = ModelListWorker(
            catalog=self.catalog,
            provider=provider,
            credential=self.draft.credential_for(provider),
        )
        request_helper = _ModelListRequest(fetch_id, self)
        self._fetch_helper = request_helper

        worker.signals.models_result.connect(request_helper.on_models_result)
        worker.signals.error.connect(request_helper.on_models_error)

        self.thread_pool.start(worker)

    def _handle_models_result(self, models, fetch_id: int) -> None:
        if fetch_id != self._active_fetch_id:
            logger.debug("Ignoring stale model list (fetch %s, current %s)", fetch_id, self._active_fetch_id)
            return

        self._active_fetch_id = None
        ordered = sort_models(models)
        self._set_models(ordered)

        if not any(model.id == self.selected_model_id for model in ordered):
            self._set_selected_model(ordered[0].id if ordered else "")

        if not ordered:
            suffix = "API key/host" if self.draft.provider is ProviderType.OPENAI else "API key"
            self._set_model_error(f"No text models found for this {suffix}.")
        self._set_loading(False)

    def _handle_models_error(self, error: str, fetch_id: int) -> None:
        if fetch_id != self._active_fetch_id:
            logger.debug("Ignoring stale model list error (fetch %s, current %s)", fetch_id, self._active_fetch_id)
            return

        self._active_fetch_id = None
        self._set_models([])
        self._set_selected_model("")
        self._set_model_error(error)
        self._set_loading(False)

    def _set_models(self, models: List[ModelDescriptor]) -> None:
        if models == self.models:
            return
        self.models = models
        self.models_changed.emit(list(models))

    def _set_selected_model(self, model_id: str) -> None:
        provider = self.draft.provider
        if provider is None or model_id == self.selected_model_id:
            return
        self.draft = self.draft.with_model_id(provider, model_id)
        self.selected_model_changed.emit(model_id)

    def _set_loading(self, loading: bool) -> None:
        if loading == self.is_loading_models:
            return
        self.is_loading_models = loading
        self.loading_changed.emit(loading)

    def _set_model_error(self, message: Optional[str]) -> None:
        self.model_error_message = message
        self.model_error_changed.emit(message or "")
