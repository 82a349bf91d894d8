"""Settings Dialog - provider selection, API keys, OpenAI host and model picker."""

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from lingo_desk.core import DEFAULT_OPENAI_HOST, AppSettings, ModelDescriptor, ProviderType


class SettingsDialog(QDialog):
    """Modal settings editor. Emits edits; the settings coordinator owns the state."""

    provider_selected = Signal(object)  # ProviderType
    api_key_edited = Signal(object, str)  # ProviderType, key
    host_edited = Signal(str)
    model_selected = Signal(str)
    editing_finished = Signal()
    save_clicked = Signal()
    cancel_clicked = Signal()
    restore_defaults_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(460)
        self._providers: List[ProviderType] = list(ProviderType)

        layout = QVBoxLayout(self)

        provider_form = QFormLayout()
        self.provider_combo = QComboBox()
        for provider in self._providers:
            self.provider_combo.addItem(provider.value, provider.value)
        self.provider_combo.currentIndexChanged.connect(self._on_provider_index_changed)
        provider_form.addRow("Translation Provider", self.provider_combo)
        layout.addLayout(provider_form)

        # OpenAI
        self.openai_group = QGroupBox("OpenAI Configuration")
        openai_form = QFormLayout(self.openai_group)
        self.openai_key_edit = QLineEdit()
        self.openai_key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.openai_key_edit.textEdited.connect(
            lambda text: self.api_key_edited.emit(ProviderType.OPENAI, text)
        )
        self.openai_key_edit.editingFinished.connect(self.editing_finished.emit)
        openai_form.addRow("API Key", self.openai_key_edit)

        self.openai_host_edit = QLineEdit()
        self.openai_host_edit.setPlaceholderText(DEFAULT_OPENAI_HOST)
        self.openai_host_edit.textEdited.connect(self.host_edited.emit)
        self.openai_host_edit.editingFinished.connect(self.editing_finished.emit)
        openai_form.addRow("API Host (Optional)", self.openai_host_edit)
        layout.addWidget(self.openai_group)

        # Gemini
        self.gemini_group = QGroupBox("Gemini Configuration")
        gemini_form = QFormLayout(self.gemini_group)
        self.gemini_key_edit = QLineEdit()
        self.gemini_key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.gemini_key_edit.textEdited.connect(
            lambda text: self.api_key_edited.emit(ProviderType.GEMINI, text)
        )
        self.gemini_key_edit.editingFinished.connect(self.editing_finished.emit)
        gemini_form.addRow("API Key", self.gemini_key_edit)
        layout.addWidget(self.gemini_group)

        # Model
        model_form = QFormLayout()
        self.model_combo = QComboBox()
        self.model_combo.currentIndexChanged.connect(self._on_model_index_changed)
        model_form.addRow("Model", self.model_combo)
        layout.addLayout(model_form)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        buttons = QHBoxLayout()
        self.restore_button = QPushButton("Restore Defaults")
        self.restore_button.clicked.connect(self.restore_defaults_clicked.emit)
        buttons.addWidget(self.restore_button)
        buttons.addStretch()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.cancel_clicked.emit)
        buttons.addWidget(self.cancel_button)
        self.save_button = QPushButton("Save")
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self.save_clicked.emit)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

    def set_settings(self, settings: AppSettings) -> None:
        """Populate every field from a settings snapshot without emitting edits."""
        self.blockSignals(True)
        provider = settings.provider or ProviderType.OPENAI
        self.provider_combo.setCurrentIndex(self._providers.index(provider))
        self.openai_key_edit.setText(settings.openai_api_key)
        self.openai_host_edit.setText(settings.openai_host)
        self.gemini_key_edit.setText(settings.gemini_api_key)
        self.blockSignals(False)
        self._show_provider_group(provider)

    def set_models(self, models: List[ModelDescriptor], selected_id: str) -> None:
        self.model_combo.blockSignals(True)
        self.model_combo.clear()
        if not models:
            self.model_combo.addItem("No models available", "")
        for model in models:
            self.model_combo.addItem(model.id, model.id)
        index = self.model_combo.findData(selected_id)
        self.model_combo.setCurrentIndex(index if index >= 0 else 0)
        self.model_combo.blockSignals(False)

    def set_selected_model(self, model_id: str) -> None:
        index = self.model_combo.findData(model_id)
        if index >= 0:
            self.model_combo.blockSignals(True)
            self.model_combo.setCurrentIndex(index)
            self.model_combo.blockSignals(False)

    def set_loading(self, loading: bool, provider: ProviderType) -> None:
        if loading:
            self.status_label.setStyleSheet("color: orange;")
            self.status_label.setText(f"Fetching {provider.value} models...")
        elif self.status_label.text().startswith("Fetching"):
            self.status_label.clear()

    def show_model_error(self, message: str) -> None:
        self.status_label.setStyleSheet("color: red;")
        self.status_label.setText(message)

    def set_model_selection_enabled(self, enabled: bool) -> None:
        self.model_combo.setEnabled(enabled)

    def _show_provider_group(self, provider: ProviderType) -> None:
        self.openai_group.setVisible(provider is ProviderType.OPENAI)
        self.gemini_group.setVisible(provider is ProviderType.GEMINI)

    def _on_provider_index_changed(self, index: int):
        if 0 <= index < len(self._providers):
            provider = self._providers[index]
            self._show_provider_group(provider)
            self.provider_selected.emit(provider)

    def _on_model_index_changed(self, index: int):
        model_id = self.model_combo.itemData(index)
        if model_id:
            self.model_selected.emit(model_id)

    def show_restored_notice(self) -> None:
        QMessageBox.information(
            self,
            "Settings Reset",
            "All settings have been restored to their default values.",
        )
