"""Main Window - language pickers, source/result panes and status line."""

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from lingo_desk.core import Language, source_languages, target_languages


class MainWindow(QMainWindow):
    """Provides the translator window. Holds no translation logic itself."""

    source_text_changed = Signal(str)
    source_language_selected = Signal(object)  # Language
    target_language_selected = Signal(object)  # Language
    swap_requested = Signal()
    clear_requested = Signal()
    settings_requested = Signal()
    speak_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("LingoDesk")
        self.setMinimumSize(750, 500)

        self._source_languages: List[Language] = source_languages()
        self._target_languages: List[Language] = target_languages()

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(12, 12, 12, 8)
        main_layout.setSpacing(8)

        # Language header
        header = QHBoxLayout()
        self.source_combo = QComboBox()
        for language in self._source_languages:
            self.source_combo.addItem(language.name, language.code)
        self.source_combo.currentIndexChanged.connect(self._on_source_index_changed)
        header.addWidget(self.source_combo, 1)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap Languages")
        self.swap_button.clicked.connect(self.swap_requested.emit)
        header.addWidget(self.swap_button)

        self.target_combo = QComboBox()
        for language in self._target_languages:
            self.target_combo.addItem(language.name, language.code)
        self.target_combo.currentIndexChanged.connect(self._on_target_index_changed)
        header.addWidget(self.target_combo, 1)

        self.settings_button = QPushButton("Settings")
        self.settings_button.clicked.connect(self.settings_requested.emit)
        header.addWidget(self.settings_button)
        main_layout.addLayout(header)

        # Text panes
        splitter = QSplitter()

        source_panel = QWidget()
        source_layout = QVBoxLayout(source_panel)
        source_layout.setContentsMargins(0, 0, 0, 0)
        self.source_edit = QPlainTextEdit()
        self.source_edit.setPlaceholderText("Enter text to translate")
        self.source_edit.textChanged.connect(self._on_source_edited)
        source_layout.addWidget(self.source_edit)

        source_footer = QHBoxLayout()
        self.character_count_label = QLabel("0 characters")
        self.character_count_label.setStyleSheet("color: gray;")
        source_footer.addWidget(self.character_count_label)
        source_footer.addStretch()
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_requested.emit)
        source_footer.addWidget(self.clear_button)
        source_layout.addLayout(source_footer)
        splitter.addWidget(source_panel)

        result_panel = QWidget()
        result_layout = QVBoxLayout(result_panel)
        result_layout.setContentsMargins(0, 0, 0, 0)
        self.result_edit = QPlainTextEdit()
        self.result_edit.setReadOnly(True)
        self.result_edit.setPlaceholderText("Translation")
        result_layout.addWidget(self.result_edit)

        result_footer = QHBoxLayout()
        result_footer.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_translation_to_clipboard)
        result_footer.addWidget(self.copy_button)
        self.speak_button = QPushButton("Speak")
        self.speak_button.setToolTip("Read the translation aloud")
        self.speak_button.clicked.connect(self.speak_requested.emit)
        result_footer.addWidget(self.speak_button)
        result_layout.addLayout(result_footer)
        splitter.addWidget(result_panel)

        main_layout.addWidget(splitter, 1)

        # Status line
        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

    def _create_menu_bar(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")

        settings_action = QAction("&Settings...", self)
        settings_action.setShortcut("Ctrl+,")
        settings_action.triggered.connect(self.settings_requested.emit)
        file_menu.addAction(settings_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def _on_source_edited(self):
        self.source_text_changed.emit(self.source_edit.toPlainText())

    def _on_source_index_changed(self, index: int):
        if 0 <= index < len(self._source_languages):
            self.source_language_selected.emit(self._source_languages[index])

    def _on_target_index_changed(self, index: int):
        if 0 <= index < len(self._target_languages):
            self.target_language_selected.emit(self._target_languages[index])

    def set_languages(self, source: Language, target: Language) -> None:
        """Reflect the coordinator's language pair without re-emitting selections."""
        self._select_code(self.source_combo, source.code)
        self._select_code(self.target_combo, target.code)

    def set_source_text(self, text: str) -> None:
        if self.source_edit.toPlainText() != text:
            self.source_edit.setPlainText(text)

    def set_translated_text(self, text: str) -> None:
        self.result_edit.setPlainText(text)

    def set_character_count(self, count: int) -> None:
        self.character_count_label.setText(f"{count} characters")

    def set_loading(self, loading: bool) -> None:
        if loading:
            self.status_label.setStyleSheet("color: gray;")
            self.status_label.setText("Translating...")
        elif self.status_label.text() == "Translating...":
            self.status_label.clear()

    def show_error(self, message: str) -> None:
        """Show an error in the status line; an empty message clears it."""
        if message:
            self.status_label.setStyleSheet("color: red;")
            self.status_label.setText(message)
        elif self.status_label.text() != "Translating...":
            self.status_label.clear()

    def copy_translation_to_clipboard(self) -> None:
        text = self.result_edit.toPlainText()
        if text:
            QGuiApplication.clipboard().setText(text)

    @staticmethod
    def _select_code(combo: QComboBox, code: str) -> None:
        index = combo.findData(code)
        if index >= 0 and index != combo.currentIndex():
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)
