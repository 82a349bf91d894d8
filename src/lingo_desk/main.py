"""Main entry point for the LingoDesk application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from lingo_desk.coordinators import SettingsCoordinator, TranslationCoordinator
from lingo_desk.services import (
    ModelCatalog,
    SettingsManager,
    SpeechService,
    TranslationService,
    default_adapters,
)
from lingo_desk.ui import MainWindow, SettingsDialog


def wire_settings_dialog(dialog: SettingsDialog, coordinator: SettingsCoordinator) -> None:
    """Connect dialog edits to the settings coordinator and its state back to the dialog."""
    dialog.provider_selected.connect(coordinator.set_provider)
    dialog.api_key_edited.connect(coordinator.set_api_key)
    dialog.host_edited.connect(coordinator.set_openai_host)
    dialog.editing_finished.connect(coordinator.flush_pending_edits)
    dialog.model_selected.connect(coordinator.select_model)
    dialog.restore_defaults_clicked.connect(coordinator.restore_defaults)
    dialog.restore_defaults_clicked.connect(dialog.show_restored_notice)

    def refresh_enabled(*_):
        dialog.set_model_selection_enabled(not coordinator.is_model_selection_disabled)

    coordinator.draft_changed.connect(dialog.set_settings)
    coordinator.models_changed.connect(
        lambda models: dialog.set_models(models, coordinator.selected_model_id)
    )
    coordinator.selected_model_changed.connect(dialog.set_selected_model)
    coordinator.loading_changed.connect(
        lambda loading: dialog.set_loading(loading, coordinator.draft.provider)
    )
    coordinator.model_error_changed.connect(
        lambda message: dialog.show_model_error(message) if message else None
    )
    coordinator.models_changed.connect(refresh_enabled)
    coordinator.loading_changed.connect(refresh_enabled)

    def on_save():
        coordinator.flush_pending_edits()
        coordinator.save()
        dialog.accept()

    dialog.save_clicked.connect(on_save)
    dialog.cancel_clicked.connect(dialog.reject)
    # Esc and the close button reject without a Cancel click
    dialog.rejected.connect(coordinator.revert)


def wire_main_window(main_window: MainWindow, coordinator: TranslationCoordinator) -> None:
    main_window.source_text_changed.connect(coordinator.on_source_text_changed)
    main_window.source_language_selected.connect(coordinator.set_source_language)
    main_window.target_language_selected.connect(coordinator.set_target_language)
    main_window.swap_requested.connect(coordinator.swap_languages)
    main_window.clear_requested.connect(coordinator.clear)
    main_window.speak_requested.connect(coordinator.speak_translation)

    coordinator.translation_completed.connect(main_window.set_translated_text)
    coordinator.translation_failed.connect(lambda _: main_window.set_translated_text(""))
    coordinator.loading_changed.connect(main_window.set_loading)
    coordinator.error_message_changed.connect(main_window.show_error)
    coordinator.character_count_changed.connect(main_window.set_character_count)
    coordinator.languages_changed.connect(main_window.set_languages)
    coordinator.source_text_reset.connect(lambda: main_window.set_source_text(""))

    main_window.set_languages(coordinator.source_language, coordinator.target_language)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("LingoDesk")
    app.setOrganizationName("LingoDesk")

    # 2. Initialize Services
    settings_manager = SettingsManager()
    adapters = default_adapters()
    translation_service = TranslationService(adapters=adapters)
    catalog = ModelCatalog(adapters=adapters)

    # 3. Construct UI
    main_window = MainWindow()
    settings_dialog = SettingsDialog(main_window)

    # 4. Instantiate Coordinators (Dependency Injection)
    settings_coordinator = SettingsCoordinator(settings_manager=settings_manager, catalog=catalog)
    translation_coordinator = TranslationCoordinator(
        translation_service=translation_service,
        settings=settings_manager.load(),
        speech_service=SpeechService(),
    )

    # 5. Signal Wiring
    wire_main_window(main_window, translation_coordinator)
    wire_settings_dialog(settings_dialog, settings_coordinator)
    settings_coordinator.settings_saved.connect(translation_coordinator.on_settings_changed)
    main_window.settings_requested.connect(settings_dialog.open)

    settings_coordinator.start()

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
