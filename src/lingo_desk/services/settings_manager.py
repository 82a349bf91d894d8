"""Settings Manager - persisted provider settings with .env defaults."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from PySide6.QtCore import QSettings

from lingo_desk.core import DEFAULT_OPENAI_HOST, AppSettings, ProviderType


logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "LingoDesk"
APPLICATION_NAME = "LingoDesk"

KEY_SELECTED_SERVICE = "selectedService"
KEY_OPENAI_API_KEY = "openAIAPIKey"
KEY_OPENAI_HOST = "openAIHost"
KEY_OPENAI_MODEL = "openAIModel"
KEY_GEMINI_API_KEY = "geminiAPIKey"
KEY_GEMINI_MODEL = "geminiModel"


class SettingsManager:
    """
    Loads and saves provider settings.

    Values saved by the user live in QSettings as plain strings. API keys and
    the OpenAI host fall back to OPENAI_API_KEY, OPENAI_HOST and GEMINI_API_KEY
    from the project's .env file when nothing has been saved yet.
    """

    def __init__(self, project_root: Optional[Path] = None, settings_path: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
            settings_path: INI file to persist into. If None, the platform's
                           native settings store is used.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=project_root / ".env")

        if settings_path is None:
            self._store = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        else:
            self._store = QSettings(str(settings_path), QSettings.Format.IniFormat)

    def get_env_api_key(self, provider: ProviderType) -> Optional[str]:
        """Get a provider's API key from the environment."""
        name = "OPENAI_API_KEY" if provider is ProviderType.OPENAI else "GEMINI_API_KEY"
        return _env_value(name)

    def get_env_openai_host(self) -> Optional[str]:
        return _env_value("OPENAI_HOST")

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)

    def defaults(self) -> AppSettings:
        """Settings used on first launch and by restore_defaults."""
        return AppSettings(
            provider=ProviderType.OPENAI,
            openai_api_key=self.get_env_api_key(ProviderType.OPENAI) or "",
            openai_host=self.get_env_openai_host() or DEFAULT_OPENAI_HOST,
            openai_model_id="",
            gemini_api_key=self.get_env_api_key(ProviderType.GEMINI) or "",
            gemini_model_id="",
        )

    def load(self) -> AppSettings:
        """Read saved settings, falling back to defaults key by key."""
        defaults = self.defaults()
        provider = ProviderType.parse(self._read(KEY_SELECTED_SERVICE)) or ProviderType.OPENAI
        return AppSettings(
            provider=provider,
            openai_api_key=self._read(KEY_OPENAI_API_KEY, defaults.openai_api_key),
            openai_host=self._read(KEY_OPENAI_HOST) or defaults.openai_host,
            openai_model_id=self._read(KEY_OPENAI_MODEL),
            gemini_api_key=self._read(KEY_GEMINI_API_KEY, defaults.gemini_api_key),
            gemini_model_id=self._read(KEY_GEMINI_MODEL),
        )

    def save(self, settings: AppSettings) -> None:
        """Persist every field. The host is saved as typed, even if empty."""
        provider = settings.provider or ProviderType.OPENAI
        self._store.setValue(KEY_SELECTED_SERVICE, provider.value)
        self._store.setValue(KEY_OPENAI_API_KEY, settings.openai_api_key)
        self._store.setValue(KEY_OPENAI_HOST, settings.openai_host)
        self._store.setValue(KEY_OPENAI_MODEL, settings.openai_model_id)
        self._store.setValue(KEY_GEMINI_API_KEY, settings.gemini_api_key)
        self._store.setValue(KEY_GEMINI_MODEL, settings.gemini_model_id)
        self._store.sync()
        logger.info("Saved settings (service=%s)", provider.value)

    def restore_defaults(self) -> AppSettings:
        """Reset stored values to defaults and return them."""
        self._store.clear()
        defaults = self.defaults()
        self.save(defaults)
        return defaults

    def _read(self, key: str, default: str = "") -> str:
        if not self._store.contains(key):
            return default
        value = self._store.value(key, default)
        return "" if value is None else str(value)


def _env_value(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None
