"""Speech Service - reads translated text aloud with Qt's text-to-speech engine."""

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QLocale
from PySide6.QtTextToSpeech import QTextToSpeech


logger = logging.getLogger(__name__)


def find_voice_locale(language_code: str, locales: Iterable[QLocale]) -> Optional[QLocale]:
    """
    Pick the engine locale for a language code.

    An exact match ("zh-CN" -> zh_CN) wins; otherwise the first locale sharing
    the two-letter language prefix is used. None leaves the engine default.
    """
    wanted = language_code.replace("-", "_")
    candidates = list(locales)

    for locale in candidates:
        if locale.name() == wanted:
            return locale

    prefix = language_code[:2]
    for locale in candidates:
        if locale.name().split("_")[0] == prefix:
            return locale
    return None


class SpeechService:
    """Speaks text in a target language, interrupting anything already playing."""

    def __init__(self, engine: Optional[QTextToSpeech] = None):
        self._engine = engine

    @property
    def engine(self) -> QTextToSpeech:
        if self._engine is None:
            self._engine = QTextToSpeech()
        return self._engine

    def speak(self, text: str, language_code: str) -> bool:
        """
        Read text aloud.

        Returns:
            False when there was nothing to say.
        """
        if not text:
            return False

        engine = self.engine
        engine.stop()

        locale = find_voice_locale(language_code, engine.availableLocales())
        if locale is not None:
            engine.setLocale(locale)
        else:
            logger.debug("No voice for %s, using the engine default", language_code)

        engine.say(text)
        return True

    def stop(self) -> None:
        if self._engine is not None:
            self._engine.stop()
