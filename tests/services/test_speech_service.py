"""Unit tests for SpeechService voice selection."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QLocale

from lingo_desk.services import SpeechService, find_voice_locale


@pytest.fixture
def engine():
    engine = MagicMock()
    engine.availableLocales = MagicMock(return_value=[
        QLocale("en_US"),
        QLocale("fr_FR"),
        QLocale("zh_TW"),
        QLocale("zh_CN"),
    ])
    return engine


class TestFindVoiceLocale:

    def test_exact_region_match_wins(self, engine):
        locale = find_voice_locale("zh-CN", engine.availableLocales())
        assert locale.name() == "zh_CN"

    def test_falls_back_to_language_prefix(self, engine):
        locale = find_voice_locale("fr", engine.availableLocales())
        assert locale.name() == "fr_FR"

    def test_unknown_language_has_no_locale(self, engine):
        assert find_voice_locale("ja", engine.availableLocales()) is None


class TestSpeechService:

    def test_speak_stops_current_speech_before_saying(self, engine):
        service = SpeechService(engine=engine)

        assert service.speak("Bonjour", "fr")

        assert [c[0] for c in engine.method_calls if c[0] in ("stop", "say")] == ["stop", "say"]
        engine.setLocale.assert_called_once()
        assert engine.setLocale.call_args.args[0].name() == "fr_FR"
        engine.say.assert_called_once_with("Bonjour")

    def test_missing_voice_keeps_engine_default(self, engine):
        service = SpeechService(engine=engine)

        service.speak("こんにちは", "ja")

        engine.setLocale.assert_not_called()
        engine.say.assert_called_once_with("こんにちは")

    def test_empty_text_is_not_spoken(self, engine):
        service = SpeechService(engine=engine)

        assert not service.speak("", "fr")

        engine.stop.assert_not_called()
        engine.say.assert_not_called()
