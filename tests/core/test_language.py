"""Unit tests for Language entities and catalogs."""

from lingo_desk.core import (
    AUTO_DETECT,
    ENGLISH,
    Language,
    find_language,
    source_languages,
    target_languages,
)


class TestLanguage:
    """Tests for Language identity."""

    def test_equality_uses_code_only(self):
        assert Language("en", "English") == Language("en", "Anglais")

    def test_hash_uses_code_only(self):
        assert len({Language("fr", "French"), Language("fr", "Français")}) == 1

    def test_auto_detect_is_auto(self):
        assert AUTO_DETECT.is_auto
        assert not ENGLISH.is_auto


class TestLanguageCatalogs:
    """Tests for source/target language lists."""

    def test_source_languages_include_auto(self):
        assert AUTO_DETECT in source_languages()

    def test_target_languages_exclude_auto(self):
        targets = target_languages()
        assert AUTO_DETECT not in targets
        assert len(targets) == len(source_languages()) - 1

    def test_find_language_by_code(self):
        assert find_language("zh-CN").name == "Chinese (Simplified)"

    def test_find_language_unknown_returns_none(self):
        assert find_language("xx") is None
