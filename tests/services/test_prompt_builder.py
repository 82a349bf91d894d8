"""Unit tests for the system prompt builder."""

from lingo_desk.core import AUTO_DETECT, Language
from lingo_desk.services import build_system_prompt


ENGLISH = Language("en", "English")
FRENCH = Language("fr", "French")

DETECTION_SUBSTRING = "you must first attempt to detect the language"


class TestBuildSystemPrompt:
    """Tests for prompt content and ordering."""

    def test_auto_source_includes_detection_instruction(self):
        prompt = build_system_prompt(AUTO_DETECT, FRENCH)
        assert DETECTION_SUBSTRING in prompt
        assert "from the detected language to French" in prompt

    def test_concrete_source_has_no_detection_instruction(self):
        prompt = build_system_prompt(ENGLISH, FRENCH)
        assert DETECTION_SUBSTRING not in prompt
        assert "from English to French" in prompt

    def test_rules_are_numbered_in_order(self):
        prompt = build_system_prompt(ENGLISH, FRENCH)
        positions = [prompt.index(f"{n}.  ") for n in range(1, 5)]
        assert positions == sorted(positions)

    def test_rules_follow_role_statement(self):
        prompt = build_system_prompt(ENGLISH, FRENCH)
        assert prompt.index("expert translator") < prompt.index("Follow these rules strictly")

    def test_rules_cover_output_formatting_terms_and_idiom(self):
        prompt = build_system_prompt(ENGLISH, FRENCH)
        assert "ONLY be the translated text" in prompt
        assert "line breaks" in prompt
        assert "proper nouns" in prompt
        assert "idiomatically" in prompt

    def test_prompt_is_deterministic(self):
        assert build_system_prompt(AUTO_DETECT, FRENCH) == build_system_prompt(AUTO_DETECT, FRENCH)
