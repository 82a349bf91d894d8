"""Language entity - translatable languages and the auto-detect sentinel."""

from dataclasses import dataclass, field
from typing import List, Optional


AUTO_CODE = "auto"


@dataclass(frozen=True)
class Language:
    """A language shown in the pickers, identified by its code.

    Attributes:
        code: ISO-style tag (e.g. "en", "zh-CN") or "auto".
        name: Display name used in the UI and in prompts.
    """

    code: str
    name: str = field(compare=False)

    @property
    def is_auto(self) -> bool:
        """True for the auto-detect sentinel."""
        return self.code == AUTO_CODE


AUTO_DETECT = Language(AUTO_CODE, "Auto Detect")
ENGLISH = Language("en", "English")

SUPPORTED_LANGUAGES: List[Language] = [
    ENGLISH,
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh-CN", "Chinese (Simplified)"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("ar", "Arabic"),
    AUTO_DETECT,
]


def source_languages() -> List[Language]:
    """All languages, including Auto Detect."""
    return list(SUPPORTED_LANGUAGES)


def target_languages() -> List[Language]:
    """Languages valid as a translation target (Auto Detect excluded)."""
    return [language for language in SUPPORTED_LANGUAGES if not language.is_auto]


def find_language(code: str) -> Optional[Language]:
    for language in SUPPORTED_LANGUAGES:
        if language.code == code:
            return language
    return None
