"""Domain layer - languages, provider entities, settings values and errors."""

from .app_settings import AppSettings
from .errors import ProviderError, ProviderErrorKind
from .language import (
    AUTO_DETECT,
    ENGLISH,
    SUPPORTED_LANGUAGES,
    Language,
    find_language,
    source_languages,
    target_languages,
)
from .provider import (
    DEFAULT_OPENAI_HOST,
    ModelDescriptor,
    ProviderCredential,
    ProviderType,
    TranslationRequest,
    TranslationResult,
)

__all__ = [
    "AppSettings",
    "ProviderError",
    "ProviderErrorKind",
    "Language",
    "AUTO_DETECT",
    "ENGLISH",
    "SUPPORTED_LANGUAGES",
    "find_language",
    "source_languages",
    "target_languages",
    "DEFAULT_OPENAI_HOST",
    "ModelDescriptor",
    "ProviderCredential",
    "ProviderType",
    "TranslationRequest",
    "TranslationResult",
]
