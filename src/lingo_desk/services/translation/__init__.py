"""Translation services - provider adapters and the translation orchestrator."""

from lingo_desk.services.translation.provider_adapter import ProviderAdapter
from lingo_desk.services.translation.openai_adapter import OpenAIAdapter
from lingo_desk.services.translation.gemini_adapter import GeminiAdapter
from lingo_desk.services.translation.translation_service import TranslationService, default_adapters

__all__ = [
    "ProviderAdapter",
    "OpenAIAdapter",
    "GeminiAdapter",
    "TranslationService",
    "default_adapters",
]
