"""Model Catalog - lists the models usable for translation for a provider credential."""

import logging
from typing import Dict, Iterable, List, Optional

from lingo_desk.core import (
    ModelDescriptor,
    ProviderCredential,
    ProviderError,
    ProviderErrorKind,
    ProviderType,
)
from lingo_desk.services.translation import ProviderAdapter, default_adapters


logger = logging.getLogger(__name__)

OPENAI_EXCLUDED_KEYWORDS = (
    "vision",
    "image",
    "embed",
    "audio",
    "whisper",
    "tts",
    "davinci-002",
    "babbage-002",
    "ada",
    "curie",
)

GEMINI_INCLUDED_FAMILIES = (
    "gemini-1.0-pro",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "gemini-pro",
)


def is_openai_text_model(model_id: str) -> bool:
    """Keep "gpt" models that are not vision/audio/embedding/legacy variants."""
    lowered = model_id.lower()
    if any(keyword in lowered for keyword in OPENAI_EXCLUDED_KEYWORDS):
        return False
    return "gpt" in lowered


def is_gemini_text_model(model_id: str) -> bool:
    lowered = model_id.lower()
    return any(family in lowered for family in GEMINI_INCLUDED_FAMILIES) and "vision" not in lowered


def filter_openai_model_ids(model_ids: Iterable[str]) -> List[str]:
    return [model_id for model_id in model_ids if is_openai_text_model(model_id)]


def filter_gemini_model_names(names: Iterable[str]) -> List[str]:
    """Derive short ids from "models/<id>" names and keep the text models."""
    ids = (ModelDescriptor.from_gemini_name(name).id for name in names)
    return [model_id for model_id in ids if is_gemini_text_model(model_id)]


def sort_models(models: Iterable[ModelDescriptor]) -> List[ModelDescriptor]:
    """Ascending lexical order by id."""
    return sorted(models, key=lambda model: model.id)


_FILTERS = {
    ProviderType.OPENAI: is_openai_text_model,
    ProviderType.GEMINI: is_gemini_text_model,
}


class ModelCatalog:
    """
    Fetches a provider's models and filters them to text-generation models.

    Results keep the vendor's order; callers sort once with sort_models.
    """

    def __init__(self, adapters: Optional[Dict[ProviderType, ProviderAdapter]] = None):
        self._adapters = adapters if adapters is not None else default_adapters()

    def list_models(
        self, provider: Optional[ProviderType], credential: ProviderCredential
    ) -> List[ModelDescriptor]:
        """
        List usable models for a provider.

        Args:
            provider: Selected provider.
            credential: API key (and host for OpenAI).

        Returns:
            Filtered models in vendor order.

        Raises:
            ProviderError: API_KEY_NOT_SET before any call, or any fetch failure.
        """
        if not credential.is_set:
            raise ProviderError(ProviderErrorKind.API_KEY_NOT_SET)

        adapter = self._adapters.get(provider) if provider is not None else None
        if adapter is None:
            raise ProviderError(ProviderErrorKind.UNSUPPORTED_SERVICE)

        models = adapter.fetch_models(credential)
        keep = _FILTERS[provider]
        filtered = [model for model in models if keep(model.id)]
        logger.info("%s listed %d models, %d usable", provider.value, len(models), len(filtered))
        return filtered
