"""Translation Service - single entry point that validates requests and dispatches to adapters."""

import logging
from typing import Dict, Optional

import requests

from lingo_desk.core import (
    ProviderError,
    ProviderErrorKind,
    ProviderType,
    TranslationRequest,
    TranslationResult,
)
from lingo_desk.services.prompt_builder import build_system_prompt
from lingo_desk.services.translation.gemini_adapter import GeminiAdapter
from lingo_desk.services.translation.openai_adapter import OpenAIAdapter
from lingo_desk.services.translation.provider_adapter import ProviderAdapter


logger = logging.getLogger(__name__)


def default_adapters(session: Optional[requests.Session] = None) -> Dict[ProviderType, ProviderAdapter]:
    """Build one adapter per provider. Pass a session only for single-threaded use."""
    return {
        ProviderType.OPENAI: OpenAIAdapter(session=session),
        ProviderType.GEMINI: GeminiAdapter(session=session),
    }


class TranslationService:
    """
    Orchestrates one translation: local validation, prompt, adapter dispatch.

    Holds no mutable state; concurrent calls are independent. Errors from
    adapters propagate unchanged (no retry, no fallback to another provider).
    """

    def __init__(self, adapters: Optional[Dict[ProviderType, ProviderAdapter]] = None):
        self._adapters = adapters if adapters is not None else default_adapters()

    def local_result(self, request: TranslationRequest) -> Optional[TranslationResult]:
        """
        Resolve requests that need no network call.

        Returns:
            An empty result for blank text, the input unchanged when the
            languages match (or are both Auto Detect), otherwise None.
        """
        if not request.text.strip():
            return TranslationResult(translated_text="")

        source, target = request.source_language, request.target_language
        if source.is_auto and target.is_auto:
            return TranslationResult(translated_text=request.text)
        if not source.is_auto and source.code == target.code:
            return TranslationResult(translated_text=request.text)
        return None

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate request.text into the target language.

        Args:
            request: Text, language pair, provider, credential and model id.

        Returns:
            TranslationResult with trimmed translated text.

        Raises:
            ProviderError: On invalid configuration or any provider failure.
        """
        local = self.local_result(request)
        if local is not None:
            return local

        if request.target_language.is_auto:
            raise ProviderError(ProviderErrorKind.INVALID_LANGUAGE_PAIR)

        adapter = self._adapters.get(request.provider) if request.provider is not None else None
        if adapter is None:
            raise ProviderError(ProviderErrorKind.UNSUPPORTED_SERVICE)
        if not request.credential.is_set:
            raise ProviderError(ProviderErrorKind.API_KEY_NOT_SET)
        if not request.model_id.strip():
            raise ProviderError(ProviderErrorKind.MODEL_NOT_SELECTED)

        prompt = build_system_prompt(request.source_language, request.target_language)
        logger.info(
            "Translating %d chars %s -> %s via %s/%s",
            len(request.text),
            request.source_language.code,
            request.target_language.code,
            request.provider.value,
            request.model_id,
        )
        translated = adapter.translate(
            text=request.text,
            prompt=prompt,
            model_id=request.model_id,
            credential=request.credential,
        )
        return TranslationResult(translated_text=translated, model=request.model_id)
