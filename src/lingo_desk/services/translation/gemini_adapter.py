"""Gemini Adapter - generateContent and model listing over the Generative Language REST API."""

import logging
from typing import Any, Dict, List, Optional

from lingo_desk.core import (
    ModelDescriptor,
    ProviderCredential,
    ProviderError,
    ProviderErrorKind,
    ProviderType,
)
from lingo_desk.services.translation.provider_adapter import ProviderAdapter, decode_json


logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
MODEL_PREFIX = "models/"
STOP_REASON = "STOP"


def normalize_model_name(model_id: str) -> str:
    """Return the "models/<id>" form expected by generateContent."""
    return model_id if model_id.startswith(MODEL_PREFIX) else f"{MODEL_PREFIX}{model_id}"


class GeminiAdapter(ProviderAdapter):
    """
    Adapter for Google's Gemini models.

    The API key travels as the "key" query parameter; it is never logged.
    """

    provider = ProviderType.GEMINI

    TEMPERATURE = 0.7
    TOP_P = 0.9

    def fetch_models(self, credential: ProviderCredential) -> List[ModelDescriptor]:
        if not credential.is_set:
            raise ProviderError(ProviderErrorKind.API_KEY_NOT_SET)

        logger.debug("Fetching Gemini models")
        response = self._send(
            "GET",
            f"{GEMINI_BASE_URL}/models",
            params={"key": credential.api_key},
            headers={"Content-Type": "application/json"},
        )
        self._raise_for_listing_status(response)

        payload = decode_json(response)
        try:
            return [ModelDescriptor.from_gemini_name(str(item["name"])) for item in payload["models"]]
        except (KeyError, TypeError) as e:
            raise ProviderError.decoding_error(e) from e

    def translate(self, text: str, prompt: str, model_id: str, credential: ProviderCredential) -> str:
        model_name = normalize_model_name(model_id)
        body = {
            "system_instruction": {"parts": [{"text": prompt}]},
            "contents": [{"parts": [{"text": text}], "role": "user"}],
            "generation_config": {
                "temperature": self.TEMPERATURE,
                "top_p": self.TOP_P,
                "candidate_count": 1,
            },
        }
        logger.debug("Gemini translation request: model=%s chars=%d", model_name, len(text))
        response = self._send(
            "POST",
            f"{GEMINI_BASE_URL}/{model_name}:generateContent",
            params={"key": credential.api_key},
            json=body,
        )
        self._raise_for_translation_status(response)

        payload = decode_json(response)
        try:
            candidates = payload.get("candidates") or []
            first_candidate = candidates[0] if candidates else None
            first_part = _first_part(first_candidate)
        except (AttributeError, KeyError, TypeError) as e:
            raise ProviderError.decoding_error(e) from e

        if first_part is None:
            finish_reason = first_candidate.get("finishReason") if first_candidate else None
            if finish_reason and finish_reason != STOP_REASON:
                raise ProviderError.api_error(
                    f"Translation failed: {finish_reason}. Content may be blocked by API safety filters."
                )
            return ""

        part_text = first_part.get("text") if isinstance(first_part, dict) else None
        if not isinstance(part_text, str):
            raise ProviderError.decoding_error(TypeError("part text is not a string"))
        return part_text.strip()


def _first_part(candidate: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    # Blocked candidates may omit "content" entirely.
    if candidate is None:
        return None
    content = candidate.get("content") or {}
    parts = content.get("parts") or []
    return parts[0] if parts else None
