"""OpenAI Adapter - chat completions and model listing over HTTP."""

import logging
from typing import Dict, List

from lingo_desk.core import (
    ModelDescriptor,
    ProviderCredential,
    ProviderError,
    ProviderErrorKind,
    ProviderType,
)
from lingo_desk.services.translation.provider_adapter import (
    ProviderAdapter,
    build_url,
    decode_json,
)


logger = logging.getLogger(__name__)

MODELS_PATH = "/v1/models"
CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class OpenAIAdapter(ProviderAdapter):
    """Adapter for OpenAI-compatible hosts (api.openai.com or a custom host)."""

    provider = ProviderType.OPENAI

    def fetch_models(self, credential: ProviderCredential) -> List[ModelDescriptor]:
        if not credential.is_set:
            raise ProviderError(ProviderErrorKind.API_KEY_NOT_SET)

        url = build_url(credential.effective_host, MODELS_PATH)
        logger.debug("Fetching OpenAI models from %s", url)
        response = self._send("GET", url, headers=self._headers(credential))
        self._raise_for_listing_status(response)

        payload = decode_json(response)
        try:
            return [ModelDescriptor(id=str(item["id"])) for item in payload["data"]]
        except (KeyError, TypeError) as e:
            raise ProviderError.decoding_error(e) from e

    def translate(self, text: str, prompt: str, model_id: str, credential: ProviderCredential) -> str:
        url = build_url(credential.effective_host, CHAT_COMPLETIONS_PATH)
        body = {
            "model": model_id,
            "messages": [
                {"role": "system", "content": prompt},
                {"role": "user", "content": text},
            ],
        }
        logger.debug("OpenAI translation request: model=%s chars=%d", model_id, len(text))
        response = self._send("POST", url, headers=self._headers(credential), json=body)
        self._raise_for_translation_status(response)

        payload = decode_json(response)
        try:
            choices = payload["choices"]
            if not choices:
                return ""
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError, IndexError) as e:
            raise ProviderError.decoding_error(e) from e
        if not isinstance(content, str):
            raise ProviderError.decoding_error(TypeError("message content is not a string"))
        return content.strip()

    @staticmethod
    def _headers(credential: ProviderCredential) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {credential.api_key}",
            "Content-Type": "application/json",
        }
