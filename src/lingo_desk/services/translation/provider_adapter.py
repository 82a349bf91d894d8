"""Provider Adapter - abstract interface and shared HTTP plumbing for vendor APIs."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from urllib.parse import urlparse

import requests

from lingo_desk.core import (
    ModelDescriptor,
    ProviderCredential,
    ProviderError,
    ProviderErrorKind,
    ProviderType,
)


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class ProviderAdapter(ABC):
    """
    Translates provider-agnostic calls into one vendor's HTTP wire format.

    Implementations (OpenAIAdapter, GeminiAdapter) raise ProviderError for
    every failure. Without an injected session each call opens and closes
    its own, so concurrent workers never share connection state.
    """

    provider: ProviderType

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self._session = session
        self._timeout = timeout

    @abstractmethod
    def translate(self, text: str, prompt: str, model_id: str, credential: ProviderCredential) -> str:
        """
        Translate text with the given system prompt.

        Args:
            text: User text, sent as-is.
            prompt: System instruction from build_system_prompt.
            model_id: Vendor model identifier.
            credential: API key (and host for OpenAI).

        Returns:
            Translated text, whitespace-trimmed. May be empty.
        """
        pass

    @abstractmethod
    def fetch_models(self, credential: ProviderCredential) -> List[ModelDescriptor]:
        """List the vendor's models, unfiltered and in vendor order."""
        pass

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            if self._session is not None:
                return self._session.request(method, url, timeout=self._timeout, **kwargs)
            with requests.Session() as session:
                return session.request(method, url, timeout=self._timeout, **kwargs)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise ProviderError(ProviderErrorKind.INVALID_URL, cause=e) from e
        except requests.RequestException as e:
            logger.warning("%s request failed: %s", self.provider.value, type(e).__name__)
            raise ProviderError.network_error(e) from e

    def _raise_for_listing_status(self, response: requests.Response) -> None:
        """Non-200 on a model listing means a vendor error or a bad key/host."""
        if response.status_code == 200:
            return
        message = error_envelope_message(response)
        if message is not None:
            raise ProviderError.api_error(message)
        raise ProviderError(ProviderErrorKind.INVALID_API_KEY_OR_HOST)

    def _raise_for_translation_status(self, response: requests.Response) -> None:
        status = response.status_code
        if status == 200:
            return
        label = self.provider.value
        message = error_envelope_message(response)
        if message is not None:
            raise ProviderError.api_error(f"{label} API Error ({status}): {message}")
        raise ProviderError.api_error(f"{label} API request failed with status code: {status}")


def build_url(base: str, path: str) -> str:
    """Join a base URL and a path, rejecting anything that is not http(s)."""
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ProviderError(ProviderErrorKind.INVALID_URL, message=base)
    return f"{base.rstrip('/')}{path}"


def decode_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ProviderError.decoding_error(e) from e


def error_envelope_message(response: requests.Response) -> Optional[str]:
    """
    Extract the message from a vendor error envelope.

    Both vendors wrap failures as {"error": {"message": ...}}; OpenAI adds a
    "type", Gemini adds "code" and "status".

    Returns:
        The message, or None when the body is not a decodable envelope.
    """
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None
