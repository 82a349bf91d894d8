"""Provider errors - the typed failures returned by catalog, adapters and orchestrator."""

from enum import Enum
from typing import Optional


class ProviderErrorKind(Enum):
    """Taxonomy of translation and model-listing failures."""

    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    DECODING_ERROR = "decoding_error"
    API_ERROR = "api_error"
    API_KEY_NOT_SET = "api_key_not_set"
    INVALID_API_KEY_OR_HOST = "invalid_api_key_or_host"
    MODEL_NOT_SELECTED = "model_not_selected"
    UNSUPPORTED_SERVICE = "unsupported_service"
    INVALID_LANGUAGE_PAIR = "invalid_language_pair"


_DESCRIPTIONS = {
    ProviderErrorKind.INVALID_URL: "The API endpoint URL is invalid.",
    ProviderErrorKind.API_KEY_NOT_SET: "API Key is not set for the selected service.",
    ProviderErrorKind.INVALID_API_KEY_OR_HOST: "Invalid API Key or Host. Please check your settings.",
    ProviderErrorKind.MODEL_NOT_SELECTED: "Please select a model in settings.",
    ProviderErrorKind.UNSUPPORTED_SERVICE: "The selected translation service is not supported.",
    ProviderErrorKind.INVALID_LANGUAGE_PAIR: "Target language cannot be 'Auto Detect'.",
}


class ProviderError(Exception):
    """
    A taxonomized provider failure.

    Attributes:
        kind: Which failure occurred.
        message: Vendor-supplied or contextual detail (used by API_ERROR).
        cause: Underlying exception for NETWORK_ERROR / DECODING_ERROR.
    """

    def __init__(
        self,
        kind: ProviderErrorKind,
        message: str = "",
        cause: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(self.description)

    @property
    def description(self) -> str:
        """One human-readable line suitable for an alert or status bar."""
        if self.kind is ProviderErrorKind.NETWORK_ERROR:
            return f"Network request failed: {self.cause or self.message}"
        if self.kind is ProviderErrorKind.DECODING_ERROR:
            return f"Failed to decode the server response: {self.cause or self.message}"
        if self.kind is ProviderErrorKind.API_ERROR:
            return f"API Error: {self.message}"
        return _DESCRIPTIONS[self.kind]

    @classmethod
    def api_error(cls, message: str) -> "ProviderError":
        return cls(ProviderErrorKind.API_ERROR, message)

    @classmethod
    def network_error(cls, cause: BaseException) -> "ProviderError":
        return cls(ProviderErrorKind.NETWORK_ERROR, cause=cause)

    @classmethod
    def decoding_error(cls, cause: BaseException) -> "ProviderError":
        return cls(ProviderErrorKind.DECODING_ERROR, cause=cause)
