"""Provider entities - credentials, model descriptors and translation request/result."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .language import Language


DEFAULT_OPENAI_HOST = "https://api.openai.com"


class ProviderType(Enum):
    """Remote translation backends."""

    OPENAI = "OpenAI"
    GEMINI = "Gemini"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["ProviderType"]:
        """Return the provider for a persisted tag, or None if unrecognized."""
        for provider in cls:
            if provider.value == raw:
                return provider
        return None


@dataclass(frozen=True)
class ProviderCredential:
    """Access configuration for one vendor.

    Attributes:
        api_key: Secret key sent with every request.
        host: Base URL override (OpenAI only). Blank means the default host.
    """

    api_key: str
    host: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @property
    def effective_host(self) -> str:
        """Host to use for OpenAI-shaped calls, without a trailing slash."""
        host = (self.host or "").strip()
        if not host:
            return DEFAULT_OPENAI_HOST
        return host.rstrip("/")


@dataclass(frozen=True)
class ModelDescriptor:
    """One selectable remote model, keyed by its vendor-native id."""

    id: str

    @classmethod
    def from_gemini_name(cls, name: str) -> "ModelDescriptor":
        """Derive the short id from a Gemini resource name like "models/gemini-pro"."""
        return cls(id=name.split("/")[-1] if name else name)


@dataclass(frozen=True)
class TranslationRequest:
    """Input to the translation orchestrator."""

    text: str
    source_language: Language
    target_language: Language
    provider: Optional[ProviderType]
    credential: ProviderCredential
    model_id: str


@dataclass
class TranslationResult:
    """Result of a translation request."""

    translated_text: str
    model: str = ""
