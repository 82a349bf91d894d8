"""Application settings value - resolved configuration passed into services per call."""

from dataclasses import dataclass, replace
from typing import Optional

from .language import Language
from .provider import DEFAULT_OPENAI_HOST, ProviderCredential, ProviderType, TranslationRequest


@dataclass(frozen=True)
class AppSettings:
    """
    Snapshot of the user's provider configuration.

    Owned by the settings layer; the translation core only ever sees values
    derived from it (credential, model id) for a single call.
    """

    provider: Optional[ProviderType] = ProviderType.OPENAI
    openai_api_key: str = ""
    openai_host: str = DEFAULT_OPENAI_HOST
    openai_model_id: str = ""
    gemini_api_key: str = ""
    gemini_model_id: str = ""

    def credential_for(self, provider: Optional[ProviderType]) -> ProviderCredential:
        if provider is ProviderType.OPENAI:
            return ProviderCredential(api_key=self.openai_api_key, host=self.openai_host)
        if provider is ProviderType.GEMINI:
            return ProviderCredential(api_key=self.gemini_api_key)
        return ProviderCredential(api_key="")

    def model_id_for(self, provider: Optional[ProviderType]) -> str:
        if provider is ProviderType.OPENAI:
            return self.openai_model_id
        if provider is ProviderType.GEMINI:
            return self.gemini_model_id
        return ""

    def api_key_for(self, provider: Optional[ProviderType]) -> str:
        return self.credential_for(provider).api_key

    def with_model_id(self, provider: ProviderType, model_id: str) -> "AppSettings":
        if provider is ProviderType.OPENAI:
            return replace(self, openai_model_id=model_id)
        return replace(self, gemini_model_id=model_id)

    def with_api_key(self, provider: ProviderType, api_key: str) -> "AppSettings":
        if provider is ProviderType.OPENAI:
            return replace(self, openai_api_key=api_key)
        return replace(self, gemini_api_key=api_key)

    def build_request(self, text: str, source: Language, target: Language) -> TranslationRequest:
        """Build a translation request for the currently selected provider."""
        return TranslationRequest(
            text=text,
            source_language=source,
            target_language=target,
            provider=self.provider,
            credential=self.credential_for(self.provider),
            model_id=self.model_id_for(self.provider),
        )
