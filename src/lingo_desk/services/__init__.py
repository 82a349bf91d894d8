"""Services layer - business logic and external integrations."""

from lingo_desk.services.settings_manager import SettingsManager
from lingo_desk.services.prompt_builder import build_system_prompt
from lingo_desk.services.speech_service import SpeechService, find_voice_locale

# Translation services
from lingo_desk.services.translation import (
	GeminiAdapter,
	OpenAIAdapter,
	ProviderAdapter,
	TranslationService,
	default_adapters,
)

# Model catalog
from lingo_desk.services.catalog import ModelCatalog, sort_models

# Background workers
from lingo_desk.services.api_workers import ModelListWorker, TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"build_system_prompt",
	"SpeechService",
	"find_voice_locale",
	"ProviderAdapter",
	"OpenAIAdapter",
	"GeminiAdapter",
	"TranslationService",
	"default_adapters",
	"ModelCatalog",
	"sort_models",
	"TranslationWorker",
	"ModelListWorker",
	"WorkerSignals",
]
