"""Model catalog - discovery and filtering of text-capable models."""

from lingo_desk.services.catalog.model_catalog import (
    ModelCatalog,
    filter_gemini_model_names,
    filter_openai_model_ids,
    is_gemini_text_model,
    is_openai_text_model,
    sort_models,
)

__all__ = [
    "ModelCatalog",
    "filter_gemini_model_names",
    "filter_openai_model_ids",
    "is_gemini_text_model",
    "is_openai_text_model",
    "sort_models",
]
