"""Coordinators - Orchestration layer connecting UI with business logic."""

from .settings_coordinator import (
    ModelAction,
    SettingsCoordinator,
    SettingsEvent,
    SettingsEventKind,
    resolve_model_action,
)
from .translation_coordinator import TranslationCoordinator

__all__ = [
    "TranslationCoordinator",
    "SettingsCoordinator",
    "SettingsEvent",
    "SettingsEventKind",
    "ModelAction",
    "resolve_model_action",
]
