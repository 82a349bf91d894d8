"""Unit tests for the background workers' signal contract."""

from unittest.mock import MagicMock

import pytest

from lingo_desk.core import (
    Language,
    ModelDescriptor,
    ProviderCredential,
    ProviderError,
    ProviderErrorKind,
    ProviderType,
    TranslationRequest,
    TranslationResult,
)
from lingo_desk.services import ModelListWorker, TranslationWorker


@pytest.fixture
def request_():
    return TranslationRequest(
        text="Hello",
        source_language=Language("en", "English"),
        target_language=Language("fr", "French"),
        provider=ProviderType.OPENAI,
        credential=ProviderCredential(api_key="sk-test"),
        model_id="gpt-4o",
    )


def connect_spies(worker):
    spies = {
        "error": MagicMock(),
        "finished": MagicMock(),
        "translation_result": MagicMock(),
        "models_result": MagicMock(),
    }
    for name, spy in spies.items():
        getattr(worker.signals, name).connect(spy)
    return spies


class TestTranslationWorker:

    def test_success_emits_result_and_finished(self, request_):
        service = MagicMock()
        service.translate = MagicMock(return_value=TranslationResult("Bonjour", model="gpt-4o"))
        worker = TranslationWorker(translation_service=service, request=request_)
        spies = connect_spies(worker)

        worker.run()

        spies["translation_result"].assert_called_once_with(TranslationResult("Bonjour", model="gpt-4o"))
        spies["error"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_provider_error_emits_its_description(self, request_):
        service = MagicMock()
        service.translate = MagicMock(side_effect=ProviderError(ProviderErrorKind.API_KEY_NOT_SET))
        worker = TranslationWorker(translation_service=service, request=request_)
        spies = connect_spies(worker)

        worker.run()

        expected = str(ProviderError(ProviderErrorKind.API_KEY_NOT_SET))
        spies["error"].assert_called_once_with(expected)
        spies["translation_result"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_unexpected_exception_is_reported(self, request_):
        service = MagicMock()
        service.translate = MagicMock(side_effect=KeyError("boom"))
        worker = TranslationWorker(translation_service=service, request=request_)
        spies = connect_spies(worker)

        worker.run()

        message = spies["error"].call_args.args[0]
        assert message.startswith("Unexpected translation error:")
        assert "boom" in message
        spies["finished"].assert_called_once()


class TestModelListWorker:

    def test_success_emits_models(self):
        catalog = MagicMock()
        catalog.list_models = MagicMock(return_value=[ModelDescriptor("gpt-4o")])
        credential = ProviderCredential(api_key="sk-test")
        worker = ModelListWorker(catalog=catalog, provider=ProviderType.OPENAI, credential=credential)
        spies = connect_spies(worker)

        worker.run()

        catalog.list_models.assert_called_once_with(ProviderType.OPENAI, credential)
        spies["models_result"].assert_called_once_with([ModelDescriptor("gpt-4o")])
        spies["finished"].assert_called_once()

    def test_provider_error_is_prefixed_with_fetch_error(self):
        catalog = MagicMock()
        catalog.list_models = MagicMock(side_effect=ProviderError(ProviderErrorKind.INVALID_API_KEY_OR_HOST))
        worker = ModelListWorker(catalog=catalog, provider=ProviderType.OPENAI, credential=ProviderCredential("sk"))
        spies = connect_spies(worker)

        worker.run()

        expected = "Fetch Error: " + str(ProviderError(ProviderErrorKind.INVALID_API_KEY_OR_HOST))
        spies["error"].assert_called_once_with(expected)
        spies["models_result"].assert_not_called()

    def test_unexpected_exception_is_reported(self):
        catalog = MagicMock()
        catalog.list_models = MagicMock(side_effect=RuntimeError("socket closed"))
        worker = ModelListWorker(catalog=catalog, provider=ProviderType.GEMINI, credential=ProviderCredential("g"))
        spies = connect_spies(worker)

        worker.run()

        spies["error"].assert_called_once_with("Unexpected Error: socket closed")
        spies["finished"].assert_called_once()
