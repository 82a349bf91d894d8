"""Unit tests for GeminiAdapter wire format, candidate handling and errors."""

import pytest
import requests

from lingo_desk.core import ProviderCredential, ProviderError, ProviderErrorKind
from lingo_desk.services import GeminiAdapter
from lingo_desk.services.translation.gemini_adapter import GEMINI_BASE_URL, normalize_model_name


@pytest.fixture
def adapter(session):
    return GeminiAdapter(session=session)


@pytest.fixture
def credential():
    return ProviderCredential(api_key="g-key")


def _candidate(text=None, finish_reason=None):
    candidate = {}
    if text is not None:
        candidate["content"] = {"parts": [{"text": text}], "role": "model"}
    if finish_reason is not None:
        candidate["finishReason"] = finish_reason
    return candidate


class TestNormalizeModelName:

    def test_prefixes_bare_id(self):
        assert normalize_model_name("gemini-1.5-flash") == "models/gemini-1.5-flash"

    def test_keeps_prefixed_name(self):
        assert normalize_model_name("models/gemini-pro") == "models/gemini-pro"


class TestGeminiTranslate:
    """Tests for generateContent requests and responses."""

    def test_posts_generate_content_body(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(payload={"candidates": [_candidate("Hola")]})

        adapter.translate("Hello", "PROMPT", "gemini-1.5-pro-latest", credential)

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{GEMINI_BASE_URL}/models/gemini-1.5-pro-latest:generateContent")
        assert kwargs["params"] == {"key": "g-key"}
        assert kwargs["json"] == {
            "system_instruction": {"parts": [{"text": "PROMPT"}]},
            "contents": [{"parts": [{"text": "Hello"}], "role": "user"}],
            "generation_config": {"temperature": 0.7, "top_p": 0.9, "candidate_count": 1},
        }

    def test_returns_trimmed_first_part(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"candidates": [_candidate("  Hola mundo \n", "STOP")]}
        )
        assert adapter.translate("Hello world", "P", "gemini-pro", credential) == "Hola mundo"

    def test_safety_finish_without_parts_is_api_error(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"candidates": [{"content": {"parts": []}, "finishReason": "SAFETY"}]}
        )

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert excinfo.value.kind is ProviderErrorKind.API_ERROR
        assert "SAFETY" in str(excinfo.value)
        assert "safety filters" in str(excinfo.value)

    def test_safety_finish_without_content_is_api_error(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"candidates": [_candidate(finish_reason="SAFETY")]}
        )

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert excinfo.value.kind is ProviderErrorKind.API_ERROR

    def test_no_candidates_without_reason_returns_empty(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(payload={"candidates": []})
        assert adapter.translate("Hello", "P", "gemini-pro", credential) == ""

    def test_stop_reason_without_parts_returns_empty(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"candidates": [{"content": {"parts": []}, "finishReason": "STOP"}]}
        )
        assert adapter.translate("Hello", "P", "gemini-pro", credential) == ""

    def test_error_envelope_surfaces_message(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            status_code=401,
            payload={"error": {"code": 401, "message": "Invalid key", "status": "UNAUTHENTICATED"}},
        )

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert excinfo.value.kind is ProviderErrorKind.API_ERROR
        assert "Invalid key" in str(excinfo.value)
        assert "Gemini API Error (401)" in str(excinfo.value)

    def test_non_200_without_envelope_reports_status(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(status_code=500, json_error=ValueError("html"))

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert "status code: 500" in excinfo.value.message

    def test_part_without_text_is_decoding_error(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]}
        )

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert excinfo.value.kind is ProviderErrorKind.DECODING_ERROR

    def test_transport_failure_is_network_error(self, adapter, session, credential):
        session.request.side_effect = requests.ConnectionError("dns failure")

        with pytest.raises(ProviderError) as excinfo:
            adapter.translate("Hello", "P", "gemini-pro", credential)

        assert excinfo.value.kind is ProviderErrorKind.NETWORK_ERROR


class TestGeminiFetchModels:
    """Tests for model listing."""

    def test_derives_short_ids(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            payload={"models": [{"name": "models/gemini-1.5-pro-latest"}, {"name": "models/embedding-001"}]}
        )

        models = adapter.fetch_models(credential)

        assert [model.id for model in models] == ["gemini-1.5-pro-latest", "embedding-001"]
        args, kwargs = session.request.call_args
        assert args == ("GET", f"{GEMINI_BASE_URL}/models")
        assert kwargs["params"] == {"key": "g-key"}

    def test_empty_key_short_circuits(self, adapter, session):
        with pytest.raises(ProviderError) as excinfo:
            adapter.fetch_models(ProviderCredential(api_key=""))

        assert excinfo.value.kind is ProviderErrorKind.API_KEY_NOT_SET
        session.request.assert_not_called()

    def test_error_envelope_becomes_api_error(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(
            status_code=400,
            payload={"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}},
        )

        with pytest.raises(ProviderError) as excinfo:
            adapter.fetch_models(credential)

        assert excinfo.value.kind is ProviderErrorKind.API_ERROR
        assert excinfo.value.message == "API key not valid"

    def test_missing_models_key_is_decoding_error(self, adapter, session, credential, make_response):
        session.request.return_value = make_response(payload={"data": []})

        with pytest.raises(ProviderError) as excinfo:
            adapter.fetch_models(credential)

        assert excinfo.value.kind is ProviderErrorKind.DECODING_ERROR
