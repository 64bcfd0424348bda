"""Unit tests for MyMemoryTranslationService and response decoding."""

import json

import httpx
import pytest

from quick_translate.core import ErrorKind, TranslationRequest
from quick_translate.services import MyMemoryTranslationService, decode_translation_response


def make_service(handler, **kwargs):
    """Create a service whose HTTP calls are answered by handler."""
    return MyMemoryTranslationService(
        endpoint="https://translate.test/get",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def json_response(payload, status_code=200):
    return lambda request: httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


@pytest.fixture
def request_en_es():
    return TranslationRequest("Hello & goodbye", "en", "es")


class TestQueryConstruction:
    """Tests for the outgoing GET request."""

    def test_sends_text_and_langpair(self, request_en_es):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"responseData": {"translatedText": "Hola"}})

        make_service(handler).translate(request_en_es)

        sent = seen[0]
        assert sent.method == "GET"
        assert sent.url.path == "/get"
        assert sent.url.params["q"] == "Hello & goodbye"
        assert sent.url.params["langpair"] == "en|es"
        assert sent.headers["Accept"] == "application/json"

    def test_credentials_are_omitted_by_default(self, request_en_es):
        params = make_service(json_response({})).build_params(request_en_es)
        assert set(params) == {"q", "langpair"}

    def test_optional_credentials_are_added(self, request_en_es):
        service = make_service(json_response({}), contact_email="me@example.com", api_key="k-1")
        params = service.build_params(request_en_es)
        assert params["de"] == "me@example.com"
        assert params["key"] == "k-1"


class TestTranslate:
    """Tests for interpreting transport outcomes."""

    def test_success_returns_translated_text(self, request_en_es):
        service = make_service(json_response({"responseData": {"translatedText": "Hola"}, "responseStatus": 200}))
        result = service.translate(request_en_es)
        assert not result.is_error
        assert result.text == "Hola"

    def test_redirect_is_followed(self, request_en_es):
        def handler(request):
            if request.url.scheme == "http":
                return httpx.Response(301, headers={"Location": str(request.url.copy_with(scheme="https"))})
            assert request.url.params["langpair"] == "en|es"
            return httpx.Response(200, json={"responseData": {"translatedText": "Hola"}})

        service = MyMemoryTranslationService(
            endpoint="http://translate.test/get",
            transport=httpx.MockTransport(handler),
        )
        result = service.translate(request_en_es)

        assert not result.is_error
        assert result.text == "Hola"

    def test_timeout_applies_to_each_phase(self, request_en_es):
        seen = []

        def handler(request):
            seen.append(request.extensions["timeout"])
            return httpx.Response(200, json={"responseData": {"translatedText": "Hola"}})

        make_service(handler, timeout=7.0).translate(request_en_es)

        assert seen[0] == {"connect": 7.0, "read": 7.0, "write": 7.0, "pool": 7.0}

    def test_null_translation_is_unavailable(self, request_en_es):
        service = make_service(json_response({"responseData": {"translatedText": None}}))
        result = service.translate(request_en_es)
        assert result.error_kind == ErrorKind.TRANSLATION_UNAVAILABLE

    def test_malformed_json_is_decode_error(self, request_en_es):
        service = make_service(lambda request: httpx.Response(200, content=b"{not json"))
        result = service.translate(request_en_es)
        assert result.error_kind == ErrorKind.DECODE_ERROR
        assert result.error.startswith("Failed to decode response")

    def test_empty_body_is_empty_response(self, request_en_es):
        service = make_service(lambda request: httpx.Response(200, content=b""))
        result = service.translate(request_en_es)
        assert result.error_kind == ErrorKind.EMPTY_RESPONSE

    def test_connection_failure_is_network_error(self, request_en_es):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = make_service(handler).translate(request_en_es)
        assert result.error_kind == ErrorKind.NETWORK_ERROR
        assert "connection refused" in result.error

    def test_http_error_status_is_network_error(self, request_en_es):
        service = make_service(lambda request: httpx.Response(503, content=b"unavailable"))
        result = service.translate(request_en_es)
        assert result.error_kind == ErrorKind.NETWORK_ERROR
        assert "503" in result.error

    def test_timeout_is_timeout_error(self, request_en_es):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = make_service(handler, timeout=2.5).translate(request_en_es)
        assert result.error_kind == ErrorKind.TIMEOUT
        assert "2.5" in result.error


class TestDecodeTranslationResponse:
    """Tests for response body interpretation."""

    def test_whitespace_body_is_empty_response(self):
        assert decode_translation_response(b"  \n").error_kind == ErrorKind.EMPTY_RESPONSE

    def test_top_level_array_is_decode_error(self):
        assert decode_translation_response(b"[1, 2]").error_kind == ErrorKind.DECODE_ERROR

    def test_missing_response_data_is_decode_error(self):
        assert decode_translation_response(b'{"matches": []}').error_kind == ErrorKind.DECODE_ERROR

    def test_missing_translated_text_is_unavailable(self):
        result = decode_translation_response(b'{"responseData": {}}')
        assert result.error_kind == ErrorKind.TRANSLATION_UNAVAILABLE

    def test_non_string_translated_text_is_decode_error(self):
        result = decode_translation_response(b'{"responseData": {"translatedText": 42}}')
        assert result.error_kind == ErrorKind.DECODE_ERROR

    def test_error_status_in_body_is_unavailable(self):
        body = json.dumps({
            "responseData": {"translatedText": "MYMEMORY WARNING: YOU USED ALL AVAILABLE FREE TRANSLATIONS"},
            "responseStatus": 429,
            "responseDetails": "quota exceeded",
        }).encode("utf-8")
        result = decode_translation_response(body)
        assert result.error_kind == ErrorKind.TRANSLATION_UNAVAILABLE
        assert "quota exceeded" in result.error

    def test_string_status_200_is_success(self):
        body = b'{"responseData": {"translatedText": "Bonjour"}, "responseStatus": "200"}'
        result = decode_translation_response(body)
        assert result.text == "Bonjour"

    def test_unicode_text_is_preserved(self):
        body = json.dumps({"responseData": {"translatedText": "Привет"}}).encode("utf-8")
        assert decode_translation_response(body).text == "Привет"
