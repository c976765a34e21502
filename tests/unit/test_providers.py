"""Unit tests for translation providers and the selection policy."""

import json

import httpx
import pytest

from relay_translator.core.exceptions import ProviderConstructionError, ProviderError
from relay_translator.core.providers import (
    GoogleTranslateProvider,
    MOCK_TRANSLATIONS,
    MockTranslationProvider,
    create_translation_provider,
)


def google_provider(handler):
    return GoogleTranslateProvider(
        api_key="test-key",
        api_endpoint="https://translate.example.com/v2",
        transport=httpx.MockTransport(handler),
    )


class TestMockTranslationProvider:
    """Test deterministic mock translations."""

    @pytest.mark.parametrize("code,expected", sorted(MOCK_TRANSLATIONS.items()))
    def test_table_codes_ignore_input(self, code, expected):
        provider = MockTranslationProvider()
        assert provider.translate("anything", code) == expected
        assert provider.translate("", code) == expected

    def test_table_constants(self):
        assert MOCK_TRANSLATIONS["en"] == "Hello world"
        assert MOCK_TRANSLATIONS["ja"] == "こんにちは世界"

    def test_unknown_code_embeds_code_and_text(self):
        provider = MockTranslationProvider()
        assert provider.translate("hello", "it") == "Translated to it: hello"
        assert provider.translate("hello", "it") == provider.translate("hello", "it")


class TestGoogleTranslateProvider:
    """Test the remote provider against a mocked transport."""

    def test_requires_api_key(self):
        with pytest.raises(ProviderConstructionError):
            GoogleTranslateProvider(api_key="")

    def test_successful_translation(self):
        captured = {}

        def handler(request):
            captured["key"] = request.url.params["key"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"translations": [{"translatedText": "Bonjour"}]}})

        provider = google_provider(handler)
        assert provider.translate("Hello", "fr") == "Bonjour"
        assert captured["key"] == "test-key"
        assert captured["body"] == {"q": ["Hello"], "target": "fr", "format": "text"}
        provider.close()

    def test_http_error_becomes_provider_error(self):
        provider = google_provider(lambda request: httpx.Response(403, text="forbidden"))

        with pytest.raises(ProviderError) as exc_info:
            provider.translate("Hello", "fr")
        assert "403" in str(exc_info.value)
        assert exc_info.value.target_language == "fr"
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)

    def test_transport_error_becomes_provider_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError):
            google_provider(handler).translate("Hello", "fr")

    def test_invalid_json_becomes_provider_error(self):
        provider = google_provider(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ProviderError):
            provider.translate("Hello", "fr")

    def test_empty_result_becomes_provider_error(self):
        provider = google_provider(lambda request: httpx.Response(200, json={"data": {"translations": []}}))
        with pytest.raises(ProviderError, match="empty"):
            provider.translate("Hello", "fr")

    def test_unexpected_shape_becomes_provider_error(self):
        provider = google_provider(lambda request: httpx.Response(200, json={"error": "nope"}))
        with pytest.raises(ProviderError):
            provider.translate("Hello", "fr")

    @pytest.mark.parametrize("translations", [{"a": 1}, 5, "text", [5], [{"translatedText": 7}]])
    def test_malformed_translations_become_provider_error(self, translations):
        body = {"data": {"translations": translations}}
        provider = google_provider(lambda request: httpx.Response(200, json=body))
        with pytest.raises(ProviderError):
            provider.translate("Hello", "fr")

    def test_timeout_becomes_provider_error(self):
        def handler(request):
            raise httpx.ReadTimeout("read timed out", request=request)

        with pytest.raises(ProviderError) as exc_info:
            google_provider(handler).translate("Hello", "fr")
        assert isinstance(exc_info.value.cause, httpx.ReadTimeout)

    def test_invalid_language_code_is_rejected_before_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(ProviderError, match="Invalid language code"):
            google_provider(handler).translate("Hello", "not a code!")
        assert calls == []


class TestCreateTranslationProvider:
    """Test construction-time provider selection."""

    def test_mock_mode(self, logger):
        provider = create_translation_provider("mock", logger)
        assert isinstance(provider, MockTranslationProvider)

    def test_remote_mode_uses_remote_factory(self, logger):
        remote = MockTranslationProvider()
        assert create_translation_provider("remote", logger, remote_factory=lambda: remote) is remote

    def test_construction_error_degrades_to_mock(self, logger, log_entries):
        def failing():
            raise ProviderConstructionError("no credentials")

        provider = create_translation_provider("remote", logger, remote_factory=failing)

        assert isinstance(provider, MockTranslationProvider)
        warnings = [e for e in log_entries if e["level"] == "WARN"]
        assert len(warnings) == 1
        assert ("error", "no credentials") in warnings[0]["fields"]

    def test_unexpected_error_degrades_to_mock(self, logger):
        def failing():
            raise OSError("network down")

        provider = create_translation_provider("remote", logger, remote_factory=failing)
        assert isinstance(provider, MockTranslationProvider)

    def test_missing_api_key_degrades_to_mock(self, logger):
        provider = create_translation_provider("remote", logger, api_key="")
        assert isinstance(provider, MockTranslationProvider)

    def test_unknown_mode_is_rejected(self, logger):
        with pytest.raises(ValueError):
            create_translation_provider("cloud", logger)
