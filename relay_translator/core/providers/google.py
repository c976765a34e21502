"""
Google Cloud Translation provider implementation.

This module provides the GoogleTranslateProvider class for the
Translation API v2 REST endpoint, authenticated with an API key.
"""

import re
from typing import Optional

import httpx

from relay_translator.config import GOOGLE_TRANSLATE_ENDPOINT, REQUEST_TIMEOUT
from relay_translator.core.exceptions import ProviderConstructionError, ProviderError
from .base import TranslationProvider


LANGUAGE_TAG_PATTERN = re.compile(r'^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$')


class GoogleTranslateProvider(TranslationProvider):
    """
    Provider for the Google Cloud Translation API (v2).

    Configuration:
        api_key: Google Cloud API key (required)
        api_endpoint: Translation endpoint URL
        timeout: Request timeout in seconds

    Example:
        >>> provider = GoogleTranslateProvider(api_key="AI...")
        >>> provider.translate("Hello", "fr")
    """

    name = "google"

    def __init__(self, api_key: str, api_endpoint: str = GOOGLE_TRANSLATE_ENDPOINT,
                 timeout: int = REQUEST_TIMEOUT,
                 transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the Google provider.

        Args:
            api_key: Google Cloud API key
            api_endpoint: Translation endpoint URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)

        Raises:
            ProviderConstructionError: If no API key is set or the client cannot be created
        """
        if not api_key:
            raise ProviderConstructionError(
                "Google Translate provider requires an API key. "
                "Set GOOGLE_TRANSLATE_API_KEY environment variable."
            )
        self.api_key = api_key
        self.api_endpoint = api_endpoint
        try:
            self._client = httpx.Client(timeout=httpx.Timeout(timeout), transport=transport)
        except Exception as e:
            raise ProviderConstructionError(f"Failed to create Google Translate client: {e}") from e

    def translate(self, text: str, target_language: str) -> str:
        if not LANGUAGE_TAG_PATTERN.match(target_language or ""):
            raise ProviderError(f"Invalid language code: {target_language!r}",
                                target_language=target_language)

        payload = {
            "q": [text],
            "target": target_language,
            "format": "text",
        }

        try:
            response = self._client.post(
                self.api_endpoint,
                params={"key": self.api_key},
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Translation API returned HTTP {e.response.status_code}: {e.response.text[:200]}",
                target_language=target_language, cause=e
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Translation request failed: {e}",
                                target_language=target_language, cause=e) from e
        except ValueError as e:
            raise ProviderError(f"Translation response is not valid JSON: {e}",
                                target_language=target_language, cause=e) from e

        try:
            translations = data["data"]["translations"]
        except (KeyError, TypeError) as e:
            raise ProviderError("Translation response has an unexpected shape",
                                target_language=target_language, cause=e) from e

        if not isinstance(translations, list):
            raise ProviderError("Translation response has an unexpected shape",
                                target_language=target_language)
        if not translations:
            raise ProviderError("Translation result is empty", target_language=target_language)

        translated = translations[0].get("translatedText") if isinstance(translations[0], dict) else None
        if not isinstance(translated, str):
            raise ProviderError("Translation result has no text", target_language=target_language)
        return translated

    def close(self):
        """Close the HTTP client"""
        self._client.close()
