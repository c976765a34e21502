"""
Deterministic mock provider.

Used in development and test environments, and as the degradation
target when the remote provider cannot be constructed.
"""

from .base import TranslationProvider


MOCK_TRANSLATIONS = {
    'en': "Hello world",
    'es': "Hola mundo",
    'fr': "Bonjour le monde",
    'de': "Hallo Welt",
    'ja': "こんにちは世界",
}


class MockTranslationProvider(TranslationProvider):
    """Returns fixed strings for known codes and a tagged echo otherwise"""

    name = "mock"

    def translate(self, text: str, target_language: str) -> str:
        if target_language in MOCK_TRANSLATIONS:
            return MOCK_TRANSLATIONS[target_language]
        return f"Translated to {target_language}: {text}"
