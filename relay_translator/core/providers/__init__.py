"""
Translation providers

Providers:
    - google: Google Cloud Translation API (remote)
    - mock: deterministic offline provider
"""
from .base import TranslationProvider
from .mock import MockTranslationProvider, MOCK_TRANSLATIONS
from .google import GoogleTranslateProvider
from .factory import create_translation_provider

__all__ = [
    'TranslationProvider',
    'MockTranslationProvider',
    'MOCK_TRANSLATIONS',
    'GoogleTranslateProvider',
    'create_translation_provider',
]
