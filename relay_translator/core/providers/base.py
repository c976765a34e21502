"""
Base class for translation providers.

This module defines the abstract base class that every translation
backend implements. A provider exposes a single blocking operation,
``translate(text, target_language)``, and raises ProviderError on failure.
"""

from abc import ABC, abstractmethod


class TranslationProvider(ABC):
    """Abstract base class for translation providers"""

    name = "base"

    @abstractmethod
    def translate(self, text: str, target_language: str) -> str:
        """
        Translate text into the target language.

        Args:
            text: Text to translate (may be empty)
            target_language: Language code such as 'es' or 'ja'

        Returns:
            Translated text

        Raises:
            ProviderError: If the backend call fails
        """
        pass

    def close(self):
        """Release any held connections"""
        pass
