"""
Provider selection policy.

The provider is chosen once at startup: 'mock' mode always yields the
mock, otherwise the remote provider is attempted and any construction
failure degrades to the mock with a single warning.
"""

from typing import Callable, Optional

from relay_translator.core.exceptions import ProviderConstructionError
from relay_translator.utils.unified_logger import UnifiedLogger
from .base import TranslationProvider
from .google import GoogleTranslateProvider
from .mock import MockTranslationProvider


PROVIDER_MODES = ('mock', 'remote')


def create_translation_provider(mode: str, logger: UnifiedLogger,
                                remote_factory: Optional[Callable[[], TranslationProvider]] = None,
                                **kwargs) -> TranslationProvider:
    """
    Factory function to create the translation provider

    Args:
        mode: 'mock' or 'remote'
        logger: Logger receiving the selection / degradation line
        remote_factory: Builds the remote provider; defaults to GoogleTranslateProvider(**kwargs)
        **kwargs: api_key, api_endpoint, timeout for the default remote provider

    Returns:
        A ready TranslationProvider
    """
    if mode not in PROVIDER_MODES:
        raise ValueError(f"Unknown provider mode: {mode!r}. Use one of {', '.join(PROVIDER_MODES)}")

    if mode == 'mock':
        logger.info("using mock translation service")
        return MockTranslationProvider()

    if remote_factory is None:
        def remote_factory():
            return GoogleTranslateProvider(**kwargs)

    try:
        provider = remote_factory()
    except ProviderConstructionError as e:
        logger.warn("remote translation service unavailable, using mock", "error", str(e))
        return MockTranslationProvider()
    except Exception as e:
        logger.warn("remote translation service failed to start, using mock",
                    "error", f"{type(e).__name__}: {e}")
        return MockTranslationProvider()

    logger.info("using remote translation service", "provider", provider.name)
    return provider
