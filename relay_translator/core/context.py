"""
Dependency bundle for the relay service

Everything the orchestrator and the HTTP layer share is built once here
and passed by reference; nothing is kept in module-level globals.
"""
import random
from dataclasses import dataclass
from typing import Optional

from relay_translator.config import RelaySettings
from relay_translator.core.languages import LanguageCatalog, LanguageSelector, load_catalog
from relay_translator.core.orchestrator import RelayOrchestrator
from relay_translator.core.providers import TranslationProvider, create_translation_provider
from relay_translator.utils.unified_logger import UnifiedLogger, create_logger


@dataclass
class RelayContext:
    settings: RelaySettings
    logger: UnifiedLogger
    catalog: LanguageCatalog
    selector: LanguageSelector
    provider: TranslationProvider
    orchestrator: RelayOrchestrator

    def close(self):
        self.provider.close()


def build_relay_context(settings: RelaySettings,
                        logger: Optional[UnifiedLogger] = None,
                        provider: Optional[TranslationProvider] = None) -> RelayContext:
    """
    Build the shared relay dependencies

    Args:
        settings: Explicit configuration
        logger: Logger to use; created from settings.log_level when omitted
        provider: Pre-built provider; selected from settings.provider_mode when omitted

    Returns:
        RelayContext ready to serve requests
    """
    if logger is None:
        logger = create_logger(settings.log_level)

    catalog = load_catalog(settings.languages_file, logger)

    if settings.random_seed is not None:
        selector = LanguageSelector(random.Random(settings.random_seed))
    else:
        selector = LanguageSelector()
    logger.debug("random source initialized")

    if provider is None:
        provider = create_translation_provider(
            settings.provider_mode,
            logger,
            api_key=settings.api_key,
            api_endpoint=settings.api_endpoint,
            timeout=settings.request_timeout,
        )
    logger.info("translation service initialized", "provider", provider.name)

    orchestrator = RelayOrchestrator(catalog, selector, provider, logger)
    return RelayContext(
        settings=settings,
        logger=logger,
        catalog=catalog,
        selector=selector,
        provider=provider,
        orchestrator=orchestrator,
    )
