"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import io
import random
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from relay_translator.core.exceptions import ProviderError
from relay_translator.core.languages import LanguageCatalog, LanguageEntry, LanguageSelector
from relay_translator.core.orchestrator import RelayOrchestrator
from relay_translator.core.providers import MockTranslationProvider, TranslationProvider
from relay_translator.utils.unified_logger import LogLevel, UnifiedLogger


class RecordingProvider(TranslationProvider):
    """Provider double that records calls and can fail on a given call number."""

    name = "recording"

    def __init__(self, fail_on_call=None, inner=None):
        self.calls = []
        self.fail_on_call = fail_on_call
        self.inner = inner or MockTranslationProvider()

    def translate(self, text, target_language):
        self.calls.append((text, target_language))
        if self.fail_on_call == len(self.calls):
            raise ProviderError("backend unavailable", target_language=target_language)
        return self.inner.translate(text, target_language)


@pytest.fixture
def log_entries():
    """Structured entries emitted by the test logger."""
    return []


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def logger(log_entries, log_stream):
    """Logger writing to an in-memory stream at DEBUG level."""
    return UnifiedLogger(
        min_level=LogLevel.DEBUG,
        stream=log_stream,
        enable_colors=False,
        storage_callback=log_entries.append,
    )


@pytest.fixture
def four_language_catalog():
    return LanguageCatalog([
        LanguageEntry(code='en', name='English', native_name='English', is_official=True),
        LanguageEntry(code='es', name='Spanish', native_name='Español', is_official=True),
        LanguageEntry(code='fr', name='French', native_name='Français', is_official=True),
        LanguageEntry(code='de', name='German', native_name='Deutsch', is_official=True),
    ])


@pytest.fixture
def seeded_selector():
    return LanguageSelector(random.Random(1234))


@pytest.fixture
def make_orchestrator(four_language_catalog, seeded_selector, logger):
    """Build an orchestrator around a given provider."""
    def _make(provider=None, catalog=None):
        return RelayOrchestrator(
            catalog=catalog if catalog is not None else four_language_catalog,
            selector=seeded_selector,
            provider=provider or MockTranslationProvider(),
            logger=logger,
        )
    return _make


@pytest.fixture
def languages_file(tmp_path):
    """Write a catalog file and return its path."""
    def _write(content):
        path = tmp_path / "languages.json"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def recording_provider():
    """Factory for RecordingProvider doubles."""
    return RecordingProvider
