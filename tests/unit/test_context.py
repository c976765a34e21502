"""Unit tests for the relay dependency bundle and settings."""

import io

import pytest

from relay_translator.config import RelaySettings, parse_log_level
from relay_translator.core.context import build_relay_context
from relay_translator.core.exceptions import ProviderConstructionError
from relay_translator.core.providers import MockTranslationProvider
from relay_translator.utils.unified_logger import LogLevel


class TestRelaySettings:
    """Test environment-driven settings."""

    @pytest.mark.parametrize("value,expected", [("debug", "DEBUG"), (" Warning ", "WARN"), ("FATAL", "FATAL")])
    def test_parse_log_level(self, value, expected):
        assert parse_log_level(value) == expected

    @pytest.mark.parametrize("value", ["bogus", "", None])
    def test_unknown_log_level_falls_back(self, value):
        assert parse_log_level(value) == "INFO"

    def test_development_env_selects_mock(self, monkeypatch):
        monkeypatch.setattr("relay_translator.config.APP_ENV", "development")
        assert RelaySettings.from_env().provider_mode == "mock"

    def test_test_env_selects_mock(self, monkeypatch):
        monkeypatch.setattr("relay_translator.config.APP_ENV", "test")
        assert RelaySettings.from_env().provider_mode == "mock"

    def test_production_env_selects_remote(self, monkeypatch):
        monkeypatch.setattr("relay_translator.config.APP_ENV", "production")
        assert RelaySettings.from_env().provider_mode == "remote"


class TestBuildRelayContext:
    """Test one-time construction of shared dependencies."""

    def test_mock_context(self, tmp_path, logger):
        settings = RelaySettings(provider_mode="mock", languages_file=str(tmp_path / "missing.json"))
        context = build_relay_context(settings, logger=logger)

        assert isinstance(context.provider, MockTranslationProvider)
        assert context.catalog.codes == ("en", "es", "fr", "de")
        assert context.orchestrator.provider is context.provider
        assert context.orchestrator.catalog is context.catalog

    def test_remote_failure_degrades_once(self, tmp_path, logger, log_entries):
        settings = RelaySettings(provider_mode="remote", api_key="",
                                 languages_file=str(tmp_path / "missing.json"))
        context = build_relay_context(settings, logger=logger)
        construction_warnings = [e for e in log_entries
                                 if e["level"] == "WARN" and "mock" in e["message"]]

        for _ in range(5):
            assert context.orchestrator.execute("hello").is_ok()

        assert isinstance(context.provider, MockTranslationProvider)
        assert len(construction_warnings) == 1
        assert len([e for e in log_entries
                    if e["level"] == "WARN" and "mock" in e["message"]]) == 1

    def test_seeded_selection_is_reproducible(self, tmp_path, logger):
        settings = RelaySettings(provider_mode="mock", random_seed=5,
                                 languages_file=str(tmp_path / "missing.json"))
        first = build_relay_context(settings, logger=logger)
        second = build_relay_context(settings, logger=logger)

        draws = lambda ctx: [ctx.selector.select_random(ctx.catalog) for _ in range(10)]
        assert draws(first) == draws(second)

    def test_logger_built_from_settings(self, tmp_path):
        settings = RelaySettings(provider_mode="mock", log_level="ERROR",
                                 languages_file=str(tmp_path / "missing.json"))
        context = build_relay_context(settings)
        assert context.logger.min_level is LogLevel.ERROR

    def test_explicit_provider_is_kept(self, tmp_path, logger):
        provider = MockTranslationProvider()
        settings = RelaySettings(provider_mode="remote", languages_file=str(tmp_path / "missing.json"))
        context = build_relay_context(settings, logger=logger, provider=provider)
        assert context.provider is provider
