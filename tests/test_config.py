"""
Tests for environment-driven configuration.
"""

from pathlib import Path

import pytest

from recipe_workbench.config import LoggingConfig, WorkbenchConfig, get_config_summary


class TestWorkbenchConfig:
    """Test cases for WorkbenchConfig."""

    def test_default_delay_is_two_seconds(self, monkeypatch):
        monkeypatch.delenv("RECIPE_GENERATION_DELAY_MS", raising=False)
        assert WorkbenchConfig.get_generation_delay_seconds() == 2.0

    def test_delay_is_converted_from_milliseconds(self, monkeypatch):
        monkeypatch.setenv("RECIPE_GENERATION_DELAY_MS", "500")
        assert WorkbenchConfig.get_generation_delay_seconds() == 0.5

    def test_zero_delay_is_allowed(self, monkeypatch):
        monkeypatch.setenv("RECIPE_GENERATION_DELAY_MS", "0")
        assert WorkbenchConfig.get_generation_delay_seconds() == 0.0

    @pytest.mark.parametrize("raw", ["abc", "-5", "  ", "inf", "-inf", "nan", "1e999"])
    def test_invalid_delay_falls_back_to_default(self, monkeypatch, raw):
        monkeypatch.setenv("RECIPE_GENERATION_DELAY_MS", raw)
        assert WorkbenchConfig.get_generation_delay_seconds() == 2.0

    def test_random_seed(self, monkeypatch):
        monkeypatch.setenv("RECIPE_RANDOM_SEED", "123")
        assert WorkbenchConfig.get_random_seed() == 123

    def test_random_seed_unset_or_invalid(self, monkeypatch):
        monkeypatch.delenv("RECIPE_RANDOM_SEED", raising=False)
        assert WorkbenchConfig.get_random_seed() is None
        monkeypatch.setenv("RECIPE_RANDOM_SEED", "not-a-number")
        assert WorkbenchConfig.get_random_seed() is None


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    def test_log_level_default_and_case(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert LoggingConfig.get_log_level() == "INFO"
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingConfig.get_log_level() == "DEBUG"

    @pytest.mark.parametrize("raw", ["false", "0", "No", "OFF"])
    def test_events_can_be_disabled(self, monkeypatch, raw):
        monkeypatch.setenv("RECIPE_EVENTS_ENABLED", raw)
        assert LoggingConfig.events_enabled() is False

    def test_events_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv("RECIPE_EVENTS_ENABLED", raising=False)
        assert LoggingConfig.events_enabled() is True

    def test_event_log_path(self, monkeypatch):
        monkeypatch.setenv("RECIPE_EVENT_LOG", "logs/custom.log")
        assert LoggingConfig.get_event_log_path() == Path("logs/custom.log")


def test_config_summary_keys():
    summary = get_config_summary()
    assert set(summary) == {
        "generation_delay_seconds",
        "random_seed",
        "log_level",
        "events_enabled",
        "event_log_path",
    }
