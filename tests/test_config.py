"""Tests for environment settings."""

import pytest

from wine_sieve.config import SieveSettings

ENV_VARS = (
    "WINE_SIEVE_CATALOG_PATH",
    "WINE_SIEVE_FUZZY_THRESHOLD",
    "WINE_SIEVE_ABSENT_PASSES",
    "WINE_SIEVE_MAX_SELECTION",
    "WINE_SIEVE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = SieveSettings.from_env()

    assert settings.catalog_path is None
    assert settings.fuzzy_threshold == 0.7
    assert settings.absent_passes_ranges is True
    assert settings.max_selection == 5
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WINE_SIEVE_CATALOG_PATH", "/data/wines.json")
    monkeypatch.setenv("WINE_SIEVE_FUZZY_THRESHOLD", "0.85")
    monkeypatch.setenv("WINE_SIEVE_ABSENT_PASSES", "false")
    monkeypatch.setenv("WINE_SIEVE_MAX_SELECTION", "3")
    monkeypatch.setenv("WINE_SIEVE_LOG_LEVEL", "debug")

    settings = SieveSettings.from_env()

    assert settings.catalog_path == "/data/wines.json"
    assert settings.fuzzy_threshold == 0.85
    assert settings.absent_passes_ranges is False
    assert settings.max_selection == 3
    assert settings.log_level == "DEBUG"


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("WINE_SIEVE_FUZZY_THRESHOLD", "high")
    monkeypatch.setenv("WINE_SIEVE_MAX_SELECTION", "many")

    settings = SieveSettings.from_env()

    assert settings.fuzzy_threshold == 0.7
    assert settings.max_selection == 5


def test_threshold_is_clamped(monkeypatch):
    monkeypatch.setenv("WINE_SIEVE_FUZZY_THRESHOLD", "1.5")

    assert SieveSettings.from_env().fuzzy_threshold == 1.0


def test_builds_engine_configs():
    settings = SieveSettings(fuzzy_threshold=0.9, absent_passes_ranges=False, max_selection=2)

    assert settings.fuzzy_config().threshold == 0.9
    assert settings.filter_config().absent_passes_ranges is False
    assert settings.selection_set().max_size == 2
