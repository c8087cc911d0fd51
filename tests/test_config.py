"""
Tests for settings loading and cache wiring.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from findhelp.core.config import Settings
from findhelp.wiring import dependencies


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.OPENING_STATUS_CACHE_MAX_SIZE == 500
    assert settings.OPENING_STATUS_CACHE_DURATION_MS == 60_000
    assert settings.OPENING_STATUS_SWEEP_INTERVAL_SECONDS == 300.0
    assert settings.OPENING_STATUS_SWEEP_ENABLED is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENING_STATUS_CACHE_MAX_SIZE", "25")
    monkeypatch.setenv("OPENING_STATUS_SWEEP_ENABLED", "false")

    settings = Settings(_env_file=None)

    assert settings.OPENING_STATUS_CACHE_MAX_SIZE == 25
    assert settings.OPENING_STATUS_SWEEP_ENABLED is False


def test_cache_is_built_once_from_settings(monkeypatch):
    monkeypatch.setattr(dependencies, "_opening_status_cache", None)
    monkeypatch.setattr(dependencies.settings, "OPENING_STATUS_CACHE_MAX_SIZE", 7)

    cache = dependencies.get_opening_status_cache()

    assert cache is dependencies.get_opening_status_cache()
    assert cache.get_stats()["max_size"] == 7


def test_non_positive_cache_size_is_rejected(monkeypatch):
    monkeypatch.setenv("OPENING_STATUS_CACHE_MAX_SIZE", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
