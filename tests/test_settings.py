"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from wardrobe.config.settings import get_settings


def test_defaults_run_in_mock_mode() -> None:
    settings = get_settings()

    assert not settings.vision_configured
    assert settings.pricing_currency == "USD"
    assert settings.vision_include_raw is False


def test_api_key_enables_vision(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_VISION_API_KEY", "abc")
    monkeypatch.setenv("VISION_ANALYSIS_TIMEOUT", "7.5")
    monkeypatch.setenv("VISION_INCLUDE_RAW", "true")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.vision_configured
    assert settings.vision_analysis_timeout == 7.5
    assert settings.vision_include_raw is True


def test_credentials_variable_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_VISION_CREDENTIALS", "from-credentials")
    get_settings.cache_clear()

    assert get_settings().google_vision_api_key == "from-credentials"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
