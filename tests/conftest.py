"""Test configuration: isolate every test from the caller's environment."""

from __future__ import annotations

import pytest

from wardrobe.config.settings import get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GOOGLE_VISION_API_KEY",
        "GOOGLE_VISION_CREDENTIALS",
        "VISION_INCLUDE_RAW",
        "PRICING_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
