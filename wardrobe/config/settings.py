"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    google_vision_api_key: str = ""
    google_vision_base_url: str = "https://vision.googleapis.com/v1"
    vision_request_timeout: float = 15.0
    vision_analysis_timeout: float = 20.0
    vision_include_raw: bool = False

    pricing_currency: str = "USD"

    @property
    def vision_configured(self) -> bool:
        """Whether real detection calls may be issued."""

        return bool(self.google_vision_api_key)


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        google_vision_api_key=os.getenv(
            "GOOGLE_VISION_API_KEY",
            os.getenv("GOOGLE_VISION_CREDENTIALS", ""),
        ),
        google_vision_base_url=os.getenv(
            "GOOGLE_VISION_BASE_URL",
            "https://vision.googleapis.com/v1",
        ),
        vision_request_timeout=float(os.getenv("VISION_REQUEST_TIMEOUT", "15")),
        vision_analysis_timeout=float(os.getenv("VISION_ANALYSIS_TIMEOUT", "20")),
        vision_include_raw=_as_bool(os.getenv("VISION_INCLUDE_RAW", "false")),
        pricing_currency=os.getenv("PRICING_CURRENCY", "USD"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
