"""Connectivity checks for external AI providers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from wardrobe.config.settings import get_settings
from wardrobe.vision.client import VisionClient


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:  # pragma: no cover - defensive branch
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
    )


async def check_vision() -> IntegrationCheckResult:
    """Ping Google Vision and return the result."""

    settings = get_settings()
    if not settings.vision_configured:
        return IntegrationCheckResult(
            name="Google Vision",
            success=False,
            message="GOOGLE_VISION_API_KEY is not set; analysis runs in mock mode.",
        )

    client = VisionClient(settings)

    async def _ping() -> bool:
        try:
            return await client.ping()
        finally:
            await client.close()

    return await _run_check(
        name="Google Vision",
        factory=_ping,
        success_message="Google Vision API is reachable.",
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_vision()))
