"""Async wrapper around the Google Cloud Vision ``images:annotate`` endpoint."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

import httpx

from wardrobe.config.settings import Settings
from wardrobe.vision.models import DetectionFeature, VisionRequestError

logger = logging.getLogger(__name__)


class DetectionClient(Protocol):
    """Anything able to run one detection feature against one image."""

    async def annotate(
        self,
        image: Mapping[str, Any],
        feature: DetectionFeature,
    ) -> dict[str, Any]:
        """Return the ``AnnotateImageResponse`` for a single feature."""


class VisionClient:
    """Issues one annotate request per detection feature."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not settings.vision_configured:
            raise RuntimeError("Google Vision API key is not configured.")

        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.google_vision_base_url.rstrip("/"),
            timeout=settings.vision_request_timeout,
            params={"key": settings.google_vision_api_key},
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _post_annotate(self, requests: list[dict[str, Any]]) -> dict[str, Any]:
        try:
            response = await self._client.post("/images:annotate", json={"requests": requests})
            response.raise_for_status()
            payload = response.json() if response.content else {}
        except httpx.TimeoutException as exc:
            raise VisionRequestError("Timed out waiting for Google Vision.") from exc
        except httpx.HTTPStatusError as exc:
            raise VisionRequestError(
                f"Google Vision returned {exc.response.status_code}: {exc.response.text}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise VisionRequestError(f"Google Vision request failed: {exc}") from exc
        except ValueError as exc:
            raise VisionRequestError("Google Vision returned a non-JSON body.") from exc

        if not isinstance(payload, dict):
            raise VisionRequestError(f"Unexpected Google Vision payload: {payload!r}")
        return payload

    async def annotate(
        self,
        image: Mapping[str, Any],
        feature: DetectionFeature,
    ) -> dict[str, Any]:
        """Run ``feature`` on ``image`` and return its single response entry."""

        payload = await self._post_annotate(
            [{"image": dict(image), "features": [{"type": feature.api_type}]}]
        )
        responses = payload.get("responses")
        if not isinstance(responses, list) or not responses:
            logger.warning("Google Vision %s response has no entries: %s", feature.value, payload)
            raise VisionRequestError(f"Empty {feature.value} response from Google Vision.")
        return responses[0]

    async def ping(self) -> bool:
        """Return ``True`` when the endpoint accepts an empty batch."""

        await self._post_annotate([])
        return True
