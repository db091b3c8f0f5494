"""Fakes and payload builders shared by the clothing analysis tests."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from wardrobe.vision.models import DetectionFeature

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_responses(
    labels: Iterable[tuple[str, float]] = (),
    colors: Iterable[tuple[int, int, int, float]] = (),
    logos: Iterable[str] = (),
    best_guess: Iterable[str] = (),
    text: str = "",
) -> dict[DetectionFeature, dict[str, Any]]:
    """Build raw annotate responses the way Google Vision shapes them."""

    return {
        DetectionFeature.LABELS: {
            "labelAnnotations": [{"description": d, "score": s} for d, s in labels],
        },
        DetectionFeature.IMAGE_PROPERTIES: {
            "imagePropertiesAnnotation": {
                "dominantColors": {
                    "colors": [
                        {"color": {"red": r, "green": g, "blue": b}, "pixelFraction": f}
                        for r, g, b, f in colors
                    ]
                }
            }
        },
        DetectionFeature.LOGOS: {"logoAnnotations": [{"description": logo} for logo in logos]},
        DetectionFeature.WEB: {"webDetection": {"bestGuessLabels": [{"label": g} for g in best_guess]}},
        DetectionFeature.TEXT: {"fullTextAnnotation": {"text": text}} if text else {},
    }


class FakeDetectionClient:
    """In-memory stand-in for VisionClient."""

    def __init__(
        self,
        responses: Mapping[DetectionFeature, Any] | None = None,
        *,
        fail_on: DetectionFeature | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.responses = dict(responses or make_responses())
        self.fail_on = fail_on
        self.error = error
        self.delay = delay
        self.calls: list[tuple[dict[str, Any], DetectionFeature]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.finished: list[DetectionFeature] = []
        self.cancelled: list[DetectionFeature] = []
        self.closed = False

    async def annotate(self, image: Mapping[str, Any], feature: DetectionFeature) -> dict[str, Any]:
        self.calls.append((dict(image), feature))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if feature is self.fail_on and self.error is not None:
                raise self.error
            if self.delay:
                await asyncio.sleep(self.delay)
            self.finished.append(feature)
            return self.responses[feature]
        except asyncio.CancelledError:
            self.cancelled.append(feature)
            raise
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        self.closed = True
