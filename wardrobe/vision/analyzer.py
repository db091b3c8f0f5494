"""Clothing analysis: detection orchestration, signal fusion and mock fallback."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable

from wardrobe.config.settings import Settings
from wardrobe.metrics.prometheus_exporter import (
    clothing_analysis_total,
    vision_detection_failures_total,
)
from wardrobe.vision.brands import brand_from
from wardrobe.vision.client import DetectionClient, VisionClient
from wardrobe.vision.colors import top_colors
from wardrobe.vision.labels import pick_type
from wardrobe.vision.models import (
    AnalysisDetails,
    AnalysisInput,
    AnalysisMeta,
    AnalysisPricing,
    AnalysisSummary,
    Category,
    ClothingAnalysis,
    Condition,
    DetectionBundle,
    DetectionFeature,
    Occasion,
    Season,
    Style,
    Trend,
    VisionRequestError,
)
from wardrobe.vision.pricing import price_estimate
from wardrobe.vision.style import style_profile
from wardrobe.vision.text import condition_from, material_from, model_from, size_from, year_from

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_ANALYSIS_TIMEOUT = 20.0
MOCK_FEATURES = ["mock-analysis"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def mock_analysis(now: datetime, currency: str = "USD") -> ClothingAnalysis:
    """Fixed placeholder record used when real detection is unavailable."""

    return ClothingAnalysis(
        summary=AnalysisSummary(
            type="T-Shirt",
            category=Category.TOP,
            colors=["Gray", "Blue"],
            style=Style.CASUAL,
            season=Season.ALL_SEASONS,
            occasion=Occasion.CASUAL,
            confidence=0.85,
        ),
        details=AnalysisDetails(
            brand="Mock Brand",
            material="Cotton",
            size="M",
            condition=Condition.GOOD,
            year="2023",
            model="Mock Model T-Shirt",
        ),
        pricing=AnalysisPricing(
            estimated_value=45,
            market_price=30,
            retail_price=60,
            range=(25, 55),
            trend=Trend.STABLE,
            currency=currency,
        ),
        meta=AnalysisMeta(
            ts_iso=now.isoformat(),
            used_vision=False,
            features_used=list(MOCK_FEATURES),
        ),
    )


def fuse(
    bundle: DetectionBundle,
    now: datetime,
    currency: str = "USD",
    raw: dict[str, Any] | None = None,
) -> ClothingAnalysis:
    """Combine the five detection result sets into one clothing record."""

    match = pick_type(bundle.labels)
    colors = top_colors(bundle.colors)
    brand = brand_from(bundle.logos, bundle.web.best_guess_labels, bundle.text)
    condition = condition_from(bundle.text)

    label_text = " ".join(label.description for label in bundle.labels)
    guess_text = " ".join(bundle.web.best_guess_labels)
    profile = style_profile(f"{label_text} {guess_text}", colors)

    return ClothingAnalysis(
        summary=AnalysisSummary(
            type=match.type,
            category=match.category,
            colors=colors,
            style=profile.style,
            season=profile.season,
            occasion=profile.occasion,
            confidence=match.confidence,
        ),
        details=AnalysisDetails(
            brand=brand,
            material=material_from(bundle.text),
            size=size_from(bundle.text),
            condition=condition,
            year=year_from(bundle.text, now.date()),
            model=model_from(bundle.text, match.type, colors),
        ),
        pricing=price_estimate(brand, match.category, condition, currency=currency),
        meta=AnalysisMeta(
            ts_iso=now.isoformat(),
            used_vision=True,
            features_used=[feature.value for feature in DetectionFeature],
            raw=raw,
        ),
    )


class ClothingAnalyzer:
    """Runs the detection round for an image and fuses the results.

    Without a detection client every call returns the mock record. With one,
    the five features are requested concurrently; if any of them fails or the
    round exceeds ``timeout`` seconds the whole call degrades to the mock
    record. Only a missing or ambiguous image reference raises.
    """

    def __init__(
        self,
        client: DetectionClient | None = None,
        *,
        timeout: float = DEFAULT_ANALYSIS_TIMEOUT,
        currency: str = "USD",
        include_raw: bool = False,
        clock: Clock = _utcnow,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._currency = currency
        self._include_raw = include_raw
        self._clock = clock

    @property
    def uses_vision(self) -> bool:
        return self._client is not None

    async def analyze(self, image: AnalysisInput) -> ClothingAnalysis:
        request = image.to_image_request()

        if self._client is None:
            logger.info("Google Vision is not configured, returning mock analysis")
            return self._mock()

        try:
            responses = await asyncio.wait_for(self._detect(self._client, request), timeout=self._timeout)
            bundle = DetectionBundle.from_responses(responses)
        except asyncio.TimeoutError:
            logger.warning("Google Vision did not answer within %.1fs, using mock analysis", self._timeout)
            vision_detection_failures_total.inc()
            return self._mock()
        except VisionRequestError as exc:
            logger.warning("Google Vision request failed, using mock analysis: %s", exc)
            vision_detection_failures_total.inc()
            return self._mock()
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error during clothing detection, using mock analysis")
            vision_detection_failures_total.inc()
            return self._mock()

        raw = None
        if self._include_raw:
            raw = {feature.value: response for feature, response in responses.items()}
        clothing_analysis_total.labels(source="vision").inc()
        return fuse(bundle, self._clock(), currency=self._currency, raw=raw)

    @staticmethod
    async def _detect(
        client: DetectionClient,
        request: dict[str, Any],
    ) -> dict[DetectionFeature, Any]:
        features = list(DetectionFeature)
        tasks = [asyncio.create_task(client.annotate(request, feature)) for feature in features]
        try:
            results = await asyncio.gather(*tasks)
        finally:
            # One failure discards the round; stop the requests still in flight.
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
        return dict(zip(features, results))

    async def close(self) -> None:
        """Release the detection client's HTTP resources, if it holds any."""

        close = getattr(self._client, "close", None)
        if close is not None:
            await close()

    def _mock(self) -> ClothingAnalysis:
        clothing_analysis_total.labels(source="mock").inc()
        return mock_analysis(self._clock(), currency=self._currency)


def build_analyzer(settings: Settings) -> ClothingAnalyzer:
    """Create an analyzer wired to Google Vision when an API key is configured."""

    client = VisionClient(settings) if settings.vision_configured else None
    return ClothingAnalyzer(
        client,
        timeout=settings.vision_analysis_timeout,
        currency=settings.pricing_currency,
        include_raw=settings.vision_include_raw,
    )
