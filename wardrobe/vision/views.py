"""Narrow projections of a ClothingAnalysis used by the upload screens."""

from __future__ import annotations

from enum import Enum
from typing import Any

from wardrobe.vision.models import ClothingAnalysis


class AnalysisView(str, Enum):
    BASIC = "basic"
    DETAILS = "details"
    PRICING = "pricing"
    FULL = "full"
    COMPACT = "compact"

    @classmethod
    def parse(cls, value: str | None) -> AnalysisView:
        """Map a request value onto a view.

        A missing value means ``basic``; an unrecognised one gets the compact
        summary without notes or provenance fields.
        """

        try:
            return cls((value or cls.BASIC.value).lower())
        except ValueError:
            return cls.COMPACT


def _source(analysis: ClothingAnalysis) -> str:
    return "google-vision" if analysis.meta.used_vision else "mock"


def basic_view(analysis: ClothingAnalysis) -> dict[str, Any]:
    summary = analysis.summary
    features = analysis.meta.features_used
    if analysis.meta.used_vision:
        notes = f"Analyzed using Google Vision API with {len(features)} features"
    else:
        notes = "Google Vision API not configured or unavailable, showing placeholder analysis"
    return {
        "type": summary.type,
        "category": summary.category.value,
        "colors": list(summary.colors),
        "style": summary.style.value,
        "season": [summary.season.value],
        "occasion": [summary.occasion.value],
        "confidence": round(summary.confidence * 100),
        "notes": notes,
        "lastUpdated": analysis.meta.ts_iso,
        "source": _source(analysis),
        "usedVision": analysis.meta.used_vision,
    }


def details_view(analysis: ClothingAnalysis) -> dict[str, Any]:
    details = analysis.details
    summary = analysis.summary
    first_color = summary.colors[0] if summary.colors else ""
    return {
        "details": {
            "brand": details.brand,
            "material": details.material,
            "size": details.size,
            "condition": details.condition.value,
            "year": details.year,
            "model": details.model or f"{summary.type} {first_color}".strip(),
        },
        "usedVision": analysis.meta.used_vision,
    }


def pricing_view(analysis: ClothingAnalysis) -> dict[str, Any]:
    pricing = analysis.pricing
    low, high = pricing.range
    return {
        "priceAnalysis": {
            "estimatedPrice": pricing.estimated_value,
            "marketPrice": pricing.market_price,
            "retailPrice": pricing.retail_price,
            "currency": pricing.currency,
            "source": "Google Vision + Market Analysis" if analysis.meta.used_vision else "Estimated",
            "lastUpdated": analysis.meta.ts_iso,
            "priceRange": {"min": low, "max": high},
            "trending": pricing.trend.value.lower(),
        },
        "usedVision": analysis.meta.used_vision,
    }


def full_view(analysis: ClothingAnalysis) -> dict[str, Any]:
    return analysis.to_payload()


def compact_view(analysis: ClothingAnalysis) -> dict[str, Any]:
    view = basic_view(analysis)
    return {
        key: view[key]
        for key in ("type", "category", "colors", "style", "season", "occasion", "confidence")
    }


_RENDERERS = {
    AnalysisView.BASIC: basic_view,
    AnalysisView.DETAILS: details_view,
    AnalysisView.PRICING: pricing_view,
    AnalysisView.FULL: full_view,
    AnalysisView.COMPACT: compact_view,
}


def render(analysis: ClothingAnalysis, view: AnalysisView) -> dict[str, Any]:
    return _RENDERERS[view](analysis)
