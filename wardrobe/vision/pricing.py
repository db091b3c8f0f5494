"""Heuristic price estimate from brand tier, category and condition."""

from __future__ import annotations

import math
from typing import Callable

from wardrobe.vision.brands import (
    ATHLETIC_BRANDS,
    LUXURY_BRANDS,
    MASS_MARKET_BRANDS,
    UNKNOWN_BRAND,
)
from wardrobe.vision.models import AnalysisPricing, Category, Condition, Trend

DEFAULT_BRAND_BASE = 95

# Ordered, first match wins.
BRAND_TIERS: list[tuple[Callable[[str], bool], int]] = [
    (lambda brand: brand in LUXURY_BRANDS, 250),
    (lambda brand: brand in ATHLETIC_BRANDS, 120),
    (lambda brand: brand in MASS_MARKET_BRANDS, 80),
    (lambda brand: brand == UNKNOWN_BRAND, 45),
]

CATEGORY_FACTORS: dict[Category, float] = {
    Category.TOP: 0.9,
    Category.BOTTOM: 1.0,
    Category.ONE_PIECE: 1.2,
    Category.FOOTWEAR: 1.3,
    Category.ACCESSORY: 0.8,
    Category.OUTERWEAR: 1.5,
    Category.UNKNOWN: 1.0,
}

CONDITION_FACTORS: dict[Condition, float] = {
    Condition.NEW: 1.2,
    Condition.EXCELLENT: 1.0,
    Condition.GOOD: 0.85,
    Condition.FAIR: 0.6,
    Condition.UNKNOWN: 0.85,
}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive amounts (``round`` would go to even)."""

    return math.floor(value + 0.5)


def brand_base_price(brand: str) -> int:
    for predicate, base in BRAND_TIERS:
        if predicate(brand):
            return base
    return DEFAULT_BRAND_BASE


def price_estimate(
    brand: str,
    category: Category,
    condition: Condition,
    currency: str = "USD",
) -> AnalysisPricing:
    """Compute the market, resale and retail figures for one item."""

    market = round_half_up(
        brand_base_price(brand) * CATEGORY_FACTORS[category] * CONDITION_FACTORS[condition]
    )
    low = max(10, round_half_up(market * 0.8))
    high = round_half_up(market * 1.8)
    return AnalysisPricing(
        estimated_value=round_half_up(market * 1.5),
        market_price=market,
        retail_price=round_half_up(market * 2),
        range=(low, high),
        trend=Trend.STABLE,
        currency=currency,
    )
