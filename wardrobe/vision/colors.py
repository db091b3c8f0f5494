"""Nearest-name classification of dominant image colours."""

from __future__ import annotations

from typing import Callable, Iterable

from wardrobe.vision.models import DominantColor

FALLBACK_COLOR = "Mixed"
MAX_COLORS = 3

RGBPredicate = Callable[[int, int, int], bool]


def _spread(r: int, g: int, b: int) -> int:
    return max(r, g, b) - min(r, g, b)


# Evaluated top to bottom, first match wins. Several rules overlap, so the
# order is part of the behaviour.
COLOR_RULES: list[tuple[RGBPredicate, str]] = [
    (lambda r, g, b: _spread(r, g, b) < 25 and max(r, g, b) < 60, "Black"),
    (lambda r, g, b: _spread(r, g, b) < 25 and max(r, g, b) > 200, "White"),
    (lambda r, g, b: r > 150 and g < 100 and b < 100, "Red"),
    (lambda r, g, b: g > 150 and r < 120, "Green"),
    (lambda r, g, b: b > 150 and r < 120, "Blue"),
    (lambda r, g, b: r > 200 and g > 200 and b < 120, "Yellow"),
    (lambda r, g, b: r > 200 and g > 150 and b < 140, "Beige"),
    (lambda r, g, b: r > 160 and b > 160 and g < 140, "Purple"),
]

COLOR_NAMES = tuple(name for _, name in COLOR_RULES) + (FALLBACK_COLOR,)


def color_name(red: int, green: int, blue: int) -> str:
    """Map an RGB triple onto the fixed palette."""

    for predicate, name in COLOR_RULES:
        if predicate(red, green, blue):
            return name
    return FALLBACK_COLOR


def top_colors(colors: Iterable[DominantColor]) -> list[str]:
    """Name the three most prevalent colours, never returning an empty list."""

    ranked = sorted(colors, key=lambda color: color.pixel_fraction, reverse=True)
    names = [color_name(c.red, c.green, c.blue) for c in ranked[:MAX_COLORS]]
    return names or [FALLBACK_COLOR]
