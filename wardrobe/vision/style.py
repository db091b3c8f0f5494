"""Rule cascades for style, season and occasion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from wardrobe.vision.models import Occasion, Season, Style

TextPredicate = Callable[[str], bool]
SeasonPredicate = Callable[[str, Sequence[str]], bool]


def _contains_any(*needles: str) -> TextPredicate:
    return lambda text: any(needle in text for needle in needles)


STYLE_RULES: list[tuple[TextPredicate, Style]] = [
    (_contains_any("formal"), Style.FORMAL),
    (_contains_any("sport", "athletic"), Style.SPORT),
    (_contains_any("street", "hoodie"), Style.STREETWEAR),
    (_contains_any("business"), Style.BUSINESS),
    (_contains_any("evening"), Style.EVENING),
]

# Winter is checked first: a black linen garment is WINTER.
SEASON_RULES: list[tuple[SeasonPredicate, Season]] = [
    (
        lambda text, colors: "Black" in colors or "wool" in text or "coat" in text,
        Season.WINTER,
    ),
    (
        lambda text, colors: "linen" in text or "Beige" in colors or "White" in colors,
        Season.SUMMER,
    ),
]

OCCASION_BY_STYLE: dict[Style, Occasion] = {
    Style.FORMAL: Occasion.FORMAL,
    Style.SPORT: Occasion.SPORT,
    Style.BUSINESS: Occasion.WORK,
    Style.EVENING: Occasion.EVENING,
}


@dataclass(frozen=True, slots=True)
class StyleProfile:
    style: Style
    season: Season
    occasion: Occasion


def infer_style(text: str) -> Style:
    lowered = text.lower()
    for predicate, style in STYLE_RULES:
        if predicate(lowered):
            return style
    return Style.CASUAL


def infer_season(text: str, colors: Sequence[str]) -> Season:
    lowered = text.lower()
    for predicate, season in SEASON_RULES:
        if predicate(lowered, colors):
            return season
    return Season.ALL_SEASONS


def occasion_for(style: Style) -> Occasion:
    return OCCASION_BY_STYLE.get(style, Occasion.CASUAL)


def style_profile(text: str, colors: Sequence[str]) -> StyleProfile:
    """Derive style, season and occasion from label text and colour names."""

    style = infer_style(text)
    return StyleProfile(style=style, season=infer_season(text, colors), occasion=occasion_for(style))
