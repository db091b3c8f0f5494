"""Brand lookup tables and brand inference from logo, web and OCR signals."""

from __future__ import annotations

from typing import Iterable, Sequence

UNKNOWN_BRAND = "Unknown Brand"

BRAND_HINTS: tuple[str, ...] = (
    "Nike",
    "Adidas",
    "Puma",
    "Zara",
    "H&M",
    "Uniqlo",
    "Gucci",
    "Prada",
    "Louis Vuitton",
    "Hermès",
    "Chanel",
    "Balenciaga",
    "Calvin Klein",
    "Tommy Hilfiger",
    "Levi",
    "Levi's",
    "Ralph Lauren",
    "New Balance",
    "Asics",
    "Reebok",
    "Fendi",
    "Burberry",
    "Moncler",
    "Stone Island",
    "The North Face",
    "Patagonia",
    "Under Armour",
    "Off-White",
    "Bape",
    "Carhartt",
    "Diesel",
    "Guess",
    "Lacoste",
)

LUXURY_BRANDS = frozenset(
    {"Gucci", "Prada", "Louis Vuitton", "Chanel", "Hermès", "Fendi", "Burberry", "Moncler"}
)
ATHLETIC_BRANDS = frozenset(
    {
        "Nike",
        "Adidas",
        "Puma",
        "New Balance",
        "Reebok",
        "Asics",
        "The North Face",
        "Patagonia",
        "Stone Island",
    }
)
MASS_MARKET_BRANDS = frozenset(
    {
        "Zara",
        "H&M",
        "Uniqlo",
        "Levi",
        "Levi's",
        "Calvin Klein",
        "Tommy Hilfiger",
        "Lacoste",
        "Diesel",
        "Guess",
        "Carhartt",
    }
)


def find_brand(text: str, hints: Sequence[str] = BRAND_HINTS) -> str | None:
    """Return the first hint contained in ``text`` (case-insensitive)."""

    lowered = text.lower()
    for brand in hints:
        if brand.lower() in lowered:
            return brand
    return None


def brand_from(logos: Iterable[str], best_guess_labels: Sequence[str], text: str) -> str:
    """Resolve the brand using logo, then web best guess, then OCR text.

    A detected logo is returned verbatim. The best guess only counts when it
    names a known brand, in which case the known spelling is returned.
    """

    for logo in logos:
        if logo:
            return logo

    if best_guess_labels:
        brand = find_brand(best_guess_labels[0])
        if brand:
            return brand

    return find_brand(text) or UNKNOWN_BRAND
