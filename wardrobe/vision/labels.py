"""Mapping of detected labels onto the clothing taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from wardrobe.vision.models import Category, Label

DEFAULT_CONFIDENCE = 0.65

# Lowercase noun -> (canonical type, category). Scanned in order; a later key
# only replaces a match with a strictly higher score.
CLOTHING_TYPES: dict[str, tuple[str, Category]] = {
    "shirt": ("Shirt", Category.TOP),
    "t-shirt": ("T-Shirt", Category.TOP),
    "blouse": ("Blouse", Category.TOP),
    "top": ("Top", Category.TOP),
    "trousers": ("Trousers", Category.BOTTOM),
    "pants": ("Pants", Category.BOTTOM),
    "jeans": ("Jeans", Category.BOTTOM),
    "shorts": ("Shorts", Category.BOTTOM),
    "skirt": ("Skirt", Category.BOTTOM),
    "dress": ("Dress", Category.ONE_PIECE),
    "jacket": ("Jacket", Category.OUTERWEAR),
    "hoodie": ("Hoodie", Category.OUTERWEAR),
    "coat": ("Coat", Category.OUTERWEAR),
    "sweater": ("Sweater", Category.TOP),
    "shoe": ("Shoes", Category.FOOTWEAR),
    "sneakers": ("Sneakers", Category.FOOTWEAR),
    "belt": ("Belt", Category.ACCESSORY),
    "bag": ("Bag", Category.ACCESSORY),
}


@dataclass(frozen=True, slots=True)
class TypeMatch:
    type: str
    category: Category
    confidence: float


def pick_type(labels: Iterable[Label]) -> TypeMatch:
    """Pick the clothing type backed by the highest scoring label.

    Labels without a taxonomy key are ignored; the first of several equally
    scored matches wins. Without any match the result is ``Unknown`` with the
    default confidence.
    """

    best_key: str | None = None
    best_score = 0.0
    for label in labels:
        text = label.description.lower()
        for key in CLOTHING_TYPES:
            if key in text and label.score > best_score:
                best_key, best_score = key, label.score

    if best_key is None:
        return TypeMatch(type="Unknown", category=Category.UNKNOWN, confidence=DEFAULT_CONFIDENCE)

    type_name, category = CLOTHING_TYPES[best_key]
    return TypeMatch(type=type_name, category=category, confidence=min(best_score, 1.0))
