"""Attribute extraction from the OCR text of labels and tags."""

from __future__ import annotations

import re
from datetime import date

from wardrobe.vision.models import Condition

MIXED_MATERIALS = "Mixed Materials"

MATERIALS: tuple[str, ...] = (
    "cotton",
    "polyester",
    "wool",
    "silk",
    "linen",
    "leather",
    "denim",
    "nylon",
    "spandex",
    "viscose",
    "rayon",
    "acrylic",
    "cashmere",
    "satin",
    "suede",
    "modal",
    "elastane",
    "hemp",
    "bamboo",
    "tencel",
    "lyocell",
)

# Apostrophes count as part of a word so that "Men's" does not read as size S.
_SIZE = re.compile(
    r"(?<![\w'])(XXS|XS|S|M|L|XL|XXL|2XL|3XL|EU\s?\d{2}|US\s?\d{1,2}|UK\s?\d{1,2}|[34]\d)(?![\w'])",
    re.IGNORECASE,
)
_YEAR = re.compile(r"\b(20\d{2}|19\d{2})\b")
_MODEL = re.compile(r"\b(model|style|fit)\s*[:\-]?\s*([A-Za-z0-9\- ]{2,25})", re.IGNORECASE)

# First match wins. Nothing here yields Fair or Unknown.
CONDITION_RULES: list[tuple[re.Pattern[str], Condition]] = [
    (re.compile(r"\b(new|unworn|with tags)\b", re.IGNORECASE), Condition.NEW),
    (re.compile(r"\b(excellent|like new)\b", re.IGNORECASE), Condition.EXCELLENT),
]


def material_from(text: str) -> str:
    lowered = text.lower()
    for material in MATERIALS:
        if material in lowered:
            return material.capitalize()
    return MIXED_MATERIALS


def size_from(text: str) -> str:
    match = _SIZE.search(text)
    return match.group(0).upper() if match else "Unknown"


def condition_from(text: str) -> Condition:
    for pattern, condition in CONDITION_RULES:
        if pattern.search(text):
            return condition
    return Condition.GOOD


def year_from(text: str, today: date) -> str:
    match = _YEAR.search(text)
    return match.group(0) if match else str(today.year)


def model_from(text: str, type_name: str, colors: list[str]) -> str:
    """Model name from the tag text, else a "<type> <colour>" description."""

    match = _MODEL.search(text)
    if match:
        return match.group(2).strip()
    if type_name == "Unknown":
        return ""
    first_color = colors[0] if colors else ""
    return f"{type_name} {first_color}".strip()
