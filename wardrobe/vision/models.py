"""Data structures flowing through the clothing analysis pipeline."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_DATA_URL_PREFIX = re.compile(r"^data:image/[^;]+;base64,")
_WHITESPACE = re.compile(r"\s+")


class ImageInputError(ValueError):
    """Raised when a request does not reference exactly one image."""


class VisionRequestError(RuntimeError):
    """Raised when the detection facility fails or answers with garbage."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class Category(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    ONE_PIECE = "ONE_PIECE"
    FOOTWEAR = "FOOTWEAR"
    ACCESSORY = "ACCESSORY"
    OUTERWEAR = "OUTERWEAR"
    UNKNOWN = "UNKNOWN"


class Style(str, Enum):
    CASUAL = "Casual"
    FORMAL = "Formal"
    SPORT = "Sport"
    STREETWEAR = "Streetwear"
    BUSINESS = "Business"
    EVENING = "Evening"
    UNKNOWN = "Unknown"


class Season(str, Enum):
    ALL_SEASONS = "ALL_SEASONS"
    SUMMER = "SUMMER"
    WINTER = "WINTER"
    SPRING = "SPRING"
    AUTUMN = "AUTUMN"


class Occasion(str, Enum):
    CASUAL = "CASUAL"
    FORMAL = "FORMAL"
    SPORT = "SPORT"
    WORK = "WORK"
    EVENING = "EVENING"
    PARTY = "PARTY"
    UNKNOWN = "Unknown"


class Condition(str, Enum):
    NEW = "New"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    UNKNOWN = "Unknown"


class Trend(str, Enum):
    STABLE = "Stable"
    UP = "Up"
    DOWN = "Down"


class DetectionFeature(str, Enum):
    """Detection facilities queried for every image, with their API names."""

    LABELS = "labelDetection"
    IMAGE_PROPERTIES = "imageProperties"
    LOGOS = "logoDetection"
    WEB = "webDetection"
    TEXT = "textDetection"

    @property
    def api_type(self) -> str:
        return _API_TYPES[self]


_API_TYPES = {
    DetectionFeature.LABELS: "LABEL_DETECTION",
    DetectionFeature.IMAGE_PROPERTIES: "IMAGE_PROPERTIES",
    DetectionFeature.LOGOS: "LOGO_DETECTION",
    DetectionFeature.WEB: "WEB_DETECTION",
    DetectionFeature.TEXT: "TEXT_DETECTION",
}


@dataclass(frozen=True, slots=True)
class AnalysisInput:
    """Reference to the image to analyse: inline base64, public URL or bucket URI."""

    base64: str | None = None
    http_url: str | None = None
    gcs_uri: str | None = None

    def to_image_request(self) -> dict[str, Any]:
        """Return the ``image`` object of an annotate request.

        Raises ``ImageInputError`` unless exactly one reference is set.
        """

        provided = [value for value in (self.base64, self.http_url, self.gcs_uri) if value]
        if not provided:
            raise ImageInputError("No image provided")
        if len(provided) > 1:
            raise ImageInputError("Provide exactly one of base64, http_url or gcs_uri")

        if self.gcs_uri:
            return {"source": {"imageUri": self.gcs_uri}}
        if self.http_url:
            return {"source": {"imageUri": self.http_url}}
        return {"content": _DATA_URL_PREFIX.sub("", self.base64 or "")}


@dataclass(frozen=True, slots=True)
class Label:
    description: str
    score: float


@dataclass(frozen=True, slots=True)
class DominantColor:
    red: int
    green: int
    blue: int
    pixel_fraction: float = 0.0


@dataclass(frozen=True, slots=True)
class WebDetection:
    best_guess_labels: list[str] = field(default_factory=list)


def _check_response(feature: DetectionFeature, response: Any) -> Mapping[str, Any]:
    if not isinstance(response, Mapping):
        raise VisionRequestError(f"Malformed {feature.value} response: {response!r}")
    error = response.get("error")
    if error:
        message = error.get("message", error) if isinstance(error, Mapping) else error
        raise VisionRequestError(f"{feature.value} failed: {message}")
    return response


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


@dataclass(slots=True)
class DetectionBundle:
    """Parsed result sets of the five detection calls for one image."""

    labels: list[Label] = field(default_factory=list)
    colors: list[DominantColor] = field(default_factory=list)
    logos: list[str] = field(default_factory=list)
    web: WebDetection = field(default_factory=WebDetection)
    text: str = ""

    @classmethod
    def from_responses(cls, responses: Mapping[DetectionFeature, Any]) -> DetectionBundle:
        """Build a bundle from raw ``AnnotateImageResponse`` payloads keyed by feature."""

        checked = {
            feature: _check_response(feature, responses.get(feature, {}))
            for feature in DetectionFeature
        }

        labels = [
            Label(description=str(item.get("description", "")), score=float(item.get("score") or 0.0))
            for item in _as_list(checked[DetectionFeature.LABELS].get("labelAnnotations"))
            if isinstance(item, Mapping)
        ]

        properties = checked[DetectionFeature.IMAGE_PROPERTIES].get("imagePropertiesAnnotation") or {}
        raw_colors = _as_list((properties.get("dominantColors") or {}).get("colors"))
        colors = []
        for item in raw_colors:
            rgb = item.get("color") or {}
            colors.append(
                DominantColor(
                    red=int(rgb.get("red", 0)),
                    green=int(rgb.get("green", 0)),
                    blue=int(rgb.get("blue", 0)),
                    pixel_fraction=float(item.get("pixelFraction") or 0.0),
                )
            )

        logos = [
            str(item["description"])
            for item in _as_list(checked[DetectionFeature.LOGOS].get("logoAnnotations"))
            if isinstance(item, Mapping) and item.get("description")
        ]

        web_payload = checked[DetectionFeature.WEB].get("webDetection") or {}
        web = WebDetection(
            best_guess_labels=[
                str(item["label"])
                for item in _as_list(web_payload.get("bestGuessLabels"))
                if isinstance(item, Mapping) and item.get("label")
            ]
        )

        full_text = checked[DetectionFeature.TEXT].get("fullTextAnnotation") or {}
        text = _WHITESPACE.sub(" ", str(full_text.get("text") or "")).strip()

        return cls(labels=labels, colors=colors, logos=logos, web=web, text=text)


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AnalysisSummary(_Record):
    type: str
    category: Category
    colors: list[str] = Field(min_length=1, max_length=3)
    style: Style
    season: Season
    occasion: Occasion
    confidence: float = Field(ge=0.0, le=1.0)


class AnalysisDetails(_Record):
    brand: str = "Unknown Brand"
    material: str = "Mixed Materials"
    size: str = "Unknown"
    condition: Condition = Condition.UNKNOWN
    year: str
    model: str = ""


class AnalysisPricing(_Record):
    estimated_value: int = Field(alias="estimatedValue", gt=0)
    market_price: int = Field(alias="marketPrice", gt=0)
    retail_price: int = Field(alias="retailPrice", gt=0)
    range: tuple[int, int]
    trend: Trend = Trend.STABLE
    currency: str = "USD"


class AnalysisMeta(_Record):
    ts_iso: str = Field(alias="tsISO")
    used_vision: bool = Field(alias="usedVision")
    features_used: list[str] = Field(alias="featuresUsed")
    raw: dict[str, Any] | None = None


class ClothingAnalysis(_Record):
    """Structured clothing record handed to callers for storage and display."""

    summary: AnalysisSummary
    details: AnalysisDetails
    pricing: AnalysisPricing
    meta: AnalysisMeta

    def to_payload(self) -> dict[str, Any]:
        """Serialise using the field names the rest of the application reads."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
