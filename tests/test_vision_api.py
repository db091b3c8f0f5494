"""Tests for the /vision/analyze endpoint."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from fakes import FIXED_NOW, FakeDetectionClient, fixed_clock, make_responses
from wardrobe.api.main import app, get_analyzer
from wardrobe.vision import ClothingAnalyzer

RESPONSES = make_responses(
    labels=[("Sneakers", 0.91)],
    colors=[(10, 10, 12, 0.8)],
    text="Nike size L 100% Polyester New with tags",
)


@pytest.fixture
def vision_client() -> Iterator[TestClient]:
    app.dependency_overrides[get_analyzer] = lambda: ClothingAnalyzer(
        FakeDetectionClient(RESPONSES),
        clock=fixed_clock,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_missing_image_is_bad_request() -> None:
    response = TestClient(app).post("/vision/analyze", json={"analysisType": "basic"})

    assert response.status_code == 400
    assert response.json() == {"error": "Image data is required"}


def test_two_image_references_are_bad_request() -> None:
    response = TestClient(app).post(
        "/vision/analyze",
        json={"image": "QUJD", "httpUrl": "https://example.com/a.jpg"},
    )

    assert response.status_code == 400
    assert "exactly one" in response.json()["error"]


def test_unconfigured_service_returns_mock_basic_view() -> None:
    response = TestClient(app).post("/vision/analyze", json={"image": "data:image/png;base64,QUJD"})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "T-Shirt"
    assert body["confidence"] == 85
    assert body["season"] == ["ALL_SEASONS"]
    assert body["source"] == "mock"
    assert body["usedVision"] is False


def test_basic_view(vision_client: TestClient) -> None:
    body = vision_client.post("/vision/analyze", json={"image": "QUJD"}).json()

    assert body["type"] == "Sneakers"
    assert body["category"] == "FOOTWEAR"
    assert body["colors"] == ["Black"]
    assert body["confidence"] == 91
    assert body["occasion"] == ["CASUAL"]
    assert body["source"] == "google-vision"
    assert body["lastUpdated"] == FIXED_NOW.isoformat()
    assert body["notes"] == "Analyzed using Google Vision API with 5 features"


def test_details_view(vision_client: TestClient) -> None:
    body = vision_client.post(
        "/vision/analyze",
        json={"gcsUri": "gs://closet/sneaker.jpg", "analysisType": "details"},
    ).json()

    assert body["details"] == {
        "brand": "Nike",
        "material": "Polyester",
        "size": "L",
        "condition": "New",
        "year": "2026",
        "model": "Sneakers Black",
    }


def test_pricing_view(vision_client: TestClient) -> None:
    body = vision_client.post(
        "/vision/analyze",
        json={"httpUrl": "https://example.com/sneaker.jpg", "analysisType": "pricing"},
    ).json()

    assert body["priceAnalysis"]["marketPrice"] == 187
    assert body["priceAnalysis"]["estimatedPrice"] == 281
    assert body["priceAnalysis"]["retailPrice"] == 374
    assert body["priceAnalysis"]["priceRange"] == {"min": 150, "max": 337}
    assert body["priceAnalysis"]["trending"] == "stable"


def test_full_view_and_unknown_type(vision_client: TestClient) -> None:
    full = vision_client.post("/vision/analyze", json={"image": "QUJD", "analysisType": "full"}).json()
    fallback = vision_client.post("/vision/analyze", json={"image": "QUJD", "analysisType": "fancy"}).json()

    assert set(full) == {"summary", "details", "pricing", "meta"}
    assert full["meta"]["featuresUsed"][0] == "labelDetection"
    assert fallback == {
        "type": "Sneakers",
        "category": "FOOTWEAR",
        "colors": ["Black"],
        "style": "Casual",
        "season": ["WINTER"],
        "occasion": ["CASUAL"],
        "confidence": 91,
    }
