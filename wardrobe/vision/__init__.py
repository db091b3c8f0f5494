"""Clothing image analysis."""

from .analyzer import ClothingAnalyzer, build_analyzer, fuse, mock_analysis
from .client import DetectionClient, VisionClient
from .models import (
    AnalysisInput,
    ClothingAnalysis,
    DetectionBundle,
    DetectionFeature,
    ImageInputError,
    VisionRequestError,
)

__all__ = [
    "AnalysisInput",
    "ClothingAnalysis",
    "ClothingAnalyzer",
    "DetectionBundle",
    "DetectionClient",
    "DetectionFeature",
    "ImageInputError",
    "VisionClient",
    "VisionRequestError",
    "build_analyzer",
    "fuse",
    "mock_analysis",
]
