"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


clothing_analysis_total = Counter(
    "clothing_analysis_total",
    "Total number of clothing analyses, by where the result came from.",
    ["source"],
)

vision_detection_failures_total = Counter(
    "vision_detection_failures_total",
    "Detection rounds that failed and degraded to the mock record.",
)
