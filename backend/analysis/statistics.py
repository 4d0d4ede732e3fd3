"""Coverage statistics over generated RF points."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypedDict

import numpy as np

from core.metrics import (
    METRIC_RANGES,
    MetricRange,
    MetricType,
    QualityLevel,
    normalize,
    quality_for_normalized,
    quality_level,
)
from core.models import RFPoint


class MetricStatsPayload(TypedDict):
    average: float
    min: float
    max: float
    quality: str


class CoveragePayload(TypedDict):
    pointCount: int
    normalizedAverage: float
    quality: str
    metrics: dict[str, MetricStatsPayload]


@dataclass
class MetricStats:
    metric: MetricType
    average: float
    minimum: float
    maximum: float
    quality: QualityLevel

    def to_payload(self) -> MetricStatsPayload:
        return {"average": self.average, "min": self.minimum, "max": self.maximum, "quality": self.quality.value}


@dataclass
class CoverageSummary:
    """Per-metric stats plus an overall score (mean of clamped normalized averages)."""

    point_count: int
    normalized_average: float
    quality: QualityLevel
    metrics: dict[MetricType, MetricStats]

    def to_payload(self) -> CoveragePayload:
        return {
            "pointCount": self.point_count,
            "normalizedAverage": self.normalized_average,
            "quality": self.quality.value,
            "metrics": {metric.value: stats.to_payload() for metric, stats in self.metrics.items()},
        }


def metric_values(points: Sequence[RFPoint], metric: MetricType | str) -> np.ndarray:
    return np.array([p.metrics[metric] for p in points], dtype=float)


def metric_stats(
    points: Sequence[RFPoint],
    metric: MetricType | str,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> MetricStats:
    """Average, min and max of one metric. Empty input reports zeros and ``poor``."""
    metric = MetricType(metric)
    if not points:
        return MetricStats(metric, 0.0, 0.0, 0.0, QualityLevel.POOR)
    values = metric_values(points, metric)
    average = float(values.mean())
    return MetricStats(
        metric=metric,
        average=average,
        minimum=float(values.min()),
        maximum=float(values.max()),
        quality=quality_level(average, metric, ranges),
    )


def summarize_coverage(
    points: Sequence[RFPoint],
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> CoverageSummary:
    stats = {metric: metric_stats(points, metric, ranges) for metric in MetricType}
    if not points:
        return CoverageSummary(0, 0.0, QualityLevel.POOR, stats)
    normalized = np.array([normalize(s.average, m, ranges) for m, s in stats.items()])
    overall = float(normalized.mean())
    return CoverageSummary(len(points), overall, quality_for_normalized(overall), stats)


def summarize_by_building(
    points: Iterable[RFPoint],
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> dict[str, CoverageSummary]:
    """Coverage summary per building, in first-seen order."""
    grouped: dict[str, list[RFPoint]] = {}
    for point in points:
        grouped.setdefault(point.building_id, []).append(point)
    return {building_id: summarize_coverage(group, ranges) for building_id, group in grouped.items()}
