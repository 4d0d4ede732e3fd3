"""Analysis utilities - pure functions over generated RF points."""

from analysis.blobs import SignalBlob, group_signal_blobs
from analysis.statistics import (
    CoverageSummary,
    MetricStats,
    metric_stats,
    summarize_by_building,
    summarize_coverage,
)

__all__ = [
    "CoverageSummary",
    "MetricStats",
    "SignalBlob",
    "group_signal_blobs",
    "metric_stats",
    "summarize_by_building",
    "summarize_coverage",
]
