"""Tests for coverage statistics and signal blob grouping."""

import pytest

from analysis.blobs import group_signal_blobs
from analysis.statistics import metric_stats, summarize_by_building, summarize_coverage
from core.metrics import METRIC_RANGES, MetricType, QualityLevel
from core.models import RFMetrics, RFPoint, Vec3


def _point(building_id: str, k: int, snr: float, position: Vec3 | None = None, best: bool = False) -> RFPoint:
    if best:
        metrics = RFMetrics(**{m.value: METRIC_RANGES[m].max for m in MetricType})
    else:
        metrics = RFMetrics(rssi=-67.5, cqi=7, rsrp=-95.0, rsrq=-10.0, snr=snr)
    return RFPoint(
        id=f"{building_id}-point-{k}",
        building_id=building_id,
        position=position or Vec3(float(k), 0.0, 0.0),
        metrics=metrics,
    )


# -----------------------------------------------------------------------------
# Statistics
# -----------------------------------------------------------------------------


def test_metric_stats() -> None:
    points = [_point("a", 0, 5.0), _point("a", 1, 10.0), _point("a", 2, 15.0)]
    stats = metric_stats(points, "snr")
    assert stats.metric is MetricType.SNR
    assert stats.average == pytest.approx(10.0)
    assert stats.minimum == 5.0
    assert stats.maximum == 15.0
    assert stats.quality is QualityLevel.GOOD


def test_metric_stats_empty() -> None:
    stats = metric_stats([], MetricType.RSSI)
    assert (stats.average, stats.minimum, stats.maximum) == (0.0, 0.0, 0.0)
    assert stats.quality is QualityLevel.POOR


def test_summary_of_perfect_signal() -> None:
    summary = summarize_coverage([_point("a", k, 0.0, best=True) for k in range(4)])
    assert summary.point_count == 4
    assert summary.normalized_average == pytest.approx(1.0)
    assert summary.quality is QualityLevel.EXCELLENT
    payload = summary.to_payload()
    assert payload["metrics"]["cqi"]["max"] == 15.0
    assert payload["quality"] == "excellent"


def test_summary_mixes_metrics() -> None:
    # rssi/rsrp/rsrq at mid range, cqi at 7/15, snr at 0
    summary = summarize_coverage([_point("a", 0, 0.0)])
    expected = (0.5 + 7 / 15 + 0.5 + 0.5 + 0.0) / 5
    assert summary.normalized_average == pytest.approx(expected)
    assert summary.quality is QualityLevel.FAIR


def test_summary_by_building_keeps_order() -> None:
    points = [_point("b", 0, 20.0), _point("a", 0, 0.0), _point("b", 1, 20.0)]
    summaries = summarize_by_building(points)
    assert list(summaries) == ["b", "a"]
    assert summaries["b"].point_count == 2
    assert summaries["b"].metrics[MetricType.SNR].quality is QualityLevel.EXCELLENT
    assert summaries["a"].metrics[MetricType.SNR].quality is QualityLevel.POOR


# -----------------------------------------------------------------------------
# Blobs
# -----------------------------------------------------------------------------


def test_blobs_group_by_stride_within_buildings() -> None:
    points = [_point("a", k, 20.0) for k in range(7)] + [_point("b", k, 0.0) for k in range(2)]
    blobs = group_signal_blobs(points, MetricType.SNR, stride=3)

    assert [b.building_id for b in blobs] == ["a", "a", "a", "b"]
    assert blobs[0].position == pytest.approx((1.0, 0.0, 0.0))
    assert blobs[2].position == pytest.approx((6.0, 0.0, 0.0))
    assert blobs[3].position == pytest.approx((0.5, 0.0, 0.0))


def test_blob_color_and_size_follow_quality() -> None:
    points = [_point("a", k, 20.0) for k in range(3)] + [_point("b", k, 0.0) for k in range(3)]
    good, poor = group_signal_blobs(points, "snr")
    assert good.value == pytest.approx(20.0)
    assert good.color == "#4ade80"
    assert good.size == pytest.approx(4.0)
    assert poor.color == "#f87171"
    assert poor.size == pytest.approx(7.0)
    assert good.to_payload()["buildingId"] == "a"


def test_blob_limit_and_stride_validation() -> None:
    points = [_point("a", k, 10.0) for k in range(30)]
    assert len(group_signal_blobs(points, "snr", stride=1, limit=12)) == 12
    with pytest.raises(ValueError):
        group_signal_blobs(points, "snr", stride=0)
