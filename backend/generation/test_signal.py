"""Tests for height-correlated metric synthesis."""

import itertools
import random
from collections.abc import Sequence

import pytest

from core.metrics import BROAD_METRIC_RANGES, METRIC_RANGES, MetricType, normalize
from generation.signal import synthesize_metric, synthesize_metrics


class SequenceRandom:
    """Replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = itertools.cycle(values)

    def random(self) -> float:
        return next(self._values)


def test_ground_level_midpoint_draws() -> None:
    # base = 0.2 + 0 + 0, variation = 0 -> quality 0.2
    rng = SequenceRandom([0.0, 0.5])
    assert synthesize_metric(MetricType.RSSI, 0.0, rng) == pytest.approx(-78.0)
    assert synthesize_metric(MetricType.CQI, 0.0, rng) == 3
    assert synthesize_metric(MetricType.SNR, 0.0, rng) == pytest.approx(4.0)


def test_negative_variation_lowers_quality() -> None:
    # base 0.2, variation -0.1 -> quality 0.1
    rng = SequenceRandom([0.0, 0.0])
    assert synthesize_metric(MetricType.RSSI, 0.0, rng) == pytest.approx(-81.5)


def test_quality_clamps_at_top() -> None:
    # base 0.97 + variation 0.08 -> clamped to 1
    rng = SequenceRandom([0.9, 0.9])
    for metric in MetricType:
        assert synthesize_metric(metric, 1.0, rng) == METRIC_RANGES[metric].max


def test_unknown_metric_fails_fast() -> None:
    with pytest.raises(ValueError):
        synthesize_metric("sinr", 0.5, SequenceRandom([0.5]))


@pytest.mark.parametrize("ranges", [METRIC_RANGES, BROAD_METRIC_RANGES])
def test_values_stay_in_range_and_precision(ranges) -> None:
    rng = random.Random(1234)
    for trial in range(2000):
        height_factor = (trial % 100) / 100
        for metric in MetricType:
            value = synthesize_metric(metric, height_factor, rng, ranges)
            r = ranges[metric]
            assert r.min <= value <= r.max
            if metric is MetricType.CQI:
                assert isinstance(value, int)
            else:
                assert abs(value * 10 - round(value * 10)) < 1e-6


def test_signal_improves_with_height() -> None:
    rng = random.Random(99)
    low = [normalize(synthesize_metric("rsrp", 0.0, rng), "rsrp") for _ in range(500)]
    high = [normalize(synthesize_metric("rsrp", 0.95, rng), "rsrp") for _ in range(500)]
    assert sum(high) / len(high) > sum(low) / len(low) + 0.3


def test_bundle_draws_metrics_in_order() -> None:
    # Ten draws: (spread, variation) per metric in enumeration order.
    draws = [0.0, 0.5, 0.0, 0.5, 0.0, 0.5, 0.0, 0.5, 0.0, 0.5]
    metrics = synthesize_metrics(0.0, SequenceRandom(draws))
    assert metrics.rssi == pytest.approx(-78.0)
    assert metrics.cqi == 3
    assert metrics.rsrp == pytest.approx(-104.0)
    assert metrics.rsrq == pytest.approx(-13.0)
    assert metrics.snr == pytest.approx(4.0)


def test_falsy_random_source_is_still_used() -> None:
    class EmptyLookingRandom(SequenceRandom):
        def __len__(self) -> int:
            return 0

    # base 0.2, variation -0.1 -> quality 0.1
    rng = EmptyLookingRandom([0.0])
    assert synthesize_metric(MetricType.RSSI, 0.0, rng) == pytest.approx(-81.5)
    assert synthesize_metrics(0.0, rng).snr == pytest.approx(2.0)
