"""Height-correlated RF metric synthesis.

Signal quality trends upward with height (fewer ground-level obstructions),
with bounded noise layered on top. This is a believable gradient for
visualization, not a propagation model.
"""

from collections.abc import Mapping

from core.metrics import METRIC_RANGES, MetricRange, MetricType, range_of
from core.models import RFMetrics
from generation.random_source import RandomSource, default_source, uniform

# quality = base + height_factor * slope + U(0, spread) + (U - 0.5) * noise
_BASE_QUALITY = 0.2
_HEIGHT_SLOPE = 0.5
_QUALITY_SPREAD = 0.3
_NOISE_AMPLITUDE = 0.2


def synthesize_metric(
    metric: MetricType | str,
    height_factor: float,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> float:
    """Produce one metric value for a point at ``height_factor`` (0 = ground, 1 = top).

    cqi is returned as an integer, every other metric rounded to 0.1.
    """
    if rng is None:
        rng = default_source()
    r = range_of(metric, ranges)

    base_quality = _BASE_QUALITY + height_factor * _HEIGHT_SLOPE + uniform(rng, 0.0, _QUALITY_SPREAD)
    variation = (rng.random() - 0.5) * _NOISE_AMPLITUDE
    quality = max(0.0, min(1.0, base_quality + variation))
    value = r.min + quality * (r.max - r.min)

    if MetricType(metric) is MetricType.CQI:
        return round(value)
    return round(value, 1)


def synthesize_metrics(
    height_factor: float,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> RFMetrics:
    """Draw all five metrics, in enumeration order, for one point."""
    if rng is None:
        rng = default_source()
    values = {metric.value: synthesize_metric(metric, height_factor, rng, ranges) for metric in MetricType}
    return RFMetrics(**values)
