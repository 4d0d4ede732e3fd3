"""Core domain models and the RF metric model."""

from core.metrics import (
    BROAD_METRIC_RANGES,
    METRIC_RANGES,
    ColorScheme,
    MetricRange,
    MetricType,
    QualityLevel,
    RangeProfile,
    color_for,
    normalize,
    quality_level,
    range_of,
    ranges_for,
    rgb_to_hex,
)
from core.models import Building, Footprint, RFDataResponse, RFMetrics, RFPoint, Vec3

__all__ = [
    "BROAD_METRIC_RANGES",
    "METRIC_RANGES",
    "Building",
    "ColorScheme",
    "Footprint",
    "MetricRange",
    "MetricType",
    "QualityLevel",
    "RFDataResponse",
    "RFMetrics",
    "RFPoint",
    "RangeProfile",
    "Vec3",
    "color_for",
    "normalize",
    "quality_level",
    "range_of",
    "ranges_for",
    "rgb_to_hex",
]
