"""RF metric definitions: ranges, normalization, quality levels and colors."""

import colorsys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

RGB = tuple[float, float, float]


class MetricType(StrEnum):
    RSSI = "rssi"
    CQI = "cqi"
    RSRP = "rsrp"
    RSRQ = "rsrq"
    SNR = "snr"


class QualityLevel(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RangeProfile(StrEnum):
    """Which bounds table the metric model scales against."""

    NARROW = "narrow"  # visualization bounds
    BROAD = "broad"  # wide standards-style bounds


class ColorScheme(StrEnum):
    RGB = "rgb"  # straight lerp between POOR_COLOR and GOOD_COLOR
    HSL = "hsl"  # hue sweep red -> green


@dataclass(frozen=True)
class MetricRange:
    min: float
    max: float
    unit: str
    display_name: str
    description: str


_DESCRIPTIONS: dict[MetricType, tuple[str, str, str]] = {
    MetricType.RSSI: ("dBm", "RSSI", "Received Signal Strength Indicator"),
    MetricType.CQI: ("", "CQI", "Channel Quality Indicator"),
    MetricType.RSRP: ("dBm", "RSRP", "Reference Signal Received Power"),
    MetricType.RSRQ: ("dB", "RSRQ", "Reference Signal Received Quality"),
    MetricType.SNR: ("dB", "SNR", "Signal-to-Noise Ratio"),
}


def _table(bounds: dict[MetricType, tuple[float, float]]) -> Mapping[MetricType, MetricRange]:
    return MappingProxyType(
        {metric: MetricRange(lo, hi, *_DESCRIPTIONS[metric]) for metric, (lo, hi) in bounds.items()}
    )


METRIC_RANGES: Mapping[MetricType, MetricRange] = _table(
    {
        MetricType.RSSI: (-85.0, -50.0),
        MetricType.CQI: (0.0, 15.0),
        MetricType.RSRP: (-110.0, -80.0),
        MetricType.RSRQ: (-15.0, -5.0),
        MetricType.SNR: (0.0, 20.0),
    }
)

BROAD_METRIC_RANGES: Mapping[MetricType, MetricRange] = _table(
    {
        MetricType.RSSI: (-120.0, -40.0),
        MetricType.CQI: (0.0, 15.0),
        MetricType.RSRP: (-140.0, -44.0),
        MetricType.RSRQ: (-20.0, -3.0),
        MetricType.SNR: (-10.0, 30.0),
    }
)

_PROFILES: Mapping[RangeProfile, Mapping[MetricType, MetricRange]] = MappingProxyType(
    {RangeProfile.NARROW: METRIC_RANGES, RangeProfile.BROAD: BROAD_METRIC_RANGES}
)

# Tailwind red-400 / green-400
POOR_COLOR: RGB = (0xF8 / 255, 0x71 / 255, 0x71 / 255)
GOOD_COLOR: RGB = (0x4A / 255, 0xDE / 255, 0x80 / 255)

_HSL_POOR_HUE = 0.0
_HSL_GOOD_HUE = 1.0 / 3.0
_HSL_SATURATION = 0.75
_HSL_LIGHTNESS = 0.55

# Lower bound of each quality bucket on the normalized scale, best first.
_QUALITY_THRESHOLDS: tuple[tuple[float, QualityLevel], ...] = (
    (0.75, QualityLevel.EXCELLENT),
    (0.50, QualityLevel.GOOD),
    (0.25, QualityLevel.FAIR),
)


def ranges_for(profile: RangeProfile | str) -> Mapping[MetricType, MetricRange]:
    return _PROFILES[RangeProfile(profile)]


def range_of(
    metric: MetricType | str,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> MetricRange:
    """Look up the range for a metric. Unknown metric names raise ValueError."""
    try:
        return ranges[MetricType(metric)]
    except (ValueError, KeyError):
        raise ValueError(f"Unknown metric type: {metric!r}") from None


def normalize(
    value: float,
    metric: MetricType | str,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> float:
    """Scale a raw metric value to [0, 1]. Out-of-range values clamp to the ends."""
    r = range_of(metric, ranges)
    return max(0.0, min(1.0, (value - r.min) / (r.max - r.min)))


def quality_for_normalized(normalized: float) -> QualityLevel:
    for threshold, level in _QUALITY_THRESHOLDS:
        if normalized >= threshold:
            return level
    return QualityLevel.POOR


def quality_level(
    value: float,
    metric: MetricType | str,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> QualityLevel:
    return quality_for_normalized(normalize(value, metric, ranges))


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def color_for(
    value: float,
    metric: MetricType | str,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
    scheme: ColorScheme | str = ColorScheme.RGB,
) -> RGB:
    """Map a metric value to an RGB triple in [0, 1], poor (red) to good (green)."""
    t = normalize(value, metric, ranges)
    if ColorScheme(scheme) is ColorScheme.HSL:
        hue = _lerp(_HSL_POOR_HUE, _HSL_GOOD_HUE, t)
        return colorsys.hls_to_rgb(hue, _HSL_LIGHTNESS, _HSL_SATURATION)
    return (
        _lerp(POOR_COLOR[0], GOOD_COLOR[0], t),
        _lerp(POOR_COLOR[1], GOOD_COLOR[1], t),
        _lerp(POOR_COLOR[2], GOOD_COLOR[2], t),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """Convert an RGB triple in [0, 1] to a ``#rrggbb`` string."""
    channels = (max(0, min(255, round(v * 255))) for v in rgb)
    return "#" + "".join(f"{c:02x}" for c in channels)
