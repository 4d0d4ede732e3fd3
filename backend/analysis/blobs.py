"""Group RF points into soft "signal blobs" for rendering.

Points are generated wall by wall, bottom to top, so consecutive points are
spatial neighbours. Averaging fixed-size runs of them gives blob centres
without any spatial indexing.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypedDict

import numpy as np

from core.metrics import METRIC_RANGES, ColorScheme, MetricRange, MetricType, color_for, normalize, rgb_to_hex
from core.models import RFPoint, Vec3

_MIN_BLOB_SIZE_M = 4.0
_BLOB_SIZE_RANGE_M = 3.0  # weaker signal -> bigger blob, up to 7 m


class SignalBlobPayload(TypedDict):
    buildingId: str
    position: list[float]
    value: float
    color: str
    size: float


@dataclass
class SignalBlob:
    building_id: str
    position: Vec3
    value: float  # mean metric value of the group
    color: str  # hex
    size: float  # metres

    def to_payload(self) -> SignalBlobPayload:
        return {
            "buildingId": self.building_id,
            "position": list(self.position),
            "value": self.value,
            "color": self.color,
            "size": self.size,
        }


def group_signal_blobs(
    points: Iterable[RFPoint],
    metric: MetricType | str,
    stride: int = 3,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
    scheme: ColorScheme | str = ColorScheme.RGB,
    limit: int = 800,
) -> list[SignalBlob]:
    """Average each run of ``stride`` consecutive points of a building into a blob.

    Groups never span two buildings. The last group of a building may be
    shorter than ``stride``. At most ``limit`` blobs are returned.
    """
    if stride < 1:
        raise ValueError(f"stride must be >= 1, got {stride}")

    by_building: dict[str, list[RFPoint]] = {}
    for point in points:
        by_building.setdefault(point.building_id, []).append(point)

    blobs: list[SignalBlob] = []
    for building_id, group in by_building.items():
        positions = np.array([p.position for p in group], dtype=float)
        values = np.array([p.metrics[metric] for p in group], dtype=float)
        for start in range(0, len(group), stride):
            centre = positions[start : start + stride].mean(axis=0)
            value = float(values[start : start + stride].mean())
            q = normalize(value, metric, ranges)
            blobs.append(
                SignalBlob(
                    building_id=building_id,
                    position=Vec3(*(float(c) for c in centre)),
                    value=value,
                    color=rgb_to_hex(color_for(value, metric, ranges, scheme)),
                    size=_MIN_BLOB_SIZE_M + (1 - q) * _BLOB_SIZE_RANGE_M,
                )
            )

    return blobs[:limit]
