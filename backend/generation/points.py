"""RF measurement point placement on and inside target buildings."""

import math
from collections.abc import Iterable, Mapping
from enum import StrEnum

from core.metrics import METRIC_RANGES, MetricRange, MetricType
from core.models import Building, RFPoint, Vec3
from generation.random_source import RandomSource, default_source
from generation.signal import synthesize_metrics

# Clearance between a sampled point and the wall it sits on (metres).
SURFACE_OFFSET_M: float = 0.15

# Distinct horizontal positions per wall, reused cyclically up the facade.
HORIZONTAL_LANES: int = 10

# Indoor points keep this fraction of the footprint, away from the facade.
_INDOOR_INSET = 0.8


class Wall(StrEnum):
    """Exterior walls in output order, named by outward normal."""

    FRONT = "front"  # +Z
    BACK = "back"  # -Z
    RIGHT = "right"  # +X
    LEFT = "left"  # -X


# Outward normal (nx, nz) per wall
_WALL_NORMALS: dict[Wall, tuple[int, int]] = {
    Wall.FRONT: (0, 1),
    Wall.BACK: (0, -1),
    Wall.RIGHT: (1, 0),
    Wall.LEFT: (-1, 0),
}


def _wall_position(building: Building, wall: Wall, horizontal: float, y: float) -> Vec3:
    bx, _, bz = building.position
    nx, nz = _WALL_NORMALS[wall]
    if nz:
        x = bx + horizontal * building.width
        z = bz + nz * (building.depth / 2 + SURFACE_OFFSET_M)
    else:
        x = bx + nx * (building.width / 2 + SURFACE_OFFSET_M)
        z = bz + horizontal * building.depth
    return Vec3(x, y, z)


def synthesize_points(
    building: Building,
    points_per_building: int = 200,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> list[RFPoint]:
    """Sample RF points across the four exterior walls of a building.

    Points are split evenly between walls (``points_per_building // 4`` each,
    so up to three requested points are dropped). Each wall is walked bottom
    to top, cycling through ``HORIZONTAL_LANES`` positions along its length.

    Output order is front, back, right, left, each by increasing height.
    Downstream consumers group consecutive points, so the order is part of the
    contract.
    """
    if points_per_building < 0:
        raise ValueError(f"points_per_building must be >= 0, got {points_per_building}")

    if rng is None:
        rng = default_source()

    points_per_wall = points_per_building // len(Wall)
    points: list[RFPoint] = []

    for wall in Wall:
        for i in range(points_per_wall):
            height_ratio = i / points_per_wall
            y = building.bottom_y + height_ratio * building.height
            horizontal = (i % HORIZONTAL_LANES) / HORIZONTAL_LANES - 0.5
            points.append(
                RFPoint(
                    id=f"{building.id}-point-{len(points)}",
                    building_id=building.id,
                    position=_wall_position(building, wall, horizontal, y),
                    metrics=synthesize_metrics(height_ratio, rng, ranges),
                )
            )

    return points


def synthesize_indoor_points(
    building: Building,
    floor: int,
    points_per_floor: int = 8,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> list[RFPoint]:
    """Sample RF points on one floor, spread over a cell grid inside the footprint.

    Points sit at the floor's mid height. Signal follows the same height
    gradient as the facade, keyed on ``floor / floor_count``.
    """
    if not 0 <= floor < building.floor_count:
        raise ValueError(f"Floor {floor} out of range for {building.id} ({building.floor_count} floors)")
    if points_per_floor < 0:
        raise ValueError(f"points_per_floor must be >= 0, got {points_per_floor}")
    if points_per_floor == 0:
        return []
    if rng is None:
        rng = default_source()

    cols = math.ceil(math.sqrt(points_per_floor))
    rows = math.ceil(points_per_floor / cols)
    floor_height = building.height / building.floor_count
    y = building.bottom_y + (floor + 0.5) * floor_height
    height_factor = floor / building.floor_count
    bx, _, bz = building.position

    points: list[RFPoint] = []
    for k in range(points_per_floor):
        col, row = k % cols, k // cols
        x = bx + ((col + 0.5) / cols - 0.5) * building.width * _INDOOR_INSET
        z = bz + ((row + 0.5) / rows - 0.5) * building.depth * _INDOOR_INSET
        points.append(
            RFPoint(
                id=f"{building.id}-floor-{floor}-point-{k}",
                building_id=building.id,
                position=Vec3(x, y, z),
                metrics=synthesize_metrics(height_factor, rng, ranges),
            )
        )
    return points


def synthesize_all_indoor_points(
    buildings: Iterable[Building],
    points_per_floor: int = 8,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
) -> list[RFPoint]:
    """Indoor points for every floor of every target building."""
    if rng is None:
        rng = default_source()
    return [
        point
        for building in buildings
        if building.is_target
        for floor in range(building.floor_count)
        for point in synthesize_indoor_points(building, floor, points_per_floor, rng, ranges)
    ]
