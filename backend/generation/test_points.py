"""Tests for RF point placement on building walls and floors."""

import random

import pytest

from core.metrics import METRIC_RANGES, MetricType
from core.models import Building
from generation.points import (
    SURFACE_OFFSET_M,
    synthesize_all_indoor_points,
    synthesize_indoor_points,
    synthesize_points,
)


@pytest.fixture
def tower() -> Building:
    return Building.create("highrise-0", x=0.0, z=0.0, width=40.0, height=120.0, depth=50.0, is_target=True)


def _on_a_wall(building: Building, x: float, z: float) -> bool:
    bx, _, bz = building.position
    hw, hd = building.width / 2, building.depth / 2
    on_z_wall = abs(abs(z - bz) - (hd + SURFACE_OFFSET_M)) < 1e-9 and abs(x - bx) <= hw + 1e-9
    on_x_wall = abs(abs(x - bx) - (hw + SURFACE_OFFSET_M)) < 1e-9 and abs(z - bz) <= hd + 1e-9
    return on_z_wall or on_x_wall


def test_eight_points_two_per_wall(tower: Building) -> None:
    points = synthesize_points(tower, 8, random.Random(0))

    assert [p.id for p in points] == [f"highrise-0-point-{k}" for k in range(8)]
    front, back, right, left = points[0:2], points[2:4], points[4:6], points[6:8]
    assert all(p.position.z == pytest.approx(25.15) for p in front)
    assert all(p.position.z == pytest.approx(-25.15) for p in back)
    assert all(p.position.x == pytest.approx(20.15) for p in right)
    assert all(p.position.x == pytest.approx(-20.15) for p in left)

    # i = 0 sits at the ground, i = 1 half way up
    assert front[0].position.y == 0.0
    assert front[1].position.y == pytest.approx(60.0)
    # horizontal lanes start at -0.5 of the wall length
    assert front[0].position.x == pytest.approx(-20.0)
    assert front[1].position.x == pytest.approx(-16.0)
    assert right[0].position.z == pytest.approx(-25.0)


@pytest.mark.parametrize(("requested", "expected"), [(200, 200), (203, 200), (8, 8), (3, 0), (0, 0)])
def test_point_count_truncates_to_whole_walls(tower: Building, requested: int, expected: int) -> None:
    assert len(synthesize_points(tower, requested, random.Random(0))) == expected


def test_negative_point_count_rejected(tower: Building) -> None:
    with pytest.raises(ValueError):
        synthesize_points(tower, -4)


def test_default_sampling_covers_every_wall(tower: Building) -> None:
    points = synthesize_points(tower, rng=random.Random(5))
    assert len(points) == 200
    assert len({p.id for p in points}) == 200

    for p in points:
        assert p.building_id == tower.id
        assert _on_a_wall(tower, p.position.x, p.position.z)
        assert tower.bottom_y <= p.position.y < tower.bottom_y + tower.height
        for metric in MetricType:
            r = METRIC_RANGES[metric]
            assert r.min <= p.metrics[metric] <= r.max

    # ten horizontal lanes, reused cyclically up the wall
    front = points[:50]
    assert len({round(p.position.x, 6) for p in front}) == 10
    assert front[3].position.x == pytest.approx(front[13].position.x)
    # height increases monotonically within a wall
    assert all(a.position.y < b.position.y for a, b in zip(front, front[1:]))


def test_indoor_points_sit_inside_the_floor(tower: Building) -> None:
    points = synthesize_indoor_points(tower, 3, 8, random.Random(0))

    assert [p.id for p in points] == [f"highrise-0-floor-3-point-{k}" for k in range(8)]
    for p in points:
        assert p.position.y == pytest.approx(10.5)
        assert abs(p.position.x) < tower.width / 2
        assert abs(p.position.z) < tower.depth / 2
    assert len({(p.position.x, p.position.z) for p in points}) == 8


@pytest.mark.parametrize("floor", [-1, 40])
def test_indoor_floor_out_of_range(tower: Building, floor: int) -> None:
    with pytest.raises(ValueError):
        synthesize_indoor_points(tower, floor)


def test_indoor_points_only_for_targets(tower: Building) -> None:
    lowrise = Building.create("lowrise-0", x=90.0, z=0.0, width=20.0, height=30.0, depth=20.0, is_target=False)
    points = synthesize_all_indoor_points([tower, lowrise], points_per_floor=2, rng=random.Random(0))
    assert len(points) == tower.floor_count * 2
    assert {p.building_id for p in points} == {tower.id}
