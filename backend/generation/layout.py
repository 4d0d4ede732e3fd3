"""Procedural city layout: fixed target towers plus grid-packed background buildings."""

import logging
import math

from core.models import Building, Footprint
from generation.config import DEFAULT, CityConfig
from generation.random_source import RandomSource, default_source, uniform

logger = logging.getLogger(__name__)


def _place_towers(cfg: CityConfig, rng: RandomSource) -> list[Building]:
    towers: list[Building] = []
    for i, (x, z) in enumerate(cfg.tower_anchors):
        height = uniform(rng, cfg.tower_height_min_m, cfg.tower_height_min_m + cfg.tower_height_jitter_m)
        width = uniform(rng, cfg.tower_footprint_min_m, cfg.tower_footprint_min_m + cfg.tower_footprint_jitter_m)
        depth = uniform(rng, cfg.tower_footprint_min_m, cfg.tower_footprint_min_m + cfg.tower_footprint_jitter_m)
        towers.append(
            Building.create(
                id=f"highrise-{i}",
                x=x,
                z=z,
                width=width,
                height=height,
                depth=depth,
                is_target=True,
                floor_height=cfg.floor_height_m,
            )
        )
    return towers


def _clamp_to_ground(value: float, half_extent: float, cfg: CityConfig) -> float:
    """Keep a footprint of half size ``half_extent`` inside the ground minus margin."""
    limit = max(0.0, cfg.ground_half_size_m - cfg.ground_margin_m - half_extent)
    return max(-limit, min(limit, value))


def _candidate_position(
    index: int, width: float, depth: float, cfg: CityConfig, rng: RandomSource
) -> tuple[float, float]:
    """Grid cell for ``index`` with per-attempt spacing and jitter, clamped to the ground."""
    col = index % cfg.grid_columns - (cfg.grid_columns - 1) / 2
    row = index // cfg.grid_columns - 1
    spacing = uniform(rng, cfg.grid_spacing_min_m, cfg.grid_spacing_min_m + cfg.grid_spacing_jitter_m)
    x = col * spacing + (rng.random() - 0.5) * cfg.position_jitter_m
    z = row * spacing + (rng.random() - 0.5) * cfg.position_jitter_m
    return _clamp_to_ground(x, width / 2, cfg), _clamp_to_ground(z, depth / 2, cfg)


def _is_valid_position(
    x: float,
    z: float,
    width: float,
    depth: float,
    placed: list[Footprint],
    cfg: CityConfig,
) -> bool:
    """Clear of every tower anchor and of every accepted background footprint."""
    for ax, az in cfg.tower_anchors:
        if math.hypot(x - ax, z - az) < cfg.tower_clearance_m:
            return False
    candidate = Footprint.around(x, z, width, depth).expanded(cfg.footprint_clearance_m)
    return not any(candidate.overlaps(other) for other in placed)


def _place_background(cfg: CityConfig, rng: RandomSource) -> list[Building]:
    count = cfg.background_count_min + math.floor(rng.random() * cfg.background_count_jitter)
    buildings: list[Building] = []
    placed: list[Footprint] = []

    for i in range(count):
        height = uniform(
            rng, cfg.background_height_min_m, cfg.background_height_min_m + cfg.background_height_jitter_m
        )
        width = uniform(
            rng, cfg.background_footprint_min_m, cfg.background_footprint_min_m + cfg.background_footprint_jitter_m
        )
        depth = uniform(
            rng, cfg.background_footprint_min_m, cfg.background_footprint_min_m + cfg.background_footprint_jitter_m
        )

        position: tuple[float, float] | None = None
        for _ in range(cfg.max_placement_attempts):
            x, z = _candidate_position(i, width, depth, cfg, rng)
            if _is_valid_position(x, z, width, depth, placed, cfg):
                position = (x, z)
                break

        if position is None:
            logger.debug("No free spot for lowrise-%d after %d attempts, skipping", i, cfg.max_placement_attempts)
            continue

        building = Building.create(
            id=f"lowrise-{i}",
            x=position[0],
            z=position[1],
            width=width,
            height=height,
            depth=depth,
            is_target=False,
            floor_height=cfg.floor_height_m,
        )
        buildings.append(building)
        placed.append(building.footprint())

    logger.debug("Placed %d of %d background buildings", len(buildings), count)
    return buildings


def generate_layout(config: CityConfig = DEFAULT, rng: RandomSource | None = None) -> list[Building]:
    """Generate a city: target towers first, then background buildings.

    Background placement is best effort - a building that finds no free spot
    within ``max_placement_attempts`` is left out, so ids may have gaps.
    """
    if rng is None:
        rng = default_source()
    return _place_towers(config, rng) + _place_background(config, rng)
