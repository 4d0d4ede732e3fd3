"""Aggregate entry point: layout plus RF points for every target building."""

import logging
from collections.abc import Mapping

from core.metrics import METRIC_RANGES, MetricRange, MetricType
from core.models import RFDataResponse, RFPoint
from generation.config import DEFAULT, CityConfig
from generation.layout import generate_layout
from generation.points import synthesize_all_indoor_points, synthesize_points
from generation.random_source import RandomSource, default_source

logger = logging.getLogger(__name__)


def generate_city_rf_data(
    config: CityConfig = DEFAULT,
    rng: RandomSource | None = None,
    ranges: Mapping[MetricType, MetricRange] = METRIC_RANGES,
    include_indoor: bool = False,
) -> RFDataResponse:
    """Generate a fresh city snapshot.

    Nothing is cached between calls; without an explicit ``rng`` every call
    produces a different city.
    """
    if rng is None:
        rng = default_source()
    buildings = generate_layout(config, rng)

    rf_points: list[RFPoint] = []
    for building in buildings:
        if building.is_target:
            rf_points.extend(synthesize_points(building, config.points_per_building, rng, ranges))

    response = RFDataResponse(buildings=buildings, rf_points=rf_points)
    if include_indoor:
        response.indoor_points = synthesize_all_indoor_points(buildings, rng=rng, ranges=ranges)

    logger.info("Generated %d buildings and %d RF points", len(buildings), len(rf_points))
    return response
