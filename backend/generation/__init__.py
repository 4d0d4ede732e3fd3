"""Generation module - city layout and RF point synthesis."""

from generation.city import generate_city_rf_data
from generation.config import DEFAULT as DEFAULT_CITY_CONFIG
from generation.config import CityConfig
from generation.layout import generate_layout
from generation.points import (
    SURFACE_OFFSET_M,
    Wall,
    synthesize_all_indoor_points,
    synthesize_indoor_points,
    synthesize_points,
)
from generation.random_source import DeterministicRandom, RandomSource, default_source, uniform
from generation.signal import synthesize_metric, synthesize_metrics

__all__ = [
    "DEFAULT_CITY_CONFIG",
    "SURFACE_OFFSET_M",
    "CityConfig",
    "DeterministicRandom",
    "RandomSource",
    "Wall",
    "default_source",
    "generate_city_rf_data",
    "generate_layout",
    "synthesize_all_indoor_points",
    "synthesize_indoor_points",
    "synthesize_metric",
    "synthesize_metrics",
    "synthesize_points",
    "uniform",
]
