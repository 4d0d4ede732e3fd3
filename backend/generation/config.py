"""Layout and sampling knobs for generated cities.

Tower anchors, footprint sizes, grid spacing and clearances are all fields
of ``CityConfig``. ``DEFAULT`` reproduces the standard city; tests build a
smaller or denser one with ``dataclasses.replace(DEFAULT, ...)`` or by
passing only the fields they care about::

    sparse = CityConfig(background_count_min=4, background_count_jitter=0)
    data = generate_city_rf_data(config=sparse)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CityConfig:
    """All layout and sampling tunables, grouped by category. Lengths in metres."""

    floor_height_m: float = 3.0

    # --- Target towers ---
    tower_anchors: tuple[tuple[float, float], ...] = ((0.0, 0.0), (-120.0, -120.0), (120.0, 120.0))
    tower_height_min_m: float = 100.0  # 33-43 floors
    tower_height_jitter_m: float = 30.0
    tower_footprint_min_m: float = 40.0
    tower_footprint_jitter_m: float = 20.0

    # --- Background buildings ---
    background_count_min: int = 12
    background_count_jitter: int = 4  # count = min + floor(U * jitter)
    background_height_min_m: float = 10.0  # 3-13 floors
    background_height_jitter_m: float = 30.0
    background_footprint_min_m: float = 15.0
    background_footprint_jitter_m: float = 10.0

    # --- Grid placement ---
    grid_columns: int = 6
    grid_spacing_min_m: float = 60.0
    grid_spacing_jitter_m: float = 10.0
    position_jitter_m: float = 16.0  # full width, centred on the grid cell
    ground_half_size_m: float = 220.0
    ground_margin_m: float = 15.0

    # --- Collision avoidance ---
    tower_clearance_m: float = 70.0  # min centre distance to any tower anchor
    footprint_clearance_m: float = 4.0  # min gap between background footprints
    max_placement_attempts: int = 50

    # --- RF sampling ---
    points_per_building: int = 200


DEFAULT = CityConfig()
