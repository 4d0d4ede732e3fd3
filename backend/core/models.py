"""Core data models for the generated city and its RF measurement points."""

from dataclasses import dataclass
from typing import NamedTuple, NotRequired, TypedDict

from core.metrics import MetricType

# Storey height used to derive floor counts (metres).
FLOOR_HEIGHT_M: float = 3.0


class Vec3(NamedTuple):
    """Position in metres. Right-handed, Y up."""

    x: float
    y: float
    z: float


class BuildingPayload(TypedDict):
    id: str
    position: list[float]
    width: float
    height: float
    depth: float
    isTarget: bool
    floorCount: int


class MetricsPayload(TypedDict):
    rssi: float
    cqi: float
    rsrp: float
    rsrq: float
    snr: float


class RFPointPayload(TypedDict):
    id: str
    buildingId: str
    position: list[float]
    metrics: MetricsPayload


class RFDataPayload(TypedDict):
    buildings: list[BuildingPayload]
    rfPoints: list[RFPointPayload]
    indoorRfPoints: NotRequired[list[RFPointPayload]]


@dataclass(frozen=True)
class Footprint:
    """Axis-aligned extent of a building in the X/Z plane."""

    min_x: float
    max_x: float
    min_z: float
    max_z: float

    @classmethod
    def around(cls, x: float, z: float, width: float, depth: float) -> "Footprint":
        return cls(x - width / 2, x + width / 2, z - depth / 2, z + depth / 2)

    def expanded(self, margin: float) -> "Footprint":
        return Footprint(self.min_x - margin, self.max_x + margin, self.min_z - margin, self.max_z + margin)

    def overlaps(self, other: "Footprint") -> bool:
        """Strict overlap test - rectangles that only share an edge do not overlap."""
        return (
            self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_z < other.max_z
            and other.min_z < self.max_z
        )


@dataclass(frozen=True)
class Building:
    id: str
    position: Vec3  # centroid; y == height / 2
    width: float
    height: float
    depth: float
    is_target: bool
    floor_count: int

    @classmethod
    def create(
        cls,
        id: str,
        x: float,
        z: float,
        width: float,
        height: float,
        depth: float,
        is_target: bool,
        floor_height: float = FLOOR_HEIGHT_M,
    ) -> "Building":
        """Build a ground-anchored building centred on (x, z).

        Anything shorter than half a storey still counts as one floor.
        """
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError(f"Building {id} needs positive dimensions, got {width}x{height}x{depth}")
        return cls(
            id=id,
            position=Vec3(x, height / 2, z),
            width=width,
            height=height,
            depth=depth,
            is_target=is_target,
            floor_count=max(1, round(height / floor_height)),
        )

    @property
    def bottom_y(self) -> float:
        return self.position.y - self.height / 2

    def footprint(self) -> Footprint:
        return Footprint.around(self.position.x, self.position.z, self.width, self.depth)

    def to_payload(self) -> BuildingPayload:
        return {
            "id": self.id,
            "position": list(self.position),
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "isTarget": self.is_target,
            "floorCount": self.floor_count,
        }


@dataclass(frozen=True)
class RFMetrics:
    rssi: float
    cqi: float
    rsrp: float
    rsrq: float
    snr: float

    def __getitem__(self, metric: MetricType | str) -> float:
        return getattr(self, MetricType(metric).value)

    def to_payload(self) -> MetricsPayload:
        return {"rssi": self.rssi, "cqi": self.cqi, "rsrp": self.rsrp, "rsrq": self.rsrq, "snr": self.snr}


@dataclass(frozen=True)
class RFPoint:
    id: str
    building_id: str
    position: Vec3
    metrics: RFMetrics

    def to_payload(self) -> RFPointPayload:
        return {
            "id": self.id,
            "buildingId": self.building_id,
            "position": list(self.position),
            "metrics": self.metrics.to_payload(),
        }


@dataclass
class RFDataResponse:
    """One generated snapshot: the layout plus RF points for its target buildings."""

    buildings: list[Building]
    rf_points: list[RFPoint]
    indoor_points: list[RFPoint] | None = None

    @property
    def targets(self) -> list[Building]:
        return [b for b in self.buildings if b.is_target]

    def to_payload(self) -> RFDataPayload:
        payload: RFDataPayload = {
            "buildings": [b.to_payload() for b in self.buildings],
            "rfPoints": [p.to_payload() for p in self.rf_points],
        }
        if self.indoor_points is not None:
            payload["indoorRfPoints"] = [p.to_payload() for p in self.indoor_points]
        return payload
