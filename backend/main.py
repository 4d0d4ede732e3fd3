"""FastAPI entry point - thin layer over the generator."""

import dataclasses
import logging
from typing import Annotated

from fastapi import Depends, FastAPI, Header, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from analysis import group_signal_blobs, summarize_by_building, summarize_coverage
from core.metrics import MetricType, QualityLevel, ranges_for
from core.models import RFDataResponse
from generation import DEFAULT_CITY_CONFIG, CityConfig, DeterministicRandom, generate_city_rf_data
from settings import Settings, get_settings

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("generation").setLevel(logging.INFO)

logger = logging.getLogger(__name__)

app = FastAPI(title="RF City API")

ALLOWED_METHODS = "GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"
GENERATION_ERROR = "Failed to generate RF data"

SettingsDep = Annotated[Settings, Depends(get_settings)]
OriginHeader = Annotated[str | None, Header()]


class HealthStatus(BaseModel):
    status: str


class MetricStatsResponse(BaseModel):
    average: float
    min: float
    max: float
    quality: QualityLevel


class CoverageResponse(BaseModel):
    pointCount: int
    normalizedAverage: float
    quality: QualityLevel
    metrics: dict[MetricType, MetricStatsResponse]


class SummaryResponse(BaseModel):
    overall: CoverageResponse
    buildings: dict[str, CoverageResponse]


class SignalBlobResponse(BaseModel):
    buildingId: str
    position: list[float]
    value: float
    color: str
    size: float


class BlobsResponse(BaseModel):
    metric: MetricType
    blobs: list[SignalBlobResponse]


def build_cors_headers(origin: str | None, allowed_origins: list[str]) -> dict[str, str]:
    """Reflect ``origin`` when it is allow-listed, otherwise allow any origin."""
    return {
        "Access-Control-Allow-Origin": origin if origin and origin in allowed_origins else "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Vary": "Origin",
    }


def _city_config(settings: Settings) -> CityConfig:
    return dataclasses.replace(DEFAULT_CITY_CONFIG, points_per_building=settings.points_per_building)


def _generate(settings: Settings, seed: str | None, include_indoor: bool = False) -> RFDataResponse:
    return generate_city_rf_data(
        config=_city_config(settings),
        rng=DeterministicRandom(seed) if seed else None,
        ranges=ranges_for(settings.metric_range_profile),
        include_indoor=include_indoor,
    )


def _error_response(exc: Exception, headers: dict[str, str]) -> JSONResponse:
    logger.exception("Error generating RF data")
    return JSONResponse({"error": GENERATION_ERROR, "message": str(exc)}, status_code=500, headers=headers)


@app.options("/rf-data")
def rf_data_preflight(settings: SettingsDep, origin: OriginHeader = None) -> Response:
    return Response(status_code=204, headers=build_cors_headers(origin, settings.cors_origin_list))


@app.get("/rf-data")
def get_rf_data(
    settings: SettingsDep,
    origin: OriginHeader = None,
    seed: str | None = None,
    indoor: bool = False,
) -> JSONResponse:
    """Generate a new city with RF points for its target buildings."""
    headers = build_cors_headers(origin, settings.cors_origin_list)
    try:
        data = _generate(settings, seed, include_indoor=indoor)
    except Exception as exc:
        return _error_response(exc, headers)
    return JSONResponse(data.to_payload(), headers=headers)


@app.get("/rf-data/summary", response_model=SummaryResponse)
def get_rf_summary(
    response: Response,
    settings: SettingsDep,
    origin: OriginHeader = None,
    seed: str | None = None,
) -> SummaryResponse | JSONResponse:
    """Coverage statistics for a freshly generated city, overall and per target building."""
    headers = build_cors_headers(origin, settings.cors_origin_list)
    ranges = ranges_for(settings.metric_range_profile)
    try:
        data = _generate(settings, seed)
    except Exception as exc:
        return _error_response(exc, headers)
    response.headers.update(headers)
    return SummaryResponse(
        overall=CoverageResponse(**summarize_coverage(data.rf_points, ranges).to_payload()),
        buildings={
            building_id: CoverageResponse(**summary.to_payload())
            for building_id, summary in summarize_by_building(data.rf_points, ranges).items()
        },
    )


@app.get("/rf-data/blobs", response_model=BlobsResponse)
def get_rf_blobs(
    response: Response,
    settings: SettingsDep,
    origin: OriginHeader = None,
    metric: MetricType = MetricType.RSSI,
    stride: Annotated[int, Query(ge=1)] = 3,
    seed: str | None = None,
) -> BlobsResponse | JSONResponse:
    """Signal blobs for one metric, ready for sprite rendering."""
    headers = build_cors_headers(origin, settings.cors_origin_list)
    try:
        data = _generate(settings, seed)
    except Exception as exc:
        return _error_response(exc, headers)
    response.headers.update(headers)
    blobs = group_signal_blobs(
        data.rf_points,
        metric,
        stride=stride,
        ranges=ranges_for(settings.metric_range_profile),
        scheme=settings.color_scheme,
    )
    return BlobsResponse(metric=metric, blobs=[SignalBlobResponse(**b.to_payload()) for b in blobs])


@app.get("/health")
def health() -> HealthStatus:
    return HealthStatus(status="ok")
