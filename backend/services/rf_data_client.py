"""RF data retrieval: prefer a remote generator, fall back to local generation."""

import logging
from typing import Any, cast

import aiohttp

from core.models import RFDataPayload
from generation import generate_city_rf_data
from settings import Settings, settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 8.0


def _is_rf_payload(body: Any) -> bool:
    return isinstance(body, dict) and isinstance(body.get("buildings"), list) and isinstance(body.get("rfPoints"), list)


async def fetch_remote_rf_data(endpoint: str, timeout_s: float = DEFAULT_TIMEOUT_S) -> RFDataPayload | None:
    """GET the payload from ``endpoint``. Returns None if it is unreachable or malformed."""
    timeout = aiohttp.ClientTimeout(total=timeout_s)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session, session.get(endpoint) as response:
            response.raise_for_status()
            body = await response.json()
    except (aiohttp.ClientError, TimeoutError, ValueError) as exc:
        logger.warning("Remote RF data from %s unavailable: %s", endpoint, exc)
        return None

    if not _is_rf_payload(body):
        logger.warning("Remote RF data from %s is missing buildings/rfPoints", endpoint)
        return None
    return cast(RFDataPayload, body)


async def fetch_rf_data(endpoint: str | None = None, timeout_s: float = DEFAULT_TIMEOUT_S) -> RFDataPayload:
    """Fetch RF data from ``endpoint`` if configured, otherwise generate it in-process."""
    if endpoint:
        payload = await fetch_remote_rf_data(endpoint, timeout_s)
        if payload is not None:
            return payload
        logger.info("Falling back to local RF data generation")
    return generate_city_rf_data().to_payload()


async def fetch_configured_rf_data(config: Settings | None = None) -> RFDataPayload:
    """``fetch_rf_data`` using the endpoint and timeout from settings."""
    config = config or settings
    return await fetch_rf_data(config.rf_data_endpoint, config.rf_data_timeout_s)
