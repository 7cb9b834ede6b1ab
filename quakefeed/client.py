"""Async helpers for downloading GeoJSON feature collections."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from quakefeed.errors import FetchError
from quakefeed.logging_utils import log_event

LOGGER = logging.getLogger(__name__)

QUAKE_SOURCE = "usgs_quakes"
PLATE_SOURCE = "pb2002_plates"


async def fetch_feature_collection(
    client: httpx.AsyncClient,
    url: str,
    source: str,
    timeout_seconds: float,
) -> List[Dict[str, Any]]:
    """Download a GeoJSON FeatureCollection and return its ``features`` list."""
    log_event(LOGGER, "feeds.fetch", "Requesting feature collection", source=source, url=url)
    try:
        response = await client.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            source=source,
            message="Non-2xx response from data provider",
            url=url,
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(source=source, message=f"Request failed: {exc!r}", url=url) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(
            source=source,
            message="Provider returned non-JSON response",
            url=url,
            status_code=response.status_code,
        ) from exc

    features = payload.get("features") if isinstance(payload, dict) else None
    if not isinstance(features, list):
        raise FetchError(
            source=source,
            message="Payload is not a feature collection (missing 'features')",
            url=url,
            status_code=response.status_code,
        )

    log_event(
        LOGGER,
        "feeds.fetch",
        "Fetched feature collection",
        source=source,
        features=len(features),
    )
    return features
