"""Fetch both feeds concurrently and join them before the map is composed.

Each dataset runs as its own ``fetch -> transform`` task; the transform starts
as soon as its own download finishes. The join waits for both and propagates
the first failure, cancelling the other task, so callers never receive a
partial set of layers.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import tzinfo
from typing import Optional

import httpx

from quakefeed.client import PLATE_SOURCE, QUAKE_SOURCE, fetch_feature_collection
from quakefeed.config import FeedSettings
from quakefeed.logging_utils import log_event
from quakefeed.models import MapLayers
from quakefeed.plates import parse_plate_features
from quakefeed.quakes import parse_quake_features

LOGGER = logging.getLogger(__name__)


async def _load_quakes(client: httpx.AsyncClient, config: FeedSettings, tz: Optional[tzinfo]):
    features = await fetch_feature_collection(
        client, config.quake_feed_url, QUAKE_SOURCE, config.request_timeout_seconds
    )
    return parse_quake_features(features, tz=tz)


async def _load_plates(client: httpx.AsyncClient, config: FeedSettings):
    features = await fetch_feature_collection(
        client, config.plate_boundaries_url, PLATE_SOURCE, config.request_timeout_seconds
    )
    return parse_plate_features(features)


async def load_map_layers(
    config: FeedSettings,
    client: Optional[httpx.AsyncClient] = None,
    tz: Optional[tzinfo] = None,
) -> MapLayers:
    """Run both feed pipelines and return their joined output.

    Raises ``FetchError`` if either download fails.
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as owned_client:
            return await load_map_layers(config, client=owned_client, tz=tz)

    quake_task = asyncio.create_task(_load_quakes(client, config, tz))
    plate_task = asyncio.create_task(_load_plates(client, config))
    try:
        (quakes, quake_summary), (plates, plate_summary) = await asyncio.gather(
            quake_task, plate_task
        )
    except BaseException:
        for task in (quake_task, plate_task):
            task.cancel()
        await asyncio.gather(quake_task, plate_task, return_exceptions=True)
        raise

    layers = MapLayers(
        quakes=quakes,
        plates=plates,
        quake_summary=quake_summary,
        plate_summary=plate_summary,
    )
    log_event(
        LOGGER,
        "feeds.join",
        "Both feeds loaded",
        quakes=len(quakes),
        plates=len(plates),
        skipped=layers.skipped,
    )
    return layers

