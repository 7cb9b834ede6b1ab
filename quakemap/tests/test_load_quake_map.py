"""End-to-end tests: stubbed feeds through the join to the composed map."""

import json
from datetime import timezone
from unittest.mock import patch

import folium
import httpx
import pytest

from quakefeed.errors import ConfigError, FetchError
from quakemap.components import map_view
from quakemap.components.map_view import load_quake_map


def _collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.mark.asyncio
async def test_stub_feeds_compose_one_quake_and_one_plate(
    feed_settings, mock_feed_client, quake_feature, plate_feature
):
    feed_settings.mapbox_access_token = "pk.test"
    routes = {
        feed_settings.quake_feed_url: _collection(quake_feature),
        feed_settings.plate_boundaries_url: _collection(plate_feature),
    }
    async with mock_feed_client(routes) as client:
        m, layers = await load_quake_map(feed_settings, client=client, tz=timezone.utc)

    assert isinstance(m, folium.Map)
    assert len(layers.quakes) == 1
    assert layers.quakes[0].location == (37.8, -122.4)
    assert layers.quakes[0].radius_m == 235000
    assert len(layers.plates) == 1
    assert layers.plates[0].locations == [(35, -120), (36, -121)]


@pytest.mark.asyncio
async def test_plate_failure_never_composes_a_map(feed_settings, mock_feed_client, quake_feature):
    feed_settings.mapbox_access_token = "pk.test"
    routes = {
        feed_settings.quake_feed_url: _collection(quake_feature),
        feed_settings.plate_boundaries_url: httpx.ConnectError("network down"),
    }
    with patch.object(map_view, "create_quake_map") as compose:
        async with mock_feed_client(routes) as client:
            with pytest.raises(FetchError):
                await load_quake_map(feed_settings, client=client)

    compose.assert_not_called()


@pytest.mark.asyncio
async def test_missing_token_fails_before_any_fetch(feed_settings, mock_feed_client):
    requested = []

    def record(request):
        requested.append(str(request.url))
        return httpx.Response(200, json=_collection())

    routes = {feed_settings.quake_feed_url: record, feed_settings.plate_boundaries_url: record}
    async with mock_feed_client(routes) as client:
        with pytest.raises(ConfigError):
            await load_quake_map(feed_settings, client=client)

    assert requested == []


@pytest.mark.asyncio
async def test_non_finite_features_are_skipped_and_map_still_composes(
    feed_settings, mock_feed_client, quake_feature, plate_feature
):
    feed_settings.mapbox_access_token = "pk.test"
    # Bare NaN and Infinity literals are accepted by the JSON decoder.
    quake_body = (
        '{"type": "FeatureCollection", "features": [%s, '
        '{"type": "Feature", "id": "bad", "geometry": {"type": "Point", "coordinates": [NaN, 1.0, 5.0]},'
        ' "properties": {"mag": 1.0, "place": "Nowhere", "time": 1700000000000}}]}'
    ) % json.dumps(quake_feature)
    plate_body = (
        '{"type": "FeatureCollection", "features": [%s, '
        '{"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[Infinity, 35], [-121, 36]]},'
        ' "properties": {"Name": "Broken", "Source": "USGS"}}]}'
    ) % json.dumps(plate_feature)
    headers = {"content-type": "application/json"}
    routes = {
        feed_settings.quake_feed_url: httpx.Response(200, content=quake_body.encode(), headers=headers),
        feed_settings.plate_boundaries_url: httpx.Response(200, content=plate_body.encode(), headers=headers),
    }
    async with mock_feed_client(routes) as client:
        m, layers = await load_quake_map(feed_settings, client=client, tz=timezone.utc)

    assert isinstance(m, folium.Map)
    assert [q.event_id for q in layers.quakes] == ["eq1"]
    assert [p.name for p in layers.plates] == ["Pacific"]
    assert layers.quake_summary.skipped == 1
    assert layers.plate_summary.skipped == 1
    m.get_root().render()
