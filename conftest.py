"""Pytest configuration shared by the quakefeed and quakemap tests.

This configuration file:
1. Adds the workspace root to sys.path so ``quakefeed`` and ``quakemap``
   import without an editable install
2. Provides GeoJSON feature factories matching the USGS and PB2002 payloads
3. Provides a MockTransport-backed ``httpx.AsyncClient`` factory for the feeds
"""
import sys
from pathlib import Path

import httpx
import pytest

workspace_root = Path(__file__).parent
if str(workspace_root) not in sys.path:
    sys.path.insert(0, str(workspace_root))

QUAKE_URL = "https://quakes.test/all_week.geojson"
PLATE_URL = "https://plates.test/PB2002_boundaries.json"


def _quake_feature(event_id="eq1", coords=(-122.4, 37.8, 10.0), mag=4.5,
                   place="Bay Area", time=1700000000000):
    return {
        "type": "Feature",
        "id": event_id,
        "geometry": {"type": "Point", "coordinates": list(coords)},
        "properties": {"mag": mag, "place": place, "time": time},
    }


def _plate_feature(coords=((-120, 35), (-121, 36)), name="Pacific", source="USGS"):
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": [list(c) for c in coords]},
        "properties": {"Name": name, "Source": source},
    }


@pytest.fixture
def make_quake_feature():
    return _quake_feature


@pytest.fixture
def make_plate_feature():
    return _plate_feature


@pytest.fixture
def quake_feature():
    return _quake_feature()


@pytest.fixture
def plate_feature():
    return _plate_feature()


@pytest.fixture
def feed_settings(monkeypatch):
    """Settings pointing at the stub URLs, with no ambient tile token."""
    from quakefeed.config import FeedSettings

    monkeypatch.delenv("MAPBOX_ACCESS_TOKEN", raising=False)
    return FeedSettings(
        quake_feed_url=QUAKE_URL,
        plate_boundaries_url=PLATE_URL,
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def mock_feed_client():
    """Build an ``httpx.AsyncClient`` whose responses come from ``routes``.

    ``routes`` maps a URL to either a JSON payload, an ``httpx.Response``,
    an exception instance to raise, or a callable taking the request.
    """

    def _build(routes):
        async def handler(request: httpx.Request) -> httpx.Response:
            route = routes[str(request.url)]
            if callable(route):
                route = route(request)
                if hasattr(route, "__await__"):
                    route = await route
            if isinstance(route, Exception):
                raise route
            if isinstance(route, httpx.Response):
                return route
            return httpx.Response(200, json=route)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build
