"""Map composition for the quake dashboard."""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Iterable, Optional, Tuple

import folium
import httpx

from quakefeed.config import FeedSettings
from quakefeed.errors import ConfigError
from quakefeed.logging_utils import log_event
from quakefeed.models import MapLayers, PlateAnnotation, QuakeAnnotation
from quakefeed.pipeline import load_map_layers
from quakemap.components.legend import DepthLegend
from quakemap.config.theme import BaseLayers, MapConfig, OverlayNames

LOGGER = logging.getLogger(__name__)


def require_access_token(access_token: Optional[str]) -> str:
    """Return the tile provider token or raise ``ConfigError``."""
    if access_token is None or not access_token.strip():
        raise ConfigError(
            "MAPBOX_ACCESS_TOKEN is not set; base imagery tiles cannot be loaded."
        )
    return access_token.strip()


def add_base_layers(map_obj: folium.Map, access_token: str) -> None:
    """Add the mutually exclusive Mapbox backgrounds; the first is shown."""
    for i, (name, style_id) in enumerate(BaseLayers.all_layers()):
        folium.TileLayer(
            tiles=BaseLayers.TILE_URL.format(style_id=style_id, access_token=access_token),
            attr=BaseLayers.ATTRIBUTION,
            name=name,
            max_zoom=BaseLayers.MAX_ZOOM,
            overlay=False,
            control=True,
            show=i == 0,
            tile_size=BaseLayers.TILE_SIZE,
            zoom_offset=BaseLayers.ZOOM_OFFSET,
        ).add_to(map_obj)


def add_quake_markers(map_obj: folium.Map, quakes: Iterable[QuakeAnnotation]) -> folium.FeatureGroup:
    """Add one circle per quake, sized by magnitude and colored by depth."""
    group = folium.FeatureGroup(name=OverlayNames.QUAKES, overlay=True, control=True)
    for quake in quakes:
        folium.Circle(
            location=list(quake.location),
            radius=quake.radius_m,
            color=quake.color,
            fill=True,
            fill_color=quake.color,
            fill_opacity=quake.fill_opacity,
            popup=folium.Popup(quake.popup_html),
        ).add_to(group)
    group.add_to(map_obj)
    return group


def add_plate_boundaries(map_obj: folium.Map, plates: Iterable[PlateAnnotation]) -> folium.FeatureGroup:
    """Add one polyline per plate boundary."""
    group = folium.FeatureGroup(name=OverlayNames.PLATES, overlay=True, control=True)
    for plate in plates:
        folium.PolyLine(
            locations=[list(vertex) for vertex in plate.locations],
            color=plate.color,
            opacity=plate.opacity,
            popup=folium.Popup(plate.popup_html),
        ).add_to(group)
    group.add_to(map_obj)
    return group


def create_quake_map(layers: MapLayers, access_token: Optional[str]) -> folium.Map:
    """Compose the full map from both joined feeds.

    Raises ``ConfigError`` when the tile token is missing.
    """
    token = require_access_token(access_token)

    m = folium.Map(
        location=MapConfig.DEFAULT_CENTER,
        zoom_start=MapConfig.DEFAULT_ZOOM,
        tiles=None,
    )
    add_base_layers(m, token)
    add_quake_markers(m, layers.quakes)
    add_plate_boundaries(m, layers.plates)

    folium.LayerControl(collapsed=False).add_to(m)
    DepthLegend().add_to(m)

    log_event(
        LOGGER,
        "map.compose",
        "Composed quake map",
        quakes=len(layers.quakes),
        plates=len(layers.plates),
    )
    return m


async def load_quake_map(
    config: FeedSettings,
    client: Optional[httpx.AsyncClient] = None,
    tz: Optional[tzinfo] = None,
) -> Tuple[folium.Map, MapLayers]:
    """Validate the tile token, join both feeds, then compose the map.

    ``ConfigError`` is raised before any feed is requested; a ``FetchError``
    from either feed propagates and no map is built.
    """
    token = require_access_token(config.mapbox_access_token)
    layers = await load_map_layers(config, client=client, tz=tz)
    return create_quake_map(layers, token), layers
