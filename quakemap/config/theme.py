"""Centralized design tokens for the quake map.

Single source of truth for viewport defaults, tile layers and the legend
bands used throughout the map components.

Usage Examples:
    From folium layers:
        folium.Map(location=MapConfig.DEFAULT_CENTER, zoom_start=MapConfig.DEFAULT_ZOOM)
"""


class MapConfig:
    """Map display configuration and default view settings."""
    HEIGHT = 650                   # Map height in pixels (Streamlit embed)
    DEFAULT_CENTER = [28.0, 0.0]   # [lat, lon]
    DEFAULT_ZOOM = 3


class BaseLayers:
    """Mapbox style tiles offered as mutually exclusive backgrounds.

    Each entry is (display name, Mapbox style id). The first one is shown
    when the map loads.
    """
    TILE_URL = (
        "https://api.mapbox.com/styles/v1/{style_id}/tiles/{{z}}/{{x}}/{{y}}"
        "?access_token={access_token}"
    )
    ATTRIBUTION = (
        'Map data &copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
        'contributors, Imagery &copy; <a href="https://www.mapbox.com/">Mapbox</a>'
    )
    MAX_ZOOM = 18
    TILE_SIZE = 512
    ZOOM_OFFSET = -1

    SATELLITE = ("Satellite", "mapbox/satellite-v9")
    GRAYSCALE = ("Grayscale", "mapbox/light-v10")
    OUTDOORS = ("Outdoors", "mapbox/outdoors-v11")

    @classmethod
    def all_layers(cls):
        return [cls.SATELLITE, cls.GRAYSCALE, cls.OUTDOORS]


class OverlayNames:
    QUAKES = "Quakes"
    PLATES = "Tectonic Plates borders"


class LegendConfig:
    """Depth bands (km) drawn as swatches; the last band is open-ended."""
    TITLE = "Earthquake Depth"
    GRADES = [-10, 10, 30, 50, 70, 90]
    POSITION = "bottomright"
