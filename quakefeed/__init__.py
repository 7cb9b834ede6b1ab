"""Quake and plate boundary feeds (fetching, transformation, visual encoding)."""

from .errors import ConfigError, FetchError, QuakeMapError, TransformError
from .models import MapLayers, PlateAnnotation, QuakeAnnotation, TransformSummary
from .pipeline import load_map_layers

__all__ = [
    "ConfigError",
    "FetchError",
    "MapLayers",
    "PlateAnnotation",
    "QuakeAnnotation",
    "QuakeMapError",
    "TransformError",
    "TransformSummary",
    "load_map_layers",
]
