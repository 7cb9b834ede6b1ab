"""Common data structures for feed transformation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Sequence, Tuple

from quakefeed.errors import TransformError

LatLon = Tuple[float, float]
RawFeature = Mapping[str, Any]


def swap_lon_lat(pair: Sequence[float]) -> LatLon:
    """Reorder a GeoJSON ``[lon, lat, ...]`` position into Leaflet's ``(lat, lon)``.

    Raises ``ValueError`` for NaN or infinite values.
    """
    lat, lon = float(pair[1]), float(pair[0])
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"position must be finite, got {list(pair[:2])}")
    return (lat, lon)


@dataclass(frozen=True, slots=True)
class QuakeAnnotation:
    """Circle marker for one seismic event."""

    event_id: str
    location: LatLon
    depth_km: float
    magnitude: float | None
    place: str
    time_label: str
    color: str
    radius_m: float
    popup_html: str
    fill_opacity: float = 0.3


@dataclass(frozen=True, slots=True)
class PlateAnnotation:
    """Polyline for one plate boundary segment."""

    name: str
    source: str
    locations: List[LatLon]
    popup_html: str
    color: str = "red"
    opacity: float = 0.5


@dataclass
class TransformSummary:
    """Capture per-batch transform results for logging and display."""

    source: str
    total: int = 0
    parsed: int = 0
    failures: List[TransformError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.failures)


@dataclass
class MapLayers:
    """Both transformed datasets, available only once both pipelines finished."""

    quakes: List[QuakeAnnotation]
    plates: List[PlateAnnotation]
    quake_summary: TransformSummary
    plate_summary: TransformSummary

    @property
    def skipped(self) -> int:
        return self.quake_summary.skipped + self.plate_summary.skipped
