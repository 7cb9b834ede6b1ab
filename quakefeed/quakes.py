"""Turn USGS GeoJSON earthquake features into circle marker annotations."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import tzinfo
from html import escape
from typing import Any, Dict, Iterable, List, Optional

from quakefeed.client import QUAKE_SOURCE
from quakefeed.encoding import depth_to_color, format_event_time, magnitude_to_radius
from quakefeed.errors import TransformError
from quakefeed.logging_utils import log_event, log_transform_summary
from quakefeed.models import QuakeAnnotation, RawFeature, TransformSummary, swap_lon_lat

LOGGER = logging.getLogger(__name__)


def build_quake_popup(event_id: str, place: str, magnitude: Optional[float], time_label: str) -> str:
    mag_text = "n/a" if magnitude is None else f"{magnitude:g}"
    return (
        f"<h3>ID: {escape(event_id)}</h3>"
        f"<h3>Place: {escape(place)}</h3>"
        f"<h3>Magnitude: {mag_text}</h3>"
        f"<h3>Time: {escape(time_label)}</h3>"
    )


def quake_to_annotation(feature: RawFeature, tz: Optional[tzinfo] = None) -> QuakeAnnotation:
    """Convert one quake feature, raising ``TransformError`` if it is malformed."""
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates") if isinstance(geometry, Mapping) else None
    if not isinstance(coords, (list, tuple)) or len(coords) < 3:
        raise TransformError(QUAKE_SOURCE, "missing [lon, lat, depth] coordinates", _feature_ref(feature))

    try:
        location = swap_lon_lat(coords)
        depth = float(coords[2])
        if not math.isfinite(depth):
            raise ValueError(f"depth must be finite, got {coords[2]!r}")
    except (TypeError, ValueError) as exc:
        raise TransformError(QUAKE_SOURCE, f"non-numeric coordinates: {exc}", _feature_ref(feature)) from exc

    props = feature.get("properties") or {}
    if not isinstance(props, Mapping):
        raise TransformError(QUAKE_SOURCE, "properties is not an object", _feature_ref(feature))
    raw_time = props.get("time")
    if raw_time is None:
        raise TransformError(QUAKE_SOURCE, "missing event time", _feature_ref(feature))

    raw_mag = props.get("mag")
    try:
        magnitude = None if raw_mag is None else float(raw_mag)
        if magnitude is not None and not math.isfinite(magnitude):
            raise ValueError(f"magnitude must be finite, got {raw_mag!r}")
        time_label = format_event_time(raw_time, tz=tz)
        color = depth_to_color(depth)
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise TransformError(QUAKE_SOURCE, f"invalid attribute: {exc}", _feature_ref(feature)) from exc

    event_id = str(feature.get("id") or "")
    place = str(props.get("place") or "")
    return QuakeAnnotation(
        event_id=event_id,
        location=location,
        depth_km=depth,
        magnitude=magnitude,
        place=place,
        time_label=time_label,
        color=color,
        radius_m=magnitude_to_radius(magnitude),
        popup_html=build_quake_popup(event_id, place, magnitude, time_label),
    )


def parse_quake_features(
    features: Iterable[RawFeature],
    tz: Optional[tzinfo] = None,
) -> tuple[List[QuakeAnnotation], TransformSummary]:
    """Normalize quake features into annotations plus a summary of skipped ones.

    Input order is preserved. A malformed feature never aborts the batch.
    """
    annotations: List[QuakeAnnotation] = []
    features_list = features if isinstance(features, list) else list(features)
    summary = TransformSummary(source=QUAKE_SOURCE, total=len(features_list))

    for feature in features_list:
        try:
            if not isinstance(feature, Mapping):
                raise TransformError(QUAKE_SOURCE, "feature is not an object")
            annotations.append(quake_to_annotation(feature, tz=tz))
        except TransformError as err:
            summary.failures.append(err)
            log_event(
                LOGGER,
                "quakes.validation",
                "Skipping malformed quake feature",
                level="warning",
                reason=err.reason,
                feature_ref=err.feature_ref,
            )

    summary.parsed = len(annotations)
    log_transform_summary(LOGGER, "quakes.transform", summary)
    return annotations, summary


def _feature_ref(feature: RawFeature) -> Dict[str, Any]:
    """Small reference payload to avoid logging entire features."""
    props = feature.get("properties")
    if not isinstance(props, Mapping):
        props = {}
    return {
        "id": feature.get("id"),
        "place": props.get("place"),
        "time": props.get("time"),
    }
