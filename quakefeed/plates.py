"""Turn PB2002 plate boundary features into polyline annotations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from html import escape
from typing import Any, Dict, Iterable, List

from quakefeed.client import PLATE_SOURCE
from quakefeed.errors import TransformError
from quakefeed.logging_utils import log_event, log_transform_summary
from quakefeed.models import LatLon, PlateAnnotation, RawFeature, TransformSummary, swap_lon_lat

LOGGER = logging.getLogger(__name__)


def build_plate_popup(name: str, source: str) -> str:
    return f"<h3>Name: {escape(name)}</h3><h3>Source: {escape(source)}</h3>"


def plate_to_annotation(feature: RawFeature) -> PlateAnnotation:
    """Convert one boundary feature, raising ``TransformError`` if it is malformed."""
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates") if isinstance(geometry, Mapping) else None
    if not isinstance(coords, (list, tuple)) or not coords:
        raise TransformError(PLATE_SOURCE, "missing boundary vertices", _feature_ref(feature))

    try:
        locations: List[LatLon] = [swap_lon_lat(vertex) for vertex in coords]
    except (TypeError, ValueError, IndexError) as exc:
        raise TransformError(PLATE_SOURCE, f"invalid vertex: {exc}", _feature_ref(feature)) from exc

    props = feature.get("properties") or {}
    if not isinstance(props, Mapping):
        raise TransformError(PLATE_SOURCE, "properties is not an object", _feature_ref(feature))

    name = str(props.get("Name") or "")
    source = str(props.get("Source") or "")
    return PlateAnnotation(
        name=name,
        source=source,
        locations=locations,
        popup_html=build_plate_popup(name, source),
    )


def parse_plate_features(
    features: Iterable[RawFeature],
) -> tuple[List[PlateAnnotation], TransformSummary]:
    """Normalize boundary features into annotations plus a summary of skipped ones."""
    annotations: List[PlateAnnotation] = []
    features_list = features if isinstance(features, list) else list(features)
    summary = TransformSummary(source=PLATE_SOURCE, total=len(features_list))

    for feature in features_list:
        try:
            if not isinstance(feature, Mapping):
                raise TransformError(PLATE_SOURCE, "feature is not an object")
            annotations.append(plate_to_annotation(feature))
        except TransformError as err:
            summary.failures.append(err)
            log_event(
                LOGGER,
                "plates.validation",
                "Skipping malformed plate boundary feature",
                level="warning",
                reason=err.reason,
                feature_ref=err.feature_ref,
            )

    summary.parsed = len(annotations)
    log_transform_summary(LOGGER, "plates.transform", summary)
    return annotations, summary


def _feature_ref(feature: RawFeature) -> Dict[str, Any]:
    props = feature.get("properties")
    if not isinstance(props, Mapping):
        props = {}
    return {"boundary": props.get("Name"), "source": props.get("Source")}
