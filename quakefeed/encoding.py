"""Visual encoding for quake markers.

Depth drives the marker color, magnitude drives the circle radius. Both are
pure functions so the legend can reuse them and stay consistent with the map.

Colors are interpolated linearly in sRGB between ``lightgreen`` and
``salmon`` with :class:`branca.colormap.LinearColormap`, which clamps values
outside its domain to the end colors.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from typing import Optional

from branca.colormap import LinearColormap

DEPTH_DOMAIN_KM = (-10.0, 90.0)
SHALLOW_COLOR = "lightgreen"
DEEP_COLOR = "salmon"

BASE_RADIUS_METERS = 10_000.0
RADIUS_METERS_PER_MAGNITUDE = 50_000.0
MIN_RADIUS_METERS = 1_000.0

DEPTH_COLORMAP = LinearColormap(
    colors=[SHALLOW_COLOR, DEEP_COLOR],
    vmin=DEPTH_DOMAIN_KM[0],
    vmax=DEPTH_DOMAIN_KM[1],
    caption="Earthquake Depth (km)",
)


def depth_to_color(depth_km: float) -> str:
    """Return the ``#rrggbb`` marker color for a hypocenter depth in km."""
    depth = float(depth_km)
    if math.isnan(depth):
        raise ValueError("Depth must be a number, got NaN")
    return DEPTH_COLORMAP.rgb_hex_str(depth)


def magnitude_to_radius(magnitude: Optional[float]) -> float:
    """Circle radius in metres; a missing magnitude counts as 0."""
    mag = 0.0 if magnitude is None else float(magnitude)
    radius = BASE_RADIUS_METERS + mag * RADIUS_METERS_PER_MAGNITUDE
    return max(radius, MIN_RADIUS_METERS)


def format_event_time(epoch_ms: int | float, tz: Optional[tzinfo] = None) -> str:
    """Format an epoch-millisecond timestamp like ``11/14/2023, 10:13:20 PM UTC``.

    With ``tz=None`` the process-local timezone is used.
    """
    dt = datetime.fromtimestamp(float(epoch_ms) / 1000.0, tz=timezone.utc).astimezone(tz)
    hour = dt.hour % 12 or 12
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt:%M:%S} {dt:%p} {dt:%Z}".rstrip()
