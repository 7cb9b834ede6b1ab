"""Error types raised while fetching, transforming and drawing the feeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class QuakeMapError(Exception):
    """Base class for every error surfaced by the quake map."""


@dataclass
class FetchError(QuakeMapError):
    """A dataset could not be downloaded or was not a feature collection."""

    source: str
    message: str
    url: Optional[str] = None
    status_code: Optional[int] = None

    def __str__(self) -> str:
        parts = [f"{self.source}: {self.message}"]
        if self.status_code is not None:
            parts.append(f"(status={self.status_code})")
        if self.url:
            parts.append(f"url={self.url}")
        return " ".join(parts)


@dataclass
class TransformError(QuakeMapError):
    """A single feature was malformed and had to be skipped."""

    source: str
    reason: str
    feature_ref: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.source}: {self.reason} {self.feature_ref}"


class ConfigError(QuakeMapError):
    """Required configuration (e.g. the tile provider token) is missing."""
