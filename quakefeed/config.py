"""Configuration helpers for the quake and plate boundary feeds."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env", override=False)

DEFAULT_QUAKE_FEED_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
)
DEFAULT_PLATE_BOUNDARIES_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/master/GeoJSON/PB2002_boundaries.json"
)


class FeedSettings(BaseSettings):
    """Environment-driven configuration for fetching feeds and drawing tiles."""

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    quake_feed_url: str = Field(
        default=DEFAULT_QUAKE_FEED_URL,
        validation_alias="QUAKE_FEED_URL",
    )
    plate_boundaries_url: str = Field(
        default=DEFAULT_PLATE_BOUNDARIES_URL,
        validation_alias="PLATE_BOUNDARIES_URL",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        validation_alias="FEED_REQUEST_TIMEOUT_SECONDS",
    )
    mapbox_access_token: Optional[str] = Field(
        default=None,
        validation_alias="MAPBOX_ACCESS_TOKEN",
    )

    @field_validator("quake_feed_url", "plate_boundaries_url", mode="before")
    @classmethod
    def _strip_url(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Feed URLs must be non-empty strings")
        return value.strip()

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _validate_timeout(cls, value: object) -> float:
        val = float(value)  # raises if not numeric
        if val <= 0:
            raise ValueError("FEED_REQUEST_TIMEOUT_SECONDS must be positive")
        return val

    @field_validator("mapbox_access_token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, value: object) -> Optional[str]:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None


settings = FeedSettings()
