"""Configuration model for the zipwatch lookup service."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

ZIPPOPOTAM_URL = "https://api.zippopotam.us/us"
NWS_ALERTS_URL = "https://api.weather.gov/alerts/active"
USGS_EVENT_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"
FEMA_NFHL_URL = (
    "https://hazards.fema.gov/arcgis/rest/services/public/NFHL/MapServer/28/query"
)


class ZipwatchConfig(BaseSettings):
    """All configurable parameters for the lookup handlers.

    Values can be set via constructor arguments, environment variables
    prefixed with ZIPWATCH_, or defaults.
    """

    model_config = {"env_prefix": "ZIPWATCH_"}

    user_agent: str = Field(
        default="zipwatch/0.1 (contact: ops@zipwatch.example)",
        min_length=1,
        description="Identifying User-Agent sent to api.weather.gov (must include contact info).",
    )
    geocode_timeout: float = Field(
        default=8.0, gt=0.0, le=60.0, description="ZIP resolver timeout in seconds."
    )
    alerts_timeout: float = Field(
        default=10.0, gt=0.0, le=60.0, description="NWS alerts timeout in seconds."
    )
    quakes_timeout: float = Field(
        default=10.0, gt=0.0, le=60.0, description="USGS event search timeout in seconds."
    )
    flood_timeout: float = Field(
        default=15.0, gt=0.0, le=60.0, description="FEMA NFHL query timeout in seconds."
    )
    quake_radius_km: float = Field(
        default=100.0, gt=0.0, le=20001.6, description="Earthquake search radius in km."
    )
    quake_window_hours: int = Field(
        default=72, ge=1, le=720, description="Earthquake look-back window in hours."
    )
    max_quakes: int = Field(
        default=3, ge=1, le=50, description="Maximum earthquakes returned, by magnitude."
    )
    zippopotam_url: str = Field(
        default=ZIPPOPOTAM_URL, description="Base URL of the ZIP geocoding service."
    )
    nws_alerts_url: str = Field(
        default=NWS_ALERTS_URL, description="NWS active alerts endpoint."
    )
    usgs_event_url: str = Field(
        default=USGS_EVENT_URL, description="USGS FDSN event query endpoint."
    )
    fema_nfhl_url: str = Field(
        default=FEMA_NFHL_URL, description="FEMA NFHL flood hazard zones query endpoint."
    )
    hazards_file: Path | None = Field(
        default=None,
        description="Override path for the static hazard table. Uses the bundled file when unset.",
    )
