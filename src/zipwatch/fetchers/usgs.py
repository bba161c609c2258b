"""USGS earthquake search fetcher."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from requests import Session

from zipwatch.config import ZipwatchConfig
from zipwatch.http import create_session, get_json, parse_payload
from zipwatch.models import Coordinates, SeismicEvent
from zipwatch.schemas import UsgsEventCollection

logger = logging.getLogger(__name__)

SERVICE = "USGS earthquakes"

DEFAULT_PLACE = "Unknown location"


def _iso_from_ms(time_ms: int | None) -> str | None:
    if time_ms is None:
        return None
    dt = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="seconds").replace("+00:00", "Z")


def rank_quakes(events: list[SeismicEvent], limit: int = 3) -> list[SeismicEvent]:
    """Sort events by magnitude descending and keep the first ``limit``.

    A missing magnitude sorts as 0 but is emitted unchanged as None.
    The sort is stable, so ties keep upstream order.
    """
    ranked = sorted(
        events,
        key=lambda e: e.magnitude if e.magnitude is not None else 0.0,
        reverse=True,
    )
    return ranked[:limit]


def fetch_nearby_earthquakes(
    coords: Coordinates,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
    now: datetime | None = None,
) -> list[SeismicEvent]:
    """Fetch earthquakes within the configured radius and look-back window.

    Returns every event in the window, unranked; see ``rank_quakes``.
    """
    if config is None:
        config = ZipwatchConfig()
    if session is None:
        session = create_session(config.user_agent)

    end_time = now or datetime.now(timezone.utc)
    start_time = end_time - timedelta(hours=config.quake_window_hours)

    params: dict[str, str | float] = {
        "format": "geojson",
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "maxradiuskm": config.quake_radius_km,
        "starttime": start_time.strftime("%Y-%m-%dT%H:%M:%S"),
        "endtime": end_time.strftime("%Y-%m-%dT%H:%M:%S"),
        "orderby": "magnitude",
    }
    payload = get_json(
        session,
        config.usgs_event_url,
        service=SERVICE,
        timeout=config.quakes_timeout,
        params=params,
    )
    collection = parse_payload(UsgsEventCollection, payload, service=SERVICE)

    events = [
        SeismicEvent(
            magnitude=feat.properties.mag,
            occurred_at=_iso_from_ms(feat.properties.time),
            place=feat.properties.place or DEFAULT_PLACE,
            reference_url=feat.properties.url or "",
        )
        for feat in collection.features
    ]
    logger.info(
        "Retrieved %d earthquakes within %.0f km (past %d h)",
        len(events),
        config.quake_radius_km,
        config.quake_window_hours,
    )
    return events
