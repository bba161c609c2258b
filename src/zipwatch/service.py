"""Per-section lookup handlers: resolve the ZIP, then one domain query.

Each handler is independent and stateless. Coordinates are resolved by
every geo-dependent handler on its own; nothing is shared between them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from requests import Session

from zipwatch.config import ZipwatchConfig
from zipwatch.errors import UpstreamUnavailable
from zipwatch.fetchers.fema import fetch_flood_zones
from zipwatch.fetchers.geocode import resolve, validate_zip
from zipwatch.fetchers.nws import fetch_alerts
from zipwatch.fetchers.usgs import fetch_nearby_earthquakes, rank_quakes
from zipwatch.flood import classify_zones, unavailable_assessment
from zipwatch.hazards import get_hazards
from zipwatch.http import create_session
from zipwatch.models import AlertsResult, FloodResult, QuakesResult

logger = logging.getLogger(__name__)

__all__ = ["get_alerts", "get_flood", "get_hazards", "get_quakes"]


def _prepare(zip_code: str, config: ZipwatchConfig | None) -> ZipwatchConfig:
    validate_zip(zip_code)
    return config if config is not None else ZipwatchConfig()


@contextmanager
def _session_scope(config: ZipwatchConfig, session: Session | None) -> Iterator[Session]:
    """Yield the caller's session, or a new one closed on exit."""
    if session is not None:
        yield session
        return
    with create_session(config.user_agent) as owned:
        yield owned


def get_alerts(
    zip_code: str,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> AlertsResult:
    """Active weather alerts for a ZIP code."""
    config = _prepare(zip_code, config)
    with _session_scope(config, session) as http:
        coords = resolve(zip_code, config, http)
        alerts = fetch_alerts(coords, config, http)
    return AlertsResult(zip_code=zip_code, coordinates=coords, alerts=alerts)


def get_quakes(
    zip_code: str,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> QuakesResult:
    """The strongest recent earthquakes near a ZIP code."""
    config = _prepare(zip_code, config)
    with _session_scope(config, session) as http:
        coords = resolve(zip_code, config, http)
        events = fetch_nearby_earthquakes(coords, config, http)
    return QuakesResult(
        zip_code=zip_code,
        coordinates=coords,
        quakes=rank_quakes(events, limit=config.max_quakes),
    )


def get_flood(
    zip_code: str,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> FloodResult:
    """Flood insurance likelihood for a ZIP code.

    Resolver failures propagate. A failed FEMA query does not: it yields
    the Unknown assessment with ``degraded=True`` so callers always get a
    renderable result.
    """
    config = _prepare(zip_code, config)
    with _session_scope(config, session) as http:
        coords = resolve(zip_code, config, http)
        try:
            zones = fetch_flood_zones(coords, config, http)
        except UpstreamUnavailable as exc:
            logger.warning("Flood lookup degraded for %s: %s", zip_code, exc)
            return FloodResult(
                zip_code=zip_code,
                coordinates=coords,
                assessment=unavailable_assessment(),
                degraded=True,
            )
    return FloodResult(
        zip_code=zip_code, coordinates=coords, assessment=classify_zones(zones)
    )
