"""FEMA National Flood Hazard Layer (NFHL) zone query."""

from __future__ import annotations

import logging

from requests import Session

from zipwatch.config import ZipwatchConfig
from zipwatch.errors import UpstreamUnavailable
from zipwatch.http import create_session, get_json, parse_payload
from zipwatch.models import Coordinates
from zipwatch.schemas import FemaQueryResponse

logger = logging.getLogger(__name__)

SERVICE = "FEMA NFHL"


def fetch_flood_zones(
    coords: Coordinates,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> list[str | None]:
    """Return the FLD_ZONE of every flood hazard polygon containing the point.

    An empty list means FEMA answered and no polygon intersects the point.
    A zone may be None when the polygon carries no zone code. Any failure
    to get an answer raises ``UpstreamUnavailable``.
    """
    if config is None:
        config = ZipwatchConfig()
    if session is None:
        session = create_session(config.user_agent)

    params = {
        "geometry": f"{coords.longitude},{coords.latitude}",
        "geometryType": "esriGeometryPoint",
        "inSR": "4326",
        "spatialRel": "esriSpatialRelIntersects",
        "outFields": "FLD_ZONE,ZONE_SUBTY,SFHA_TF",
        "returnGeometry": "false",
        "f": "json",
    }
    payload = get_json(
        session,
        config.fema_nfhl_url,
        service=SERVICE,
        timeout=config.flood_timeout,
        params=params,
    )
    data = parse_payload(FemaQueryResponse, payload, service=SERVICE)

    if data.error is not None:
        raise UpstreamUnavailable(
            SERVICE, f"query error {data.error.code}: {data.error.message or 'unknown'}"
        )
    if data.features is None:
        raise UpstreamUnavailable(SERVICE, "response has no features")

    zones = [feat.attributes.fld_zone for feat in data.features]
    logger.info("FEMA returned %d flood zone polygon(s): %s", len(zones), zones)
    return zones
