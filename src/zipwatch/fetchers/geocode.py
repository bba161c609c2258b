"""ZIP code to coordinate resolution via Zippopotam.us."""

from __future__ import annotations

import logging
import re

from requests import Session

from zipwatch.config import ZipwatchConfig
from zipwatch.errors import InvalidInput, NotFound
from zipwatch.http import create_session, get_json, parse_payload
from zipwatch.models import Coordinates
from zipwatch.schemas import ZippopotamResponse

logger = logging.getLogger(__name__)

SERVICE = "ZIP geocoder"

_ZIP_RE = re.compile(r"[0-9]{5}")


def validate_zip(zip_code: str) -> str:
    """Return ``zip_code`` unchanged if it is exactly five ASCII digits."""
    if not isinstance(zip_code, str) or not _ZIP_RE.fullmatch(zip_code):
        raise InvalidInput("ZIP code must be exactly 5 digits")
    return zip_code


def resolve(
    zip_code: str,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> Coordinates:
    """Resolve a 5-digit ZIP code to coordinates plus city and state.

    Raises:
        InvalidInput: malformed ZIP, before any network call.
        NotFound: the provider has no entry for the ZIP.
        UpstreamUnavailable: timeout, network error or unexpected response.
    """
    validate_zip(zip_code)
    if config is None:
        config = ZipwatchConfig()
    if session is None:
        session = create_session(config.user_agent)

    payload = get_json(
        session,
        f"{config.zippopotam_url.rstrip('/')}/{zip_code}",
        service=SERVICE,
        timeout=config.geocode_timeout,
        not_found=f"ZIP code {zip_code} was not found",
    )
    data = parse_payload(ZippopotamResponse, payload, service=SERVICE)
    if not data.places:
        raise NotFound(f"ZIP code {zip_code} was not found")

    place = data.places[0]
    logger.debug("Resolved %s to %.4f,%.4f", zip_code, place.latitude, place.longitude)
    return Coordinates(
        latitude=place.latitude,
        longitude=place.longitude,
        city=place.place_name or None,
        region=place.state_abbreviation or None,
    )
