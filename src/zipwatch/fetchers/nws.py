"""National Weather Service active alerts fetcher."""

from __future__ import annotations

import logging

from requests import Session

from zipwatch.config import ZipwatchConfig
from zipwatch.http import create_session, get_json, parse_payload
from zipwatch.models import Alert, Coordinates
from zipwatch.schemas import NwsAlertCollection, NwsAlertProperties

logger = logging.getLogger(__name__)

SERVICE = "NWS alerts"

DEFAULT_TITLE = "Weather Alert"
DEFAULT_SEVERITY = "Unknown"
DEFAULT_SOURCE = "National Weather Service"


def _to_alert(props: NwsAlertProperties) -> Alert:
    return Alert(
        title=props.event or DEFAULT_TITLE,
        severity=props.severity or DEFAULT_SEVERITY,
        effective_time=props.effective or props.onset,
        expires_time=props.expires or props.ends,
        headline=props.headline or "",
        instructions=props.instruction or "",
        source=props.sender_name or DEFAULT_SOURCE,
    )


def fetch_alerts(
    coords: Coordinates,
    config: ZipwatchConfig | None = None,
    session: Session | None = None,
) -> list[Alert]:
    """Fetch active alerts covering a point, in upstream order.

    api.weather.gov rejects or throttles clients without an identifying
    User-Agent, so ``config.user_agent`` is sent explicitly.
    """
    if config is None:
        config = ZipwatchConfig()
    if session is None:
        session = create_session(config.user_agent)

    payload = get_json(
        session,
        config.nws_alerts_url,
        service=SERVICE,
        timeout=config.alerts_timeout,
        params={"point": f"{coords.latitude:.4f},{coords.longitude:.4f}"},
        headers={"User-Agent": config.user_agent, "Accept": "application/geo+json"},
    )
    collection = parse_payload(NwsAlertCollection, payload, service=SERVICE)
    alerts = [_to_alert(feat.properties) for feat in collection.features]
    logger.info("Retrieved %d active alerts", len(alerts))
    return alerts
