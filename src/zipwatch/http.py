"""Shared HTTP session and bounded upstream calls."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from requests import Session
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException, Timeout

from zipwatch.errors import NotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def create_session(user_agent: str | None = None) -> Session:
    """Create a requests Session that never retries.

    A single failed attempt is final for the request, so the adapters are
    mounted with ``max_retries=0``. When ``user_agent`` is given it is sent
    on every request made through the session.
    """
    adapter = HTTPAdapter(max_retries=0)
    session = Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    if user_agent:
        session.headers["User-Agent"] = user_agent
    return session


def get_json(
    session: Session,
    url: str,
    *,
    service: str,
    timeout: float,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    not_found: str | None = None,
) -> Any:
    """GET ``url`` and decode the JSON body, bounded by ``timeout`` seconds.

    Timeouts, connection errors, non-2xx statuses and undecodable bodies
    raise ``UpstreamUnavailable``. If ``not_found`` is given, an HTTP 404
    raises ``NotFound`` with that message instead.
    """
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout)
    except Timeout as exc:
        raise UpstreamUnavailable(service, f"timed out after {timeout:g}s") from exc
    except RequestException as exc:
        raise UpstreamUnavailable(service, f"request failed: {exc}") from exc

    if resp.status_code == 404 and not_found is not None:
        raise NotFound(not_found)
    if not resp.ok:
        raise UpstreamUnavailable(service, f"HTTP {resp.status_code}")

    try:
        return resp.json()
    except ValueError as exc:
        raise UpstreamUnavailable(service, "response was not valid JSON") from exc


def parse_payload(model: type[ModelT], payload: Any, *, service: str) -> ModelT:
    """Validate an upstream payload against its boundary schema."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("%s returned an unexpected shape: %s", service, exc)
        raise UpstreamUnavailable(service, "unexpected response shape") from exc
