"""FastAPI endpoints for the ZIP hazard lookup."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from zipwatch import __version__
from zipwatch.cache import FLOOD_DEGRADED, FLOOD_MAP, LIVE_FEED, NO_STORE, STATIC_TABLE, CachePolicy
from zipwatch.config import ZipwatchConfig
from zipwatch.errors import InvalidInput, NotFound, UpstreamUnavailable, ZipwatchError
from zipwatch.fetchers.geocode import validate_zip
from zipwatch.hazards import HazardTable, default_hazard_table
from zipwatch.report import build_report
from zipwatch.service import get_alerts, get_flood, get_hazards, get_quakes

logger = logging.getLogger(__name__)

MISSING_ZIP = "Missing zip parameter"

ZipParam = Annotated[
    str | None, Query(alias="zip", description="5-digit U.S. ZIP code."),
]


@lru_cache(maxsize=1)
def get_config() -> ZipwatchConfig:
    return ZipwatchConfig()


ConfigDep = Annotated[ZipwatchConfig, Depends(get_config)]


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Load the static hazard table once and record startup time."""
    config = application.dependency_overrides.get(get_config, get_config)()
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.hazards = default_hazard_table(config.hazards_file)
    yield


app = FastAPI(
    title="zipwatch",
    description="Weather alerts, earthquakes, flood likelihood and long-term hazards by ZIP code.",
    version=__version__,
    lifespan=lifespan,
)


def _ok(content: dict[str, Any], policy: CachePolicy) -> JSONResponse:
    return JSONResponse(content=content, headers={"Cache-Control": policy.header()})


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={"Cache-Control": NO_STORE},
    )


def _error_for(exc: ZipwatchError) -> JSONResponse:
    if isinstance(exc, InvalidInput):
        return _error(400, str(exc))
    if isinstance(exc, NotFound):
        return _error(502, str(exc))
    if isinstance(exc, UpstreamUnavailable):
        logger.warning("Upstream failure: %s", exc)
        return _error(502, f"{exc.service} is unavailable")
    logger.exception("Unhandled lookup error")
    return _error(500, "Lookup failed")


def _hazard_table(request: Request) -> HazardTable | None:
    return getattr(request.app.state, "hazards", None)


@app.get("/health")
def health(request: Request) -> dict[str, Any]:
    """Server health check with uptime, version and hazard table size."""
    now = datetime.now(tz=timezone.utc)
    start_time = getattr(request.app.state, "start_time", now)
    table = _hazard_table(request)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - start_time).total_seconds(), 1),
        "hazard_zip_count": len(table) if table is not None else 0,
    }


@app.get("/api/alerts")
def alerts(config: ConfigDep, zip_code: ZipParam = None) -> JSONResponse:
    """Active NWS alerts for the ZIP code's location."""
    if zip_code is None:
        return _error(400, MISSING_ZIP)
    try:
        result = get_alerts(zip_code, config)
    except ZipwatchError as exc:
        return _error_for(exc)
    return _ok(result.to_dict(), LIVE_FEED)


@app.get("/api/quakes")
def quakes(config: ConfigDep, zip_code: ZipParam = None) -> JSONResponse:
    """Up to three strongest earthquakes nearby in the past 72 hours."""
    if zip_code is None:
        return _error(400, MISSING_ZIP)
    try:
        result = get_quakes(zip_code, config)
    except ZipwatchError as exc:
        return _error_for(exc)
    return _ok(result.to_dict(), LIVE_FEED)


@app.get("/api/flood")
def flood(config: ConfigDep, zip_code: ZipParam = None) -> JSONResponse:
    """Flood insurance likelihood from FEMA flood zones.

    When FEMA is unreachable the response is still 200, with likelihood
    ``Unknown`` and a short cache lifetime.
    """
    if zip_code is None:
        return _error(400, MISSING_ZIP)
    try:
        result = get_flood(zip_code, config)
    except ZipwatchError as exc:
        return _error_for(exc)
    policy = FLOOD_DEGRADED if result.degraded else FLOOD_MAP
    return _ok(result.to_dict(), policy)


@app.get("/api/hazards")
def hazards(request: Request, zip_code: ZipParam = None) -> JSONResponse:
    """Long-term hazard scores from the bundled table. No network access."""
    if zip_code is None:
        return _error(400, MISSING_ZIP)
    try:
        result = get_hazards(zip_code, _hazard_table(request))
    except ZipwatchError as exc:
        return _error_for(exc)
    return _ok(result.to_dict(), STATIC_TABLE)


@app.get("/api/report")
def report(request: Request, config: ConfigDep, zip_code: ZipParam = None) -> JSONResponse:
    """All four sections at once; each section succeeds or fails on its own."""
    if zip_code is None:
        return _error(400, MISSING_ZIP)
    try:
        validate_zip(zip_code)
    except InvalidInput as exc:
        return _error_for(exc)
    result = build_report(zip_code, config, table=_hazard_table(request))
    return JSONResponse(content=result.to_dict(), headers={"Cache-Control": NO_STORE})
