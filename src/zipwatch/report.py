"""Section report: run all four lookups for one ZIP, isolating failures."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Literal

from zipwatch.config import ZipwatchConfig
from zipwatch.errors import InvalidInput, NotFound, UpstreamUnavailable
from zipwatch.fetchers.geocode import validate_zip
from zipwatch.hazards import HazardTable, default_hazard_table
from zipwatch.models import AlertsResult, FloodResult, HazardsResult, QuakesResult
from zipwatch.service import get_alerts, get_flood, get_hazards, get_quakes

logger = logging.getLogger(__name__)

SectionStatus = Literal["ok", "empty", "error"]

SECTION_NAMES: tuple[str, ...] = ("alerts", "quakes", "flood", "hazards")

EMPTY_MESSAGES: dict[str, str] = {
    "alerts": "No active alerts.",
    "quakes": "No recent earthquakes nearby.",
    "hazards": "No long-term hazard data for this ZIP code.",
}


@dataclass(frozen=True)
class Section:
    """Outcome of one lookup: data, an empty state, or an error message."""

    name: str
    status: SectionStatus
    data: dict[str, Any] | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data, "message": self.message}


@dataclass(frozen=True)
class Report:
    zip_code: str
    sections: dict[str, Section] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "zip": self.zip_code,
            "sections": {name: s.to_dict() for name, s in self.sections.items()},
        }


def error_message(exc: Exception) -> str:
    """User-facing message for a failed lookup."""
    if isinstance(exc, (InvalidInput, NotFound)):
        return str(exc)
    if isinstance(exc, UpstreamUnavailable):
        return f"{exc.service} is currently unavailable. Please try again later."
    return "Something went wrong while loading this section."


def _is_empty(result: Any) -> bool:
    if isinstance(result, AlertsResult):
        return not result.alerts
    if isinstance(result, QuakesResult):
        return not result.quakes
    if isinstance(result, HazardsResult):
        return not result.hazards
    return False


def _to_section(name: str, run: Callable[[], Any]) -> Section:
    try:
        result = run()
    except (InvalidInput, NotFound, UpstreamUnavailable) as exc:
        logger.warning("%s section failed: %s", name, exc)
        return Section(name=name, status="error", message=error_message(exc))
    except Exception as exc:
        logger.exception("Unexpected failure in %s section", name)
        return Section(name=name, status="error", message=error_message(exc))

    if _is_empty(result):
        return Section(
            name=name, status="empty", data=result.to_dict(), message=EMPTY_MESSAGES[name]
        )
    message = None
    if isinstance(result, FloodResult) and result.degraded:
        message = result.assessment.rationale
    return Section(name=name, status="ok", data=result.to_dict(), message=message)


def build_report(
    zip_code: str,
    config: ZipwatchConfig | None = None,
    table: HazardTable | None = None,
    max_workers: int = 4,
) -> Report:
    """Run the four lookups concurrently and collect one section per lookup.

    The ZIP is validated once up front; after that, a failure in any
    section is recorded on that section only. Each lookup gets its own
    HTTP session. Without an explicit ``table`` the hazard table comes
    from ``config.hazards_file``, or the bundled one when that is unset.
    """
    validate_zip(zip_code)
    if config is None:
        config = ZipwatchConfig()

    def hazards() -> HazardsResult:
        source = table if table is not None else default_hazard_table(config.hazards_file)
        return get_hazards(zip_code, source)

    runners: dict[str, Callable[[], Any]] = {
        "alerts": lambda: get_alerts(zip_code, config),
        "quakes": lambda: get_quakes(zip_code, config),
        "flood": lambda: get_flood(zip_code, config),
        "hazards": hazards,
    }
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {name: pool.submit(_to_section, name, run) for name, run in runners.items()}
        sections = {name: futures[name].result() for name in SECTION_NAMES}

    return Report(zip_code=zip_code, sections=sections)
