"""Static long-term hazard table keyed by ZIP code."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from zipwatch.fetchers.geocode import validate_zip
from zipwatch.models import HazardScore, HazardsResult
from zipwatch.schemas import HazardTableFile

logger = logging.getLogger(__name__)

HazardTable = Mapping[str, tuple[HazardScore, ...]]


def _bundled_table_text() -> str:
    return resources.files("zipwatch.data").joinpath("hazards.json").read_text(encoding="utf-8")


def load_hazard_table(path: Path | None = None) -> HazardTable:
    """Load and validate the hazard table into a read-only mapping.

    Reads the bundled ``data/hazards.json`` when ``path`` is None. Entry
    order within each ZIP is preserved as stored.
    """
    text = path.read_text(encoding="utf-8") if path is not None else _bundled_table_text()
    parsed = HazardTableFile.model_validate(json.loads(text))

    table = {
        zip_code: tuple(
            HazardScore(name=e.name, score=e.score, rationale=e.rationale) for e in entries
        )
        for zip_code, entries in parsed.root.items()
    }
    logger.info("Loaded hazard table with %d ZIP codes", len(table))
    return MappingProxyType(table)


@lru_cache(maxsize=None)
def _cached_table(path: Path | None) -> HazardTable:
    return load_hazard_table(path)


def default_hazard_table(path: Path | None = None) -> HazardTable:
    """Process-wide hazard table, read from disk once per path."""
    return _cached_table(path)


def get_hazards(zip_code: str, table: HazardTable | None = None) -> HazardsResult:
    """Return the stored hazards for ``zip_code``; unknown ZIPs yield none."""
    validate_zip(zip_code)
    if table is None:
        table = default_hazard_table()
    return HazardsResult(zip_code=zip_code, hazards=table.get(zip_code, ()))
