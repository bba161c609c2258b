"""Shared fixtures for zipwatch tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from zipwatch.config import ZipwatchConfig
from zipwatch.models import Coordinates, SeismicEvent

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config() -> ZipwatchConfig:
    """Default config with a recognisable User-Agent."""
    return ZipwatchConfig(user_agent="zipwatch-tests (tests@zipwatch.example)")


@pytest.fixture
def sample_zippopotam_response() -> dict:
    return json.loads((FIXTURES_DIR / "zippopotam_70112.json").read_text())


@pytest.fixture
def sample_alerts_response() -> dict:
    return json.loads((FIXTURES_DIR / "nws_alerts_sample.json").read_text())


@pytest.fixture
def sample_usgs_response() -> dict:
    return json.loads((FIXTURES_DIR / "usgs_nearby_sample.json").read_text())


@pytest.fixture
def sample_fema_sfha_response() -> dict:
    return json.loads((FIXTURES_DIR / "fema_zones_sfha.json").read_text())


@pytest.fixture
def new_orleans() -> Coordinates:
    return Coordinates(latitude=29.9567, longitude=-90.0757, city="New Orleans", region="LA")


@pytest.fixture
def sample_events() -> list[SeismicEvent]:
    """Pre-built events with magnitudes [2.1, None, 5.4, 3.0]."""
    return [
        SeismicEvent(2.1, "2026-07-13T06:26:40Z", "Chalmette", "https://e/1"),
        SeismicEvent(None, "2026-07-13T09:13:20Z", "Gulf of Mexico", "https://e/2"),
        SeismicEvent(5.4, "2026-07-13T12:00:00Z", "southern Louisiana", "https://e/3"),
        SeismicEvent(3.0, "2026-07-13T14:46:40Z", "Metairie", "https://e/4"),
    ]
