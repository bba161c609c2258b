"""Tests for the section report: failures stay inside their section."""

from __future__ import annotations

import json

import pytest
import responses
from requests.exceptions import ReadTimeout

from zipwatch.config import FEMA_NFHL_URL, NWS_ALERTS_URL, USGS_EVENT_URL, ZipwatchConfig
from zipwatch.errors import InvalidInput
from zipwatch.report import build_report

ZIPPOPOTAM_70112 = "https://api.zippopotam.us/us/70112"


class TestBuildReport:
    @responses.activate
    def test_all_sections_ok(
        self,
        config,
        sample_zippopotam_response,
        sample_alerts_response,
        sample_usgs_response,
        sample_fema_sfha_response,
    ):
        responses.add(responses.GET, ZIPPOPOTAM_70112, json=sample_zippopotam_response)
        responses.add(responses.GET, NWS_ALERTS_URL, json=sample_alerts_response)
        responses.add(responses.GET, USGS_EVENT_URL, json=sample_usgs_response)
        responses.add(responses.GET, FEMA_NFHL_URL, json=sample_fema_sfha_response)

        report = build_report("70112", config)

        assert list(report.sections) == ["alerts", "quakes", "flood", "hazards"]
        assert all(s.status == "ok" for s in report.sections.values())
        assert report.sections["flood"].data["likelihood"] == "High"
        # one resolution per geo-dependent section
        resolver_calls = [c for c in responses.calls if "zippopotam" in c.request.url]
        assert len(resolver_calls) == 3

    @responses.activate
    def test_one_failure_isolated(
        self, config, sample_zippopotam_response, sample_fema_sfha_response
    ):
        responses.add(responses.GET, ZIPPOPOTAM_70112, json=sample_zippopotam_response)
        responses.add(responses.GET, NWS_ALERTS_URL, status=503)
        responses.add(responses.GET, USGS_EVENT_URL, json={"features": []})
        responses.add(responses.GET, FEMA_NFHL_URL, json=sample_fema_sfha_response)

        report = build_report("70112", config)

        assert report.sections["alerts"].status == "error"
        assert "unavailable" in report.sections["alerts"].message
        assert report.sections["quakes"].status == "empty"
        assert report.sections["quakes"].message == "No recent earthquakes nearby."
        assert report.sections["flood"].status == "ok"
        assert report.sections["hazards"].status == "ok"

    @responses.activate
    def test_resolver_down_leaves_hazards(self, config):
        responses.add(responses.GET, ZIPPOPOTAM_70112, body=ReadTimeout("timed out"))

        report = build_report("70112", config)

        for name in ("alerts", "quakes", "flood"):
            assert report.sections[name].status == "error"
        assert report.sections["hazards"].status == "ok"
        assert len(report.sections["hazards"].data["hazards"]) == 3

    @responses.activate
    def test_degraded_flood_is_renderable(self, config, sample_zippopotam_response):
        responses.add(responses.GET, ZIPPOPOTAM_70112, json=sample_zippopotam_response)
        responses.add(responses.GET, NWS_ALERTS_URL, json={"features": []})
        responses.add(responses.GET, USGS_EVENT_URL, json={"features": []})
        responses.add(responses.GET, FEMA_NFHL_URL, status=500)

        report = build_report("70112", config)

        flood = report.sections["flood"]
        assert flood.status == "ok"
        assert flood.data["likelihood"] == "Unknown"
        assert report.sections["alerts"].message == "No active alerts."

    @responses.activate
    def test_unknown_zip_hazards_empty(self, config):
        responses.add(responses.GET, "https://api.zippopotam.us/us/00000", status=404)
        report = build_report("00000", config)
        assert report.sections["hazards"].status == "empty"
        assert "was not found" in report.sections["alerts"].message

    @responses.activate
    def test_hazards_file_from_config(self, tmp_path):
        table_file = tmp_path / "hazards.json"
        table_file.write_text(
            json.dumps({"70112": [{"name": "tornado", "score": 11, "rationale": "test"}]})
        )
        responses.add(responses.GET, ZIPPOPOTAM_70112, status=503)

        report = build_report("70112", ZipwatchConfig(hazards_file=table_file))

        hazards = report.sections["hazards"].data["hazards"]
        assert [h["name"] for h in hazards] == ["tornado"]

    @responses.activate
    def test_unreadable_hazards_file_is_section_error(self, config, tmp_path):
        responses.add(responses.GET, ZIPPOPOTAM_70112, status=503)
        config = config.model_copy(update={"hazards_file": tmp_path / "missing.json"})

        report = build_report("70112", config)

        assert all(s.status == "error" for s in report.sections.values())

    def test_invalid_zip_raises(self, config):
        with pytest.raises(InvalidInput):
            build_report("abcde", config)
