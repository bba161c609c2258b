"""Tests for flood zone classification."""

import pytest

from zipwatch.flood import (
    FLOOD_DISCLAIMER,
    SFHA_ZONES,
    classify_zones,
    is_sfha_zone,
    unavailable_assessment,
)


class TestIsSfhaZone:
    @pytest.mark.parametrize("zone", list(SFHA_ZONES))
    def test_exact_codes_match(self, zone):
        assert is_sfha_zone(zone)

    @pytest.mark.parametrize("zone", ["AE1", "VE2", "A1", "AR/AE"])
    def test_prefix_matches(self, zone):
        assert is_sfha_zone(zone)

    @pytest.mark.parametrize("zone", ["X", "D", "B", "C", "OPEN WATER", "", None])
    def test_non_sfha(self, zone):
        assert not is_sfha_zone(zone)


class TestClassifyZones:
    def test_no_features_is_low(self):
        result = classify_zones([])
        assert result.likelihood == "Low"
        assert "lower flood risk based on mapping" in result.rationale

    def test_sfha_zone_is_high(self):
        result = classify_zones(["AE"])
        assert result.likelihood == "High"
        assert "Special Flood Hazard Area" in result.rationale

    def test_any_sfha_among_many_is_high(self):
        assert classify_zones(["X", "D", "VE"]).likelihood == "High"

    def test_non_sfha_features_are_moderate(self):
        result = classify_zones(["X", "X"])
        assert result.likelihood == "Moderate"
        assert "near mapped flood zones but not high-risk" in result.rationale

    def test_null_zone_feature_is_moderate(self):
        assert classify_zones([None]).likelihood == "Moderate"

    def test_zones_recorded(self):
        assert classify_zones(["X", None, "AE"]).zones == ("X", "AE")

    @pytest.mark.parametrize("zones", [[], ["AE"], ["X"]])
    def test_disclaimer_always_attached(self, zones):
        assert classify_zones(zones).disclaimer == FLOOD_DISCLAIMER


class TestUnavailableAssessment:
    def test_unknown_with_disclaimer(self):
        result = unavailable_assessment()
        assert result.likelihood == "Unknown"
        assert "temporarily unavailable" in result.rationale
        assert result.disclaimer == FLOOD_DISCLAIMER

    def test_distinct_from_low(self):
        assert unavailable_assessment() != classify_zones([])
