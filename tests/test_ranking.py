"""Tests for earthquake ranking."""

import pytest

from zipwatch.fetchers.usgs import rank_quakes
from zipwatch.models import SeismicEvent


def _event(mag: float | None, place: str = "somewhere") -> SeismicEvent:
    return SeismicEvent(magnitude=mag, occurred_at=None, place=place, reference_url="")


class TestRankQuakes:
    def test_scenario_with_null_magnitude(self, sample_events):
        ranked = rank_quakes(sample_events)
        assert [e.magnitude for e in ranked] == [5.4, 3.0, 2.1]

    def test_null_magnitude_stays_null(self):
        ranked = rank_quakes([_event(None), _event(-0.5)])
        assert ranked[0].magnitude is None
        assert ranked[1].magnitude == -0.5

    def test_empty(self):
        assert rank_quakes([]) == []

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 10])
    def test_length_capped_and_sorted(self, count):
        events = [_event(float(i % 7)) for i in range(count)]
        ranked = rank_quakes(events)
        assert len(ranked) == min(count, 3)
        mags = [e.magnitude for e in ranked]
        assert mags == sorted(mags, reverse=True)

    def test_ties_keep_upstream_order(self):
        ranked = rank_quakes([_event(4.0, "first"), _event(4.0, "second")])
        assert [e.place for e in ranked] == ["first", "second"]

    def test_custom_limit(self, sample_events):
        assert len(rank_quakes(sample_events, limit=1)) == 1

    def test_input_not_mutated(self, sample_events):
        before = list(sample_events)
        rank_quakes(sample_events)
        assert sample_events == before
