"""Tests for Cache-Control directives."""

from zipwatch.cache import FLOOD_DEGRADED, FLOOD_MAP, LIVE_FEED, STATIC_TABLE, CachePolicy


class TestCachePolicy:
    def test_live_feed(self):
        assert LIVE_FEED.header() == "public, max-age=300, stale-while-revalidate=600"

    def test_flood_map(self):
        assert FLOOD_MAP.header() == "public, max-age=86400, stale-while-revalidate=172800"

    def test_flood_degraded_is_short(self):
        assert FLOOD_DEGRADED.header() == "public, max-age=300"

    def test_static_table_is_one_year(self):
        assert STATIC_TABLE.header() == "public, max-age=31536000, immutable"

    def test_custom_policy(self):
        assert CachePolicy(60).header() == "public, max-age=60"
