"""HTTP response cache directives.

Nothing is cached in-process; freshness is delegated to browsers and
CDNs through ``Cache-Control`` headers.
"""

from __future__ import annotations

from dataclasses import dataclass

# TTLs in seconds
LIVE_FEED_TTL = 300  # 5 minutes
LIVE_FEED_STALE = 600  # 10 minutes
FLOOD_MAP_TTL = 86400  # 24 hours
FLOOD_MAP_STALE = 172800  # 48 hours
DEGRADED_TTL = 300  # 5 minutes
STATIC_TTL = 31536000  # 1 year


@dataclass(frozen=True)
class CachePolicy:
    """A public Cache-Control directive."""

    max_age: int
    stale_while_revalidate: int | None = None
    immutable: bool = False

    def header(self) -> str:
        parts = ["public", f"max-age={self.max_age}"]
        if self.stale_while_revalidate is not None:
            parts.append(f"stale-while-revalidate={self.stale_while_revalidate}")
        if self.immutable:
            parts.append("immutable")
        return ", ".join(parts)


LIVE_FEED = CachePolicy(LIVE_FEED_TTL, LIVE_FEED_STALE)
FLOOD_MAP = CachePolicy(FLOOD_MAP_TTL, FLOOD_MAP_STALE)
FLOOD_DEGRADED = CachePolicy(DEGRADED_TTL)
STATIC_TABLE = CachePolicy(STATIC_TTL, immutable=True)

NO_STORE = "no-store"
