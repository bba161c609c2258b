"""Exception hierarchy shared by the fetchers, handlers and API."""

from __future__ import annotations


class ZipwatchError(Exception):
    """Base class for all lookup failures."""


class InvalidInput(ZipwatchError):
    """The ZIP code is malformed. Raised before any network call."""


class NotFound(ZipwatchError):
    """The geocoding provider does not know the ZIP code."""


class UpstreamUnavailable(ZipwatchError):
    """A third-party service timed out, failed, or returned an unexpected shape."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
