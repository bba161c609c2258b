"""Flood insurance likelihood from FEMA flood zone codes."""

from __future__ import annotations

from collections.abc import Sequence

from zipwatch.models import FloodAssessment

# Special Flood Hazard Area zone codes. A returned zone matches when it
# starts with one of these, so "AE1" counts as "AE".
SFHA_ZONES: tuple[str, ...] = ("A", "AE", "AH", "AO", "A99", "AR", "V", "VE")

FLOOD_DISCLAIMER = (
    "This is an estimate based on FEMA flood maps, not an official flood zone "
    "determination. Check the FEMA Flood Map Service Center or ask your lender "
    "or insurance agent before making coverage decisions."
)

RATIONALE_HIGH = (
    "This location is inside a FEMA Special Flood Hazard Area. Flood insurance "
    "is typically required for federally backed mortgages."
)
RATIONALE_MODERATE = (
    "This location is near mapped flood zones but not high-risk. Flood "
    "insurance is optional but often recommended."
)
RATIONALE_LOW = (
    "No mapped flood hazard zone covers this location: lower flood risk based "
    "on mapping. Floods can still happen outside mapped zones."
)
RATIONALE_UNKNOWN = "FEMA flood map data is temporarily unavailable. Try again later."


def is_sfha_zone(zone: str | None) -> bool:
    """Return True if ``zone`` begins with any SFHA zone code."""
    if not zone:
        return False
    return zone.startswith(SFHA_ZONES)


def classify_zones(zones: Sequence[str | None]) -> FloodAssessment:
    """Classify the zone codes of every polygon covering a point.

    No polygons means Low, any SFHA zone means High, anything else Moderate.
    """
    codes = tuple(z for z in zones if z)
    if not zones:
        return FloodAssessment("Low", RATIONALE_LOW, FLOOD_DISCLAIMER, codes)
    if any(is_sfha_zone(z) for z in zones):
        return FloodAssessment("High", RATIONALE_HIGH, FLOOD_DISCLAIMER, codes)
    return FloodAssessment("Moderate", RATIONALE_MODERATE, FLOOD_DISCLAIMER, codes)


def unavailable_assessment() -> FloodAssessment:
    """Fallback assessment when FEMA cannot be queried."""
    return FloodAssessment("Unknown", RATIONALE_UNKNOWN, FLOOD_DISCLAIMER)
