"""Data models for lookup results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Likelihood = Literal["High", "Moderate", "Low", "Unknown"]


@dataclass(frozen=True)
class Coordinates:
    """A resolved ZIP code location."""

    latitude: float
    longitude: float
    city: str | None = None
    region: str | None = None


@dataclass(frozen=True)
class Alert:
    """An active weather alert from the National Weather Service."""

    title: str
    severity: str
    effective_time: str | None
    expires_time: str | None
    headline: str
    instructions: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "severity": self.severity,
            "effectiveTime": self.effective_time,
            "expiresTime": self.expires_time,
            "headline": self.headline,
            "instructions": self.instructions,
            "source": self.source,
        }


@dataclass(frozen=True)
class SeismicEvent:
    """A recent earthquake near the resolved location."""

    magnitude: float | None
    occurred_at: str | None
    place: str
    reference_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "magnitude": self.magnitude,
            "occurredAt": self.occurred_at,
            "place": self.place,
            "referenceUrl": self.reference_url,
        }


@dataclass(frozen=True)
class HazardScore:
    """A pre-scored long-term hazard from the static table."""

    name: str
    score: int
    rationale: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "score": self.score, "rationale": self.rationale}


@dataclass(frozen=True)
class FloodAssessment:
    """Flood insurance likelihood inferred from FEMA flood zones."""

    likelihood: Likelihood
    rationale: str
    disclaimer: str
    zones: tuple[str, ...] = ()


def _location(zip_code: str, coords: Coordinates) -> dict[str, Any]:
    return {"zip": zip_code, "lat": coords.latitude, "lon": coords.longitude}


@dataclass(frozen=True)
class AlertsResult:
    zip_code: str
    coordinates: Coordinates
    alerts: list[Alert] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = _location(self.zip_code, self.coordinates)
        if self.coordinates.city is not None:
            data["city"] = self.coordinates.city
        if self.coordinates.region is not None:
            data["state"] = self.coordinates.region
        data["alerts"] = [a.to_dict() for a in self.alerts]
        return data


@dataclass(frozen=True)
class QuakesResult:
    zip_code: str
    coordinates: Coordinates
    quakes: list[SeismicEvent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = _location(self.zip_code, self.coordinates)
        data["quakes"] = [q.to_dict() for q in self.quakes]
        return data


@dataclass(frozen=True)
class FloodResult:
    """Flood assessment for a ZIP code.

    ``degraded`` is set when FEMA could not be reached and the assessment
    is the Unknown fallback rather than a classification.
    """

    zip_code: str
    coordinates: Coordinates
    assessment: FloodAssessment
    degraded: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = _location(self.zip_code, self.coordinates)
        data["likelihood"] = self.assessment.likelihood
        data["rationale"] = self.assessment.rationale
        data["disclaimer"] = self.assessment.disclaimer
        return data


@dataclass(frozen=True)
class HazardsResult:
    zip_code: str
    hazards: tuple[HazardScore, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"zip": self.zip_code, "hazards": [h.to_dict() for h in self.hazards]}
