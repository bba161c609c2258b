"""Boundary schemas for upstream responses and the static hazard table.

Upstream JSON is validated here and narrowed into the internal models by
the fetchers. Unknown fields are ignored; missing required fields or
wrongly-typed values raise ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, StringConstraints

ZipString = Annotated[str, StringConstraints(pattern=r"^[0-9]{5}$")]

HazardName = Literal[
    "flood",
    "hurricane",
    "heat",
    "wildfire",
    "earthquake",
    "tornado",
    "drought",
    "winter_storm",
    "landslide",
    "tsunami",
    "hail",
    "sea_level_rise",
]


# Zippopotam.us

class ZippopotamPlace(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    place_name: str | None = Field(default=None, alias="place name")
    state_abbreviation: str | None = Field(default=None, alias="state abbreviation")
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ZippopotamResponse(BaseModel):
    places: list[ZippopotamPlace]


# api.weather.gov

class NwsAlertProperties(BaseModel):
    event: str | None = None
    severity: str | None = None
    effective: str | None = None
    onset: str | None = None
    expires: str | None = None
    ends: str | None = None
    headline: str | None = None
    instruction: str | None = None
    sender_name: str | None = Field(default=None, alias="senderName")


class NwsAlertFeature(BaseModel):
    properties: NwsAlertProperties


class NwsAlertCollection(BaseModel):
    features: list[NwsAlertFeature]


# USGS FDSN event service (GeoJSON)

class UsgsEventProperties(BaseModel):
    mag: float | None = None
    time: int | None = None
    place: str | None = None
    url: str | None = None


class UsgsEventFeature(BaseModel):
    id: str | None = None
    properties: UsgsEventProperties


class UsgsEventCollection(BaseModel):
    features: list[UsgsEventFeature]


# FEMA NFHL (ArcGIS REST query)

class FemaZoneAttributes(BaseModel):
    fld_zone: str | None = Field(default=None, alias="FLD_ZONE")
    zone_subtype: str | None = Field(default=None, alias="ZONE_SUBTY")
    sfha_tf: str | None = Field(default=None, alias="SFHA_TF")


class FemaZoneFeature(BaseModel):
    attributes: FemaZoneAttributes


class ArcGisError(BaseModel):
    code: int | None = None
    message: str | None = None


class FemaQueryResponse(BaseModel):
    """ArcGIS answers failures with HTTP 200 and an ``error`` object."""

    features: list[FemaZoneFeature] | None = None
    error: ArcGisError | None = None


# Bundled hazard table

class HazardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: HazardName
    score: int = Field(ge=0, le=100)
    rationale: str


class HazardTableFile(RootModel[dict[ZipString, list[HazardEntry]]]):
    pass
