"""Coordinate and location models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """WGS84 coordinate in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class Location(BaseModel):
    """Caller-supplied place, passed through to the snapshot untouched."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    district: str | None = None
    coordinate: Coordinate
