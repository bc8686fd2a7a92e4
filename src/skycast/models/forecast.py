"""Hourly and daily forecast point models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from skycast.models.enums import ConditionCode


class HourlyPoint(BaseModel):
    """One hour of forecast, labelled ``HH:00`` in local time."""

    model_config = ConfigDict(frozen=True)

    label: str
    temperature: int
    precipitation_chance: float = Field(ge=0.0, le=100.0)
    condition: ConditionCode


class DailyPoint(BaseModel):
    """One day of forecast, labelled with the short weekday name."""

    model_config = ConfigDict(frozen=True)

    day_label: str
    min_temp: int
    max_temp: int
    precipitation_chance: float = Field(ge=0.0, le=100.0)
    condition: ConditionCode
