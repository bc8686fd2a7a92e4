"""Forecast provider payload models.

These validate the primary response before any transform runs. A payload
that fails here is treated as a failed forecast request.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ForecastCurrent(BaseModel):
    """``current`` block of the forecast response."""

    model_config = ConfigDict(frozen=True)

    time: str | None = None
    temperature_2m: float
    relative_humidity_2m: float
    apparent_temperature: float
    precipitation: float | None = None
    weather_code: int
    wind_speed_10m: float
    uv_index: float | None = None


class ForecastHourly(BaseModel):
    """``hourly`` block of the forecast response."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = Field(min_length=1)
    temperature_2m: list[float | None]
    precipitation_probability: list[float | None] = Field(default_factory=list)
    weather_code: list[int | None]


class ForecastDaily(BaseModel):
    """``daily`` block of the forecast response."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = Field(min_length=1)
    weather_code: list[int | None]
    temperature_2m_max: list[float | None]
    temperature_2m_min: list[float | None]
    precipitation_probability_max: list[float | None] = Field(default_factory=list)


class ForecastPayload(BaseModel):
    """Full forecast response. Unknown top-level keys are ignored."""

    model_config = ConfigDict(frozen=True)

    timezone: str | None = None
    current: ForecastCurrent
    hourly: ForecastHourly
    daily: ForecastDaily
