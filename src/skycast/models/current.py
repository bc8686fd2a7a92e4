"""Current conditions and air quality models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from skycast.models.enums import ConditionCode, PollenLevel


class Pollutants(BaseModel):
    """Pollutant concentrations (ug/m3). Missing readings are 0, never absent."""

    model_config = ConfigDict(frozen=True)

    pm2_5: float = Field(default=0.0, ge=0.0)
    pm10: float = Field(default=0.0, ge=0.0)
    no2: float = Field(default=0.0, ge=0.0)
    o3: float = Field(default=0.0, ge=0.0)
    so2: float = Field(default=0.0, ge=0.0)


class AirQuality(BaseModel):
    """Normalized air-quality block: AQI, pollen bucket and pollutants."""

    model_config = ConfigDict(frozen=True)

    aqi: int = Field(ge=0)
    pollen_level: PollenLevel
    pollutants: Pollutants


class CurrentConditions(BaseModel):
    """Display-ready current conditions."""

    model_config = ConfigDict(frozen=True)

    temperature: int
    feels_like: int
    humidity: float
    wind_speed_kmh: int
    uv_index: int
    condition: ConditionCode
    description: str
    aqi: int = Field(ge=0)
    pollen_level: PollenLevel
    pollutants: Pollutants
