"""Shared constants for the SkyCast engine."""

from __future__ import annotations

from skycast.models.location import Coordinate, Location

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"

CURRENT_VARIABLES: list[str] = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "uv_index",
]

HOURLY_VARIABLES: list[str] = [
    "temperature_2m",
    "precipitation_probability",
    "weather_code",
]

DAILY_VARIABLES: list[str] = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
]

POLLEN_SPECIES: list[str] = [
    "alder_pollen",
    "birch_pollen",
    "grass_pollen",
    "mugwort_pollen",
    "olive_pollen",
    "ragweed_pollen",
]

AIR_QUALITY_VARIABLES: list[str] = [
    "european_aqi",
    "pm10",
    "pm2_5",
    "nitrogen_dioxide",
    "ozone",
    "sulphur_dioxide",
    *POLLEN_SPECIES,
]

# Real coordinates for the default cities
CITY_COORDINATES: dict[str, Coordinate] = {
    "São Paulo": Coordinate(latitude=-23.5505, longitude=-46.6333),
    "Rio de Janeiro": Coordinate(latitude=-22.9068, longitude=-43.1729),
    "Lisbon": Coordinate(latitude=38.7223, longitude=-9.1393),
    "New York": Coordinate(latitude=40.7128, longitude=-74.0060),
    "Tokyo": Coordinate(latitude=35.6762, longitude=139.6503),
    "London": Coordinate(latitude=51.5074, longitude=-0.1278),
}

DEFAULT_CITY = "London"


def default_location(name: str = DEFAULT_CITY) -> Location:
    """Return the Location for one of the default cities."""
    try:
        coordinate = CITY_COORDINATES[name]
    except KeyError:
        raise ValueError(f"Unknown default city: {name!r}") from None
    return Location(display_name=name, coordinate=coordinate)
