"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

import logging

import pytest

from skycast.models.location import Coordinate

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"

LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)


def make_forecast(
    hours: int = 48,
    days: int = 7,
    current: dict | None = None,
) -> dict:
    """Build a forecast response shaped like Open-Meteo's."""
    base_current = {
        "time": "2024-05-06T14:00",
        "interval": 900,
        "temperature_2m": 19.6,
        "relative_humidity_2m": 58,
        "apparent_temperature": 18.4,
        "precipitation": 0.0,
        "weather_code": 3,
        "wind_speed_10m": 14.2,
        "uv_index": 4.3,
    }
    base_current.update(current or {})
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "current": base_current,
        "hourly": {
            "time": [f"2024-05-{6 + h // 24:02d}T{h % 24:02d}:00" for h in range(hours)],
            "temperature_2m": [12.5 + (h % 24) * 0.5 for h in range(hours)],
            "precipitation_probability": [(h * 5) % 100 for h in range(hours)],
            "weather_code": [(0, 2, 3, 61, 95, 71)[h % 6] for h in range(hours)],
        },
        "daily": {
            "time": [f"2024-05-{6 + d:02d}" for d in range(days)],
            "weather_code": [(0, 3, 61, 95, 71, 2, 45)[d % 7] for d in range(days)],
            "temperature_2m_max": [20.5 + d for d in range(days)],
            "temperature_2m_min": [10.4 + d for d in range(days)],
            "precipitation_probability_max": [d * 10 for d in range(days)],
        },
    }


SAMPLE_FORECAST = make_forecast()

SAMPLE_AIR_QUALITY = {
    "latitude": 51.5,
    "longitude": -0.12,
    "current": {
        "time": "2024-05-06T14:00",
        "european_aqi": 42,
        "pm10": 18.3,
        "pm2_5": 9.1,
        "nitrogen_dioxide": 21.0,
        "ozone": 64.5,
        "sulphur_dioxide": 1.7,
        "alder_pollen": 0.0,
        "birch_pollen": 12.0,
        "grass_pollen": 55.0,
        "mugwort_pollen": 0.0,
        "olive_pollen": 0.0,
        "ragweed_pollen": 0.0,
    },
}


def _drop_api_log_handlers() -> None:
    """Close and remove the file/null handlers the API call log attached."""
    named_logger = logging.getLogger("skycast.api")
    for h in named_logger.handlers[:]:
        if isinstance(h, (logging.FileHandler, logging.NullHandler)):
            h.close()
            named_logger.removeHandler(h)


@pytest.fixture(autouse=True)
def _isolate_api_log(tmp_path, monkeypatch):
    """Redirect the API call log to tmp_path and reset the cached logger."""
    import skycast.api_logging as mod

    _drop_api_log_handlers()
    monkeypatch.setenv("SKYCAST_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(mod, "_logger", None)

    yield tmp_path

    _drop_api_log_handlers()


@pytest.fixture
def london() -> Coordinate:
    return LONDON


@pytest.fixture
def forecast_payload() -> dict:
    return make_forecast()


@pytest.fixture
def air_quality_payload() -> dict:
    return {"latitude": 51.5, "longitude": -0.12, "current": dict(SAMPLE_AIR_QUALITY["current"])}
