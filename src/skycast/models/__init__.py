"""SkyCast data models."""

from skycast.models.alert import Alert
from skycast.models.current import AirQuality, CurrentConditions, Pollutants
from skycast.models.enums import ConditionCode, PollenLevel, Severity
from skycast.models.forecast import DailyPoint, HourlyPoint
from skycast.models.location import Coordinate, Location
from skycast.models.snapshot import DAILY_LENGTH, HOURLY_LENGTH, WeatherSnapshot
from skycast.models.upstream import (
    ForecastCurrent,
    ForecastDaily,
    ForecastHourly,
    ForecastPayload,
)

__all__ = [
    "DAILY_LENGTH",
    "HOURLY_LENGTH",
    "AirQuality",
    "Alert",
    "ConditionCode",
    "Coordinate",
    "CurrentConditions",
    "DailyPoint",
    "ForecastCurrent",
    "ForecastDaily",
    "ForecastHourly",
    "ForecastPayload",
    "HourlyPoint",
    "Location",
    "PollenLevel",
    "Pollutants",
    "Severity",
    "WeatherSnapshot",
]
