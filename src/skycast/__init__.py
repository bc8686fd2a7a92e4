"""SkyCast: weather aggregation and condition classification engine."""

from skycast.aggregator import WeatherAggregator
from skycast.alerts import ALERT_RULES, AlertInputs, AlertRule, derive
from skycast.conditions import Classification, classify
from skycast.config import WeatherConfig
from skycast.constants import CITY_COORDINATES, DEFAULT_CITY, default_location
from skycast.exceptions import (
    SkyCastError,
    UpstreamAPIError,
    UpstreamConnectionError,
    UpstreamTimeoutError,
    UpstreamValidationError,
)
from skycast.fallback import build_fallback_snapshot
from skycast.forecast import project_daily, project_hourly
from skycast.models import (
    Alert,
    ConditionCode,
    Coordinate,
    CurrentConditions,
    DailyPoint,
    HourlyPoint,
    Location,
    PollenLevel,
    Pollutants,
    Severity,
    WeatherSnapshot,
)
from skycast.pollutants import bucket_pollen, normalize
from skycast.signals import AqiStatus, VisualEffects, aqi_status, visual_effects

__all__ = [
    "ALERT_RULES",
    "CITY_COORDINATES",
    "DEFAULT_CITY",
    "Alert",
    "AlertInputs",
    "AlertRule",
    "AqiStatus",
    "Classification",
    "ConditionCode",
    "Coordinate",
    "CurrentConditions",
    "DailyPoint",
    "HourlyPoint",
    "Location",
    "PollenLevel",
    "Pollutants",
    "Severity",
    "SkyCastError",
    "UpstreamAPIError",
    "UpstreamConnectionError",
    "UpstreamTimeoutError",
    "UpstreamValidationError",
    "VisualEffects",
    "WeatherAggregator",
    "WeatherConfig",
    "WeatherSnapshot",
    "aqi_status",
    "bucket_pollen",
    "build_fallback_snapshot",
    "classify",
    "default_location",
    "derive",
    "normalize",
    "project_daily",
    "project_hourly",
    "visual_effects",
]

__version__ = "0.1.0"
