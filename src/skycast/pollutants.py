"""Air-quality payload normalization and pollen bucketing."""

from __future__ import annotations

import math
from typing import Any, Mapping

from skycast.constants import POLLEN_SPECIES
from skycast.models.current import AirQuality, Pollutants
from skycast.models.enums import PollenLevel

# Neutral AQI reported when air quality is unknown
DEFAULT_AQI = 30

# (minimum grains/m3, level), highest first
POLLEN_THRESHOLDS: list[tuple[float, PollenLevel]] = [
    (200.0, PollenLevel.VERY_HIGH),
    (50.0, PollenLevel.HIGH),
    (10.0, PollenLevel.MODERATE),
]

# Pollutants field -> upstream variable
_POLLUTANT_FIELDS: dict[str, str] = {
    "pm2_5": "pm2_5",
    "pm10": "pm10",
    "no2": "nitrogen_dioxide",
    "o3": "ozone",
    "so2": "sulphur_dioxide",
}


def _non_negative(value: Any) -> float:
    """Coerce an upstream scalar to a finite, non-negative float (else 0)."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def default_air_quality() -> AirQuality:
    """Air quality used when the provider gave nothing usable. Means unknown."""
    return AirQuality(aqi=DEFAULT_AQI, pollen_level=PollenLevel.LOW, pollutants=Pollutants())


def bucket_pollen(readings: Mapping[str, Any]) -> PollenLevel:
    """Bucket the worst single species reading; other species are ignored."""
    worst = max((_non_negative(v) for v in readings.values()), default=0.0)
    for threshold, level in POLLEN_THRESHOLDS:
        if worst >= threshold:
            return level
    return PollenLevel.LOW


def normalize(raw: Mapping[str, Any] | None) -> AirQuality:
    """Normalize an air-quality response into AQI, pollen level and pollutants.

    Accepts the full response (with a ``current`` block) or None. Each field
    defaults on its own, so one missing reading does not discard the rest.
    A missing or unreadable AQI falls back to the neutral default.
    """
    if not isinstance(raw, Mapping):
        return default_air_quality()
    current = raw.get("current")
    if not isinstance(current, Mapping):
        return default_air_quality()

    pollutants = Pollutants(
        **{field: _non_negative(current.get(source)) for field, source in _POLLUTANT_FIELDS.items()}
    )
    pollen = bucket_pollen({species: current.get(species) for species in POLLEN_SPECIES})
    return AirQuality(
        aqi=_read_aqi(current.get("european_aqi")),
        pollen_level=pollen,
        pollutants=pollutants,
    )


def _read_aqi(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return DEFAULT_AQI
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_AQI
    if not math.isfinite(number) or number < 0:
        return DEFAULT_AQI
    return math.floor(number + 0.5)
