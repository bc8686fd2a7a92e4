"""Synthetic snapshot served when the forecast provider is unavailable."""

from __future__ import annotations

import math
from datetime import date, timedelta

from skycast.conditions import classify
from skycast.forecast import day_label, round_half_up
from skycast.i18n import DEFAULT_LOCALE
from skycast.models.current import CurrentConditions
from skycast.models.enums import ConditionCode
from skycast.models.forecast import DailyPoint, HourlyPoint
from skycast.models.location import Location
from skycast.models.snapshot import DAILY_LENGTH, HOURLY_LENGTH, WeatherSnapshot
from skycast.pollutants import default_air_quality

# WMO code for the fallback's current condition (Partly Cloudy)
_FALLBACK_CODE = 2


def build_fallback_snapshot(
    location: Location,
    *,
    locale: str = DEFAULT_LOCALE,
    today: date | None = None,
) -> WeatherSnapshot:
    """Build a plausible static snapshot for ``location``, flagged as degraded.

    Air quality is the unknown default and no alerts are raised.
    """
    start = today or date.today()
    air_quality = default_air_quality()
    classification = classify(_FALLBACK_CODE, locale)

    current = CurrentConditions(
        temperature=18,
        feels_like=17,
        humidity=65,
        wind_speed_kmh=12,
        uv_index=3,
        condition=classification.condition,
        description=classification.description,
        aqi=air_quality.aqi,
        pollen_level=air_quality.pollen_level,
        pollutants=air_quality.pollutants,
    )
    hourly = [
        HourlyPoint(
            label=f"{hour:02d}:00",
            temperature=round_half_up(15 + math.sin(hour / 4) * 5),
            precipitation_chance=10,
            condition=ConditionCode.PARTLY_CLOUDY,
        )
        for hour in range(HOURLY_LENGTH)
    ]
    daily = [
        DailyPoint(
            day_label=day_label(start + timedelta(days=offset), locale),
            min_temp=12,
            max_temp=22,
            precipitation_chance=5,
            condition=ConditionCode.SUNNY,
        )
        for offset in range(DAILY_LENGTH)
    ]
    return WeatherSnapshot(
        location=location,
        current=current,
        hourly=hourly,
        daily=daily,
        alerts=(),
        degraded=True,
    )
