"""Projection of raw hourly/daily arrays into fixed-length forecast sequences."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Any, Sequence

from skycast.conditions import classify
from skycast.i18n import DEFAULT_LOCALE, weekday_short
from skycast.models.enums import ConditionCode
from skycast.models.forecast import DailyPoint, HourlyPoint
from skycast.models.snapshot import DAILY_LENGTH, HOURLY_LENGTH


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves rounding up."""
    return math.floor(value + 0.5)


def _at(values: Sequence[Any] | None, index: int, default: Any = None) -> Any:
    """Index safely: out-of-range and null entries give ``default``."""
    if values is None or index >= len(values):
        return default
    value = values[index]
    return default if value is None else value


def _chance(value: Any) -> float:
    return min(100.0, max(0.0, float(value)))


def day_label(day: date, locale: str = DEFAULT_LOCALE) -> str:
    return weekday_short(day.weekday(), locale)


def project_hourly(
    times: Sequence[str],
    temperatures: Sequence[float | None],
    precipitation_chances: Sequence[float | None] | None,
    codes: Sequence[int | None],
) -> list[HourlyPoint]:
    """Project the hourly series onto exactly 24 points, earliest first.

    Longer input is truncated. Shorter input is padded by continuing the
    hour labels and repeating the last known temperature and condition with
    no precipitation.
    """
    points: list[HourlyPoint] = []
    last_hour = -1
    for index, timestamp in enumerate(times[:HOURLY_LENGTH]):
        last_hour = datetime.fromisoformat(timestamp).hour
        points.append(
            HourlyPoint(
                label=f"{last_hour:02d}:00",
                temperature=round_half_up(float(_at(temperatures, index, 0.0))),
                precipitation_chance=_chance(_at(precipitation_chances, index, 0)),
                condition=classify(_at(codes, index)).condition,
            )
        )

    while len(points) < HOURLY_LENGTH:
        last_hour = (last_hour + 1) % 24
        previous = points[-1] if points else None
        points.append(
            HourlyPoint(
                label=f"{last_hour:02d}:00",
                temperature=previous.temperature if previous else 0,
                precipitation_chance=0.0,
                condition=previous.condition if previous else ConditionCode.SUNNY,
            )
        )
    return points


def project_daily(
    dates: Sequence[str],
    min_temperatures: Sequence[float | None],
    max_temperatures: Sequence[float | None],
    precipitation_chances: Sequence[float | None] | None,
    codes: Sequence[int | None],
    locale: str = DEFAULT_LOCALE,
) -> list[DailyPoint]:
    """Project the daily series onto exactly 7 points.

    The provider is asked for 7 days. Anything else is cut or padded by
    continuing the dates, repeating the last known day.
    """
    points: list[DailyPoint] = []
    last_day: date | None = None
    for index, raw_date in enumerate(dates[:DAILY_LENGTH]):
        last_day = date.fromisoformat(raw_date[:10])
        points.append(
            DailyPoint(
                day_label=day_label(last_day, locale),
                min_temp=round_half_up(float(_at(min_temperatures, index, 0.0))),
                max_temp=round_half_up(float(_at(max_temperatures, index, 0.0))),
                precipitation_chance=_chance(_at(precipitation_chances, index, 0)),
                condition=classify(_at(codes, index)).condition,
            )
        )

    while len(points) < DAILY_LENGTH:
        last_day = last_day + timedelta(days=1) if last_day else date.today()
        previous = points[-1] if points else None
        points.append(
            DailyPoint(
                day_label=day_label(last_day, locale),
                min_temp=previous.min_temp if previous else 0,
                max_temp=previous.max_temp if previous else 0,
                precipitation_chance=0.0,
                condition=previous.condition if previous else ConditionCode.SUNNY,
            )
        )
    return points
