"""Root weather snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from skycast.models.alert import Alert
from skycast.models.current import CurrentConditions
from skycast.models.forecast import DailyPoint, HourlyPoint
from skycast.models.location import Location

HOURLY_LENGTH = 24
DAILY_LENGTH = 7


class WeatherSnapshot(BaseModel):
    """One complete, immutable weather result for a location.

    Replaced wholesale on every fetch. ``degraded`` is set only when the
    snapshot was synthesized because the forecast provider failed.
    """

    model_config = ConfigDict(frozen=True)

    location: Location
    current: CurrentConditions
    hourly: tuple[HourlyPoint, ...] = Field(min_length=HOURLY_LENGTH, max_length=HOURLY_LENGTH)
    daily: tuple[DailyPoint, ...] = Field(min_length=DAILY_LENGTH, max_length=DAILY_LENGTH)
    alerts: tuple[Alert, ...] = ()
    degraded: bool = False
