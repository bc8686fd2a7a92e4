"""Closed enumerations shared by the weather models."""

from __future__ import annotations

from enum import Enum


class ConditionCode(str, Enum):
    """Nominal weather condition tag. Never compared for severity."""

    SUNNY = "Sunny"
    PARTLY_CLOUDY = "Partly Cloudy"
    CLOUDY = "Cloudy"
    RAIN = "Rain"
    SNOW = "Snow"
    STORM = "Storm"


class PollenLevel(str, Enum):
    """Bucketed pollen level."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class Severity(str, Enum):
    """Alert severity."""

    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"

    @property
    def weight(self) -> int:
        """Sort rank: extreme=3, severe=2, moderate=1."""
        return _SEVERITY_WEIGHTS[self]


_SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.MODERATE: 1,
    Severity.SEVERE: 2,
    Severity.EXTREME: 3,
}
