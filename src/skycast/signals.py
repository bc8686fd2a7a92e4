"""Secondary display signals derived from a snapshot's current conditions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from skycast.i18n import AQI_STATUS_TEXT, DEFAULT_LOCALE, POLLEN_TEXT, resolve_locale
from skycast.models.enums import ConditionCode, PollenLevel


class AqiStatus(str, Enum):
    """European AQI band."""

    GOOD = "good"
    FAIR = "fair"
    MODERATE = "moderate"
    POOR = "poor"
    VERY_POOR = "very_poor"


# (inclusive upper bound, status)
_AQI_BANDS: list[tuple[int, AqiStatus]] = [
    (20, AqiStatus.GOOD),
    (40, AqiStatus.FAIR),
    (60, AqiStatus.MODERATE),
    (80, AqiStatus.POOR),
]

_POLLEN_KEYS: dict[PollenLevel, str] = {
    PollenLevel.LOW: "low",
    PollenLevel.MODERATE: "moderate",
    PollenLevel.HIGH: "high",
    PollenLevel.VERY_HIGH: "very_high",
}


@dataclass(frozen=True)
class VisualEffects:
    """Which precipitation particles the view layer should draw."""

    is_storm: bool = False
    is_rain: bool = False
    is_snow: bool = False

    @property
    def is_calm(self) -> bool:
        return not (self.is_storm or self.is_rain or self.is_snow)


def aqi_status(aqi: int) -> AqiStatus:
    for upper, status in _AQI_BANDS:
        if aqi <= upper:
            return status
    return AqiStatus.VERY_POOR


def aqi_label(aqi: int, locale: str = DEFAULT_LOCALE) -> str:
    return AQI_STATUS_TEXT[resolve_locale(locale)][aqi_status(aqi).value]


def pollen_label(level: PollenLevel, locale: str = DEFAULT_LOCALE) -> str:
    return POLLEN_TEXT[resolve_locale(locale)][_POLLEN_KEYS[level]]


def visual_effects(condition: ConditionCode) -> VisualEffects:
    return VisualEffects(
        is_storm=condition is ConditionCode.STORM,
        is_rain=condition is ConditionCode.RAIN,
        is_snow=condition is ConditionCode.SNOW,
    )
