"""Rule-based alert derivation over current-conditions scalars.

Every rule in ``ALERT_RULES`` is evaluated, in order, against the same
inputs. A rule fires at most one alert, always under the same id, so
consumers can key or de-duplicate on it. The resulting list is ordered by
severity weight (extreme first); ties keep rule order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from skycast.conditions import SNOW_ICE_CODES, STORM_CODES
from skycast.i18n import DEFAULT_LOCALE, alert_text
from skycast.models.alert import Alert
from skycast.models.current import AirQuality
from skycast.models.enums import PollenLevel, Severity
from skycast.models.upstream import ForecastCurrent

DEFAULT_ISSUED_AT = "Now"


@dataclass(frozen=True)
class AlertInputs:
    """Raw scalars the rules look at."""

    weather_code: int | None = None
    wind_speed_kmh: float = 0.0
    precipitation_mm: float = 0.0
    temperature_c: float = 0.0
    aqi: int = 0
    pollen_level: PollenLevel = PollenLevel.LOW

    @classmethod
    def from_current(cls, current: ForecastCurrent, air_quality: AirQuality) -> AlertInputs:
        return cls(
            weather_code=current.weather_code,
            wind_speed_kmh=current.wind_speed_10m,
            precipitation_mm=current.precipitation or 0.0,
            temperature_c=current.temperature_2m,
            aqi=air_quality.aqi,
            pollen_level=air_quality.pollen_level,
        )

    def template_values(self) -> dict[str, object]:
        return {
            "code": self.weather_code,
            "wind": self.wind_speed_kmh,
            "precipitation": self.precipitation_mm,
            "temperature": self.temperature_c,
            "aqi": self.aqi,
        }


Predicate = Callable[[AlertInputs], bool]


@dataclass(frozen=True)
class AlertRule:
    """One row of the rule table.

    ``escalation`` optionally raises the severity when a stricter predicate
    also holds (e.g. wind over 60 km/h becomes severe).
    """

    id: str
    severity: Severity
    predicate: Predicate
    escalation: tuple[Predicate, Severity] | None = None

    def evaluate(self, inputs: AlertInputs) -> Severity | None:
        """Return the severity this rule fires with, or None."""
        if not self.predicate(inputs):
            return None
        if self.escalation is not None:
            stricter, raised = self.escalation
            if stricter(inputs):
                return raised
        return self.severity


ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule("storm", Severity.SEVERE, lambda i: i.weather_code in STORM_CODES),
    AlertRule("snow_ice", Severity.MODERATE, lambda i: i.weather_code in SNOW_ICE_CODES),
    AlertRule(
        "wind",
        Severity.MODERATE,
        lambda i: i.wind_speed_kmh > 40,
        escalation=(lambda i: i.wind_speed_kmh > 60, Severity.SEVERE),
    ),
    AlertRule("heavy_rain", Severity.MODERATE, lambda i: i.precipitation_mm > 5),
    AlertRule("heat", Severity.EXTREME, lambda i: i.temperature_c > 35),
    AlertRule("freeze", Severity.MODERATE, lambda i: i.temperature_c < 0),
    AlertRule("pollen", Severity.MODERATE, lambda i: i.pollen_level is PollenLevel.VERY_HIGH),
    AlertRule(
        "air_quality",
        Severity.MODERATE,
        lambda i: i.aqi > 60,
        escalation=(lambda i: i.aqi > 80, Severity.SEVERE),
    ),
)


def derive(
    inputs: AlertInputs,
    *,
    issued_at: str = DEFAULT_ISSUED_AT,
    locale: str = DEFAULT_LOCALE,
    rules: tuple[AlertRule, ...] = ALERT_RULES,
) -> list[Alert]:
    """Evaluate every rule and return the fired alerts, most severe first."""
    values = inputs.template_values()
    alerts: list[Alert] = []
    for rule in rules:
        severity = rule.evaluate(inputs)
        if severity is None:
            continue
        title, template = alert_text(rule.id, locale)
        alerts.append(
            Alert(
                id=rule.id,
                severity=severity,
                title=title,
                description=template.format(**values),
                issued_at=issued_at,
            )
        )
    return sorted(alerts, key=lambda a: a.severity.weight, reverse=True)
