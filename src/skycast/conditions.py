"""WMO weather code classification."""

from __future__ import annotations

from typing import NamedTuple

from skycast.i18n import DEFAULT_LOCALE, condition_text
from skycast.models.enums import ConditionCode


class Classification(NamedTuple):
    condition: ConditionCode
    description: str


# code -> (condition, description key)
_WMO_CODES: dict[int, tuple[ConditionCode, str]] = {
    0: (ConditionCode.SUNNY, "sunny"),
    1: (ConditionCode.SUNNY, "sunny"),
    2: (ConditionCode.PARTLY_CLOUDY, "partly_cloudy"),
    3: (ConditionCode.CLOUDY, "cloudy"),
    **{c: (ConditionCode.CLOUDY, "fog") for c in (45, 48)},
    **{c: (ConditionCode.RAIN, "drizzle") for c in (51, 53, 55, 56, 57)},
    **{c: (ConditionCode.RAIN, "rain") for c in (61, 63, 65, 66, 67)},
    **{c: (ConditionCode.SNOW, "snow") for c in (71, 73, 75, 77)},
    **{c: (ConditionCode.RAIN, "rain") for c in (80, 81, 82)},
    **{c: (ConditionCode.SNOW, "snow") for c in (85, 86)},
    **{c: (ConditionCode.STORM, "storm") for c in (95, 96, 99)},
}

_DEFAULT = (ConditionCode.SUNNY, "sunny")

STORM_CODES = frozenset(c for c, (cond, _) in _WMO_CODES.items() if cond is ConditionCode.STORM)

# Snow plus freezing drizzle / freezing rain
SNOW_ICE_CODES = frozenset(
    {c for c, (cond, _) in _WMO_CODES.items() if cond is ConditionCode.SNOW} | {56, 57, 66, 67}
)


def classify(code: int | None, locale: str = DEFAULT_LOCALE) -> Classification:
    """Map a WMO weather code to a condition and a localized description.

    Total over the integers: unrecognized codes (and a missing code) map to
    Sunny.
    """
    condition, key = _WMO_CODES.get(code, _DEFAULT) if code is not None else _DEFAULT
    return Classification(condition, condition_text(key, locale))
