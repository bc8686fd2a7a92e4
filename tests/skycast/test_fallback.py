"""Tests for the fallback snapshot."""

from __future__ import annotations

from datetime import date

from skycast.fallback import build_fallback_snapshot
from skycast.models.enums import ConditionCode, PollenLevel
from skycast.models.location import Location
from tests.conftest import LONDON

HOME = Location(display_name="London", district="Camden", coordinate=LONDON)


class TestBuildFallbackSnapshot:
    def test_shape(self) -> None:
        snapshot = build_fallback_snapshot(HOME, today=date(2024, 5, 6))
        assert len(snapshot.hourly) == 24
        assert len(snapshot.daily) == 7
        assert snapshot.alerts == ()
        assert snapshot.degraded is True

    def test_location_passthrough(self) -> None:
        assert build_fallback_snapshot(HOME).location == HOME

    def test_current_values(self) -> None:
        current = build_fallback_snapshot(HOME).current
        assert current.temperature == 18
        assert current.feels_like == 17
        assert current.condition is ConditionCode.PARTLY_CLOUDY
        assert current.description == "Partly Cloudy"

    def test_air_quality_is_unknown_default(self) -> None:
        current = build_fallback_snapshot(HOME).current
        assert current.aqi == 30
        assert current.pollen_level is PollenLevel.LOW
        assert current.pollutants.pm2_5 == 0

    def test_hourly_curve(self) -> None:
        hourly = build_fallback_snapshot(HOME).hourly
        assert [p.label for p in hourly[:3]] == ["00:00", "01:00", "02:00"]
        assert hourly[0].temperature == 15
        assert hourly[6].temperature == 20  # 15 + 5*sin(1.5)
        assert all(p.precipitation_chance == 10 for p in hourly)

    def test_daily_labels_from_today(self) -> None:
        daily = build_fallback_snapshot(HOME, today=date(2024, 5, 9)).daily
        assert [p.day_label for p in daily] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]
        assert daily[0].min_temp == 12
        assert daily[0].max_temp == 22

    def test_portuguese(self) -> None:
        snapshot = build_fallback_snapshot(HOME, locale="pt", today=date(2024, 5, 6))
        assert snapshot.current.description == "Parcialmente Nublado"
        assert snapshot.daily[0].day_label == "Seg"
