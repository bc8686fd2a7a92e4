"""Tests for air-quality normalization and pollen bucketing."""

from __future__ import annotations

import pytest

from skycast.models.enums import PollenLevel
from skycast.models.current import Pollutants
from skycast.pollutants import DEFAULT_AQI, bucket_pollen, normalize


class TestNormalizeDefaults:
    @pytest.mark.parametrize(
        "raw",
        [None, {}, {"current": None}, {"current": "n/a"}, {"error": True, "reason": "x"}, [], "garbage"],
    )
    def test_absent_or_malformed(self, raw) -> None:
        result = normalize(raw)
        assert result.aqi == 30 == DEFAULT_AQI
        assert result.pollen_level is PollenLevel.LOW
        assert result.pollutants == Pollutants(pm2_5=0, pm10=0, no2=0, o3=0, so2=0)


class TestNormalizePresent:
    def test_full_payload(self, air_quality_payload) -> None:
        result = normalize(air_quality_payload)
        assert result.aqi == 42
        assert result.pollutants.pm2_5 == 9.1
        assert result.pollutants.pm10 == 18.3
        assert result.pollutants.no2 == 21.0
        assert result.pollutants.o3 == 64.5
        assert result.pollutants.so2 == 1.7
        assert result.pollen_level is PollenLevel.HIGH

    def test_missing_fields_default_individually(self) -> None:
        result = normalize({"current": {"european_aqi": 55, "pm10": 12.0}})
        assert result.aqi == 55
        assert result.pollutants.pm10 == 12.0
        assert result.pollutants.pm2_5 == 0
        assert result.pollutants.so2 == 0
        assert result.pollen_level is PollenLevel.LOW

    def test_null_and_negative_readings_become_zero(self) -> None:
        result = normalize({"current": {"pm2_5": None, "ozone": -3.0, "nitrogen_dioxide": "bad"}})
        assert result.pollutants.pm2_5 == 0
        assert result.pollutants.o3 == 0
        assert result.pollutants.no2 == 0

    def test_missing_aqi_uses_neutral_default(self) -> None:
        result = normalize({"current": {"pm10": 3.0}})
        assert result.aqi == DEFAULT_AQI

    def test_zero_aqi_is_kept(self) -> None:
        assert normalize({"current": {"european_aqi": 0}}).aqi == 0

    def test_aqi_rounded(self) -> None:
        assert normalize({"current": {"european_aqi": 61.5}}).aqi == 62

    def test_species_max_wins(self) -> None:
        result = normalize({"current": {"grass_pollen": 60, "birch_pollen": 10}})
        assert result.pollen_level is PollenLevel.HIGH


class TestBucketPollen:
    def test_max_not_sum(self) -> None:
        assert bucket_pollen({"grass": 60, "birch": 10}) is PollenLevel.HIGH
        # Sum would be 200 (Very High); the worst species alone is High
        assert bucket_pollen({"grass": 100, "birch": 100}) is PollenLevel.HIGH

    @pytest.mark.parametrize(
        ("value", "level"),
        [
            (0, PollenLevel.LOW),
            (9.9, PollenLevel.LOW),
            (10, PollenLevel.MODERATE),
            (49.9, PollenLevel.MODERATE),
            (50, PollenLevel.HIGH),
            (199, PollenLevel.HIGH),
            (200, PollenLevel.VERY_HIGH),
            (5000, PollenLevel.VERY_HIGH),
        ],
    )
    def test_thresholds(self, value: float, level: PollenLevel) -> None:
        assert bucket_pollen({"ragweed_pollen": value}) is level

    def test_empty(self) -> None:
        assert bucket_pollen({}) is PollenLevel.LOW

    def test_nulls_ignored(self) -> None:
        assert bucket_pollen({"alder_pollen": None, "olive_pollen": 12}) is PollenLevel.MODERATE
