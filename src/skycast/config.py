"""Engine configuration."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skycast._http import DEFAULT_TIMEOUT
from skycast.constants import AIR_QUALITY_URL, FORECAST_URL
from skycast.i18n import DEFAULT_LOCALE, resolve_locale

DEFAULT_SECONDARY_GRACE = 1.0


class WeatherConfig(BaseSettings):
    """Settings for one WeatherAggregator.

    Every field can be set from a ``SKYCAST_*`` environment variable;
    keyword arguments take precedence.

    Usage:
        WeatherConfig()  # Open-Meteo endpoints, 8s timeout, English

        WeatherConfig(timeout=5.0, locale="pt-BR")

        WeatherConfig.from_env()  # SKYCAST_TIMEOUT=5 SKYCAST_LOCALE=pt ...
    """

    forecast_url: str = FORECAST_URL
    air_quality_url: str = AIR_QUALITY_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    secondary_grace: float = Field(default=DEFAULT_SECONDARY_GRACE, ge=0)
    locale: str = DEFAULT_LOCALE

    model_config = SettingsConfigDict(
        env_prefix="SKYCAST_",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("locale")
    @classmethod
    def _resolve_locale(cls, value: str) -> str:
        return resolve_locale(value)

    @classmethod
    def from_env(cls) -> WeatherConfig:
        """Build a config from ``SKYCAST_*`` variables, defaulting the rest."""
        return cls()
