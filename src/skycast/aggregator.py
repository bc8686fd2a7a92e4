"""Weather aggregation: concurrent upstream fetch, merge and fallback."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from skycast._http import AsyncTransport, Transport
from skycast._params import build_query_params
from skycast.alerts import DEFAULT_ISSUED_AT, AlertInputs, derive
from skycast.api_logging import log_engine_call
from skycast.conditions import classify
from skycast.config import WeatherConfig
from skycast.constants import (
    AIR_QUALITY_VARIABLES,
    CURRENT_VARIABLES,
    DAILY_VARIABLES,
    HOURLY_VARIABLES,
)
from skycast.exceptions import UpstreamValidationError
from skycast.fallback import build_fallback_snapshot
from skycast.forecast import project_daily, project_hourly, round_half_up
from skycast.models.current import CurrentConditions
from skycast.models.location import Coordinate, Location
from skycast.models.snapshot import WeatherSnapshot
from skycast.models.upstream import ForecastPayload
from skycast.pollutants import normalize

logger = logging.getLogger(__name__)


def _validate_forecast(data: dict[str, Any]) -> ForecastPayload:
    """Validate a forecast response against the payload model."""
    try:
        return ForecastPayload.model_validate(data)
    except ValidationError as exc:
        raise UpstreamValidationError(f"Failed to validate forecast response: {exc}") from exc


def _discard(task: asyncio.Task[Any]) -> None:
    """Cancel a pending task, or consume the outcome of a finished one."""
    if not task.done():
        task.cancel()
    elif not task.cancelled():
        task.exception()


class WeatherAggregator:
    """Builds a WeatherSnapshot from the forecast and air-quality providers.

    ``fetch`` never raises for upstream trouble: a failed forecast yields a
    degraded fallback snapshot, a failed air-quality call yields default
    air quality. Each call is independent and holds no shared state, so
    overlapping calls do not interfere.

    Usage:
        async with WeatherAggregator() as engine:
            snapshot = await engine.fetch(
                Coordinate(latitude=51.5074, longitude=-0.1278), "London",
            )

        # Sharing an application-wide httpx client:
        engine = WeatherAggregator(client=http_client)
    """

    def __init__(
        self,
        config: WeatherConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.config = config or WeatherConfig()
        self._transport: Transport = transport or AsyncTransport(
            client=client, timeout=self.config.timeout,
        )

    async def __aenter__(self) -> WeatherAggregator:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Upstream requests ──────────────────────────────────────

    async def fetch_forecast(self, coordinate: Coordinate) -> ForecastPayload:
        """Request and validate the forecast (primary) payload."""
        params = build_query_params(
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            current=CURRENT_VARIABLES,
            hourly=HOURLY_VARIABLES,
            daily=DAILY_VARIABLES,
            timezone="auto",
        )
        data = await self._transport.get(self.config.forecast_url, params)
        return _validate_forecast(data)

    async def fetch_air_quality(self, coordinate: Coordinate) -> dict[str, Any]:
        """Request the raw air-quality (secondary) payload."""
        params = build_query_params(
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            current=AIR_QUALITY_VARIABLES,
            timezone="auto",
        )
        return await self._transport.get(self.config.air_quality_url, params)

    # ── Public API ─────────────────────────────────────────────

    @log_engine_call
    async def fetch(
        self,
        coordinate: Coordinate,
        display_name: str,
        district: str | None = None,
    ) -> WeatherSnapshot:
        """Fetch both providers concurrently and assemble a snapshot."""
        location = Location(display_name=display_name, district=district, coordinate=coordinate)
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.config.timeout

        forecast_task = asyncio.create_task(self.fetch_forecast(coordinate))
        air_task = asyncio.create_task(self.fetch_air_quality(coordinate))
        try:
            payload = await asyncio.wait_for(forecast_task, timeout=self.config.timeout)
            grace = max(0.0, min(self.config.secondary_grace, deadline - loop.time()))
            raw_air = await self._settle_air_quality(air_task, grace)
            return self._assemble(location, payload, raw_air)
        except Exception as exc:
            logger.warning(
                "Forecast unavailable for %s (%s: %s); serving fallback snapshot",
                display_name, type(exc).__name__, exc,
            )
            return build_fallback_snapshot(location, locale=self.config.locale)
        finally:
            _discard(forecast_task)
            _discard(air_task)

    # ── Helpers ────────────────────────────────────────────────

    async def _settle_air_quality(
        self, task: asyncio.Task[dict[str, Any]], grace: float,
    ) -> dict[str, Any] | None:
        """Return the air-quality payload, or None if it failed or is late."""
        done, _ = await asyncio.wait({task}, timeout=grace)
        if not done:
            logger.warning("Air quality still pending after %.2fs; using defaults", grace)
            return None
        exc = task.exception()
        if exc is not None:
            logger.warning("Air quality unavailable (%s: %s); using defaults", type(exc).__name__, exc)
            return None
        return task.result()

    def _assemble(
        self,
        location: Location,
        payload: ForecastPayload,
        raw_air: dict[str, Any] | None,
    ) -> WeatherSnapshot:
        locale = self.config.locale
        air_quality = normalize(raw_air)
        now = payload.current
        classification = classify(now.weather_code, locale)

        current = CurrentConditions(
            temperature=round_half_up(now.temperature_2m),
            feels_like=round_half_up(now.apparent_temperature),
            humidity=now.relative_humidity_2m,
            wind_speed_kmh=round_half_up(now.wind_speed_10m),
            uv_index=max(0, round_half_up(now.uv_index or 0.0)),
            condition=classification.condition,
            description=classification.description,
            aqi=air_quality.aqi,
            pollen_level=air_quality.pollen_level,
            pollutants=air_quality.pollutants,
        )
        hourly = project_hourly(
            payload.hourly.time,
            payload.hourly.temperature_2m,
            payload.hourly.precipitation_probability,
            payload.hourly.weather_code,
        )
        daily = project_daily(
            payload.daily.time,
            payload.daily.temperature_2m_min,
            payload.daily.temperature_2m_max,
            payload.daily.precipitation_probability_max,
            payload.daily.weather_code,
            locale=locale,
        )
        alerts = derive(
            AlertInputs.from_current(now, air_quality),
            issued_at=now.time or DEFAULT_ISSUED_AT,
            locale=locale,
        )
        return WeatherSnapshot(
            location=location,
            current=current,
            hourly=hourly,
            daily=daily,
            alerts=alerts,
        )
