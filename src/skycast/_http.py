"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from skycast.api_logging import log_upstream_call
from skycast.exceptions import (
    UpstreamAPIError,
    UpstreamConnectionError,
    UpstreamTimeoutError,
    UpstreamValidationError,
)

DEFAULT_TIMEOUT = 8.0


@runtime_checkable
class Transport(Protocol):
    """What the aggregator needs from a transport."""

    async def get(self, url: str, params: list[tuple[str, str]]) -> dict[str, Any]: ...

    async def close(self) -> None: ...


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed JSON object."""
    if response.status_code >= 400:
        raise UpstreamAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise UpstreamValidationError(f"Invalid JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise UpstreamValidationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    The client handle is either passed in by the owner of the process-wide
    connection pool or created here. Only a client created here is closed by
    :meth:`close`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @log_upstream_call
    async def get(self, url: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise UpstreamConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise UpstreamConnectionError(f"{type(exc).__name__}: {exc}") from exc
        return _handle_response(response)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
