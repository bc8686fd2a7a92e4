"""Custom exceptions for the SkyCast weather engine."""

from __future__ import annotations


class SkyCastError(Exception):
    """Base exception for all SkyCast engine errors."""


class UpstreamConnectionError(SkyCastError):
    """Raised when an upstream provider cannot be reached."""


class UpstreamTimeoutError(SkyCastError):
    """Raised when a request to an upstream provider times out."""


class UpstreamAPIError(SkyCastError):
    """Raised when an upstream provider returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class UpstreamValidationError(SkyCastError):
    """Raised when an upstream response body fails decoding or validation."""
