"""Call logging for the SkyCast transport and engine layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Awaitable, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

LOG_DIR_ENV = "SKYCAST_LOG_DIR"
LOG_FILE_NAME = "api_calls.log"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def log_file_path() -> str:
    """Resolve the API call log path, honouring ``SKYCAST_LOG_DIR``."""
    log_dir = os.environ.get(LOG_DIR_ENV) or os.path.join(os.getcwd(), "logs")
    return os.path.join(log_dir, LOG_FILE_NAME)


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use.

    An unwritable log location leaves the logger without a file handler;
    call logging never fails the call it wraps.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger("skycast.api")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        log_file = log_file_path()
        if not _has_file_handler(logger, log_file):
            try:
                os.makedirs(os.path.dirname(log_file), exist_ok=True)
                handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
            except OSError as exc:
                logging.getLogger(__name__).warning(
                    "API call log disabled, cannot open %s: %s", log_file, exc,
                )
                handler = logging.NullHandler()
            else:
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
            logger.addHandler(handler)

        _logger = logger

    return _logger


def _format_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def log_upstream_call(fn: F) -> F:
    """Decorator that logs upstream HTTP calls to the API log file."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _format_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = await fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            count = len(result) if isinstance(result, (list, dict)) else 1
            logger.info(
                "OK: %s(%s) -> %d keys (%.3fs)",
                fn.__qualname__, arg_str, count, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]


def log_engine_call(fn: F) -> F:
    """Decorator that logs engine-level operations to the API log file."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _format_args(args, kwargs)
        logger.info("ENGINE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = await fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            degraded = getattr(result, "degraded", False)
            logger.info(
                "ENGINE OK: %s -> %s (%.3fs)",
                fn.__qualname__, "fallback" if degraded else "live", elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "ENGINE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
