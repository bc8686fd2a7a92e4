"""Query parameter builder for Open-Meteo requests."""

from __future__ import annotations

from typing import Any


def format_value(value: Any) -> str:
    """Render a single query value.

    Sequences become comma-joined variable lists, which is how Open-Meteo
    expects ``current=``, ``hourly=`` and ``daily=`` selections.
    """
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Args:
        **kwargs: Parameter names mapped to plain values or sequences of
                  variable names. ``None`` values are skipped.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, format_value(value)))
    return params
