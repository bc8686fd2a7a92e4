"""Localized strings for the engine's display-ready output."""

from __future__ import annotations

from typing import Literal

Locale = Literal["en", "pt"]

DEFAULT_LOCALE: Locale = "en"

CONDITION_TEXT: dict[str, dict[str, str]] = {
    "en": {
        "sunny": "Sunny",
        "partly_cloudy": "Partly Cloudy",
        "cloudy": "Cloudy",
        "fog": "Fog",
        "drizzle": "Drizzle",
        "rain": "Rain",
        "snow": "Snow",
        "storm": "Storm",
    },
    "pt": {
        "sunny": "Ensolarado",
        "partly_cloudy": "Parcialmente Nublado",
        "cloudy": "Nublado",
        "fog": "Nevoeiro",
        "drizzle": "Garoa",
        "rain": "Chuva",
        "snow": "Neve",
        "storm": "Tempestade",
    },
}

# Monday first, matching date.weekday()
WEEKDAYS_SHORT: dict[str, tuple[str, ...]] = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "pt": ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom"),
}

ALERT_TEXT: dict[str, dict[str, tuple[str, str]]] = {
    "en": {
        "storm": ("Thunderstorm", "Thunderstorm activity reported (code {code})."),
        "snow_ice": ("Snow/Ice", "Snow or ice expected. Roads may be slippery."),
        "wind": ("High Winds", "Gusts over {wind:.0f} km/h detected."),
        "heavy_rain": ("Heavy Rain", "{precipitation:.1f} mm of precipitation in the last hour."),
        "heat": ("Extreme Heat", "Temperature at {temperature:.0f}°C. Stay hydrated."),
        "freeze": ("Freeze", "Temperature below zero ({temperature:.0f}°C)."),
        "pollen": ("Pollen", "Very high pollen concentration."),
        "air_quality": ("Poor Air Quality", "European AQI at {aqi}."),
    },
    "pt": {
        "storm": ("Tempestade", "Atividade de tempestade detectada (código {code})."),
        "snow_ice": ("Neve/Gelo", "Neve ou gelo previstos. Pistas escorregadias."),
        "wind": ("Ventos Fortes", "Rajadas acima de {wind:.0f}km/h detectadas."),
        "heavy_rain": ("Chuva Forte", "{precipitation:.1f} mm de precipitação na última hora."),
        "heat": ("Calor Extremo", "Temperatura em {temperature:.0f}°C. Mantenha-se hidratado."),
        "freeze": ("Congelamento", "Temperatura abaixo de zero ({temperature:.0f}°C)."),
        "pollen": ("Pólen", "Concentração de pólen muito alta."),
        "air_quality": ("Qualidade do Ar Ruim", "Índice europeu de qualidade do ar em {aqi}."),
    },
}

AQI_STATUS_TEXT: dict[str, dict[str, str]] = {
    "en": {"good": "Good", "fair": "Fair", "moderate": "Moderate", "poor": "Poor", "very_poor": "Very Poor"},
    "pt": {"good": "Bom", "fair": "Aceitável", "moderate": "Moderado", "poor": "Ruim", "very_poor": "Muito Ruim"},
}

POLLEN_TEXT: dict[str, dict[str, str]] = {
    "en": {"low": "Low", "moderate": "Moderate", "high": "High", "very_high": "Very High"},
    "pt": {"low": "Baixo", "moderate": "Médio", "high": "Alto", "very_high": "Crítico"},
}


def resolve_locale(tag: str | None) -> Locale:
    """Map a language tag such as ``pt-BR`` or ``en_US`` to a supported locale."""
    if not tag:
        return DEFAULT_LOCALE
    primary = tag.replace("_", "-").split("-")[0].lower()
    return "pt" if primary == "pt" else "en"


def condition_text(key: str, locale: str = DEFAULT_LOCALE) -> str:
    return CONDITION_TEXT[resolve_locale(locale)][key]


def weekday_short(weekday: int, locale: str = DEFAULT_LOCALE) -> str:
    """Abbreviated, title-cased weekday name for ``date.weekday()``."""
    return WEEKDAYS_SHORT[resolve_locale(locale)][weekday]


def alert_text(rule_id: str, locale: str = DEFAULT_LOCALE) -> tuple[str, str]:
    """Return the (title, description template) pair for an alert rule."""
    return ALERT_TEXT[resolve_locale(locale)][rule_id]
