"""Simple i18n helpers for schedule and countdown strings."""

from __future__ import annotations

from typing import Dict, List, Union

Catalog = Dict[str, Union[List[str], Dict[str, str]]]

# Day lists are Sunday-first to line up with ``days_of_week`` indexes.
CATALOG: Dict[str, Catalog] = {
    "en": {
        "days": [
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
        ],
        "days_short": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "labels": {
            "now": "Now",
            "today": "Today",
            "active_now": "Active now",
            "every_day": "Every day",
            "no_days": "No days",
            "less_than_minute": "Less than 1m",
            "day": "day",
            "days": "days",
        },
    },
    "es": {
        "days": [
            "Domingo",
            "Lunes",
            "Martes",
            "Miércoles",
            "Jueves",
            "Viernes",
            "Sábado",
        ],
        "days_short": ["Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb"],
        "labels": {
            "now": "Ahora",
            "today": "Hoy",
            "active_now": "Activo ahora",
            "every_day": "Todos los días",
            "no_days": "Ningún día",
            "less_than_minute": "Menos de 1m",
            "day": "día",
            "days": "días",
        },
    },
}


def select_language(accept_language: str | None) -> str:
    """Pick the best supported language from the header."""

    if not accept_language:
        return "en"
    lang = accept_language.split(",")[0].split(";")[0].split("-")[0].strip().lower()
    return lang if lang in CATALOG else "en"


def get_catalog(lang: str) -> Catalog:
    """Return catalog for ``lang`` with English fallback."""

    return CATALOG.get(lang, CATALOG["en"])
