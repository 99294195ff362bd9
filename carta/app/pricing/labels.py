"""Display strings for scheduled discounts and their countdowns."""

from __future__ import annotations

from typing import Any, Mapping

from ..i18n import get_catalog
from .schedule import scheduled_days


def time_range_label(discount: Mapping[str, Any]) -> str:
    """Return ``"17:00 - 19:00"`` style text for the discount window."""

    return f"{discount.get('start_time')} - {discount.get('end_time')}"


def days_label(discount: Mapping[str, Any], lang: str = "en") -> str:
    """Return the scheduled days as short names, e.g. ``"Mon, Wed, Fri"``."""

    catalog = get_catalog(lang)
    days = sorted(scheduled_days(discount.get("days_of_week")))
    if len(days) == 7:
        return catalog["labels"]["every_day"]
    if not days:
        return catalog["labels"]["no_days"]
    return ", ".join(catalog["days_short"][d] for d in days)


def format_time_remaining(millis: int | None, lang: str = "en") -> str | None:
    """Format a countdown such as ``"2h 30m"``, ``"45m"`` or ``"3 days"``."""

    if millis is None:
        return None
    labels = get_catalog(lang)["labels"]
    if millis <= 0:
        return labels["now"]

    minutes = millis // 60_000
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        remaining_hours = hours % 24
        if remaining_hours:
            return f"{days}d {remaining_hours}h"
        return f"{days} {labels['day'] if days == 1 else labels['days']}"
    if hours > 0:
        remaining_minutes = minutes % 60
        return f"{hours}h {remaining_minutes}m" if remaining_minutes else f"{hours}h"
    if minutes > 0:
        return f"{minutes}m"
    return labels["less_than_minute"]
