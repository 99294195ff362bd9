"""Evaluate recurring weekly discount windows.

A scheduled discount is a plain mapping with ``days_of_week`` (0=Sunday),
``start_time``/``end_time`` (``HH:MM``) and ``discount_percentage``. Times are
wall-clock times in the restaurant's IANA timezone; a window whose end is
earlier than its start runs past midnight and belongs to the day it starts on.

Nothing in this module raises for malformed discount data. A discount with an
unparseable schedule or an unknown timezone is treated as inactive.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any
from zoneinfo import ZoneInfo

from ..i18n import get_catalog

logger = logging.getLogger("carta.pricing")

UTC = dt_timezone.utc
CENT = Decimal("0.01")
HUNDRED = Decimal("100")

# ZoneInfoNotFoundError subclasses KeyError; directory or over-long names raise OSError.
_SCHEDULE_ERRORS = (KeyError, TypeError, ValueError, OverflowError, OSError)


@dataclass(frozen=True)
class Transition:
    """Countdown to the next time a discount switches on or off."""

    is_active_now: bool
    next_transition_at: datetime | None = None
    millis_until: int | None = None
    day_label: str | None = None


NO_SCHEDULE = Transition(is_active_now=False)


@dataclass(frozen=True)
class _Window:
    days: frozenset[int]
    start: int
    end: int

    @property
    def crosses_midnight(self) -> bool:
        return self.end < self.start

    def contains(self, weekday: int, minute: int) -> bool:
        if not self.crosses_midnight:
            return weekday in self.days and self.start <= minute <= self.end
        if minute >= self.start:
            return weekday in self.days
        if minute <= self.end:
            # after midnight: the window opened yesterday
            return (weekday - 1) % 7 in self.days
        return False


def _to_minutes(value: object) -> int:
    """Convert ``HH:MM`` strings to minutes since midnight."""

    hour, sep, minute = str(value).strip().partition(":")
    if (
        not sep
        or not (hour.isdigit() and len(hour) <= 2)
        or not (minute.isdigit() and len(minute) == 2)
    ):
        raise ValueError(f"Invalid time of day: {value!r}")
    h, m = int(hour), int(minute)
    if h > 23 or m > 59:
        raise ValueError(f"Invalid time of day: {value!r}")
    return h * 60 + m


def scheduled_days(raw: object) -> frozenset[int]:
    """Return the valid weekday indexes (0=Sunday) in ``raw`` as a set."""

    if not isinstance(raw, Iterable) or isinstance(raw, (str, bytes)):
        return frozenset()
    return frozenset(
        d for d in raw if isinstance(d, int) and not isinstance(d, bool) and 0 <= d <= 6
    )


def _window(discount: Mapping[str, Any]) -> _Window:
    return _Window(
        days=scheduled_days(discount.get("days_of_week")),
        start=_to_minutes(discount.get("start_time")),
        end=_to_minutes(discount.get("end_time")),
    )


def _instant(now: datetime | None) -> datetime:
    """Return ``now`` as an aware datetime; naive values are taken as UTC."""

    if now is None:
        return datetime.now(UTC)
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now


def _weekday(local: datetime) -> int:
    # Python counts from Monday, schedules count from Sunday.
    return (local.weekday() + 1) % 7


def _minute_of_day(local: datetime) -> int:
    return local.hour * 60 + local.minute


def _at(day: date, minutes: int, zone: Any) -> datetime:
    return datetime.combine(day, time(minutes // 60, minutes % 60), tzinfo=zone)


def _enabled(discount: object) -> bool:
    return isinstance(discount, Mapping) and bool(discount.get("is_active"))


def is_active(
    discount: Mapping[str, Any],
    timezone: str,
    now: datetime | None = None,
) -> bool:
    """Return whether ``discount`` applies at ``now`` in ``timezone``.

    Both ends of the window are inclusive at minute resolution. Malformed
    schedules and unknown timezones are logged and reported as inactive.
    """

    if not _enabled(discount):
        return False
    try:
        window = _window(discount)
        local = _instant(now).astimezone(ZoneInfo(timezone))
    except _SCHEDULE_ERRORS as exc:
        logger.warning("scheduled discount %s treated as inactive: %s", discount.get("id"), exc)
        return False
    return window.contains(_weekday(local), _minute_of_day(local))


def active_discounts(
    discounts: Iterable[Mapping[str, Any]],
    timezone: str,
    now: datetime | None = None,
) -> list[Mapping[str, Any]]:
    """Return the discounts active at ``now``, preserving input order."""

    instant = _instant(now)
    return [d for d in discounts if is_active(d, timezone, instant)]


def discount_for_category(
    discounts: Iterable[Mapping[str, Any]],
    category_id: object,
    timezone: str,
    now: datetime | None = None,
) -> Mapping[str, Any] | None:
    """Return the first active discount targeting ``category_id``."""

    for discount in active_discounts(discounts, timezone, now):
        if _same_category(discount.get("category_id"), category_id):
            return discount
    return None


def _number(value: object) -> Decimal | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    number = Decimal(str(value))
    return number if number.is_finite() else None


def base_price(item: Mapping[str, Any]) -> Decimal:
    """Return the item's price before discounts.

    ``base_price`` wins over the legacy ``price`` field; items with neither
    are priced at zero.
    """

    if not isinstance(item, Mapping):
        return Decimal("0")
    for key in ("base_price", "price"):
        price = _number(item.get(key))
        if price is not None:
            return price
    return Decimal("0")


def _percentage_or_none(discount: Mapping[str, Any]) -> Decimal | None:
    """Return ``discount_percentage`` clamped to ``[0, 100]``, or ``None`` if unusable."""

    raw = discount.get("discount_percentage")
    pct = _number(raw)
    if pct is None:
        if isinstance(raw, bool) or not isinstance(raw, str):
            return None
        try:
            pct = Decimal(raw.strip())
        except InvalidOperation:
            return None
        if not pct.is_finite():
            return None
    return min(max(pct, Decimal("0")), HUNDRED)


def discounted_price(item: Mapping[str, Any], discount: Mapping[str, Any]) -> Decimal:
    """Return ``item``'s price after ``discount``, rounded half-up to the cent.

    An unusable percentage counts as 0%, so the base price is returned.
    """

    pct = _percentage_or_none(discount) if isinstance(discount, Mapping) else None
    if pct is None:
        pct = Decimal("0")
    price = base_price(item) * (HUNDRED - pct) / HUNDRED
    return max(price, Decimal("0")).quantize(CENT, rounding=ROUND_HALF_UP)


def _same_category(a: object, b: object) -> bool:
    return a is not None and b is not None and str(a) == str(b)


def apply_to_items(
    items: Sequence[Mapping[str, Any]],
    discounts: Iterable[Mapping[str, Any]],
    timezone: str,
    now: datetime | None = None,
) -> list[Mapping[str, Any]]:
    """Attach live promotional pricing to ``items``.

    Each item takes the first active discount, in input order, whose
    ``category_id`` matches its own. Matched items come back as new dicts with
    ``is_promotion``, ``promotion_price`` and ``scheduled_discount`` set;
    unmatched items are returned as-is. Discounts with an unusable percentage
    are skipped.
    """

    usable: list[Mapping[str, Any]] = []
    for discount in active_discounts(discounts, timezone, now):
        if _percentage_or_none(discount) is None:
            logger.warning(
                "scheduled discount %s skipped: invalid percentage %r",
                discount.get("id"),
                discount.get("discount_percentage"),
            )
            continue
        usable.append(discount)

    result: list[Mapping[str, Any]] = []
    for item in items:
        match = next(
            (d for d in usable if _same_category(d.get("category_id"), item.get("category_id"))),
            None,
        )
        if match is None:
            result.append(item)
            continue
        result.append(
            {
                **item,
                "is_promotion": True,
                "promotion_price": discounted_price(item, match),
                "scheduled_discount": {
                    "id": match.get("id"),
                    "name": match.get("name"),
                    "percentage": match.get("discount_percentage"),
                },
            }
        )
    return result


def _transition(active: bool, at: datetime, instant: datetime, label: str) -> Transition:
    # Subtract in UTC; aware datetimes sharing a tzinfo subtract as wall clock.
    delta = at.astimezone(UTC) - instant.astimezone(UTC)
    millis = max(0, delta // timedelta(milliseconds=1))
    return Transition(
        is_active_now=active,
        next_transition_at=at,
        millis_until=millis,
        day_label=label,
    )


def next_transition(
    discount: Mapping[str, Any],
    timezone: str,
    now: datetime | None = None,
    *,
    lang: str = "en",
) -> Transition:
    """Return when ``discount`` next switches state, as seen from ``now``.

    While active this is the end of the current window. Otherwise it is the
    next window start: later today if today is scheduled and the window has
    not opened yet, else the first scheduled day within the coming week.
    Disabled or malformed discounts yield :data:`NO_SCHEDULE`.
    """

    if not _enabled(discount):
        return NO_SCHEDULE
    try:
        window = _window(discount)
        instant = _instant(now)
        local = instant.astimezone(ZoneInfo(timezone))
    except _SCHEDULE_ERRORS as exc:
        logger.warning("scheduled discount %s has no schedule: %s", discount.get("id"), exc)
        return NO_SCHEDULE
    if not window.days:
        return NO_SCHEDULE

    catalog = get_catalog(lang)
    labels = catalog["labels"]
    zone = local.tzinfo
    today = local.date()
    weekday = _weekday(local)
    minute = _minute_of_day(local)

    if window.contains(weekday, minute):
        end_day = today
        if window.crosses_midnight and minute >= window.start:
            end_day = today + timedelta(days=1)
        return _transition(True, _at(end_day, window.end, zone), instant, labels["active_now"])

    if weekday in window.days and minute < window.start:
        return _transition(False, _at(today, window.start, zone), instant, labels["today"])

    for offset in range(1, 8):
        day_index = (weekday + offset) % 7
        if day_index in window.days:
            start = _at(today + timedelta(days=offset), window.start, zone)
            return _transition(False, start, instant, catalog["days"][day_index])
    return NO_SCHEDULE


__all__ = [
    "NO_SCHEDULE",
    "Transition",
    "active_discounts",
    "apply_to_items",
    "base_price",
    "discount_for_category",
    "discounted_price",
    "is_active",
    "next_transition",
    "scheduled_days",
]
