"""Scheduled discount configuration and countdown routes.

Discounts are read and written as a whole list per restaurant. The status
endpoint feeds the admin "active now" / "starts in 2h 30m" badges; clients
poll it every ``refresh_after_secs`` seconds.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from config import get_settings

from .db import get_session
from .deps import get_now, get_restaurant, restaurant_timezone
from .i18n import select_language
from .models import Restaurant
from .pricing import days_label, format_time_remaining, next_transition, time_range_label
from .repos_sqlalchemy import DiscountRepoSQL
from .schemas import DiscountStatus, ScheduledDiscountsConfig, ScheduledDiscountsIn
from .utils.responses import ok

router = APIRouter()
logger = logging.getLogger("carta")


def _config(discounts: list[dict], now: datetime) -> dict:
    config = ScheduledDiscountsConfig(discounts=discounts, updated_at=now)
    return config.model_dump(mode="json")


@router.get("/api/restaurants/{slug}/scheduled-discounts")
def list_scheduled_discounts(
    restaurant: Restaurant = Depends(get_restaurant),
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
) -> dict:
    """Return the restaurant's scheduled discounts."""

    discounts = DiscountRepoSQL().list_discounts(session, restaurant.id)
    return ok(_config(discounts, now))


@router.post("/api/restaurants/{slug}/scheduled-discounts")
def replace_scheduled_discounts(
    payload: ScheduledDiscountsIn,
    restaurant: Restaurant = Depends(get_restaurant),
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
) -> dict:
    """Replace every scheduled discount of the restaurant with ``payload``."""

    stored = DiscountRepoSQL().replace_discounts(
        session, restaurant.id, [d.model_dump() for d in payload.discounts]
    )
    logger.info("scheduled discounts replaced: %d", len(stored))
    return ok(_config(stored, now))


@router.get("/api/restaurants/{slug}/scheduled-discounts/status")
def scheduled_discounts_status(
    restaurant: Restaurant = Depends(get_restaurant),
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
    accept_language: str | None = Header(default=None),
) -> dict:
    """Return whether each discount is live and how long until it flips."""

    lang = select_language(accept_language)
    tz = restaurant_timezone(restaurant)
    statuses = []
    for discount in DiscountRepoSQL().list_discounts(session, restaurant.id):
        transition = next_transition(discount, tz, now, lang=lang)
        status = DiscountStatus(
            id=discount["id"],
            name=discount["name"],
            category_id=discount["category_id"],
            time_range=time_range_label(discount),
            days=days_label(discount, lang),
            is_active_now=transition.is_active_now,
            next_transition_at=transition.next_transition_at,
            millis_until=transition.millis_until,
            day_label=transition.day_label,
            remaining=format_time_remaining(transition.millis_until, lang),
        )
        statuses.append(status.model_dump(mode="json"))
    return ok(
        {
            "timezone": tz,
            "refresh_after_secs": get_settings().countdown_refresh_secs,
            "discounts": statuses,
        }
    )
