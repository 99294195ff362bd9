"""Public menu route with live scheduled-discount pricing."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config import get_settings

from .db import get_session
from .deps import get_now, get_restaurant, restaurant_timezone
from .models import Restaurant
from .pricing import apply_to_items
from .repos_sqlalchemy import DiscountRepoSQL, MenuRepoSQL
from .schemas import CategoryOut, MenuItemOut
from .utils.responses import ok

router = APIRouter()


@router.get("/api/restaurants/{slug}/menu")
def get_menu(
    restaurant: Restaurant = Depends(get_restaurant),
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
) -> dict:
    """Return categories and items priced as of ``now``."""

    repo = MenuRepoSQL()
    tz = restaurant_timezone(restaurant)
    items = repo.list_items(session, restaurant.id)
    if get_settings().scheduled_discounts_enabled:
        discounts = DiscountRepoSQL().list_discounts(session, restaurant.id)
        items = apply_to_items(items, discounts, tz, now)
    return ok(
        {
            "restaurant": {"slug": restaurant.slug, "name": restaurant.name},
            "timezone": tz,
            "categories": [
                CategoryOut(**c).model_dump()
                for c in repo.list_categories(session, restaurant.id)
            ],
            "items": [MenuItemOut.model_validate(i).model_dump(mode="json") for i in items],
        }
    )
