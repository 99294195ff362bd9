"""Shared FastAPI dependencies."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from config import get_settings

from .db import get_session
from .models import Restaurant
from .repos_sqlalchemy import MenuRepoSQL


def get_now() -> datetime:
    """Return the request clock (overridden in tests)."""

    return datetime.now(timezone.utc)


def get_restaurant(slug: str, session: Session = Depends(get_session)) -> Restaurant:
    """Resolve the ``slug`` path parameter or raise 404."""

    restaurant = MenuRepoSQL().get_restaurant(session, slug)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant


def restaurant_timezone(restaurant: Restaurant) -> str:
    """Return the zone the restaurant's schedules are evaluated in."""

    return restaurant.timezone or get_settings().default_timezone
