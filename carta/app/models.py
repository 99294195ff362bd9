# models.py

"""Database models for restaurants, their menus and scheduled discounts."""

from __future__ import annotations

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


class Restaurant(Base):
    """A tenant. ``timezone`` is the IANA zone its schedules are read in."""

    __tablename__ = "restaurants"

    id = Column(String(36), primary_key=True, default=_uuid)
    slug = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    timezone = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Category(Base):
    """Menu item categories."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False)
    name = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)


class MenuItem(Base):
    """Individual menu items.

    ``base_price`` is the price before discounts; older rows only carry
    ``price``.
    """

    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, default=_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=True)
    base_price = Column(Numeric(10, 2), nullable=True)
    image_url = Column(String, nullable=True)
    position = Column(Integer, nullable=False, default=0)


class ScheduledDiscount(Base):
    """Recurring weekly percentage discount on one category."""

    __tablename__ = "scheduled_discounts"

    id = Column(String(36), primary_key=True, default=_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False)
    category_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    discount_percentage = Column(Numeric(5, 2), nullable=False)
    days_of_week = Column(JSON, nullable=False, default=list)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    # order of the last saved list; first match wins when categories collide
    position = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
