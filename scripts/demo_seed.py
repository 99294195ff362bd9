#!/usr/bin/env python3
"""Seed a demo restaurant with a small menu and a happy hour.

Creates the ``demo`` restaurant (``America/Santiago``), two categories, a few
items and a weekday 17:00-19:00 discount on drinks. Pass ``--reset`` to purge
the restaurant's existing rows before seeding.
"""

from __future__ import annotations

import argparse
import json

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from carta.app.db import SessionLocal, init_db
from carta.app.models import Category, MenuItem, Restaurant, ScheduledDiscount
from carta.app.repos_sqlalchemy import DiscountRepoSQL

MENU = {
    "Bebidas": [("Pisco sour", 5900), ("Limonada", 2900)],
    "Platos": [("Lomo a lo pobre", 12900), ("Pastel de choclo", 9900)],
}


def _reset(session: Session, restaurant: Restaurant) -> None:
    """Remove the restaurant's discounts, items and categories."""

    for model in (ScheduledDiscount, MenuItem, Category):
        session.execute(delete(model).where(model.restaurant_id == restaurant.id))
    session.commit()


def _seed(session: Session, restaurant: Restaurant) -> dict[str, object]:
    """Insert demo rows and return created identifiers."""

    categories: dict[str, str] = {}
    for position, (category_name, items) in enumerate(MENU.items()):
        category = Category(
            restaurant_id=restaurant.id, name=category_name, position=position
        )
        session.add(category)
        session.flush()
        categories[category_name] = category.id
        for item_position, (name, price) in enumerate(items):
            session.add(
                MenuItem(
                    restaurant_id=restaurant.id,
                    category_id=category.id,
                    name=name,
                    base_price=price,
                    position=item_position,
                )
            )
    session.commit()

    discounts = DiscountRepoSQL().replace_discounts(
        session,
        restaurant.id,
        [
            {
                "category_id": categories["Bebidas"],
                "name": "Happy Hour Bebidas",
                "discount_percentage": 30,
                "days_of_week": [1, 2, 3, 4, 5],
                "start_time": "17:00",
                "end_time": "19:00",
                "is_active": True,
            }
        ],
    )
    return {"restaurant_id": restaurant.id, "categories": categories, "discounts": discounts}


def main(slug: str, reset: bool) -> None:
    init_db()
    with SessionLocal() as session:
        restaurant = session.scalar(select(Restaurant).where(Restaurant.slug == slug))
        if restaurant is None:
            restaurant = Restaurant(slug=slug, name="Demo", timezone="America/Santiago")
            session.add(restaurant)
            session.commit()
        elif reset:
            _reset(session, restaurant)
        data = _seed(session, restaurant)
    print(json.dumps(data, indent=2, default=str))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--slug", default="demo", help="Restaurant slug")
    parser.add_argument("--reset", action="store_true", help="Purge existing rows first")
    args = parser.parse_args()
    main(args.slug, args.reset)
