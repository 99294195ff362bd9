"""SQLAlchemy implementation of the menu repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Category, MenuItem, Restaurant
from ..repos.menu_repo import MenuRepo


def _money(value) -> float | None:
    return float(value) if value is not None else None


class MenuRepoSQL(MenuRepo):
    """Concrete MenuRepo using a synchronous SQLAlchemy session."""

    def get_restaurant(self, session: Session, slug: str) -> Restaurant | None:
        return session.scalar(select(Restaurant).where(Restaurant.slug == slug))

    def list_categories(self, session: Session, restaurant_id: str) -> list[dict]:
        """Return categories ordered by position."""
        result = session.scalars(
            select(Category)
            .where(Category.restaurant_id == restaurant_id)
            .order_by(Category.position, Category.name)
        )
        return [
            {"id": c.id, "name": c.name, "position": c.position} for c in result.all()
        ]

    def list_items(self, session: Session, restaurant_id: str) -> list[dict]:
        """Return menu items with prices as floats."""
        result = session.scalars(
            select(MenuItem)
            .where(MenuItem.restaurant_id == restaurant_id)
            .order_by(MenuItem.position, MenuItem.name)
        )
        return [
            {
                "id": item.id,
                "category_id": item.category_id,
                "name": item.name,
                "price": _money(item.price),
                "base_price": _money(item.base_price),
                "image_url": item.image_url,
            }
            for item in result.all()
        ]
