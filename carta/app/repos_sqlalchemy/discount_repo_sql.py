"""SQLAlchemy implementation of scheduled discount storage."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models import ScheduledDiscount
from ..repos.discount_repo import DiscountRepo


def _to_dict(row: ScheduledDiscount) -> dict:
    return {
        "id": row.id,
        "category_id": row.category_id,
        "name": row.name,
        "discount_percentage": float(row.discount_percentage),
        "days_of_week": list(row.days_of_week or []),
        "start_time": row.start_time,
        "end_time": row.end_time,
        "is_active": row.is_active,
    }


class DiscountRepoSQL(DiscountRepo):
    """Concrete DiscountRepo; each restaurant's list is replaced as a whole."""

    def list_discounts(self, session: Session, restaurant_id: str) -> list[dict]:
        result = session.scalars(
            select(ScheduledDiscount)
            .where(ScheduledDiscount.restaurant_id == restaurant_id)
            .order_by(ScheduledDiscount.position)
        )
        return [_to_dict(row) for row in result.all()]

    def replace_discounts(
        self,
        session: Session,
        restaurant_id: str,
        discounts: Sequence[Mapping[str, Any]],
    ) -> list[dict]:
        """Delete the stored list and insert ``discounts`` in one commit."""
        session.execute(
            delete(ScheduledDiscount).where(
                ScheduledDiscount.restaurant_id == restaurant_id
            )
        )
        rows = [
            ScheduledDiscount(
                restaurant_id=restaurant_id,
                category_id=d["category_id"],
                name=d["name"],
                discount_percentage=d["discount_percentage"],
                days_of_week=list(d.get("days_of_week") or []),
                start_time=d["start_time"],
                end_time=d["end_time"],
                is_active=d.get("is_active", True) is not False,
                position=position,
            )
            for position, d in enumerate(discounts)
        ]
        session.add_all(rows)
        session.commit()
        return [_to_dict(row) for row in rows]
