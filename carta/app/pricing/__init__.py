"""Time-based discount pricing."""

from .labels import days_label, format_time_remaining, time_range_label
from .schedule import (
    NO_SCHEDULE,
    Transition,
    active_discounts,
    apply_to_items,
    base_price,
    discount_for_category,
    discounted_price,
    is_active,
    next_transition,
    scheduled_days,
)

__all__ = [
    "NO_SCHEDULE",
    "Transition",
    "active_discounts",
    "apply_to_items",
    "base_price",
    "days_label",
    "discount_for_category",
    "discounted_price",
    "format_time_remaining",
    "is_active",
    "next_transition",
    "scheduled_days",
    "time_range_label",
]
