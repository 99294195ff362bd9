# schemas.py

"""Pydantic models for API payloads and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator

TIME_OF_DAY = r"^([01]?\d|2[0-3]):[0-5]\d$"

Weekday = Annotated[int, Field(ge=0, le=6)]


class ScheduledDiscountIn(BaseModel):
    """A recurring weekly discount on one category.

    ``days_of_week`` counts from Sunday (0) to Saturday (6). A window whose
    ``end_time`` is earlier than ``start_time`` runs past midnight.
    """

    category_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    discount_percentage: float = Field(ge=0, le=100)
    days_of_week: list[Weekday] = Field(default_factory=list)
    start_time: str = Field(pattern=TIME_OF_DAY)
    end_time: str = Field(pattern=TIME_OF_DAY)
    is_active: bool = True

    @field_validator("days_of_week")
    @classmethod
    def _unique_days(cls, value: list[int]) -> list[int]:
        return sorted(set(value))

    @field_validator("start_time", "end_time")
    @classmethod
    def _zero_pad(cls, value: str) -> str:
        hour, _, minute = value.partition(":")
        return f"{int(hour):02d}:{minute}"


class ScheduledDiscount(ScheduledDiscountIn):
    """Stored discount including its identifier."""

    id: str


class ScheduledDiscountsIn(BaseModel):
    """Replacement list for a restaurant's discounts."""

    discounts: list[ScheduledDiscountIn] = Field(default_factory=list)


class ScheduledDiscountsConfig(BaseModel):
    """A restaurant's full discount list."""

    discounts: list[ScheduledDiscount]
    updated_at: datetime


class DiscountStatus(BaseModel):
    """Countdown badge data for one discount."""

    id: str
    name: str
    category_id: str
    time_range: str
    days: str
    is_active_now: bool
    next_transition_at: Optional[datetime] = None
    millis_until: Optional[int] = None
    day_label: Optional[str] = None
    remaining: Optional[str] = None


class AppliedDiscount(BaseModel):
    """Discount details shown next to a promoted item."""

    id: Optional[str] = None
    name: Optional[str] = None
    percentage: Optional[float] = None


class MenuItemOut(BaseModel):
    """Menu item as shown to diners, with live promotional pricing."""

    id: str
    category_id: Optional[str] = None
    name: str
    price: Optional[float] = None
    base_price: Optional[float] = None
    image_url: Optional[str] = None
    is_promotion: bool = False
    promotion_price: Optional[float] = None
    scheduled_discount: Optional[AppliedDiscount] = None


class CategoryOut(BaseModel):
    """Category representation returned from the API."""

    id: str
    name: str
    position: int = 0
