"""Repository interface for scheduled discounts.

Discounts are stored as a whole list per restaurant: reads return the full
current list and writes replace it. There is no partial update.
"""

from abc import ABC, abstractmethod


class DiscountRepo(ABC):
    """Contract for load / replace-all discount storage."""

    @abstractmethod
    def list_discounts(self, session, restaurant_id):
        """Return all discounts for ``restaurant_id`` in saved order."""
        raise NotImplementedError

    @abstractmethod
    def replace_discounts(self, session, restaurant_id, discounts):
        """Replace every discount of ``restaurant_id`` with ``discounts``."""
        raise NotImplementedError
