"""Repository interface for menu reads."""

from abc import ABC, abstractmethod


class MenuRepo(ABC):
    """Contract for the menu data scheduled pricing reads."""

    @abstractmethod
    def get_restaurant(self, session, slug):
        """Return the restaurant for ``slug`` or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def list_categories(self, session, restaurant_id):
        """Return the restaurant's categories in display order."""
        raise NotImplementedError

    @abstractmethod
    def list_items(self, session, restaurant_id):
        """Return the restaurant's menu items as plain mappings."""
        raise NotImplementedError
