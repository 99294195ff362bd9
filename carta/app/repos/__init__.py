from .discount_repo import DiscountRepo
from .menu_repo import MenuRepo

__all__ = ["DiscountRepo", "MenuRepo"]
