"""SQLAlchemy-backed repository implementations."""

from .discount_repo_sql import DiscountRepoSQL
from .menu_repo_sql import MenuRepoSQL

__all__ = ["DiscountRepoSQL", "MenuRepoSQL"]
