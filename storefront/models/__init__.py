"""SQLAlchemy ORM models."""

from storefront.models.base import Base
from storefront.models.product import PRODUCT_CATEGORIES, Product
from storefront.models.user import USER_ROLES, User

__all__ = ["Base", "PRODUCT_CATEGORIES", "Product", "USER_ROLES", "User"]
