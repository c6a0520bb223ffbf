"""SQLAlchemy ORM models."""

from storefront.models.base import Base
from storefront.models.category import Category
from storefront.models.checkout import Checkout
from storefront.models.refresh_token import RefreshToken
from storefront.models.user import Role, User, UserAddress

__all__ = [
    "Base",
    "Category",
    "Checkout",
    "RefreshToken",
    "Role",
    "User",
    "UserAddress",
]
