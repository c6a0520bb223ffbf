"""ORM models for user accounts and their addresses."""

import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from storefront.models.base import Base


class Role(str, enum.Enum):
    """Authorization role embedded in issued tokens."""

    USER = "user"
    ADMIN = "admin"


class User(Base):
    """
    Customer or staff account used for login and token issuance.

    password_hash always holds a bcrypt hash, never the plain password.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    nickname = Column(String(100), nullable=False)
    role = Column(String(32), nullable=False, default=Role.USER.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    addresses = relationship(
        "UserAddress",
        back_populates="user",
        order_by="UserAddress.id",
        cascade="all, delete-orphan",
    )


class UserAddress(Base):
    """Shipping address owned by a single user; removed with its owner."""

    __tablename__ = "user_addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipient_name = Column(String(100), nullable=False)
    phone_number = Column(String(32), nullable=False)
    postal_code = Column(String(16), nullable=False)
    address_line1 = Column(String(255), nullable=False)
    address_line2 = Column(String(255), nullable=True)

    user = relationship("User", back_populates="addresses")
