"""SQLAlchemy declarative Base shared by the storefront models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
