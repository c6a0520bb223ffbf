"""ORM model for catalog categories."""

from sqlalchemy import Column, Integer, String

from storefront.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
