"""ORM model for completed checkouts (orders)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from storefront.models.base import Base


class Checkout(Base):
    """
    A placed order. shipping_address is a text snapshot taken at checkout so
    later address edits do not rewrite order history.
    """

    __tablename__ = "checkouts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    total_price = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False, default="ordered")
    shipping_address = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
