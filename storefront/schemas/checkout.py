"""Pydantic schemas for checkout (order) listings."""

from datetime import datetime

from pydantic import BaseModel


class CheckoutResponse(BaseModel):
    """One placed order belonging to the caller."""

    id: int
    total_price: int
    status: str
    shipping_address: str
    created_at: datetime

    class Config:
        from_attributes = True


class CheckoutListResponse(BaseModel):
    checkouts: list[CheckoutResponse]
