"""Checkout history lookups for the authenticated user."""

from sqlalchemy.orm import Session

from storefront.models import Checkout
from storefront.services.accounts import get_current_user


def list_checkouts_for_user(session: Session, principal: str) -> list[Checkout]:
    """Return the caller's checkouts, oldest first. Raises NotFoundError for unknown principals."""
    user = get_current_user(session, principal)
    return (
        session.query(Checkout)
        .filter(Checkout.user_id == user.id)
        .order_by(Checkout.id)
        .all()
    )
