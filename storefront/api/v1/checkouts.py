"""Checkout history endpoint for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.v1.auth import get_principal
from storefront.core.database import get_db
from storefront.schemas.auth import Principal
from storefront.schemas.checkout import CheckoutListResponse, CheckoutResponse
from storefront.services.checkouts import list_checkouts_for_user

router = APIRouter()


@router.get("", response_model=CheckoutListResponse)
def list_my_checkouts(
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> CheckoutListResponse:
    checkouts = list_checkouts_for_user(db, principal.email)
    return CheckoutListResponse(
        checkouts=[CheckoutResponse.model_validate(c) for c in checkouts]
    )
