"""Account endpoints: signup, profile, deletion and addresses."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api.v1.auth import get_principal, require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import Principal
from storefront.schemas.user import (
    AddressRequest,
    AddressResponse,
    ProfileUpdateRequest,
    SignupRequest,
    SignupResponse,
    UserResponse,
)
from storefront.services import accounts

router = APIRouter()


@router.post("", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SignupResponse:
    """Create an account. Returns 409 if the email is already registered."""
    return SignupResponse(id=accounts.signup(db, body))


@router.get("/me", response_model=UserResponse)
def get_me(
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    user = accounts.get_current_user(db, principal.email)
    return UserResponse.model_validate(user)


@router.patch("/me", response_model=UserResponse)
def update_me(
    body: ProfileUpdateRequest,
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Update profile fields. The current password must be sent as `password`;
    `new_password` changes it when non-empty.
    """
    user = accounts.update_profile(db, principal.email, body)
    return UserResponse.model_validate(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    accounts.delete_user(db, principal.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me/addresses", response_model=list[AddressResponse])
def list_my_addresses(
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> list[AddressResponse]:
    return accounts.get_user_addresses(db, principal.email)


@router.post(
    "/me/addresses",
    response_model=AddressResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_my_address(
    body: AddressRequest,
    principal: Annotated[Principal, Depends(get_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> AddressResponse:
    return accounts.add_address(db, principal.email, body)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Look up any account by id (admin only)."""
    return UserResponse.model_validate(accounts.get_user(db, user_id))
