"""JWT login and auth dependencies (get_principal, require_admin)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.security import decode_token
from storefront.models import Role
from storefront.schemas.auth import LoginRequest, Principal, TokenPair
from storefront.services import accounts

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("", response_model=TokenPair)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenPair:
    """
    Authenticate with email and password; returns an access and a refresh token.
    Include the access token in the Authorization header as: Bearer <access_token>
    """
    return accounts.login(db, body)


def get_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Principal:
    """Dependency: require a valid Bearer access token and return the caller. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_token(credentials.credentials, expected_type="access")
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    sub = payload.get("sub")
    if not sub:
        raise _unauthorized("Invalid token payload")
    account_id = payload.get("account_id")
    return Principal(
        email=sub,
        role=payload.get("role") or Role.USER.value,
        account_id=account_id if isinstance(account_id, int) else None,
    )


def require_admin(
    principal: Annotated[Principal, Depends(get_principal)],
) -> Principal:
    """Dependency: require an authenticated caller with role 'admin'. Raises 403 otherwise."""
    if principal.role != Role.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return principal
