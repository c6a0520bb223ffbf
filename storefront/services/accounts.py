"""
Account service: signup, login and profile management.

Operations receive the authenticated principal's email explicitly; nothing
here reads request-scoped state. Each write is one transaction: commit on
success, rollback on failure.
"""

import logging
import uuid
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
)
from storefront.models import RefreshToken, Role, User, UserAddress
from storefront.repositories import refresh_tokens as refresh_token_store
from storefront.repositories import users as user_store
from storefront.schemas.auth import LoginRequest, TokenPair
from storefront.schemas.user import (
    AddressRequest,
    AddressResponse,
    ProfileUpdateRequest,
    SignupRequest,
)
from storefront.services.errors import (
    ConflictError,
    InvalidCredentialsError,
    InvalidPasswordError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."
INVALID_CREDENTIALS = "Invalid email or password."
INVALID_CURRENT_PASSWORD = "Current password is incorrect."
EMAIL_TAKEN = "An account with this email already exists."

# Fields a profile update may replace; id, created_at, role and addresses are kept.
PROFILE_FIELDS = ("email", "name", "nickname")


def signup(session: Session, body: SignupRequest) -> int:
    """Create an account with a hashed password and the default role. Returns the new id."""
    now = datetime.now(UTC)
    user = User(
        email=body.email,
        password_hash=hash_password(body.password),
        name=body.name,
        nickname=body.nickname,
        role=Role.USER.value,
        created_at=now,
        updated_at=now,
    )
    try:
        user_store.save(session, user)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError(EMAIL_TAKEN) from e
    logger.info("Signup: user_id=%s", user.id)
    return user.id


def get_current_user(session: Session, principal: str) -> User:
    """Return the User for the authenticated principal's email."""
    user = user_store.find_by_email(session, principal)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def get_user(session: Session, user_id: int) -> User:
    """Return the User with this id (admin lookup)."""
    user = user_store.find_by_id(session, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def _profile_changes(
    user: User, body: ProfileUpdateRequest, now: datetime
) -> dict[str, Any]:
    """Compute the column values an update writes, without touching user."""
    changes: dict[str, Any] = {}
    for field in PROFILE_FIELDS:
        value = getattr(body, field)
        changes[field] = getattr(user, field) if value is None else value
    changes["password_hash"] = (
        hash_password(body.new_password) if body.new_password else user.password_hash
    )
    changes["updated_at"] = now
    return changes


def update_profile(session: Session, principal: str, body: ProfileUpdateRequest) -> User:
    """
    Update the caller's profile after confirming the current password.

    Raises InvalidPasswordError (nothing is written) when the current password
    is missing or wrong. An empty or missing new_password keeps the stored hash.
    """
    user = get_current_user(session, principal)
    if body.password is None or not verify_password(body.password, user.password_hash):
        logger.info("Profile update rejected: user_id=%s wrong current password", user.id)
        raise InvalidPasswordError(INVALID_CURRENT_PASSWORD)

    changes = _profile_changes(user, body, datetime.now(UTC))
    for field, value in changes.items():
        setattr(user, field, value)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError(EMAIL_TAKEN) from e
    session.refresh(user)
    logger.info(
        "Profile updated: user_id=%s password_changed=%s",
        user.id,
        bool(body.new_password),
    )
    return user


def delete_user(session: Session, principal: str) -> None:
    """Delete the caller's account and its addresses. Issued refresh tokens are kept."""
    user = get_current_user(session, principal)
    user_id = user.id
    user_store.delete(session, user)
    session.commit()
    logger.info("User deleted: user_id=%s", user_id)


@lru_cache
def _dummy_password_hash() -> str:
    """Hash checked for unknown emails so they cost the same bcrypt round as a wrong password."""
    return hash_password(uuid.uuid4().hex)


def login(session: Session, body: LoginRequest) -> TokenPair:
    """
    Verify credentials and issue an access and a refresh token.

    Unknown email and wrong password fail identically. The refresh token is
    persisted (token, email, jti, expiry) before the pair is returned.
    """
    user = user_store.find_by_email(session, body.email)
    password_hash = user.password_hash if user is not None else _dummy_password_hash()
    if not verify_password(body.password, password_hash) or user is None:
        logger.warning("Login failed: email=%s", body.email)
        raise InvalidCredentialsError(INVALID_CREDENTIALS)

    claims = {"account_id": user.id, "role": user.role}
    subject = user.email
    access = create_access_token(subject, user.role, claims)
    refresh = create_refresh_token(subject, user.role, claims)

    refresh_token_store.save(
        session,
        RefreshToken(
            refresh_token=refresh.token,
            email=subject,
            jti=refresh.jti,
            expires_at=refresh.expires_at,
        ),
    )
    session.commit()
    logger.info("Login: user_id=%s refresh_jti=%s", user.id, refresh.jti)
    return TokenPair(access_token=access.token, refresh_token=refresh.token)


def get_user_addresses(session: Session, email: str) -> list[AddressResponse]:
    """Return the user's addresses in stored order."""
    user = user_store.find_by_email(session, email)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return [AddressResponse.model_validate(a) for a in user.addresses]


def add_address(session: Session, principal: str, body: AddressRequest) -> AddressResponse:
    """Append an address to the caller's address book."""
    user = get_current_user(session, principal)
    address = UserAddress(**body.model_dump())
    user.addresses.append(address)
    session.commit()
    session.refresh(address)
    return AddressResponse.model_validate(address)
