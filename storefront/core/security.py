"""Password hashing and JWT issuance/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

import bcrypt
import jwt

from storefront.core.config import settings
from storefront.schemas.auth import IssuedToken

TokenType = Literal["access", "refresh"]

# Claims set by the issuer; caller-supplied claims may not override them.
RESERVED_CLAIMS = frozenset({"sub", "role", "jti", "type", "iat", "exp"})


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(
        pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    ).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _issue_token(
    token_type: TokenType,
    subject: str,
    role: str,
    claims: dict[str, Any] | None,
    lifetime: timedelta,
) -> IssuedToken:
    now = datetime.now(UTC)
    expires_at = now + lifetime
    jti = uuid.uuid4().hex
    payload: dict[str, Any] = {
        k: v for k, v in (claims or {}).items() if k not in RESERVED_CLAIMS
    }
    payload.update(
        {
            "sub": str(subject),
            "role": role,
            "jti": jti,
            "type": token_type,
            "iat": now,
            "exp": expires_at,
        }
    )
    token = jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )
    return IssuedToken(
        token=token, jti=jti, expires_at=expires_at, token_type=token_type
    )


def create_access_token(
    subject: str, role: str, claims: dict[str, Any] | None = None
) -> IssuedToken:
    """Create a short-lived JWT access token (bearer credential)."""
    return _issue_token(
        "access",
        subject,
        role,
        claims,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(
    subject: str, role: str, claims: dict[str, Any] | None = None
) -> IssuedToken:
    """Create a long-lived JWT refresh token; its jti is what gets persisted."""
    return _issue_token(
        "refresh",
        subject,
        role,
        claims,
        timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
    )


def decode_token(token: str, expected_type: TokenType = "access") -> dict[str, Any]:
    """
    Decode and validate a JWT; return its payload.

    Raises jwt.PyJWTError on invalid or expired tokens, and
    jwt.InvalidTokenError when the token is not of expected_type.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp", "jti"]},
    )
    if payload.get("type") != expected_type:
        raise jwt.InvalidTokenError(f"Expected a {expected_type} token")
    return payload
