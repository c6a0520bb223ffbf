"""Request/response schemas for authentication and token issuance."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class IssuedToken(BaseModel):
    """Signed JWT plus the identifier and expiry it was minted with."""

    token: str = Field(..., description="Signed JWT")
    jti: str = Field(..., description="Unique token identifier")
    expires_at: datetime = Field(..., description="Expiry (UTC)")
    token_type: Literal["access", "refresh"]


class TokenPair(BaseModel):
    """Access and refresh tokens returned after a successful login."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(default="bearer", description="Token type")


class Principal(BaseModel):
    """Authenticated caller, taken from a verified access token."""

    email: str
    role: str
    account_id: int | None = None
