"""Request/response schemas for account and address endpoints."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

PASSWORD_MAX_LENGTH = 128
NAME_MAX_LENGTH = 100


class SignupRequest(BaseModel):
    """New account details. The password is hashed before storage."""

    email: EmailStr = Field(..., description="Login email (unique)")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    nickname: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class SignupResponse(BaseModel):
    id: int


class ProfileUpdateRequest(BaseModel):
    """
    Profile changes. password is the current password and must match;
    new_password replaces it only when non-empty. Omitted fields keep
    their stored values.
    """

    password: str | None = Field(
        default=None, max_length=PASSWORD_MAX_LENGTH, description="Current password"
    )
    new_password: str | None = Field(default=None, max_length=PASSWORD_MAX_LENGTH)
    email: EmailStr | None = None
    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    nickname: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)


class UserResponse(BaseModel):
    """Account as shown to its owner (no password hash)."""

    id: int
    email: str
    name: str
    nickname: str
    role: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AddressRequest(BaseModel):
    recipient_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=32)
    postal_code: str = Field(..., min_length=1, max_length=16)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)


class AddressResponse(BaseModel):
    id: int
    recipient_name: str
    phone_number: str
    postal_code: str
    address_line1: str
    address_line2: str | None = None

    class Config:
        from_attributes = True
