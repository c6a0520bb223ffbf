"""Pydantic request/response schemas."""

from storefront.schemas.auth import IssuedToken, LoginRequest, Principal, TokenPair
from storefront.schemas.catalog import CategoryRequest, CategoryResponse
from storefront.schemas.checkout import CheckoutListResponse, CheckoutResponse
from storefront.schemas.health import HealthResponse
from storefront.schemas.user import (
    AddressRequest,
    AddressResponse,
    ProfileUpdateRequest,
    SignupRequest,
    SignupResponse,
    UserResponse,
)

__all__ = [
    "AddressRequest",
    "AddressResponse",
    "CategoryRequest",
    "CategoryResponse",
    "CheckoutListResponse",
    "CheckoutResponse",
    "HealthResponse",
    "IssuedToken",
    "LoginRequest",
    "Principal",
    "ProfileUpdateRequest",
    "SignupRequest",
    "SignupResponse",
    "TokenPair",
    "UserResponse",
]
