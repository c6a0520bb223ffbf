"""API v1 routes."""

from fastapi import APIRouter

from storefront.api.v1 import auth, categories, checkouts, health, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth/login", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(checkouts.router, prefix="/checkouts", tags=["checkouts"])
