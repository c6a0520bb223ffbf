"""ORM model for issued refresh tokens."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from storefront.models.base import Base


class RefreshToken(Base):
    """One row per refresh token issued at login, keyed by its jti."""

    __tablename__ = "refresh_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    refresh_token = Column(Text, nullable=False)
    email = Column(String(255), nullable=False, index=True)
    jti = Column(String(64), nullable=False, unique=True, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
