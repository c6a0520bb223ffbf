"""Refresh token store: persisted records of issued refresh tokens."""

from sqlalchemy.orm import Session

from storefront.models import RefreshToken


def save(session: Session, record: RefreshToken) -> RefreshToken:
    session.add(record)
    session.flush()
    return record


def find_by_jti(session: Session, jti: str) -> RefreshToken | None:
    return session.query(RefreshToken).filter(RefreshToken.jti == jti).first()


def list_for_email(session: Session, email: str) -> list[RefreshToken]:
    return (
        session.query(RefreshToken)
        .filter(RefreshToken.email == email)
        .order_by(RefreshToken.id)
        .all()
    )
