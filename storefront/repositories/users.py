"""Credential store: lookups and writes for User rows."""

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from storefront.models import User


def normalize_email(email: str) -> str:
    """
    Return the form emails are stored in: the same normalization EmailStr
    applies at signup (domain lowercased, unicode normalized).

    Strings that are not valid addresses are returned stripped; no stored
    account can match them.
    """
    try:
        return validate_email(email.strip(), check_deliverability=False).normalized
    except EmailNotValidError:
        return email.strip()


def find_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == normalize_email(email)).first()


def find_by_id(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def save(session: Session, user: User) -> User:
    """Add the user to the session and flush so the id is assigned."""
    session.add(user)
    session.flush()
    return user


def delete(session: Session, user: User) -> None:
    session.delete(user)
    session.flush()
