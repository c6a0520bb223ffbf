"""Catalog categories: create, rename, delete and list."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.models import Category
from storefront.schemas.catalog import CategoryRequest
from storefront.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found."
CATEGORY_EXISTS = "A category with this name already exists."


def list_categories(session: Session) -> list[Category]:
    return session.query(Category).order_by(Category.id).all()


def get_category(session: Session, category_id: int) -> Category:
    category = session.get(Category, category_id)
    if category is None:
        raise NotFoundError(CATEGORY_NOT_FOUND)
    return category


def _commit_or_conflict(session: Session) -> None:
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError(CATEGORY_EXISTS) from e


def create_category(session: Session, body: CategoryRequest) -> Category:
    category = Category(name=body.name)
    session.add(category)
    _commit_or_conflict(session)
    session.refresh(category)
    logger.info("Category created: id=%s name=%s", category.id, category.name)
    return category


def update_category(session: Session, category_id: int, body: CategoryRequest) -> Category:
    """Rename a category. Raises NotFoundError if it does not exist."""
    category = get_category(session, category_id)
    category.name = body.name
    _commit_or_conflict(session)
    session.refresh(category)
    return category


def delete_category(session: Session, category_id: int) -> None:
    """Delete a category by id. Raises NotFoundError if it does not exist."""
    deleted = (
        session.query(Category)
        .filter(Category.id == category_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        session.rollback()
        raise NotFoundError(CATEGORY_NOT_FOUND)
    session.commit()
    logger.info("Category deleted: id=%s", category_id)
