"""Catalog category endpoints. Reads are public; writes require an admin."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api.v1.auth import require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import Principal
from storefront.schemas.catalog import CategoryRequest, CategoryResponse
from storefront.services import categories

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    db: Annotated[Session, Depends(get_db)],
) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in categories.list_categories(db)]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    return CategoryResponse.model_validate(categories.get_category(db, category_id))


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryRequest,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    return CategoryResponse.model_validate(categories.create_category(db, body))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryRequest,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    return CategoryResponse.model_validate(
        categories.update_category(db, category_id, body)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    categories.delete_category(db, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
