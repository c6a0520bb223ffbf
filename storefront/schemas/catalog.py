"""Pydantic schemas for catalog categories."""

from pydantic import BaseModel, Field


class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Category name (unique)")


class CategoryResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
