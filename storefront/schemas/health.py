"""Pydantic schema for the health endpoint."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (dev or prod)")
    version: str = Field(description="Storefront API version")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database reachability at request time",
    )
