"""API response schemas."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

E = TypeVar("E", bound=BaseModel)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    assist_available: bool = False
    version: str = "0.1.0"


class RecordListResponse(BaseModel, Generic[E]):
    """Response for listing or searching a collection."""

    items: list[E] = Field(default_factory=list)
    total: int = Field(..., description="Number of records returned")


class DraftResponse(BaseModel):
    """Result of a certificate draft."""

    text: str = Field(..., description="Drafted text, empty when nothing was produced")
    generated: bool = Field(..., description="Whether the text assist produced a draft")


class RefineResponse(BaseModel):
    """Result of a refine request."""

    text: str = Field(..., description="Refined text, or the original on failure")
    refined: bool = Field(..., description="Whether the text was changed")
