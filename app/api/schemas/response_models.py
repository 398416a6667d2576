"""Response models for API endpoints that do not return domain models directly."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str


class StaticParamResponse(BaseModel):
    vertical: str
    slug: str


class VerticalFailureResponse(BaseModel):
    vertical: str
    type: str = Field(..., description="Content type that could not be listed")


class StaticParamsResponse(BaseModel):
    """Pre-render params for one content type, plus the verticals that failed."""

    type: str
    params: list[StaticParamResponse]
    failures: list[VerticalFailureResponse]
