"""API request and response schemas.

Content and vertical endpoints return the domain models directly; the models
here cover the remaining response shapes.
"""

from __future__ import annotations

from app.api.schemas.response_models import (
    HealthResponse,
    StaticParamResponse,
    StaticParamsResponse,
    VerticalFailureResponse,
)

__all__ = [
    "HealthResponse",
    "StaticParamResponse",
    "StaticParamsResponse",
    "VerticalFailureResponse",
]
