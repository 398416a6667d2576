"""Vertical configuration endpoints."""

from fastapi import APIRouter, Depends, Request, status

from app.api.dependencies import get_vertical_registry
from app.api.openapi_responses import not_found_response, rate_limited_response
from app.core.errors import build_http_error
from app.core.rate_limit import CONTENT_RATE_LIMIT, limit, rate_limit_ip_key
from app.verticals.models import Vertical
from app.verticals.registry import VerticalRegistry

router = APIRouter()


@router.get(
    "",
    summary="List verticals",
    response_model=list[Vertical],
    responses=rate_limited_response(),
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def list_verticals(
    request: Request,
    registry: VerticalRegistry = Depends(get_vertical_registry),
) -> list[Vertical]:
    return list(registry.get_all_verticals())


@router.get(
    "/{slug}",
    summary="Get a vertical",
    response_model=Vertical,
    responses={
        **not_found_response("Vertical not found", "vertical_not_found", "Vertical not found"),
        **rate_limited_response(),
    },
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def get_vertical(
    request: Request,
    slug: str,
    registry: VerticalRegistry = Depends(get_vertical_registry),
) -> Vertical:
    vertical = registry.get_vertical_by_slug(slug)
    if vertical is None:
        raise build_http_error(
            status_code=status.HTTP_404_NOT_FOUND,
            error="vertical_not_found",
            message="Vertical not found",
        )
    return vertical
