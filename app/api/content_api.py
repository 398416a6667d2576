"""Content API endpoints: listings, item lookup, related content and static params."""

from fastapi import APIRouter, Depends, Query, Request, status

from app.api.dependencies import get_content_store, get_static_param_enumerator
from app.api.openapi_responses import (
    content_unavailable_response,
    invalid_input_response,
    not_found_response,
    rate_limited_response,
)
from app.api.schemas import StaticParamResponse, StaticParamsResponse, VerticalFailureResponse
from app.content.models import ContentItem, ContentType
from app.content.store import DEFAULT_RELATED_LIMIT, ContentStore
from app.core.errors import build_http_error
from app.core.rate_limit import CONTENT_RATE_LIMIT, limit, rate_limit_ip_key
from app.services.static_params import StaticParamEnumerator

router = APIRouter()

INVALID_TYPE_MESSAGE = "Invalid type. Must be one of: destinations, blog, guides"


def _content_not_found() -> Exception:
    return build_http_error(
        status_code=status.HTTP_404_NOT_FOUND,
        error="content_not_found",
        message="Content item not found",
    )


@router.get(
    "",
    summary="List content items",
    description="List items of one type, optionally scoped to a vertical and capped.",
    response_model=list[ContentItem],
    responses={
        **invalid_input_response(INVALID_TYPE_MESSAGE),
        **rate_limited_response(),
        **content_unavailable_response(),
    },
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def list_content(
    request: Request,
    content_type: str = Query(default="", alias="type", description="destinations, blog or guides"),
    vertical: str | None = Query(default=None, description="Vertical slug"),
    max_items: int | None = Query(default=None, alias="limit", ge=1, le=100),
    store: ContentStore = Depends(get_content_store),
) -> list[ContentItem]:
    return await store.get_all_content_items(content_type, vertical or None, max_items)


@router.get(
    "/static-params",
    summary="List pre-render params",
    description="Every (vertical, slug) pair of one content type, for static page builds.",
    response_model=StaticParamsResponse,
    responses={**invalid_input_response(INVALID_TYPE_MESSAGE), **rate_limited_response()},
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def static_params(
    request: Request,
    content_type: str = Query(default="", alias="type"),
    enumerator: StaticParamEnumerator = Depends(get_static_param_enumerator),
) -> StaticParamsResponse:
    parsed_type = ContentType.parse(content_type)
    result = await enumerator.enumerate(parsed_type)
    return StaticParamsResponse(
        type=parsed_type.value,
        params=[StaticParamResponse(**param.as_dict()) for param in result.params],
        failures=[
            VerticalFailureResponse(vertical=failure.vertical, type=failure.content_type.value)
            for failure in result.failures
        ],
    )


@router.get(
    "/{content_type}/{vertical}/{slug}",
    summary="Get a content item",
    response_model=ContentItem,
    responses={
        **invalid_input_response(INVALID_TYPE_MESSAGE),
        **not_found_response(
            "Content item not found", "content_not_found", "Content item not found"
        ),
        **rate_limited_response(),
        **content_unavailable_response(),
    },
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def get_content(
    request: Request,
    content_type: str,
    vertical: str,
    slug: str,
    store: ContentStore = Depends(get_content_store),
) -> ContentItem:
    item = await store.get_content_item(content_type, slug, vertical)
    if item is None:
        raise _content_not_found()
    return item


@router.get(
    "/{content_type}/{vertical}/{slug}/related",
    summary="Get related content",
    description="Top related items of a target type for a content item's recommendation widget.",
    response_model=list[ContentItem],
    responses={
        **invalid_input_response(INVALID_TYPE_MESSAGE),
        **not_found_response(
            "Content item not found", "content_not_found", "Content item not found"
        ),
        **rate_limited_response(),
        **content_unavailable_response(),
    },
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def get_related_content(
    request: Request,
    content_type: str,
    vertical: str,
    slug: str,
    target_type: str | None = Query(default=None, description="Defaults to the item's own type"),
    max_items: int = Query(default=DEFAULT_RELATED_LIMIT, alias="limit", ge=1, le=20),
    store: ContentStore = Depends(get_content_store),
) -> list[ContentItem]:
    item = await store.get_content_item(content_type, slug, vertical)
    if item is None:
        raise _content_not_found()
    return await store.get_related_content(item, target_type or item.type, max_items)
