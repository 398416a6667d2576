"""Affiliate redirect endpoint."""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse

from app.affiliates.models import AffiliateCategory, AffiliateLinkRequest
from app.affiliates.selector import AffiliateLinkSelector
from app.api.dependencies import get_affiliate_selector
from app.api.openapi_responses import (
    invalid_input_response,
    not_found_response,
    rate_limited_response,
)
from app.core.errors import build_http_error
from app.core.rate_limit import AFFILIATE_REDIRECT_RATE_LIMIT, limit, rate_limit_ip_key

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="Redirect to the best affiliate partner",
    description=(
        "Redirect to the pinned partner when it supports the request, otherwise to the "
        "highest-priority partner supporting the category."
    ),
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    response_class=RedirectResponse,
    responses={
        **invalid_input_response("Invalid category. Must be one of: hotel, tour, flight, activity"),
        **not_found_response(
            "No affiliate partner can serve the request",
            "no_affiliate_link",
            "No affiliate link available",
        ),
        **rate_limited_response(),
    },
)
@limit(AFFILIATE_REDIRECT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def redirect_to_affiliate(
    request: Request,
    destination: str | None = Query(default=None, max_length=200),
    category: str | None = Query(default=None, description="hotel, tour, flight or activity"),
    vertical: str | None = Query(default=None),
    partner: str | None = Query(default=None),
    selector: AffiliateLinkSelector = Depends(get_affiliate_selector),
) -> RedirectResponse:
    link_request = AffiliateLinkRequest(
        destination=destination,
        category=AffiliateCategory.parse(category) if category else None,
        vertical=vertical,
        partner=partner,
    )
    url = selector.generate_best_affiliate_link(link_request)
    if url is None:
        logger.info("No affiliate link for %s", link_request.model_dump(exclude_none=True))
        raise build_http_error(
            status_code=status.HTTP_404_NOT_FOUND,
            error="no_affiliate_link",
            message="No affiliate link available",
        )
    return RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
