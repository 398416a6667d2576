from fastapi import APIRouter, Request

from app.api.affiliate_api import router as affiliate_router
from app.api.content_api import router as content_router
from app.api.openapi_responses import rate_limited_response
from app.api.schemas import HealthResponse
from app.api.verticals_api import router as verticals_router
from app.core.rate_limit import HEALTH_RATE_LIMIT, limit, rate_limit_ip_key

router = APIRouter()


@router.get(
    "/health",
    tags=["meta"],
    summary="Health check",
    response_model=HealthResponse,
    responses=rate_limited_response(),
)
@limit(HEALTH_RATE_LIMIT, key_func=rate_limit_ip_key)
def health(request: Request) -> HealthResponse:
    """Check the health of the application."""
    return HealthResponse(status="ok")


# Include sub-routers
router.include_router(content_router, prefix="/content", tags=["content"])
router.include_router(affiliate_router, prefix="/affiliate", tags=["affiliate"])
router.include_router(verticals_router, prefix="/verticals", tags=["verticals"])
