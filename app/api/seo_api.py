"""Machine-readable site surfaces served from the site root."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from app.api.dependencies import get_sitemap_builder
from app.core.rate_limit import CONTENT_RATE_LIMIT, limit, rate_limit_ip_key
from app.services.sitemap import SitemapUrlBuilder, render_robots_txt, render_sitemap_xml

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap.xml", include_in_schema=False)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def sitemap(
    request: Request,
    builder: SitemapUrlBuilder = Depends(get_sitemap_builder),
) -> Response:
    result = await builder.build()
    if result.failures:
        logger.warning(
            "Serving sitemap without content from %d vertical sections", len(result.failures)
        )
    return Response(content=render_sitemap_xml(result.urls), media_type="application/xml")


@router.get("/robots.txt", include_in_schema=False, response_class=PlainTextResponse)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def robots(
    request: Request,
    builder: SitemapUrlBuilder = Depends(get_sitemap_builder),
) -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt(builder.base_url))
