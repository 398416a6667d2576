"""Dependencies that hand out the app's immutable service snapshot."""

from __future__ import annotations

from typing import Any, cast

from fastapi import Request

from app.affiliates.selector import AffiliateLinkSelector
from app.content.store import ContentStore
from app.services.sitemap import SitemapUrlBuilder
from app.services.static_params import StaticParamEnumerator
from app.verticals.registry import VerticalRegistry


def _service(request: Request, key: str) -> Any:
    return request.app.state.services[key]


def get_vertical_registry(request: Request) -> VerticalRegistry:
    return cast(VerticalRegistry, _service(request, "vertical_registry"))


def get_content_store(request: Request) -> ContentStore:
    return cast(ContentStore, _service(request, "content_store"))


def get_affiliate_selector(request: Request) -> AffiliateLinkSelector:
    return cast(AffiliateLinkSelector, _service(request, "affiliate_selector"))


def get_static_param_enumerator(request: Request) -> StaticParamEnumerator:
    return cast(StaticParamEnumerator, _service(request, "static_param_enumerator"))


def get_sitemap_builder(request: Request) -> SitemapUrlBuilder:
    return cast(SitemapUrlBuilder, _service(request, "sitemap_builder"))
