"""API-layer dependencies: request-scoped access to the service snapshot."""

from app.api.dependencies.services import (
    get_affiliate_selector,
    get_content_store,
    get_sitemap_builder,
    get_static_param_enumerator,
    get_vertical_registry,
)

__all__ = [
    "get_affiliate_selector",
    "get_content_store",
    "get_sitemap_builder",
    "get_static_param_enumerator",
    "get_vertical_registry",
]
