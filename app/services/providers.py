"""Build the immutable service snapshot shared by the API and the build CLI."""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any

from app.affiliates.partners import load_partners
from app.affiliates.selector import AffiliateLinkSelector
from app.content.sources import ContentSource, DatabaseContentSource, MarkdownContentSource
from app.content.store import ContentStore
from app.core.config import Settings
from app.services.sitemap import SitemapUrlBuilder
from app.services.static_params import StaticParamEnumerator
from app.verticals.catalog import load_verticals
from app.verticals.registry import VerticalRegistry

logger = logging.getLogger(__name__)


def content_source_provider(settings: Settings) -> ContentSource:
    if settings.content_backend == "database":
        logger.info("Using database content source")
        return DatabaseContentSource()
    logger.info("Using markdown content source at %s", settings.content_dir)
    return MarkdownContentSource(settings.content_dir)


def build_services(
    settings: Settings, content_source: ContentSource | None = None
) -> Mapping[str, Any]:
    """Load verticals and partners once and wire every component explicitly.

    Raises:
        OSError: If a configured verticals or partners file cannot be read
        pydantic.ValidationError: If such a file is invalid
        ValueError: If slugs or partner ids are duplicated
    """
    registry = VerticalRegistry(load_verticals(settings.verticals_file))
    selector = AffiliateLinkSelector(load_partners(settings.affiliate_partners_file))
    source = content_source or content_source_provider(settings)
    store = ContentStore(source, registry)

    services: dict[str, Any] = {
        "vertical_registry": registry,
        "content_source": source,
        "content_store": store,
        "affiliate_selector": selector,
        "static_param_enumerator": StaticParamEnumerator(registry, store),
        "sitemap_builder": SitemapUrlBuilder(registry, store, settings.site_url),
    }
    return types.MappingProxyType(services)
