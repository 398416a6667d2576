"""Sitemap and robots.txt generation over verticals x content."""

from __future__ import annotations

import asyncio
import datetime as dt
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

from app.content.models import ContentType
from app.content.store import ContentStore
from app.services.static_params import PAGE_CONTENT_TYPES, VerticalFailure
from app.verticals.models import RESERVED_PATH_SEGMENTS, Vertical
from app.verticals.registry import VerticalRegistry

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE: Final[str] = "http://www.sitemaps.org/schemas/sitemap/0.9"
EXCLUDED_PATH_PREFIXES: Final[tuple[str, ...]] = tuple(
    f"/{segment}/" for segment in sorted(RESERVED_PATH_SEGMENTS)
)
ROBOTS_USER_AGENTS: Final[tuple[str, ...]] = (
    "*",
    "Applebot",
    "Applebot-Extended",
    "GPTBot",
    "ChatGPT-User",
    "CCBot",
    "Google-Extended",
    "PerplexityBot",
    "anthropic-ai",
    "Claude-Web",
    "Googlebot",
    "Bingbot",
)


class ChangeFrequency(StrEnum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class SitemapUrl:
    loc: str
    changefreq: ChangeFrequency
    priority: float
    lastmod: dt.date | None = None


@dataclass(frozen=True)
class SitemapBuildResult:
    urls: tuple[SitemapUrl, ...] = ()
    failures: tuple[VerticalFailure, ...] = ()


@dataclass
class SitemapUrlBuilder:
    """Builds sitemap entries for the home page, every vertical and every content page.

    Paths are only ever composed from registered vertical slugs and validated
    content slugs, neither of which can be a reserved segment, so administrative
    and API prefixes never appear.
    """

    registry: VerticalRegistry
    store: ContentStore
    base_url: str
    item_types: tuple[ContentType, ...] = field(default=PAGE_CONTENT_TYPES)

    def _loc(self, *segments: str) -> str:
        base = self.base_url.rstrip("/")
        if not segments:
            return base
        return f"{base}/{'/'.join(segments)}"

    async def _vertical_section(
        self, vertical: Vertical
    ) -> tuple[list[SitemapUrl], list[VerticalFailure]]:
        urls = [
            SitemapUrl(self._loc(vertical.slug), ChangeFrequency.WEEKLY, 0.9),
            SitemapUrl(
                self._loc(vertical.slug, ContentType.BLOG.value), ChangeFrequency.DAILY, 0.8
            ),
            SitemapUrl(
                self._loc(vertical.slug, ContentType.DESTINATIONS.value),
                ChangeFrequency.WEEKLY,
                0.8,
            ),
        ]
        failures: list[VerticalFailure] = []
        for content_type in self.item_types:
            try:
                items = await self.store.get_all_content_items(content_type, vertical.slug)
            except Exception as exc:
                logger.exception(
                    "Error generating sitemap %s for vertical %s", content_type.value, vertical.slug
                )
                failures.append(
                    VerticalFailure(vertical.slug, content_type, str(exc) or type(exc).__name__)
                )
                continue
            urls.extend(
                SitemapUrl(
                    loc=self._loc(vertical.slug, content_type.value, item.slug),
                    changefreq=ChangeFrequency.MONTHLY,
                    priority=0.7,
                    lastmod=item.frontmatter.last_modified,
                )
                for item in items
            )
        return urls, failures

    async def build(self) -> SitemapBuildResult:
        sections = await asyncio.gather(
            *(self._vertical_section(vertical) for vertical in self.registry.get_all_verticals())
        )
        urls = [SitemapUrl(self._loc(), ChangeFrequency.DAILY, 1.0)]
        failures: list[VerticalFailure] = []
        for section_urls, section_failures in sections:
            urls.extend(section_urls)
            failures.extend(section_failures)
        return SitemapBuildResult(urls=tuple(urls), failures=tuple(failures))


def render_sitemap_xml(urls: Iterable[SitemapUrl]) -> bytes:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for url in urls:
        node = ET.SubElement(urlset, "url")
        ET.SubElement(node, "loc").text = url.loc
        if url.lastmod is not None:
            ET.SubElement(node, "lastmod").text = url.lastmod.isoformat()
        ET.SubElement(node, "changefreq").text = url.changefreq.value
        ET.SubElement(node, "priority").text = f"{url.priority:.1f}"
    ET.indent(urlset)
    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)


def render_robots_txt(
    base_url: str, user_agents: Sequence[str] = ROBOTS_USER_AGENTS
) -> str:
    lines: list[str] = []
    for agent in user_agents:
        lines.append(f"User-agent: {agent}")
        lines.append("Allow: /")
        lines.extend(f"Disallow: {prefix}" for prefix in EXCLUDED_PATH_PREFIXES)
        lines.append("")
    lines.append(f"Sitemap: {base_url.rstrip('/')}/sitemap.xml")
    return "\n".join(lines) + "\n"
