"""Enumerate every (vertical, slug) pair that needs a pre-rendered page."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from app.content.models import ContentType
from app.content.store import ContentStore
from app.verticals.models import Vertical
from app.verticals.registry import VerticalRegistry

logger = logging.getLogger(__name__)

# Content types that have a detail page per item.
PAGE_CONTENT_TYPES: Final[tuple[ContentType, ...]] = (ContentType.DESTINATIONS, ContentType.BLOG)


@dataclass(frozen=True)
class StaticParam:
    vertical: str
    slug: str

    def as_dict(self) -> dict[str, str]:
        return {"vertical": self.vertical, "slug": self.slug}


@dataclass(frozen=True)
class VerticalFailure:
    vertical: str
    content_type: ContentType
    error: str


@dataclass(frozen=True)
class VerticalEnumeration:
    """Outcome of listing one vertical: either params or a failure."""

    vertical: str
    content_type: ContentType
    params: tuple[StaticParam, ...] = ()
    failure: VerticalFailure | None = None


@dataclass(frozen=True)
class EnumerationResult:
    params: tuple[StaticParam, ...] = ()
    failures: tuple[VerticalFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


def fold_enumerations(units: Iterable[VerticalEnumeration]) -> EnumerationResult:
    params: list[StaticParam] = []
    failures: list[VerticalFailure] = []
    for unit in units:
        if unit.failure is not None:
            failures.append(unit.failure)
        else:
            params.extend(unit.params)
    return EnumerationResult(params=tuple(params), failures=tuple(failures))


@dataclass
class StaticParamEnumerator:
    registry: VerticalRegistry
    store: ContentStore
    page_types: tuple[ContentType, ...] = field(default=PAGE_CONTENT_TYPES)

    def vertical_params(self) -> list[dict[str, str]]:
        """Params for the per-vertical landing pages."""
        return [{"vertical": slug} for slug in self.registry.get_vertical_slugs()]

    async def _enumerate_vertical(
        self, content_type: ContentType, vertical: Vertical
    ) -> VerticalEnumeration:
        try:
            items = await self.store.get_all_content_items(content_type, vertical.slug)
        except Exception as exc:
            # One broken vertical must not abort the whole build.
            logger.exception(
                "Error generating %s params for vertical %s", content_type.value, vertical.slug
            )
            return VerticalEnumeration(
                vertical=vertical.slug,
                content_type=content_type,
                failure=VerticalFailure(
                    vertical.slug, content_type, str(exc) or type(exc).__name__
                ),
            )
        return VerticalEnumeration(
            vertical=vertical.slug,
            content_type=content_type,
            params=tuple(StaticParam(vertical.slug, item.slug) for item in items),
        )

    async def enumerate(self, content_type: ContentType | str) -> EnumerationResult:
        """List params for one content type across every vertical, in registry order."""
        parsed_type = ContentType.parse(content_type)
        units = await asyncio.gather(
            *(
                self._enumerate_vertical(parsed_type, vertical)
                for vertical in self.registry.get_all_verticals()
            )
        )
        result = fold_enumerations(units)
        if result.failures:
            logger.warning(
                "Enumerated %d %s params with %d failed verticals",
                len(result.params),
                parsed_type.value,
                len(result.failures),
            )
        return result

    async def enumerate_pages(self) -> dict[ContentType, EnumerationResult]:
        results = await asyncio.gather(
            *(self.enumerate(page_type) for page_type in self.page_types)
        )
        return dict(zip(self.page_types, results, strict=True))
