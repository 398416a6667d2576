from __future__ import annotations

import logging

from app.content.models import ContentItem, ContentType, listing_sort_key
from app.content.ranking import RelatedContentRanker
from app.content.sources import ContentSource
from app.core.exceptions import InvalidInputError
from app.verticals.models import SHARED_VERTICAL
from app.verticals.registry import VerticalRegistry

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 3


def _validate_limit(limit: int | None) -> None:
    if limit is not None and limit < 0:
        raise InvalidInputError("Limit must not be negative")


class ContentStore:
    """Typed, vertical-scoped access to content from a ContentSource.

    Lookups return None or an empty list for unknown verticals and missing items.
    Source failures surface as ContentSourceUnavailableError.
    """

    def __init__(
        self,
        source: ContentSource,
        registry: VerticalRegistry,
        ranker: RelatedContentRanker | None = None,
    ) -> None:
        self._source = source
        self._registry = registry
        self._ranker = ranker or RelatedContentRanker()

    @property
    def source(self) -> ContentSource:
        return self._source

    async def get_content_item(
        self, content_type: ContentType | str, slug: str, vertical: str
    ) -> ContentItem | None:
        parsed_type = ContentType.parse(content_type)
        if not self._registry.is_valid_vertical(vertical):
            logger.debug("Unknown vertical %r requested", vertical)
            return None
        return await self._source.get_item(parsed_type, vertical, slug)

    async def get_all_content_items(
        self,
        content_type: ContentType | str,
        vertical: str | None = None,
        limit: int | None = None,
    ) -> list[ContentItem]:
        """List items featured first, then newest first, then by slug."""
        parsed_type = ContentType.parse(content_type)
        _validate_limit(limit)
        if vertical is not None and not self._registry.is_valid_vertical(vertical):
            logger.debug("Unknown vertical %r requested", vertical)
            return []
        items = sorted(await self._source.list_items(parsed_type, vertical), key=listing_sort_key)
        return items if limit is None else items[:limit]

    async def get_related_content(
        self,
        item: ContentItem,
        target_type: ContentType | str,
        limit: int = DEFAULT_RELATED_LIMIT,
    ) -> list[ContentItem]:
        parsed_type = ContentType.parse(target_type)
        _validate_limit(limit)
        scope = None if item.vertical == SHARED_VERTICAL else item.vertical
        candidates = await self._source.list_items(parsed_type, scope)
        return self._ranker.rank(item, candidates, limit)

    async def get_content_by_tag(
        self, content_type: ContentType | str, tag: str, vertical: str | None = None
    ) -> list[ContentItem]:
        wanted = tag.strip().casefold()
        items = await self.get_all_content_items(content_type, vertical)
        return [
            item
            for item in items
            if any(existing.casefold() == wanted for existing in item.frontmatter.tags)
        ]
