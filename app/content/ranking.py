"""Related-content ranking for recommendation widgets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from app.content.models import ContentItem, recency_sort_key
from app.verticals.models import SHARED_VERTICAL


def _folded(values: Iterable[str]) -> set[str]:
    return {value.strip().casefold() for value in values if value and value.strip()}


def _terms(item: ContentItem) -> set[str]:
    frontmatter = item.frontmatter
    terms = _folded(frontmatter.keywords)
    if frontmatter.category:
        terms |= _folded([frontmatter.category])
    return terms


class RelatedContentRanker:
    """Pure, deterministic ranking of related items.

    Candidates are restricted to the source item's vertical plus shared content,
    and never share the source's type and slug.
    Tag overlap always outranks keyword/category overlap; ties go to the newest
    item, then slug order. When too few items overlap at all, the remaining
    slots are padded with the newest eligible items.
    """

    def is_eligible(self, source: ContentItem, candidate: ContentItem) -> bool:
        if candidate.type == source.type and candidate.slug == source.slug:
            return False
        return candidate.vertical in (source.vertical, SHARED_VERTICAL)

    def score(self, source: ContentItem, candidate: ContentItem) -> tuple[int, int]:
        tag_overlap = len(_folded(source.frontmatter.tags) & _folded(candidate.frontmatter.tags))
        term_overlap = len(_terms(source) & _terms(candidate))
        return tag_overlap, term_overlap

    def rank(
        self, source: ContentItem, candidates: Iterable[ContentItem], limit: int
    ) -> list[ContentItem]:
        if limit <= 0:
            return []
        eligible = [item for item in candidates if self.is_eligible(source, item)]

        def ranked_key(item: ContentItem) -> tuple[Any, ...]:
            tag_overlap, term_overlap = self.score(source, item)
            return (-tag_overlap, -term_overlap, *recency_sort_key(item))

        scored = sorted(
            (item for item in eligible if self.score(source, item) != (0, 0)),
            key=ranked_key,
        )
        selected = scored[:limit]
        if len(selected) < limit:
            chosen = {item.key for item in selected}
            padding = sorted(
                (item for item in eligible if item.key not in chosen), key=recency_sort_key
            )
            selected.extend(padding[: limit - len(selected)])
        return selected
