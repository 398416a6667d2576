from __future__ import annotations

from collections.abc import Iterable

from app.verticals.models import Vertical


class VerticalRegistry:
    """Immutable set of configured verticals, kept in declaration order."""

    def __init__(self, verticals: Iterable[Vertical]) -> None:
        by_slug: dict[str, Vertical] = {}
        for vertical in verticals:
            if vertical.slug in by_slug:
                raise ValueError(f"Duplicate vertical slug: {vertical.slug}")
            by_slug[vertical.slug] = vertical
        self._by_slug = by_slug
        self._ordered = tuple(by_slug.values())

    def __len__(self) -> int:
        return len(self._ordered)

    def get_all_verticals(self) -> tuple[Vertical, ...]:
        return self._ordered

    def get_vertical_by_slug(self, slug: str) -> Vertical | None:
        """Exact, case-sensitive lookup. Returns None for unknown slugs."""
        return self._by_slug.get(slug)

    def is_valid_vertical(self, slug: str) -> bool:
        return slug in self._by_slug

    def get_vertical_slugs(self) -> list[str]:
        return [vertical.slug for vertical in self._ordered]
