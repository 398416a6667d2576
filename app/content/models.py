from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.exceptions import InvalidInputError
from app.verticals.models import SLUG_PATTERN


class ContentType(StrEnum):
    DESTINATIONS = "destinations"
    BLOG = "blog"
    GUIDES = "guides"

    @classmethod
    def parse(cls, value: str | ContentType) -> ContentType:
        """Parse a content type string, raising InvalidInputError for unknown values."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidInputError(f"Invalid type. Must be one of: {allowed}") from None


class ContentKey(NamedTuple):
    type: ContentType
    vertical: str
    slug: str


def _as_tuple(value: Any) -> Any:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return value


def _as_date(value: Any) -> Any:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return dt.datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


class Frontmatter(BaseModel):
    """Metadata block at the top of a content item.

    Keys the engine does not know about are kept as extra fields so renderers
    can still read them.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str = ""
    seo_title: str | None = Field(default=None, alias="seoTitle")
    seo_description: str | None = Field(default=None, alias="seoDescription")
    keywords: tuple[str, ...] = ()
    image: str | None = None
    date: dt.date | None = None
    modified_time: dt.date | None = Field(default=None, alias="modifiedTime")
    author: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()
    featured: bool = False

    @field_validator("keywords", "tags", mode="before")
    @classmethod
    def coerce_sequence(cls, value: Any) -> Any:
        return _as_tuple(value)

    @field_validator("date", "modified_time", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        return _as_date(value)

    @property
    def last_modified(self) -> dt.date | None:
        return self.modified_time or self.date


class ContentItem(BaseModel):
    """A published destination, blog post or guide."""

    model_config = ConfigDict(frozen=True)

    type: ContentType
    vertical: str = Field(..., pattern=SLUG_PATTERN)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    frontmatter: Frontmatter
    body: str = ""

    @property
    def key(self) -> ContentKey:
        return ContentKey(self.type, self.vertical, self.slug)


def recency_sort_key(item: ContentItem) -> tuple[Any, ...]:
    """Newest first, undated last, then slug and vertical for a total order."""
    date = item.frontmatter.date
    return (date is None, -date.toordinal() if date else 0, item.slug, item.vertical)


def listing_sort_key(item: ContentItem) -> tuple[Any, ...]:
    return (not item.frontmatter.featured, *recency_sort_key(item))
