from __future__ import annotations

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.content.models import ContentItem, ContentType
from app.core.exceptions import ContentSourceUnavailableError
from app.db.models.content_item import ContentItemRecord
from app.db.session import get_session_maker
from app.verticals.models import SHARED_VERTICAL

logger = logging.getLogger(__name__)

CONTENT_FILE_SUFFIXES = (".md", ".mdx")
_FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def scope_items(items: Iterable[ContentItem], vertical: str | None) -> list[ContentItem]:
    """Restrict items to one vertical plus shared content.

    An item stored under the vertical itself shadows a shared item with the same slug.
    """
    items = list(items)
    if vertical is None:
        return items
    own = [item for item in items if item.vertical == vertical]
    own_slugs = {item.slug for item in own}
    shared = [
        item
        for item in items
        if item.vertical == SHARED_VERTICAL and item.slug not in own_slugs
    ]
    return own + shared


def _pick_item(items: Iterable[ContentItem], slug: str) -> ContentItem | None:
    return next((item for item in items if item.slug == slug), None)


def parse_content_document(
    content_type: ContentType, document: str, default_slug: str
) -> ContentItem:
    """Build a ContentItem from a markdown document with a YAML front matter block.

    Raises:
        yaml.YAMLError: If the front matter is not valid YAML
        ValidationError: If the metadata does not describe a valid content item
        ValueError: If the front matter is not a mapping
    """
    match = _FRONTMATTER_PATTERN.match(document)
    if match:
        metadata = yaml.safe_load(match.group(1)) or {}
        body = document[match.end() :]
    else:
        metadata, body = {}, document
    if not isinstance(metadata, dict):
        raise ValueError("Front matter must be a mapping")

    fields: dict[str, Any] = dict(metadata)
    slug = fields.pop("slug", None) or default_slug
    vertical = fields.pop("vertical", None)
    return ContentItem.model_validate(
        {
            "type": content_type,
            "vertical": vertical,
            "slug": str(slug),
            "frontmatter": fields,
            "body": body.strip(),
        }
    )


class ContentSource(ABC):
    """Read-only boundary to wherever published content lives."""

    @abstractmethod
    async def list_items(
        self, content_type: ContentType, vertical: str | None = None
    ) -> list[ContentItem]:
        """List items of a type, optionally scoped to a vertical (shared items included)."""
        raise NotImplementedError

    @abstractmethod
    async def get_item(
        self, content_type: ContentType, vertical: str, slug: str
    ) -> ContentItem | None:
        raise NotImplementedError

    @abstractmethod
    async def check(self) -> None:
        """Raise ContentSourceUnavailableError if the source cannot be read."""
        raise NotImplementedError


class MarkdownContentSource(ContentSource):
    """Markdown files under ``<root>/<type>/`` with YAML front matter.

    Files are re-read on every call so an externally refreshed tree is picked up
    without a restart.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _read_type(self, content_type: ContentType) -> list[ContentItem]:
        if not self.root.is_dir():
            raise ContentSourceUnavailableError(f"Content directory {self.root} does not exist")
        directory = self.root / content_type.value
        if not directory.is_dir():
            return []

        items: list[ContentItem] = []
        seen: set[tuple[str, str]] = set()
        try:
            paths = sorted(directory.iterdir())
        except OSError as exc:
            raise ContentSourceUnavailableError(f"Cannot list {directory}: {exc}") from exc
        for path in paths:
            if path.suffix not in CONTENT_FILE_SUFFIXES or not path.is_file():
                continue
            try:
                document = path.read_text(encoding="utf-8")
                item = parse_content_document(content_type, document, path.stem)
            except OSError as exc:
                raise ContentSourceUnavailableError(f"Cannot read {path}: {exc}") from exc
            except (yaml.YAMLError, ValidationError, ValueError) as exc:
                logger.error(f"Malformed content file {path}. Error: {exc}")
                raise ContentSourceUnavailableError(f"Malformed content file {path.name}") from exc
            if (item.vertical, item.slug) in seen:
                raise ContentSourceUnavailableError(
                    f"Duplicate {content_type.value} item {item.vertical}/{item.slug}"
                )
            seen.add((item.vertical, item.slug))
            items.append(item)
        return items

    async def list_items(
        self, content_type: ContentType, vertical: str | None = None
    ) -> list[ContentItem]:
        items = await asyncio.to_thread(self._read_type, content_type)
        return scope_items(items, vertical)

    async def get_item(
        self, content_type: ContentType, vertical: str, slug: str
    ) -> ContentItem | None:
        return _pick_item(await self.list_items(content_type, vertical), slug)

    async def check(self) -> None:
        if not self.root.is_dir():
            raise ContentSourceUnavailableError(f"Content directory {self.root} does not exist")


class DatabaseContentSource(ContentSource):
    """Content rows in the ``content_items`` table, read through SQLAlchemy."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_maker = session_maker

    def _sessions(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker or get_session_maker()

    async def _fetch(self, statement: Any) -> list[ContentItemRecord]:
        try:
            async with self._sessions()() as session:
                result = await session.execute(statement)
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error(f"Content database query failed. Error: {exc}")
            raise ContentSourceUnavailableError("Content database is unavailable") from exc

    @staticmethod
    def _to_items(records: Iterable[ContentItemRecord]) -> list[ContentItem]:
        try:
            return [record.to_content_item() for record in records]
        except ValidationError as exc:
            logger.error(f"Malformed content row. Error: {exc}")
            raise ContentSourceUnavailableError("Malformed content row") from exc

    async def list_items(
        self, content_type: ContentType, vertical: str | None = None
    ) -> list[ContentItem]:
        statement = select(ContentItemRecord).where(
            ContentItemRecord.content_type == content_type.value
        )
        if vertical is not None:
            statement = statement.where(
                ContentItemRecord.vertical.in_((vertical, SHARED_VERTICAL))
            )
        statement = statement.order_by(ContentItemRecord.vertical, ContentItemRecord.slug)
        return scope_items(self._to_items(await self._fetch(statement)), vertical)

    async def get_item(
        self, content_type: ContentType, vertical: str, slug: str
    ) -> ContentItem | None:
        statement = select(ContentItemRecord).where(
            ContentItemRecord.content_type == content_type.value,
            ContentItemRecord.slug == slug,
            ContentItemRecord.vertical.in_((vertical, SHARED_VERTICAL)),
        )
        items = scope_items(self._to_items(await self._fetch(statement)), vertical)
        return _pick_item(items, slug)

    async def check(self) -> None:
        try:
            async with self._sessions()() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise ContentSourceUnavailableError(f"Failed to connect to database: {exc}") from exc
