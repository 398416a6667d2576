"""Unit tests for the database content source.

These tests use a mocked session maker, so no database is needed.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.content.models import ContentType
from app.content.sources import DatabaseContentSource
from app.core.exceptions import ContentSourceUnavailableError
from app.db.models import ContentItemRecord


def _record(vertical: str, slug: str, **frontmatter: Any) -> ContentItemRecord:
    frontmatter.setdefault("title", slug.title())
    return ContentItemRecord(
        content_type="destinations",
        vertical=vertical,
        slug=slug,
        frontmatter=frontmatter,
        body=f"# {slug}",
    )


def _session_maker(
    records: list[ContentItemRecord] | None = None, error: Exception | None = None
) -> tuple[MagicMock, AsyncMock]:
    """Return a mock session maker and the session it hands out."""
    session = AsyncMock()
    if error is not None:
        session.execute.side_effect = error
    else:
        result = MagicMock()
        result.scalars.return_value.all.return_value = records or []
        session.execute.return_value = result
    session_maker = MagicMock()
    session_maker.return_value.__aenter__.return_value = session
    session_maker.return_value.__aexit__.return_value = None
    return session_maker, session


@pytest.mark.asyncio
async def test_list_items_converts_rows() -> None:
    session_maker, session = _session_maker(
        [_record("budget-travel", "paris", tags=["europe"], date="2024-03-01")]
    )
    source = DatabaseContentSource(session_maker)

    items = await source.list_items(ContentType.DESTINATIONS, "budget-travel")

    assert [item.key for item in items] == [
        (ContentType.DESTINATIONS, "budget-travel", "paris")
    ]
    assert items[0].frontmatter.tags == ("europe",)
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_vertical_row_shadows_shared_row() -> None:
    session_maker, _ = _session_maker(
        [_record("all", "lisbon"), _record("luxury", "lisbon", title="Lisbon in Style")]
    )
    source = DatabaseContentSource(session_maker)

    item = await source.get_item(ContentType.DESTINATIONS, "luxury", "lisbon")

    assert item is not None
    assert item.vertical == "luxury"
    assert item.frontmatter.title == "Lisbon in Style"


@pytest.mark.asyncio
async def test_get_item_missing_returns_none() -> None:
    session_maker, _ = _session_maker([])
    source = DatabaseContentSource(session_maker)

    assert await source.get_item(ContentType.DESTINATIONS, "luxury", "nowhere") is None


@pytest.mark.asyncio
async def test_query_failure_is_unavailable() -> None:
    session_maker, _ = _session_maker(error=OperationalError("SELECT", {}, Exception("down")))
    source = DatabaseContentSource(session_maker)

    with pytest.raises(ContentSourceUnavailableError):
        await source.list_items(ContentType.BLOG)


@pytest.mark.asyncio
async def test_malformed_row_is_unavailable() -> None:
    session_maker, _ = _session_maker([_record("budget-travel", "paris", title="")])
    source = DatabaseContentSource(session_maker)

    with pytest.raises(ContentSourceUnavailableError, match="Malformed"):
        await source.list_items(ContentType.DESTINATIONS)


@pytest.mark.asyncio
async def test_check_runs_probe_query() -> None:
    session_maker, session = _session_maker([])

    await DatabaseContentSource(session_maker).check()

    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_failure_is_unavailable() -> None:
    session_maker, _ = _session_maker(error=OperationalError("SELECT 1", {}, Exception("down")))

    with pytest.raises(ContentSourceUnavailableError, match="Failed to connect"):
        await DatabaseContentSource(session_maker).check()
