"""Pytest configuration and shared fixtures.

Tests run against a small markdown content tree and a two-vertical catalogue
written to a temporary directory, so no database or network is needed.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
import yaml
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.content.models import ContentItem, ContentType, Frontmatter
from app.content.sources import MarkdownContentSource
from app.content.store import ContentStore
from app.core import config
from app.core.rate_limit import limiter
from app.main import create_app
from app.verticals.catalog import load_verticals
from app.verticals.registry import VerticalRegistry

TEST_VERTICALS: list[dict[str, Any]] = [
    {
        "slug": "budget-travel",
        "display_name": "Budget Travel",
        "short_name": "Budget",
        "description": "Travel more, spend less.",
        "features": [
            {"icon": "Wallet", "title": "CHEAP", "description": "Cheap trips.", "color": "green"},
            {"icon": "Rocket", "title": "FAST", "description": "Fast trips.", "color": "red"},
        ],
        "keywords": ["budget travel"],
    },
    {
        "slug": "luxury",
        "display_name": "Luxury Travel",
        "description": "Five-star escapes.",
    },
]

# (type, file name, front matter, body)
TEST_CONTENT: list[tuple[str, str, dict[str, Any], str]] = [
    (
        "destinations",
        "paris",
        {
            "vertical": "budget-travel",
            "title": "Paris",
            "description": "The city of light on a shoestring.",
            "tags": ["europe", "city", "food"],
            "category": "city",
            "keywords": ["france"],
            "date": "2024-03-01",
        },
        "# Paris\n\nCheap eats and free museums.",
    ),
    (
        "destinations",
        "rome",
        {
            "vertical": "budget-travel",
            "title": "Rome",
            "tags": ["europe", "city", "history"],
            "category": "city",
            "date": "2024-02-01",
        },
        "# Rome",
    ),
    (
        "destinations",
        "lisbon",
        {
            "vertical": "all",
            "title": "Lisbon",
            "tags": ["europe", "coast"],
            "date": "2023-12-01",
        },
        "# Lisbon",
    ),
    (
        "destinations",
        "bali",
        {
            "vertical": "luxury",
            "title": "Bali",
            "tags": ["asia", "beach"],
            "featured": True,
            "date": "2024-01-10",
        },
        "# Bali",
    ),
    (
        "blog",
        "paris-on-a-budget",
        {
            "vertical": "budget-travel",
            "title": "Paris on a Budget",
            "seoTitle": "Paris on a Budget (2024)",
            "tags": ["europe", "food"],
            "date": "2024-04-01",
            "modifiedTime": "2024-05-02T10:00:00Z",
        },
        "Eat well for less.",
    ),
    (
        "blog",
        "packing-list",
        {"vertical": "all", "title": "The Only Packing List You Need"},
        "Pack light.",
    ),
    (
        "guides",
        "visa-basics",
        {"vertical": "all", "title": "Visa Basics", "date": "2024-01-01"},
        "Check entry rules.",
    ),
]


def write_content_file(
    root: Path, content_type: str, name: str, frontmatter: dict[str, Any], body: str = ""
) -> Path:
    directory = root / content_type
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(
        f"---\n{yaml.safe_dump(frontmatter, sort_keys=False)}---\n{body}\n", encoding="utf-8"
    )
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A markdown content tree with destinations, blog posts and guides."""
    root = tmp_path / "content"
    for content_type, name, frontmatter, body in TEST_CONTENT:
        write_content_file(root, content_type, name, frontmatter, body)
    return root


@pytest.fixture
def verticals_file(tmp_path: Path) -> Path:
    path = tmp_path / "verticals.json"
    path.write_text(json.dumps(TEST_VERTICALS), encoding="utf-8")
    return path


@pytest.fixture
def registry(verticals_file: Path) -> VerticalRegistry:
    return VerticalRegistry(load_verticals(verticals_file))


@pytest.fixture
def content_store(content_dir: Path, registry: VerticalRegistry) -> ContentStore:
    return ContentStore(MarkdownContentSource(content_dir), registry)


@pytest.fixture
def make_item() -> Callable[..., ContentItem]:
    """Factory for in-memory content items."""

    def _make(
        slug: str,
        vertical: str = "budget-travel",
        content_type: ContentType = ContentType.DESTINATIONS,
        **frontmatter: Any,
    ) -> ContentItem:
        frontmatter.setdefault("title", slug.replace("-", " ").title())
        return ContentItem(
            type=content_type,
            vertical=vertical,
            slug=slug,
            frontmatter=Frontmatter.model_validate(frontmatter),
        )

    return _make


@pytest.fixture
def async_app(
    monkeypatch: pytest.MonkeyPatch, content_dir: Path, verticals_file: Path
) -> FastAPI:
    """Creates a FastAPI app that serves the temporary content tree."""
    monkeypatch.setattr(config.settings, "environment", "test")
    monkeypatch.setattr(config.settings, "content_backend", "markdown")
    monkeypatch.setattr(config.settings, "content_dir", content_dir)
    monkeypatch.setattr(config.settings, "verticals_file", verticals_file)
    monkeypatch.setattr(config.settings, "affiliate_partners_file", None)
    monkeypatch.setattr(config.settings, "site_url", "https://example.com")

    return create_app()


@pytest_asyncio.fixture(scope="function")
async def async_http_client(async_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Creates an async http client with fresh rate limit counters."""
    limiter.reset()
    transport = ASGITransport(app=async_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def write_content() -> Callable[..., Path]:
    return write_content_file
