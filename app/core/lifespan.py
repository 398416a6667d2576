from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.content.sources import ContentSource
from app.core.config import settings
from app.core.exceptions import ContentSourceUnavailableError
from app.db.session import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan context manager for startup/shutdown events."""
    try:
        # Startup
        if settings.environment != "test":
            await verify_content_source(app.state.services["content_source"])
        yield

        # Shutdown
    finally:
        await dispose_engine()


async def verify_content_source(source: ContentSource) -> None:
    """Verify the content source is readable at startup. Raises if it is not."""
    try:
        await source.check()
    except ContentSourceUnavailableError as e:
        raise RuntimeError(f"Content source is unavailable: {e}") from e
