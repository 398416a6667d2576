from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings

_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None
_database_url: str | None = None


def _build_session_maker(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(database_url, pool_pre_ping=True)
    session_maker = async_sessionmaker[AsyncSession](
        bind=engine, class_=AsyncSession, expire_on_commit=False
    )
    return engine, session_maker


def get_engine() -> AsyncEngine:
    global _engine, _session_maker, _database_url
    if settings.database_url is None:
        raise RuntimeError("DATABASE_URL is not configured")
    database_url = str(settings.database_url)
    if _engine is None or _database_url != database_url:
        if _engine is not None:
            _engine.sync_engine.dispose()
        _engine, _session_maker = _build_session_maker(database_url)
        _database_url = database_url
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    get_engine()
    assert _session_maker is not None
    return _session_maker


async def dispose_engine() -> None:
    """Dispose the engine if one was created. Safe to call when none exists."""
    global _engine, _session_maker, _database_url
    if _engine is not None:
        await _engine.dispose()
    _engine, _session_maker, _database_url = None, None, None
