from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from app.content.sources import MarkdownContentSource
from app.core import lifespan as lifespan_module
from app.core.lifespan import lifespan, verify_content_source


def _app_with_source(source: object) -> FastAPI:
    app = FastAPI()
    app.state.services = {"content_source": source}
    return app


@pytest.mark.asyncio
async def test_verify_content_source_success(content_dir: Path) -> None:
    """Test that verification succeeds when the content tree exists."""
    await verify_content_source(MarkdownContentSource(content_dir))


@pytest.mark.asyncio
async def test_verify_content_source_failure(tmp_path: Path) -> None:
    """Test that verification raises when the content tree is missing."""
    with pytest.raises(RuntimeError, match="Content source is unavailable"):
        await verify_content_source(MarkdownContentSource(tmp_path / "missing"))


@pytest.mark.asyncio
async def test_lifespan_skips_check_in_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that lifespan skips source verification in test environment."""
    monkeypatch.setattr(lifespan_module.settings, "environment", "test")
    with patch("app.core.lifespan.verify_content_source") as mock_verify:
        async with lifespan(_app_with_source(object())):
            pass

        mock_verify.assert_not_called()


@pytest.mark.asyncio
async def test_lifespan_verifies_source_in_non_test_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that lifespan verifies the configured source in non-test environments."""
    monkeypatch.setattr(lifespan_module.settings, "environment", "local")
    source = object()
    with patch("app.core.lifespan.verify_content_source") as mock_verify:
        mock_verify.return_value = None
        async with lifespan(_app_with_source(source)):
            pass

        mock_verify.assert_called_once_with(source)


@pytest.mark.asyncio
async def test_lifespan_disposes_engine_on_shutdown(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that lifespan disposes the database engine on shutdown."""
    monkeypatch.setattr(lifespan_module.settings, "environment", "test")
    with patch("app.core.lifespan.dispose_engine", new_callable=AsyncMock) as mock_dispose:
        async with lifespan(_app_with_source(object())):
            pass

        mock_dispose.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_disposes_engine_even_if_startup_fails(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that the engine is disposed even if startup verification fails."""
    monkeypatch.setattr(lifespan_module.settings, "environment", "local")
    with patch("app.core.lifespan.dispose_engine", new_callable=AsyncMock) as mock_dispose:
        with patch(
            "app.core.lifespan.verify_content_source",
            side_effect=RuntimeError("Content source is unavailable"),
        ):
            with pytest.raises(RuntimeError):
                async with lifespan(_app_with_source(object())):
                    pass

            # Engine should still be disposed even if startup fails
            mock_dispose.assert_awaited_once()
