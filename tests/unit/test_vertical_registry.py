"""Unit tests for vertical models, catalogue loading and the registry."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.verticals import FeatureIcon, Vertical, VerticalRegistry, load_verticals
from app.verticals.catalog import DEFAULT_VERTICALS


def _vertical(slug: str) -> Vertical:
    return Vertical(slug=slug, display_name=slug.title())


def test_default_catalogue_loads() -> None:
    """Test that the built-in catalogue is valid and keeps declaration order."""
    registry = VerticalRegistry(load_verticals())

    assert registry.get_vertical_slugs() == [entry["slug"] for entry in DEFAULT_VERTICALS]
    assert len(registry) == len(DEFAULT_VERTICALS)


def test_load_verticals_from_file(registry: VerticalRegistry) -> None:
    """Test that an operator file replaces the built-in catalogue."""
    assert registry.get_vertical_slugs() == ["budget-travel", "luxury"]


def test_get_vertical_by_slug(registry: VerticalRegistry) -> None:
    vertical = registry.get_vertical_by_slug("budget-travel")

    assert vertical is not None
    assert vertical.display_name == "Budget Travel"


def test_unknown_slug_is_absent_not_an_error(registry: VerticalRegistry) -> None:
    assert registry.get_vertical_by_slug("nonexistent") is None
    assert registry.is_valid_vertical("nonexistent") is False


def test_lookup_is_case_sensitive(registry: VerticalRegistry) -> None:
    assert registry.get_vertical_by_slug("Budget-Travel") is None
    assert registry.is_valid_vertical("budget-travel") is True


def test_get_all_verticals_is_stable(registry: VerticalRegistry) -> None:
    assert registry.get_all_verticals() == registry.get_all_verticals()


def test_unknown_feature_icon_falls_back_to_sparkles(registry: VerticalRegistry) -> None:
    """Test that an unknown icon name resolves to the default icon."""
    vertical = registry.get_vertical_by_slug("budget-travel")
    assert vertical is not None

    assert [feature.icon for feature in vertical.features] == [
        FeatureIcon.WALLET,
        FeatureIcon.SPARKLES,
    ]


def test_duplicate_slugs_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate vertical slug: budget"):
        VerticalRegistry([_vertical("budget"), _vertical("luxury"), _vertical("budget")])


@pytest.mark.parametrize("slug", ["api", "admin", "all"])
def test_reserved_slugs_rejected(slug: str) -> None:
    with pytest.raises(ValidationError, match="reserved"):
        _vertical(slug)


@pytest.mark.parametrize("slug", ["Budget", "budget travel", "-budget", "budget/", ""])
def test_malformed_slugs_rejected(slug: str) -> None:
    with pytest.raises(ValidationError):
        _vertical(slug)


def test_invalid_verticals_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "verticals.json"
    path.write_text('[{"slug": "budget"}]', encoding="utf-8")

    with pytest.raises(ValidationError):
        load_verticals(path)
