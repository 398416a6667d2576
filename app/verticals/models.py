from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

SLUG_PATTERN: Final[str] = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Top-level path segments owned by the platform itself.
RESERVED_PATH_SEGMENTS: Final[frozenset[str]] = frozenset({"api", "admin"})
# Content stored under this vertical is listed in every vertical.
SHARED_VERTICAL: Final[str] = "all"
RESERVED_VERTICAL_SLUGS: Final[frozenset[str]] = RESERVED_PATH_SEGMENTS | {SHARED_VERTICAL}


class FeatureIcon(StrEnum):
    """Icon names a vertical feature card may use."""

    BINOCULARS = "Binoculars"
    BOOK_OPEN = "BookOpen"
    BUILDING = "Building"
    CAMERA = "Camera"
    CHURCH = "Church"
    CROWN = "Crown"
    HEART = "Heart"
    MAP_PIN = "MapPin"
    MOUNTAIN = "Mountain"
    PIGGY_BANK = "PiggyBank"
    PLANE = "Plane"
    ROUTE = "Route"
    SPARKLES = "Sparkles"
    SUN = "Sun"
    UMBRELLA = "Umbrella"
    WALLET = "Wallet"
    WAVE = "Wave"

    @classmethod
    def resolve(cls, name: str) -> FeatureIcon:
        """Map an icon name to a known icon, falling back to ``Sparkles``."""
        try:
            return cls(name)
        except ValueError:
            logger.debug("Unknown feature icon %r, using %s", name, cls.SPARKLES.value)
            return cls.SPARKLES


class ColorScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    text_gradient: str
    glow_color: str


class Hero(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    placeholder: str


class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)

    icon: FeatureIcon = FeatureIcon.SPARKLES
    title: str
    description: str
    color: str

    @field_validator("icon", mode="before")
    @classmethod
    def resolve_icon(cls, value: Any) -> FeatureIcon:
        if isinstance(value, FeatureIcon):
            return value
        return FeatureIcon.resolve(str(value))


class VerticalMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    focus: tuple[str, ...] = ()
    target_audience: str = ""


class Vertical(BaseModel):
    """A themed sub-site sharing the platform."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., pattern=SLUG_PATTERN, description="URL slug, e.g. 'budget'")
    display_name: str = Field(..., min_length=1)
    short_name: str = ""
    description: str = ""
    hero: Hero | None = None
    colors: ColorScheme | None = None
    features: tuple[Feature, ...] = ()
    keywords: tuple[str, ...] = ()
    meta: VerticalMeta | None = None

    @field_validator("slug")
    @classmethod
    def reject_reserved_slug(cls, value: str) -> str:
        if value in RESERVED_VERTICAL_SLUGS:
            raise ValueError(f"Vertical slug '{value}' is reserved")
        return value
