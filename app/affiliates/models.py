from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.exceptions import InvalidInputError


class AffiliateCategory(StrEnum):
    HOTEL = "hotel"
    TOUR = "tour"
    FLIGHT = "flight"
    ACTIVITY = "activity"

    @classmethod
    def parse(cls, value: str | AffiliateCategory) -> AffiliateCategory:
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidInputError(f"Invalid category. Must be one of: {allowed}") from None


class AffiliatePartner(BaseModel):
    """A third-party booking provider.

    ``url_template`` may reference ``{destination}``, ``{vertical}`` and
    ``{category}``. ``landing_url`` is used instead when a request carries no
    destination.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    url_template: str
    landing_url: str | None = None
    supported_categories: frozenset[AffiliateCategory] = frozenset()
    priority: int = 0
    enabled: bool = True
    verticals: frozenset[str] = Field(
        default=frozenset(), description="Restrict the partner to these verticals; empty means all"
    )
    tracking_params: dict[str, str] = Field(default_factory=dict)

    def supports(self, category: AffiliateCategory | None) -> bool:
        return category is None or category in self.supported_categories

    def allowed_for(self, vertical: str | None) -> bool:
        return not self.verticals or vertical is None or vertical in self.verticals


class AffiliateLinkRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str | None = None
    category: AffiliateCategory | None = None
    vertical: str | None = None
    partner: str | None = None

    @field_validator("destination", "vertical", "partner", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
