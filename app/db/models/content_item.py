from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.content.models import ContentItem
from app.db.base import Base


class ContentItemRecord(Base):
    __tablename__ = "content_items"
    __table_args__ = (
        UniqueConstraint("content_type", "vertical", "slug", name="uq_content_items_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    content_type: Mapped[str] = mapped_column(String(32), index=True)
    vertical: Mapped[str] = mapped_column(String(100), index=True)
    slug: Mapped[str] = mapped_column(String(200))

    # Same keys as markdown front matter (title, description, tags, date, ...)
    frontmatter: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    body: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def to_content_item(self) -> ContentItem:
        return ContentItem.model_validate(
            {
                "type": self.content_type,
                "vertical": self.vertical,
                "slug": self.slug,
                "frontmatter": self.frontmatter or {},
                "body": self.body or "",
            }
        )
