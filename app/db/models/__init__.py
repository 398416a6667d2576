from app.db.models.content_item import ContentItemRecord

__all__ = ["ContentItemRecord"]
