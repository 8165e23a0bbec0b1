"""
Editable content blocks for a single page of the site.

One row per page_id; content is a free-form JSON object replaced
wholesale on every save.
"""

from sqlalchemy import Column, ForeignKey, JSON, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class PageContent(TimestampedMixin, Base):
    __tablename__ = "page_contents"

    page_id = Column(String, unique=True, nullable=False, index=True)
    content = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=dict)

    # Non-owning reference to the editor; lookup only
    last_updated_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<PageContent(page_id='{self.page_id}')>"
