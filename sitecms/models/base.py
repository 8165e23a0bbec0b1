import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedMixin:
    """
    Server-generated UUID primary key plus created/updated timestamps.

    Timestamps are set application-side with microsecond precision so that
    newest-first ordering stays stable for rapid successive inserts.
    """

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
