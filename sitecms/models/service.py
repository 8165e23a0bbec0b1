from sqlalchemy import Column, String, Text
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class Service(TimestampedMixin, Base):
    """Service offered by the business."""
    __tablename__ = "services"

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Service(id={self.id}, title='{self.title}')>"
