from sqlalchemy import Column, String, Text
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class Job(TimestampedMixin, Base):
    """
    Job listing shown on the careers page.
    """
    __tablename__ = "jobs"

    title = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"
