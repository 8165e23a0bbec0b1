from sqlalchemy import Column, Integer, String, Text
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class TeamMember(TimestampedMixin, Base):
    """Person shown on the team page, displayed by ascending order."""
    __tablename__ = "team_members"

    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    bio = Column(Text, nullable=False)
    image = Column(String, nullable=True)  # URL
    order = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<TeamMember(id={self.id}, name='{self.name}')>"
