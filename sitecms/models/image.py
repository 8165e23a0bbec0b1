import enum
from sqlalchemy import Column, String
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class ImageCategory(str, enum.Enum):
    """
    Gallery an image belongs to.

    - HOME: home page slider
    - ABOUT: about page gallery
    - GENERAL: anything else
    - CAREER_GLOBE: rotating globe on the careers page
    """
    HOME = "home"
    ABOUT = "about"
    GENERAL = "general"
    CAREER_GLOBE = "career-globe"


class Image(TimestampedMixin, Base):
    __tablename__ = "images"

    # Stored as the plain enum value so unknown filters simply match nothing
    category = Column(String, nullable=False, index=True)
    src = Column(String, nullable=False)
    alt = Column(String, nullable=False, default="")

    def __repr__(self):
        return f"<Image(id={self.id}, category='{self.category}', src='{self.src}')>"
