"""
Database models package.
"""

from sitecms.models.job import Job
from sitecms.models.image import Image, ImageCategory
from sitecms.models.service import Service
from sitecms.models.team_member import TeamMember
from sitecms.models.page_content import PageContent
from sitecms.models.user import User

__all__ = ["Job", "Image", "ImageCategory", "Service", "TeamMember", "PageContent", "User"]
