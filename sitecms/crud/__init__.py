"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from sitecms.crud import image, job, page_content, service, team_member, user

__all__ = ["image", "job", "page_content", "service", "team_member", "user"]
