"""
FastAPI dependencies for the collaborators owned by the application.

The application factory places the database handle, storage backend and
email provider on app.state; routes pull them from the request.
"""

from typing import Optional
from uuid import UUID

from fastapi import Request

from sitecms.core.config import Settings
from sitecms.core.errors import ValidationFailed
from sitecms.core.storage import LocalStorage, StorageBackend
from sitecms.services.email_service import EmailProvider


def parse_id(raw_id: str, resource: str) -> UUID:
    """
    Parse a path identifier.

    Raises:
        ValidationFailed (400): If the id is not a well-formed UUID
    """
    try:
        return UUID(raw_id)
    except (ValueError, TypeError, AttributeError):
        raise ValidationFailed(f"Invalid {resource} ID format")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Optional[StorageBackend]:
    """Configured upload backend, None when it could not be set up."""
    return request.app.state.storage


def get_local_uploads(request: Request) -> LocalStorage:
    """Directory behind the static /uploads mount."""
    return request.app.state.local_uploads


def get_email_provider(request: Request) -> Optional[EmailProvider]:
    """Configured email provider, None when no credentials are set."""
    return request.app.state.email_provider
