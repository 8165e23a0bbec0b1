import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.deps import parse_id
from sitecms.core.errors import ValidationFailed
from sitecms.crud import page_content as page_crud
from sitecms.crud import user as user_crud
from sitecms.schemas.page_content import PageContentSaveRequest

router = APIRouter(prefix="/pages", tags=["Page Content"])
logger = logging.getLogger(__name__)


@router.get("/{page_id}", response_model=Dict[str, Any])
def get_page_content(page_id: str, db: Session = Depends(get_db)):
    """
    Return the stored content map for a page.

    A page that was never saved returns an empty map rather than 404.
    """
    return page_crud.get_content(db, page_id)


@router.post("/{page_id}", response_model=Dict[str, Any])
def save_page_content(page_id: str, request: PageContentSaveRequest, db: Session = Depends(get_db)):
    """
    Create or replace the content of a page.

    The new content map replaces the stored one entirely; keys missing from
    the request are dropped.
    """
    updated_by = None
    if request.last_updated_by is not None:
        updated_by = parse_id(request.last_updated_by, "user")
        if not user_crud.get_by_id(db, updated_by):
            raise ValidationFailed("last_updated_by does not reference an existing user")

    page = page_crud.upsert(db, page_id, request.content, updated_by=updated_by)
    logger.info(f"Saved content for page '{page_id}' ({len(page.content)} keys)")
    return page.content
