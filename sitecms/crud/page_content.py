"""
CRUD operations for PageContent model.

Pages are never created or deleted explicitly: the first save inserts the
row, later saves replace its content wholesale.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sitecms.models.page_content import PageContent

logger = logging.getLogger(__name__)


def get_by_page_id(db: Session, page_id: str) -> Optional[PageContent]:
    return db.query(PageContent).filter(PageContent.page_id == page_id).first()


def get_content(db: Session, page_id: str) -> Dict[str, Any]:
    """Stored content map, or an empty map for a page never saved."""
    page = get_by_page_id(db, page_id)
    return dict(page.content) if page else {}


def upsert(
    db: Session,
    page_id: str,
    content: Dict[str, Any],
    updated_by: Optional[UUID] = None
) -> PageContent:
    """
    Insert the page if absent, else replace its content.

    Args:
        db: Database session
        page_id: Page key
        content: New content map (no field-level merge with the old one)
        updated_by: Optional id of the editing user

    Returns:
        The stored PageContent
    """
    page = get_by_page_id(db, page_id)
    if page is None:
        page = PageContent(page_id=page_id, content=content, last_updated_by=updated_by)
        db.add(page)
        try:
            db.commit()
        except IntegrityError:
            # Another request inserted the same page first; replace its content instead
            db.rollback()
            logger.info(f"Concurrent insert for page '{page_id}', retrying as update")
            page = get_by_page_id(db, page_id)
            if page is None:
                raise
            _replace(db, page, content, updated_by)
    else:
        _replace(db, page, content, updated_by)

    db.refresh(page)
    return page


def _replace(db: Session, page: PageContent, content: Dict[str, Any], updated_by: Optional[UUID]) -> None:
    page.content = content
    page.last_updated_by = updated_by
    db.commit()
