"""
API endpoints for gallery images.

Images are either uploaded first (POST /upload returns the URL) or point at
an externally hosted file. Deleting an image whose src lives under the local
uploads mount also removes the file.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.deps import get_local_uploads, parse_id
from sitecms.core.errors import NotFound
from sitecms.core.storage import LocalStorage
from sitecms.crud import image as image_crud
from sitecms.schemas.common import DeleteResponse
from sitecms.schemas.image import ImageCreateRequest, ImageResponse, ImageUpdateRequest

router = APIRouter(prefix="/images", tags=["Images"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ImageResponse])
def list_images(category: Optional[str] = None, db: Session = Depends(get_db)):
    """
    List images newest first.

    Args:
        category: Optional exact-match filter (home, about, general, career-globe)
    """
    return image_crud.get_multi(db, category=category)


@router.get("/{category}", response_model=List[ImageResponse])
def list_images_by_category(category: str, db: Session = Depends(get_db)):
    """Path form of the category filter."""
    return image_crud.get_multi(db, category=category)


@router.post("", status_code=201, response_model=ImageResponse)
def create_image(request: ImageCreateRequest, db: Session = Depends(get_db)):
    image = image_crud.create(db, request)
    logger.info(f"Created image {image.id} in '{image.category}'")
    return image


@router.put("/{image_id}", response_model=ImageResponse)
def update_image(image_id: str, request: ImageUpdateRequest, db: Session = Depends(get_db)):
    image = image_crud.update(db, parse_id(image_id, "image"), request.changes())

    if not image:
        raise NotFound("Image not found")

    return image


@router.delete("/{image_id}", response_model=DeleteResponse)
def delete_image(
    image_id: str,
    db: Session = Depends(get_db),
    local_uploads: LocalStorage = Depends(get_local_uploads)
):
    """
    Delete an image record and, when it was stored locally, its file.
    """
    uid = parse_id(image_id, "image")
    image = image_crud.delete(db, uid)

    if not image:
        raise NotFound("Image not found")

    # No-op for remote-hosted URLs
    local_uploads.delete_file(image.src)

    logger.info(f"Deleted image {uid}")
    return DeleteResponse(message="Image deleted successfully", id=uid)
