"""
CRUD operations for Image model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sitecms.models.image import Image
from sitecms.schemas.image import ImageCreateRequest


def create(db: Session, image_data: ImageCreateRequest) -> Image:
    image = Image(
        category=image_data.category.value,
        src=image_data.src,
        alt=image_data.alt or "",
    )

    db.add(image)
    db.commit()
    db.refresh(image)

    return image


def get_by_id(db: Session, image_id: UUID) -> Optional[Image]:
    return db.query(Image).filter(Image.id == image_id).first()


def get_multi(db: Session, category: Optional[str] = None) -> List[Image]:
    """
    Retrieve images newest first, optionally restricted to one category.

    An unknown category matches nothing and yields an empty list.
    """
    query = db.query(Image)

    if category:
        query = query.filter(Image.category == category)

    return query.order_by(Image.created_at.desc()).all()


def update(db: Session, image_id: UUID, changes: dict) -> Optional[Image]:
    image = get_by_id(db, image_id)
    if not image:
        return None

    if "category" in changes:
        changes["category"] = changes["category"].value
    if "alt" in changes and changes["alt"] is None:
        changes["alt"] = ""

    for field, value in changes.items():
        setattr(image, field, value)

    db.commit()
    db.refresh(image)

    return image


def delete(db: Session, image_id: UUID) -> Optional[Image]:
    """
    Delete an image record.

    Returns:
        The deleted Image (so the caller can clean up its file), None if not found
    """
    image = get_by_id(db, image_id)
    if not image:
        return None

    db.delete(image)
    db.commit()

    return image
