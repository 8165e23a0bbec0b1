"""
CRUD operations for Service model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sitecms.models.service import Service
from sitecms.schemas.service import ServiceCreateRequest


def create(db: Session, service_data: ServiceCreateRequest) -> Service:
    db_service = Service(
        title=service_data.title,
        description=service_data.description,
    )

    db.add(db_service)
    db.commit()
    db.refresh(db_service)

    return db_service


def get_by_id(db: Session, service_id: UUID) -> Optional[Service]:
    return db.query(Service).filter(Service.id == service_id).first()


def get_multi(db: Session) -> List[Service]:
    return db.query(Service).order_by(Service.created_at.desc()).all()


def update(db: Session, service_id: UUID, changes: dict) -> Optional[Service]:
    service = get_by_id(db, service_id)
    if not service:
        return None

    for field, value in changes.items():
        setattr(service, field, value)

    db.commit()
    db.refresh(service)

    return service


def delete(db: Session, service_id: UUID) -> bool:
    service = get_by_id(db, service_id)
    if not service:
        return False

    db.delete(service)
    db.commit()

    return True
