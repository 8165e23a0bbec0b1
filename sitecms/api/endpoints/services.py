import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.deps import parse_id
from sitecms.core.errors import NotFound
from sitecms.crud import service as service_crud
from sitecms.schemas.common import DeleteResponse
from sitecms.schemas.service import ServiceCreateRequest, ServiceResponse, ServiceUpdateRequest

router = APIRouter(prefix="/services", tags=["Services"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ServiceResponse])
def list_services(db: Session = Depends(get_db)):
    return service_crud.get_multi(db)


@router.post("", status_code=201, response_model=ServiceResponse)
def create_service(request: ServiceCreateRequest, db: Session = Depends(get_db)):
    service = service_crud.create(db, request)
    logger.info(f"Created service {service.id}: {service.title}")
    return service


@router.put("/{service_id}", response_model=ServiceResponse)
def update_service(service_id: str, request: ServiceUpdateRequest, db: Session = Depends(get_db)):
    service = service_crud.update(db, parse_id(service_id, "service"), request.changes())

    if not service:
        raise NotFound("Service not found")

    logger.info(f"Updated service {service.id}")
    return service


@router.delete("/{service_id}", response_model=DeleteResponse)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    uid = parse_id(service_id, "service")

    if not service_crud.delete(db, uid):
        raise NotFound("Service not found")

    logger.info(f"Deleted service {uid}")
    return DeleteResponse(message="Service deleted successfully", id=uid)
