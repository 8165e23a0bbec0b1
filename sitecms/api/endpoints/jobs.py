import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.deps import parse_id
from sitecms.core.errors import NotFound
from sitecms.crud import job as job_crud
from sitecms.schemas.common import DeleteResponse
from sitecms.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """
    List all job postings, newest first.
    """
    return job_crud.get_multi(db)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(request: JobCreateRequest, db: Session = Depends(get_db)):
    """
    Create a new job posting.

    title, location and description are required and must not be empty.
    """
    new_job = job_crud.create(db, request)
    logger.info(f"Created job {new_job.id}: {new_job.title}")
    return new_job


@router.put("/{job_id}", response_model=JobResponse)
def update_job(job_id: str, request: JobUpdateRequest, db: Session = Depends(get_db)):
    """
    Update the supplied fields of a job; other fields are left untouched.
    """
    job = job_crud.update(db, parse_id(job_id, "job"), request.changes())

    if not job:
        raise NotFound("Job not found")

    logger.info(f"Updated job {job.id}")
    return job


@router.delete("/{job_id}", response_model=DeleteResponse)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """
    Delete a job by ID.
    """
    uid = parse_id(job_id, "job")
    deleted = job_crud.delete(db, uid)

    if not deleted:
        raise NotFound("Job not found")

    logger.info(f"Deleted job {uid}")
    return DeleteResponse(message="Job deleted successfully", id=uid)
