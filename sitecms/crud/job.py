"""
Repository functions for job listings.

Routes never touch the session directly; they call these.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sitecms.models.job import Job
from sitecms.schemas.job import JobCreateRequest


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id and timestamps
    """
    db_job = Job(
        title=job_data.title,
        location=job_data.location,
        description=job_data.description,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def get_multi(db: Session) -> List[Job]:
    """
    Retrieve all jobs, newest first.
    """
    return db.query(Job).order_by(Job.created_at.desc()).all()


def update(db: Session, job_id: UUID, changes: dict) -> Optional[Job]:
    """
    Merge the supplied fields into an existing job.

    Args:
        db: Database session
        job_id: Job ID to update
        changes: Already-validated field values; absent fields are left untouched

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: UUID) -> bool:
    """
    Delete a job by ID.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True
