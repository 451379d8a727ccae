"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer. Every function takes
the Session explicitly; callers own its lifetime.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest

UPDATABLE_FIELDS = (
    "title",
    "description",
    "company",
    "location",
    "salary",
    "requirements",
    "contact_name",
    "contact_email",
)


def create(db: Session, job_data: JobCreateRequest, owner_id: UUID) -> Job:
    """
    Create a new job owned by owner_id.

    Args:
        db: Database session
        job_data: Job fields from the request body
        owner_id: Authenticated caller, always used as posted_by

    Returns:
        Created Job instance with id and created_at
    """
    db_job = Job(
        **job_data.model_dump(include=set(UPDATABLE_FIELDS)),
        posted_by=owner_id,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """Retrieve a job by its ID, or None."""
    return db.query(Job).filter(Job.id == job_id).first()


def get_all(db: Session) -> List[Job]:
    """
    Retrieve every job, newest first, with the owner loaded for projection.
    """
    return (
        db.query(Job)
        .options(joinedload(Job.owner))
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def get_by_owner(db: Session, owner_id: UUID) -> List[Job]:
    """Retrieve the jobs posted by owner_id, newest first."""
    return (
        db.query(Job)
        .filter(Job.posted_by == owner_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def merge_fields(job: Job, changes: Dict[str, Any]) -> Job:
    """
    Copy truthy values from changes onto job.

    Empty strings, zero and None keep the stored value, so a field can't be
    cleared through an update.
    """
    for field in UPDATABLE_FIELDS:
        value = changes.get(field)
        if value:
            setattr(job, field, value)
    return job


def update(db: Session, job: Job, job_data: JobUpdateRequest) -> Job:
    """
    Merge job_data into an already fetched job and save it.

    No version check is made between fetch and save; the last write wins.
    """
    merge_fields(job, job_data.model_dump())

    db.commit()
    db.refresh(job)

    return job
