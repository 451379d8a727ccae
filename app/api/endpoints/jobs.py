import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.permissions import is_job_owner
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobWithOwnerResponse,
)

router = APIRouter(tags=["Jobs"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


@router.post("/create", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new job posting owned by the current user.

    Any postedBy value in the body is ignored.
    """
    try:
        new_job = job_crud.create(db, request, owner_id=current_user.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error creating job for user {current_user.id}")
        raise HTTPException(status_code=500, detail="Error creating job")

    logger.info(f"Created job {new_job.id}: {new_job.title} | posted by {current_user.id}")
    return new_job


@router.get("/all", response_model=list[JobWithOwnerResponse])
def list_jobs(db: Session = Depends(get_db)):
    """
    List every job, newest first, with the poster's name, headline and image.
    """
    try:
        return job_crud.get_all(db)
    except SQLAlchemyError:
        logger.exception("Error fetching jobs")
        raise HTTPException(status_code=500, detail="Error fetching jobs")


@router.get("/myjobs", response_model=list[JobResponse])
def list_my_jobs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List the current user's jobs, newest first."""
    try:
        return job_crud.get_by_owner(db, current_user.id)
    except SQLAlchemyError:
        logger.exception(f"Error fetching jobs for user {current_user.id}")
        raise HTTPException(status_code=500, detail="Error fetching my jobs")


@router.put("/update/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update a job posted by the current user.

    Only non-empty, non-zero values replace stored ones; omitted, empty or
    zero fields keep their current value.

    Raises 404 if the job doesn't exist and 403 if the caller didn't post it.
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except SQLAlchemyError:
        logger.exception(f"Error loading job {job_id}")
        raise HTTPException(status_code=500, detail="Error updating job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    if not is_job_owner(job, current_user.id):
        raise HTTPException(status_code=403, detail="Unauthorized to update this job")

    try:
        updated_job = job_crud.update(db, job, request)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error updating job {job_id}")
        raise HTTPException(status_code=500, detail="Error updating job")

    logger.info(f"Updated job {job_id} | by {current_user.id}")
    return updated_job
