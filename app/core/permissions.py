"""
Authorization predicates for job resources.

Kept free of the database and request objects so they can be tested on
plain model instances.
"""

from uuid import UUID

from app.models.job import Job


def is_job_owner(job: Job, user_id: UUID) -> bool:
    """Return True if user_id is the user who posted the job."""
    return job.posted_by is not None and str(job.posted_by) == str(user_id)
