"""
Database models package.
"""

from app.models.job import Job
from app.models.user import User

__all__ = ["Job", "User"]
