from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship
from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    """
    Job posting owned by the user who created it.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)
    company = Column(String, nullable=True)
    location = Column(String, nullable=True)
    # Free text ("80k-100k") or a number, kept as posted
    salary = Column(JSON, nullable=True)
    requirements = Column(String, nullable=True)
    contact_name = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)

    # Set once from the authenticated caller, never from the request body
    posted_by = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    # Client-side default keeps microsecond resolution on every backend
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=_utcnow)

    # Relationships
    owner = relationship("User", back_populates="jobs")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', posted_by={self.posted_by})>"
