"""
Pydantic schemas for job postings.

Field names are snake_case in Python and camelCase on the wire
(contactName, postedBy, createdAt, ...).
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel
from typing import Optional, Union
from datetime import datetime
from uuid import UUID


# StrictBool first: JSON true stays true instead of becoming 1
Salary = Union[StrictBool, int, float, str]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        # Numbers posted into text fields are kept as text, not rejected
        coerce_numbers_to_str=True,
    )


class JobFields(CamelModel):
    """
    Editable job fields. All optional: presence is the only check made.

    Unknown keys such as postedBy are ignored, so ownership can't be
    set from the body.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[Salary] = None
    requirements: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None


class JobCreateRequest(JobFields):
    """Schema for creating a new job"""


class JobUpdateRequest(JobFields):
    """Schema for updating a job. Falsy values leave the stored field as is."""


class OwnerProjection(CamelModel):
    """Public slice of the posting user's profile"""
    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image: Optional[str] = None
    headline: Optional[str] = None


class JobResponse(JobFields):
    """Schema for job response"""
    id: int
    posted_by: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None


class JobWithOwnerResponse(JobFields):
    """Job listing entry with the owner's profile in place of the owner id"""
    id: int
    owner: Optional[OwnerProjection] = Field(
        default=None,
        validation_alias="owner",
        serialization_alias="postedBy",
    )
    created_at: datetime
    updated_at: Optional[datetime] = None
