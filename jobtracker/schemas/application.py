# =============================================
# jobtracker/schemas/application.py
# =============================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from jobtracker.core.validators import (
    blank_to_none,
    clean_optional_text,
    clean_required_text,
    to_naive_utc,
)
from jobtracker.schemas.common import INPUT_CONFIG, OUTPUT_CONFIG, PartialUpdate, as_utc
from jobtracker.schemas.enums import ApplicationStatus

REQUIRED_LABELS = {
    "company": "Company name",
    "position": "Position title",
    "status": "Status",
    "application_date": "Application date",
}
OPTIONAL_TEXT_FIELDS = ("job_description", "job_link", "location", "salary", "next_steps", "notes")
# blank input for these carries no value; on update it counts as null
BLANK_MEANS_NULL = ("status", "application_date")


# =============================================
# CREATE SCHEMA
# =============================================
class ApplicationCreate(BaseModel):
    """Schema for creating an application; also validates merged documents on update"""
    model_config = INPUT_CONFIG

    company: str = Field(..., max_length=255, description="Company name")
    position: str = Field(..., max_length=255, description="Position title")
    job_description: Optional[str] = Field(None, description="Job description")
    job_link: Optional[str] = Field(None, max_length=2048, description="Link to the posting")
    location: Optional[str] = Field(None, max_length=255)
    salary: Optional[str] = Field(None, max_length=255)
    application_date: Optional[datetime] = Field(None, description="Defaults to creation time")
    status: ApplicationStatus = Field(ApplicationStatus.BOOKMARKED, validate_default=True)
    next_steps: Optional[str] = None
    notes: Optional[str] = None
    contact_id: Optional[UUID] = Field(None, description="Linked contact (not enforced)")

    @field_validator("company", "position")
    @classmethod
    def validate_required_text(cls, v, info):
        return clean_required_text(v, REQUIRED_LABELS[info.field_name])

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def validate_optional_text(cls, v):
        return clean_optional_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        return blank_to_none(v) or ApplicationStatus.BOOKMARKED

    @field_validator("contact_id", "application_date", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @field_validator("application_date")
    @classmethod
    def validate_application_date(cls, v):
        return to_naive_utc(v)


# =============================================
# UPDATE SCHEMA
# =============================================
class ApplicationUpdate(PartialUpdate):
    """Schema for partial application updates (all fields optional)"""

    company: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=255)
    job_description: Optional[str] = None
    job_link: Optional[str] = Field(None, max_length=2048)
    location: Optional[str] = Field(None, max_length=255)
    salary: Optional[str] = Field(None, max_length=255)
    application_date: Optional[datetime] = None
    status: Optional[ApplicationStatus] = None
    next_steps: Optional[str] = None
    notes: Optional[str] = None
    contact_id: Optional[UUID] = None

    @field_validator("company", "position", "status", "application_date", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        if v is None or (info.field_name in BLANK_MEANS_NULL and blank_to_none(v) is None):
            raise ValueError(f"{REQUIRED_LABELS[info.field_name]} cannot be null")
        return v

    @field_validator("company", "position")
    @classmethod
    def validate_required_text(cls, v, info):
        return clean_required_text(v, REQUIRED_LABELS[info.field_name])

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def validate_optional_text(cls, v):
        return clean_optional_text(v)

    @field_validator("contact_id", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @field_validator("application_date")
    @classmethod
    def validate_application_date(cls, v):
        return to_naive_utc(v)


# =============================================
# RESPONSE SCHEMA
# =============================================
class ApplicationResponse(BaseModel):
    """Schema for API responses"""
    model_config = OUTPUT_CONFIG

    id: UUID
    company: str
    position: str
    job_description: Optional[str] = None
    job_link: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    application_date: datetime
    status: ApplicationStatus
    next_steps: Optional[str] = None
    notes: Optional[str] = None
    contact_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("application_date", "created_at", "updated_at")
    @classmethod
    def tag_utc(cls, v):
        return as_utc(v)
