# =============================================
# jobtracker/schemas/contact.py
# =============================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from jobtracker.core.validators import (
    blank_to_none,
    clean_optional_text,
    clean_required_text,
    normalize_email,
    to_naive_utc,
)
from jobtracker.schemas.common import INPUT_CONFIG, OUTPUT_CONFIG, PartialUpdate, as_utc
from jobtracker.schemas.enums import ContactRelationship

OPTIONAL_TEXT_FIELDS = ("company", "position", "phone", "linked_in", "notes")


# =============================================
# CREATE SCHEMA
# =============================================
class ContactCreate(BaseModel):
    """Schema for creating a contact; also validates merged documents on update"""
    model_config = INPUT_CONFIG

    name: str = Field(..., max_length=255, description="Contact name")
    company: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=320, description="Stored lowercased")
    phone: Optional[str] = Field(None, max_length=64)
    linked_in: Optional[str] = Field(None, max_length=2048, description="LinkedIn profile URL")
    relationship: ContactRelationship = Field(ContactRelationship.OTHER, validate_default=True)
    notes: Optional[str] = None
    last_contact_date: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return clean_required_text(v, "Contact name")

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def validate_optional_text(cls, v):
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return normalize_email(v)

    @field_validator("relationship", mode="before")
    @classmethod
    def default_relationship(cls, v):
        return blank_to_none(v) or ContactRelationship.OTHER

    @field_validator("last_contact_date", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @field_validator("last_contact_date")
    @classmethod
    def validate_last_contact_date(cls, v):
        return to_naive_utc(v)


# =============================================
# UPDATE SCHEMA
# =============================================
class ContactUpdate(PartialUpdate):
    """Schema for partial contact updates (all fields optional)"""

    name: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=320)
    phone: Optional[str] = Field(None, max_length=64)
    linked_in: Optional[str] = Field(None, max_length=2048)
    relationship: Optional[ContactRelationship] = None
    notes: Optional[str] = None
    last_contact_date: Optional[datetime] = None

    @field_validator("name", "relationship", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        if v is None or (info.field_name == "relationship" and blank_to_none(v) is None):
            raise ValueError(f"{info.field_name.capitalize()} cannot be null")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return clean_required_text(v, "Contact name")

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def validate_optional_text(cls, v):
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return normalize_email(v)

    @field_validator("last_contact_date", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @field_validator("last_contact_date")
    @classmethod
    def validate_last_contact_date(cls, v):
        return to_naive_utc(v)


# =============================================
# RESPONSE SCHEMA
# =============================================
class ContactResponse(BaseModel):
    """Schema for API responses"""
    model_config = OUTPUT_CONFIG

    id: UUID
    name: str
    company: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linked_in: Optional[str] = None
    relationship: ContactRelationship
    notes: Optional[str] = None
    last_contact_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("last_contact_date", "created_at", "updated_at")
    @classmethod
    def tag_utc(cls, v):
        return as_utc(v)
