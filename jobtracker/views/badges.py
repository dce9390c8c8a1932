# =============================================
# jobtracker/views/badges.py
# =============================================
from typing import Optional

from jobtracker.schemas.enums import (
    DEFAULT_RELATIONSHIP_VARIANT,
    DEFAULT_STATUS_VARIANT,
    RELATIONSHIP_BADGE_VARIANTS,
    STATUS_BADGE_VARIANTS,
)


def status_badge(status: Optional[str]) -> str:
    """Colour variant for an application status"""
    return STATUS_BADGE_VARIANTS.get(status, DEFAULT_STATUS_VARIANT)


def relationship_badge(relationship: Optional[str]) -> str:
    """Colour variant for a contact relationship"""
    return RELATIONSHIP_BADGE_VARIANTS.get(relationship, DEFAULT_RELATIONSHIP_VARIANT)
