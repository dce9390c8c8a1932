# =============================================
# jobtracker/schemas/enums.py
# =============================================
"""
Shared enumerations.

Both validation (schemas, ORM column sizes) and the view layer (filter
dropdowns, sort menus, badge colours) read from these definitions.
"""
from enum import Enum
from typing import Dict, List, Tuple, Type

ALL_OPTION = "All"


class ApplicationStatus(str, Enum):
    BOOKMARKED = "Bookmarked"
    APPLIED = "Applied"
    PHONE_SCREEN = "Phone Screen"
    INTERVIEW = "Interview"
    TECHNICAL_ASSESSMENT = "Technical Assessment"
    OFFER = "Offer"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"
    WITHDRAWN = "Withdrawn"


class ContactRelationship(str, Enum):
    RECRUITER = "Recruiter"
    HIRING_MANAGER = "Hiring Manager"
    TEAM_MEMBER = "Team Member"
    REFERRAL = "Referral"
    NETWORKING = "Networking"
    OTHER = "Other"


# Statuses counted as "interviews" on the dashboard
INTERVIEW_STAGES = frozenset({
    ApplicationStatus.PHONE_SCREEN,
    ApplicationStatus.INTERVIEW,
    ApplicationStatus.TECHNICAL_ASSESSMENT,
})


# =============================================
# BADGE COLOURS
# =============================================
STATUS_BADGE_VARIANTS: Dict[ApplicationStatus, str] = {
    ApplicationStatus.BOOKMARKED: "secondary",
    ApplicationStatus.APPLIED: "primary",
    ApplicationStatus.PHONE_SCREEN: "info",
    ApplicationStatus.INTERVIEW: "warning",
    ApplicationStatus.TECHNICAL_ASSESSMENT: "dark",
    ApplicationStatus.OFFER: "success",
    ApplicationStatus.REJECTED: "danger",
    ApplicationStatus.ACCEPTED: "success",
    ApplicationStatus.WITHDRAWN: "danger",
}
DEFAULT_STATUS_VARIANT = "secondary"

RELATIONSHIP_BADGE_VARIANTS: Dict[ContactRelationship, str] = {
    ContactRelationship.RECRUITER: "primary",
    ContactRelationship.HIRING_MANAGER: "success",
    ContactRelationship.TEAM_MEMBER: "info",
    ContactRelationship.REFERRAL: "warning",
    ContactRelationship.NETWORKING: "secondary",
    ContactRelationship.OTHER: "dark",
}
DEFAULT_RELATIONSHIP_VARIANT = "dark"


# =============================================
# LIST VIEW OPTIONS
# =============================================

def enum_values(enum_cls: Type[Enum]) -> List[str]:
    return [member.value for member in enum_cls]


def max_value_length(enum_cls: Type[Enum]) -> int:
    """Longest value in an enumeration, used to size string columns"""
    return max(len(value) for value in enum_values(enum_cls))


STATUS_FILTER_OPTIONS: List[str] = [ALL_OPTION] + enum_values(ApplicationStatus)
RELATIONSHIP_FILTER_OPTIONS: List[str] = [ALL_OPTION] + enum_values(ContactRelationship)

APPLICATION_SORT_OPTIONS: List[Tuple[str, str]] = [
    ("dateDesc", "Date (Newest First)"),
    ("dateAsc", "Date (Oldest First)"),
    ("companyAsc", "Company (A-Z)"),
    ("companyDesc", "Company (Z-A)"),
    ("statusAsc", "Status"),
]
DEFAULT_APPLICATION_SORT = "dateDesc"

CONTACT_SORT_OPTIONS: List[Tuple[str, str]] = [
    ("nameAsc", "Name (A-Z)"),
    ("nameDesc", "Name (Z-A)"),
    ("companyAsc", "Company (A-Z)"),
    ("companyDesc", "Company (Z-A)"),
    ("recentAsc", "Recently Added"),
]
DEFAULT_CONTACT_SORT = "nameAsc"
