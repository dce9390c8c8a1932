# =============================================
# tests/test_dashboard.py
# =============================================
import pytest

from jobtracker.schemas.enums import (
    ApplicationStatus,
    ContactRelationship,
    RELATIONSHIP_BADGE_VARIANTS,
    STATUS_BADGE_VARIANTS,
)
from jobtracker.views.badges import relationship_badge, status_badge
from jobtracker.views.dashboard import dashboard_stats, recent_applications


def make_application(id, status, date):
    return {"id": id, "company": f"Company {id}", "position": "Engineer", "status": status, "applicationDate": date}


FIXTURE = [
    make_application("1", "Applied", "2024-01-05T00:00:00Z"),
    make_application("2", "Applied", "2024-03-01T00:00:00Z"),
    make_application("3", "Interview", "2024-02-10T00:00:00Z"),
    make_application("4", "Offer", "2024-02-20T00:00:00Z"),
    make_application("5", "Bookmarked", "2024-01-15T00:00:00Z"),
]


def test_dashboard_stats():
    assert dashboard_stats(FIXTURE) == {
        "totalApplications": 5,
        "applied": 2,
        "interviews": 1,
        "offers": 1,
        "bookmarked": 1,
    }


def test_dashboard_stats_empty():
    assert dashboard_stats([]) == {
        "totalApplications": 0,
        "applied": 0,
        "interviews": 0,
        "offers": 0,
        "bookmarked": 0,
    }


def test_interviews_count_every_interview_stage():
    stages = [
        make_application("a", "Phone Screen", None),
        make_application("b", "Interview", None),
        make_application("c", "Technical Assessment", None),
        make_application("d", "Rejected", None),
    ]
    assert dashboard_stats(stages)["interviews"] == 3


def test_recent_applications_top_three_newest():
    assert [a["id"] for a in recent_applications(FIXTURE)] == ["2", "4", "3"]


def test_recent_applications_with_fewer_than_limit():
    assert [a["id"] for a in recent_applications(FIXTURE[:2])] == ["2", "1"]


# =============================================
# BADGES
# =============================================

def test_badge_tables_cover_every_value():
    assert set(STATUS_BADGE_VARIANTS) == set(ApplicationStatus)
    assert set(RELATIONSHIP_BADGE_VARIANTS) == set(ContactRelationship)


@pytest.mark.parametrize("status,variant", [
    ("Bookmarked", "secondary"),
    ("Applied", "primary"),
    ("Phone Screen", "info"),
    ("Interview", "warning"),
    ("Technical Assessment", "dark"),
    ("Offer", "success"),
    ("Rejected", "danger"),
    ("Accepted", "success"),
    ("Withdrawn", "danger"),
    ("Unknown", "secondary"),
    (None, "secondary"),
])
def test_status_badge(status, variant):
    assert status_badge(status) == variant


@pytest.mark.parametrize("relationship,variant", [
    ("Recruiter", "primary"),
    ("Hiring Manager", "success"),
    ("Team Member", "info"),
    ("Referral", "warning"),
    ("Networking", "secondary"),
    ("Other", "dark"),
    ("Friend", "dark"),
])
def test_relationship_badge(relationship, variant):
    assert relationship_badge(relationship) == variant
