# =============================================
# jobtracker/views/dashboard.py
# =============================================
from typing import Any, Dict, Iterable, List

from jobtracker.client.api import ApiClient
from jobtracker.schemas.enums import ApplicationStatus, INTERVIEW_STAGES
from jobtracker.views.base import ViewState
from jobtracker.views.listing import Record, date_key, sort_records

RECENT_LIMIT = 3


def dashboard_stats(applications: Iterable[Record]) -> Dict[str, int]:
    """Counts shown on the dashboard cards"""
    statuses = [application.get("status") for application in applications]
    return {
        "totalApplications": len(statuses),
        "applied": statuses.count(ApplicationStatus.APPLIED.value),
        "interviews": sum(1 for status in statuses if status in INTERVIEW_STAGES),
        "offers": statuses.count(ApplicationStatus.OFFER.value),
        "bookmarked": statuses.count(ApplicationStatus.BOOKMARKED.value),
    }


def recent_applications(applications: Iterable[Record], limit: int = RECENT_LIMIT) -> List[Record]:
    """Most recent applications by application date"""
    return sort_records(applications, date_key("applicationDate"), descending=True)[:limit]


class DashboardView(ViewState):
    load_failure = "Failed to load application data. Please try again."

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.applications: List[Record] = []

    async def load(self) -> None:
        async with self.guard(self.load_failure):
            self.applications = await self.client.applications.get_all()

    @property
    def stats(self) -> Dict[str, Any]:
        return dashboard_stats(self.applications)

    @property
    def recent(self) -> List[Record]:
        return recent_applications(self.applications)
