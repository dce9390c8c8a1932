# =============================================
# jobtracker/views/applications.py
# =============================================
from datetime import date
from typing import Any, Dict, List, Optional
import logging

from jobtracker.client.api import ApiClient
from jobtracker.schemas.enums import (
    ALL_OPTION,
    APPLICATION_SORT_OPTIONS,
    ApplicationStatus,
    DEFAULT_APPLICATION_SORT,
    STATUS_FILTER_OPTIONS,
)
from jobtracker.views.base import ViewState
from jobtracker.views.listing import Record, filter_applications

logger = logging.getLogger(__name__)


# =============================================
# LIST
# =============================================

class ApplicationsListView(ViewState):
    load_failure = "Failed to load applications. Please try again."
    status_options = STATUS_FILTER_OPTIONS
    sort_options = APPLICATION_SORT_OPTIONS

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.applications: List[Record] = []
        self.search_term = ""
        self.status_filter = ALL_OPTION
        self.sort_key = DEFAULT_APPLICATION_SORT

    async def load(self) -> None:
        async with self.guard(self.load_failure):
            self.applications = await self.client.applications.get_all()

    def set_search(self, term: str) -> None:
        self.search_term = term

    def set_status_filter(self, status: str) -> None:
        self.status_filter = status

    def set_sort(self, sort_key: str) -> None:
        self.sort_key = sort_key

    @property
    def visible(self) -> List[Record]:
        return filter_applications(self.applications, self.search_term, self.status_filter, self.sort_key)


# =============================================
# DETAIL
# =============================================

class ApplicationDetailView(ViewState):
    load_failure = "Could not load application details. Please try again."
    update_failure = "Failed to update application. Please try again."
    delete_failure = "Failed to delete application. Please try again."

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.application: Optional[Record] = None
        self.contact: Optional[Record] = None
        self.contacts: List[Record] = []
        self.deleted = False

    @property
    def application_id(self) -> Optional[str]:
        return self.application["id"] if self.application else None

    async def load(self, application_id: str) -> None:
        async with self.guard(self.load_failure):
            self.application = await self.client.applications.get_by_id(application_id)
            self.contact = await self._fetch_contact(self.application.get("contactId"))
            self.contacts = await self._fetch_contacts()

    async def save(self, changes: Dict[str, Any]) -> Optional[Record]:
        """Update the loaded application; refreshes the linked contact if it changed"""
        if self.application is None:
            return None
        previous_contact_id = self.application.get("contactId")
        updated = None
        async with self.guard(self.update_failure):
            updated = await self.client.applications.update(self.application_id, changes)
            self.application = updated
            if updated.get("contactId") != previous_contact_id:
                self.contact = await self._fetch_contact(updated.get("contactId"))
        return updated

    async def delete(self) -> bool:
        if self.application is None:
            return False
        async with self.guard(self.delete_failure):
            await self.client.applications.delete(self.application_id)
            self.deleted = True
        return self.deleted

    async def _fetch_contact(self, contact_id: Optional[str]) -> Optional[Record]:
        if not contact_id:
            return None
        try:
            return await self.client.contacts.get_by_id(contact_id)
        except Exception as e:
            logger.warning(f"Linked contact {contact_id} unavailable: {e}")
            return None

    async def _fetch_contacts(self) -> List[Record]:
        try:
            return await self.client.contacts.get_all()
        except Exception as e:
            logger.warning(f"Contact list unavailable: {e}")
            return []


# =============================================
# ADD FORM
# =============================================

def empty_application_form() -> Dict[str, Any]:
    return {
        "company": "",
        "position": "",
        "jobDescription": "",
        "jobLink": "",
        "location": "",
        "salary": "",
        "applicationDate": date.today().isoformat(),
        "status": ApplicationStatus.BOOKMARKED.value,
        "nextSteps": "",
        "notes": "",
        "contactId": "",
    }


class AddApplicationForm(ViewState):
    submit_failure = "Failed to create application. Please try again."

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.fields = empty_application_form()
        self.contacts: List[Record] = []

    def set_field(self, name: str, value: Any) -> None:
        self.fields[name] = value

    async def load_contacts(self) -> None:
        """Contacts for the "linked contact" dropdown; failures leave it empty"""
        try:
            self.contacts = await self.client.contacts.get_all()
        except Exception as e:
            logger.warning(f"Contact list unavailable: {e}")
            self.contacts = []

    async def submit(self) -> Optional[Record]:
        created = None
        async with self.guard(self.submit_failure):
            created = await self.client.applications.create(self.fields)
        return created
