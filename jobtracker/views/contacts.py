# =============================================
# jobtracker/views/contacts.py
# =============================================
from typing import Any, Dict, List, Optional
import logging

from jobtracker.client.api import ApiClient
from jobtracker.schemas.enums import (
    ALL_OPTION,
    CONTACT_SORT_OPTIONS,
    ContactRelationship,
    DEFAULT_CONTACT_SORT,
    RELATIONSHIP_FILTER_OPTIONS,
)
from jobtracker.views.base import ViewState
from jobtracker.views.listing import Record, filter_contacts

logger = logging.getLogger(__name__)


class ContactsListView(ViewState):
    load_failure = "Failed to load contacts. Please try again."
    relationship_options = RELATIONSHIP_FILTER_OPTIONS
    sort_options = CONTACT_SORT_OPTIONS

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.contacts: List[Record] = []
        self.search_term = ""
        self.relationship_filter = ALL_OPTION
        self.sort_key = DEFAULT_CONTACT_SORT

    async def load(self) -> None:
        async with self.guard(self.load_failure):
            self.contacts = await self.client.contacts.get_all()

    def set_search(self, term: str) -> None:
        self.search_term = term

    def set_relationship_filter(self, relationship: str) -> None:
        self.relationship_filter = relationship

    def set_sort(self, sort_key: str) -> None:
        self.sort_key = sort_key

    @property
    def visible(self) -> List[Record]:
        return filter_contacts(self.contacts, self.search_term, self.relationship_filter, self.sort_key)


class ContactDetailView(ViewState):
    load_failure = "Could not load contact details. Please try again."
    update_failure = "Failed to update contact. Please try again."
    delete_failure = "Failed to delete contact. Please try again."

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.contact: Optional[Record] = None
        self.applications: List[Record] = []
        self.deleted = False

    @property
    def contact_id(self) -> Optional[str]:
        return self.contact["id"] if self.contact else None

    async def load(self, contact_id: str) -> None:
        async with self.guard(self.load_failure):
            self.contact = await self.client.contacts.get_by_id(contact_id)
            try:
                self.applications = await self.client.contacts.get_applications(contact_id)
            except Exception as e:
                logger.warning(f"Applications for contact {contact_id} unavailable: {e}")
                self.applications = []

    async def save(self, changes: Dict[str, Any]) -> Optional[Record]:
        if self.contact is None:
            return None
        updated = None
        async with self.guard(self.update_failure):
            updated = await self.client.contacts.update(self.contact_id, changes)
            self.contact = updated
        return updated

    async def delete(self) -> bool:
        if self.contact is None:
            return False
        async with self.guard(self.delete_failure):
            await self.client.contacts.delete(self.contact_id)
            self.deleted = True
        return self.deleted


def empty_contact_form() -> Dict[str, Any]:
    return {
        "name": "",
        "company": "",
        "position": "",
        "email": "",
        "phone": "",
        "linkedIn": "",
        "relationship": ContactRelationship.OTHER.value,
        "notes": "",
        "lastContactDate": "",
    }


class AddContactForm(ViewState):
    submit_failure = "Failed to create contact. Please try again."

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.fields = empty_contact_form()

    def set_field(self, name: str, value: Any) -> None:
        self.fields[name] = value

    async def submit(self) -> Optional[Record]:
        created = None
        async with self.guard(self.submit_failure):
            created = await self.client.contacts.create(self.fields)
        return created
