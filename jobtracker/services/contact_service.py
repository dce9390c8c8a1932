# =============================================
# jobtracker/services/contact_service.py
# =============================================
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from jobtracker.repositories.application_repository import ApplicationRepository
from jobtracker.repositories.contact_repository import ContactRepository
from jobtracker.schemas.application import ApplicationResponse
from jobtracker.schemas.contact import ContactCreate, ContactUpdate, ContactResponse
from jobtracker.core.exceptions import ContactNotFoundError

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.contact_repo = ContactRepository(db)
        self.application_repo = ApplicationRepository(db)

    async def create_contact(self, contact_data: ContactCreate) -> ContactResponse:
        contact = await self.contact_repo.create(contact_data)
        logger.info(f"Contact created: {contact.name} (ID: {contact.id})")
        return ContactResponse.model_validate(contact)

    async def get_contact(self, contact_id: str) -> ContactResponse:
        contact = await self.contact_repo.get_by_id(contact_id)
        if not contact:
            raise ContactNotFoundError(contact_id)
        return ContactResponse.model_validate(contact)

    async def get_contacts(self, order_by: Optional[str] = None) -> List[ContactResponse]:
        contacts = await self.contact_repo.get_all(order_by)
        return [ContactResponse.model_validate(contact) for contact in contacts]

    async def update_contact(self, contact_id: str, contact_data: ContactUpdate) -> ContactResponse:
        contact = await self.contact_repo.update(contact_id, contact_data)
        if not contact:
            raise ContactNotFoundError(contact_id)
        return ContactResponse.model_validate(contact)

    async def delete_contact(self, contact_id: str) -> None:
        """Delete a contact; applications keep their (now dangling) contact_id"""
        deleted = await self.contact_repo.delete(contact_id)
        if not deleted:
            raise ContactNotFoundError(contact_id)

    async def get_contact_applications(self, contact_id: str) -> List[ApplicationResponse]:
        """Applications linked to a contact"""
        await self.get_contact(contact_id)
        applications = await self.application_repo.get_by_contact(contact_id)
        return [ApplicationResponse.model_validate(application) for application in applications]
