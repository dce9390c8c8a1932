# =============================================
# jobtracker/services/application_service.py
# =============================================
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from jobtracker.repositories.application_repository import ApplicationRepository
from jobtracker.repositories.contact_repository import ContactRepository
from jobtracker.schemas.application import ApplicationCreate, ApplicationUpdate, ApplicationResponse
from jobtracker.schemas.contact import ContactResponse
from jobtracker.core.exceptions import ApplicationNotFoundError, ContactNotFoundError

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.application_repo = ApplicationRepository(db)
        self.contact_repo = ContactRepository(db)

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create_application(self, application_data: ApplicationCreate) -> ApplicationResponse:
        """Create a new application"""
        application = await self.application_repo.create(application_data)
        logger.info(f"Application created: {application.company} / {application.position} (ID: {application.id})")
        return ApplicationResponse.model_validate(application)

    async def get_application(self, application_id: str) -> ApplicationResponse:
        """Get application by ID"""
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise ApplicationNotFoundError(application_id)
        return ApplicationResponse.model_validate(application)

    async def get_applications(self, order_by: Optional[str] = None) -> List[ApplicationResponse]:
        """All applications, newest application date first unless told otherwise"""
        applications = await self.application_repo.get_all(order_by)
        return [ApplicationResponse.model_validate(application) for application in applications]

    async def update_application(self, application_id: str, application_data: ApplicationUpdate) -> ApplicationResponse:
        """Apply a partial update"""
        application = await self.application_repo.update(application_id, application_data)
        if not application:
            raise ApplicationNotFoundError(application_id)
        return ApplicationResponse.model_validate(application)

    async def delete_application(self, application_id: str) -> None:
        """Delete an application; its contact is left alone"""
        deleted = await self.application_repo.delete(application_id)
        if not deleted:
            raise ApplicationNotFoundError(application_id)

    # =============================================
    # CROSS-LINKS
    # =============================================

    async def get_linked_contact(self, application_id: str) -> ContactResponse:
        """The contact an application points at.

        A missing link and a dangling link (contact since deleted) both read
        as "contact not found".
        """
        application = await self.get_application(application_id)
        if application.contact_id is None:
            raise ContactNotFoundError(None)
        contact = await self.contact_repo.get_by_id(application.contact_id)
        if not contact:
            logger.warning(f"Application {application_id} references missing contact {application.contact_id}")
            raise ContactNotFoundError(application.contact_id)
        return ContactResponse.model_validate(contact)
