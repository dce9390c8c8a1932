# =============================================
# jobtracker/api/v1/endpoints/applications.py
# =============================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List, Optional

from jobtracker.config.database import get_db
from jobtracker.core.auth import get_current_user
from jobtracker.services.application_service import ApplicationService
from jobtracker.schemas.application import ApplicationCreate, ApplicationUpdate, ApplicationResponse
from jobtracker.schemas.contact import ContactResponse
from jobtracker.schemas.common import DeleteResponse

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_application_service(db: AsyncSession = Depends(get_db)) -> ApplicationService:
    return ApplicationService(db)

# =============================================
# APPLICATION CRUD ROUTES
# =============================================

@router.get("", response_model=List[ApplicationResponse])
async def get_applications(
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    List every application, newest application date first
    """
    return await application_service.get_applications()

@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Get one application

    A malformed id answers 404, the same as an unknown one.
    """
    return await application_service.get_application(application_id)

@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    application_data: ApplicationCreate,
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Create an application

    - **company**: company name (required)
    - **position**: position title (required)
    - **status**: one of the tracked statuses (default Bookmarked)
    - **applicationDate**: defaults to now
    - **contactId**: optional link to a contact
    """
    return await application_service.create_application(application_data)

@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: str,
    application_data: ApplicationUpdate,
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Update an application

    Only the fields present in the body change.
    """
    return await application_service.update_application(application_id, application_data)

@router.delete("/{application_id}", response_model=DeleteResponse)
async def delete_application(
    application_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Delete an application
    """
    await application_service.delete_application(application_id)
    return DeleteResponse(message="Application removed")

# =============================================
# CROSS-LINK ROUTES
# =============================================

@router.get("/{application_id}/contact", response_model=ContactResponse)
async def get_application_contact(
    application_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Get the contact linked to an application

    404 when the application has no contact or the contact no longer exists.
    """
    return await application_service.get_linked_contact(application_id)
