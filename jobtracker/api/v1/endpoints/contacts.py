# =============================================
# jobtracker/api/v1/endpoints/contacts.py
# =============================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List, Optional

from jobtracker.config.database import get_db
from jobtracker.core.auth import get_current_user
from jobtracker.services.contact_service import ContactService
from jobtracker.schemas.contact import ContactCreate, ContactUpdate, ContactResponse
from jobtracker.schemas.application import ApplicationResponse
from jobtracker.schemas.common import DeleteResponse

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_contact_service(db: AsyncSession = Depends(get_db)) -> ContactService:
    return ContactService(db)

# =============================================
# CONTACT CRUD ROUTES
# =============================================

@router.get("", response_model=List[ContactResponse])
async def get_contacts(
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    """
    List every contact by name
    """
    return await contact_service.get_contacts()

@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    return await contact_service.get_contact(contact_id)

@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    contact_data: ContactCreate,
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    """
    Create a contact

    - **name**: contact name (required)
    - **email**: optional, validated and stored lowercased
    - **relationship**: one of the relationship types (default Other)
    """
    return await contact_service.create_contact(contact_data)

@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: str,
    contact_data: ContactUpdate,
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    return await contact_service.update_contact(contact_id, contact_data)

@router.delete("/{contact_id}", response_model=DeleteResponse)
async def delete_contact(
    contact_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    """
    Delete a contact

    Applications linked to it are not touched and keep their contactId.
    """
    await contact_service.delete_contact(contact_id)
    return DeleteResponse(message="Contact removed")

# =============================================
# CROSS-LINK ROUTES
# =============================================

@router.get("/{contact_id}/applications", response_model=List[ApplicationResponse])
async def get_contact_applications(
    contact_id: str,
    current_user: Optional[Any] = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    return await contact_service.get_contact_applications(contact_id)
