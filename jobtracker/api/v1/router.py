# =============================================
# jobtracker/api/v1/router.py
# =============================================
from fastapi import APIRouter

from jobtracker.api.v1.endpoints import applications, contacts

# =============================================
# API ROUTER
# =============================================
api_router = APIRouter()

# =============================================
# APPLICATION ROUTES
# =============================================
api_router.include_router(
    applications.router,
    prefix="/applications",
    tags=["Applications"],
    responses={
        404: {"description": "Application not found"},
        400: {"description": "Invalid application data"}
    }
)

# =============================================
# CONTACT ROUTES
# =============================================
api_router.include_router(
    contacts.router,
    prefix="/contacts",
    tags=["Contacts"],
    responses={
        404: {"description": "Contact not found"},
        400: {"description": "Invalid contact data"}
    }
)
