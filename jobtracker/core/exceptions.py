# =============================================
# jobtracker/core/exceptions.py
# =============================================
from fastapi import status
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

# =============================================
# CUSTOM EXCEPTIONS
# =============================================

class AppException(Exception):
    """Base exception for application errors"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a document does not exist or its id is malformed"""
    status_code = status.HTTP_404_NOT_FOUND


class ApplicationNotFoundError(NotFoundError):
    """Raised when application is not found"""

    def __init__(self, application_id: Any = None):
        super().__init__("Application not found", {"application_id": str(application_id)})


class ContactNotFoundError(NotFoundError):
    """Raised when contact is not found"""

    def __init__(self, contact_id: Any = None):
        super().__init__("Contact not found", {"contact_id": str(contact_id)})


class ValidationError(AppException):
    """Raised when validation fails"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message, {"errors": errors or []})

    @property
    def errors(self) -> List[Dict[str, str]]:
        return self.details["errors"]

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Build from a pydantic error, keeping one entry per failing field"""
        return cls("Validation error", format_validation_errors(exc.errors()))


class DatabaseError(AppException):
    """Raised when database operation fails"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def format_validation_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic/FastAPI error dicts into field/message pairs"""
    formatted = []
    for error in errors:
        # drop the "body" prefix FastAPI adds to request errors
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append({"field": ".".join(loc) or "body", "message": message})
    return formatted
