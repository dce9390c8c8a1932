# =============================================
# jobtracker/client/api.py
# =============================================
"""
HTTP client for the tracker API.

One resource object per collection with get_all / get_by_id / create /
update / delete. Successful calls return the decoded JSON body unchanged.
Failures raise ``ApiError``: the server's structured error body when it sent
one, otherwise a generic "Error <verb> <entity>" message. No retries, no
caching.
"""
from typing import Any, Dict, List, Optional
import logging

import httpx
from pydantic_core import to_jsonable_python

from jobtracker.config.settings import get_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[Dict[str, Any]] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @property
    def payload(self) -> Dict[str, Any]:
        """The server's error body, or a synthesized one"""
        return self.body if self.body is not None else {"message": self.message}

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def _structured_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class ApiClient:
    """Async client holding one httpx connection pool"""

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or get_settings().API_BASE_URL
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )
        self.applications = ApplicationApi(self)
        self.contacts = ContactApi(self)

    async def request(self, method: str, path: str, failure_message: str, payload: Any = None) -> Any:
        json_body = to_jsonable_python(payload) if payload is not None else None
        try:
            response = await self._http.request(method, path, json=json_body)
        except httpx.HTTPError as e:
            logger.error(f"{failure_message}: {e}")
            raise ApiError(failure_message) from e

        if response.is_error:
            body = _structured_body(response)
            logger.warning(f"{method} {path} failed with {response.status_code}")
            if body is not None:
                raise ApiError(body.get("message", failure_message), response.status_code, body)
            raise ApiError(failure_message, response.status_code)

        return response.json()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class ResourceApi:
    path: str
    singular: str
    plural: str

    def __init__(self, client: ApiClient):
        self._client = client

    async def get_all(self) -> List[Dict[str, Any]]:
        return await self._client.request("GET", self.path, f"Error fetching {self.plural}")

    async def get_by_id(self, document_id: str) -> Dict[str, Any]:
        return await self._client.request("GET", f"{self.path}/{document_id}", f"Error fetching {self.singular}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._client.request("POST", self.path, f"Error creating {self.singular}", data)

    async def update(self, document_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._client.request(
            "PUT", f"{self.path}/{document_id}", f"Error updating {self.singular}", data
        )

    async def delete(self, document_id: str) -> Dict[str, Any]:
        return await self._client.request("DELETE", f"{self.path}/{document_id}", f"Error deleting {self.singular}")


class ApplicationApi(ResourceApi):
    path = "/api/applications"
    singular = "application"
    plural = "applications"

    async def get_contact(self, application_id: str) -> Dict[str, Any]:
        """The contact linked to an application"""
        return await self._client.request("GET", f"{self.path}/{application_id}/contact", "Error fetching contact")


class ContactApi(ResourceApi):
    path = "/api/contacts"
    singular = "contact"
    plural = "contacts"

    async def get_applications(self, contact_id: str) -> List[Dict[str, Any]]:
        """Applications linked to a contact"""
        return await self._client.request(
            "GET", f"{self.path}/{contact_id}/applications", "Error fetching applications"
        )
