# =============================================
# tests/conftest.py
# =============================================
import httpx
import pytest
import pytest_asyncio

from jobtracker.client.api import ApiClient
from jobtracker.config.database import DocumentStore
from jobtracker.config.settings import Settings
from jobtracker.main import create_app

BASE_URL = "http://test"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        DATABASE_URL="sqlite+aiosqlite://",
        API_BASE_URL=BASE_URL,
    )


@pytest_asyncio.fixture
async def store(settings):
    store = DocumentStore.from_settings(settings)
    await store.create_tables()
    yield store
    await store.dispose()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def transport(app):
    # unhandled errors still reach the 500 handler instead of the test
    return httpx.ASGITransport(app=app, raise_app_exceptions=False)


@pytest_asyncio.fixture
async def http(transport):
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client


@pytest_asyncio.fixture
async def api(transport):
    async with ApiClient(base_url=BASE_URL, transport=transport) as client:
        yield client


@pytest_asyncio.fixture
async def contact(http):
    response = await http.post("/api/contacts", json={
        "name": "Dana Reyes",
        "company": "Acme",
        "email": "Dana.Reyes@Acme.io",
        "relationship": "Recruiter",
    })
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def application(http, contact):
    response = await http.post("/api/applications", json={
        "company": "Acme",
        "position": "Backend Engineer",
        "location": "Remote",
        "status": "Applied",
        "applicationDate": "2024-03-01T00:00:00Z",
        "contactId": contact["id"],
    })
    assert response.status_code == 201
    return response.json()
