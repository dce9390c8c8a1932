# =============================================
# tests/test_views.py
# =============================================
from uuid import uuid4

import httpx
import pytest

from jobtracker.client.api import ApiClient
from jobtracker.views.applications import AddApplicationForm, ApplicationDetailView, ApplicationsListView
from jobtracker.views.contacts import AddContactForm, ContactDetailView, ContactsListView
from jobtracker.views.dashboard import DashboardView


@pytest.fixture
def broken_api():
    return ApiClient(
        base_url="http://test",
        transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"message": "Server error"})),
    )


@pytest.mark.asyncio
async def test_applications_list_view(api, application):
    await api.applications.create({"company": "Initech", "position": "QA", "status": "Bookmarked"})
    view = ApplicationsListView(api)

    await view.load()

    assert view.ok and not view.loading
    assert len(view.visible) == 2
    view.set_status_filter("Applied")
    assert [a["id"] for a in view.visible] == [application["id"]]
    view.set_status_filter("All")
    view.set_search("initech")
    assert [a["company"] for a in view.visible] == ["Initech"]
    view.set_search("")
    view.set_sort("companyAsc")
    assert [a["company"] for a in view.visible] == ["Acme", "Initech"]


@pytest.mark.asyncio
async def test_list_view_records_error_and_dismisses(broken_api):
    view = ApplicationsListView(broken_api)

    await view.load()

    assert view.error == "Failed to load applications. Please try again."
    assert view.failure.status_code == 500
    assert view.applications == []
    assert view.loading is False
    view.dismiss_error()
    assert view.error is None
    await broken_api.aclose()


@pytest.mark.asyncio
async def test_contacts_list_view(api, contact):
    await api.contacts.create({"name": "Bo Diaz", "relationship": "Networking"})
    view = ContactsListView(api)

    await view.load()

    assert [c["name"] for c in view.visible] == ["Bo Diaz", "Dana Reyes"]
    view.set_relationship_filter("Recruiter")
    assert [c["id"] for c in view.visible] == [contact["id"]]
    view.set_relationship_filter("All")
    view.set_sort("nameDesc")
    assert [c["name"] for c in view.visible] == ["Dana Reyes", "Bo Diaz"]


@pytest.mark.asyncio
async def test_application_detail_loads_linked_contact(api, application, contact):
    view = ApplicationDetailView(api)

    await view.load(application["id"])

    assert view.ok
    assert view.application["id"] == application["id"]
    assert view.contact["id"] == contact["id"]
    assert [c["id"] for c in view.contacts] == [contact["id"]]


@pytest.mark.asyncio
async def test_application_detail_tolerates_missing_contact(api, application, contact):
    await api.contacts.delete(contact["id"])
    view = ApplicationDetailView(api)

    await view.load(application["id"])

    assert view.ok
    assert view.application["contactId"] == contact["id"]
    assert view.contact is None


@pytest.mark.asyncio
async def test_application_detail_unknown_id(api):
    view = ApplicationDetailView(api)

    await view.load(str(uuid4()))

    assert view.error == "Could not load application details. Please try again."
    assert view.failure.is_not_found
    assert view.application is None


@pytest.mark.asyncio
async def test_application_detail_save_refreshes_contact(api, application, contact):
    other = await api.contacts.create({"name": "Lee Wong"})
    view = ApplicationDetailView(api)
    await view.load(application["id"])

    updated = await view.save({"contactId": other["id"], "notes": "Referred by Lee"})

    assert updated["notes"] == "Referred by Lee"
    assert view.contact["id"] == other["id"]

    await view.save({"contactId": None})
    assert view.contact is None


@pytest.mark.asyncio
async def test_application_detail_save_failure_keeps_record(api, application):
    view = ApplicationDetailView(api)
    await view.load(application["id"])

    result = await view.save({"company": ""})

    assert result is None
    assert view.error == "Failed to update application. Please try again."
    assert view.failure.status_code == 400
    assert view.application["company"] == "Acme"


@pytest.mark.asyncio
async def test_application_detail_delete(api, application):
    view = ApplicationDetailView(api)
    await view.load(application["id"])

    assert await view.delete() is True
    assert view.deleted

    list_view = ApplicationsListView(api)
    await list_view.load()
    assert list_view.applications == []


@pytest.mark.asyncio
async def test_contact_detail_view(api, contact, application):
    view = ContactDetailView(api)

    await view.load(contact["id"])

    assert view.contact["name"] == "Dana Reyes"
    assert [a["id"] for a in view.applications] == [application["id"]]

    updated = await view.save({"relationship": "Hiring Manager"})
    assert updated["relationship"] == "Hiring Manager"

    assert await view.delete() is True


@pytest.mark.asyncio
async def test_contact_detail_delete_failure(broken_api):
    view = ContactDetailView(broken_api)
    view.contact = {"id": "abc", "name": "Ghost"}

    assert await view.delete() is False
    assert view.error == "Failed to delete contact. Please try again."
    await broken_api.aclose()


@pytest.mark.asyncio
async def test_add_application_form(api, contact):
    form = AddApplicationForm(api)
    await form.load_contacts()
    assert [c["id"] for c in form.contacts] == [contact["id"]]

    form.set_field("company", "Hooli")
    form.set_field("position", "Staff Engineer")
    form.set_field("contactId", contact["id"])
    created = await form.submit()

    assert form.ok
    assert created["status"] == "Bookmarked"
    assert created["contactId"] == contact["id"]
    assert created["location"] is None


@pytest.mark.asyncio
async def test_add_application_form_rejected(api):
    form = AddApplicationForm(api)

    created = await form.submit()

    assert created is None
    assert form.error == "Failed to create application. Please try again."


@pytest.mark.asyncio
async def test_add_contact_form(api):
    form = AddContactForm(api)
    form.set_field("name", "Ana Silva")
    form.set_field("email", "Ana@Example.com")

    created = await form.submit()

    assert created["email"] == "ana@example.com"
    assert created["relationship"] == "Other"
    assert created["lastContactDate"] is None


@pytest.mark.asyncio
async def test_dashboard_view(api):
    for company, status in [("A", "Applied"), ("B", "Offer"), ("C", "Phone Screen"), ("D", "Applied")]:
        await api.applications.create({"company": company, "position": "Engineer", "status": status})
    view = DashboardView(api)

    await view.load()

    assert view.stats == {"totalApplications": 4, "applied": 2, "interviews": 1, "offers": 1, "bookmarked": 0}
    assert len(view.recent) == 3


@pytest.mark.asyncio
async def test_dashboard_view_error(broken_api):
    view = DashboardView(broken_api)

    await view.load()

    assert view.error == "Failed to load application data. Please try again."
    assert view.stats["totalApplications"] == 0
    await broken_api.aclose()
