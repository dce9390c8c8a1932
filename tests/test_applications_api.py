# =============================================
# tests/test_applications_api.py
# =============================================
from datetime import datetime
from uuid import uuid4

import pytest

from jobtracker.api.v1.endpoints.applications import get_application_service


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_create_application_assigns_server_fields(http):
    response = await http.post("/api/applications", json={"company": "Globex", "position": "Data Engineer"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["status"] == "Bookmarked"
    assert body["applicationDate"]
    assert body["createdAt"] == body["updatedAt"]
    assert body["contactId"] is None
    assert body["location"] is None


@pytest.mark.asyncio
async def test_create_application_trims_and_blanks_optional_text(http):
    response = await http.post("/api/applications", json={
        "company": "  Globex  ",
        "position": "Data Engineer",
        "salary": "   ",
        "contactId": "",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["company"] == "Globex"
    assert body["salary"] is None
    assert body["contactId"] is None


@pytest.mark.asyncio
async def test_create_application_ignores_unknown_and_immutable_keys(http):
    forced_id = str(uuid4())
    response = await http.post("/api/applications", json={
        "company": "Globex",
        "position": "Data Engineer",
        "id": forced_id,
        "createdAt": "2000-01-01T00:00:00Z",
        "favouriteColour": "green",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["id"] != forced_id
    assert not body["createdAt"].startswith("2000")
    assert "favouriteColour" not in body


@pytest.mark.asyncio
async def test_create_application_missing_company_is_rejected(http):
    response = await http.post("/api/applications", json={"position": "Data Engineer"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation error"
    assert [e["field"] for e in body["errors"]] == ["company"]
    assert body["error"].startswith("company:")


@pytest.mark.asyncio
async def test_create_application_blank_position_is_rejected(http):
    response = await http.post("/api/applications", json={"company": "Globex", "position": "   "})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "position", "message": "Position title is required"}]


@pytest.mark.asyncio
async def test_create_application_unknown_status_is_rejected(http):
    response = await http.post("/api/applications", json={
        "company": "Globex",
        "position": "Data Engineer",
        "status": "Ghosted",
    })

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"


@pytest.mark.asyncio
async def test_create_application_bad_contact_id_is_rejected(http):
    response = await http.post("/api/applications", json={
        "company": "Globex",
        "position": "Data Engineer",
        "contactId": "not-an-id",
    })

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "contactId"


@pytest.mark.asyncio
async def test_list_applications_newest_first(http):
    for day in ("2024-01-10", "2024-03-05", "2024-02-20"):
        await http.post("/api/applications", json={
            "company": f"Company {day}",
            "position": "Engineer",
            "applicationDate": f"{day}T12:00:00Z",
        })

    response = await http.get("/api/applications")

    assert response.status_code == 200
    dates = [a["applicationDate"][:10] for a in response.json()]
    assert dates == ["2024-03-05", "2024-02-20", "2024-01-10"]


@pytest.mark.asyncio
async def test_get_application_round_trip(http, application):
    response = await http.get(f"/api/applications/{application['id']}")

    assert response.status_code == 200
    assert response.json() == application


@pytest.mark.asyncio
async def test_get_application_malformed_id_is_not_found(http):
    response = await http.get("/api/applications/12345")

    assert response.status_code == 404
    assert response.json() == {"message": "Application not found"}


@pytest.mark.asyncio
async def test_get_application_unknown_id_is_not_found(http):
    response = await http.get(f"/api/applications/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Application not found"}


@pytest.mark.asyncio
async def test_update_changes_only_supplied_fields(http, application):
    response = await http.put(f"/api/applications/{application['id']}", json={"status": "Interview"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Interview"
    for field in ("company", "position", "location", "applicationDate", "contactId", "createdAt"):
        assert body[field] == application[field]
    assert parse_timestamp(body["updatedAt"]) > parse_timestamp(application["updatedAt"])


@pytest.mark.asyncio
async def test_update_twice_keeps_updated_at_increasing(http, application):
    url = f"/api/applications/{application['id']}"
    first = (await http.put(url, json={"notes": "one"})).json()
    second = (await http.put(url, json={"notes": "two"})).json()

    assert parse_timestamp(second["updatedAt"]) > parse_timestamp(first["updatedAt"])


@pytest.mark.asyncio
async def test_update_can_clear_optional_field(http, application):
    response = await http.put(f"/api/applications/{application['id']}", json={"contactId": None, "location": ""})

    assert response.status_code == 200
    assert response.json()["contactId"] is None
    assert response.json()["location"] is None


@pytest.mark.asyncio
async def test_update_null_required_field_is_rejected(http, application):
    response = await http.put(f"/api/applications/{application['id']}", json={"company": None})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "company", "message": "Company name cannot be null"}]

    unchanged = (await http.get(f"/api/applications/{application['id']}")).json()
    assert unchanged["company"] == "Acme"


@pytest.mark.asyncio
async def test_update_invalid_status_is_rejected(http, application):
    response = await http.put(f"/api/applications/{application['id']}", json={"status": "Maybe"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_unknown_application_is_not_found(http):
    response = await http.put(f"/api/applications/{uuid4()}", json={"status": "Applied"})

    assert response.status_code == 404
    assert response.json() == {"message": "Application not found"}


@pytest.mark.asyncio
async def test_delete_application(http, application):
    url = f"/api/applications/{application['id']}"

    response = await http.delete(url)
    assert response.status_code == 200
    assert response.json() == {"message": "Application removed"}

    assert (await http.get(url)).status_code == 404
    assert (await http.delete(url)).status_code == 404


@pytest.mark.asyncio
async def test_linked_contact_endpoint(http, application, contact):
    response = await http.get(f"/api/applications/{application['id']}/contact")

    assert response.status_code == 200
    assert response.json()["id"] == contact["id"]


@pytest.mark.asyncio
async def test_unlinked_application_has_no_contact(http):
    created = (await http.post("/api/applications", json={"company": "Globex", "position": "SRE"})).json()

    response = await http.get(f"/api/applications/{created['id']}/contact")

    assert response.status_code == 404
    assert response.json() == {"message": "Contact not found"}


@pytest.mark.asyncio
async def test_application_can_reference_missing_contact(http):
    dangling = str(uuid4())
    response = await http.post("/api/applications", json={
        "company": "Globex",
        "position": "SRE",
        "contactId": dangling,
    })

    assert response.status_code == 201
    assert response.json()["contactId"] == dangling
    linked = await http.get(f"/api/applications/{response.json()['id']}/contact")
    assert linked.status_code == 404


@pytest.mark.asyncio
async def test_unexpected_error_is_generic_server_error(app, http):
    class BrokenService:
        async def get_applications(self):
            raise RuntimeError("disk on fire")

    app.dependency_overrides[get_application_service] = lambda: BrokenService()

    response = await http.get("/api/applications")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path,body", [
    ("PUT", "/api/applications/not-a-uuid", {"status": "Applied"}),
    ("DELETE", "/api/applications/not-a-uuid", None),
    ("GET", "/api/applications/not-a-uuid/contact", None),
])
async def test_malformed_application_id_is_not_found_on_every_route(http, method, path, body):
    response = await http.request(method, path, json=body)

    assert response.status_code == 404
    assert response.json() == {"message": "Application not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("field,label", [
    ("applicationDate", "Application date"),
    ("status", "Status"),
])
async def test_update_blank_date_or_status_counts_as_null(http, application, field, label):
    response = await http.put(f"/api/applications/{application['id']}", json={field: ""})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": field, "message": f"{label} cannot be null"}]

    unchanged = (await http.get(f"/api/applications/{application['id']}")).json()
    assert unchanged[field] == application[field]
