"""API tests for the persons router with a mocked PersonService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from lexoffice.api.deps.dependencies import get_person_service
from lexoffice.core.exceptions import ConflictError, NotFoundError, PreconditionFailedError, ValidationError


def person_payload(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid4(),
        "name": "Agro Vale Ltda",
        "type": "CLIENT",
        "subtype": "COMPANY",
        "tax_id": "12.345.678/0001-90",
        "portal_access": False,
        "created_at": now,
        "updated_at": now,
        "cases": [],
        "documents": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def mock_person_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_person_service] = lambda: service
    return service


def test_create_person(client, mock_person_service):
    person = person_payload()
    mock_person_service.create_person.return_value = person

    response = client.post(
        "/api/v1/persons",
        json={"name": "Agro Vale Ltda", "type": "CLIENT", "subtype": "COMPANY", "tax_id": "12.345.678/0001-90", "email": ""},
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(person["id"])
    kwargs = mock_person_service.create_person.await_args.kwargs
    assert kwargs["email"] is None
    assert kwargs["subtype"] == "COMPANY"


def test_create_person_rejects_short_name(client, mock_person_service):
    response = client.post("/api/v1/persons", json={"name": "A"})

    assert response.status_code == 422
    mock_person_service.create_person.assert_not_awaited()


def test_create_person_duplicate_tax_id(client, mock_person_service):
    mock_person_service.create_person.side_effect = ConflictError("Tax id already registered")

    response = client.post("/api/v1/persons", json={"name": "Agro Vale Ltda", "tax_id": "1"})

    assert response.status_code == 409
    assert response.json() == {"detail": "Tax id already registered"}


def test_list_persons_passes_filters(client, mock_person_service):
    mock_person_service.list_persons.return_value = {
        "items": [person_payload()],
        "next_cursor": None,
        "total": 1,
    }

    response = client.get("/api/v1/persons", params={"type": "CLIENT", "search": "agro", "limit": 5})

    assert response.status_code == 200
    assert response.json()["total"] == 1
    kwargs = mock_person_service.list_persons.await_args.kwargs
    assert kwargs["limit"] == 5
    assert kwargs["search"] == "agro"


def test_list_persons_unknown_cursor(client, mock_person_service):
    mock_person_service.list_persons.side_effect = ValidationError("Unknown cursor", field="cursor")

    response = client.get("/api/v1/persons", params={"cursor": str(uuid4())})

    assert response.status_code == 400


def test_list_persons_limit_bounds(client, mock_person_service):
    response = client.get("/api/v1/persons", params={"limit": 101})
    assert response.status_code == 422


def test_get_person_not_found(client, mock_person_service, record_id):
    mock_person_service.get_person.side_effect = NotFoundError("Person", record_id)

    response = client.get(f"/api/v1/persons/{record_id}")

    assert response.status_code == 404


def test_update_person_sends_only_set_fields(client, mock_person_service, record_id):
    mock_person_service.update_person.return_value = person_payload(id=record_id, city="Sorriso")

    response = client.patch(f"/api/v1/persons/{record_id}", json={"city": "Sorriso"})

    assert response.status_code == 200
    mock_person_service.update_person.assert_awaited_once_with(record_id, city="Sorriso")


def test_delete_referenced_person(client, mock_person_service, record_id):
    mock_person_service.delete_person.side_effect = PreconditionFailedError(
        "Person is still referenced", details={"cases": 2}
    )

    response = client.delete(f"/api/v1/persons/{record_id}")

    assert response.status_code == 412
    assert response.json() == {"detail": "Person is still referenced"}


def test_delete_person(client, mock_person_service, record_id):
    response = client.delete(f"/api/v1/persons/{record_id}")

    assert response.status_code == 204
    mock_person_service.delete_person.assert_awaited_once_with(record_id)
