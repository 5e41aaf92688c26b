"""API tests for the per-kind asset routes and snapshot endpoints."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from lexoffice.api.deps.dependencies import get_patrimony_service
from lexoffice.application.services import AssetKind
from lexoffice.core.exceptions import ConflictError, NotFoundError, ValidationError


def rural_property_payload(client_id, **overrides) -> dict:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid4(),
        "client_id": client_id,
        "name": "Fazenda Boa Vista",
        "estimated_value": 5_000_000,
        "has_lien": False,
        "has_judicial_block": False,
        "is_active": True,
        "ownership": "OWNED",
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return data


@pytest.fixture
def mock_patrimony_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_patrimony_service] = lambda: service
    return service


def test_create_rural_property_drops_unset_fields(client, mock_patrimony_service, record_id):
    mock_patrimony_service.create_asset.return_value = rural_property_payload(record_id)

    response = client.post(
        f"/api/v1/clients/{record_id}/patrimony/rural-properties",
        json={"name": "Fazenda Boa Vista", "estimated_value": 5_000_000},
    )

    assert response.status_code == 201
    assert response.json()["name"] == "Fazenda Boa Vista"
    mock_patrimony_service.create_asset.assert_awaited_once_with(
        AssetKind.RURAL_PROPERTY,
        record_id,
        name="Fazenda Boa Vista",
        estimated_value=5_000_000,
        ownership="OWNED",
    )


@pytest.mark.parametrize("kind", list(AssetKind))
def test_every_asset_kind_has_routes(client, mock_patrimony_service, record_id, kind):
    mock_patrimony_service.list_assets.return_value = []
    asset_id = uuid4()

    listed = client.get(f"/api/v1/clients/{record_id}/patrimony/{kind.value}")
    deleted = client.delete(f"/api/v1/clients/{record_id}/patrimony/{kind.value}/{asset_id}")

    assert listed.status_code == 200
    assert listed.json() == []
    assert deleted.status_code == 204
    mock_patrimony_service.list_assets.assert_awaited_once_with(kind, record_id)
    mock_patrimony_service.delete_asset.assert_awaited_once_with(kind, record_id, asset_id)


def test_unknown_asset_kind(client, mock_patrimony_service, record_id):
    response = client.get(f"/api/v1/clients/{record_id}/patrimony/boats")
    assert response.status_code == 404


def test_asset_of_other_client(client, mock_patrimony_service, record_id):
    mock_patrimony_service.update_asset.side_effect = NotFoundError("Vehicle", record_id)

    response = client.patch(
        f"/api/v1/clients/{uuid4()}/patrimony/vehicles/{record_id}", json={"notes": "sold"}
    )

    assert response.status_code == 404


def test_production_on_foreign_property(client, mock_patrimony_service, record_id):
    mock_patrimony_service.create_production.side_effect = ValidationError(
        "Rural property belongs to another client", field="rural_property_id"
    )

    response = client.post(
        f"/api/v1/clients/{record_id}/productions",
        json={"harvest_year": "2023/2024", "crop": "SOY", "rural_property_id": str(uuid4())},
    )

    assert response.status_code == 400


def test_duplicate_financial_snapshot(client, mock_patrimony_service, record_id):
    mock_patrimony_service.create_financial.side_effect = ConflictError("Snapshot already exists")

    response = client.post(
        f"/api/v1/clients/{record_id}/financial", json={"year": 2023, "period": "ANNUAL"}
    )

    assert response.status_code == 409
