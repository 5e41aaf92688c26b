"""API tests for the recovery router with a mocked RecoveryService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from lexoffice.api.deps.dependencies import get_recovery_service
from lexoffice.core.enums import RecoveryAnalysisType, RecoveryPhase, RecoveryStatus
from lexoffice.core.exceptions import ExternalServiceError, NotFoundError


def recovery_payload(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid4(),
        "code": "REC-2024-001",
        "title": "Unpaid CPR",
        "debtor_id": uuid4(),
        "debtor": None,
        "type": "EXECUTION",
        "phase": "INVESTIGATION",
        "status": "ACTIVE",
        "priority": "MEDIUM",
        "original_value": 1_000_000,
        "updated_value": 1_075_000,
        "recovered_value": 0,
        "blocked_value": 0,
        "seized_value": 0,
        "recovered_percent": 0.0,
        "created_at": now,
        "updated_at": now,
        "joint_debtors": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def mock_recovery_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_recovery_service] = lambda: service
    return service


def test_wizard_forwards_nested_payload(client, mock_recovery_service):
    mock_recovery_service.create_from_wizard.return_value = recovery_payload()

    response = client.post(
        "/api/v1/recovery/wizard",
        json={
            "title": "Unpaid CPR",
            "debtor": {"name": "Carlos Devedor", "tax_id": "123.456.789-00", "state": "MT"},
            "original_value": 1_000_000,
            "monetary_correction": 50_000,
            "interest": 25_000,
            "analysis": {"score": 72},
            "joint_debtors": [{"name": "Maria Avalista"}],
        },
    )

    assert response.status_code == 201
    assert response.json()["code"] == "REC-2024-001"
    kwargs = mock_recovery_service.create_from_wizard.await_args.kwargs
    assert kwargs["debtor"]["name"] == "Carlos Devedor"
    assert kwargs["analysis"]["score"] == 72
    assert kwargs["joint_debtors"][0]["liability_type"] == "GUARANTOR"


def test_wizard_rejects_score_out_of_range(client, mock_recovery_service):
    response = client.post(
        "/api/v1/recovery/wizard",
        json={"title": "x", "debtor": {"name": "Carlos"}, "original_value": 1, "analysis": {"score": 101}},
    )

    assert response.status_code == 422
    mock_recovery_service.create_from_wizard.assert_not_awaited()


def test_dashboard(client, mock_recovery_service):
    by_phase = {phase.value: {"count": 0, "value": 0} for phase in RecoveryPhase}
    by_phase["INVESTIGATION"] = {"count": 1, "value": 1_500}
    mock_recovery_service.dashboard.return_value = {
        "total_active": 1,
        "total_original_value": 1_000,
        "total_updated_value": 1_500,
        "total_recovered_value": 0,
        "total_blocked_value": 0,
        "average_score": None,
        "by_phase": by_phase,
    }

    response = client.get("/api/v1/recovery/dashboard")

    assert response.status_code == 200
    assert response.json()["by_phase"]["INVESTIGATION"] == {"count": 1, "value": 1_500}


def test_update_phase(client, mock_recovery_service, record_id):
    mock_recovery_service.update_phase.return_value = recovery_payload(id=record_id, phase="CLOSED", status="CLOSED")

    response = client.patch(
        f"/api/v1/recovery/{record_id}/phase", json={"phase": "CLOSED", "status": "CLOSED"}
    )

    assert response.status_code == 200
    mock_recovery_service.update_phase.assert_awaited_once_with(
        record_id, RecoveryPhase.CLOSED, RecoveryStatus.CLOSED
    )


def test_analysis(client, mock_recovery_service, record_id):
    mock_recovery_service.analyze.return_value = {
        "analysis_type": "petition",
        "model": "gemini-test-pro",
        "tier": "premium",
        "text": "Analysis text",
        "tokens_in": 120,
        "tokens_out": 80,
        "estimated_cost": 0.00095,
    }

    response = client.post(
        f"/api/v1/recovery/{record_id}/analysis",
        json={"analysis_type": "petition", "extra_data": "{\"assets\": []}"},
    )

    assert response.status_code == 200
    assert response.json()["text"] == "Analysis text"
    args = mock_recovery_service.analyze.await_args
    assert args.args == (record_id, RecoveryAnalysisType.PETITION)
    assert args.kwargs["extra_data"] == "{\"assets\": []}"


def test_analysis_provider_failure(client, mock_recovery_service, record_id):
    mock_recovery_service.analyze.side_effect = ExternalServiceError("Model call failed", service="gemini")

    response = client.post(f"/api/v1/recovery/{record_id}/analysis", json={"analysis_type": "scoring"})

    assert response.status_code == 502


def test_analysis_unknown_type(client, mock_recovery_service, record_id):
    response = client.post(f"/api/v1/recovery/{record_id}/analysis", json={"analysis_type": "SCORING"})
    assert response.status_code == 422


def test_get_missing_case(client, mock_recovery_service, record_id):
    mock_recovery_service.get_case.side_effect = NotFoundError("Recovery case", record_id)

    response = client.get(f"/api/v1/recovery/{record_id}")

    assert response.status_code == 404
