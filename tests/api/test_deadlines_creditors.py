"""API tests for deadline control and the restructuring calculators."""

from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from lexoffice.api.deps.dependencies import get_creditor_service, get_deadline_service
from lexoffice.core.exceptions import NotFoundError


@pytest.fixture
def mock_deadline_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_deadline_service] = lambda: service
    return service


@pytest.fixture
def mock_creditor_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_creditor_service] = lambda: service
    return service


def test_stats(client, mock_deadline_service):
    mock_deadline_service.get_stats.return_value = {
        "today": 1,
        "tomorrow": 0,
        "this_week": 2,
        "next_30_days": 5,
        "overdue": 1,
    }

    response = client.get("/api/v1/deadlines/stats")

    assert response.status_code == 200
    assert response.json()["this_week"] == 2


def test_calculate(client, mock_deadline_service):
    mock_deadline_service.calculate.return_value = {
        "start_date": date(2024, 1, 5),
        "days": 1,
        "due_date": date(2024, 1, 10),
        "business_days_remaining": 0,
    }

    response = client.post(
        "/api/v1/deadlines/calculate", json={"start_date": "2024-01-05", "days": 1, "state": "MT"}
    )

    assert response.status_code == 200
    assert response.json()["due_date"] == "2024-01-10"
    mock_deadline_service.calculate.assert_awaited_once_with(date(2024, 1, 5), 1, "MT")


def test_calculate_rejects_zero_days(client, mock_deadline_service):
    response = client.post("/api/v1/deadlines/calculate", json={"start_date": "2024-01-05", "days": 0})
    assert response.status_code == 422


def test_create_requires_due_date_source(client, mock_deadline_service):
    response = client.post(
        "/api/v1/deadlines", json={"case_id": str(uuid4()), "title": "Reply", "start_date": "2024-01-05"}
    )

    assert response.status_code == 422
    mock_deadline_service.create_deadline.assert_not_awaited()


def test_complete_missing_deadline(client, mock_deadline_service, record_id):
    mock_deadline_service.complete_deadline.side_effect = NotFoundError("Deadline", record_id)

    response = client.post(f"/api/v1/deadlines/{record_id}/complete")

    assert response.status_code == 404


def test_creditor_summary_for_missing_case(client, mock_creditor_service, record_id):
    mock_creditor_service.summary.side_effect = NotFoundError("Case", record_id)

    response = client.get(f"/api/v1/cases/{record_id}/creditors/summary")

    assert response.status_code == 404


def test_npv_calculator(client):
    response = client.post(
        "/api/v1/restructuring/npv", json={"cash_flows": [10_000], "annual_discount_percent": 12}
    )

    assert response.status_code == 200
    assert response.json() == {"nominal_total": 10_000, "present_value": 9_901}


def test_payment_schedule_validation(client):
    response = client.post(
        "/api/v1/restructuring/payment-schedule",
        json={"amount": 0, "installments": 12, "start_date": "2024-01-31"},
    )
    assert response.status_code == 422
