"""
Integration tests for FinancialService.

System role: Verification of fees, expenses and the financial dashboard
"""

import uuid
from datetime import date

import pytest

from lexoffice.application.services import FinancialService
from lexoffice.core.enums import ExpenseCategory, FeeStatus, FeeType
from lexoffice.core.exceptions import NotFoundError, PreconditionFailedError, ValidationError

TODAY = date(2024, 3, 15)


@pytest.fixture
def financial_service(test_async_db) -> FinancialService:
    return FinancialService(test_async_db)


async def _fee(financial_service, amount=100_000, due_date=date(2024, 3, 10), **extra):
    result = await financial_service.create_fee(
        type=FeeType.FIXED, description="Retainer", amount=amount, due_date=due_date, **extra
    )
    return result["items"][0]


class TestFees:
    @pytest.mark.asyncio
    async def test_installments_create_one_row_each(self, financial_service, case) -> None:
        result = await financial_service.create_fee(
            type=FeeType.MONTHLY,
            description="Restructuring retainer",
            amount=100_000,
            installments=3,
            due_date=date(2024, 1, 31),
            case_id=case["id"],
        )

        assert result["created"] == 3
        assert [f["amount"] for f in result["items"]] == [33_333, 33_333, 33_334]
        assert [f["installment_number"] for f in result["items"]] == [1, 2, 3]
        assert result["items"][1]["due_date"] == date(2024, 2, 29)
        assert result["items"][0]["case"]["client_name"] == "Agro Vale Ltda"

        listing = await financial_service.list_fees(case_id=case["id"])
        assert listing["total"] == 3
        assert listing["items"][0]["installment_number"] == 3

    @pytest.mark.asyncio
    async def test_unknown_case_is_not_found(self, financial_service) -> None:
        with pytest.raises(NotFoundError):
            await _fee(financial_service, case_id=uuid.uuid4())

    @pytest.mark.asyncio
    async def test_mark_paid_defaults_and_cancelled_guard(self, financial_service) -> None:
        fee = await _fee(financial_service)
        paid = await financial_service.mark_fee_paid(fee["id"], date(2024, 3, 12))
        assert paid["status"] == FeeStatus.PAID
        assert paid["paid_date"] == date(2024, 3, 12)

        cancelled = await _fee(financial_service)
        await financial_service.update_fee(cancelled["id"], status=FeeStatus.CANCELLED)
        with pytest.raises(PreconditionFailedError):
            await financial_service.mark_fee_paid(cancelled["id"])

    @pytest.mark.asyncio
    async def test_delete(self, financial_service) -> None:
        fee = await _fee(financial_service)

        await financial_service.delete_fee(fee["id"])

        with pytest.raises(NotFoundError):
            await financial_service.get_fee(fee["id"])
        with pytest.raises(NotFoundError):
            await financial_service.delete_fee(fee["id"])


class TestExpenses:
    @pytest.mark.asyncio
    async def test_reimburse_only_reimbursable(self, financial_service, case) -> None:
        costs = await financial_service.create_expense(
            category=ExpenseCategory.COURT_COSTS,
            description="Filing fee",
            amount=25_000,
            expense_date=date(2024, 3, 1),
            reimbursable=True,
            case_id=case["id"],
        )
        travel = await financial_service.create_expense(
            category=ExpenseCategory.TRAVEL,
            description="Hearing trip",
            amount=80_000,
            expense_date=date(2024, 3, 2),
        )

        reimbursed = await financial_service.mark_expense_reimbursed(costs["id"], date(2024, 3, 20))

        assert reimbursed["reimbursed"] is True
        assert reimbursed["reimbursed_date"] == date(2024, 3, 20)
        with pytest.raises(ValidationError):
            await financial_service.mark_expense_reimbursed(travel["id"])

        listing = await financial_service.list_expenses(category=ExpenseCategory.TRAVEL)
        assert [e["id"] for e in listing["items"]] == [travel["id"]]


class TestDashboard:
    @pytest.mark.asyncio
    async def test_month_totals(self, financial_service) -> None:
        paid = await _fee(financial_service, amount=300_000)
        await financial_service.mark_fee_paid(paid["id"], date(2024, 3, 5))
        old_paid = await _fee(financial_service, amount=50_000, due_date=date(2024, 1, 10))
        await financial_service.mark_fee_paid(old_paid["id"], date(2024, 1, 10))
        await _fee(financial_service, amount=120_000, due_date=date(2024, 4, 10))
        overdue = await _fee(financial_service, amount=40_000, due_date=date(2024, 2, 10))
        await financial_service.update_fee(overdue["id"], status=FeeStatus.OVERDUE)
        await financial_service.create_expense(
            category=ExpenseCategory.COPIES, description="Copies", amount=10_000, expense_date=date(2024, 3, 3)
        )
        await financial_service.create_expense(
            category=ExpenseCategory.COPIES, description="Old copies", amount=7_000, expense_date=date(2024, 2, 3)
        )

        result = await financial_service.dashboard(today=TODAY)

        assert (result["start"], result["end"]) == (date(2024, 3, 1), date(2024, 3, 31))
        assert result["revenue"] == 300_000
        assert result["receivable"] == 120_000
        assert result["overdue"] == 40_000
        assert result["expenses"] == 10_000
        assert result["result"] == 290_000
        assert [m["month"] for m in result["monthly"]] == [
            date(2024, 4, 1),
            date(2024, 3, 1),
            date(2024, 2, 1),
            date(2024, 1, 1),
        ]

    @pytest.mark.asyncio
    async def test_inverted_period_is_rejected(self, financial_service) -> None:
        with pytest.raises(ValidationError):
            await financial_service.dashboard(start=date(2024, 3, 10), end=date(2024, 3, 1))
