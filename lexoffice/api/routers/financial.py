"""
Financial API endpoints.

Routes:
- GET /financial/dashboard - Revenue, receivables, expenses and monthly fees
- GET /financial/fees - List fees (page-numbered)
- POST /financial/fees - Create a fee, split into installments
- GET|PATCH|DELETE /financial/fees/{id}
- POST /financial/fees/{id}/pay - Mark paid
- GET /financial/expenses - List expenses (page-numbered)
- POST /financial/expenses - Create an expense
- GET|DELETE /financial/expenses/{id}
- POST /financial/expenses/{id}/reimburse - Mark reimbursed

Dependencies: lexoffice.application.services, lexoffice.models
System role: Office billing HTTP API
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_financial_service
from lexoffice.application.services import FinancialService
from lexoffice.core.enums import ExpenseCategory, FeeStatus
from lexoffice.models.financial import (
    CreateExpenseRequest,
    CreateFeeRequest,
    ExpenseListResponse,
    ExpenseResponse,
    FeeCreateResponse,
    FeeListResponse,
    FeeResponse,
    FinancialDashboardResponse,
    MarkFeePaidRequest,
    MarkReimbursedRequest,
    UpdateFeeRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/financial", tags=["financial"])


@router.get("/dashboard", response_model=FinancialDashboardResponse)
@handle_service_errors
async def financial_dashboard(
    start: date | None = None,
    end: date | None = None,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """
    Office results for a period (current month by default).

    Args:
        start: First day of the period
        end: Last day of the period
        financial_service: Injected FinancialService

    Returns:
        FinancialDashboardResponse: revenue, receivable, expenses, result,
            overdue and fees per due month over the last six months
    """
    return await financial_service.dashboard(start=start, end=end)


# Fees


@router.get("/fees", response_model=FeeListResponse)
@handle_service_errors
async def list_fees(
    case_id: UUID | None = None,
    project_id: UUID | None = None,
    status: FeeStatus | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """List fees, latest due date first."""
    return await financial_service.list_fees(
        case_id=case_id, project_id=project_id, status=status, page=page, limit=limit
    )


@router.post("/fees", response_model=FeeCreateResponse, status_code=201)
@handle_service_errors
async def create_fee(
    request: CreateFeeRequest,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """
    Create a fee.

    With installments > 1 the amount is split into monthly rows, the last
    one absorbing the rounding remainder.
    """
    logger.info("Creating fee", extra={"type": request.type.value, "installments": request.installments})
    return await financial_service.create_fee(**request.model_dump())


@router.get("/fees/{fee_id}", response_model=FeeResponse)
@handle_service_errors
async def get_fee(
    fee_id: UUID,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    return await financial_service.get_fee(fee_id)


@router.patch("/fees/{fee_id}", response_model=FeeResponse)
@handle_service_errors
async def update_fee(
    fee_id: UUID,
    request: UpdateFeeRequest,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """Update a fee; only the fields sent are changed."""
    return await financial_service.update_fee(fee_id, **request.model_dump(exclude_unset=True))


@router.post("/fees/{fee_id}/pay", response_model=FeeResponse)
@handle_service_errors
async def mark_fee_paid(
    fee_id: UUID,
    request: MarkFeePaidRequest,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    return await financial_service.mark_fee_paid(fee_id, request.paid_date)


@router.delete("/fees/{fee_id}", status_code=204)
@handle_service_errors
async def delete_fee(
    fee_id: UUID,
    financial_service: FinancialService = Depends(get_financial_service),
) -> None:
    await financial_service.delete_fee(fee_id)


# Expenses


@router.get("/expenses", response_model=ExpenseListResponse)
@handle_service_errors
async def list_expenses(
    case_id: UUID | None = None,
    project_id: UUID | None = None,
    category: ExpenseCategory | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """List expenses, latest first."""
    return await financial_service.list_expenses(
        case_id=case_id, project_id=project_id, category=category, page=page, limit=limit
    )


@router.post("/expenses", response_model=ExpenseResponse, status_code=201)
@handle_service_errors
async def create_expense(
    request: CreateExpenseRequest,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    return await financial_service.create_expense(**request.model_dump())


@router.get("/expenses/{expense_id}", response_model=ExpenseResponse)
@handle_service_errors
async def get_expense(
    expense_id: UUID,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    return await financial_service.get_expense(expense_id)


@router.post("/expenses/{expense_id}/reimburse", response_model=ExpenseResponse)
@handle_service_errors
async def mark_expense_reimbursed(
    expense_id: UUID,
    request: MarkReimbursedRequest,
    financial_service: FinancialService = Depends(get_financial_service),
) -> dict:
    """Mark a reimbursable expense as reimbursed by the client."""
    return await financial_service.mark_expense_reimbursed(expense_id, request.reimbursed_date)


@router.delete("/expenses/{expense_id}", status_code=204)
@handle_service_errors
async def delete_expense(
    expense_id: UUID,
    financial_service: FinancialService = Depends(get_financial_service),
) -> None:
    await financial_service.delete_expense(expense_id)
