"""
Fee, expense and financial dashboard schemas.

Dependencies: pydantic
System role: Office billing API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import ExpenseCategory, FeeStatus, FeeType
from lexoffice.models.common import ORMModel


class LinkedCase(BaseModel):
    id: uuid.UUID
    case_number: str
    client_name: str | None = None


class LinkedProject(BaseModel):
    id: uuid.UUID
    code: str
    title: str


# Fees


class CreateFeeRequest(BaseModel):
    """A fee with installments > 1 is split into monthly rows."""

    type: FeeType
    description: str = Field(..., min_length=1, max_length=480)
    amount: int = Field(..., gt=0, description="Centavos")
    installments: int = Field(1, ge=1, le=120)
    due_date: date = Field(description="Due date of the first installment")
    recurring: bool = False
    recurrence: str | None = Field(None, max_length=50)
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    person_id: uuid.UUID | None = None
    notes: str | None = None


class UpdateFeeRequest(BaseModel):
    type: FeeType | None = None
    description: str | None = Field(None, min_length=1, max_length=500)
    amount: int | None = Field(None, gt=0)
    due_date: date | None = None
    status: FeeStatus | None = None
    recurring: bool | None = None
    recurrence: str | None = Field(None, max_length=50)
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    person_id: uuid.UUID | None = None
    notes: str | None = None


class MarkFeePaidRequest(BaseModel):
    paid_date: date | None = Field(None, description="Defaults to today")


class FeeResponse(ORMModel):
    id: uuid.UUID
    type: FeeType
    description: str
    amount: int
    installments: int
    installment_number: int
    recurring: bool
    recurrence: str | None = None
    due_date: date
    paid_date: date | None = None
    status: FeeStatus
    notes: str | None = None
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    person_id: uuid.UUID | None = None
    case: LinkedCase | None = None
    project: LinkedProject | None = None
    created_at: datetime
    updated_at: datetime


class FeeCreateResponse(BaseModel):
    created: int
    items: list[FeeResponse]


class FeeListResponse(BaseModel):
    items: list[FeeResponse]
    total: int
    page: int
    pages: int


# Expenses


class CreateExpenseRequest(BaseModel):
    category: ExpenseCategory
    description: str = Field(..., min_length=1, max_length=500)
    amount: int = Field(..., gt=0, description="Centavos")
    expense_date: date
    reimbursable: bool = False
    receipt_url: str | None = Field(None, max_length=1024)
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    notes: str | None = None


class MarkReimbursedRequest(BaseModel):
    reimbursed_date: date | None = Field(None, description="Defaults to today")


class ExpenseResponse(ORMModel):
    id: uuid.UUID
    category: ExpenseCategory
    description: str
    amount: int
    expense_date: date
    reimbursable: bool
    reimbursed: bool
    reimbursed_date: date | None = None
    receipt_url: str | None = None
    notes: str | None = None
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    case: LinkedCase | None = None
    project: LinkedProject | None = None
    created_at: datetime
    updated_at: datetime


class ExpenseListResponse(BaseModel):
    items: list[ExpenseResponse]
    total: int
    page: int
    pages: int


# Dashboard


class MonthlyFees(BaseModel):
    month: date = Field(description="First day of the due month")
    paid: int
    pending: int
    overdue: int


class FinancialDashboardResponse(BaseModel):
    start: date
    end: date
    revenue: int = Field(description="Fees paid within the period")
    receivable: int = Field(description="Pending fees")
    expenses: int = Field(description="Expenses dated within the period")
    result: int = Field(description="Revenue minus expenses")
    overdue: int = Field(description="Fees marked overdue")
    monthly: list[MonthlyFees]
