"""
Deadline and holiday schemas.

Dependencies: pydantic
System role: Deadline control API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from lexoffice.core.enums import DeadlineStatus, DeadlineType, HolidayScope
from lexoffice.models.common import ORMModel
from lexoffice.models.user import UserSummary


class CreateDeadlineRequest(BaseModel):
    """
    Request schema for creating a deadline.

    Either `due_date` is given, or `start_date` plus `business_days`
    (and optionally `state` for state holidays) so the due date is
    computed.
    """

    case_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=255)
    type: DeadlineType = DeadlineType.ORDINARY
    due_date: date | None = None
    start_date: date | None = None
    business_days: int | None = Field(None, ge=1, le=365)
    state: str | None = Field(None, min_length=2, max_length=2)
    responsible_id: uuid.UUID | None = None
    description: str | None = None

    @model_validator(mode="after")
    def check_due_date_source(self) -> "CreateDeadlineRequest":
        if self.due_date is None and (self.start_date is None or self.business_days is None):
            raise ValueError("Provide due_date or start_date with business_days")
        return self


class UpdateDeadlineRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    type: DeadlineType | None = None
    status: DeadlineStatus | None = None
    due_date: date | None = None
    responsible_id: uuid.UUID | None = None
    description: str | None = None


class CompleteDeadlineRequest(BaseModel):
    fulfillment_document_id: str | None = Field(None, max_length=255)


class DeadlineCaseSummary(ORMModel):
    id: uuid.UUID
    case_number: str
    client_name: str | None = None


class DeadlineResponse(ORMModel):
    id: uuid.UUID
    case_id: uuid.UUID
    title: str
    type: DeadlineType
    status: DeadlineStatus
    due_date: date
    description: str | None = None
    responsible_id: uuid.UUID | None = None
    fulfilled_at: datetime | None = None
    fulfillment_document_id: str | None = None
    case: DeadlineCaseSummary | None = None
    responsible: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class DeadlineListResponse(BaseModel):
    items: list[DeadlineResponse]
    total: int


class DeadlineStatsResponse(BaseModel):
    """Dashboard counters of PENDING deadlines (overdue also counts MISSED)."""

    today: int
    tomorrow: int
    this_week: int
    next_30_days: int
    overdue: int


class CalculateDeadlineRequest(BaseModel):
    start_date: date
    days: int = Field(..., ge=1, le=365, description="Business days")
    state: str | None = Field(None, min_length=2, max_length=2)


class CalculateDeadlineResponse(BaseModel):
    start_date: date
    days: int
    due_date: date
    business_days_remaining: int


class CreateHolidayRequest(BaseModel):
    date: date
    name: str = Field(..., min_length=1, max_length=255)
    scope: HolidayScope = HolidayScope.NATIONAL
    state: str | None = Field(None, min_length=2, max_length=2)

    @model_validator(mode="after")
    def check_state_scope(self) -> "CreateHolidayRequest":
        if self.scope != HolidayScope.NATIONAL and not self.state:
            raise ValueError("State and municipal holidays need a state")
        return self


class HolidayResponse(ORMModel):
    id: uuid.UUID
    date: date
    name: str
    scope: HolidayScope
    state: str | None = None
