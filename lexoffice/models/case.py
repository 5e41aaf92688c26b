"""
Case schemas.

Dependencies: pydantic
System role: Case API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import (
    CaseStatus,
    CaseType,
    CreditorClass,
    CreditorStatus,
    DeadlineStatus,
    DeadlineType,
)
from lexoffice.models.common import ORMModel
from lexoffice.models.person import PersonSummary
from lexoffice.models.user import UserSummary


class CreateCaseRequest(BaseModel):
    """Request schema for creating a case."""

    case_number: str = Field(..., min_length=1, max_length=64)
    type: CaseType
    status: CaseStatus = CaseStatus.ACTIVE
    court: str | None = Field(None, max_length=255)
    district: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    claim_value: int | None = Field(None, ge=0, description="Centavos")
    client_id: uuid.UUID
    responsible_id: uuid.UUID | None = None
    judge_id: uuid.UUID | None = None
    description: str | None = None


class UpdateCaseRequest(BaseModel):
    """Request schema for updating a case; only sent fields change."""

    case_number: str | None = Field(None, min_length=1, max_length=64)
    type: CaseType | None = None
    status: CaseStatus | None = None
    court: str | None = Field(None, max_length=255)
    district: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    claim_value: int | None = Field(None, ge=0)
    client_id: uuid.UUID | None = None
    responsible_id: uuid.UUID | None = None
    judge_id: uuid.UUID | None = None
    description: str | None = None


class CaseSummary(ORMModel):
    id: uuid.UUID
    case_number: str
    type: CaseType
    status: CaseStatus


class CaseResponse(CaseSummary):
    court: str | None = None
    district: str | None = None
    state: str | None = None
    claim_value: int | None = None
    description: str | None = None
    client_id: uuid.UUID
    responsible_id: uuid.UUID | None = None
    judge_id: uuid.UUID | None = None
    client: PersonSummary | None = None
    responsible: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class CaseDeadlineItem(ORMModel):
    id: uuid.UUID
    title: str
    type: DeadlineType
    status: DeadlineStatus
    due_date: date


class CaseCreditorItem(ORMModel):
    id: uuid.UUID
    name: str
    creditor_class: CreditorClass
    status: CreditorStatus
    original_value: int
    updated_value: int | None = None


class CaseDetailResponse(CaseResponse):
    judge: PersonSummary | None = None
    deadlines: list[CaseDeadlineItem] = Field(default_factory=list)
    creditors: list[CaseCreditorItem] = Field(default_factory=list)


class CaseListResponse(ORMModel):
    items: list[CaseResponse]
    next_cursor: uuid.UUID | None = None


class CaseSelectItem(ORMModel):
    """Compact case entry for select inputs."""

    id: uuid.UUID
    case_number: str
    type: CaseType
    client_name: str | None = None
