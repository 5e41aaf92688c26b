"""
Team analytics, OKR and KPI schemas.

Dependencies: pydantic
System role: Team performance API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import OKRCategory, OKRStatus, UserRole
from lexoffice.models.common import ORMModel
from lexoffice.models.user import UserSummary


class MemberWorkload(BaseModel):
    user_id: uuid.UUID
    name: str
    role: UserRole
    pending_deadlines: int = 0
    overdue_deadlines: int = 0
    deadlines_next_7_days: int = 0
    open_tasks: int = 0
    events_next_7_days: int = 0
    activity_minutes_30_days: int = 0
    billable_minutes_30_days: int = 0


class TeamTotals(BaseModel):
    members: int = 0
    pending_deadlines: int = 0
    overdue_deadlines: int = 0
    deadlines_next_7_days: int = 0
    open_tasks: int = 0
    events_next_7_days: int = 0
    activity_minutes_30_days: int = 0
    billable_minutes_30_days: int = 0


class TeamAnalyticsResponse(BaseModel):
    members: list[MemberWorkload]
    totals: TeamTotals


# OKRs


class KeyResult(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    metric: str = Field(..., min_length=1, max_length=255)
    target_value: float
    current_value: float = 0.0
    unit: str | None = Field(None, max_length=50)
    weight: float = Field(100.0, ge=0, le=100)


class CreateOKRRequest(BaseModel):
    user_id: uuid.UUID
    quarter: int = Field(..., ge=1, le=4)
    year: int = Field(..., ge=2000, le=2100)
    objective: str = Field(..., min_length=1)
    category: OKRCategory
    key_results: list[KeyResult] = Field(default_factory=list)
    status: OKRStatus = OKRStatus.DRAFT
    parent_okr_id: uuid.UUID | None = None


class UpdateOKRRequest(BaseModel):
    objective: str | None = Field(None, min_length=1)
    category: OKRCategory | None = None
    key_results: list[KeyResult] | None = None
    status: OKRStatus | None = None
    self_assessment: str | None = None
    manager_comment: str | None = None
    parent_okr_id: uuid.UUID | None = None


class KeyResultCheckIn(BaseModel):
    index: int = Field(..., ge=0)
    current_value: float


class OKRCheckInRequest(BaseModel):
    key_results: list[KeyResultCheckIn] = Field(..., min_length=1)


class CloseOKRRequest(BaseModel):
    manager_comment: str | None = None
    self_assessment: str | None = None


class ChildOKR(ORMModel):
    id: uuid.UUID
    objective: str
    overall_progress: float
    status: OKRStatus


class OKRResponse(ORMModel):
    id: uuid.UUID
    user_id: uuid.UUID
    user: UserSummary | None = None
    quarter: int
    year: int
    objective: str
    category: OKRCategory
    status: OKRStatus
    key_results: list[KeyResult]
    overall_progress: float
    final_score: float | None = None
    self_assessment: str | None = None
    manager_comment: str | None = None
    parent_okr_id: uuid.UUID | None = None
    children: list[ChildOKR] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class OKRListResponse(BaseModel):
    items: list[OKRResponse]
    total: int
    page: int
    pages: int


# KPIs


class KPIFields(BaseModel):
    billable_hours: float | None = Field(None, ge=0)
    total_hours: float | None = Field(None, ge=0)
    utilization_rate: float | None = Field(None, ge=0)
    cases_active: int | None = Field(None, ge=0)
    deadlines_met: int | None = Field(None, ge=0)
    deadlines_total: int | None = Field(None, ge=0)
    deadline_compliance_rate: float | None = Field(None, ge=0, le=100)
    pieces_produced: int | None = Field(None, ge=0)
    pieces_quality_score: float | None = Field(None, ge=0)
    case_success_rate: float | None = Field(None, ge=0, le=100)
    revenue_generated: int | None = Field(None, ge=0, description="Centavos")
    clients_acquired: int | None = Field(None, ge=0)
    training_hours: float | None = Field(None, ge=0)
    mentoring_sessions: int | None = Field(None, ge=0)
    overall_score: float | None = Field(None, ge=0)
    insights: str | None = None


class RecordKPIRequest(KPIFields):
    """Monthly snapshot; any day of the month identifies the period."""

    user_id: uuid.UUID
    period: date


class UpdateKPIRequest(KPIFields):
    pass


class KPIEntryResponse(KPIFields, ORMModel):
    id: uuid.UUID
    user_id: uuid.UUID
    user: UserSummary | None = None
    period: date
    created_at: datetime
    updated_at: datetime


class KPIListResponse(BaseModel):
    items: list[KPIEntryResponse]
    total: int
    page: int
    pages: int


class MemberKPIAverages(BaseModel):
    user_id: uuid.UUID
    name: str
    entries: int
    avg_billable_hours: float
    avg_utilization_rate: float
    avg_deadline_compliance: float
    avg_overall_score: float
    total_revenue_generated: int


class KPITrend(BaseModel):
    month: str = Field(description="YYYY-MM")
    avg_billable_hours: float
    avg_utilization_rate: float
    avg_deadline_compliance: float


class KPIDashboardResponse(BaseModel):
    member_averages: list[MemberKPIAverages]
    rankings: list[MemberKPIAverages]
    trends: list[KPITrend]
