"""
Creditor, voting and restructuring calculator schemas.

Dependencies: pydantic
System role: Creditor list and restructuring API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import CreditorClass, CreditorNature, CreditorStatus, VoteChoice
from lexoffice.models.common import ORMModel


class CreateCreditorRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    tax_id: str | None = Field(None, max_length=20)
    person_id: uuid.UUID | None = None
    creditor_class: CreditorClass
    nature: CreditorNature | None = None
    original_value: int = Field(..., ge=0, description="Centavos")
    updated_value: int | None = Field(None, ge=0)
    collateral_value: int | None = Field(None, ge=0)
    collateral_appraisal: int | None = Field(None, ge=0)
    status: CreditorStatus = CreditorStatus.LISTED
    haircut_percent: float | None = Field(None, ge=0, le=100)
    vote: VoteChoice | None = None
    present_at_assembly: bool = False
    notes: str | None = None


class UpdateCreditorRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    tax_id: str | None = Field(None, max_length=20)
    person_id: uuid.UUID | None = None
    creditor_class: CreditorClass | None = None
    nature: CreditorNature | None = None
    original_value: int | None = Field(None, ge=0)
    updated_value: int | None = Field(None, ge=0)
    collateral_value: int | None = Field(None, ge=0)
    collateral_appraisal: int | None = Field(None, ge=0)
    status: CreditorStatus | None = None
    haircut_percent: float | None = Field(None, ge=0, le=100)
    vote: VoteChoice | None = None
    present_at_assembly: bool | None = None
    notes: str | None = None


class CreditorResponse(ORMModel):
    id: uuid.UUID
    case_id: uuid.UUID
    person_id: uuid.UUID | None = None
    name: str
    tax_id: str | None = None
    creditor_class: CreditorClass
    nature: CreditorNature | None = None
    original_value: int
    updated_value: int | None = None
    collateral_value: int | None = None
    collateral_appraisal: int | None = None
    status: CreditorStatus
    haircut_percent: float | None = None
    vote: VoteChoice | None = None
    present_at_assembly: bool
    labor_capped_value: int | None = None
    labor_excess_value: int | None = None
    unsecured_portion: int | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class CreditorWriteResponse(BaseModel):
    creditor: CreditorResponse
    warnings: list[str] = Field(default_factory=list)


class ClassTotals(BaseModel):
    count: int
    value: int


class CreditorSummaryResponse(BaseModel):
    total_creditors: int
    total_credit: int
    by_class: dict[str, ClassTotals]
    by_status: dict[str, int]
    mean_haircut: float | None = None


class VoteOverrideRequest(BaseModel):
    vote: VoteChoice | None = None
    present: bool | None = None


class VotingSimulationRequest(BaseModel):
    overrides: dict[uuid.UUID, VoteOverrideRequest] = Field(default_factory=dict)


class ClassQuorumResponse(BaseModel):
    creditor_class: CreditorClass
    total_creditors: int
    present: int
    heads_for: int
    heads_against: int
    value_for: int
    value_against: int
    present_value: int
    head_quorum: float = Field(description="Percent of voting heads in favor")
    value_quorum: float = Field(description="Percent of voting value in favor")
    approved: bool
    rule: str


class PivotalCreditorResponse(BaseModel):
    id: uuid.UUID
    name: str
    creditor_class: CreditorClass
    value: int
    impact: str
    reason: str


class CramDownRequirementResponse(BaseModel):
    number: int
    description: str
    met: bool
    detail: str


class CramDownResponse(BaseModel):
    viable: bool
    requirements: list[CramDownRequirementResponse]
    blockers: list[str]


class VotingSimulationResponse(BaseModel):
    by_class: list[ClassQuorumResponse]
    plan_approved: bool
    approved_classes: int
    rejected_classes: int
    total_creditors: int
    total_present: int
    total_present_value: int
    cram_down: CramDownResponse
    pivotal_creditors: list[PivotalCreditorResponse]


class PaymentScheduleRequest(BaseModel):
    amount: int = Field(..., gt=0, description="Centavos")
    installments: int = Field(..., ge=1, le=600)
    start_date: date
    haircut_percent: float = Field(0.0, ge=0, le=100)
    grace_months: int = Field(0, ge=0, le=120)
    annual_rate_percent: float = Field(0.0, ge=0)


class InstallmentResponse(BaseModel):
    number: int
    due_date: date
    principal: int
    interest: int
    total: int
    balance: int


class PaymentScheduleResponse(BaseModel):
    principal: int
    total_paid: int
    total_interest: int
    installments: list[InstallmentResponse]


class NPVRequest(BaseModel):
    cash_flows: list[int] = Field(..., min_length=1)
    annual_discount_percent: float = Field(..., ge=0)


class NPVResponse(BaseModel):
    nominal_total: int
    present_value: int


class WaterfallRequest(BaseModel):
    total_assets: int = Field(..., ge=0)
    court_costs: int = Field(0, ge=0)
    labor_claims: int = Field(0, ge=0)
    tax_claims: int = Field(0, ge=0)
    secured_claims: int = Field(0, ge=0)
    unsecured_claims: int = Field(0, ge=0)
    small_business_claims: int = Field(0, ge=0)


class WaterfallTier(BaseModel):
    label: str
    available: int
    claim: int
    paid: int
    recovery_percent: float


class WaterfallResponse(BaseModel):
    tiers: list[WaterfallTier]
    total_paid: int
    average_recovery_percent: float
