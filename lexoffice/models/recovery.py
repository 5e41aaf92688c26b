"""
Credit recovery schemas.

Dependencies: pydantic
System role: Credit recovery API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from lexoffice.core.enums import (
    JointDebtorStatus,
    LiabilityType,
    PersonSubtype,
    Priority,
    RecoveryAnalysisType,
    RecoveryPhase,
    RecoveryStatus,
    RecoveryType,
)
from lexoffice.models.common import ORMModel
from lexoffice.models.person import PersonSummary


class RecoveryValues(BaseModel):
    total_execution_value: int | None = Field(None, ge=0)
    fees_value: int | None = Field(None, ge=0)
    costs_value: int | None = Field(None, ge=0)
    instrument_type: str | None = Field(None, max_length=64)
    instrument_number: str | None = Field(None, max_length=64)
    instrument_due_date: date | None = None
    prescription_date: date | None = None
    notes: str | None = None


class CreateRecoveryCaseRequest(RecoveryValues):
    """Request schema for creating a recovery case against an existing debtor."""

    title: str = Field(..., min_length=1, max_length=255)
    debtor_id: uuid.UUID
    case_id: uuid.UUID | None = None
    type: RecoveryType = RecoveryType.EXECUTION
    phase: RecoveryPhase = RecoveryPhase.INVESTIGATION
    priority: Priority = Priority.MEDIUM
    responsible_id: uuid.UUID | None = None
    original_value: int = Field(..., ge=0, description="Centavos")
    updated_value: int | None = Field(None, ge=0)


class WizardDebtor(BaseModel):
    """Debtor data captured by the intake wizard."""

    person_id: uuid.UUID | None = Field(None, description="Reuse an existing person")
    name: str | None = Field(None, min_length=2, max_length=255)
    tax_id: str | None = Field(None, max_length=20)
    subtype: PersonSubtype = PersonSubtype.INDIVIDUAL
    address: str | None = Field(None, max_length=512)
    city: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    phone: str | None = Field(None, max_length=32)
    email: str | None = Field(None, max_length=255)
    activity: str | None = Field(None, max_length=255)

    @model_validator(mode="after")
    def check_identity(self) -> "WizardDebtor":
        if self.person_id is None and not self.name:
            raise ValueError("Provide person_id or the debtor name")
        return self


class WizardJointDebtor(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    tax_id: str | None = Field(None, max_length=20)
    person_id: uuid.UUID | None = None
    liability_type: LiabilityType = LiabilityType.GUARANTOR
    grounds: str | None = None
    estimated_assets: int | None = Field(None, ge=0)


class WizardAnalysis(BaseModel):
    """AI analysis produced during intake, stored with the case."""

    score: int | None = Field(None, ge=0, le=100)
    score_factors: dict | None = None
    strategy: str | None = None


class RecoveryWizardRequest(RecoveryValues):
    """
    Multi-step intake in one request.

    The updated value is original_value + monetary_correction + interest.
    """

    title: str = Field(..., min_length=1, max_length=255)
    debtor: WizardDebtor
    case_id: uuid.UUID | None = None
    type: RecoveryType = RecoveryType.EXECUTION
    priority: Priority = Priority.MEDIUM
    responsible_id: uuid.UUID | None = None
    original_value: int = Field(..., ge=0)
    monetary_correction: int = Field(0, ge=0)
    interest: int = Field(0, ge=0)
    analysis: WizardAnalysis | None = None
    joint_debtors: list[WizardJointDebtor] = Field(default_factory=list)


class UpdatePhaseRequest(BaseModel):
    phase: RecoveryPhase
    status: RecoveryStatus | None = None


class UpdateScoreRequest(BaseModel):
    score: int = Field(..., ge=0, le=100)
    score_factors: dict | None = None


class UpdateStrategyRequest(BaseModel):
    ai_strategy: str = Field(..., min_length=1)


class JointDebtorResponse(ORMModel):
    id: uuid.UUID
    person_id: uuid.UUID | None = None
    name: str
    tax_id: str | None = None
    liability_type: LiabilityType
    grounds: str | None = None
    estimated_assets: int | None = None
    status: JointDebtorStatus


class RecoveryCaseResponse(ORMModel):
    id: uuid.UUID
    code: str
    title: str
    debtor_id: uuid.UUID
    debtor: PersonSummary | None = None
    case_id: uuid.UUID | None = None
    type: RecoveryType
    phase: RecoveryPhase
    status: RecoveryStatus
    priority: Priority
    responsible_id: uuid.UUID | None = None
    original_value: int
    updated_value: int | None = None
    total_execution_value: int | None = None
    fees_value: int | None = None
    costs_value: int | None = None
    recovered_value: int
    blocked_value: int
    seized_value: int
    recovered_percent: float
    instrument_type: str | None = None
    instrument_number: str | None = None
    instrument_due_date: date | None = None
    prescription_date: date | None = None
    debtor_name: str | None = None
    debtor_tax_id: str | None = None
    debtor_kind: str | None = None
    debtor_address: str | None = None
    debtor_phone: str | None = None
    debtor_email: str | None = None
    debtor_activity: str | None = None
    score: int | None = None
    score_factors: dict | None = None
    ai_strategy: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class RecoveryCaseDetailResponse(RecoveryCaseResponse):
    joint_debtors: list[JointDebtorResponse] = Field(default_factory=list)


class PhaseTotals(BaseModel):
    count: int
    value: int


class RecoveryDashboardResponse(BaseModel):
    total_active: int
    total_original_value: int
    total_updated_value: int
    total_recovered_value: int
    total_blocked_value: int
    average_score: float | None = None
    by_phase: dict[str, PhaseTotals]


class RecoveryAnalysisRequest(BaseModel):
    analysis_type: RecoveryAnalysisType
    extra_data: str | None = Field(None, description="Extra facts (JSON or free text) for the model")
    user_id: uuid.UUID | None = None


class RecoveryAnalysisResponse(BaseModel):
    analysis_type: RecoveryAnalysisType
    model: str
    tier: str
    text: str
    tokens_in: int
    tokens_out: int
    estimated_cost: float
