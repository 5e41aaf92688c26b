"""
AI drafting schemas.

Dependencies: pydantic
System role: Drafting assistant API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import DraftLength, DraftTone


class GenerateDocumentRequest(BaseModel):
    """Request schema for streaming a drafted document."""

    document_type: str = Field(..., min_length=1, max_length=64, description="e.g. INITIAL_PETITION")
    instructions: str | None = Field(None, max_length=20000)
    tone: DraftTone = DraftTone.TECHNICAL
    length: DraftLength = DraftLength.STANDARD
    addressee: str = Field("Judge", max_length=255)
    include_case_law: bool = True
    include_doctrine: bool = False
    include_injunction: bool = False
    force_premium: bool = False
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None


class UsageTotals(BaseModel):
    key: str
    requests: int
    tokens_in: int
    tokens_out: int
    estimated_cost: float


class UsageReportResponse(BaseModel):
    date_from: datetime | None = None
    date_to: datetime | None = None
    total_requests: int
    total_tokens_in: int
    total_tokens_out: int
    total_estimated_cost: float
    by_action: list[UsageTotals]
    by_model: list[UsageTotals]
