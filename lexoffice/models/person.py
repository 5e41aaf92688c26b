"""
Person (client / CRM) schemas.

Dependencies: pydantic
System role: CRM API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from lexoffice.core.enums import (
    CaseStatus,
    CaseType,
    PersonDocumentType,
    PersonSubtype,
    PersonType,
    Segment,
)
from lexoffice.models.common import EMAIL_PATTERN, ORMModel


class PersonFields(BaseModel):
    """Optional person fields shared by create and update."""

    legal_name: str | None = Field(None, max_length=255)
    tax_id: str | None = Field(None, max_length=20, description="CPF or CNPJ")

    identity_number: str | None = Field(None, max_length=32)
    birth_date: date | None = None
    nationality: str | None = Field(None, max_length=64)
    marital_status: str | None = Field(None, max_length=32)
    profession: str | None = Field(None, max_length=128)
    state_registration: str | None = Field(None, max_length=32)
    municipal_registration: str | None = Field(None, max_length=32)

    street: str | None = Field(None, max_length=255)
    number: str | None = Field(None, max_length=32)
    complement: str | None = Field(None, max_length=128)
    neighborhood: str | None = Field(None, max_length=128)
    city: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    zip_code: str | None = Field(None, max_length=16)

    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    phone: str | None = Field(None, max_length=32)
    mobile: str | None = Field(None, max_length=32)
    whatsapp: str | None = Field(None, max_length=32)

    bank: str | None = Field(None, max_length=128)
    agency: str | None = Field(None, max_length=16)
    account: str | None = Field(None, max_length=32)
    pix_key: str | None = Field(None, max_length=128)

    segment: Segment | None = None
    notes: str | None = None
    portal_access: bool | None = None

    @field_validator("email", "tax_id", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        """Empty strings are stored as NULL."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CreatePersonRequest(PersonFields):
    """Request schema for creating a person."""

    type: PersonType = PersonType.CLIENT
    subtype: PersonSubtype = PersonSubtype.INDIVIDUAL
    name: str = Field(..., min_length=2, max_length=255)


class UpdatePersonRequest(PersonFields):
    """Request schema for updating a person; only sent fields change."""

    type: PersonType | None = None
    subtype: PersonSubtype | None = None
    name: str | None = Field(None, min_length=2, max_length=255)


class PersonSummary(ORMModel):
    id: uuid.UUID
    name: str
    type: PersonType
    subtype: PersonSubtype
    tax_id: str | None = None


class PersonResponse(PersonSummary):
    """Full person record."""

    legal_name: str | None = None
    identity_number: str | None = None
    birth_date: date | None = None
    nationality: str | None = None
    marital_status: str | None = None
    profession: str | None = None
    state_registration: str | None = None
    municipal_registration: str | None = None
    street: str | None = None
    number: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    email: str | None = None
    phone: str | None = None
    mobile: str | None = None
    whatsapp: str | None = None
    bank: str | None = None
    agency: str | None = None
    account: str | None = None
    pix_key: str | None = None
    segment: Segment | None = None
    notes: str | None = None
    portal_access: bool = False
    created_at: datetime
    updated_at: datetime


class CreatePersonDocumentRequest(BaseModel):
    """Request schema for attaching a document to a person."""

    type: PersonDocumentType
    title: str = Field(..., min_length=1, max_length=255)
    file_url: str | None = Field(None, max_length=1024)
    expires_on: date | None = None
    notes: str | None = None


class PersonDocumentResponse(ORMModel):
    id: uuid.UUID
    person_id: uuid.UUID
    type: PersonDocumentType
    title: str
    file_url: str | None = None
    expires_on: date | None = None
    notes: str | None = None
    created_at: datetime


class PersonCaseItem(ORMModel):
    """Case in which the person is the client."""

    id: uuid.UUID
    case_number: str
    type: CaseType
    status: CaseStatus


class PersonDetailResponse(PersonResponse):
    cases: list[PersonCaseItem] = Field(default_factory=list)
    documents: list[PersonDocumentResponse] = Field(default_factory=list)


class PersonListResponse(ORMModel):
    items: list[PersonResponse]
    next_cursor: uuid.UUID | None = None
    total: int
