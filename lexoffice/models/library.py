"""
Library entry schemas.

Dependencies: pydantic
System role: Legal library API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import CaseType, LibraryEntryType
from lexoffice.models.common import ORMModel


class CreateLibraryEntryRequest(BaseModel):
    type: LibraryEntryType
    title: str = Field(..., min_length=1, max_length=500)
    summary: str | None = None
    content: str | None = None
    source: str | None = Field(None, max_length=255)
    source_url: str | None = Field(None, max_length=1024)
    area: CaseType | None = None
    tags: list[str] = Field(default_factory=list)
    file_url: str | None = Field(None, max_length=1024)
    relevance: int = Field(0, ge=0, le=5)
    favorite: bool = False
    metadata: dict = Field(default_factory=dict)
    case_id: uuid.UUID | None = None


class UpdateLibraryEntryRequest(BaseModel):
    type: LibraryEntryType | None = None
    title: str | None = Field(None, min_length=1, max_length=500)
    summary: str | None = None
    content: str | None = None
    source: str | None = Field(None, max_length=255)
    source_url: str | None = Field(None, max_length=1024)
    area: CaseType | None = None
    tags: list[str] | None = None
    file_url: str | None = Field(None, max_length=1024)
    relevance: int | None = Field(None, ge=0, le=5)
    favorite: bool | None = None
    metadata: dict | None = None
    case_id: uuid.UUID | None = None


class LibraryEntryResponse(ORMModel):
    id: uuid.UUID
    type: LibraryEntryType
    title: str
    summary: str | None = None
    content: str | None = None
    source: str | None = None
    source_url: str | None = None
    area: CaseType | None = None
    tags: list[str] = Field(default_factory=list)
    file_url: str | None = None
    relevance: int
    favorite: bool
    metadata: dict = Field(default_factory=dict)
    case_id: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime


class LibraryListResponse(BaseModel):
    items: list[LibraryEntryResponse]
    total: int
    page: int
    pages: int
