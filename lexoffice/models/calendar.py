"""
Calendar event and activity schemas.

Dependencies: pydantic
System role: Calendar and timesheet API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from lexoffice.core.enums import (
    ActivityType,
    ConflictResolution,
    EventStatus,
    EventType,
    ModificationSource,
    SyncStatus,
)
from lexoffice.models.common import ORMModel, UTCDateTime
from lexoffice.models.user import UserSummary


class EventFields(BaseModel):
    description: str | None = None
    end_at: UTCDateTime | None = None
    all_day: bool | None = None
    location: str | None = Field(None, max_length=255)
    virtual_link: str | None = Field(None, max_length=1024)
    specific_fields: dict | None = None
    responsible_id: uuid.UUID | None = None
    internal_participants: list[str] | None = None
    external_participants: list[dict] | None = None
    reminder_minutes: int | None = Field(None, ge=0)
    color: str | None = Field(None, max_length=16)
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    task_id: uuid.UUID | None = None
    sync_external: bool | None = None


class CreateEventRequest(EventFields):
    """Request schema for creating a calendar event."""

    event_type: EventType = EventType.GENERAL
    title: str = Field(..., min_length=1, max_length=255)
    start_at: UTCDateTime
    status: EventStatus = EventStatus.SCHEDULED

    @model_validator(mode="after")
    def check_interval(self) -> "CreateEventRequest":
        if self.end_at is not None and self.end_at < self.start_at:
            raise ValueError("end_at must not be before start_at")
        return self


class UpdateEventRequest(EventFields):
    """Partial update; setting status to COMPLETED records an activity."""

    event_type: EventType | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    start_at: UTCDateTime | None = None
    status: EventStatus | None = None


class MoveEventRequest(BaseModel):
    """Drag/resize payload applied verbatim."""

    start_at: UTCDateTime
    end_at: UTCDateTime | None = None
    all_day: bool = False


class ResolveConflictRequest(BaseModel):
    resolution: ConflictResolution
    data: dict | None = Field(None, description="Fields to apply for MANUAL resolution")


class EventResponse(ORMModel):
    id: uuid.UUID
    event_type: EventType
    title: str
    description: str | None = None
    start_at: datetime
    end_at: datetime | None = None
    all_day: bool
    location: str | None = None
    virtual_link: str | None = None
    specific_fields: dict = Field(default_factory=dict)
    status: EventStatus
    responsible_id: uuid.UUID | None = None
    responsible: UserSummary | None = None
    internal_participants: list = Field(default_factory=list)
    external_participants: list = Field(default_factory=list)
    reminder_minutes: int | None = None
    color: str | None = None
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    task_id: uuid.UUID | None = None
    sync_external: bool
    external_event_id: str | None = None
    sync_status: SyncStatus
    conflict_data: dict | None = None
    last_modified_source: ModificationSource
    last_sync: datetime | None = None
    sync_error: str | None = None
    created_at: datetime
    updated_at: datetime


class SyncStatusCounts(BaseModel):
    SYNCED: int = 0
    PENDING_PUSH: int = 0
    PENDING_PULL: int = 0
    CONFLICT: int = 0


class CreateActivityRequest(BaseModel):
    type: ActivityType = ActivityType.OTHER
    description: str = Field(..., min_length=1)
    performed_at: datetime
    duration_minutes: int | None = Field(None, ge=0)
    result: str | None = None
    billable: bool = True
    user_id: uuid.UUID | None = None
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    task_id: uuid.UUID | None = None


class ActivityResponse(ORMModel):
    id: uuid.UUID
    type: ActivityType
    description: str
    performed_at: datetime
    duration_minutes: int | None = None
    result: str | None = None
    billable: bool
    user_id: uuid.UUID | None = None
    case_id: uuid.UUID | None = None
    project_id: uuid.UUID | None = None
    task_id: uuid.UUID | None = None
    event_id: uuid.UUID | None = None
    created_at: datetime
