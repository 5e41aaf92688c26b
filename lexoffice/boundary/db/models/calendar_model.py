"""
Calendar event and activity ORM models.

Events carry the sync-state columns of the external calendar integration;
activities are timesheet entries, created by hand or when an event is
completed.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Calendar and timesheet persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import ActivityType, EventStatus, EventType, ModificationSource, SyncStatus


class CalendarEventModel(Base, UUIDMixin, TimestampMixin):
    """
    Calendar event ORM model.

    Attributes:
        event_type: Kind of event; selects the activity type on completion
        start_at / end_at: Event interval (end_at may be null)
        specific_fields: Per-type extra fields (e.g. hearing room, result)
        internal_participants: User ids (as strings)
        external_participants: Free-form {name, email} records
        sync_external: Whether the event mirrors to the external provider
        sync_status: SYNCED, PENDING_PUSH, PENDING_PULL or CONFLICT
        conflict_data: Snapshot of the external version during a conflict
        last_modified_source: LOCAL or EXTERNAL
    """

    __tablename__ = "calendar_events"

    event_type: Mapped[EventType] = mapped_column(
        Enum(EventType, native_enum=False),
        nullable=False,
        default=EventType.GENERAL,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    all_day: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    virtual_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    specific_fields: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    status: Mapped[EventStatus] = mapped_column(
        Enum(EventStatus, native_enum=False),
        nullable=False,
        default=EventStatus.SCHEDULED,
    )
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    internal_participants: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    external_participants: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    reminder_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    color: Mapped[str | None] = mapped_column(String(16), nullable=True)

    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    )
    task_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("project_tasks.id", ondelete="SET NULL"),
        nullable=True,
    )

    # External calendar sync state
    sync_external: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    external_event_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sync_status: Mapped[SyncStatus] = mapped_column(
        Enum(SyncStatus, native_enum=False),
        nullable=False,
        default=SyncStatus.SYNCED,
        index=True,
    )
    conflict_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    last_modified_source: Mapped[ModificationSource] = mapped_column(
        Enum(ModificationSource, native_enum=False),
        nullable=False,
        default=ModificationSource.LOCAL,
    )
    last_sync: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sync_error: Mapped[str | None] = mapped_column(Text, nullable=True)

    responsible = relationship("UserModel")


class ActivityModel(Base, UUIDMixin, TimestampMixin):
    """Timesheet entry: what was done, by whom, for how long."""

    __tablename__ = "activities"

    type: Mapped[ActivityType] = mapped_column(
        Enum(ActivityType, native_enum=False),
        nullable=False,
        default=ActivityType.OTHER,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    performed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    result: Mapped[str | None] = mapped_column(Text, nullable=True)
    billable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    task_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("project_tasks.id", ondelete="SET NULL"),
        nullable=True,
    )
    event_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("calendar_events.id", ondelete="SET NULL"),
        nullable=True,
    )
