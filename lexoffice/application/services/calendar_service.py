"""
Calendar service orchestrator.

Events, drag/resize moves, external-calendar sync bookkeeping and manual
conflict resolution, plus the activity timesheet that completed events
feed into.

Dependencies: lexoffice.boundary.db.CRUD
System role: Calendar and timesheet use case orchestration
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import user_summary
from lexoffice.boundary.db.base import utcnow
from lexoffice.boundary.db.CRUD.calendar_crud import activity_crud, calendar_event_crud
from lexoffice.boundary.db.models import CalendarEventModel
from lexoffice.core.enums import (
    ActivityType,
    ConflictResolution,
    EventStatus,
    EventType,
    ModificationSource,
    SyncStatus,
)
from lexoffice.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

EVENT_TO_ACTIVITY_TYPE: dict[EventType, ActivityType] = {
    EventType.MEETING: ActivityType.MEETING,
    EventType.HEARING: ActivityType.HEARING,
    EventType.ORAL_ARGUMENT: ActivityType.ORAL_ARGUMENT,
    EventType.ORAL_DISPATCH: ActivityType.DISPATCH,
    EventType.LEGAL_RESEARCH: ActivityType.RESEARCH,
    EventType.CASE_ANALYSIS: ActivityType.ANALYSIS,
    EventType.EMAIL_FOLLOWUP: ActivityType.EMAIL,
}

# Event columns a conflict resolution may overwrite.
RESOLVABLE_FIELDS = ("title", "description", "start_at", "end_at", "all_day", "location")


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _parse_datetime(value):
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def duration_minutes(start_at: datetime, end_at: datetime | None) -> int | None:
    """Minutes between start and end rounded half up, None unless positive."""
    if end_at is None:
        return None
    seconds = (_as_utc(end_at) - _as_utc(start_at)).total_seconds()
    minutes = int(seconds / 60 + 0.5)
    return minutes if minutes > 0 else None


def _event_dict(event: CalendarEventModel) -> dict:
    return {**event.to_dict(), "responsible": user_summary(event.responsible)}


def _resolved_fields(source: dict, prefix: str = "") -> dict:
    fields = {}
    for name in RESOLVABLE_FIELDS:
        key = f"{prefix}{name}"
        if key not in source:
            continue
        value = source[key]
        if name in ("start_at", "end_at"):
            value = _parse_datetime(value)
        if name == "all_day":
            value = bool(value)
        if name in ("title", "start_at") and value is None:
            continue
        fields[name] = value
    return fields


class CalendarService:
    """Calendar event and activity service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_model(self, event_id: UUID) -> CalendarEventModel:
        event = await calendar_event_crud.get_detail(self.db, event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    async def list_events(
        self,
        date_from: datetime,
        date_to: datetime,
        event_types: list[EventType] | None = None,
        responsible_id: UUID | None = None,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
    ) -> list[dict]:
        if date_to < date_from:
            raise ValidationError("date_to must not be before date_from", field="date_to")
        events = await calendar_event_crud.list_in_range(
            self.db,
            date_from,
            date_to,
            event_types=event_types,
            responsible_id=responsible_id,
            case_id=case_id,
            project_id=project_id,
        )
        return [_event_dict(e) for e in events]

    async def get_event(self, event_id: UUID) -> dict:
        return _event_dict(await self._get_model(event_id))

    async def create_event(self, **fields) -> dict:
        fields = {k: v for k, v in fields.items() if v is not None}
        await check_references(self.db, fields)
        if fields.get("sync_external"):
            fields["sync_status"] = SyncStatus.PENDING_PUSH
        event = await calendar_event_crud.create(self.db, **fields)
        logger.info(
            "Event created",
            extra={"event_id": str(event.id), "event_type": event.event_type.value},
        )
        return await self.get_event(event.id)

    async def update_event(self, event_id: UUID, **fields) -> dict:
        """
        Partial update.

        A status change to COMPLETED from any other status records an
        activity for the event. Edits to a synced event queue a push.
        """
        event = await self._get_model(event_id)
        await check_references(self.db, fields)
        completing = (
            fields.get("status") == EventStatus.COMPLETED and event.status != EventStatus.COMPLETED
        )

        start_at = fields.get("start_at") or event.start_at
        end_at = fields["end_at"] if "end_at" in fields else event.end_at
        if end_at is not None and _as_utc(end_at) < _as_utc(start_at):
            raise ValidationError("end_at must not be before start_at", field="end_at")

        if event.sync_external or fields.get("sync_external"):
            fields["sync_status"] = SyncStatus.PENDING_PUSH
            fields["last_modified_source"] = ModificationSource.LOCAL

        event = await calendar_event_crud.update_by_id(self.db, event_id, **fields)
        if completing:
            await self._record_activity(event)

        logger.info("Event updated", extra={"event_id": str(event_id), "fields": sorted(fields)})
        return await self.get_event(event_id)

    async def _record_activity(self, event: CalendarEventModel) -> None:
        result = (event.specific_fields or {}).get("result")
        activity = await activity_crud.create(
            self.db,
            type=EVENT_TO_ACTIVITY_TYPE.get(event.event_type, ActivityType.OTHER),
            description=event.title,
            performed_at=event.start_at,
            duration_minutes=duration_minutes(event.start_at, event.end_at),
            result=str(result) if result else None,
            billable=True,
            user_id=event.responsible_id,
            case_id=event.case_id,
            project_id=event.project_id,
            task_id=event.task_id,
            event_id=event.id,
        )
        logger.info(
            "Activity recorded from completed event",
            extra={"event_id": str(event.id), "activity_id": str(activity.id)},
        )

    async def move_event(
        self,
        event_id: UUID,
        start_at: datetime,
        end_at: datetime | None = None,
        all_day: bool = False,
    ) -> dict:
        """Drag/resize: apply the new interval verbatim."""
        event = await self._get_model(event_id)
        fields = {"start_at": start_at, "end_at": end_at, "all_day": all_day}
        if event.sync_external:
            fields["sync_status"] = SyncStatus.PENDING_PUSH
            fields["last_modified_source"] = ModificationSource.LOCAL
        await calendar_event_crud.update_by_id(self.db, event_id, **fields)
        return await self.get_event(event_id)

    async def delete_event(self, event_id: UUID) -> None:
        if not await calendar_event_crud.delete_by_id(self.db, event_id):
            raise NotFoundError("Event", event_id)
        logger.info("Event deleted", extra={"event_id": str(event_id)})

    async def sync_status_counts(self) -> dict[str, int]:
        """Synced-event counts for every sync status, zero-filled."""
        counts = await calendar_event_crud.sync_status_counts(self.db)
        return {status.value: counts.get(status, 0) for status in SyncStatus}

    async def list_conflicts(self) -> list[dict]:
        return [_event_dict(e) for e in await calendar_event_crud.list_conflicts(self.db)]

    async def resolve_conflict(
        self,
        event_id: UUID,
        resolution: ConflictResolution,
        data: dict | None = None,
    ) -> dict:
        """
        Resolve an external-calendar conflict.

        KEEP_LOCAL keeps the local copy. KEEP_EXTERNAL applies the
        `external_*` values stored in conflict_data. MANUAL applies the
        supplied fields. Every branch leaves the event SYNCED with the
        conflict cleared.

        Raises:
            NotFoundError: If the event does not exist or is not in CONFLICT
            ValidationError: If KEEP_EXTERNAL has no conflict data or
                MANUAL has no data
        """
        event = await calendar_event_crud.get_by_id(self.db, event_id)
        if event is None or event.sync_status != SyncStatus.CONFLICT:
            raise NotFoundError("Conflicting event", event_id)

        fields: dict = {}
        if resolution == ConflictResolution.KEEP_EXTERNAL:
            if not event.conflict_data:
                raise ValidationError("Event has no external version to apply", field="resolution")
            fields = _resolved_fields(event.conflict_data, prefix="external_")
            fields["last_modified_source"] = ModificationSource.EXTERNAL
        elif resolution == ConflictResolution.MANUAL:
            if not data:
                raise ValidationError("Manual resolution requires data", field="data")
            fields = _resolved_fields(data)
            fields["last_modified_source"] = ModificationSource.LOCAL

        fields.update(
            sync_status=SyncStatus.SYNCED,
            conflict_data=None,
            sync_error=None,
            last_sync=utcnow(),
        )
        await calendar_event_crud.update_by_id(self.db, event_id, **fields)
        logger.info(
            "Calendar conflict resolved",
            extra={"event_id": str(event_id), "resolution": resolution.value},
        )
        return await self.get_event(event_id)

    async def list_activities(
        self,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        user_id: UUID | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 100,
    ) -> list[dict]:
        activities = await activity_crud.list_filtered(
            self.db,
            case_id=case_id,
            project_id=project_id,
            user_id=user_id,
            date_from=date_from,
            date_to=date_to,
            limit=limit,
        )
        return [a.to_dict() for a in activities]

    async def create_activity(self, **fields) -> dict:
        await check_references(self.db, fields)
        activity = await activity_crud.create(self.db, **fields)
        return activity.to_dict()
