"""
Calendar API endpoints.

Routes:
- GET /calendar/events - Events overlapping a date range
- POST /calendar/events - Create event
- GET /calendar/events/{id} - Get event
- PATCH /calendar/events/{id} - Update event (completion records an activity)
- POST /calendar/events/{id}/move - Drag/resize
- DELETE /calendar/events/{id} - Delete event
- GET /calendar/sync-status - Counts per external sync status
- GET /calendar/conflicts - Events in CONFLICT
- POST /calendar/conflicts/{id}/resolve - Resolve a sync conflict

Dependencies: lexoffice.application.services, lexoffice.models
System role: Calendar HTTP API
"""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_calendar_service
from lexoffice.application.services import CalendarService
from lexoffice.core.enums import EventType
from lexoffice.models.calendar import (
    CreateEventRequest,
    EventResponse,
    MoveEventRequest,
    ResolveConflictRequest,
    SyncStatusCounts,
    UpdateEventRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("/events", response_model=list[EventResponse])
@handle_service_errors
async def list_events(
    date_from: datetime,
    date_to: datetime,
    event_type: list[EventType] | None = Query(None),
    responsible_id: UUID | None = None,
    case_id: UUID | None = None,
    project_id: UUID | None = None,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> list[dict]:
    """
    List events overlapping [date_from, date_to], ordered by start.

    An event without an end is included when its start falls in the range.

    Args:
        date_from: Range start
        date_to: Range end
        event_type: Repeatable event type filter
        responsible_id: Responsible user filter
        case_id: Case filter
        project_id: Project filter
        calendar_service: Injected CalendarService

    Returns:
        list[EventResponse]: Matching events

    Raises:
        HTTPException(400): date_to before date_from
    """
    return await calendar_service.list_events(
        date_from,
        date_to,
        event_types=event_type,
        responsible_id=responsible_id,
        case_id=case_id,
        project_id=project_id,
    )


@router.post("/events", response_model=EventResponse, status_code=201)
@handle_service_errors
async def create_event(
    request: CreateEventRequest,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    """Create an event; events marked for external sync are queued for push."""
    logger.info(
        "Creating event",
        extra={"event_type": request.event_type.value, "sync_external": bool(request.sync_external)},
    )
    return await calendar_service.create_event(**request.model_dump())


@router.get("/events/{event_id}", response_model=EventResponse)
@handle_service_errors
async def get_event(
    event_id: UUID,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    return await calendar_service.get_event(event_id)


@router.patch("/events/{event_id}", response_model=EventResponse)
@handle_service_errors
async def update_event(
    event_id: UUID,
    request: UpdateEventRequest,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    """
    Update an event; only the fields sent are changed.

    Setting status COMPLETED from another status records an activity.

    Raises:
        HTTPException(400): End before start
        HTTPException(404): Event not found
    """
    return await calendar_service.update_event(event_id, **request.model_dump(exclude_unset=True))


@router.post("/events/{event_id}/move", response_model=EventResponse)
@handle_service_errors
async def move_event(
    event_id: UUID,
    request: MoveEventRequest,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    """Apply a drag/resize from the calendar view."""
    return await calendar_service.move_event(
        event_id, request.start_at, end_at=request.end_at, all_day=request.all_day
    )


@router.delete("/events/{event_id}", status_code=204)
@handle_service_errors
async def delete_event(
    event_id: UUID,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> None:
    await calendar_service.delete_event(event_id)


@router.get("/sync-status", response_model=SyncStatusCounts)
@handle_service_errors
async def sync_status(
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    """Count of externally synced events per sync status."""
    return await calendar_service.sync_status_counts()


@router.get("/conflicts", response_model=list[EventResponse])
@handle_service_errors
async def list_conflicts(
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> list[dict]:
    return await calendar_service.list_conflicts()


@router.post("/conflicts/{event_id}/resolve", response_model=EventResponse)
@handle_service_errors
async def resolve_conflict(
    event_id: UUID,
    request: ResolveConflictRequest,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    """
    Resolve a sync conflict with KEEP_LOCAL, KEEP_EXTERNAL or MANUAL.

    Raises:
        HTTPException(400): KEEP_EXTERNAL without stored external data, or MANUAL without data
        HTTPException(404): Event not found or not in conflict
    """
    logger.info(
        "Resolving calendar conflict",
        extra={"event_id": str(event_id), "resolution": request.resolution.value},
    )
    return await calendar_service.resolve_conflict(event_id, request.resolution, request.data)
