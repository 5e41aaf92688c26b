"""
Activity log API endpoints.

Routes:
- GET /activities - List activities by case/project/user and date range
- POST /activities - Record an activity

Dependencies: lexoffice.application.services, lexoffice.models
System role: Activity (timesheet) HTTP API
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_calendar_service
from lexoffice.application.services import CalendarService
from lexoffice.models.calendar import ActivityResponse, CreateActivityRequest

from .router_utils import handle_service_errors

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("", response_model=list[ActivityResponse])
@handle_service_errors
async def list_activities(
    case_id: UUID | None = None,
    project_id: UUID | None = None,
    user_id: UUID | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    limit: int = Query(100, ge=1, le=500),
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> list[dict]:
    """List activities, most recent first."""
    return await calendar_service.list_activities(
        case_id=case_id,
        project_id=project_id,
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )


@router.post("", response_model=ActivityResponse, status_code=201)
@handle_service_errors
async def create_activity(
    request: CreateActivityRequest,
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> dict:
    return await calendar_service.create_activity(**request.model_dump())
