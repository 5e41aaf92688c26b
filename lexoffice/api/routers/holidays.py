"""
Holiday API endpoints.

Routes:
- GET /holidays - List holidays of a year
- POST /holidays - Create holiday
- DELETE /holidays/{id} - Delete holiday

Changes invalidate the cached holiday sets used by deadline calculations.

Dependencies: lexoffice.application.services, lexoffice.models
System role: Holiday calendar HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_deadline_service
from lexoffice.application.services import DeadlineService
from lexoffice.models.deadline import CreateHolidayRequest, HolidayResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=list[HolidayResponse])
@handle_service_errors
async def list_holidays(
    year: int = Query(..., ge=1900, le=2100),
    state: str | None = Query(None, min_length=2, max_length=2),
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> list[dict]:
    """List holidays of a year, optionally narrowed to one state."""
    return await deadline_service.list_holidays(year, state)


@router.post("", response_model=HolidayResponse, status_code=201)
@handle_service_errors
async def create_holiday(
    request: CreateHolidayRequest,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """Create a holiday."""
    logger.info(
        "Creating holiday",
        extra={"holiday_date": request.date.isoformat(), "scope": request.scope.value},
    )
    return await deadline_service.create_holiday(**request.model_dump())


@router.delete("/{holiday_id}", status_code=204)
@handle_service_errors
async def delete_holiday(
    holiday_id: UUID,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> None:
    """Delete a holiday."""
    await deadline_service.delete_holiday(holiday_id)
