"""
Deadline API endpoints.

Routes:
- GET /deadlines/stats - Pending counts for the dashboard
- GET /deadlines/upcoming - Pending deadlines in the next 7 days
- POST /deadlines/calculate - Business-day due date calculation
- GET /deadlines - List deadlines
- POST /deadlines - Create deadline
- GET /deadlines/{id} - Get deadline
- PATCH /deadlines/{id} - Update deadline
- POST /deadlines/{id}/complete - Mark fulfilled
- DELETE /deadlines/{id} - Delete deadline

Dependencies: lexoffice.application.services, lexoffice.models
System role: Deadline control HTTP API
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_deadline_service
from lexoffice.application.services import DeadlineService
from lexoffice.core.enums import DeadlineStatus, DeadlineType
from lexoffice.models.deadline import (
    CalculateDeadlineRequest,
    CalculateDeadlineResponse,
    CompleteDeadlineRequest,
    CreateDeadlineRequest,
    DeadlineListResponse,
    DeadlineResponse,
    DeadlineStatsResponse,
    UpdateDeadlineRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deadlines", tags=["deadlines"])


@router.get("/stats", response_model=DeadlineStatsResponse)
@handle_service_errors
async def deadline_stats(
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """Counts of pending deadlines due today, tomorrow, this week, in 30 days, and overdue."""
    return await deadline_service.get_stats()


@router.get("/upcoming", response_model=list[DeadlineResponse])
@handle_service_errors
async def upcoming_deadlines(
    limit: int = Query(5, ge=1, le=50),
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> list[dict]:
    """Pending deadlines due in the next 7 days, soonest first."""
    return await deadline_service.upcoming(limit=limit)


@router.post("/calculate", response_model=CalculateDeadlineResponse)
@handle_service_errors
async def calculate_deadline(
    request: CalculateDeadlineRequest,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """
    Count business days from a start date (CPC art. 219).

    Args:
        request: start_date, days and optional state for state holidays
        deadline_service: Injected DeadlineService

    Returns:
        CalculateDeadlineResponse: due_date and business days remaining from today
    """
    return await deadline_service.calculate(request.start_date, request.days, request.state)


@router.get("", response_model=DeadlineListResponse)
@handle_service_errors
async def list_deadlines(
    status: DeadlineStatus | None = None,
    type: DeadlineType | None = None,
    responsible_id: UUID | None = None,
    case_id: UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """
    List deadlines ordered by due date.

    Args:
        status: Status filter
        type: Deadline type filter
        responsible_id: Responsible user filter
        case_id: Case filter
        date_from: Earliest due date
        date_to: Latest due date (inclusive)
        deadline_service: Injected DeadlineService

    Returns:
        DeadlineListResponse: items and total
    """
    return await deadline_service.list_deadlines(
        status=status,
        type=type,
        responsible_id=responsible_id,
        case_id=case_id,
        date_from=date_from,
        date_to=date_to,
    )


@router.post("", response_model=DeadlineResponse, status_code=201)
@handle_service_errors
async def create_deadline(
    request: CreateDeadlineRequest,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """
    Create a deadline from an explicit due date or a business-day count.

    Raises:
        HTTPException(422): Neither due_date nor start_date + business_days given
        HTTPException(404): Case not found
    """
    logger.info(
        "Creating deadline",
        extra={
            "case_id": str(request.case_id),
            "deadline_type": request.type.value,
            "computed": request.due_date is None,
        },
    )
    return await deadline_service.create_deadline(**request.model_dump())


@router.get("/{deadline_id}", response_model=DeadlineResponse)
@handle_service_errors
async def get_deadline(
    deadline_id: UUID,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """Get a deadline by id."""
    return await deadline_service.get_deadline(deadline_id)


@router.patch("/{deadline_id}", response_model=DeadlineResponse)
@handle_service_errors
async def update_deadline(
    deadline_id: UUID,
    request: UpdateDeadlineRequest,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """Update a deadline; only the fields sent are changed."""
    return await deadline_service.update_deadline(deadline_id, **request.model_dump(exclude_unset=True))


@router.post("/{deadline_id}/complete", response_model=DeadlineResponse)
@handle_service_errors
async def complete_deadline(
    deadline_id: UUID,
    request: CompleteDeadlineRequest | None = None,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> dict:
    """Mark a deadline as fulfilled, optionally linking the filed document."""
    document_id = request.fulfillment_document_id if request else None
    logger.info("Completing deadline", extra={"deadline_id": str(deadline_id)})
    return await deadline_service.complete_deadline(deadline_id, fulfillment_document_id=document_id)


@router.delete("/{deadline_id}", status_code=204)
@handle_service_errors
async def delete_deadline(
    deadline_id: UUID,
    deadline_service: DeadlineService = Depends(get_deadline_service),
) -> None:
    """Delete a deadline."""
    await deadline_service.delete_deadline(deadline_id)
