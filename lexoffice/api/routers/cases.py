"""
Case API endpoints.

Routes:
- GET /cases - List cases (cursor pagination, newest activity first)
- POST /cases - Create case
- GET /cases/select - Active cases for select inputs
- GET /cases/{id} - Get case with deadlines and creditors
- PATCH /cases/{id} - Update case
- DELETE /cases/{id} - Delete case (deadlines and creditors cascade)

Dependencies: lexoffice.application.services, lexoffice.models
System role: Case management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_case_service
from lexoffice.application.services import CaseService
from lexoffice.core.enums import CaseStatus, CaseType
from lexoffice.models.case import (
    CaseDetailResponse,
    CaseListResponse,
    CaseSelectItem,
    CreateCaseRequest,
    UpdateCaseRequest,
)
from lexoffice.models.common import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cases", tags=["cases"])


@router.get("", response_model=CaseListResponse)
@handle_service_errors
async def list_cases(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    cursor: UUID | None = None,
    status: CaseStatus | None = None,
    type: CaseType | None = None,
    case_service: CaseService = Depends(get_case_service),
) -> dict:
    """
    List cases ordered by last update, newest first.

    Args:
        limit: Page size (1-100)
        cursor: Id of the first row of the requested page
        status: Status filter
        type: Case type filter
        case_service: Injected CaseService

    Returns:
        CaseListResponse: items with client and lawyer summaries, next_cursor
    """
    return await case_service.list_cases(limit=limit, cursor=cursor, status=status, type=type)


@router.get("/select", response_model=list[CaseSelectItem])
@handle_service_errors
async def cases_for_select(
    case_service: CaseService = Depends(get_case_service),
) -> list[dict]:
    """Active cases, newest first, for select inputs."""
    return await case_service.cases_for_select()


@router.post("", response_model=CaseDetailResponse, status_code=201)
@handle_service_errors
async def create_case(
    request: CreateCaseRequest,
    case_service: CaseService = Depends(get_case_service),
) -> dict:
    """
    Create a case.

    Raises:
        HTTPException(404): Client, lawyer or judge not found
        HTTPException(409): Case number already registered
    """
    logger.info(
        "Creating case",
        extra={"case_type": request.type.value, "client_id": str(request.client_id)},
    )
    return await case_service.create_case(**request.model_dump())


@router.get("/{case_id}", response_model=CaseDetailResponse)
@handle_service_errors
async def get_case(
    case_id: UUID,
    case_service: CaseService = Depends(get_case_service),
) -> dict:
    """Get a case with client, lawyer, judge, deadlines and creditors."""
    return await case_service.get_case(case_id)


@router.patch("/{case_id}", response_model=CaseDetailResponse)
@handle_service_errors
async def update_case(
    case_id: UUID,
    request: UpdateCaseRequest,
    case_service: CaseService = Depends(get_case_service),
) -> dict:
    """
    Update a case; only the fields sent are changed.

    Raises:
        HTTPException(404): Case or a referenced record not found
        HTTPException(409): Case number already registered
    """
    return await case_service.update_case(case_id, **request.model_dump(exclude_unset=True))


@router.delete("/{case_id}", status_code=204)
@handle_service_errors
async def delete_case(
    case_id: UUID,
    case_service: CaseService = Depends(get_case_service),
) -> None:
    """Delete a case together with its deadlines and creditors."""
    logger.info("Deleting case", extra={"case_id": str(case_id)})
    await case_service.delete_case(case_id)
