"""
Team API endpoints.

Routes:
- GET /team/analytics - Workload per active member
- GET /team/okrs - List OKRs (page-numbered)
- POST /team/okrs - Create OKR
- GET|PATCH|DELETE /team/okrs/{id}
- POST /team/okrs/{id}/check-in - Record key-result values
- POST /team/okrs/{id}/close - Close with final score
- GET /team/kpis - List KPI entries (page-numbered)
- POST /team/kpis - Record a member's monthly KPIs (replaces the month)
- GET /team/kpis/dashboard - Averages, rankings and trends
- GET|PATCH /team/kpis/{id}

Dependencies: lexoffice.application.services, lexoffice.models
System role: Team performance HTTP API
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_team_service
from lexoffice.application.services import TeamService
from lexoffice.core.enums import OKRStatus
from lexoffice.models.team import (
    CloseOKRRequest,
    CreateOKRRequest,
    KPIDashboardResponse,
    KPIEntryResponse,
    KPIListResponse,
    OKRCheckInRequest,
    OKRListResponse,
    OKRResponse,
    RecordKPIRequest,
    TeamAnalyticsResponse,
    UpdateKPIRequest,
    UpdateOKRRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/team", tags=["team"])


@router.get("/analytics", response_model=TeamAnalyticsResponse)
@handle_service_errors
async def team_analytics(
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """
    Workload per active member.

    Pending, overdue and next-7-days deadlines, open tasks, events in the
    next 7 days, and activity minutes over the last 30 days, plus totals.
    """
    return await team_service.analytics()


# OKRs


@router.get("/okrs", response_model=OKRListResponse)
@handle_service_errors
async def list_okrs(
    user_id: UUID | None = None,
    quarter: int | None = Query(None, ge=1, le=4),
    year: int | None = None,
    status: OKRStatus | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """List OKRs, latest quarter first."""
    return await team_service.list_okrs(
        user_id=user_id, quarter=quarter, year=year, status=status, page=page, limit=limit
    )


@router.post("/okrs", response_model=OKRResponse, status_code=201)
@handle_service_errors
async def create_okr(
    request: CreateOKRRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    logger.info("Creating OKR", extra={"user_id": str(request.user_id)})
    return await team_service.create_okr(**request.model_dump())


@router.get("/okrs/{okr_id}", response_model=OKRResponse)
@handle_service_errors
async def get_okr(
    okr_id: UUID,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """Get an OKR with its child objectives."""
    return await team_service.get_okr(okr_id)


@router.patch("/okrs/{okr_id}", response_model=OKRResponse)
@handle_service_errors
async def update_okr(
    okr_id: UUID,
    request: UpdateOKRRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """Update an OKR; sending key_results recomputes its progress."""
    return await team_service.update_okr(okr_id, **request.model_dump(exclude_unset=True))


@router.delete("/okrs/{okr_id}", status_code=204)
@handle_service_errors
async def delete_okr(
    okr_id: UUID,
    team_service: TeamService = Depends(get_team_service),
) -> None:
    await team_service.delete_okr(okr_id)


@router.post("/okrs/{okr_id}/check-in", response_model=OKRResponse)
@handle_service_errors
async def check_in_okr(
    okr_id: UUID,
    request: OKRCheckInRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """
    Record current values by key-result index.

    Unknown indexes are ignored. Progress is the weighted mean of
    current / target per key result, each capped at 100%.
    """
    updates = {kr.index: kr.current_value for kr in request.key_results}
    return await team_service.check_in(okr_id, updates)


@router.post("/okrs/{okr_id}/close", response_model=OKRResponse)
@handle_service_errors
async def close_okr(
    okr_id: UUID,
    request: CloseOKRRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    return await team_service.close_okr(okr_id, **request.model_dump())


# KPIs


@router.get("/kpis", response_model=KPIListResponse)
@handle_service_errors
async def list_kpis(
    user_id: UUID | None = None,
    period_from: date | None = None,
    period_to: date | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """List KPI entries, latest period first."""
    return await team_service.list_kpis(
        user_id=user_id, period_from=period_from, period_to=period_to, page=page, limit=limit
    )


@router.post("/kpis", response_model=KPIEntryResponse)
@handle_service_errors
async def record_kpi(
    request: RecordKPIRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """Create or replace a member's KPI snapshot for the month of `period`."""
    return await team_service.record_kpi(**request.model_dump(exclude_unset=True))


@router.get("/kpis/dashboard", response_model=KPIDashboardResponse)
@handle_service_errors
async def kpi_dashboard(
    months: int = Query(6, ge=1, le=12),
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    """Per-member averages, rankings by overall score and monthly trends."""
    return await team_service.kpi_dashboard(months=months)


@router.get("/kpis/{entry_id}", response_model=KPIEntryResponse)
@handle_service_errors
async def get_kpi(
    entry_id: UUID,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    return await team_service.get_kpi(entry_id)


@router.patch("/kpis/{entry_id}", response_model=KPIEntryResponse)
@handle_service_errors
async def update_kpi(
    entry_id: UUID,
    request: UpdateKPIRequest,
    team_service: TeamService = Depends(get_team_service),
) -> dict:
    return await team_service.update_kpi(entry_id, **request.model_dump(exclude_unset=True))
