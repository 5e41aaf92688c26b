"""
Creditor (judicial recovery) API endpoints.

Routes:
- GET /cases/{case_id}/creditors - List creditors of a case
- POST /cases/{case_id}/creditors - Add creditor (class rules applied)
- PATCH /cases/{case_id}/creditors/{id} - Update creditor
- DELETE /cases/{case_id}/creditors/{id} - Exclude creditor
- GET /cases/{case_id}/creditors/summary - Totals by class and status
- POST /cases/{case_id}/creditors/voting - Assembly vote simulation
- POST /restructuring/payment-schedule - SAC amortization schedule
- POST /restructuring/npv - Present value of a cash-flow series
- POST /restructuring/waterfall - Bankruptcy liquidation waterfall

Dependencies: lexoffice.application.services, lexoffice.models
System role: Judicial recovery HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from lexoffice.api.deps.dependencies import get_creditor_service
from lexoffice.application.services import CreditorService
from lexoffice.core.enums import CreditorClass, CreditorStatus
from lexoffice.models.creditor import (
    CreateCreditorRequest,
    CreditorResponse,
    CreditorSummaryResponse,
    CreditorWriteResponse,
    NPVRequest,
    NPVResponse,
    PaymentScheduleRequest,
    PaymentScheduleResponse,
    UpdateCreditorRequest,
    VotingSimulationRequest,
    VotingSimulationResponse,
    WaterfallRequest,
    WaterfallResponse,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(tags=["creditors"])


@router.get("/cases/{case_id}/creditors", response_model=list[CreditorResponse])
@handle_service_errors
async def list_creditors(
    case_id: UUID,
    creditor_class: CreditorClass | None = None,
    status: CreditorStatus | None = None,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> list[dict]:
    """List creditors of a case by class, then name."""
    return await creditor_service.list_creditors(case_id, creditor_class=creditor_class, status=status)


@router.post("/cases/{case_id}/creditors", response_model=CreditorWriteResponse, status_code=201)
@handle_service_errors
async def create_creditor(
    case_id: UUID,
    request: CreateCreditorRequest,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> dict:
    """
    Add a creditor to a case.

    Class I claims above 150 minimum wages are split into capped and
    excess portions; Class II claims above the collateral appraisal get
    an unsecured portion. Both produce warnings in the response.

    Raises:
        HTTPException(404): Case not found
    """
    logger.info(
        "Creating creditor",
        extra={"case_id": str(case_id), "creditor_class": request.creditor_class.value},
    )
    return await creditor_service.create_creditor(case_id, **request.model_dump())


@router.get("/cases/{case_id}/creditors/summary", response_model=CreditorSummaryResponse)
@handle_service_errors
async def creditor_summary(
    case_id: UUID,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> dict:
    """Count and value totals of the non-excluded creditors."""
    return await creditor_service.summary(case_id)


@router.post("/cases/{case_id}/creditors/voting", response_model=VotingSimulationResponse)
@handle_service_errors
async def simulate_voting(
    case_id: UUID,
    request: VotingSimulationRequest | None = None,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> dict:
    """
    Simulate the creditors' assembly vote (Lei 11.101/2005 art. 45).

    Args:
        case_id: Judicial recovery case
        request: Optional per-creditor vote/presence overrides
        creditor_service: Injected CreditorService

    Returns:
        VotingSimulationResponse: Per-class quorum, plan approval, pivotal creditors
    """
    overrides = (
        {creditor_id: change.model_dump() for creditor_id, change in request.overrides.items()}
        if request
        else {}
    )
    return await creditor_service.simulate_voting(case_id, overrides)


@router.patch("/cases/{case_id}/creditors/{creditor_id}", response_model=CreditorWriteResponse)
@handle_service_errors
async def update_creditor(
    case_id: UUID,
    creditor_id: UUID,
    request: UpdateCreditorRequest,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> dict:
    """Update a creditor; class rules are re-applied."""
    return await creditor_service.update_creditor(
        case_id, creditor_id, **request.model_dump(exclude_unset=True)
    )


@router.delete("/cases/{case_id}/creditors/{creditor_id}", status_code=204)
@handle_service_errors
async def delete_creditor(
    case_id: UUID,
    creditor_id: UUID,
    creditor_service: CreditorService = Depends(get_creditor_service),
) -> None:
    """Exclude a creditor; the record is kept with status EXCLUDED."""
    await creditor_service.delete_creditor(case_id, creditor_id)


# Plan calculators


@router.post("/restructuring/payment-schedule", response_model=PaymentScheduleResponse)
@handle_service_errors
async def payment_schedule(request: PaymentScheduleRequest) -> dict:
    """SAC amortization schedule after the haircut, grace months and simple monthly rate."""
    return CreditorService.payment_schedule(**request.model_dump())


@router.post("/restructuring/npv", response_model=NPVResponse)
@handle_service_errors
async def net_present_value(request: NPVRequest) -> dict:
    return CreditorService.net_present_value(request.cash_flows, request.annual_discount_percent)


@router.post("/restructuring/waterfall", response_model=WaterfallResponse)
@handle_service_errors
async def waterfall(request: WaterfallRequest) -> dict:
    """Distribute liquidation proceeds in statutory order for plan comparison."""
    return CreditorService.waterfall(**request.model_dump())
