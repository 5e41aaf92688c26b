"""
Credit recovery API endpoints.

Routes:
- GET /recovery - List recovery cases
- POST /recovery - Open a case against an existing debtor
- POST /recovery/wizard - Intake wizard (debtor, case and joint debtors at once)
- GET /recovery/dashboard - Totals over active cases
- GET /recovery/{id} - Get case with joint debtors
- PATCH /recovery/{id}/phase - Move to another phase
- PATCH /recovery/{id}/score - Update recovery score
- PATCH /recovery/{id}/strategy - Store strategy text
- POST /recovery/{id}/analysis - Run an AI analysis
- DELETE /recovery/{id} - Delete case

Dependencies: lexoffice.application.services, lexoffice.models
System role: Credit recovery HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from lexoffice.api.deps.dependencies import get_recovery_service
from lexoffice.application.services import RecoveryService
from lexoffice.core.enums import RecoveryPhase, RecoveryStatus
from lexoffice.models.recovery import (
    CreateRecoveryCaseRequest,
    RecoveryAnalysisRequest,
    RecoveryAnalysisResponse,
    RecoveryCaseDetailResponse,
    RecoveryCaseResponse,
    RecoveryDashboardResponse,
    RecoveryWizardRequest,
    UpdatePhaseRequest,
    UpdateScoreRequest,
    UpdateStrategyRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recovery", tags=["recovery"])


@router.get("", response_model=list[RecoveryCaseResponse])
@handle_service_errors
async def list_recovery_cases(
    phase: RecoveryPhase | None = None,
    status: RecoveryStatus | None = None,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> list[dict]:
    """List recovery cases, newest first."""
    return await recovery_service.list_cases(phase=phase, status=status)


@router.post("", response_model=RecoveryCaseDetailResponse, status_code=201)
@handle_service_errors
async def create_recovery_case(
    request: CreateRecoveryCaseRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    """
    Open a recovery case; the REC-<year>-<NNN> code is generated.

    Raises:
        HTTPException(404): Debtor not found
    """
    logger.info("Creating recovery case", extra={"debtor_id": str(request.debtor_id)})
    return await recovery_service.create_case(**request.model_dump())


@router.post("/wizard", response_model=RecoveryCaseDetailResponse, status_code=201)
@handle_service_errors
async def create_from_wizard(
    request: RecoveryWizardRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    """
    Create a recovery case from the intake wizard.

    The debtor is reused (by id or tax id) or registered as an opposing
    party. The updated value is original + monetary correction + interest.
    Everything is written in the request transaction.

    Args:
        request: RecoveryWizardRequest
        recovery_service: Injected RecoveryService

    Returns:
        RecoveryCaseDetailResponse: Created case with joint debtors
    """
    logger.info(
        "Recovery wizard submitted",
        extra={
            "reuses_person": request.debtor.person_id is not None,
            "joint_debtors": len(request.joint_debtors),
            "has_analysis": request.analysis is not None,
        },
    )
    return await recovery_service.create_from_wizard(**request.model_dump())


@router.get("/dashboard", response_model=RecoveryDashboardResponse)
@handle_service_errors
async def recovery_dashboard(
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    """Counts and values over active cases, per phase."""
    return await recovery_service.dashboard()


@router.get("/{recovery_id}", response_model=RecoveryCaseDetailResponse)
@handle_service_errors
async def get_recovery_case(
    recovery_id: UUID,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    return await recovery_service.get_case(recovery_id)


@router.patch("/{recovery_id}/phase", response_model=RecoveryCaseDetailResponse)
@handle_service_errors
async def update_phase(
    recovery_id: UUID,
    request: UpdatePhaseRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    return await recovery_service.update_phase(recovery_id, request.phase, request.status)


@router.patch("/{recovery_id}/score", response_model=RecoveryCaseDetailResponse)
@handle_service_errors
async def update_score(
    recovery_id: UUID,
    request: UpdateScoreRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    return await recovery_service.update_score(recovery_id, request.score, request.score_factors)


@router.patch("/{recovery_id}/strategy", response_model=RecoveryCaseDetailResponse)
@handle_service_errors
async def update_strategy(
    recovery_id: UUID,
    request: UpdateStrategyRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    return await recovery_service.update_strategy(recovery_id, request.ai_strategy)


@router.post("/{recovery_id}/analysis", response_model=RecoveryAnalysisResponse)
@handle_service_errors
async def analyze_recovery_case(
    recovery_id: UUID,
    request: RecoveryAnalysisRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> dict:
    """
    Run a model analysis (scoring, strategy, fraud detection, ...) over a case.

    Raises:
        HTTPException(404): Recovery case not found
        HTTPException(502): Model provider failed
    """
    logger.info(
        "Running recovery analysis",
        extra={"recovery_id": str(recovery_id), "analysis_type": request.analysis_type.value},
    )
    return await recovery_service.analyze(
        recovery_id,
        request.analysis_type,
        extra_data=request.extra_data,
        user_id=request.user_id,
    )


@router.delete("/{recovery_id}", status_code=204)
@handle_service_errors
async def delete_recovery_case(
    recovery_id: UUID,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> None:
    await recovery_service.delete_case(recovery_id)
