"""
Client patrimony API endpoints.

Routes (all under /clients/{client_id}):
- GET /patrimony/summary - Consolidated patrimony
- GET|POST /patrimony/{kind} - Active assets of a kind
  (rural-properties, urban-properties, vehicles, participations)
- PATCH|DELETE /patrimony/{kind}/{asset_id} - Update / deactivate asset
- GET|POST /productions, PATCH|DELETE /productions/{id}
- GET|POST /financial, GET|PATCH|DELETE /financial/{id},
  GET /financial/{id}/indicators
- GET|POST /operational, GET|PATCH|DELETE /operational/{year}

Dependencies: lexoffice.application.services, lexoffice.models
System role: Patrimony HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from lexoffice.api.deps.dependencies import get_patrimony_service
from lexoffice.application.services import AssetKind, PatrimonyService
from lexoffice.models.patrimony import (
    CreateFinancialSnapshotRequest,
    CreateOperationalSnapshotRequest,
    CreateParticipationRequest,
    CreateProductionRequest,
    CreateRuralPropertyRequest,
    CreateUrbanPropertyRequest,
    CreateVehicleRequest,
    FinancialIndicators,
    FinancialSnapshotWithIndicators,
    OperationalSnapshotResponse,
    ParticipationResponse,
    PatrimonySummaryResponse,
    ProductionResponse,
    RuralPropertyResponse,
    UpdateFinancialSnapshotRequest,
    UpdateOperationalSnapshotRequest,
    UpdateParticipationRequest,
    UpdateProductionRequest,
    UpdateRuralPropertyRequest,
    UpdateUrbanPropertyRequest,
    UpdateVehicleRequest,
    UrbanPropertyResponse,
    VehicleResponse,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients/{client_id}", tags=["patrimony"])

# kind -> (create schema, update schema, response schema)
ASSET_SCHEMAS: dict[AssetKind, tuple[type[BaseModel], type[BaseModel], type[BaseModel]]] = {
    AssetKind.RURAL_PROPERTY: (CreateRuralPropertyRequest, UpdateRuralPropertyRequest, RuralPropertyResponse),
    AssetKind.URBAN_PROPERTY: (CreateUrbanPropertyRequest, UpdateUrbanPropertyRequest, UrbanPropertyResponse),
    AssetKind.VEHICLE: (CreateVehicleRequest, UpdateVehicleRequest, VehicleResponse),
    AssetKind.PARTICIPATION: (CreateParticipationRequest, UpdateParticipationRequest, ParticipationResponse),
}


@router.get("/patrimony/summary", response_model=PatrimonySummaryResponse)
@handle_service_errors
async def patrimony_summary(
    client_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    """
    Consolidated patrimony of a client.

    Args:
        client_id: Client person UUID
        patrimony_service: Injected PatrimonyService

    Returns:
        PatrimonySummaryResponse: Asset totals, current harvest, latest
            financial snapshot with indicators and latest operational snapshot

    Raises:
        HTTPException(404): Client not found
    """
    return await patrimony_service.summary(client_id)


def _add_asset_routes(kind: AssetKind) -> None:
    """Register list/create/update/delete for one asset kind."""
    create_schema, update_schema, response_schema = ASSET_SCHEMAS[kind]
    path = f"/patrimony/{kind.value}"
    suffix = kind.name.lower()

    @handle_service_errors
    async def list_assets(
        client_id: UUID,
        patrimony_service: PatrimonyService = Depends(get_patrimony_service),
    ) -> list[dict]:
        return await patrimony_service.list_assets(kind, client_id)

    @handle_service_errors
    async def create_asset(
        client_id: UUID,
        request: create_schema,
        patrimony_service: PatrimonyService = Depends(get_patrimony_service),
    ) -> dict:
        logger.info("Creating asset", extra={"client_id": str(client_id), "asset_kind": kind.value})
        return await patrimony_service.create_asset(kind, client_id, **request.model_dump(exclude_none=True))

    @handle_service_errors
    async def update_asset(
        client_id: UUID,
        asset_id: UUID,
        request: update_schema,
        patrimony_service: PatrimonyService = Depends(get_patrimony_service),
    ) -> dict:
        return await patrimony_service.update_asset(
            kind, client_id, asset_id, **request.model_dump(exclude_unset=True)
        )

    @handle_service_errors
    async def delete_asset(
        client_id: UUID,
        asset_id: UUID,
        patrimony_service: PatrimonyService = Depends(get_patrimony_service),
    ) -> None:
        await patrimony_service.delete_asset(kind, client_id, asset_id)

    router.add_api_route(
        path, list_assets, methods=["GET"], response_model=list[response_schema], name=f"list_{suffix}"
    )
    router.add_api_route(
        path,
        create_asset,
        methods=["POST"],
        response_model=response_schema,
        status_code=201,
        name=f"create_{suffix}",
    )
    router.add_api_route(
        f"{path}/{{asset_id}}",
        update_asset,
        methods=["PATCH"],
        response_model=response_schema,
        name=f"update_{suffix}",
    )
    router.add_api_route(
        f"{path}/{{asset_id}}", delete_asset, methods=["DELETE"], status_code=204, name=f"delete_{suffix}"
    )


for _kind in AssetKind:
    _add_asset_routes(_kind)


# Productions


@router.get("/productions", response_model=list[ProductionResponse])
@handle_service_errors
async def list_productions(
    client_id: UUID,
    harvest_year: str | None = Query(None, max_length=9),
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> list[dict]:
    """Agricultural productions, latest harvest first."""
    return await patrimony_service.list_productions(client_id, harvest_year=harvest_year)


@router.post("/productions", response_model=ProductionResponse, status_code=201)
@handle_service_errors
async def create_production(
    client_id: UUID,
    request: CreateProductionRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    """
    Record a production.

    Raises:
        HTTPException(400): Rural property belongs to another client
        HTTPException(404): Client not found
    """
    return await patrimony_service.create_production(client_id, **request.model_dump(exclude_none=True))


@router.patch("/productions/{production_id}", response_model=ProductionResponse)
@handle_service_errors
async def update_production(
    client_id: UUID,
    production_id: UUID,
    request: UpdateProductionRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    return await patrimony_service.update_production(
        client_id, production_id, **request.model_dump(exclude_unset=True)
    )


@router.delete("/productions/{production_id}", status_code=204)
@handle_service_errors
async def delete_production(
    client_id: UUID,
    production_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> None:
    await patrimony_service.delete_production(client_id, production_id)


# Financial snapshots


@router.get("/financial", response_model=list[FinancialSnapshotWithIndicators])
@handle_service_errors
async def list_financial(
    client_id: UUID,
    year: int | None = Query(None, ge=1900, le=2100),
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> list[dict]:
    """Financial snapshots with indicators, optionally for one year."""
    return await patrimony_service.list_financial(client_id, year=year)


@router.post("/financial", response_model=FinancialSnapshotWithIndicators, status_code=201)
@handle_service_errors
async def create_financial(
    client_id: UUID,
    request: CreateFinancialSnapshotRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    """
    Record a financial snapshot.

    Raises:
        HTTPException(404): Client not found
        HTTPException(409): Snapshot already exists for (year, period, quarter)
    """
    return await patrimony_service.create_financial(client_id, **request.model_dump())


@router.get("/financial/{snapshot_id}", response_model=FinancialSnapshotWithIndicators)
@handle_service_errors
async def get_financial(
    client_id: UUID,
    snapshot_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    return await patrimony_service.get_financial(client_id, snapshot_id)


@router.get("/financial/{snapshot_id}/indicators", response_model=FinancialIndicators)
@handle_service_errors
async def get_financial_indicators(
    client_id: UUID,
    snapshot_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    """Leverage, liquidity, margin and return ratios; null where the denominator is zero."""
    return await patrimony_service.financial_indicators(client_id, snapshot_id)


@router.patch("/financial/{snapshot_id}", response_model=FinancialSnapshotWithIndicators)
@handle_service_errors
async def update_financial(
    client_id: UUID,
    snapshot_id: UUID,
    request: UpdateFinancialSnapshotRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    return await patrimony_service.update_financial(
        client_id, snapshot_id, **request.model_dump(exclude_unset=True)
    )


@router.delete("/financial/{snapshot_id}", status_code=204)
@handle_service_errors
async def delete_financial(
    client_id: UUID,
    snapshot_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> None:
    await patrimony_service.delete_financial(client_id, snapshot_id)


# Operational snapshots


@router.get("/operational", response_model=list[OperationalSnapshotResponse])
@handle_service_errors
async def list_operational(
    client_id: UUID,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> list[dict]:
    return await patrimony_service.list_operational(client_id)


@router.post("/operational", response_model=OperationalSnapshotResponse, status_code=201)
@handle_service_errors
async def create_operational(
    client_id: UUID,
    request: CreateOperationalSnapshotRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    """
    Record an operational snapshot.

    Raises:
        HTTPException(409): Snapshot already exists for the year
    """
    return await patrimony_service.create_operational(client_id, **request.model_dump())


@router.get("/operational/{year}", response_model=OperationalSnapshotResponse)
@handle_service_errors
async def get_operational(
    client_id: UUID,
    year: int,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    return await patrimony_service.get_operational(client_id, year)


@router.patch("/operational/{year}", response_model=OperationalSnapshotResponse)
@handle_service_errors
async def update_operational(
    client_id: UUID,
    year: int,
    request: UpdateOperationalSnapshotRequest,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> dict:
    return await patrimony_service.update_operational(client_id, year, **request.model_dump(exclude_unset=True))


@router.delete("/operational/{year}", status_code=204)
@handle_service_errors
async def delete_operational(
    client_id: UUID,
    year: int,
    patrimony_service: PatrimonyService = Depends(get_patrimony_service),
) -> None:
    await patrimony_service.delete_operational(client_id, year)
