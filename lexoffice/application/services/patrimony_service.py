"""
Patrimony service orchestrator.

Client assets (rural and urban properties, vehicles and machinery,
corporate participations), agricultural productions, financial and
operational snapshots, and the consolidated summary.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.patrimony
System role: Client patrimony use case orchestration
"""

import enum
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.patrimony_crud import (
    AssetCRUD,
    financial_snapshot_crud,
    operational_snapshot_crud,
    participation_crud,
    production_crud,
    rural_property_crud,
    urban_property_crud,
    vehicle_crud,
)
from lexoffice.boundary.db.CRUD.person_crud import person_crud
from lexoffice.boundary.db.models import FinancialSnapshotModel
from lexoffice.core.enums import FinancialPeriod
from lexoffice.core.exceptions import ConflictError, NotFoundError, ValidationError
from lexoffice.core.patrimony import financial_indicators, summarize_patrimony

logger = logging.getLogger(__name__)


class AssetKind(str, enum.Enum):
    RURAL_PROPERTY = "rural-properties"
    URBAN_PROPERTY = "urban-properties"
    VEHICLE = "vehicles"
    PARTICIPATION = "participations"


ASSET_CRUDS: dict[AssetKind, AssetCRUD] = {
    AssetKind.RURAL_PROPERTY: rural_property_crud,
    AssetKind.URBAN_PROPERTY: urban_property_crud,
    AssetKind.VEHICLE: vehicle_crud,
    AssetKind.PARTICIPATION: participation_crud,
}


def _financial_dict(snapshot: FinancialSnapshotModel) -> dict:
    return {**snapshot.to_dict(), "indicators": financial_indicators(snapshot)}


class PatrimonyService:
    """Client patrimony service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _ensure_client(self, client_id: UUID) -> None:
        if not await person_crud.exists(self.db, client_id):
            raise NotFoundError("Client", client_id)

    async def _owned(self, crud, resource: str, client_id: UUID, record_id: UUID, active_only: bool = False):
        record = await (crud.get_active if active_only else crud.get_by_id)(self.db, record_id)
        if record is None or record.client_id != client_id:
            raise NotFoundError(resource, record_id)
        return record

    # Assets

    async def list_assets(self, kind: AssetKind, client_id: UUID) -> list[dict]:
        rows = await ASSET_CRUDS[kind].list_active(self.db, client_id)
        return [r.to_dict() for r in rows]

    async def create_asset(self, kind: AssetKind, client_id: UUID, **fields) -> dict:
        await self._ensure_client(client_id)
        if fields.get("state"):
            fields["state"] = fields["state"].upper()
        asset = await ASSET_CRUDS[kind].create(self.db, client_id=client_id, **fields)
        logger.info(
            "Asset created",
            extra={"client_id": str(client_id), "asset_kind": kind.value, "asset_id": str(asset.id)},
        )
        return asset.to_dict()

    async def update_asset(self, kind: AssetKind, client_id: UUID, asset_id: UUID, **fields) -> dict:
        crud = ASSET_CRUDS[kind]
        await self._owned(crud, "Asset", client_id, asset_id, active_only=True)
        if fields.get("state"):
            fields["state"] = fields["state"].upper()
        asset = await crud.update_by_id(self.db, asset_id, **fields)
        return asset.to_dict()

    async def delete_asset(self, kind: AssetKind, client_id: UUID, asset_id: UUID) -> None:
        """Soft delete: the asset leaves every listing and total."""
        crud = ASSET_CRUDS[kind]
        await self._owned(crud, "Asset", client_id, asset_id, active_only=True)
        await crud.soft_delete(self.db, asset_id)
        logger.info(
            "Asset deactivated",
            extra={"client_id": str(client_id), "asset_kind": kind.value, "asset_id": str(asset_id)},
        )

    # Productions

    async def _check_property(self, client_id: UUID, rural_property_id: UUID | None) -> None:
        if rural_property_id is None:
            return
        prop = await rural_property_crud.get_by_id(self.db, rural_property_id)
        if prop is None or prop.client_id != client_id:
            raise ValidationError("Rural property does not belong to this client", field="rural_property_id")

    async def list_productions(self, client_id: UUID, harvest_year: str | None = None) -> list[dict]:
        rows = await production_crud.list_by_client(self.db, client_id, harvest_year=harvest_year)
        return [r.to_dict() for r in rows]

    async def create_production(self, client_id: UUID, **fields) -> dict:
        await self._ensure_client(client_id)
        await self._check_property(client_id, fields.get("rural_property_id"))
        production = await production_crud.create(self.db, client_id=client_id, **fields)
        return production.to_dict()

    async def update_production(self, client_id: UUID, production_id: UUID, **fields) -> dict:
        await self._owned(production_crud, "Production", client_id, production_id)
        if "rural_property_id" in fields:
            await self._check_property(client_id, fields["rural_property_id"])
        production = await production_crud.update_by_id(self.db, production_id, **fields)
        return production.to_dict()

    async def delete_production(self, client_id: UUID, production_id: UUID) -> None:
        await self._owned(production_crud, "Production", client_id, production_id)
        await production_crud.delete_by_id(self.db, production_id)

    # Financial snapshots

    async def list_financial(self, client_id: UUID, year: int | None = None) -> list[dict]:
        rows = await financial_snapshot_crud.list_by_client(self.db, client_id, year=year)
        return [_financial_dict(r) for r in rows]

    async def get_financial(self, client_id: UUID, snapshot_id: UUID) -> dict:
        snapshot = await self._owned(financial_snapshot_crud, "Financial snapshot", client_id, snapshot_id)
        return _financial_dict(snapshot)

    async def create_financial(
        self,
        client_id: UUID,
        year: int,
        period: FinancialPeriod = FinancialPeriod.ANNUAL,
        quarter: int = 0,
        **fields,
    ) -> dict:
        """
        Record a financial snapshot.

        Annual snapshots always carry quarter 0.

        Raises:
            ConflictError: If the client already has a snapshot for the period
        """
        await self._ensure_client(client_id)
        if period == FinancialPeriod.ANNUAL:
            quarter = 0
        existing = await financial_snapshot_crud.get_by_period(self.db, client_id, year, period, quarter)
        if existing is not None:
            raise ConflictError(
                "Financial snapshot already exists for this period",
                details={"year": year, "period": period.value, "quarter": quarter},
            )
        snapshot = await financial_snapshot_crud.create(
            self.db, client_id=client_id, year=year, period=period, quarter=quarter, **fields
        )
        logger.info(
            "Financial snapshot created",
            extra={"client_id": str(client_id), "year": year, "period": period.value, "quarter": quarter},
        )
        return _financial_dict(snapshot)

    async def update_financial(self, client_id: UUID, snapshot_id: UUID, **fields) -> dict:
        await self._owned(financial_snapshot_crud, "Financial snapshot", client_id, snapshot_id)
        snapshot = await financial_snapshot_crud.update_by_id(self.db, snapshot_id, **fields)
        return _financial_dict(snapshot)

    async def delete_financial(self, client_id: UUID, snapshot_id: UUID) -> None:
        await self._owned(financial_snapshot_crud, "Financial snapshot", client_id, snapshot_id)
        await financial_snapshot_crud.delete_by_id(self.db, snapshot_id)

    async def financial_indicators(self, client_id: UUID, snapshot_id: UUID) -> dict:
        snapshot = await self._owned(financial_snapshot_crud, "Financial snapshot", client_id, snapshot_id)
        return financial_indicators(snapshot)

    # Operational snapshots

    async def list_operational(self, client_id: UUID) -> list[dict]:
        rows = await operational_snapshot_crud.list_by_client(self.db, client_id)
        return [r.to_dict() for r in rows]

    async def get_operational(self, client_id: UUID, year: int) -> dict:
        snapshot = await operational_snapshot_crud.get_by_year(self.db, client_id, year)
        if snapshot is None:
            raise NotFoundError("Operational snapshot", year)
        return snapshot.to_dict()

    async def create_operational(self, client_id: UUID, year: int, **fields) -> dict:
        """
        Record an operational snapshot.

        Raises:
            ConflictError: If the client already has one for the year
        """
        await self._ensure_client(client_id)
        if await operational_snapshot_crud.get_by_year(self.db, client_id, year) is not None:
            raise ConflictError("Operational snapshot already exists for this year", details={"year": year})
        snapshot = await operational_snapshot_crud.create(self.db, client_id=client_id, year=year, **fields)
        return snapshot.to_dict()

    async def update_operational(self, client_id: UUID, year: int, **fields) -> dict:
        snapshot = await operational_snapshot_crud.get_by_year(self.db, client_id, year)
        if snapshot is None:
            raise NotFoundError("Operational snapshot", year)
        snapshot = await operational_snapshot_crud.update_by_id(self.db, snapshot.id, **fields)
        return snapshot.to_dict()

    async def delete_operational(self, client_id: UUID, year: int) -> None:
        snapshot = await operational_snapshot_crud.get_by_year(self.db, client_id, year)
        if snapshot is None:
            raise NotFoundError("Operational snapshot", year)
        await operational_snapshot_crud.delete_by_id(self.db, snapshot.id)

    # Summary

    async def summary(self, client_id: UUID) -> dict:
        """
        Consolidated patrimony of a client.

        Totals run over active assets only. The latest financial snapshot
        comes with its indicators.
        """
        await self._ensure_client(client_id)
        summary = summarize_patrimony(
            rural=await rural_property_crud.list_active(self.db, client_id),
            urban=await urban_property_crud.list_active(self.db, client_id),
            vehicles=await vehicle_crud.list_active(self.db, client_id),
            participations=await participation_crud.list_active(self.db, client_id),
            productions=await production_crud.list_by_client(self.db, client_id),
        )
        latest_financial = await financial_snapshot_crud.latest(self.db, client_id)
        operational = await operational_snapshot_crud.list_by_client(self.db, client_id)
        summary["latest_financial"] = _financial_dict(latest_financial) if latest_financial else None
        summary["latest_operational"] = operational[0].to_dict() if operational else None
        return summary
