"""
Patrimony CRUD operations.

The four asset kinds share one soft-deleting CRUD class; productions and
snapshots get their own lookups.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Patrimony persistence operations
"""

from typing import Any, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.base import Base
from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.patrimony_model import (
    AgriculturalProductionModel,
    CorporateParticipationModel,
    FinancialSnapshotModel,
    OperationalSnapshotModel,
    RuralPropertyModel,
    UrbanPropertyModel,
    VehicleModel,
)
from lexoffice.core.enums import FinancialPeriod

AssetT = TypeVar("AssetT", bound=Base)


class AssetCRUD(BaseCRUD[AssetT]):
    """
    CRUD for client assets deactivated through `is_active`.

    Args:
        model: Asset model class
        order_by: Columns for the listing order
    """

    def __init__(self, model: type[AssetT], order_by: Sequence[Any]) -> None:
        super().__init__(model)
        self.order_by = order_by

    async def list_active(self, session: AsyncSession, client_id: UUID) -> Sequence[AssetT]:
        stmt = (
            select(self.model)
            .where(self.model.client_id == client_id, self.model.is_active.is_(True))
            .order_by(*self.order_by)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_active(self, session: AsyncSession, id: UUID) -> AssetT | None:
        stmt = select(self.model).where(self.model.id == id, self.model.is_active.is_(True))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def soft_delete(self, session: AsyncSession, id: UUID) -> bool:
        """Flip is_active to False; False when no active row matched."""
        instance = await self.get_active(session, id)
        if instance is None:
            return False
        instance.is_active = False
        await session.flush()
        return True


class ProductionCRUD(BaseCRUD[AgriculturalProductionModel]):
    """CRUD operations for AgriculturalProductionModel."""

    def __init__(self) -> None:
        super().__init__(AgriculturalProductionModel)

    async def list_by_client(
        self,
        session: AsyncSession,
        client_id: UUID,
        harvest_year: str | None = None,
    ) -> Sequence[AgriculturalProductionModel]:
        """Productions of a client, latest harvest first."""
        stmt = select(AgriculturalProductionModel).where(AgriculturalProductionModel.client_id == client_id)
        if harvest_year:
            stmt = stmt.where(AgriculturalProductionModel.harvest_year == harvest_year)
        stmt = stmt.order_by(
            AgriculturalProductionModel.harvest_year.desc(),
            AgriculturalProductionModel.crop,
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class FinancialSnapshotCRUD(BaseCRUD[FinancialSnapshotModel]):
    """CRUD operations for FinancialSnapshotModel."""

    def __init__(self) -> None:
        super().__init__(FinancialSnapshotModel)

    async def get_by_period(
        self,
        session: AsyncSession,
        client_id: UUID,
        year: int,
        period: FinancialPeriod,
        quarter: int,
    ) -> FinancialSnapshotModel | None:
        stmt = select(FinancialSnapshotModel).where(
            FinancialSnapshotModel.client_id == client_id,
            FinancialSnapshotModel.year == year,
            FinancialSnapshotModel.period == period,
            FinancialSnapshotModel.quarter == quarter,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_client(
        self,
        session: AsyncSession,
        client_id: UUID,
        year: int | None = None,
    ) -> Sequence[FinancialSnapshotModel]:
        """Snapshots, latest first (annual before quarters of the same year)."""
        stmt = select(FinancialSnapshotModel).where(FinancialSnapshotModel.client_id == client_id)
        if year is not None:
            stmt = stmt.where(FinancialSnapshotModel.year == year)
        stmt = stmt.order_by(FinancialSnapshotModel.year.desc(), FinancialSnapshotModel.quarter.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def latest(self, session: AsyncSession, client_id: UUID) -> FinancialSnapshotModel | None:
        rows = await self.list_by_client(session, client_id)
        return rows[0] if rows else None


class OperationalSnapshotCRUD(BaseCRUD[OperationalSnapshotModel]):
    """CRUD operations for OperationalSnapshotModel."""

    def __init__(self) -> None:
        super().__init__(OperationalSnapshotModel)

    async def get_by_year(
        self,
        session: AsyncSession,
        client_id: UUID,
        year: int,
    ) -> OperationalSnapshotModel | None:
        stmt = select(OperationalSnapshotModel).where(
            OperationalSnapshotModel.client_id == client_id,
            OperationalSnapshotModel.year == year,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_client(self, session: AsyncSession, client_id: UUID) -> Sequence[OperationalSnapshotModel]:
        stmt = (
            select(OperationalSnapshotModel)
            .where(OperationalSnapshotModel.client_id == client_id)
            .order_by(OperationalSnapshotModel.year.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


rural_property_crud = AssetCRUD(RuralPropertyModel, order_by=(RuralPropertyModel.name,))
urban_property_crud = AssetCRUD(UrbanPropertyModel, order_by=(UrbanPropertyModel.created_at.desc(),))
vehicle_crud = AssetCRUD(VehicleModel, order_by=(VehicleModel.category, VehicleModel.created_at.desc()))
participation_crud = AssetCRUD(
    CorporateParticipationModel,
    order_by=(CorporateParticipationModel.company_name,),
)
production_crud = ProductionCRUD()
financial_snapshot_crud = FinancialSnapshotCRUD()
operational_snapshot_crud = OperationalSnapshotCRUD()
