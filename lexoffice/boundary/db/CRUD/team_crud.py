"""
Team performance CRUD operations.

OKRs with their owner and children, and monthly KPI entries.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Team performance persistence operations
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.team_model import KPIEntryModel, OKRModel
from lexoffice.core.enums import OKRStatus


class OKRCRUD(BaseCRUD[OKRModel]):
    """CRUD operations for OKRModel."""

    def __init__(self) -> None:
        super().__init__(OKRModel)

    def _with_user(self) -> Select:
        return select(OKRModel).options(selectinload(OKRModel.user))

    async def get_detail(self, session: AsyncSession, id: UUID) -> OKRModel | None:
        """OKR with its owner and child objectives."""
        stmt = (
            self._with_user()
            .where(OKRModel.id == id)
            .options(selectinload(OKRModel.children))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        session: AsyncSession,
        user_id: UUID | None = None,
        quarter: int | None = None,
        year: int | None = None,
        status: OKRStatus | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> tuple[Sequence[OKRModel], int]:
        """
        Filtered, page-numbered listing, latest quarter first.

        Returns:
            (items, total)
        """
        criteria = []
        if user_id is not None:
            criteria.append(OKRModel.user_id == user_id)
        if quarter is not None:
            criteria.append(OKRModel.quarter == quarter)
        if year is not None:
            criteria.append(OKRModel.year == year)
        if status is not None:
            criteria.append(OKRModel.status == status)

        total = await self.count(session, *criteria)
        stmt = (
            self._with_user()
            .where(*criteria)
            .order_by(OKRModel.year.desc(), OKRModel.quarter.desc(), OKRModel.created_at.desc(), OKRModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total


class KPIEntryCRUD(BaseCRUD[KPIEntryModel]):
    """CRUD operations for KPIEntryModel."""

    def __init__(self) -> None:
        super().__init__(KPIEntryModel)

    def _with_user(self) -> Select:
        return select(KPIEntryModel).options(selectinload(KPIEntryModel.user))

    async def get_detail(self, session: AsyncSession, id: UUID) -> KPIEntryModel | None:
        stmt = self._with_user().where(KPIEntryModel.id == id).execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_period(self, session: AsyncSession, user_id: UUID, period: date) -> KPIEntryModel | None:
        stmt = select(KPIEntryModel).where(KPIEntryModel.user_id == user_id, KPIEntryModel.period == period)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        session: AsyncSession,
        user_id: UUID | None = None,
        period_from: date | None = None,
        period_to: date | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> tuple[Sequence[KPIEntryModel], int]:
        """Filtered, page-numbered listing, latest period first."""
        criteria = []
        if user_id is not None:
            criteria.append(KPIEntryModel.user_id == user_id)
        if period_from is not None:
            criteria.append(KPIEntryModel.period >= period_from)
        if period_to is not None:
            criteria.append(KPIEntryModel.period <= period_to)

        total = await self.count(session, *criteria)
        stmt = (
            self._with_user()
            .where(*criteria)
            .order_by(KPIEntryModel.period.desc(), KPIEntryModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def list_since(self, session: AsyncSession, since: date) -> Sequence[KPIEntryModel]:
        """Entries with period on or after since, with their owners."""
        stmt = (
            self._with_user()
            .where(KPIEntryModel.period >= since)
            .order_by(KPIEntryModel.user_id, KPIEntryModel.period.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


okr_crud = OKRCRUD()
kpi_entry_crud = KPIEntryCRUD()
