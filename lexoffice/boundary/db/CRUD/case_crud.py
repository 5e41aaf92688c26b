"""
Case CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Case persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD, Page
from lexoffice.boundary.db.models.case_model import CaseModel
from lexoffice.core.enums import CaseStatus, CaseType


class CaseCRUD(BaseCRUD[CaseModel]):
    """
    CRUD operations for CaseModel.

    Extends BaseCRUD with case-number lookup, listing with client and
    lawyer summaries, and the detail view with deadlines and creditors.
    """

    def __init__(self) -> None:
        """Initialize CaseCRUD with CaseModel."""
        super().__init__(CaseModel)

    async def get_by_number(self, session: AsyncSession, case_number: str) -> CaseModel | None:
        stmt = select(CaseModel).where(CaseModel.case_number == case_number)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_detail(self, session: AsyncSession, id: UUID) -> CaseModel | None:
        """
        Retrieve case with client, lawyer, judge, deadlines and creditors.

        Args:
            session: Async database session
            id: Case UUID

        Returns:
            CaseModel with relationships loaded, None if not found
        """
        stmt = (
            select(CaseModel)
            .where(CaseModel.id == id)
            .options(
                selectinload(CaseModel.client),
                selectinload(CaseModel.responsible),
                selectinload(CaseModel.judge),
                selectinload(CaseModel.deadlines),
                selectinload(CaseModel.creditors),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        session: AsyncSession,
        limit: int,
        cursor: UUID | None = None,
        status: CaseStatus | None = None,
        type: CaseType | None = None,
    ) -> Page[CaseModel]:
        """Cases ordered by last update, newest first."""
        stmt = select(CaseModel).options(
            selectinload(CaseModel.client),
            selectinload(CaseModel.responsible),
        )
        if status is not None:
            stmt = stmt.where(CaseModel.status == status)
        if type is not None:
            stmt = stmt.where(CaseModel.type == type)
        return await self.paginate(
            session, stmt, CaseModel.updated_at, limit=limit, cursor=cursor, descending=True
        )

    async def list_for_select(self, session: AsyncSession, limit: int = 100) -> Sequence[CaseModel]:
        """Active cases, newest first, with client loaded."""
        stmt = (
            select(CaseModel)
            .where(CaseModel.status == CaseStatus.ACTIVE)
            .options(selectinload(CaseModel.client))
            .order_by(CaseModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_by_client(self, session: AsyncSession, client_id: UUID) -> Sequence[CaseModel]:
        stmt = select(CaseModel).where(CaseModel.client_id == client_id).order_by(CaseModel.updated_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()


case_crud = CaseCRUD()
