"""
Credit recovery CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Credit recovery persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.recovery_model import JointDebtorModel, RecoveryCaseModel
from lexoffice.core.enums import RecoveryPhase, RecoveryStatus


class RecoveryCaseCRUD(BaseCRUD[RecoveryCaseModel]):
    """
    CRUD operations for RecoveryCaseModel.

    Extends BaseCRUD with code generation, the detail view with debtor
    and joint debtors, and the per-phase dashboard aggregate.
    """

    def __init__(self) -> None:
        """Initialize RecoveryCaseCRUD with RecoveryCaseModel."""
        super().__init__(RecoveryCaseModel)

    async def next_code(self, session: AsyncSession, year: int) -> str:
        """Next REC-<year>-<NNN> code after the highest one issued this year."""
        return await self.next_sequential_code(session, RecoveryCaseModel.code, f"REC-{year}-")

    async def get_detail(self, session: AsyncSession, id: UUID) -> RecoveryCaseModel | None:
        stmt = (
            select(RecoveryCaseModel)
            .where(RecoveryCaseModel.id == id)
            .options(
                selectinload(RecoveryCaseModel.debtor),
                selectinload(RecoveryCaseModel.joint_debtors),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        session: AsyncSession,
        phase: RecoveryPhase | None = None,
        status: RecoveryStatus | None = None,
    ) -> Sequence[RecoveryCaseModel]:
        """Recovery cases, newest first, with debtor loaded."""
        stmt = select(RecoveryCaseModel).options(selectinload(RecoveryCaseModel.debtor))
        if phase is not None:
            stmt = stmt.where(RecoveryCaseModel.phase == phase)
        if status is not None:
            stmt = stmt.where(RecoveryCaseModel.status == status)
        stmt = stmt.order_by(RecoveryCaseModel.created_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def active_rows(self, session: AsyncSession) -> Sequence[RecoveryCaseModel]:
        stmt = select(RecoveryCaseModel).where(RecoveryCaseModel.status == RecoveryStatus.ACTIVE)
        result = await session.execute(stmt)
        return result.scalars().all()


class JointDebtorCRUD(BaseCRUD[JointDebtorModel]):
    """CRUD operations for JointDebtorModel."""

    def __init__(self) -> None:
        super().__init__(JointDebtorModel)


recovery_case_crud = RecoveryCaseCRUD()
joint_debtor_crud = JointDebtorCRUD()
