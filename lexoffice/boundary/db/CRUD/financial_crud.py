"""
Financial CRUD operations.

Fees and expenses with page-numbered listings and the sums behind the
financial dashboard.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Office billing persistence operations
"""

from datetime import date
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models import CaseModel
from lexoffice.boundary.db.models.financial_model import ExpenseModel, FeeModel
from lexoffice.core.enums import ExpenseCategory, FeeStatus


class FeeCRUD(BaseCRUD[FeeModel]):
    """CRUD operations for FeeModel."""

    def __init__(self) -> None:
        super().__init__(FeeModel)

    def _with_links(self) -> Select:
        return select(FeeModel).options(
            selectinload(FeeModel.case).selectinload(CaseModel.client),
            selectinload(FeeModel.project),
        )

    async def get_detail(self, session: AsyncSession, id: UUID) -> FeeModel | None:
        stmt = self._with_links().where(FeeModel.id == id).execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        session: AsyncSession,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        status: FeeStatus | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> tuple[Sequence[FeeModel], int]:
        """Filtered, page-numbered listing, latest due date first."""
        criteria = []
        if case_id is not None:
            criteria.append(FeeModel.case_id == case_id)
        if project_id is not None:
            criteria.append(FeeModel.project_id == project_id)
        if status is not None:
            criteria.append(FeeModel.status == status)

        total = await self.count(session, *criteria)
        stmt = (
            self._with_links()
            .where(*criteria)
            .order_by(FeeModel.due_date.desc(), FeeModel.installment_number.desc(), FeeModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def total(self, session: AsyncSession, *criteria: Any) -> int:
        """Sum of amounts matching the criteria, 0 when none."""
        stmt = select(func.coalesce(func.sum(FeeModel.amount), 0)).where(*criteria)
        return int((await session.execute(stmt)).scalar_one())

    async def list_due_since(self, session: AsyncSession, since: date) -> Sequence[FeeModel]:
        stmt = select(FeeModel).where(FeeModel.due_date >= since)
        result = await session.execute(stmt)
        return result.scalars().all()


class ExpenseCRUD(BaseCRUD[ExpenseModel]):
    """CRUD operations for ExpenseModel."""

    def __init__(self) -> None:
        super().__init__(ExpenseModel)

    def _with_links(self) -> Select:
        return select(ExpenseModel).options(
            selectinload(ExpenseModel.case).selectinload(CaseModel.client),
            selectinload(ExpenseModel.project),
        )

    async def get_detail(self, session: AsyncSession, id: UUID) -> ExpenseModel | None:
        stmt = self._with_links().where(ExpenseModel.id == id).execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        session: AsyncSession,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        category: ExpenseCategory | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> tuple[Sequence[ExpenseModel], int]:
        """Filtered, page-numbered listing, latest expense first."""
        criteria = []
        if case_id is not None:
            criteria.append(ExpenseModel.case_id == case_id)
        if project_id is not None:
            criteria.append(ExpenseModel.project_id == project_id)
        if category is not None:
            criteria.append(ExpenseModel.category == category)

        total = await self.count(session, *criteria)
        stmt = (
            self._with_links()
            .where(*criteria)
            .order_by(ExpenseModel.expense_date.desc(), ExpenseModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def total_between(self, session: AsyncSession, start: date, end: date) -> int:
        """Sum of expenses dated within [start, end]."""
        stmt = select(func.coalesce(func.sum(ExpenseModel.amount), 0)).where(
            ExpenseModel.expense_date >= start,
            ExpenseModel.expense_date <= end,
        )
        return int((await session.execute(stmt)).scalar_one())


fee_crud = FeeCRUD()
expense_crud = ExpenseCRUD()
