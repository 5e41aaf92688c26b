"""
Deadline and holiday CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Deadline control persistence operations
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.case_model import CaseModel
from lexoffice.boundary.db.models.deadline_model import DeadlineModel, HolidayModel
from lexoffice.core.enums import DeadlineStatus, DeadlineType, HolidayScope


class DeadlineCRUD(BaseCRUD[DeadlineModel]):
    """
    CRUD operations for DeadlineModel.

    Extends BaseCRUD with the dashboard counters, filtered listing and
    per-user aggregates used by team analytics.
    """

    def __init__(self) -> None:
        """Initialize DeadlineCRUD with DeadlineModel."""
        super().__init__(DeadlineModel)

    def _with_case(self):
        return select(DeadlineModel).options(
            selectinload(DeadlineModel.case).selectinload(CaseModel.client),
            selectinload(DeadlineModel.responsible),
        )

    async def get_detail(self, session: AsyncSession, id: UUID) -> DeadlineModel | None:
        stmt = self._with_case().where(DeadlineModel.id == id).execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_pending_between(self, session: AsyncSession, start: date, end: date) -> int:
        """PENDING deadlines with start <= due_date <= end."""
        return await self.count(
            session,
            DeadlineModel.status == DeadlineStatus.PENDING,
            DeadlineModel.due_date >= start,
            DeadlineModel.due_date <= end,
        )

    async def count_overdue(self, session: AsyncSession, today: date) -> int:
        """PENDING or MISSED deadlines due before today."""
        return await self.count(
            session,
            DeadlineModel.status.in_([DeadlineStatus.PENDING, DeadlineStatus.MISSED]),
            DeadlineModel.due_date < today,
        )

    async def list_filtered(
        self,
        session: AsyncSession,
        status: DeadlineStatus | None = None,
        type: DeadlineType | None = None,
        responsible_id: UUID | None = None,
        case_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[Sequence[DeadlineModel], int]:
        """
        Deadlines ordered by due date with filters.

        Returns:
            (items, total) where total ignores limit/offset
        """
        criteria = []
        if status is not None:
            criteria.append(DeadlineModel.status == status)
        if type is not None:
            criteria.append(DeadlineModel.type == type)
        if responsible_id is not None:
            criteria.append(DeadlineModel.responsible_id == responsible_id)
        if case_id is not None:
            criteria.append(DeadlineModel.case_id == case_id)
        if date_from is not None:
            criteria.append(DeadlineModel.due_date >= date_from)
        if date_to is not None:
            criteria.append(DeadlineModel.due_date <= date_to)

        total = await self.count(session, *criteria)
        stmt = (
            self._with_case()
            .where(*criteria)
            .order_by(DeadlineModel.due_date, DeadlineModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def list_upcoming(
        self,
        session: AsyncSession,
        today: date,
        until: date,
        limit: int = 5,
    ) -> Sequence[DeadlineModel]:
        """PENDING deadlines due between today and until, soonest first."""
        stmt = (
            self._with_case()
            .where(
                DeadlineModel.status == DeadlineStatus.PENDING,
                DeadlineModel.due_date >= today,
                DeadlineModel.due_date <= until,
            )
            .order_by(DeadlineModel.due_date, DeadlineModel.id)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def pending_counts_by_user(
        self,
        session: AsyncSession,
        today: date,
        week_end: date,
    ) -> dict[UUID, dict[str, int]]:
        """
        Per-responsible pending, overdue and due-this-week counters.

        Returns:
            {user_id: {"pending": n, "overdue": n, "due_next_7_days": n}}
        """
        stmt = (
            select(DeadlineModel.responsible_id, DeadlineModel.status, DeadlineModel.due_date)
            .where(
                DeadlineModel.responsible_id.is_not(None),
                or_(
                    DeadlineModel.status == DeadlineStatus.PENDING,
                    DeadlineModel.status == DeadlineStatus.MISSED,
                ),
            )
        )
        result = await session.execute(stmt)
        counters: dict[UUID, dict[str, int]] = {}
        for user_id, status, due_date in result.all():
            entry = counters.setdefault(user_id, {"pending": 0, "overdue": 0, "due_next_7_days": 0})
            if status == DeadlineStatus.PENDING:
                entry["pending"] += 1
                if today <= due_date <= week_end:
                    entry["due_next_7_days"] += 1
            if due_date < today:
                entry["overdue"] += 1
        return counters


class HolidayCRUD(BaseCRUD[HolidayModel]):
    """CRUD operations for HolidayModel."""

    def __init__(self) -> None:
        """Initialize HolidayCRUD with HolidayModel."""
        super().__init__(HolidayModel)

    async def list_for_year(
        self,
        session: AsyncSession,
        year: int,
        state: str | None = None,
        applicable_only: bool = True,
    ) -> Sequence[HolidayModel]:
        """
        Holidays of a year that apply to a state.

        National holidays always apply; state and municipal rows apply
        only when their state matches. With applicable_only=False and no
        state, every holiday of the year is returned.
        """
        stmt = select(HolidayModel).where(
            HolidayModel.date >= date(year, 1, 1),
            HolidayModel.date <= date(year, 12, 31),
        )
        if state:
            stmt = stmt.where(
                or_(HolidayModel.scope == HolidayScope.NATIONAL, HolidayModel.state == state.upper())
            )
        elif applicable_only:
            stmt = stmt.where(HolidayModel.scope == HolidayScope.NATIONAL)
        stmt = stmt.order_by(HolidayModel.date)
        result = await session.execute(stmt)
        return result.scalars().all()


deadline_crud = DeadlineCRUD()
holiday_crud = HolidayCRUD()
