"""
Calendar event and activity CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Calendar and timesheet persistence operations
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.calendar_model import ActivityModel, CalendarEventModel
from lexoffice.core.enums import EventStatus, EventType, SyncStatus


class CalendarEventCRUD(BaseCRUD[CalendarEventModel]):
    """
    CRUD operations for CalendarEventModel.

    Extends BaseCRUD with range queries and external-sync bookkeeping.
    """

    def __init__(self) -> None:
        """Initialize CalendarEventCRUD with CalendarEventModel."""
        super().__init__(CalendarEventModel)

    async def get_detail(self, session: AsyncSession, id: UUID) -> CalendarEventModel | None:
        stmt = (
            select(CalendarEventModel)
            .where(CalendarEventModel.id == id)
            .options(selectinload(CalendarEventModel.responsible))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_in_range(
        self,
        session: AsyncSession,
        date_from: datetime,
        date_to: datetime,
        event_types: Sequence[EventType] | None = None,
        responsible_id: UUID | None = None,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
    ) -> Sequence[CalendarEventModel]:
        """
        Events overlapping [date_from, date_to], ordered by start.

        An event with an end overlaps when start <= date_to and
        end >= date_from; an event without end counts when its start
        falls inside the range.
        """
        overlap = or_(
            and_(
                CalendarEventModel.end_at.is_not(None),
                CalendarEventModel.start_at <= date_to,
                CalendarEventModel.end_at >= date_from,
            ),
            and_(
                CalendarEventModel.end_at.is_(None),
                CalendarEventModel.start_at >= date_from,
                CalendarEventModel.start_at <= date_to,
            ),
        )
        stmt = select(CalendarEventModel).where(overlap).options(selectinload(CalendarEventModel.responsible))
        if event_types:
            stmt = stmt.where(CalendarEventModel.event_type.in_(list(event_types)))
        if responsible_id is not None:
            stmt = stmt.where(CalendarEventModel.responsible_id == responsible_id)
        if case_id is not None:
            stmt = stmt.where(CalendarEventModel.case_id == case_id)
        if project_id is not None:
            stmt = stmt.where(CalendarEventModel.project_id == project_id)
        stmt = stmt.order_by(CalendarEventModel.start_at, CalendarEventModel.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def sync_status_counts(self, session: AsyncSession) -> dict[SyncStatus, int]:
        """Counts of synced events per sync status."""
        stmt = (
            select(CalendarEventModel.sync_status, func.count())
            .where(CalendarEventModel.sync_external.is_(True))
            .group_by(CalendarEventModel.sync_status)
        )
        result = await session.execute(stmt)
        return {status: count for status, count in result.all()}

    async def list_conflicts(self, session: AsyncSession) -> Sequence[CalendarEventModel]:
        stmt = (
            select(CalendarEventModel)
            .where(CalendarEventModel.sync_status == SyncStatus.CONFLICT)
            .options(selectinload(CalendarEventModel.responsible))
            .order_by(CalendarEventModel.start_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def upcoming_counts_by_responsible(
        self,
        session: AsyncSession,
        start: datetime,
        end: datetime,
    ) -> dict[UUID, int]:
        """Non-cancelled events starting in [start, end] per responsible user."""
        stmt = (
            select(CalendarEventModel.responsible_id, func.count())
            .where(
                CalendarEventModel.responsible_id.is_not(None),
                CalendarEventModel.status != EventStatus.CANCELLED,
                CalendarEventModel.start_at >= start,
                CalendarEventModel.start_at <= end,
            )
            .group_by(CalendarEventModel.responsible_id)
        )
        result = await session.execute(stmt)
        return {user_id: count for user_id, count in result.all()}


class ActivityCRUD(BaseCRUD[ActivityModel]):
    """CRUD operations for ActivityModel."""

    def __init__(self) -> None:
        """Initialize ActivityCRUD with ActivityModel."""
        super().__init__(ActivityModel)

    async def list_filtered(
        self,
        session: AsyncSession,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        user_id: UUID | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 100,
    ) -> Sequence[ActivityModel]:
        """Activities, most recent first."""
        stmt = select(ActivityModel)
        if case_id is not None:
            stmt = stmt.where(ActivityModel.case_id == case_id)
        if project_id is not None:
            stmt = stmt.where(ActivityModel.project_id == project_id)
        if user_id is not None:
            stmt = stmt.where(ActivityModel.user_id == user_id)
        if date_from is not None:
            stmt = stmt.where(ActivityModel.performed_at >= date_from)
        if date_to is not None:
            stmt = stmt.where(ActivityModel.performed_at <= date_to)
        stmt = stmt.order_by(ActivityModel.performed_at.desc()).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def minutes_by_user(self, session: AsyncSession, since: datetime) -> dict[UUID, tuple[int, int]]:
        """
        Activity minutes per user since a moment.

        Returns:
            {user_id: (total_minutes, billable_minutes)}
        """
        stmt = select(ActivityModel.user_id, ActivityModel.duration_minutes, ActivityModel.billable).where(
            ActivityModel.user_id.is_not(None),
            ActivityModel.performed_at >= since,
        )
        result = await session.execute(stmt)
        totals: dict[UUID, tuple[int, int]] = {}
        for user_id, minutes, billable in result.all():
            total, billable_total = totals.get(user_id, (0, 0))
            minutes = minutes or 0
            totals[user_id] = (total + minutes, billable_total + (minutes if billable else 0))
        return totals


calendar_event_crud = CalendarEventCRUD()
activity_crud = ActivityCRUD()
