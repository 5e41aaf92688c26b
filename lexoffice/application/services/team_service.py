"""
Team service orchestrator.

Workload analytics, quarterly OKRs with weighted key-result check-ins,
and monthly KPI snapshots with their dashboard.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.team
System role: Team performance use case orchestration
"""

import logging
import math
from datetime import date, datetime, timedelta
from typing import Mapping
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import user_summary
from lexoffice.boundary.db.base import utcnow
from lexoffice.boundary.db.CRUD.calendar_crud import activity_crud, calendar_event_crud
from lexoffice.boundary.db.CRUD.deadline_crud import deadline_crud
from lexoffice.boundary.db.CRUD.project_crud import project_task_crud
from lexoffice.boundary.db.CRUD.team_crud import kpi_entry_crud, okr_crud
from lexoffice.boundary.db.CRUD.user_crud import user_crud
from lexoffice.boundary.db.models import KPIEntryModel, OKRModel
from lexoffice.core.deadlines import DeadlineWindows
from lexoffice.core.enums import OKRStatus
from lexoffice.core.exceptions import NotFoundError, PreconditionFailedError, ValidationError
from lexoffice.core.restructuring.payments import add_months
from lexoffice.core.team import apply_checkin, kpi_dashboard, okr_progress

logger = logging.getLogger(__name__)

COUNTERS = (
    "pending_deadlines",
    "overdue_deadlines",
    "deadlines_next_7_days",
    "open_tasks",
    "events_next_7_days",
    "activity_minutes_30_days",
    "billable_minutes_30_days",
)


def _okr_dict(okr: OKRModel, with_children: bool = False) -> dict:
    data = {**okr.to_dict(), "user": user_summary(okr.user)}
    if with_children:
        data["children"] = [
            {"id": c.id, "objective": c.objective, "overall_progress": c.overall_progress, "status": c.status}
            for c in okr.children
        ]
    return data


def _kpi_dict(entry: KPIEntryModel) -> dict:
    return {**entry.to_dict(), "user": user_summary(entry.user)}


def _page(items: list[dict], total: int, page: int, limit: int) -> dict:
    return {"items": items, "total": total, "page": page, "pages": math.ceil(total / limit) if total else 0}


class TeamService:
    """Team workload analytics, OKRs and KPIs."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def analytics(self, now: datetime | None = None) -> dict:
        """
        Workload of every active user plus team totals.

        Deadline windows use the calendar day of `now`; events look seven
        days ahead and activities thirty days back from `now`.
        """
        now = now or utcnow()
        today: date = now.date()
        windows = DeadlineWindows.for_day(today)

        users = await user_crud.list_active(self.db)
        deadlines = await deadline_crud.pending_counts_by_user(self.db, today, windows.upcoming_end)
        tasks = await project_task_crud.open_counts_by_assignee(self.db)
        events = await calendar_event_crud.upcoming_counts_by_responsible(self.db, now, now + timedelta(days=7))
        minutes = await activity_crud.minutes_by_user(self.db, now - timedelta(days=30))

        members = []
        for user in users:
            deadline_counts = deadlines.get(user.id, {})
            total_minutes, billable_minutes = minutes.get(user.id, (0, 0))
            members.append(
                {
                    "user_id": user.id,
                    "name": user.name,
                    "role": user.role,
                    "pending_deadlines": deadline_counts.get("pending", 0),
                    "overdue_deadlines": deadline_counts.get("overdue", 0),
                    "deadlines_next_7_days": deadline_counts.get("due_next_7_days", 0),
                    "open_tasks": tasks.get(user.id, 0),
                    "events_next_7_days": events.get(user.id, 0),
                    "activity_minutes_30_days": total_minutes,
                    "billable_minutes_30_days": billable_minutes,
                }
            )

        totals = {name: sum(m[name] for m in members) for name in COUNTERS}
        totals["members"] = len(members)
        logger.info("Team analytics computed", extra={"members": len(members)})
        return {"members": members, "totals": totals}

    # OKRs

    async def list_okrs(
        self,
        user_id: UUID | None = None,
        quarter: int | None = None,
        year: int | None = None,
        status: OKRStatus | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> dict:
        items, total = await okr_crud.search(
            self.db, user_id=user_id, quarter=quarter, year=year, status=status, page=page, limit=limit
        )
        return _page([_okr_dict(o) for o in items], total, page, limit)

    async def get_okr(self, okr_id: UUID) -> dict:
        okr = await okr_crud.get_detail(self.db, okr_id)
        if okr is None:
            raise NotFoundError("OKR", okr_id)
        return _okr_dict(okr, with_children=True)

    async def create_okr(self, user_id: UUID, key_results: list[dict], **fields) -> dict:
        """
        Create an objective for a member.

        Progress starts from the current values sent with the key results.
        """
        await check_references(self.db, {"user_id": user_id, **fields})
        okr = await okr_crud.create(
            self.db,
            user_id=user_id,
            key_results=key_results,
            overall_progress=okr_progress(key_results),
            **fields,
        )
        logger.info(
            "OKR created",
            extra={"okr_id": str(okr.id), "user_id": str(user_id), "quarter": f"{okr.year}-Q{okr.quarter}"},
        )
        return await self.get_okr(okr.id)

    async def update_okr(self, okr_id: UUID, **fields) -> dict:
        """Partial update; new key results recompute the progress."""
        if not await okr_crud.exists(self.db, okr_id):
            raise NotFoundError("OKR", okr_id)
        if fields.get("parent_okr_id") == okr_id:
            raise ValidationError("An OKR cannot be its own parent", field="parent_okr_id")
        await check_references(self.db, fields)

        if fields.get("key_results") is not None:
            fields["overall_progress"] = okr_progress(fields["key_results"])
        await okr_crud.update_by_id(self.db, okr_id, **fields)
        return await self.get_okr(okr_id)

    async def delete_okr(self, okr_id: UUID) -> None:
        """Delete an objective; its children are detached."""
        if not await okr_crud.delete_by_id(self.db, okr_id):
            raise NotFoundError("OKR", okr_id)
        logger.info("OKR deleted", extra={"okr_id": str(okr_id)})

    async def check_in(self, okr_id: UUID, updates: Mapping[int, float]) -> dict:
        """
        Record new current values by key-result index and recompute progress.

        Raises:
            NotFoundError: If the OKR does not exist
            PreconditionFailedError: If the OKR is closed
        """
        okr = await okr_crud.get_by_id(self.db, okr_id)
        if okr is None:
            raise NotFoundError("OKR", okr_id)
        if okr.status == OKRStatus.CLOSED:
            raise PreconditionFailedError("Closed OKRs do not accept check-ins", {"okr_id": str(okr_id)})

        okr.key_results = apply_checkin(okr.key_results or [], updates)
        okr.overall_progress = okr_progress(okr.key_results)
        await self.db.flush()
        logger.info(
            "OKR check-in",
            extra={"okr_id": str(okr_id), "updates": len(updates), "progress": round(okr.overall_progress, 1)},
        )
        return await self.get_okr(okr_id)

    async def close_okr(
        self,
        okr_id: UUID,
        manager_comment: str | None = None,
        self_assessment: str | None = None,
    ) -> dict:
        """Close an objective, freezing its progress as the final score."""
        okr = await okr_crud.get_by_id(self.db, okr_id)
        if okr is None:
            raise NotFoundError("OKR", okr_id)

        score = okr_progress(okr.key_results or [])
        okr_crud.assign(
            okr,
            status=OKRStatus.CLOSED,
            final_score=score,
            overall_progress=score,
            manager_comment=manager_comment if manager_comment is not None else okr.manager_comment,
            self_assessment=self_assessment if self_assessment is not None else okr.self_assessment,
        )
        await self.db.flush()
        logger.info("OKR closed", extra={"okr_id": str(okr_id), "final_score": round(score, 1)})
        return await self.get_okr(okr_id)

    # KPIs

    async def list_kpis(
        self,
        user_id: UUID | None = None,
        period_from: date | None = None,
        period_to: date | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> dict:
        items, total = await kpi_entry_crud.search(
            self.db, user_id=user_id, period_from=period_from, period_to=period_to, page=page, limit=limit
        )
        return _page([_kpi_dict(e) for e in items], total, page, limit)

    async def get_kpi(self, entry_id: UUID) -> dict:
        entry = await kpi_entry_crud.get_detail(self.db, entry_id)
        if entry is None:
            raise NotFoundError("KPI entry", entry_id)
        return _kpi_dict(entry)

    async def record_kpi(self, user_id: UUID, period: date, **fields) -> dict:
        """
        Create or replace a member's KPI snapshot for a month.

        The period is stored as the first day of its month, so a second
        entry for the same month overwrites the fields it sends.
        """
        await check_references(self.db, {"user_id": user_id})
        period = period.replace(day=1)

        entry = await kpi_entry_crud.get_for_period(self.db, user_id, period)
        if entry is None:
            entry = await kpi_entry_crud.create(self.db, user_id=user_id, period=period, **fields)
            logger.info("KPI entry created", extra={"user_id": str(user_id), "period": period.isoformat()})
        else:
            kpi_entry_crud.assign(entry, **fields)
            await self.db.flush()
            logger.info("KPI entry replaced", extra={"user_id": str(user_id), "period": period.isoformat()})
        return await self.get_kpi(entry.id)

    async def update_kpi(self, entry_id: UUID, **fields) -> dict:
        entry = await kpi_entry_crud.update_by_id(self.db, entry_id, **fields)
        if entry is None:
            raise NotFoundError("KPI entry", entry_id)
        return await self.get_kpi(entry_id)

    async def kpi_dashboard(self, months: int = 6, today: date | None = None) -> dict:
        """
        Member averages, rankings and monthly trends over the last `months` months.
        """
        since = add_months((today or date.today()).replace(day=1), -months)
        entries = await kpi_entry_crud.list_since(self.db, since)
        names = {e.user_id: e.user.name for e in entries}
        return kpi_dashboard(entries, names)
