"""
Deadline service orchestrator.

Coordinates deadline control: dashboard counters, filtered listing,
business-day due dates, completion and the holiday calendar the
calculator counts against.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.deadlines
System role: Deadline control use case orchestration
"""

import logging
from datetime import date
from typing import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.holiday_cache import HolidayCache, get_holiday_cache
from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import user_summary
from lexoffice.boundary.db.base import utcnow
from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.CRUD.deadline_crud import deadline_crud, holiday_crud
from lexoffice.boundary.db.models import DeadlineModel
from lexoffice.core.deadlines import BusinessDayCalculator, DeadlineWindows, years_between, years_spanned
from lexoffice.core.enums import DeadlineStatus, DeadlineType
from lexoffice.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _deadline_dict(deadline: DeadlineModel) -> dict:
    case = deadline.case
    return {
        **deadline.to_dict(),
        "case": {
            "id": case.id,
            "case_number": case.case_number,
            "client_name": case.client.name if case.client else None,
        }
        if case is not None
        else None,
        "responsible": user_summary(deadline.responsible),
    }


class DeadlineService:
    """Deadline and holiday service orchestrator."""

    def __init__(self, db: AsyncSession, holiday_cache: HolidayCache | None = None) -> None:
        """
        Initialize deadline service.

        Args:
            db: Async SQLAlchemy session
            holiday_cache: Holiday set cache, defaults to the process-wide one
        """
        self.db = db
        self.holiday_cache = holiday_cache or get_holiday_cache()

    async def _holidays(self, years: Iterable[int], state: str | None) -> set[date]:
        state = state.upper() if state else None
        holidays: set[date] = set()
        for year in years:
            cached = self.holiday_cache.get(year, state)
            if cached is None:
                rows = await holiday_crud.list_for_year(self.db, year, state=state)
                cached = frozenset(h.date for h in rows)
                self.holiday_cache.set(year, state, cached)
            holidays |= cached
        return holidays

    async def calculator(self, years: Iterable[int], state: str | None = None) -> BusinessDayCalculator:
        """Business-day calculator loaded with national and state holidays."""
        return BusinessDayCalculator(await self._holidays(years, state))

    async def get_stats(self, today: date | None = None) -> dict:
        """
        Dashboard counters.

        "this_week" runs from the day after tomorrow to Sunday and is zero
        on Saturday and Sunday. "next_30_days" includes today.
        """
        windows = DeadlineWindows.for_day(today or date.today())
        this_week = 0
        if windows.week_start <= windows.week_end:
            this_week = await deadline_crud.count_pending_between(
                self.db, windows.week_start, windows.week_end
            )
        return {
            "today": await deadline_crud.count_pending_between(self.db, windows.today, windows.today),
            "tomorrow": await deadline_crud.count_pending_between(
                self.db, windows.tomorrow, windows.tomorrow
            ),
            "this_week": this_week,
            "next_30_days": await deadline_crud.count_pending_between(
                self.db, windows.today, windows.next30_end
            ),
            "overdue": await deadline_crud.count_overdue(self.db, windows.today),
        }

    async def list_deadlines(
        self,
        status: DeadlineStatus | None = None,
        type: DeadlineType | None = None,
        responsible_id: UUID | None = None,
        case_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> dict:
        items, total = await deadline_crud.list_filtered(
            self.db,
            status=status,
            type=type,
            responsible_id=responsible_id,
            case_id=case_id,
            date_from=date_from,
            date_to=date_to,
        )
        return {"items": [_deadline_dict(d) for d in items], "total": total}

    async def get_deadline(self, deadline_id: UUID) -> dict:
        deadline = await deadline_crud.get_detail(self.db, deadline_id)
        if deadline is None:
            raise NotFoundError("Deadline", deadline_id)
        return _deadline_dict(deadline)

    async def create_deadline(
        self,
        case_id: UUID,
        due_date: date | None = None,
        start_date: date | None = None,
        business_days: int | None = None,
        state: str | None = None,
        **fields,
    ) -> dict:
        """
        Create a deadline on a case.

        Without an explicit due_date the date is computed as business_days
        business days after start_date, skipping weekends and the national
        and state holidays.

        Raises:
            NotFoundError: If the case does not exist
        """
        if not await case_crud.exists(self.db, case_id):
            raise NotFoundError("Case", case_id)
        await check_references(self.db, fields)

        if due_date is None:
            calculator = await self.calculator(years_spanned(start_date, business_days), state)
            due_date = calculator.add_business_days(start_date, business_days)

        deadline = await deadline_crud.create(self.db, case_id=case_id, due_date=due_date, **fields)
        logger.info(
            "Deadline created",
            extra={"deadline_id": str(deadline.id), "case_id": str(case_id), "due_date": due_date.isoformat()},
        )
        return await self.get_deadline(deadline.id)

    async def update_deadline(self, deadline_id: UUID, **fields) -> dict:
        if not await deadline_crud.exists(self.db, deadline_id):
            raise NotFoundError("Deadline", deadline_id)
        await check_references(self.db, fields)
        deadline = await deadline_crud.update_by_id(self.db, deadline_id, **fields)
        if deadline is None:
            raise NotFoundError("Deadline", deadline_id)
        return await self.get_deadline(deadline_id)

    async def complete_deadline(self, deadline_id: UUID, fulfillment_document_id: str | None = None) -> dict:
        """Mark a deadline FULFILLED, recording when and by which document."""
        deadline = await deadline_crud.update_by_id(
            self.db,
            deadline_id,
            status=DeadlineStatus.FULFILLED,
            fulfilled_at=utcnow(),
            fulfillment_document_id=fulfillment_document_id,
        )
        if deadline is None:
            raise NotFoundError("Deadline", deadline_id)
        logger.info("Deadline fulfilled", extra={"deadline_id": str(deadline_id)})
        return await self.get_deadline(deadline_id)

    async def upcoming(self, limit: int = 5, today: date | None = None) -> list[dict]:
        """PENDING deadlines due within the next seven days."""
        windows = DeadlineWindows.for_day(today or date.today())
        items = await deadline_crud.list_upcoming(
            self.db, windows.today, windows.upcoming_end, limit=limit
        )
        return [_deadline_dict(d) for d in items]

    async def delete_deadline(self, deadline_id: UUID) -> None:
        if not await deadline_crud.delete_by_id(self.db, deadline_id):
            raise NotFoundError("Deadline", deadline_id)
        logger.info("Deadline deleted", extra={"deadline_id": str(deadline_id)})

    async def calculate(
        self,
        start_date: date,
        days: int,
        state: str | None = None,
        today: date | None = None,
    ) -> dict:
        """
        Compute a due date without persisting anything.

        Returns:
            dict: start_date, days, due_date, business_days_remaining
                (negative when the due date has passed)
        """
        today = today or date.today()
        calculator = await self.calculator(years_spanned(start_date, days), state)
        due_date = calculator.add_business_days(start_date, days)

        years = sorted(set(years_spanned(start_date, days)) | set(years_between(today, due_date)))
        calculator = await self.calculator(years, state)
        return {
            "start_date": start_date,
            "days": days,
            "due_date": due_date,
            "business_days_remaining": calculator.business_days_until(due_date, today),
        }

    async def list_holidays(self, year: int, state: str | None = None) -> list[dict]:
        """Holidays of a year; with a state, national plus that state's."""
        rows = await holiday_crud.list_for_year(self.db, year, state=state, applicable_only=False)
        return [h.to_dict() for h in rows]

    async def create_holiday(self, **fields) -> dict:
        if fields.get("state"):
            fields["state"] = fields["state"].upper()
        holiday = await holiday_crud.create(self.db, **fields)
        self.holiday_cache.clear()
        logger.info(
            "Holiday created",
            extra={"holiday_id": str(holiday.id), "date": holiday.date.isoformat(), "scope": holiday.scope.value},
        )
        return holiday.to_dict()

    async def delete_holiday(self, holiday_id: UUID) -> None:
        if not await holiday_crud.delete_by_id(self.db, holiday_id):
            raise NotFoundError("Holiday", holiday_id)
        self.holiday_cache.clear()
        logger.info("Holiday deleted", extra={"holiday_id": str(holiday_id)})
