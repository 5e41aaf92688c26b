"""
Integration tests for DeadlineService.

Covers holiday-aware due dates, the dashboard counters, completion and
cache invalidation when the holiday calendar changes.

System role: Verification of deadline control
"""

import uuid
from datetime import date

import pytest

from lexoffice.application.services import DeadlineService
from lexoffice.application.services.holiday_cache import HolidayCache
from lexoffice.core.enums import DeadlineStatus, DeadlineType, HolidayScope
from lexoffice.core.exceptions import NotFoundError

FRIDAY = date(2024, 1, 5)
WEDNESDAY = date(2024, 1, 3)


@pytest.fixture
def deadline_service(test_async_db) -> DeadlineService:
    """DeadlineService with a private holiday cache."""
    return DeadlineService(test_async_db, holiday_cache=HolidayCache())


@pytest.fixture
async def holidays(deadline_service) -> None:
    await deadline_service.create_holiday(date=date(2024, 1, 8), name="National day", scope=HolidayScope.NATIONAL)
    await deadline_service.create_holiday(
        date=date(2024, 1, 9), name="State day", scope=HolidayScope.STATE, state="mt"
    )


class TestCalculate:
    @pytest.mark.asyncio
    async def test_national_holidays_only_without_state(self, deadline_service, holidays) -> None:
        result = await deadline_service.calculate(FRIDAY, 1, today=FRIDAY)

        assert result["due_date"] == date(2024, 1, 9)
        assert result["business_days_remaining"] == 1

    @pytest.mark.asyncio
    async def test_state_holidays_apply_with_state(self, deadline_service, holidays) -> None:
        result = await deadline_service.calculate(FRIDAY, 1, state="MT", today=FRIDAY)

        assert result["due_date"] == date(2024, 1, 10)

    @pytest.mark.asyncio
    async def test_past_due_date_has_negative_remaining(self, deadline_service) -> None:
        result = await deadline_service.calculate(FRIDAY, 1, today=date(2024, 1, 10))

        assert result["due_date"] == date(2024, 1, 8)
        assert result["business_days_remaining"] == -2

    @pytest.mark.asyncio
    async def test_new_holiday_invalidates_cache(self, deadline_service) -> None:
        # Arrange
        before = await deadline_service.calculate(FRIDAY, 1, today=FRIDAY)

        # Act
        await deadline_service.create_holiday(date=date(2024, 1, 8), name="Added", scope=HolidayScope.NATIONAL)
        after = await deadline_service.calculate(FRIDAY, 1, today=FRIDAY)

        # Assert
        assert before["due_date"] == date(2024, 1, 8)
        assert after["due_date"] == date(2024, 1, 9)


class TestDeadlineLifecycle:
    @pytest.mark.asyncio
    async def test_due_date_computed_from_business_days(self, deadline_service, case, holidays) -> None:
        deadline = await deadline_service.create_deadline(
            case_id=case["id"],
            start_date=FRIDAY,
            business_days=1,
            state="MT",
            title="Reply",
            type=DeadlineType.FATAL,
        )

        assert deadline["due_date"] == date(2024, 1, 10)
        assert deadline["status"] == DeadlineStatus.PENDING
        assert deadline["case"]["case_number"] == case["case_number"]
        assert deadline["case"]["client_name"] == "Agro Vale Ltda"

    @pytest.mark.asyncio
    async def test_explicit_due_date_wins(self, deadline_service, case) -> None:
        deadline = await deadline_service.create_deadline(
            case_id=case["id"], due_date=date(2024, 2, 1), title="Hearing"
        )

        assert deadline["due_date"] == date(2024, 2, 1)
        assert deadline["type"] == DeadlineType.ORDINARY

    @pytest.mark.asyncio
    async def test_unknown_case_is_not_found(self, deadline_service) -> None:
        with pytest.raises(NotFoundError):
            await deadline_service.create_deadline(case_id=uuid.uuid4(), due_date=FRIDAY, title="x")

    @pytest.mark.asyncio
    async def test_unknown_responsible_is_not_found(self, deadline_service, case) -> None:
        with pytest.raises(NotFoundError) as exc:
            await deadline_service.create_deadline(
                case_id=case["id"], due_date=FRIDAY, title="x", responsible_id=uuid.uuid4()
            )

        assert exc.value.resource == "User"

    @pytest.mark.asyncio
    async def test_update_unknown_deadline_is_not_found(self, deadline_service) -> None:
        with pytest.raises(NotFoundError):
            await deadline_service.update_deadline(uuid.uuid4(), responsible_id=uuid.uuid4())

    @pytest.mark.asyncio
    async def test_complete_records_fulfillment(self, deadline_service, case) -> None:
        deadline = await deadline_service.create_deadline(case_id=case["id"], due_date=FRIDAY, title="Brief")

        completed = await deadline_service.complete_deadline(deadline["id"], "DOC-77")

        assert completed["status"] == DeadlineStatus.FULFILLED
        assert completed["fulfilled_at"] is not None
        assert completed["fulfillment_document_id"] == "DOC-77"

    @pytest.mark.asyncio
    async def test_case_deletion_cascades_to_deadlines(self, test_async_db, deadline_service, case) -> None:
        from lexoffice.application.services import CaseService

        deadline = await deadline_service.create_deadline(case_id=case["id"], due_date=FRIDAY, title="Brief")

        await CaseService(test_async_db).delete_case(case["id"])

        with pytest.raises(NotFoundError):
            await deadline_service.get_deadline(deadline["id"])


class TestStats:
    @pytest.mark.asyncio
    async def test_counters_for_a_wednesday(self, deadline_service, case) -> None:
        # Arrange
        for due in (date(2024, 1, 1), WEDNESDAY, date(2024, 1, 4), date(2024, 1, 6), date(2024, 1, 20)):
            await deadline_service.create_deadline(case_id=case["id"], due_date=due, title=f"due {due}")
        done = await deadline_service.create_deadline(case_id=case["id"], due_date=WEDNESDAY, title="done")
        await deadline_service.complete_deadline(done["id"])

        # Act
        stats = await deadline_service.get_stats(today=WEDNESDAY)

        # Assert
        assert stats == {"today": 1, "tomorrow": 1, "this_week": 1, "next_30_days": 4, "overdue": 1}

    @pytest.mark.asyncio
    async def test_this_week_is_zero_on_saturday(self, deadline_service, case) -> None:
        await deadline_service.create_deadline(case_id=case["id"], due_date=date(2024, 1, 7), title="Sunday")

        stats = await deadline_service.get_stats(today=date(2024, 1, 6))

        assert stats["this_week"] == 0
        assert stats["tomorrow"] == 1

    @pytest.mark.asyncio
    async def test_upcoming_lists_next_seven_days(self, deadline_service, case) -> None:
        for due in (date(2024, 1, 4), date(2024, 1, 10), date(2024, 1, 11)):
            await deadline_service.create_deadline(case_id=case["id"], due_date=due, title=f"due {due}")

        upcoming = await deadline_service.upcoming(today=WEDNESDAY)

        assert [d["due_date"] for d in upcoming] == [date(2024, 1, 4), date(2024, 1, 10)]


class TestHolidays:
    @pytest.mark.asyncio
    async def test_list_with_state_includes_national(self, deadline_service, holidays) -> None:
        with_state = await deadline_service.list_holidays(2024, state="MT")
        other_state = await deadline_service.list_holidays(2024, state="SP")

        assert [h["name"] for h in with_state] == ["National day", "State day"]
        assert [h["name"] for h in other_state] == ["National day"]

    @pytest.mark.asyncio
    async def test_delete_unknown_holiday_raises(self, deadline_service) -> None:
        with pytest.raises(NotFoundError):
            await deadline_service.delete_holiday(uuid.uuid4())
