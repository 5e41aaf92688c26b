"""
Integration tests for CalendarService.

System role: Verification of events, timesheet feed and sync conflicts
"""

import uuid
from datetime import datetime, timedelta

import pytest

from lexoffice.application.services import CalendarService, ProjectService
from lexoffice.application.services.calendar_service import duration_minutes
from lexoffice.boundary.db.CRUD import calendar_event_crud
from lexoffice.core.enums import (
    ActivityType,
    ConflictResolution,
    EventStatus,
    EventType,
    ModificationSource,
    SyncStatus,
)
from lexoffice.core.exceptions import NotFoundError, ValidationError

NINE = datetime(2024, 1, 10, 9, 0)
ELEVEN = datetime(2024, 1, 10, 11, 0)


@pytest.fixture
def calendar_service(test_async_db) -> CalendarService:
    return CalendarService(test_async_db)


@pytest.fixture
async def hearing(calendar_service, lawyer, case) -> dict:
    return await calendar_service.create_event(
        title="Conciliation hearing",
        event_type=EventType.HEARING,
        start_at=NINE,
        end_at=ELEVEN,
        responsible_id=lawyer["id"],
        case_id=case["id"],
        specific_fields={"result": "Agreement reached"},
    )


class TestEvents:
    @pytest.mark.asyncio
    async def test_create_defaults(self, hearing, lawyer) -> None:
        assert hearing["status"] == EventStatus.SCHEDULED
        assert hearing["sync_status"] == SyncStatus.SYNCED
        assert hearing["responsible"]["id"] == lawyer["id"]

    @pytest.mark.asyncio
    async def test_synced_event_starts_pending_push(self, calendar_service) -> None:
        event = await calendar_service.create_event(title="Call", start_at=NINE, sync_external=True)

        assert event["sync_status"] == SyncStatus.PENDING_PUSH

    @pytest.mark.asyncio
    async def test_list_returns_overlapping_events(self, calendar_service, hearing) -> None:
        await calendar_service.create_event(title="Later", start_at=datetime(2024, 2, 1, 9, 0))

        inside = await calendar_service.list_events(datetime(2024, 1, 10, 10, 0), datetime(2024, 1, 10, 23, 0))
        filtered = await calendar_service.list_events(
            datetime(2024, 1, 1), datetime(2024, 3, 1), event_types=[EventType.MEETING]
        )

        assert [e["title"] for e in inside] == ["Conciliation hearing"]
        assert filtered == []

    @pytest.mark.asyncio
    async def test_inverted_range_is_rejected(self, calendar_service) -> None:
        with pytest.raises(ValidationError):
            await calendar_service.list_events(ELEVEN, NINE)

    @pytest.mark.asyncio
    async def test_end_before_start_is_rejected(self, calendar_service, hearing) -> None:
        with pytest.raises(ValidationError):
            await calendar_service.update_event(hearing["id"], end_at=datetime(2024, 1, 10, 8, 0))

    @pytest.mark.asyncio
    async def test_completing_records_activity(self, calendar_service, hearing, lawyer, case) -> None:
        # Act
        await calendar_service.update_event(hearing["id"], status=EventStatus.COMPLETED)
        activities = await calendar_service.list_activities(case_id=case["id"])

        # Assert
        assert len(activities) == 1
        activity = activities[0]
        assert activity["type"] == ActivityType.HEARING
        assert activity["duration_minutes"] == 120
        assert activity["result"] == "Agreement reached"
        assert activity["user_id"] == lawyer["id"]
        assert activity["event_id"] == hearing["id"]

    @pytest.mark.asyncio
    async def test_completed_event_task_carries_to_activity(self, calendar_service, test_async_db) -> None:
        projects = ProjectService(test_async_db)
        project = await projects.create_project(title="Deposit release")
        task = await projects.add_task(project["id"], title="File petition")
        event = await calendar_service.create_event(
            title="Petition drafting", start_at=NINE, project_id=project["id"], task_id=task["id"]
        )

        await calendar_service.update_event(event["id"], status=EventStatus.COMPLETED)

        (activity,) = await calendar_service.list_activities(project_id=project["id"])
        assert activity["task_id"] == task["id"]

    @pytest.mark.asyncio
    async def test_explicit_nulls_keep_required_fields(self, calendar_service, hearing) -> None:
        updated = await calendar_service.update_event(
            hearing["id"], title=None, status=None, all_day=None, specific_fields=None
        )

        assert updated["title"] == "Conciliation hearing"
        assert updated["status"] == EventStatus.SCHEDULED
        assert updated["all_day"] is False

    @pytest.mark.asyncio
    async def test_unknown_references_are_not_found(self, calendar_service, hearing) -> None:
        with pytest.raises(NotFoundError):
            await calendar_service.create_event(title="Call", start_at=NINE, case_id=uuid.uuid4())
        with pytest.raises(NotFoundError):
            await calendar_service.update_event(hearing["id"], task_id=uuid.uuid4())
        with pytest.raises(NotFoundError):
            await calendar_service.create_activity(
                description="Research", performed_at=NINE, user_id=uuid.uuid4()
            )

    @pytest.mark.asyncio
    async def test_completing_twice_records_one_activity(self, calendar_service, hearing) -> None:
        await calendar_service.update_event(hearing["id"], status=EventStatus.COMPLETED)
        await calendar_service.update_event(hearing["id"], status=EventStatus.COMPLETED, title="Renamed")

        assert len(await calendar_service.list_activities()) == 1

    @pytest.mark.asyncio
    async def test_editing_synced_event_queues_push(self, calendar_service) -> None:
        event = await calendar_service.create_event(title="Call", start_at=NINE, sync_external=True)
        await calendar_event_crud.update_by_id(calendar_service.db, event["id"], sync_status=SyncStatus.SYNCED)

        moved = await calendar_service.move_event(event["id"], ELEVEN, None, all_day=False)

        assert moved["sync_status"] == SyncStatus.PENDING_PUSH
        assert moved["last_modified_source"] == ModificationSource.LOCAL

    @pytest.mark.asyncio
    async def test_delete_unknown_event_raises(self, calendar_service) -> None:
        with pytest.raises(NotFoundError):
            await calendar_service.delete_event(uuid.uuid4())


class TestSync:
    @pytest.mark.asyncio
    async def test_counts_are_zero_filled(self, calendar_service) -> None:
        await calendar_service.create_event(title="Call", start_at=NINE, sync_external=True)
        await calendar_service.create_event(title="Local only", start_at=NINE)

        counts = await calendar_service.sync_status_counts()

        assert counts == {"SYNCED": 0, "PENDING_PUSH": 1, "PENDING_PULL": 0, "CONFLICT": 0}

    @pytest.mark.asyncio
    async def test_keep_external_applies_stored_version(self, calendar_service) -> None:
        # Arrange
        event = await calendar_service.create_event(title="Hearing", start_at=NINE, sync_external=True)
        await calendar_event_crud.update_by_id(
            calendar_service.db,
            event["id"],
            sync_status=SyncStatus.CONFLICT,
            conflict_data={"external_title": "Hearing (moved)", "external_start_at": "2024-01-10T14:00:00"},
        )

        # Act
        conflicts = await calendar_service.list_conflicts()
        resolved = await calendar_service.resolve_conflict(event["id"], ConflictResolution.KEEP_EXTERNAL)

        # Assert
        assert [c["id"] for c in conflicts] == [event["id"]]
        assert resolved["title"] == "Hearing (moved)"
        assert resolved["start_at"].hour == 14
        assert resolved["sync_status"] == SyncStatus.SYNCED
        assert resolved["conflict_data"] is None
        assert resolved["last_modified_source"] == ModificationSource.EXTERNAL

    @pytest.mark.asyncio
    async def test_manual_resolution_requires_data(self, calendar_service) -> None:
        event = await calendar_service.create_event(title="Hearing", start_at=NINE, sync_external=True)
        await calendar_event_crud.update_by_id(calendar_service.db, event["id"], sync_status=SyncStatus.CONFLICT)

        with pytest.raises(ValidationError):
            await calendar_service.resolve_conflict(event["id"], ConflictResolution.MANUAL)

    @pytest.mark.asyncio
    async def test_event_without_conflict_is_not_found(self, calendar_service, hearing) -> None:
        with pytest.raises(NotFoundError):
            await calendar_service.resolve_conflict(hearing["id"], ConflictResolution.KEEP_LOCAL)


class TestDurationMinutes:
    def test_positive_interval(self) -> None:
        assert duration_minutes(NINE, ELEVEN) == 120

    def test_partial_minutes_round_half_up(self) -> None:
        assert duration_minutes(NINE, NINE + timedelta(seconds=90)) == 2
        assert duration_minutes(NINE, NINE + timedelta(seconds=89)) == 1

    def test_missing_or_non_positive_interval(self) -> None:
        assert duration_minutes(NINE, None) is None
        assert duration_minutes(ELEVEN, NINE) is None
