"""
Integration tests for ProjectService.

System role: Verification of project, phase, task and milestone rules
"""

import uuid
from datetime import date

import pytest

from lexoffice.application.services import ProjectService
from lexoffice.core.enums import ProjectCategory, ProjectStatus, TaskStatus
from lexoffice.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def project_service(test_async_db) -> ProjectService:
    return ProjectService(test_async_db)


@pytest.fixture
async def project(project_service, client_person) -> dict:
    return await project_service.create_project(
        title="Release of judicial deposit",
        category=ProjectCategory.JUDICIAL_ORDER_RELEASE,
        client_id=client_person["id"],
    )


class TestProjects:
    @pytest.mark.asyncio
    async def test_codes_are_sequential_per_year(self, project_service, project) -> None:
        second = await project_service.create_project(title="Second")
        year = date.today().year

        assert project["code"] == f"PRJ-{year}-001"
        assert second["code"] == f"PRJ-{year}-002"
        assert project["status"] == ProjectStatus.PLANNING
        assert project["client"]["name"] == "Agro Vale Ltda"

    @pytest.mark.asyncio
    async def test_code_after_delete_does_not_collide(self, project_service, project) -> None:
        second = await project_service.create_project(title="Second")

        await project_service.delete_project(project["id"])
        third = await project_service.create_project(title="Third")

        year = date.today().year
        assert second["code"] == f"PRJ-{year}-002"
        assert third["code"] == f"PRJ-{year}-003"

    @pytest.mark.asyncio
    async def test_closed_projects_leave_select_list(self, project_service, project) -> None:
        await project_service.update_project(project["id"], status=ProjectStatus.COMPLETED)

        assert await project_service.projects_for_select() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reference", ["client_id", "responsible_id", "case_id"])
    async def test_unknown_references_are_not_found(self, project_service, reference) -> None:
        with pytest.raises(NotFoundError):
            await project_service.create_project(title="X", **{reference: uuid.uuid4()})

    @pytest.mark.asyncio
    async def test_unknown_assignee_is_not_found(self, project_service, project) -> None:
        with pytest.raises(NotFoundError):
            await project_service.add_task(project["id"], title="Task", assignee_id=uuid.uuid4())

    @pytest.mark.asyncio
    async def test_explicit_null_title_is_ignored(self, project_service, project) -> None:
        updated = await project_service.update_project(project["id"], title=None, status=None)

        assert updated["title"] == "Release of judicial deposit"
        assert updated["status"] == ProjectStatus.PLANNING

    @pytest.mark.asyncio
    async def test_delete_unknown_project_raises(self, project_service) -> None:
        with pytest.raises(NotFoundError):
            await project_service.delete_project(uuid.uuid4())


class TestPhasesAndTasks:
    @pytest.mark.asyncio
    async def test_phases_append_in_order(self, project_service, project) -> None:
        # Act
        first = await project_service.add_phase(project["id"], name="Filing")
        second = await project_service.add_phase(project["id"], name="Release")
        detail = await project_service.get_project(project["id"])

        # Assert
        assert (first["order"], second["order"]) == (0, 1)
        assert [p["name"] for p in detail["phases"]] == ["Filing", "Release"]

    @pytest.mark.asyncio
    async def test_task_phase_must_belong_to_project(self, project_service, project) -> None:
        other = await project_service.create_project(title="Other")
        foreign_phase = await project_service.add_phase(other["id"], name="Elsewhere")

        with pytest.raises(ValidationError):
            await project_service.add_task(project["id"], title="Task", phase_id=foreign_phase["id"])

    @pytest.mark.asyncio
    async def test_done_stamps_and_reopen_clears_completed_at(self, project_service, project) -> None:
        # Arrange
        task = await project_service.add_task(project["id"], title="Draft petition")

        # Act
        done = await project_service.update_task(project["id"], task["id"], status=TaskStatus.DONE)
        reopened = await project_service.update_task(project["id"], task["id"], status=TaskStatus.IN_PROGRESS)

        # Assert
        assert task["completed_at"] is None
        assert done["completed_at"] is not None
        assert reopened["completed_at"] is None

    @pytest.mark.asyncio
    async def test_task_of_other_project_is_not_found(self, project_service, project) -> None:
        other = await project_service.create_project(title="Other")
        task = await project_service.add_task(other["id"], title="Elsewhere")

        with pytest.raises(NotFoundError):
            await project_service.update_task(project["id"], task["id"], title="Hijack")

    @pytest.mark.asyncio
    async def test_deleting_phase_keeps_its_tasks(self, project_service, project) -> None:
        # Arrange
        phase = await project_service.add_phase(project["id"], name="Filing")
        task = await project_service.add_task(project["id"], title="File", phase_id=phase["id"])

        # Act
        await project_service.delete_phase(project["id"], phase["id"])
        detail = await project_service.get_project(project["id"])

        # Assert
        assert detail["phases"] == []
        assert [t["id"] for t in detail["tasks"]] == [task["id"]]

    @pytest.mark.asyncio
    async def test_open_tasks_for_select(self, project_service, project) -> None:
        await project_service.add_task(project["id"], title="Open")
        await project_service.add_task(project["id"], title="Closed", status=TaskStatus.DONE)

        tasks = await project_service.tasks_for_select(project["id"])

        assert [t["title"] for t in tasks] == ["Open"]


class TestMilestones:
    @pytest.mark.asyncio
    async def test_milestone_lifecycle(self, project_service, project) -> None:
        milestone = await project_service.add_milestone(
            project["id"], title="Deposit released", planned_date=date(2024, 6, 1)
        )
        updated = await project_service.update_milestone(
            project["id"], milestone["id"], achieved_date=date(2024, 6, 3)
        )
        await project_service.delete_milestone(project["id"], milestone["id"])
        detail = await project_service.get_project(project["id"])

        assert updated["achieved_date"] == date(2024, 6, 3)
        assert detail["milestones"] == []
