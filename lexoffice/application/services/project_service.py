"""
Project service orchestrator.

Projects are worked through ordered phases, tasks (optionally inside a
phase) and milestones. Child records are always addressed through their
project, and a child of another project is reported as not found.

Dependencies: lexoffice.boundary.db.CRUD
System role: Project management use case orchestration
"""

import logging
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import person_summary, user_summary
from lexoffice.boundary.db.base import utcnow
from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.CRUD.project_crud import (
    project_crud,
    project_milestone_crud,
    project_phase_crud,
    project_task_crud,
)
from lexoffice.boundary.db.models import ProjectModel
from lexoffice.core.enums import ProjectCategory, ProjectStatus, TaskStatus
from lexoffice.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _project_dict(project: ProjectModel) -> dict:
    return {
        **project.to_dict(),
        "client": person_summary(project.client),
        "responsible": user_summary(project.responsible),
    }


class ProjectService:
    """Project service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _ensure_project(self, project_id: UUID) -> None:
        if not await project_crud.exists(self.db, project_id):
            raise NotFoundError("Project", project_id)

    async def _child(self, crud: BaseCRUD, resource: str, project_id: UUID, child_id: UUID) -> Any:
        child = await crud.get_by_id(self.db, child_id)
        if child is None or child.project_id != project_id:
            raise NotFoundError(resource, child_id)
        return child

    async def _check_phase(self, project_id: UUID, phase_id: UUID | None) -> None:
        if phase_id is None:
            return
        phase = await project_phase_crud.get_by_id(self.db, phase_id)
        if phase is None or phase.project_id != project_id:
            raise ValidationError("Phase does not belong to this project", field="phase_id")

    async def list_projects(
        self,
        limit: int,
        cursor: UUID | None = None,
        status: ProjectStatus | None = None,
        category: ProjectCategory | None = None,
    ) -> dict:
        page = await project_crud.list_page(
            self.db, limit=limit, cursor=cursor, status=status, category=category
        )
        return {"items": [_project_dict(p) for p in page.items], "next_cursor": page.next_cursor}

    async def get_project(self, project_id: UUID) -> dict:
        """
        Project detail.

        Phases come ordered by their order with their tasks, milestones by
        planned date and the flat task list newest first.
        """
        project = await project_crud.get_detail(self.db, project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return {
            **_project_dict(project),
            "phases": [
                {**phase.to_dict(), "tasks": [t.to_dict() for t in phase.tasks]}
                for phase in project.phases
            ],
            "tasks": [t.to_dict() for t in project.tasks],
            "milestones": [m.to_dict() for m in project.milestones],
        }

    async def create_project(self, **fields) -> dict:
        """Create a project with the next PRJ-<year>-<NNN> code."""
        await check_references(self.db, fields)
        code = await project_crud.next_code(self.db, date.today().year)
        project = await project_crud.create(self.db, code=code, **fields)
        logger.info("Project created", extra={"project_id": str(project.id), "code": code})
        return await self.get_project(project.id)

    async def update_project(self, project_id: UUID, **fields) -> dict:
        await self._ensure_project(project_id)
        await check_references(self.db, fields)
        await project_crud.update_by_id(self.db, project_id, **fields)
        logger.info("Project updated", extra={"project_id": str(project_id), "fields": sorted(fields)})
        return await self.get_project(project_id)

    async def delete_project(self, project_id: UUID) -> None:
        if not await project_crud.delete_by_id(self.db, project_id):
            raise NotFoundError("Project", project_id)
        logger.info("Project deleted", extra={"project_id": str(project_id)})

    # Phases

    async def add_phase(self, project_id: UUID, order: int | None = None, **fields) -> dict:
        """Add a phase; without an order it goes after the last one."""
        await self._ensure_project(project_id)
        if order is None:
            order = await project_phase_crud.next_order(self.db, project_id)
        phase = await project_phase_crud.create(self.db, project_id=project_id, order=order, **fields)
        return phase.to_dict()

    async def update_phase(self, project_id: UUID, phase_id: UUID, **fields) -> dict:
        await self._child(project_phase_crud, "Phase", project_id, phase_id)
        phase = await project_phase_crud.update_by_id(self.db, phase_id, **fields)
        return phase.to_dict()

    async def delete_phase(self, project_id: UUID, phase_id: UUID) -> None:
        """Delete a phase; its tasks stay on the project without a phase."""
        await self._child(project_phase_crud, "Phase", project_id, phase_id)
        await project_phase_crud.delete_by_id(self.db, phase_id)

    # Tasks

    async def add_task(self, project_id: UUID, **fields) -> dict:
        await self._ensure_project(project_id)
        await check_references(self.db, fields)
        await self._check_phase(project_id, fields.get("phase_id"))
        if fields.get("status") == TaskStatus.DONE:
            fields["completed_at"] = utcnow()
        task = await project_task_crud.create(self.db, project_id=project_id, **fields)
        logger.info("Task created", extra={"project_id": str(project_id), "task_id": str(task.id)})
        return task.to_dict()

    async def update_task(self, project_id: UUID, task_id: UUID, **fields) -> dict:
        """
        Update a task.

        Moving to DONE stamps completed_at; moving away from DONE clears it.
        """
        task = await self._child(project_task_crud, "Task", project_id, task_id)
        await check_references(self.db, fields)
        if "phase_id" in fields:
            await self._check_phase(project_id, fields["phase_id"])

        status = fields.get("status")
        if status == TaskStatus.DONE and task.status != TaskStatus.DONE:
            fields["completed_at"] = utcnow()
        elif status is not None and status != TaskStatus.DONE:
            fields["completed_at"] = None

        task = await project_task_crud.update_by_id(self.db, task_id, **fields)
        return task.to_dict()

    async def delete_task(self, project_id: UUID, task_id: UUID) -> None:
        await self._child(project_task_crud, "Task", project_id, task_id)
        await project_task_crud.delete_by_id(self.db, task_id)

    # Milestones

    async def add_milestone(self, project_id: UUID, **fields) -> dict:
        await self._ensure_project(project_id)
        milestone = await project_milestone_crud.create(self.db, project_id=project_id, **fields)
        return milestone.to_dict()

    async def update_milestone(self, project_id: UUID, milestone_id: UUID, **fields) -> dict:
        await self._child(project_milestone_crud, "Milestone", project_id, milestone_id)
        milestone = await project_milestone_crud.update_by_id(self.db, milestone_id, **fields)
        return milestone.to_dict()

    async def delete_milestone(self, project_id: UUID, milestone_id: UUID) -> None:
        await self._child(project_milestone_crud, "Milestone", project_id, milestone_id)
        await project_milestone_crud.delete_by_id(self.db, milestone_id)

    # Select lists

    async def projects_for_select(self) -> list[dict]:
        projects = await project_crud.list_open(self.db)
        return [{"id": p.id, "code": p.code, "title": p.title} for p in projects]

    async def tasks_for_select(self, project_id: UUID) -> list[dict]:
        tasks = await project_task_crud.list_open(self.db, project_id)
        return [{"id": t.id, "title": t.title, "status": t.status, "due_date": t.due_date} for t in tasks]
