"""
Project CRUD operations.

Projects plus their phases, tasks and milestones.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Project management persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD, Page
from lexoffice.boundary.db.models.project_model import (
    ProjectMilestoneModel,
    ProjectModel,
    ProjectPhaseModel,
    ProjectTaskModel,
)
from lexoffice.core.enums import ProjectCategory, ProjectStatus, TaskStatus

OPEN_PROJECT_STATUSES = (ProjectStatus.PLANNING, ProjectStatus.IN_PROGRESS, ProjectStatus.ON_HOLD)
OPEN_TASK_STATUSES = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED)


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """
    CRUD operations for ProjectModel.

    Extends BaseCRUD with code generation, cursor listing and the detail
    view (phases with their tasks, milestones, tasks).
    """

    def __init__(self) -> None:
        """Initialize ProjectCRUD with ProjectModel."""
        super().__init__(ProjectModel)

    async def next_code(self, session: AsyncSession, year: int) -> str:
        """Next PRJ-<year>-<NNN> code after the highest one issued this year."""
        return await self.next_sequential_code(session, ProjectModel.code, f"PRJ-{year}-")

    async def get_detail(self, session: AsyncSession, id: UUID) -> ProjectModel | None:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.id == id)
            .options(
                selectinload(ProjectModel.client),
                selectinload(ProjectModel.responsible),
                selectinload(ProjectModel.phases).selectinload(ProjectPhaseModel.tasks),
                selectinload(ProjectModel.tasks),
                selectinload(ProjectModel.milestones),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        session: AsyncSession,
        limit: int,
        cursor: UUID | None = None,
        status: ProjectStatus | None = None,
        category: ProjectCategory | None = None,
    ) -> Page[ProjectModel]:
        """Projects ordered by last update, newest first."""
        stmt = select(ProjectModel).options(
            selectinload(ProjectModel.client),
            selectinload(ProjectModel.responsible),
        )
        if status is not None:
            stmt = stmt.where(ProjectModel.status == status)
        if category is not None:
            stmt = stmt.where(ProjectModel.category == category)
        return await self.paginate(
            session, stmt, ProjectModel.updated_at, limit=limit, cursor=cursor, descending=True
        )

    async def list_open(self, session: AsyncSession) -> Sequence[ProjectModel]:
        """Projects not completed or cancelled, by code."""
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.status.in_(OPEN_PROJECT_STATUSES))
            .order_by(ProjectModel.code)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class ProjectPhaseCRUD(BaseCRUD[ProjectPhaseModel]):
    """CRUD operations for ProjectPhaseModel."""

    def __init__(self) -> None:
        super().__init__(ProjectPhaseModel)

    async def next_order(self, session: AsyncSession, project_id: UUID) -> int:
        stmt = select(func.max(ProjectPhaseModel.order)).where(ProjectPhaseModel.project_id == project_id)
        current = (await session.execute(stmt)).scalar_one_or_none()
        return 0 if current is None else current + 1


class ProjectTaskCRUD(BaseCRUD[ProjectTaskModel]):
    """CRUD operations for ProjectTaskModel."""

    def __init__(self) -> None:
        super().__init__(ProjectTaskModel)

    async def list_open(self, session: AsyncSession, project_id: UUID) -> Sequence[ProjectTaskModel]:
        """Open tasks of a project, soonest due first."""
        stmt = (
            select(ProjectTaskModel)
            .where(
                ProjectTaskModel.project_id == project_id,
                ProjectTaskModel.status.in_(OPEN_TASK_STATUSES),
            )
            .order_by(ProjectTaskModel.due_date, ProjectTaskModel.title)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def open_counts_by_assignee(self, session: AsyncSession) -> dict[UUID, int]:
        stmt = (
            select(ProjectTaskModel.assignee_id, func.count())
            .where(
                ProjectTaskModel.assignee_id.is_not(None),
                ProjectTaskModel.status.in_(OPEN_TASK_STATUSES),
            )
            .group_by(ProjectTaskModel.assignee_id)
        )
        result = await session.execute(stmt)
        return {user_id: count for user_id, count in result.all()}


class ProjectMilestoneCRUD(BaseCRUD[ProjectMilestoneModel]):
    """CRUD operations for ProjectMilestoneModel."""

    def __init__(self) -> None:
        super().__init__(ProjectMilestoneModel)


project_crud = ProjectCRUD()
project_phase_crud = ProjectPhaseCRUD()
project_task_crud = ProjectTaskCRUD()
project_milestone_crud = ProjectMilestoneCRUD()
