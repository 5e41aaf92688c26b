"""
Project API endpoints.

Routes:
- GET /projects - List projects (cursor pagination)
- POST /projects - Create project (code generated)
- GET /projects/select - Open projects for select inputs
- GET /projects/{id} - Get project with phases, tasks and milestones
- PATCH /projects/{id} - Update project
- DELETE /projects/{id} - Delete project
- POST|PATCH|DELETE /projects/{id}/phases[/{phase_id}]
- POST|PATCH|DELETE /projects/{id}/tasks[/{task_id}]
- GET /projects/{id}/tasks/select - Open tasks for select inputs
- POST|PATCH|DELETE /projects/{id}/milestones[/{milestone_id}]

Dependencies: lexoffice.application.services, lexoffice.models
System role: Project management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_project_service
from lexoffice.application.services import ProjectService
from lexoffice.core.enums import ProjectCategory, ProjectStatus
from lexoffice.models.common import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from lexoffice.models.project import (
    CreateMilestoneRequest,
    CreatePhaseRequest,
    CreateProjectRequest,
    CreateTaskRequest,
    MilestoneResponse,
    PhaseResponse,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectSelectItem,
    TaskResponse,
    TaskSelectItem,
    UpdateMilestoneRequest,
    UpdatePhaseRequest,
    UpdateProjectRequest,
    UpdateTaskRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ProjectListResponse)
@handle_service_errors
async def list_projects(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    cursor: UUID | None = None,
    status: ProjectStatus | None = None,
    category: ProjectCategory | None = None,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """
    List projects, newest first.

    Args:
        limit: Page size (1-100)
        cursor: Id of the first row of the requested page
        status: Status filter
        category: Category filter
        project_service: Injected ProjectService

    Returns:
        ProjectListResponse: items and next_cursor
    """
    return await project_service.list_projects(
        limit=limit, cursor=cursor, status=status, category=category
    )


@router.get("/select", response_model=list[ProjectSelectItem])
@handle_service_errors
async def projects_for_select(
    project_service: ProjectService = Depends(get_project_service),
) -> list[dict]:
    """Open projects for select inputs."""
    return await project_service.projects_for_select()


@router.post("", response_model=ProjectDetailResponse, status_code=201)
@handle_service_errors
async def create_project(
    request: CreateProjectRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """Create a project; the PRJ-<year>-<NNN> code is generated."""
    logger.info("Creating project", extra={"category": request.category.value})
    return await project_service.create_project(**request.model_dump())


@router.get("/{project_id}", response_model=ProjectDetailResponse)
@handle_service_errors
async def get_project(
    project_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """Get a project with phases (and their tasks), tasks and milestones."""
    return await project_service.get_project(project_id)


@router.patch("/{project_id}", response_model=ProjectDetailResponse)
@handle_service_errors
async def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """Update a project; only the fields sent are changed."""
    return await project_service.update_project(project_id, **request.model_dump(exclude_unset=True))


@router.delete("/{project_id}", status_code=204)
@handle_service_errors
async def delete_project(
    project_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project with its phases, tasks and milestones."""
    logger.info("Deleting project", extra={"project_id": str(project_id)})
    await project_service.delete_project(project_id)


# Phases


@router.post("/{project_id}/phases", response_model=PhaseResponse, status_code=201)
@handle_service_errors
async def add_phase(
    project_id: UUID,
    request: CreatePhaseRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """Add a phase; without an order it is appended after the last phase."""
    return await project_service.add_phase(project_id, **request.model_dump())


@router.patch("/{project_id}/phases/{phase_id}", response_model=PhaseResponse)
@handle_service_errors
async def update_phase(
    project_id: UUID,
    phase_id: UUID,
    request: UpdatePhaseRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    return await project_service.update_phase(project_id, phase_id, **request.model_dump(exclude_unset=True))


@router.delete("/{project_id}/phases/{phase_id}", status_code=204)
@handle_service_errors
async def delete_phase(
    project_id: UUID,
    phase_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> None:
    await project_service.delete_phase(project_id, phase_id)


# Tasks


@router.get("/{project_id}/tasks/select", response_model=list[TaskSelectItem])
@handle_service_errors
async def tasks_for_select(
    project_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> list[dict]:
    """Open tasks of a project for select inputs."""
    return await project_service.tasks_for_select(project_id)


@router.post("/{project_id}/tasks", response_model=TaskResponse, status_code=201)
@handle_service_errors
async def add_task(
    project_id: UUID,
    request: CreateTaskRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """
    Add a task to a project.

    Raises:
        HTTPException(400): Phase belongs to another project
        HTTPException(404): Project not found
    """
    return await project_service.add_task(project_id, **request.model_dump())


@router.patch("/{project_id}/tasks/{task_id}", response_model=TaskResponse)
@handle_service_errors
async def update_task(
    project_id: UUID,
    task_id: UUID,
    request: UpdateTaskRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    """Update a task; setting DONE stamps completed_at."""
    return await project_service.update_task(project_id, task_id, **request.model_dump(exclude_unset=True))


@router.delete("/{project_id}/tasks/{task_id}", status_code=204)
@handle_service_errors
async def delete_task(
    project_id: UUID,
    task_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> None:
    await project_service.delete_task(project_id, task_id)


# Milestones


@router.post("/{project_id}/milestones", response_model=MilestoneResponse, status_code=201)
@handle_service_errors
async def add_milestone(
    project_id: UUID,
    request: CreateMilestoneRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    return await project_service.add_milestone(project_id, **request.model_dump())


@router.patch("/{project_id}/milestones/{milestone_id}", response_model=MilestoneResponse)
@handle_service_errors
async def update_milestone(
    project_id: UUID,
    milestone_id: UUID,
    request: UpdateMilestoneRequest,
    project_service: ProjectService = Depends(get_project_service),
) -> dict:
    return await project_service.update_milestone(
        project_id, milestone_id, **request.model_dump(exclude_unset=True)
    )


@router.delete("/{project_id}/milestones/{milestone_id}", status_code=204)
@handle_service_errors
async def delete_milestone(
    project_id: UUID,
    milestone_id: UUID,
    project_service: ProjectService = Depends(get_project_service),
) -> None:
    await project_service.delete_milestone(project_id, milestone_id)
