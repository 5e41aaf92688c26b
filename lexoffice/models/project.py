"""
Project, phase, task and milestone schemas.

Dependencies: pydantic
System role: Project management API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import PhaseStatus, Priority, ProjectCategory, ProjectStatus, TaskStatus
from lexoffice.models.common import ORMModel
from lexoffice.models.person import PersonSummary
from lexoffice.models.user import UserSummary


class CreateProjectRequest(BaseModel):
    """Request schema for creating a project; the code is generated."""

    title: str = Field(..., min_length=1, max_length=255)
    category: ProjectCategory = ProjectCategory.OTHER
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Priority = Priority.MEDIUM
    description: str | None = None
    estimated_value: int | None = Field(None, ge=0)
    start_date: date | None = None
    end_date: date | None = None
    client_id: uuid.UUID | None = None
    responsible_id: uuid.UUID | None = None
    case_id: uuid.UUID | None = None


class UpdateProjectRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    category: ProjectCategory | None = None
    status: ProjectStatus | None = None
    priority: Priority | None = None
    description: str | None = None
    estimated_value: int | None = Field(None, ge=0)
    start_date: date | None = None
    end_date: date | None = None
    client_id: uuid.UUID | None = None
    responsible_id: uuid.UUID | None = None
    case_id: uuid.UUID | None = None


class CreatePhaseRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(None, ge=0, description="Appended after the last phase when omitted")
    status: PhaseStatus = PhaseStatus.PENDING
    start_date: date | None = None
    end_date: date | None = None


class UpdatePhaseRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(None, ge=0)
    status: PhaseStatus | None = None
    start_date: date | None = None
    end_date: date | None = None


class CreateTaskRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    phase_id: uuid.UUID | None = None
    assignee_id: uuid.UUID | None = None
    due_date: date | None = None


class UpdateTaskRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    priority: Priority | None = None
    phase_id: uuid.UUID | None = None
    assignee_id: uuid.UUID | None = None
    due_date: date | None = None


class CreateMilestoneRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    planned_date: date | None = None
    achieved_date: date | None = None


class UpdateMilestoneRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    planned_date: date | None = None
    achieved_date: date | None = None


class TaskResponse(ORMModel):
    id: uuid.UUID
    project_id: uuid.UUID
    phase_id: uuid.UUID | None = None
    title: str
    description: str | None = None
    status: TaskStatus
    priority: Priority
    assignee_id: uuid.UUID | None = None
    due_date: date | None = None
    completed_at: datetime | None = None
    created_at: datetime


class PhaseResponse(ORMModel):
    id: uuid.UUID
    project_id: uuid.UUID
    name: str
    description: str | None = None
    order: int
    status: PhaseStatus
    start_date: date | None = None
    end_date: date | None = None


class PhaseWithTasksResponse(PhaseResponse):
    tasks: list[TaskResponse] = Field(default_factory=list)


class MilestoneResponse(ORMModel):
    id: uuid.UUID
    project_id: uuid.UUID
    title: str
    description: str | None = None
    planned_date: date | None = None
    achieved_date: date | None = None


class ProjectResponse(ORMModel):
    id: uuid.UUID
    code: str
    title: str
    category: ProjectCategory
    status: ProjectStatus
    priority: Priority
    description: str | None = None
    estimated_value: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    client_id: uuid.UUID | None = None
    responsible_id: uuid.UUID | None = None
    case_id: uuid.UUID | None = None
    client: PersonSummary | None = None
    responsible: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class ProjectDetailResponse(ProjectResponse):
    phases: list[PhaseWithTasksResponse] = Field(default_factory=list)
    tasks: list[TaskResponse] = Field(default_factory=list)
    milestones: list[MilestoneResponse] = Field(default_factory=list)


class ProjectListResponse(ORMModel):
    items: list[ProjectResponse]
    next_cursor: uuid.UUID | None = None


class ProjectSelectItem(ORMModel):
    id: uuid.UUID
    code: str
    title: str


class TaskSelectItem(ORMModel):
    id: uuid.UUID
    title: str
    status: TaskStatus
    due_date: date | None = None
