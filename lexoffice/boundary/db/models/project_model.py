"""
Project ORM models.

Internal engagements broken into phases, tasks and milestones.
Children are deleted with their project.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Project management persistence
"""

import uuid
from datetime import date, datetime

from sqlalchemy import BigInteger, Date, DateTime, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import PhaseStatus, Priority, ProjectCategory, ProjectStatus, TaskStatus


class ProjectModel(Base, UUIDMixin, TimestampMixin):
    """
    Project ORM model.

    Attributes:
        code: Generated PRJ-<year>-<NNN> code (unique)
        title: Project title
        category: Kind of engagement
        status: Lifecycle status
        client_id: Client person
        responsible_id: Responsible lawyer
        case_id: Related case

    Relationships:
        phases: Ordered by `order`
        tasks: Newest first
        milestones: Ordered by planned date
    """

    __tablename__ = "projects"

    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[ProjectCategory] = mapped_column(
        Enum(ProjectCategory, native_enum=False),
        nullable=False,
        default=ProjectCategory.OTHER,
    )
    status: Mapped[ProjectStatus] = mapped_column(
        Enum(ProjectStatus, native_enum=False),
        nullable=False,
        default=ProjectStatus.PLANNING,
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False),
        nullable=False,
        default=Priority.MEDIUM,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    client_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
    )

    client = relationship("PersonModel")
    responsible = relationship("UserModel")
    phases = relationship(
        "ProjectPhaseModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectPhaseModel.order",
    )
    tasks = relationship(
        "ProjectTaskModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectTaskModel.created_at.desc()",
    )
    milestones = relationship(
        "ProjectMilestoneModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectMilestoneModel.planned_date",
    )


class ProjectPhaseModel(Base, UUIDMixin, TimestampMixin):
    """Ordered stage of a project."""

    __tablename__ = "project_phases"

    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[PhaseStatus] = mapped_column(
        Enum(PhaseStatus, native_enum=False),
        nullable=False,
        default=PhaseStatus.PENDING,
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    project = relationship("ProjectModel", back_populates="phases")
    tasks = relationship(
        "ProjectTaskModel",
        back_populates="phase",
        order_by="ProjectTaskModel.created_at.desc()",
    )


class ProjectTaskModel(Base, UUIDMixin, TimestampMixin):
    """Task of a project, optionally grouped under a phase."""

    __tablename__ = "project_tasks"

    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    phase_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("project_phases.id", ondelete="SET NULL"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, native_enum=False),
        nullable=False,
        default=TaskStatus.TODO,
        index=True,
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False),
        nullable=False,
        default=Priority.MEDIUM,
    )
    assignee_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    project = relationship("ProjectModel", back_populates="tasks")
    phase = relationship("ProjectPhaseModel", back_populates="tasks")


class ProjectMilestoneModel(Base, UUIDMixin, TimestampMixin):
    """Checkpoint with a planned and an achieved date."""

    __tablename__ = "project_milestones"

    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    planned_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    achieved_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    project = relationship("ProjectModel", back_populates="milestones")
