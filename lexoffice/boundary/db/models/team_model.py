"""
Team performance ORM models.

Quarterly OKRs and monthly KPI snapshots, both owned by a user. Deleting
the user deletes them.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Team performance persistence
"""

import uuid
from datetime import date

from sqlalchemy import (
    JSON,
    BigInteger,
    Date,
    Enum,
    Float,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import OKRCategory, OKRStatus


class OKRModel(Base, UUIDMixin, TimestampMixin):
    """
    Objective with its key results for one quarter.

    Attributes:
        user_id: Owner
        quarter: 1-4
        key_results: JSON list of {title, metric, target_value,
            current_value, unit, weight}
        overall_progress: Weighted key-result progress, 0-100
        final_score: Progress frozen when the OKR is closed
        parent_okr_id: Objective this one rolls up into

    Relationships:
        children: OKRs that roll up into this one
    """

    __tablename__ = "okrs"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quarter: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    objective: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[OKRCategory] = mapped_column(Enum(OKRCategory, native_enum=False), nullable=False)
    status: Mapped[OKRStatus] = mapped_column(
        Enum(OKRStatus, native_enum=False),
        nullable=False,
        default=OKRStatus.DRAFT,
    )
    key_results: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    overall_progress: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    final_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    self_assessment: Mapped[str | None] = mapped_column(Text, nullable=True)
    manager_comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_okr_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("okrs.id", ondelete="SET NULL"),
        nullable=True,
    )

    user = relationship("UserModel")
    children = relationship("OKRModel", order_by="OKRModel.created_at")


class KPIEntryModel(Base, UUIDMixin, TimestampMixin):
    """
    Monthly KPI snapshot of one member; one row per (user, period).

    Hours are decimal hours, rates and scores are percentages and
    revenue_generated is in centavos.
    """

    __tablename__ = "kpi_entries"
    __table_args__ = (UniqueConstraint("user_id", "period", name="uq_kpi_entry_user_period"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    period: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    billable_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    utilization_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    cases_active: Mapped[int | None] = mapped_column(Integer, nullable=True)
    deadlines_met: Mapped[int | None] = mapped_column(Integer, nullable=True)
    deadlines_total: Mapped[int | None] = mapped_column(Integer, nullable=True)
    deadline_compliance_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    pieces_produced: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pieces_quality_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    case_success_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    revenue_generated: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    clients_acquired: Mapped[int | None] = mapped_column(Integer, nullable=True)
    training_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    mentoring_sessions: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overall_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    insights: Mapped[str | None] = mapped_column(Text, nullable=True)

    user = relationship("UserModel")
