"""
Deadline and holiday ORM models.

Deadlines are procedural due dates on a case. Holidays feed the
business-day calculator (national rows have no state).

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Deadline control persistence
"""

import uuid
import datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import DeadlineStatus, DeadlineType, HolidayScope


class DeadlineModel(Base, UUIDMixin, TimestampMixin):
    """
    Procedural deadline ORM model.

    Attributes:
        case_id: Owning case (CASCADE on delete)
        title: Short description of the act due
        type: FATAL, ORDINARY, DILIGENCE, HEARING or ASSEMBLY
        status: PENDING until fulfilled, missed or cancelled
        due_date: Final day of the deadline
        responsible_id: User in charge
        fulfilled_at: When the deadline was marked FULFILLED
        fulfillment_document_id: Reference to the filed document
    """

    __tablename__ = "deadlines"

    case_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[DeadlineType] = mapped_column(
        Enum(DeadlineType, native_enum=False),
        nullable=False,
        default=DeadlineType.ORDINARY,
    )
    status: Mapped[DeadlineStatus] = mapped_column(
        Enum(DeadlineStatus, native_enum=False),
        nullable=False,
        default=DeadlineStatus.PENDING,
        index=True,
    )
    due_date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    fulfilled_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    fulfillment_document_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    case = relationship("CaseModel", back_populates="deadlines")
    responsible = relationship("UserModel")


class HolidayModel(Base, UUIDMixin, TimestampMixin):
    """Holiday excluded from business-day counting."""

    __tablename__ = "holidays"

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    scope: Mapped[HolidayScope] = mapped_column(
        Enum(HolidayScope, native_enum=False),
        nullable=False,
        default=HolidayScope.NATIONAL,
    )
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
