"""
Financial ORM models.

Fees billed to clients and expenses incurred on their matters. Both may
point at a case, a project or (fees only) the paying person. Amounts are
integer centavos.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Office billing persistence
"""

import uuid
from datetime import date

from sqlalchemy import BigInteger, Boolean, Date, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import ExpenseCategory, FeeStatus, FeeType


class FeeModel(Base, UUIDMixin, TimestampMixin):
    """
    Fee (honorarium) receivable.

    A fee billed in installments is stored as one row per installment with
    installment_number 1..installments.

    Attributes:
        type: FIXED, SUCCESS, MONTHLY, PER_ACT or RESTRUCTURING_SUCCESS
        amount: Centavos
        status: PENDING until paid; OVERDUE and CANCELLED are set by hand
        paid_date: Set when the fee is marked paid
    """

    __tablename__ = "fees"

    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    person_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="SET NULL"),
        nullable=True,
    )
    type: Mapped[FeeType] = mapped_column(Enum(FeeType, native_enum=False), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    installments: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    installment_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    recurrence: Mapped[str | None] = mapped_column(String(50), nullable=True)
    due_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    paid_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[FeeStatus] = mapped_column(
        Enum(FeeStatus, native_enum=False),
        nullable=False,
        default=FeeStatus.PENDING,
        index=True,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    case = relationship("CaseModel")
    project = relationship("ProjectModel")


class ExpenseModel(Base, UUIDMixin, TimestampMixin):
    """
    Expense paid by the office; reimbursable ones are recovered from the client.
    """

    __tablename__ = "expenses"

    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category: Mapped[ExpenseCategory] = mapped_column(
        Enum(ExpenseCategory, native_enum=False),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    expense_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    reimbursable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reimbursed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reimbursed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    receipt_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    case = relationship("CaseModel")
    project = relationship("ProjectModel")
