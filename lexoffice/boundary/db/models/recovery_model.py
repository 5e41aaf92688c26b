"""
Credit recovery ORM models.

Recovery cases track collection of a debt from a debtor person, with a
snapshot of the debtor at intake, an AI-assisted score and strategy, and
the joint debtors found liable alongside the main debtor.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Credit recovery persistence
"""

import uuid
from datetime import date

from sqlalchemy import JSON, BigInteger, Date, Enum, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import (
    JointDebtorStatus,
    LiabilityType,
    Priority,
    RecoveryPhase,
    RecoveryStatus,
    RecoveryType,
)


class RecoveryCaseModel(Base, UUIDMixin, TimestampMixin):
    """
    Recovery case ORM model.

    Attributes:
        code: Generated REC-<year>-<NNN> code (unique)
        debtor_id: Debtor person (OPPOSING_PARTY)
        case_id: Judicial case, when one was filed
        phase: INVESTIGATION through CLOSED
        *_value: Monetary amounts in centavos
        recovered_percent: recovered_value over updated_value, in percent
        instrument_*: Credit instrument (note, contract, judgment)
        debtor_*: Snapshot of the debtor taken at intake
        score: Recoverability score 0-100
        score_factors: JSON breakdown of the score
        ai_strategy: Last strategy text from the AI analysis

    Relationships:
        joint_debtors: One-to-many with JointDebtorModel (CASCADE on delete)
    """

    __tablename__ = "recovery_cases"

    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    debtor_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
    )
    type: Mapped[RecoveryType] = mapped_column(
        Enum(RecoveryType, native_enum=False),
        nullable=False,
        default=RecoveryType.EXECUTION,
    )
    phase: Mapped[RecoveryPhase] = mapped_column(
        Enum(RecoveryPhase, native_enum=False),
        nullable=False,
        default=RecoveryPhase.INVESTIGATION,
        index=True,
    )
    status: Mapped[RecoveryStatus] = mapped_column(
        Enum(RecoveryStatus, native_enum=False),
        nullable=False,
        default=RecoveryStatus.ACTIVE,
        index=True,
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False),
        nullable=False,
        default=Priority.MEDIUM,
    )
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Values
    original_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    updated_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    total_execution_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    fees_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    costs_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    recovered_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    blocked_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    seized_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    recovered_percent: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # Credit instrument
    instrument_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    instrument_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    instrument_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    prescription_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Debtor snapshot
    debtor_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    debtor_tax_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
    debtor_kind: Mapped[str | None] = mapped_column(String(16), nullable=True)
    debtor_address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    debtor_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    debtor_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    debtor_activity: Mapped[str | None] = mapped_column(String(255), nullable=True)

    score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    score_factors: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    ai_strategy: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    debtor = relationship("PersonModel")
    joint_debtors = relationship(
        "JointDebtorModel",
        back_populates="recovery_case",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="JointDebtorModel.name",
    )


class JointDebtorModel(Base, UUIDMixin, TimestampMixin):
    """Guarantor, partner or co-obligor who may answer for the debt."""

    __tablename__ = "joint_debtors"

    recovery_case_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("recovery_cases.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    person_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="SET NULL"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tax_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
    liability_type: Mapped[LiabilityType] = mapped_column(
        Enum(LiabilityType, native_enum=False),
        nullable=False,
        default=LiabilityType.GUARANTOR,
    )
    grounds: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_assets: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    status: Mapped[JointDebtorStatus] = mapped_column(
        Enum(JointDebtorStatus, native_enum=False),
        nullable=False,
        default=JointDebtorStatus.IDENTIFIED,
    )

    recovery_case = relationship("RecoveryCaseModel", back_populates="joint_debtors")
