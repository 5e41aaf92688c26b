"""
Case ORM model.

A legal matter tracked by the firm. Deadlines and creditor records
belong to a case and are removed with it.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Case persistence
"""

import uuid

from sqlalchemy import BigInteger, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import CaseStatus, CaseType


class CaseModel(Base, UUIDMixin, TimestampMixin):
    """
    Case ORM model.

    Attributes:
        case_number: Court case number (unique)
        type: Kind of matter; also the library area vocabulary
        status: ACTIVE, SUSPENDED, ARCHIVED or CLOSED
        court: Court / chamber
        district: Judicial district (comarca)
        state: Two-letter state code, selects state holidays for deadlines
        claim_value: Value of the claim in centavos
        client_id: Client person (required)
        responsible_id: Responsible lawyer (user)
        judge_id: Judge person

    Relationships:
        deadlines: One-to-many with DeadlineModel (CASCADE on delete)
        creditors: One-to-many with CreditorModel (CASCADE on delete)
    """

    __tablename__ = "cases"

    case_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    type: Mapped[CaseType] = mapped_column(Enum(CaseType, native_enum=False), nullable=False)
    status: Mapped[CaseStatus] = mapped_column(
        Enum(CaseStatus, native_enum=False),
        nullable=False,
        default=CaseStatus.ACTIVE,
    )
    court: Mapped[str | None] = mapped_column(String(255), nullable=True)
    district: Mapped[str | None] = mapped_column(String(128), nullable=True)
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    claim_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    judge_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="SET NULL"),
        nullable=True,
    )

    client = relationship("PersonModel", foreign_keys=[client_id])
    responsible = relationship("UserModel", foreign_keys=[responsible_id])
    judge = relationship("PersonModel", foreign_keys=[judge_id])
    deadlines = relationship(
        "DeadlineModel",
        back_populates="case",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DeadlineModel.due_date",
    )
    creditors = relationship(
        "CreditorModel",
        back_populates="case",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CreditorModel.name",
    )
