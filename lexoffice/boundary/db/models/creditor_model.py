"""
Creditor ORM model.

Claim entries of a judicial-recovery case, classified by legal priority.
The capped/excess/unsecured columns are derived by the class rules on
every create or update.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Creditor list persistence
"""

import uuid

from sqlalchemy import BigInteger, Boolean, Enum, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import CreditorClass, CreditorNature, CreditorStatus, VoteChoice


class CreditorModel(Base, UUIDMixin, TimestampMixin):
    """
    Creditor ORM model.

    All monetary columns are centavos. Excluded creditors stay in the table
    with status EXCLUDED.
    """

    __tablename__ = "creditors"

    case_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    person_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tax_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
    creditor_class: Mapped[CreditorClass] = mapped_column(
        Enum(CreditorClass, native_enum=False),
        nullable=False,
    )
    nature: Mapped[CreditorNature | None] = mapped_column(
        Enum(CreditorNature, native_enum=False),
        nullable=True,
    )
    original_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    updated_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    collateral_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    collateral_appraisal: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    status: Mapped[CreditorStatus] = mapped_column(
        Enum(CreditorStatus, native_enum=False),
        nullable=False,
        default=CreditorStatus.LISTED,
    )
    haircut_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    vote: Mapped[VoteChoice | None] = mapped_column(Enum(VoteChoice, native_enum=False), nullable=True)
    present_at_assembly: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    labor_capped_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    labor_excess_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    unsecured_portion: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    case = relationship("CaseModel", back_populates="creditors")
    person = relationship("PersonModel")

    @property
    def effective_value(self) -> int:
        """Updated value, falling back to the original value."""
        return self.updated_value or self.original_value or 0
