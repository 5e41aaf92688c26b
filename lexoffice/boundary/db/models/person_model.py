"""
Person ORM models.

Persons are every party the firm deals with: clients, opposing parties,
judges, experts, creditors, witnesses. Documents attached to a person
live in person_documents and are deleted with it.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: CRM persistence
"""

import uuid
from datetime import date

from sqlalchemy import Boolean, Date, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import PersonDocumentType, PersonSubtype, PersonType, Segment


class PersonModel(Base, UUIDMixin, TimestampMixin):
    """
    Person ORM model (client / CRM record).

    Attributes:
        type: Role of the person towards the firm
        subtype: INDIVIDUAL or COMPANY
        name: Display name (trade name for companies)
        legal_name: Registered company name
        tax_id: CPF or CNPJ, unique when present
        segment: Business segment, mostly for clients

    Relationships:
        documents: One-to-many with PersonDocumentModel (CASCADE on delete)
    """

    __tablename__ = "persons"

    type: Mapped[PersonType] = mapped_column(
        Enum(PersonType, native_enum=False),
        nullable=False,
        default=PersonType.CLIENT,
    )
    subtype: Mapped[PersonSubtype] = mapped_column(
        Enum(PersonSubtype, native_enum=False),
        nullable=False,
        default=PersonSubtype.INDIVIDUAL,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    legal_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tax_id: Mapped[str | None] = mapped_column(String(20), nullable=True, unique=True)

    # Identity
    identity_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(64), nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    profession: Mapped[str | None] = mapped_column(String(128), nullable=True)
    state_registration: Mapped[str | None] = mapped_column(String(32), nullable=True)
    municipal_registration: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Address
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    complement: Mapped[str | None] = mapped_column(String(128), nullable=True)
    neighborhood: Mapped[str | None] = mapped_column(String(128), nullable=True)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    # Contacts
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    mobile: Mapped[str | None] = mapped_column(String(32), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Banking
    bank: Mapped[str | None] = mapped_column(String(128), nullable=True)
    agency: Mapped[str | None] = mapped_column(String(16), nullable=True)
    account: Mapped[str | None] = mapped_column(String(32), nullable=True)
    pix_key: Mapped[str | None] = mapped_column(String(128), nullable=True)

    segment: Mapped[Segment | None] = mapped_column(Enum(Segment, native_enum=False), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    portal_access: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    documents = relationship(
        "PersonDocumentModel",
        back_populates="person",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PersonDocumentModel.created_at",
    )


class PersonDocumentModel(Base, UUIDMixin, TimestampMixin):
    """Document attached to a person (ID card, articles, power of attorney...)."""

    __tablename__ = "person_documents"

    person_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("persons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[PersonDocumentType] = mapped_column(
        Enum(PersonDocumentType, native_enum=False),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    file_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    expires_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    person = relationship("PersonModel", back_populates="documents")
