"""
Library ORM models.

Legal references (case law, statutes, doctrine, templates) used by
lawyers and by the drafting assistant. Tags are stored one row per tag.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Legal library persistence
"""

import uuid

from sqlalchemy import JSON, Boolean, Enum, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import CaseType, LibraryEntryType


class LibraryEntryModel(Base, UUIDMixin, TimestampMixin):
    """
    Library entry ORM model.

    Attributes:
        type: CASE_LAW, STATUTE, DOCTRINE, TEMPLATE, ARTICLE or OTHER
        area: Practice area, same vocabulary as case types
        relevance: 0 (unrated) to 5
        favorite: Pinned by the team
        entry_metadata: Free-form JSON (court, rapporteur, judgment date...)

    Relationships:
        tags: One-to-many with LibraryEntryTagModel (CASCADE on delete)
    """

    __tablename__ = "library_entries"

    type: Mapped[LibraryEntryType] = mapped_column(
        Enum(LibraryEntryType, native_enum=False),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    source: Mapped[str | None] = mapped_column(String(255), nullable=True)
    source_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    area: Mapped[CaseType | None] = mapped_column(Enum(CaseType, native_enum=False), nullable=True, index=True)
    file_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    relevance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    entry_metadata: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
    )

    tags = relationship(
        "LibraryEntryTagModel",
        back_populates="entry",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LibraryEntryTagModel.tag",
    )

    @property
    def tag_names(self) -> list[str]:
        return [t.tag for t in self.tags]


class LibraryEntryTagModel(Base, UUIDMixin, TimestampMixin):
    """One tag on a library entry."""

    __tablename__ = "library_entry_tags"
    __table_args__ = (UniqueConstraint("entry_id", "tag", name="uq_library_entry_tag"),)

    entry_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("library_entries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    entry = relationship("LibraryEntryModel", back_populates="tags")
