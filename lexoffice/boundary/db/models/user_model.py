"""
User ORM model.

Team members of the firm: lawyers, paralegals, interns and staff.
Users are never hard-deleted; deactivation flips `active`.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Team member persistence
"""

from sqlalchemy import Boolean, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import UserRole


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Team member ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Login e-mail (unique)
        role: Position in the firm
        oab_number: Bar registration number, lawyers only
        avatar_url: Optional picture URL
        active: False once the member is deactivated
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False),
        nullable=False,
        default=UserRole.LAWYER,
    )
    oab_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
