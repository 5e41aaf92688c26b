"""
User CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Team member persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """Look up a user by e-mail (exact match)."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(self, session: AsyncSession) -> Sequence[UserModel]:
        """Active users ordered by name."""
        stmt = select(UserModel).where(UserModel.active.is_(True)).order_by(UserModel.name)
        result = await session.execute(stmt)
        return result.scalars().all()


user_crud = UserCRUD()
