"""
User service orchestrator.

Coordinates team member lifecycle: listing, creation with e-mail
uniqueness, updates and deactivation.

Dependencies: lexoffice.boundary.db.CRUD
System role: Team member use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.user_crud import user_crud
from lexoffice.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_active(self) -> list[dict]:
        """Active team members ordered by name."""
        users = await user_crud.list_active(self.db)
        return [u.to_dict() for u in users]

    async def get_user(self, user_id: UUID) -> dict:
        """
        Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user.to_dict()

    async def create_user(self, **fields) -> dict:
        """
        Create a team member.

        Raises:
            ConflictError: If the e-mail is already registered
        """
        email = fields["email"].strip().lower()
        if await user_crud.get_by_email(self.db, email):
            raise ConflictError("E-mail already registered", details={"email": email})

        user = await user_crud.create(self.db, **{**fields, "email": email})
        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.value})
        return user.to_dict()

    async def update_user(self, user_id: UUID, **fields) -> dict:
        """
        Update a team member; only given fields change.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new e-mail belongs to another user
        """
        if "email" in fields and fields["email"] is not None:
            fields["email"] = fields["email"].strip().lower()
            existing = await user_crud.get_by_email(self.db, fields["email"])
            if existing is not None and existing.id != user_id:
                raise ConflictError("E-mail already registered", details={"email": fields["email"]})

        user = await user_crud.update_by_id(self.db, user_id, **fields)
        if user is None:
            raise NotFoundError("User", user_id)
        logger.info("User updated", extra={"user_id": str(user_id), "fields": sorted(fields)})
        return user.to_dict()

    async def deactivate_user(self, user_id: UUID) -> dict:
        """Soft delete: the member stops appearing in listings."""
        user = await user_crud.update_by_id(self.db, user_id, active=False)
        if user is None:
            raise NotFoundError("User", user_id)
        logger.info("User deactivated", extra={"user_id": str(user_id)})
        return user.to_dict()
