"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations and keyset
(cursor) pagination that can be inherited and extended by model-specific
CRUD classes.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, and_, delete, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.base import Base
from lexoffice.core.exceptions import ValidationError

# Register every model so string relationships resolve on first use
import lexoffice.boundary.db.models  # noqa: F401, E402

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class Page(Generic[ModelT]):
    """One page of a cursor-paginated listing."""

    items: list[ModelT] = field(default_factory=list)
    next_cursor: UUID | None = None


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses pass the model class and can override or extend these methods
    for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    def assign(self, instance: ModelT, **kwargs) -> None:
        """
        Copy field values onto a loaded instance.

        A None for a NOT NULL column is ignored and the stored value kept.
        """
        columns = inspect(self.model).columns
        for key, value in kwargs.items():
            if value is None and key in columns and not columns[key].nullable:
                continue
            setattr(instance, key, value)

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Loads the instance and assigns attributes so onupdate hooks fire and
        the identity map stays consistent.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        self.assign(instance, **kwargs)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self, session: AsyncSession, *criteria: Any) -> int:
        """Count rows matching the given WHERE criteria."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def next_sequential_code(self, session: AsyncSession, column: Any, prefix: str) -> str:
        """
        Next "<prefix><NNN>" code after the highest existing suffix.

        Gaps left by deleted rows below the highest code are not refilled.

        Args:
            session: Async database session
            column: String column holding the codes
            prefix: Fixed part of the code, e.g. "PRJ-2024-"

        Returns:
            str: Code with the suffix zero-padded to at least 3 digits
        """
        stmt = select(column).where(column.like(f"{prefix}%"))
        codes = (await session.execute(stmt)).scalars().all()
        suffixes = [int(code[len(prefix):]) for code in codes if code[len(prefix):].isdigit()]
        return f"{prefix}{max(suffixes, default=0) + 1:03d}"

    async def paginate(
        self,
        session: AsyncSession,
        stmt: Select,
        sort_column: Any,
        limit: int,
        cursor: UUID | None = None,
        descending: bool = False,
    ) -> Page[ModelT]:
        """
        Keyset pagination over (sort_column, id).

        The page starts AT the cursor row. One extra row is fetched to find
        the first id of the following page, returned as next_cursor.

        Args:
            session: Async database session
            stmt: Base select (filters and loader options already applied)
            sort_column: Column the listing is ordered by
            limit: Page size
            cursor: Id of the first row of the requested page
            descending: Order newest / highest first

        Returns:
            Page with items and next_cursor (None on the last page)

        Raises:
            ValidationError: If the cursor does not match any row
        """
        id_column = self.model.id
        if cursor is not None:
            anchor = (
                await session.execute(select(sort_column).where(id_column == cursor))
            ).first()
            if anchor is None:
                raise ValidationError("Invalid cursor", field="cursor")
            anchor_value = anchor[0]
            if descending:
                stmt = stmt.where(
                    or_(sort_column < anchor_value, and_(sort_column == anchor_value, id_column <= cursor))
                )
            else:
                stmt = stmt.where(
                    or_(sort_column > anchor_value, and_(sort_column == anchor_value, id_column >= cursor))
                )

        if descending:
            stmt = stmt.order_by(sort_column.desc(), id_column.desc())
        else:
            stmt = stmt.order_by(sort_column.asc(), id_column.asc())

        result = await session.execute(stmt.limit(limit + 1))
        rows = list(result.scalars().all())
        next_cursor = rows[limit].id if len(rows) > limit else None
        return Page(items=rows[:limit], next_cursor=next_cursor)
