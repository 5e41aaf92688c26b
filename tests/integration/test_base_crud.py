"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality with a mocked session (create, read,
update, delete, exists) and keyset pagination against SQLite.

System role: Verification of generic database layer foundation
"""

import uuid
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models import UserModel
from lexoffice.core.enums import UserRole
from lexoffice.core.exceptions import ValidationError


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(UserModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh to ensure ID generation."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        instance = await base_crud.create(mock_session, name="Ana", email="ana@firm.com")

        # Assert
        mock_session.add.assert_called_once_with(instance)
        assert call_order == ["flush", "refresh"]
        assert instance.name == "Ana"


class TestBaseCRUDReadUpdateDelete:
    """Test suite for lookups, updates and deletes."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.get_by_id(mock_session, sample_id) is None
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_by_id_should_skip_flush_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.update_by_id(mock_session, sample_id, name="New")

        assert result is None
        mock_session.flush.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_by_id_should_assign_attributes(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        instance = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.update_by_id(mock_session, sample_id, name="New")

        assert result is instance
        assert instance.name == "New"
        mock_session.flush.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(instance)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
    async def test_delete_by_id_reports_rowcount(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        rowcount: int,
        expected: bool,
    ) -> None:
        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=rowcount))

        assert await base_crud.delete_by_id(mock_session, sample_id) is expected

    @pytest.mark.asyncio
    async def test_exists(self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=sample_id)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.exists(mock_session, sample_id) is True


class TestBaseCRUDPaginate:
    """Keyset pagination against a real SQLite session."""

    @pytest.fixture
    async def users(self, test_async_db, base_crud: BaseCRUD) -> list[UserModel]:
        created = []
        for name in ("Bruno", "Ana", "Carla", "Davi", "Elisa"):
            created.append(
                await base_crud.create(
                    test_async_db, name=name, email=f"{name.lower()}@firm.com", role=UserRole.LAWYER
                )
            )
        return created

    @pytest.mark.asyncio
    async def test_pages_start_at_cursor(self, test_async_db, base_crud: BaseCRUD, users) -> None:
        # Act
        first = await base_crud.paginate(test_async_db, select(UserModel), UserModel.name, limit=2)
        second = await base_crud.paginate(
            test_async_db, select(UserModel), UserModel.name, limit=2, cursor=first.next_cursor
        )
        last = await base_crud.paginate(
            test_async_db, select(UserModel), UserModel.name, limit=2, cursor=second.next_cursor
        )

        # Assert
        assert [u.name for u in first.items] == ["Ana", "Bruno"]
        assert [u.name for u in second.items] == ["Carla", "Davi"]
        assert [u.name for u in last.items] == ["Elisa"]
        assert last.next_cursor is None

    @pytest.mark.asyncio
    async def test_descending(self, test_async_db, base_crud: BaseCRUD, users) -> None:
        first = await base_crud.paginate(
            test_async_db, select(UserModel), UserModel.name, limit=3, descending=True
        )
        second = await base_crud.paginate(
            test_async_db, select(UserModel), UserModel.name, limit=3, cursor=first.next_cursor, descending=True
        )

        assert [u.name for u in first.items] == ["Elisa", "Davi", "Carla"]
        assert [u.name for u in second.items] == ["Bruno", "Ana"]

    @pytest.mark.asyncio
    async def test_unknown_cursor_is_rejected(self, test_async_db, base_crud: BaseCRUD, users) -> None:
        with pytest.raises(ValidationError):
            await base_crud.paginate(
                test_async_db, select(UserModel), UserModel.name, limit=2, cursor=uuid.uuid4()
            )

    @pytest.mark.asyncio
    async def test_count_with_criteria(self, test_async_db, base_crud: BaseCRUD, users) -> None:
        assert await base_crud.count(test_async_db) == 5
        assert await base_crud.count(test_async_db, UserModel.name.like("A%")) == 1
