"""
Library CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Legal library persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.library_model import LibraryEntryModel, LibraryEntryTagModel
from lexoffice.core.enums import CaseType, LibraryEntryType, LibraryOrder


def normalize_tags(tags: Sequence[str]) -> list[str]:
    """Strip, drop blanks, deduplicate and sort."""
    return sorted({t.strip() for t in tags if t and t.strip()})


_ORDERINGS = {
    LibraryOrder.RECENT: (LibraryEntryModel.created_at.desc(),),
    LibraryOrder.OLDEST: (LibraryEntryModel.created_at.asc(),),
    LibraryOrder.RELEVANCE: (LibraryEntryModel.relevance.desc(), LibraryEntryModel.created_at.desc()),
    LibraryOrder.TITLE: (LibraryEntryModel.title.asc(),),
}


class LibraryEntryCRUD(BaseCRUD[LibraryEntryModel]):
    """
    CRUD operations for LibraryEntryModel.

    Extends BaseCRUD with the search listing, tag replacement and the
    area lookup used to give the drafting assistant its references.
    """

    def __init__(self) -> None:
        """Initialize LibraryEntryCRUD with LibraryEntryModel."""
        super().__init__(LibraryEntryModel)

    async def get_with_tags(self, session: AsyncSession, id: UUID) -> LibraryEntryModel | None:
        stmt = (
            select(LibraryEntryModel)
            .where(LibraryEntryModel.id == id)
            .options(selectinload(LibraryEntryModel.tags))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        session: AsyncSession,
        search: str | None = None,
        types: Sequence[LibraryEntryType] | None = None,
        areas: Sequence[CaseType] | None = None,
        tags: Sequence[str] | None = None,
        favorite: bool | None = None,
        min_relevance: int | None = None,
        order: LibraryOrder = LibraryOrder.RECENT,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[Sequence[LibraryEntryModel], int]:
        """
        Filtered, page-numbered listing.

        Args:
            search: Case-insensitive text over title, summary, content, source
            types: Entry types (any of)
            areas: Practice areas (any of)
            tags: Tags (entry must carry at least one)
            favorite: Only favorites / only non-favorites
            min_relevance: Minimum relevance
            order: Sort order
            page: 1-based page number
            limit: Page size

        Returns:
            (items, total)
        """
        criteria = []
        if search:
            pattern = f"%{search.lower()}%"
            criteria.append(
                or_(
                    func.lower(LibraryEntryModel.title).like(pattern),
                    func.lower(LibraryEntryModel.summary).like(pattern),
                    func.lower(LibraryEntryModel.content).like(pattern),
                    func.lower(LibraryEntryModel.source).like(pattern),
                )
            )
        if types:
            criteria.append(LibraryEntryModel.type.in_(list(types)))
        if areas:
            criteria.append(LibraryEntryModel.area.in_(list(areas)))
        if tags:
            criteria.append(
                LibraryEntryModel.id.in_(
                    select(LibraryEntryTagModel.entry_id).where(LibraryEntryTagModel.tag.in_(list(tags)))
                )
            )
        if favorite is not None:
            criteria.append(LibraryEntryModel.favorite.is_(favorite))
        if min_relevance is not None:
            criteria.append(LibraryEntryModel.relevance >= min_relevance)

        total = await self.count(session, *criteria)
        stmt = (
            select(LibraryEntryModel)
            .where(*criteria)
            .options(selectinload(LibraryEntryModel.tags))
            .order_by(*_ORDERINGS[order], LibraryEntryModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def top_for_areas(
        self,
        session: AsyncSession,
        areas: Sequence[CaseType],
        limit: int = 5,
    ) -> Sequence[LibraryEntryModel]:
        """Most relevant entries in the given areas."""
        stmt = (
            select(LibraryEntryModel)
            .where(LibraryEntryModel.area.in_(list(areas)))
            .order_by(LibraryEntryModel.relevance.desc(), LibraryEntryModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def replace_tags(self, session: AsyncSession, entry: LibraryEntryModel, tags: Sequence[str]) -> None:
        """
        Replace the tag rows of an entry.

        The entry must have its tags loaded. Rows for tags that stay are
        kept so the (entry_id, tag) unique constraint never sees a
        delete-and-reinsert of the same tag.
        """
        existing = {t.tag: t for t in entry.tags}
        entry.tags = [existing.get(tag) or LibraryEntryTagModel(tag=tag) for tag in normalize_tags(tags)]
        await session.flush()

    async def distinct_tags(self, session: AsyncSession) -> list[str]:
        stmt = select(LibraryEntryTagModel.tag).distinct().order_by(LibraryEntryTagModel.tag)
        result = await session.execute(stmt)
        return list(result.scalars().all())


library_crud = LibraryEntryCRUD()
