"""
Library service orchestrator.

Dependencies: lexoffice.boundary.db.CRUD
System role: Legal library use case orchestration
"""

import logging
import math
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.boundary.db.CRUD.library_crud import library_crud, normalize_tags
from lexoffice.boundary.db.models import LibraryEntryModel, LibraryEntryTagModel
from lexoffice.core.enums import CaseType, LibraryEntryType, LibraryOrder
from lexoffice.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _entry_dict(entry: LibraryEntryModel) -> dict:
    data = entry.to_dict()
    data["metadata"] = data.pop("entry_metadata") or {}
    data["tags"] = entry.tag_names
    return data


class LibraryService:
    """Legal library service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_entries(
        self,
        search: str | None = None,
        types: Sequence[LibraryEntryType] | None = None,
        areas: Sequence[CaseType] | None = None,
        tags: Sequence[str] | None = None,
        favorite: bool | None = None,
        min_relevance: int | None = None,
        order: LibraryOrder = LibraryOrder.RECENT,
        page: int = 1,
        limit: int = 20,
    ) -> dict:
        """
        Page-numbered search.

        Returns:
            dict: items, total, page, pages
        """
        items, total = await library_crud.search(
            self.db,
            search=search.strip() if search else None,
            types=types,
            areas=areas,
            tags=normalize_tags(tags) if tags else None,
            favorite=favorite,
            min_relevance=min_relevance,
            order=order,
            page=page,
            limit=limit,
        )
        return {
            "items": [_entry_dict(e) for e in items],
            "total": total,
            "page": page,
            "pages": math.ceil(total / limit) if total else 0,
        }

    async def get_entry(self, entry_id: UUID) -> dict:
        entry = await library_crud.get_with_tags(self.db, entry_id)
        if entry is None:
            raise NotFoundError("Library entry", entry_id)
        return _entry_dict(entry)

    async def create_entry(self, tags: Sequence[str] = (), metadata: dict | None = None, **fields) -> dict:
        await check_references(self.db, fields)
        entry = await library_crud.create(
            self.db,
            entry_metadata=metadata or {},
            tags=[LibraryEntryTagModel(tag=tag) for tag in normalize_tags(tags)],
            **fields,
        )
        logger.info(
            "Library entry created",
            extra={"entry_id": str(entry.id), "entry_type": entry.type.value},
        )
        return await self.get_entry(entry.id)

    async def update_entry(
        self,
        entry_id: UUID,
        tags: Sequence[str] | None = None,
        metadata: dict | None = None,
        **fields,
    ) -> dict:
        """Partial update; a tags list replaces the entry's tags."""
        entry = await library_crud.get_with_tags(self.db, entry_id)
        if entry is None:
            raise NotFoundError("Library entry", entry_id)
        await check_references(self.db, fields)

        if metadata is not None:
            fields["entry_metadata"] = metadata
        library_crud.assign(entry, **fields)
        if tags is not None:
            await library_crud.replace_tags(self.db, entry, tags)
        await self.db.flush()

        logger.info("Library entry updated", extra={"entry_id": str(entry_id)})
        return await self.get_entry(entry_id)

    async def toggle_favorite(self, entry_id: UUID) -> dict:
        entry = await library_crud.get_by_id(self.db, entry_id)
        if entry is None:
            raise NotFoundError("Library entry", entry_id)
        await library_crud.update_by_id(self.db, entry_id, favorite=not entry.favorite)
        return await self.get_entry(entry_id)

    async def delete_entry(self, entry_id: UUID) -> None:
        if not await library_crud.delete_by_id(self.db, entry_id):
            raise NotFoundError("Library entry", entry_id)
        logger.info("Library entry deleted", extra={"entry_id": str(entry_id)})

    async def list_tags(self) -> list[str]:
        return await library_crud.distinct_tags(self.db)
