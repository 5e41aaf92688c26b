"""
Legal library API endpoints.

Routes:
- GET /library - Search entries (page + limit)
- POST /library - Create entry
- GET /library/tags - Distinct tags
- GET /library/{id} - Get entry
- PATCH /library/{id} - Update entry
- POST /library/{id}/favorite - Toggle favorite
- DELETE /library/{id} - Delete entry

Dependencies: lexoffice.application.services, lexoffice.models
System role: Legal reference library HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_library_service
from lexoffice.application.services import LibraryService
from lexoffice.core.enums import CaseType, LibraryEntryType, LibraryOrder
from lexoffice.models.library import (
    CreateLibraryEntryRequest,
    LibraryEntryResponse,
    LibraryListResponse,
    UpdateLibraryEntryRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/library", tags=["library"])


@router.get("", response_model=LibraryListResponse)
@handle_service_errors
async def list_entries(
    search: str | None = Query(None, max_length=255),
    type: list[LibraryEntryType] | None = Query(None),
    area: list[CaseType] | None = Query(None),
    tag: list[str] | None = Query(None),
    favorite: bool | None = None,
    min_relevance: int | None = Query(None, ge=0, le=5),
    order: LibraryOrder = LibraryOrder.RECENT,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    library_service: LibraryService = Depends(get_library_service),
) -> dict:
    """
    Search the library.

    Args:
        search: Case-insensitive match on title, summary, content and source
        type: Repeatable entry type filter
        area: Repeatable legal area filter
        tag: Repeatable tag filter (any of)
        favorite: Favorite flag filter
        min_relevance: Minimum relevance (0-5)
        order: RECENT, OLDEST, RELEVANCE or TITLE
        page: 1-based page number
        limit: Page size
        library_service: Injected LibraryService

    Returns:
        LibraryListResponse: items, total, page and pages
    """
    return await library_service.list_entries(
        search=search,
        types=type,
        areas=area,
        tags=tag,
        favorite=favorite,
        min_relevance=min_relevance,
        order=order,
        page=page,
        limit=limit,
    )


@router.get("/tags", response_model=list[str])
@handle_service_errors
async def list_tags(
    library_service: LibraryService = Depends(get_library_service),
) -> list[str]:
    """Distinct tags in alphabetical order."""
    return await library_service.list_tags()


@router.post("", response_model=LibraryEntryResponse, status_code=201)
@handle_service_errors
async def create_entry(
    request: CreateLibraryEntryRequest,
    library_service: LibraryService = Depends(get_library_service),
) -> dict:
    logger.info("Creating library entry", extra={"entry_type": request.type.value, "tags": len(request.tags)})
    return await library_service.create_entry(**request.model_dump())


@router.get("/{entry_id}", response_model=LibraryEntryResponse)
@handle_service_errors
async def get_entry(
    entry_id: UUID,
    library_service: LibraryService = Depends(get_library_service),
) -> dict:
    return await library_service.get_entry(entry_id)


@router.patch("/{entry_id}", response_model=LibraryEntryResponse)
@handle_service_errors
async def update_entry(
    entry_id: UUID,
    request: UpdateLibraryEntryRequest,
    library_service: LibraryService = Depends(get_library_service),
) -> dict:
    """Update an entry; a tags list replaces the existing tags."""
    return await library_service.update_entry(entry_id, **request.model_dump(exclude_unset=True))


@router.post("/{entry_id}/favorite", response_model=LibraryEntryResponse)
@handle_service_errors
async def toggle_favorite(
    entry_id: UUID,
    library_service: LibraryService = Depends(get_library_service),
) -> dict:
    return await library_service.toggle_favorite(entry_id)


@router.delete("/{entry_id}", status_code=204)
@handle_service_errors
async def delete_entry(
    entry_id: UUID,
    library_service: LibraryService = Depends(get_library_service),
) -> None:
    await library_service.delete_entry(entry_id)
