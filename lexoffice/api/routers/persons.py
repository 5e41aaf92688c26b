"""
Person (client / CRM) API endpoints.

Routes:
- GET /persons - List persons (filters, search, cursor pagination)
- POST /persons - Create person
- GET /persons/search - Autocomplete
- GET /persons/{id} - Get person with cases and documents
- PATCH /persons/{id} - Update person
- DELETE /persons/{id} - Delete person (412 while referenced)
- POST /persons/{id}/documents - Attach document
- DELETE /persons/{id}/documents/{document_id} - Remove document

Dependencies: lexoffice.application.services, lexoffice.models
System role: Person management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lexoffice.api.deps.dependencies import get_person_service
from lexoffice.application.services import PersonService
from lexoffice.core.enums import PersonSubtype, PersonType, Segment
from lexoffice.models.common import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from lexoffice.models.person import (
    CreatePersonDocumentRequest,
    CreatePersonRequest,
    PersonDetailResponse,
    PersonDocumentResponse,
    PersonListResponse,
    PersonSummary,
    UpdatePersonRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons", tags=["persons"])


@router.get("", response_model=PersonListResponse)
@handle_service_errors
async def list_persons(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    cursor: UUID | None = None,
    type: PersonType | None = None,
    subtype: PersonSubtype | None = None,
    segment: Segment | None = None,
    search: str | None = Query(None, max_length=255),
    person_service: PersonService = Depends(get_person_service),
) -> dict:
    """
    List persons ordered by name.

    Args:
        limit: Page size (1-100)
        cursor: Id of the first row of the requested page
        type: Person type filter
        subtype: Individual/company filter
        segment: Economic segment filter
        search: Case-insensitive match on name, legal name, tax id, email, city
        person_service: Injected PersonService

    Returns:
        PersonListResponse: items, next_cursor and total

    Raises:
        HTTPException(400): Unknown cursor
    """
    return await person_service.list_persons(
        limit=limit,
        cursor=cursor,
        type=type,
        subtype=subtype,
        segment=segment,
        search=search,
    )


@router.get("/search", response_model=list[PersonSummary])
@handle_service_errors
async def search_persons(
    q: str = Query(..., min_length=1, max_length=255),
    limit: int = Query(10, ge=1, le=20),
    person_service: PersonService = Depends(get_person_service),
) -> list[dict]:
    """Lightweight person lookup for autocomplete fields."""
    return await person_service.search_persons(q, limit=limit)


@router.post("", response_model=PersonDetailResponse, status_code=201)
@handle_service_errors
async def create_person(
    request: CreatePersonRequest,
    person_service: PersonService = Depends(get_person_service),
) -> dict:
    """
    Create a person.

    Raises:
        HTTPException(409): Tax id already registered
    """
    logger.info(
        "Creating person",
        extra={"person_type": request.type.value, "subtype": request.subtype.value},
    )
    return await person_service.create_person(**request.model_dump())


@router.get("/{person_id}", response_model=PersonDetailResponse)
@handle_service_errors
async def get_person(
    person_id: UUID,
    person_service: PersonService = Depends(get_person_service),
) -> dict:
    """Get a person with the cases where they are the client and their documents."""
    return await person_service.get_person(person_id)


@router.patch("/{person_id}", response_model=PersonDetailResponse)
@handle_service_errors
async def update_person(
    person_id: UUID,
    request: UpdatePersonRequest,
    person_service: PersonService = Depends(get_person_service),
) -> dict:
    """
    Update a person; only the fields sent are changed.

    Raises:
        HTTPException(404): Person not found
        HTTPException(409): Tax id already registered
    """
    return await person_service.update_person(person_id, **request.model_dump(exclude_unset=True))


@router.delete("/{person_id}", status_code=204)
@handle_service_errors
async def delete_person(
    person_id: UUID,
    person_service: PersonService = Depends(get_person_service),
) -> None:
    """
    Delete a person.

    Raises:
        HTTPException(404): Person not found
        HTTPException(412): Person is still referenced by cases, creditors,
            projects or recovery cases
    """
    logger.info("Deleting person", extra={"person_id": str(person_id)})
    await person_service.delete_person(person_id)


@router.post("/{person_id}/documents", response_model=PersonDocumentResponse, status_code=201)
@handle_service_errors
async def add_person_document(
    person_id: UUID,
    request: CreatePersonDocumentRequest,
    person_service: PersonService = Depends(get_person_service),
) -> dict:
    """Attach a document record to a person."""
    return await person_service.add_document(person_id, **request.model_dump())


@router.delete("/{person_id}/documents/{document_id}", status_code=204)
@handle_service_errors
async def remove_person_document(
    person_id: UUID,
    document_id: UUID,
    person_service: PersonService = Depends(get_person_service),
) -> None:
    """Remove a document record from a person."""
    await person_service.remove_document(person_id, document_id)
