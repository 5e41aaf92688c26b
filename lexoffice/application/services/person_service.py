"""
Person service orchestrator.

Coordinates the CRM: filtered listing, detail with cases and documents,
tax-id uniqueness, reference-guarded deletion and autocomplete.

Dependencies: lexoffice.boundary.db.CRUD
System role: CRM use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.CRUD.person_crud import person_crud, person_document_crud
from lexoffice.core.enums import PersonSubtype, PersonType, Segment
from lexoffice.core.exceptions import ConflictError, NotFoundError, PreconditionFailedError

logger = logging.getLogger(__name__)

REFERENCE_LABELS = {
    "cases": "client of a case",
    "creditors": "party to a creditor record",
    "projects": "client of a project",
    "recovery_cases": "debtor of a recovery case",
}


def _normalize(fields: dict) -> dict:
    """Blank e-mail / tax id become NULL; state is upper-cased."""
    for key in ("email", "tax_id"):
        if key in fields and isinstance(fields[key], str):
            fields[key] = fields[key].strip() or None
    if fields.get("state"):
        fields["state"] = fields["state"].upper()
    return fields


class PersonService:
    """Person (client / CRM) service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize person service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _ensure_tax_id_free(self, tax_id: str | None, person_id: UUID | None = None) -> None:
        if not tax_id:
            return
        existing = await person_crud.get_by_tax_id(self.db, tax_id)
        if existing is not None and existing.id != person_id:
            raise ConflictError("Tax id already registered", details={"tax_id": tax_id})

    async def list_persons(
        self,
        limit: int,
        cursor: UUID | None = None,
        type: PersonType | None = None,
        subtype: PersonSubtype | None = None,
        segment: Segment | None = None,
        search: str | None = None,
    ) -> dict:
        """
        Filtered, cursor-paginated person listing ordered by name.

        Returns:
            dict: items, next_cursor, total
        """
        page, total = await person_crud.list_filtered(
            self.db,
            limit=limit,
            cursor=cursor,
            type=type,
            subtype=subtype,
            segment=segment,
            search=search.strip() if search else None,
        )
        return {
            "items": [p.to_dict() for p in page.items],
            "next_cursor": page.next_cursor,
            "total": total,
        }

    async def get_person(self, person_id: UUID) -> dict:
        """
        Get person with the cases they are client of and their documents.

        Raises:
            NotFoundError: If person not found
        """
        person = await person_crud.get_with_documents(self.db, person_id)
        if person is None:
            raise NotFoundError("Person", person_id)
        cases = await case_crud.list_by_client(self.db, person_id)
        return {
            **person.to_dict(),
            "cases": [
                {"id": c.id, "case_number": c.case_number, "type": c.type, "status": c.status}
                for c in cases
            ],
            "documents": [d.to_dict() for d in person.documents],
        }

    async def create_person(self, **fields) -> dict:
        """
        Create a person.

        Raises:
            ConflictError: If the tax id is already registered
        """
        fields = _normalize({k: v for k, v in fields.items() if v is not None})
        await self._ensure_tax_id_free(fields.get("tax_id"))
        person = await person_crud.create(self.db, **fields)
        logger.info(
            "Person created",
            extra={"person_id": str(person.id), "person_type": person.type.value},
        )
        return person.to_dict()

    async def update_person(self, person_id: UUID, **fields) -> dict:
        """
        Update a person; only given fields change.

        Raises:
            NotFoundError: If person not found
            ConflictError: If the new tax id belongs to another person
        """
        fields = _normalize(fields)
        await self._ensure_tax_id_free(fields.get("tax_id"), person_id)
        person = await person_crud.update_by_id(self.db, person_id, **fields)
        if person is None:
            raise NotFoundError("Person", person_id)
        logger.info("Person updated", extra={"person_id": str(person_id), "fields": sorted(fields)})
        return person.to_dict()

    async def delete_person(self, person_id: UUID) -> None:
        """
        Hard delete a person that nothing references.

        Raises:
            NotFoundError: If person not found
            PreconditionFailedError: If cases, creditors, projects or
                recovery cases still point at the person
        """
        if not await person_crud.exists(self.db, person_id):
            raise NotFoundError("Person", person_id)

        references = await person_crud.count_references(self.db, person_id)
        blocking = {name: count for name, count in references.items() if count}
        if blocking:
            reasons = ", ".join(REFERENCE_LABELS[name] for name in blocking)
            raise PreconditionFailedError(
                f"Person cannot be deleted: {reasons}",
                details={"references": blocking},
            )

        await person_crud.delete_by_id(self.db, person_id)
        logger.info("Person deleted", extra={"person_id": str(person_id)})

    async def search_persons(self, query: str, limit: int = 10) -> list[dict]:
        """Autocomplete: id, name, type and tax id of the best matches."""
        persons = await person_crud.search(self.db, query.strip(), limit=limit)
        return [
            {"id": p.id, "name": p.name, "type": p.type, "subtype": p.subtype, "tax_id": p.tax_id}
            for p in persons
        ]

    async def add_document(self, person_id: UUID, **fields) -> dict:
        """
        Attach a document record to a person.

        Raises:
            NotFoundError: If person not found
        """
        if not await person_crud.exists(self.db, person_id):
            raise NotFoundError("Person", person_id)
        document = await person_document_crud.create(self.db, person_id=person_id, **fields)
        logger.info(
            "Person document added",
            extra={"person_id": str(person_id), "document_id": str(document.id)},
        )
        return document.to_dict()

    async def remove_document(self, person_id: UUID, document_id: UUID) -> None:
        document = await person_document_crud.get_by_id(self.db, document_id)
        if document is None or document.person_id != person_id:
            raise NotFoundError("Document", document_id)
        await person_document_crud.delete_by_id(self.db, document_id)
