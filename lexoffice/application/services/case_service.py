"""
Case service orchestrator.

Dependencies: lexoffice.boundary.db.CRUD
System role: Case use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import person_summary, user_summary
from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.models import CaseModel
from lexoffice.core.enums import CaseStatus, CaseType
from lexoffice.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def _case_dict(case: CaseModel) -> dict:
    return {
        **case.to_dict(),
        "client": person_summary(case.client),
        "responsible": user_summary(case.responsible),
    }


class CaseService:
    """Case service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _ensure_number_free(self, case_number: str, case_id: UUID | None = None) -> None:
        existing = await case_crud.get_by_number(self.db, case_number)
        if existing is not None and existing.id != case_id:
            raise ConflictError("Case number already registered", details={"case_number": case_number})

    async def list_cases(
        self,
        limit: int,
        cursor: UUID | None = None,
        status: CaseStatus | None = None,
        type: CaseType | None = None,
    ) -> dict:
        """
        Cases ordered by last update with client and lawyer summaries.

        Returns:
            dict: items, next_cursor
        """
        page = await case_crud.list_page(self.db, limit=limit, cursor=cursor, status=status, type=type)
        return {"items": [_case_dict(c) for c in page.items], "next_cursor": page.next_cursor}

    async def get_case(self, case_id: UUID) -> dict:
        """
        Case detail with judge, deadlines (by due date) and creditors.

        Raises:
            NotFoundError: If case not found
        """
        case = await case_crud.get_detail(self.db, case_id)
        if case is None:
            raise NotFoundError("Case", case_id)
        return {
            **_case_dict(case),
            "judge": person_summary(case.judge),
            "deadlines": [d.to_dict() for d in case.deadlines],
            "creditors": [c.to_dict() for c in case.creditors],
        }

    async def create_case(self, **fields) -> dict:
        """
        Create a case.

        Raises:
            ConflictError: If the case number already exists
            NotFoundError: If client, judge or lawyer does not exist
        """
        await self._ensure_number_free(fields["case_number"])
        await check_references(self.db, fields)
        if fields.get("state"):
            fields["state"] = fields["state"].upper()

        case = await case_crud.create(self.db, **fields)
        logger.info(
            "Case created",
            extra={"case_id": str(case.id), "case_number": case.case_number, "case_type": case.type.value},
        )
        return await self.get_case(case.id)

    async def update_case(self, case_id: UUID, **fields) -> dict:
        if not await case_crud.exists(self.db, case_id):
            raise NotFoundError("Case", case_id)
        if fields.get("case_number"):
            await self._ensure_number_free(fields["case_number"], case_id)
        await check_references(self.db, fields)
        if fields.get("state"):
            fields["state"] = fields["state"].upper()

        await case_crud.update_by_id(self.db, case_id, **fields)
        logger.info("Case updated", extra={"case_id": str(case_id), "fields": sorted(fields)})
        return await self.get_case(case_id)

    async def delete_case(self, case_id: UUID) -> None:
        """Hard delete; deadlines and creditors go with the case."""
        deleted = await case_crud.delete_by_id(self.db, case_id)
        if not deleted:
            raise NotFoundError("Case", case_id)
        logger.info("Case deleted", extra={"case_id": str(case_id)})

    async def cases_for_select(self, limit: int = 100) -> list[dict]:
        cases = await case_crud.list_for_select(self.db, limit=limit)
        return [
            {
                "id": c.id,
                "case_number": c.case_number,
                "type": c.type,
                "client_name": c.client.name if c.client else None,
            }
            for c in cases
        ]
