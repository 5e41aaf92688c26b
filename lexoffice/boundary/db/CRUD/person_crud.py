"""
Person CRUD operations.

Provides filtered, cursor-paginated listing, autocomplete search and the
reference checks that guard hard deletion.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: CRM persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD, Page
from lexoffice.boundary.db.models.case_model import CaseModel
from lexoffice.boundary.db.models.creditor_model import CreditorModel
from lexoffice.boundary.db.models.person_model import PersonDocumentModel, PersonModel
from lexoffice.boundary.db.models.project_model import ProjectModel
from lexoffice.boundary.db.models.recovery_model import RecoveryCaseModel
from lexoffice.core.enums import PersonSubtype, PersonType, Segment


def _search_clause(search: str):
    pattern = f"%{search.lower()}%"
    return or_(
        func.lower(PersonModel.name).like(pattern),
        func.lower(PersonModel.legal_name).like(pattern),
        func.lower(PersonModel.tax_id).like(pattern),
        func.lower(PersonModel.email).like(pattern),
        func.lower(PersonModel.city).like(pattern),
    )


class PersonCRUD(BaseCRUD[PersonModel]):
    """
    CRUD operations for PersonModel.

    Extends BaseCRUD with filtered listing, eager loading of documents
    and reference counting against cases, creditors, projects and
    recovery cases.
    """

    def __init__(self) -> None:
        """Initialize PersonCRUD with PersonModel."""
        super().__init__(PersonModel)

    async def get_by_tax_id(self, session: AsyncSession, tax_id: str) -> PersonModel | None:
        stmt = select(PersonModel).where(PersonModel.tax_id == tax_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_documents(self, session: AsyncSession, id: UUID) -> PersonModel | None:
        """
        Retrieve person with eagerly loaded documents.

        Args:
            session: Async database session
            id: Person UUID

        Returns:
            PersonModel with documents loaded, None if not found
        """
        stmt = (
            select(PersonModel)
            .where(PersonModel.id == id)
            .options(selectinload(PersonModel.documents))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        session: AsyncSession,
        limit: int,
        cursor: UUID | None = None,
        type: PersonType | None = None,
        subtype: PersonSubtype | None = None,
        segment: Segment | None = None,
        search: str | None = None,
    ) -> tuple[Page[PersonModel], int]:
        """
        List persons ordered by name with filters.

        Returns:
            (page, total) where total counts every row matching the filters
        """
        criteria = []
        if type is not None:
            criteria.append(PersonModel.type == type)
        if subtype is not None:
            criteria.append(PersonModel.subtype == subtype)
        if segment is not None:
            criteria.append(PersonModel.segment == segment)
        if search:
            criteria.append(_search_clause(search))

        total = await self.count(session, *criteria)
        page = await self.paginate(
            session,
            select(PersonModel).where(*criteria),
            PersonModel.name,
            limit=limit,
            cursor=cursor,
        )
        return page, total

    async def search(self, session: AsyncSession, query: str, limit: int = 10) -> Sequence[PersonModel]:
        """Lightweight autocomplete over name, legal name and tax id."""
        pattern = f"%{query.lower()}%"
        stmt = (
            select(PersonModel)
            .where(
                or_(
                    func.lower(PersonModel.name).like(pattern),
                    func.lower(PersonModel.legal_name).like(pattern),
                    func.lower(PersonModel.tax_id).like(pattern),
                )
            )
            .order_by(PersonModel.name)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_references(self, session: AsyncSession, id: UUID) -> dict[str, int]:
        """
        Count records that point at a person and block its deletion.

        Returns:
            dict with counts for cases, creditors, projects, recovery_cases
        """
        checks = {
            "cases": select(func.count()).select_from(CaseModel).where(CaseModel.client_id == id),
            "creditors": select(func.count()).select_from(CreditorModel).where(CreditorModel.person_id == id),
            "projects": select(func.count()).select_from(ProjectModel).where(ProjectModel.client_id == id),
            "recovery_cases": select(func.count())
            .select_from(RecoveryCaseModel)
            .where(RecoveryCaseModel.debtor_id == id),
        }
        counts = {}
        for name, stmt in checks.items():
            counts[name] = (await session.execute(stmt)).scalar_one()
        return counts


class PersonDocumentCRUD(BaseCRUD[PersonDocumentModel]):
    """CRUD operations for PersonDocumentModel."""

    def __init__(self) -> None:
        super().__init__(PersonDocumentModel)


person_crud = PersonCRUD()
person_document_crud = PersonDocumentCRUD()
