"""
Creditor CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: Creditor list persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.creditor_model import CreditorModel
from lexoffice.core.enums import CreditorClass, CreditorStatus


class CreditorCRUD(BaseCRUD[CreditorModel]):
    """CRUD operations for CreditorModel."""

    def __init__(self) -> None:
        """Initialize CreditorCRUD with CreditorModel."""
        super().__init__(CreditorModel)

    async def list_by_case(
        self,
        session: AsyncSession,
        case_id: UUID,
        creditor_class: CreditorClass | None = None,
        status: CreditorStatus | None = None,
        include_excluded: bool = True,
    ) -> Sequence[CreditorModel]:
        """
        Creditors of a case ordered by class then name.

        Args:
            session: Async database session
            case_id: Case UUID
            creditor_class: Optional class filter
            status: Optional status filter
            include_excluded: False drops EXCLUDED creditors

        Returns:
            Sequence of CreditorModel
        """
        stmt = select(CreditorModel).where(CreditorModel.case_id == case_id)
        if creditor_class is not None:
            stmt = stmt.where(CreditorModel.creditor_class == creditor_class)
        if status is not None:
            stmt = stmt.where(CreditorModel.status == status)
        if not include_excluded:
            stmt = stmt.where(CreditorModel.status != CreditorStatus.EXCLUDED)
        stmt = stmt.order_by(CreditorModel.creditor_class, CreditorModel.name)
        result = await session.execute(stmt)
        return result.scalars().all()


creditor_crud = CreditorCRUD()
