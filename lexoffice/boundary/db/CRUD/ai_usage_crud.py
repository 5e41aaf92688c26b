"""
AI usage log CRUD operations.

Dependencies: sqlalchemy, lexoffice.boundary.db.models
System role: AI cost tracking persistence operations
"""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.models.ai_usage_model import AIUsageLogModel


class AIUsageLogCRUD(BaseCRUD[AIUsageLogModel]):
    """CRUD operations for AIUsageLogModel."""

    def __init__(self) -> None:
        """Initialize AIUsageLogCRUD with AIUsageLogModel."""
        super().__init__(AIUsageLogModel)

    async def totals_by(
        self,
        session: AsyncSession,
        column_name: str,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> list[dict]:
        """
        Aggregate usage grouped by one column ("action" or "model").

        Returns:
            list of {key, requests, tokens_in, tokens_out, estimated_cost}
        """
        column = getattr(AIUsageLogModel, column_name)
        stmt = select(
            column,
            func.count(),
            func.coalesce(func.sum(AIUsageLogModel.tokens_in), 0),
            func.coalesce(func.sum(AIUsageLogModel.tokens_out), 0),
            func.coalesce(func.sum(AIUsageLogModel.estimated_cost), 0.0),
        )
        if date_from is not None:
            stmt = stmt.where(AIUsageLogModel.created_at >= date_from)
        if date_to is not None:
            stmt = stmt.where(AIUsageLogModel.created_at <= date_to)
        stmt = stmt.group_by(column).order_by(column)
        result = await session.execute(stmt)
        return [
            {
                "key": key,
                "requests": requests,
                "tokens_in": int(tokens_in),
                "tokens_out": int(tokens_out),
                "estimated_cost": float(cost),
            }
            for key, requests, tokens_in, tokens_out, cost in result.all()
        ]


ai_usage_crud = AIUsageLogCRUD()
