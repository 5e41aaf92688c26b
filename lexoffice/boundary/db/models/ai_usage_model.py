"""
AI usage log ORM model.

One row per completed generation: who asked, for what, on which model,
and what it cost.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: AI cost tracking
"""

import uuid

from sqlalchemy import Enum, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lexoffice.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lexoffice.core.enums import ModelTier


class AIUsageLogModel(Base, UUIDMixin, TimestampMixin):
    """
    AI usage log ORM model.

    Attributes:
        user_id: Requesting user, when known
        action: "generate" for drafting, "recovery_analysis" for recovery
        document_type: Drafted document type or recovery analysis type
        model: Provider model id
        tier: standard or premium
        tokens_in / tokens_out: Token usage reported by the provider
        duration_ms: Wall time of the generation
        estimated_cost: USD estimate from the tier's price per million tokens
    """

    __tablename__ = "ai_usage_logs"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    action: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    document_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    model: Mapped[str] = mapped_column(String(128), nullable=False)
    tier: Mapped[ModelTier] = mapped_column(Enum(ModelTier, native_enum=False), nullable=False)
    tokens_in: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tokens_out: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    duration_ms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    estimated_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cases.id", ondelete="SET NULL"),
        nullable=True,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    )
