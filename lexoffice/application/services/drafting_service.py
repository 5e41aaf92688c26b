"""
AI drafting service orchestrator.

Builds the drafting context from the linked case, project and library,
picks the model tier for the document type, streams the generated text
and records token usage once the stream completes.

Dependencies: lexoffice.boundary.db, lexoffice.core.agentic_system
System role: Drafting assistant use case orchestration
"""

import logging
from collections.abc import AsyncGenerator, Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from langchain_core.messages import BaseMessage
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.ai_usage_crud import ai_usage_crud
from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.CRUD.library_crud import library_crud
from lexoffice.boundary.db.CRUD.person_crud import person_crud
from lexoffice.boundary.db.CRUD.project_crud import project_crud
from lexoffice.core.agentic_system import ModelConfig, estimate_cost, select_model
from lexoffice.core.agentic_system.agent import GenerationUsage, LegalWriterAgent
from lexoffice.core.agentic_system.prompts import (
    DRAFTING_PROMPT,
    CaseContext,
    DraftingContext,
    LibraryContext,
    ProjectContext,
    build_document_prompt,
    build_user_message,
)
from lexoffice.core.enums import CaseType, CreditorStatus, DraftLength, DraftTone, ModelTier, ProjectCategory
from lexoffice.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

GENERATE_ACTION = "generate"
LIBRARY_REFERENCE_LIMIT = 5

# Library areas share the case-type vocabulary.
CATEGORY_AREAS: dict[ProjectCategory, CaseType] = {
    ProjectCategory.JUDICIAL_ORDER_RELEASE: CaseType.LITIGATION,
    ProjectCategory.DEBT_RECOVERY: CaseType.CREDIT_RECOVERY,
    ProjectCategory.RESTRUCTURING: CaseType.RESTRUCTURING,
    ProjectCategory.CORPORATE: CaseType.ADVISORY,
    ProjectCategory.COMPLIANCE: CaseType.ADVISORY,
    ProjectCategory.OTHER: CaseType.OTHER,
}


@dataclass
class PreparedDraft:
    """Everything needed to stream one generation and log it afterwards."""

    config: ModelConfig
    messages: list[BaseMessage]
    document_type: str
    user_id: UUID | None = None
    case_id: UUID | None = None
    project_id: UUID | None = None
    usage: GenerationUsage = field(default_factory=GenerationUsage)


class DraftingService:
    """Drafting assistant service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        writer: LegalWriterAgent | None = None,
        model_configs: dict[ModelTier, ModelConfig] | None = None,
        session_factory: Callable[[], AsyncSession] | None = None,
    ) -> None:
        """
        Initialize drafting service.

        Args:
            db: Async SQLAlchemy session of the request
            writer: Text-generation agent
            model_configs: Tier configurations
            session_factory: Opens the session the usage log is written with
                once streaming ends, after the request session is gone
        """
        self.db = db
        self.writer = writer
        self.model_configs = model_configs or {}
        self.session_factory = session_factory

    async def _case_context(self, case_id: UUID) -> CaseContext:
        case = await case_crud.get_detail(self.db, case_id)
        if case is None:
            raise NotFoundError("Case", case_id)
        return CaseContext(
            case_number=case.case_number,
            case_type=case.type.value,
            status=case.status.value,
            court=case.court,
            district=case.district,
            state=case.state,
            claim_value=case.claim_value,
            client_name=case.client.name if case.client else None,
            client_tax_id=case.client.tax_id if case.client else None,
            judge_name=case.judge.name if case.judge else None,
            creditors=[
                (c.name, c.creditor_class.value, c.effective_value)
                for c in case.creditors
                if c.status != CreditorStatus.EXCLUDED
            ],
        )

    async def _project_context(self, project_id: UUID) -> ProjectContext:
        project = await project_crud.get_by_id(self.db, project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        client = await person_crud.get_by_id(self.db, project.client_id) if project.client_id else None
        return ProjectContext(
            code=project.code,
            title=project.title,
            category=project.category.value,
            status=project.status.value,
            description=project.description,
            client_name=client.name if client else None,
        )

    async def build_context(
        self,
        document_type: str,
        tone: DraftTone = DraftTone.TECHNICAL,
        length: DraftLength = DraftLength.STANDARD,
        addressee: str = "Judge",
        include_case_law: bool = True,
        include_doctrine: bool = False,
        include_injunction: bool = False,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
    ) -> DraftingContext:
        """
        Collect the linked records for the prompt.

        With include_case_law set, up to five library entries from the case
        type and project category areas are added, most relevant first.
        """
        context = DraftingContext(
            document_type=document_type,
            tone=tone,
            length=length,
            addressee=addressee,
            include_case_law=include_case_law,
            include_doctrine=include_doctrine,
            include_injunction=include_injunction,
        )
        areas: list[CaseType] = []
        if case_id is not None:
            context.case = await self._case_context(case_id)
            areas.append(CaseType(context.case.case_type))
        if project_id is not None:
            context.project = await self._project_context(project_id)
            areas.append(CATEGORY_AREAS[ProjectCategory(context.project.category)])

        if include_case_law and areas:
            entries = await library_crud.top_for_areas(self.db, areas, limit=LIBRARY_REFERENCE_LIMIT)
            context.library = [
                LibraryContext(
                    title=e.title,
                    entry_type=e.type.value,
                    area=e.area.value if e.area else None,
                    summary=e.summary,
                    content=e.content,
                    source=e.source,
                )
                for e in entries
            ]
        return context

    async def prepare(
        self,
        document_type: str,
        instructions: str | None = None,
        force_premium: bool = False,
        user_id: UUID | None = None,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        **options,
    ) -> PreparedDraft:
        """
        Resolve model tier and prompt messages for a drafting request.

        Raises:
            NotFoundError: If the linked case or project does not exist
        """
        context = await self.build_context(
            document_type, case_id=case_id, project_id=project_id, **options
        )
        config = select_model(self.model_configs, document_type, force_premium)
        messages = DRAFTING_PROMPT.format_messages(
            system_prompt=build_document_prompt(context),
            user_message=build_user_message(document_type, instructions),
        )
        logger.info(
            "Drafting prepared",
            extra={
                "document_type": document_type,
                "tier": config.tier.value,
                "model": config.model,
                "library_refs": len(context.library),
            },
        )
        return PreparedDraft(
            config=config,
            messages=messages,
            document_type=document_type,
            user_id=user_id,
            case_id=case_id,
            project_id=project_id,
        )

    async def stream(self, prepared: PreparedDraft) -> AsyncGenerator[str, None]:
        """Yield generated text, then write the usage log row."""
        async for text in self.writer.astream(prepared.config, prepared.messages, prepared.usage):
            yield text
        await self._log_usage(prepared)

    async def _log_usage(self, prepared: PreparedDraft) -> None:
        usage = prepared.usage
        try:
            async with self.session_factory() as session:
                await ai_usage_crud.create(
                    session,
                    user_id=prepared.user_id,
                    action=GENERATE_ACTION,
                    document_type=prepared.document_type,
                    model=prepared.config.model,
                    tier=prepared.config.tier,
                    tokens_in=usage.tokens_in,
                    tokens_out=usage.tokens_out,
                    duration_ms=usage.duration_ms,
                    estimated_cost=estimate_cost(prepared.config, usage.tokens_in, usage.tokens_out),
                    case_id=prepared.case_id,
                    project_id=prepared.project_id,
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to record AI usage: {type(e).__name__}: {e}",
                extra={"document_type": prepared.document_type, "model": prepared.config.model},
            )

    async def usage_report(self, date_from: datetime | None = None, date_to: datetime | None = None) -> dict:
        """Token and cost totals by action and by model over a date range."""
        by_action = await ai_usage_crud.totals_by(self.db, "action", date_from, date_to)
        by_model = await ai_usage_crud.totals_by(self.db, "model", date_from, date_to)
        return {
            "date_from": date_from,
            "date_to": date_to,
            "total_requests": sum(row["requests"] for row in by_action),
            "total_tokens_in": sum(row["tokens_in"] for row in by_action),
            "total_tokens_out": sum(row["tokens_out"] for row in by_action),
            "total_estimated_cost": sum(row["estimated_cost"] for row in by_action),
            "by_action": by_action,
            "by_model": by_model,
        }
