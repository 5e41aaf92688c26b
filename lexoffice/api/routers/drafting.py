"""
AI drafting API endpoints.

Routes:
- POST /drafting/generate - Stream a generated legal document (text/plain)
- GET /drafting/usage - Token and cost totals by action and model

Dependencies: lexoffice.application.services, lexoffice.models
System role: Drafting assistant HTTP API
"""

import logging
from datetime import datetime
from typing import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from lexoffice.api.deps.dependencies import get_drafting_service
from lexoffice.application.services import DraftingService, PreparedDraft
from lexoffice.core.exceptions import LexOfficeException
from lexoffice.models.drafting import GenerateDocumentRequest, UsageReportResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drafting", tags=["drafting"])


async def _stream_text(
    drafting_service: DraftingService,
    prepared: PreparedDraft,
) -> AsyncGenerator[str, None]:
    """Relay generated text; a provider failure after headers are sent ends the body."""
    try:
        async for text in drafting_service.stream(prepared):
            yield text
    except LexOfficeException as e:
        logger.error(
            f"Drafting stream interrupted: {e.message}",
            extra={"document_type": prepared.document_type, "model": prepared.config.model},
        )


@router.post("/generate", response_class=StreamingResponse)
@handle_service_errors
async def generate_document(
    request: GenerateDocumentRequest,
    drafting_service: DraftingService = Depends(get_drafting_service),
) -> StreamingResponse:
    """
    Generate a legal document and stream it as plain text.

    The model tier follows the document type unless force_premium is set.
    Response headers X-AI-Model and X-AI-Tier name the model used. The
    usage log row is written once the stream completes.

    Args:
        request: GenerateDocumentRequest
        drafting_service: Injected DraftingService

    Returns:
        StreamingResponse: text/plain body

    Raises:
        HTTPException(404): Linked case or project not found
    """
    prepared = await drafting_service.prepare(**request.model_dump())
    logger.info(
        "Streaming drafted document",
        extra={"document_type": request.document_type, "model": prepared.config.model},
    )
    return StreamingResponse(
        _stream_text(drafting_service, prepared),
        media_type="text/plain; charset=utf-8",
        headers={
            "X-AI-Model": prepared.config.model,
            "X-AI-Tier": prepared.config.tier.value,
        },
    )


@router.get("/usage", response_model=UsageReportResponse)
@handle_service_errors
async def usage_report(
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    drafting_service: DraftingService = Depends(get_drafting_service),
) -> dict:
    """AI usage totals by action and by model over an optional date range."""
    return await drafting_service.usage_report(date_from, date_to)
