"""Prompt builders for drafting and credit-recovery analysis."""

from lexoffice.core.agentic_system.prompts.drafting_prompt import (
    DRAFTING_PROMPT,
    CaseContext,
    DraftingContext,
    LibraryContext,
    ProjectContext,
    build_document_prompt,
    build_user_message,
)
from lexoffice.core.agentic_system.prompts.recovery_prompt import (
    RECOVERY_PROMPT,
    build_recovery_system_prompt,
)

__all__ = [
    "DRAFTING_PROMPT",
    "CaseContext",
    "DraftingContext",
    "LibraryContext",
    "ProjectContext",
    "build_document_prompt",
    "build_user_message",
    "RECOVERY_PROMPT",
    "build_recovery_system_prompt",
]
