"""Legal writer agent."""

from lexoffice.core.agentic_system.agent.legal_writer import (
    GenerationResult,
    GenerationUsage,
    LegalWriterAgent,
)

__all__ = ["GenerationResult", "GenerationUsage", "LegalWriterAgent"]
