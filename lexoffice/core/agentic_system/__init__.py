"""
Text-generation layer: model tiers, prompts and the legal writer agent.

Exports:
  - ModelConfig, select_model, estimate_cost: Tier selection and costing
  - LegalWriterAgent: Streaming/one-shot text generation
"""

from lexoffice.core.agentic_system.model_map import (
    DOCUMENT_TYPE_TIERS,
    PREMIUM_ANALYSIS_TYPES,
    ModelConfig,
    build_model_configs,
    estimate_cost,
    select_model,
    tier_for_analysis,
)

__all__ = [
    "DOCUMENT_TYPE_TIERS",
    "PREMIUM_ANALYSIS_TYPES",
    "ModelConfig",
    "build_model_configs",
    "estimate_cost",
    "select_model",
    "tier_for_analysis",
]
