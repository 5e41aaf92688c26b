"""
Model tier map.

Complex pleadings and contracts go to the premium tier, correspondence and
simple instruments to the standard tier. Unknown document types default to
standard.

Dependencies: lexoffice.configs
System role: Model selection and cost estimation for AI calls
"""

from dataclasses import dataclass

from lexoffice.configs.ai import AISettings
from lexoffice.core.enums import ModelTier, RecoveryAnalysisType


@dataclass(frozen=True)
class ModelConfig:
    tier: ModelTier
    model: str
    max_output_tokens: int
    temperature: float
    cost_per_mtok_in: float
    cost_per_mtok_out: float


DOCUMENT_TYPE_TIERS: dict[str, ModelTier] = {
    # Pleadings and appeals
    "INITIAL_PETITION": ModelTier.PREMIUM,
    "DEFENSE": ModelTier.PREMIUM,
    "REPLY": ModelTier.PREMIUM,
    "COUNTERCLAIM": ModelTier.PREMIUM,
    "CLOSING_BRIEF": ModelTier.PREMIUM,
    "FINAL_ARGUMENTS": ModelTier.PREMIUM,
    "MOTION_FOR_CLARIFICATION": ModelTier.PREMIUM,
    "INTERLOCUTORY_APPEAL": ModelTier.PREMIUM,
    "INTERNAL_APPEAL": ModelTier.PREMIUM,
    "APPEAL": ModelTier.PREMIUM,
    "SPECIAL_APPEAL": ModelTier.PREMIUM,
    "EXTRAORDINARY_APPEAL": ModelTier.PREMIUM,
    "APPEAL_RESPONSE": ModelTier.PREMIUM,
    "ORDINARY_APPEAL": ModelTier.PREMIUM,
    # Enforcement
    "JUDGMENT_ENFORCEMENT": ModelTier.PREMIUM,
    "ENFORCEMENT_OBJECTION": ModelTier.PREMIUM,
    "DEBTOR_EMBARGO": ModelTier.PREMIUM,
    "PRE_ENFORCEMENT_EXCEPTION": ModelTier.PREMIUM,
    # Insolvency
    "RESTRUCTURING_PLAN": ModelTier.PREMIUM,
    "CLAIM_FILING": ModelTier.PREMIUM,
    "CLAIM_CHALLENGE": ModelTier.PREMIUM,
    "PLAN_OBJECTION": ModelTier.PREMIUM,
    "BANKRUPTCY_CONVERSION": ModelTier.PREMIUM,
    # Advisory and contracts
    "LEGAL_OPINION": ModelTier.PREMIUM,
    "TECHNICAL_NOTE": ModelTier.PREMIUM,
    "DUE_DILIGENCE": ModelTier.PREMIUM,
    "GENERIC_CONTRACT": ModelTier.PREMIUM,
    "RURAL_LEASE_CONTRACT": ModelTier.PREMIUM,
    "AGRICULTURAL_PARTNERSHIP_CONTRACT": ModelTier.PREMIUM,
    "RURAL_PRODUCT_NOTE": ModelTier.PREMIUM,
    # Correspondence and simple instruments
    "FORMAL_EMAIL": ModelTier.STANDARD,
    "CLIENT_PROPOSAL": ModelTier.STANDARD,
    "SETTLEMENT_PROPOSAL": ModelTier.STANDARD,
    "CREDITOR_LETTER": ModelTier.STANDARD,
    "OFFICIAL_LETTER": ModelTier.STANDARD,
    "INTERNAL_MEMO": ModelTier.STANDARD,
    "ADMINISTRATOR_REPORT": ModelTier.STANDARD,
    "JUDICIAL_POWER_OF_ATTORNEY": ModelTier.STANDARD,
    "EXTRAJUDICIAL_POWER_OF_ATTORNEY": ModelTier.STANDARD,
    "EXTRAJUDICIAL_NOTICE": ModelTier.STANDARD,
    "EXTRAJUDICIAL_SETTLEMENT": ModelTier.STANDARD,
    "DEBT_ACKNOWLEDGMENT": ModelTier.STANDARD,
    "TERMINATION_AGREEMENT": ModelTier.STANDARD,
}

PREMIUM_ANALYSIS_TYPES = frozenset(
    {RecoveryAnalysisType.PETITION, RecoveryAnalysisType.FRAUD_DETECTION}
)


def build_model_configs(settings: AISettings) -> dict[ModelTier, ModelConfig]:
    """Materialize both tiers from settings."""
    return {
        ModelTier.STANDARD: ModelConfig(
            tier=ModelTier.STANDARD,
            model=settings.standard_model,
            max_output_tokens=settings.standard_max_output_tokens,
            temperature=settings.standard_temperature,
            cost_per_mtok_in=settings.standard_cost_per_mtok_in,
            cost_per_mtok_out=settings.standard_cost_per_mtok_out,
        ),
        ModelTier.PREMIUM: ModelConfig(
            tier=ModelTier.PREMIUM,
            model=settings.premium_model,
            max_output_tokens=settings.premium_max_output_tokens,
            temperature=settings.premium_temperature,
            cost_per_mtok_in=settings.premium_cost_per_mtok_in,
            cost_per_mtok_out=settings.premium_cost_per_mtok_out,
        ),
    }


def select_model(
    configs: dict[ModelTier, ModelConfig],
    document_type: str,
    force_premium: bool = False,
) -> ModelConfig:
    """
    Pick the tier for a document type.

    Args:
        configs: Output of build_model_configs
        document_type: Document type code
        force_premium: Override to the premium tier

    Returns:
        ModelConfig: Selected tier configuration
    """
    if force_premium:
        return configs[ModelTier.PREMIUM]
    return configs[DOCUMENT_TYPE_TIERS.get(document_type, ModelTier.STANDARD)]


def tier_for_analysis(analysis_type: RecoveryAnalysisType) -> ModelTier:
    """Petition drafting and fraud detection run on the premium tier."""
    if analysis_type in PREMIUM_ANALYSIS_TYPES:
        return ModelTier.PREMIUM
    return ModelTier.STANDARD


def estimate_cost(config: ModelConfig, tokens_in: int, tokens_out: int) -> float:
    """Estimated USD cost of one call."""
    return (
        tokens_in / 1_000_000 * config.cost_per_mtok_in
        + tokens_out / 1_000_000 * config.cost_per_mtok_out
    )
