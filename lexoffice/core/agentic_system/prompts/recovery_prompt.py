"""
Credit-recovery analysis prompts.

One instruction block per analysis type, followed by the recovery case
context rendered by the service layer.

Dependencies: langchain_core.prompts
System role: Prompt assembly for recovery case analysis
"""

from langchain_core.prompts import ChatPromptTemplate

from lexoffice.core.enums import RecoveryAnalysisType

ROLE = (
    "You are a Brazilian lawyer specialised in credit recovery, civil enforcement "
    "and asset investigation."
)

ANALYSIS_INSTRUCTIONS: dict[RecoveryAnalysisType, str] = {
    RecoveryAnalysisType.INITIAL_ANALYSIS: (
        "Produce a complete initial analysis: quality of the enforceable instrument, debtor profile "
        "and ability to pay, identified assets, procedural risks (limitation, embargos, nullities), "
        "recommended route (extrajudicial or judicial), estimated timeline and a 0-100 recovery score."
    ),
    RecoveryAnalysisType.SCORING: (
        "Score the recovery likelihood from 0 to 100 using these weights: enforceable instrument 20%, "
        "debtor assets 25%, debtor profile 15%, procedural risk 15%, payment history 10%, "
        "age of the claim 15%. Justify each factor."
    ),
    RecoveryAnalysisType.STRATEGY: (
        "Recommend a complete recovery strategy: main route, sequence of measures, negotiation "
        "parameters and fallback options."
    ),
    RecoveryAnalysisType.EVENT_ANALYSIS: (
        "Analyse the event described in the additional data and its impact on the case: "
        "urgency, required actions and deadlines."
    ),
    RecoveryAnalysisType.FRAUD_DETECTION: (
        "Look for signs of fraud against creditors or asset concealment: transfers to relatives or "
        "related companies, sales below market value, interposed persons, and grounds for piercing "
        "the corporate veil."
    ),
    RecoveryAnalysisType.PENHORABILITY: (
        "Assess whether the assets in the additional data can be seized under CPC art. 833 and "
        "related case law, and rank them by liquidity."
    ),
    RecoveryAnalysisType.PETITION: (
        "Draft the petition requested in the additional data, ready for filing, citing the "
        "applicable CPC articles."
    ),
    RecoveryAnalysisType.INVESTIGATION_PLAN: (
        "Plan an asset investigation: databases and registries to query, priority order, "
        "expected findings and estimated cost."
    ),
    RecoveryAnalysisType.PORTFOLIO: (
        "Analyse this case as part of the recovery portfolio: priority relative to its value and "
        "score, and where effort should be concentrated."
    ),
}


def build_recovery_system_prompt(
    analysis_type: RecoveryAnalysisType,
    case_context: str,
    extra_data: str | None = None,
) -> str:
    """
    Assemble the system prompt for one analysis type.

    Args:
        analysis_type: Requested analysis
        case_context: Rendered recovery case facts
        extra_data: Optional JSON or free text supplied by the caller

    Returns:
        str: Complete system prompt
    """
    parts = [ROLE, ANALYSIS_INSTRUCTIONS[analysis_type], "CASE CONTEXT:", case_context]
    if extra_data:
        parts.extend(["ADDITIONAL DATA:", extra_data])
    return "\n\n".join(parts)


RECOVERY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", "Run the {analysis_type} analysis for this recovery case."),
])
