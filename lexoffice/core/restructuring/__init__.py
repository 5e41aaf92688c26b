"""
Judicial-recovery calculations (Lei 11.101/2005).

Exports:
  - apply_class_rules: Class I cap and Class II collateral split
  - summarize_creditors: Aggregates for the creditor list header
  - simulate_voting: Art. 45 quorum per class, plan outcome and art. 58 cram down
  - payment_schedule, net_present_value, bankruptcy_waterfall: Plan economics
"""

from lexoffice.core.restructuring.creditor_rules import (
    LABOR_CAP_CENTAVOS,
    MINIMUM_WAGE_CENTAVOS,
    ClassRuleResult,
    CreditorSnapshot,
    apply_class_rules,
    summarize_creditors,
)
from lexoffice.core.restructuring.payments import (
    Installment,
    WaterfallInput,
    bankruptcy_waterfall,
    net_present_value,
    payment_schedule,
)
from lexoffice.core.restructuring.voting import (
    ClassQuorum,
    CramDownAnalysis,
    CramDownRequirement,
    PivotalCreditor,
    VoteOverride,
    VoterRecord,
    VotingOutcome,
    analyze_cram_down,
    simulate_voting,
)

__all__ = [
    "LABOR_CAP_CENTAVOS",
    "MINIMUM_WAGE_CENTAVOS",
    "ClassRuleResult",
    "CreditorSnapshot",
    "apply_class_rules",
    "summarize_creditors",
    "Installment",
    "WaterfallInput",
    "bankruptcy_waterfall",
    "net_present_value",
    "payment_schedule",
    "ClassQuorum",
    "CramDownAnalysis",
    "CramDownRequirement",
    "PivotalCreditor",
    "VoteOverride",
    "VoterRecord",
    "VotingOutcome",
    "analyze_cram_down",
    "simulate_voting",
]
