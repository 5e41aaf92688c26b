"""
Creditor class rules and list summary.

Class I (labor) claims are privileged only up to 150 minimum wages; the
excess is treated as unsecured. Class II (secured) claims are privileged
only up to the appraised collateral; the difference is unsecured.

Dependencies: None (pure domain layer)
System role: Creditor classification on create/update
"""

from dataclasses import dataclass, field
from typing import Iterable

from lexoffice.core.enums import CreditorClass, CreditorStatus

MINIMUM_WAGE_CENTAVOS = 151_800
LABOR_CAP_CENTAVOS = MINIMUM_WAGE_CENTAVOS * 150


def _brl(centavos: int) -> str:
    return f"R$ {centavos / 100:,.2f}"


@dataclass
class ClassRuleResult:
    """Derived values written back to the creditor row."""

    labor_capped_value: int = 0
    labor_excess_value: int = 0
    unsecured_portion: int = 0
    warnings: list[str] = field(default_factory=list)


def apply_class_rules(
    creditor_class: CreditorClass,
    updated_value: int,
    collateral_appraisal: int = 0,
) -> ClassRuleResult:
    """
    Split a claim according to its class.

    Args:
        creditor_class: Legal class of the claim
        updated_value: Claim value in centavos
        collateral_appraisal: Appraised collateral in centavos (Class II)

    Returns:
        ClassRuleResult: Capped/excess/unsecured amounts and warnings
    """
    result = ClassRuleResult()

    if creditor_class == CreditorClass.CLASS_I_LABOR:
        if updated_value > LABOR_CAP_CENTAVOS:
            result.labor_capped_value = LABOR_CAP_CENTAVOS
            result.labor_excess_value = updated_value - LABOR_CAP_CENTAVOS
            result.warnings.append(
                f"Labor claim exceeds 150 minimum wages; {_brl(result.labor_excess_value)} "
                "will be treated as unsecured."
            )
        else:
            result.labor_capped_value = updated_value

    elif creditor_class == CreditorClass.CLASS_II_SECURED:
        if collateral_appraisal > 0 and updated_value > collateral_appraisal:
            result.unsecured_portion = updated_value - collateral_appraisal
            result.warnings.append(
                f"Secured claim exceeds the collateral appraisal; {_brl(result.unsecured_portion)} "
                "will be classified as unsecured."
            )

    return result


@dataclass(frozen=True)
class CreditorSnapshot:
    """Fields of a creditor row needed by the summary."""

    creditor_class: CreditorClass
    status: CreditorStatus
    original_value: int
    updated_value: int | None = None
    haircut_percent: float | None = None


def summarize_creditors(creditors: Iterable[CreditorSnapshot]) -> dict:
    """
    Aggregate non-excluded creditors.

    A zero or missing updated value falls back to the original value.

    Returns:
        dict: total_creditors, total_credit, by_class, by_status, mean_haircut
    """
    by_class: dict[str, dict[str, int]] = {
        cls.value: {"count": 0, "value": 0} for cls in CreditorClass
    }
    by_status: dict[str, int] = {}
    total_creditors = 0
    total_credit = 0
    haircuts: list[float] = []

    for creditor in creditors:
        if creditor.status == CreditorStatus.EXCLUDED:
            continue
        value = creditor.updated_value or creditor.original_value
        total_creditors += 1
        total_credit += value

        bucket = by_class[creditor.creditor_class.value]
        bucket["count"] += 1
        bucket["value"] += value

        by_status[creditor.status.value] = by_status.get(creditor.status.value, 0) + 1

        if creditor.haircut_percent is not None:
            haircuts.append(creditor.haircut_percent)

    return {
        "total_creditors": total_creditors,
        "total_credit": total_credit,
        "by_class": by_class,
        "by_status": by_status,
        "mean_haircut": sum(haircuts) / len(haircuts) if haircuts else 0.0,
    }
