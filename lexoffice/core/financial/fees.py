"""
Fee installments and monthly receivables.

All money is in integer centavos.

Dependencies: lexoffice.core.restructuring (add_months)
System role: Fee billing arithmetic
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable

from lexoffice.core.enums import FeeStatus
from lexoffice.core.restructuring.payments import add_months


@dataclass(frozen=True)
class FeeInstallment:
    number: int
    amount: int
    due_date: date
    description: str


def fee_installments(amount: int, installments: int, first_due: date, description: str) -> list[FeeInstallment]:
    """
    Split a fee into equal monthly installments.

    Installment i falls due i months after first_due. The last installment
    absorbs the rounding remainder so the parts add up to amount. With more
    than one installment the description gets an " (i/n)" suffix.
    """
    if installments <= 1:
        return [FeeInstallment(number=1, amount=amount, due_date=first_due, description=description)]

    base = amount // installments
    parts = []
    for i in range(installments):
        value = base if i < installments - 1 else amount - base * (installments - 1)
        parts.append(
            FeeInstallment(
                number=i + 1,
                amount=value,
                due_date=add_months(first_due, i),
                description=f"{description} ({i + 1}/{installments})",
            )
        )
    return parts


def monthly_fee_breakdown(fees: Iterable[Any], months: int = 6) -> list[dict]:
    """
    Paid, pending and overdue totals grouped by due month.

    Args:
        fees: Objects exposing due_date, status and amount
        months: Number of most recent months kept

    Returns:
        list[dict]: month (first day), paid, pending, overdue; newest first
    """
    buckets: dict[date, dict[str, int]] = {}
    for fee in fees:
        month = fee.due_date.replace(day=1)
        bucket = buckets.setdefault(month, {"paid": 0, "pending": 0, "overdue": 0})
        if fee.status == FeeStatus.PAID:
            bucket["paid"] += fee.amount
        elif fee.status == FeeStatus.PENDING:
            bucket["pending"] += fee.amount
        elif fee.status == FeeStatus.OVERDUE:
            bucket["overdue"] += fee.amount
    return [{"month": month, **buckets[month]} for month in sorted(buckets, reverse=True)[:months]]
