"""
Restructuring plan economics.

Amortization schedule (SAC: constant principal, interest on the remaining
balance), net present value of a monthly cash-flow series and the
bankruptcy liquidation waterfall used to compare a plan with liquidation.
All money is in integer centavos; intermediate math uses Decimal.

Dependencies: decimal, calendar (stdlib)
System role: Plan payment simulation
"""

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence


def _to_centavos(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


@dataclass(frozen=True)
class Installment:
    number: int
    due_date: date
    principal: int
    interest: int
    total: int
    balance: int


def payment_schedule(
    amount: int,
    installments: int,
    start_date: date,
    haircut_percent: float = 0.0,
    grace_months: int = 0,
    annual_rate_percent: float = 0.0,
) -> list[Installment]:
    """
    Build a SAC amortization schedule after applying the haircut.

    The annual rate is converted to a simple monthly rate (rate / 12).
    Installment i falls due grace_months + i months after start_date. The
    last installment absorbs rounding so the balance closes at zero.

    Args:
        amount: Claim value in centavos
        installments: Number of monthly installments
        start_date: Plan approval / reference date
        haircut_percent: Discount applied to the claim (0-100)
        grace_months: Months before the first installment
        annual_rate_percent: Nominal annual interest, e.g. 3.0 for 3%

    Returns:
        list[Installment]: Empty when installments <= 0
    """
    if installments <= 0:
        return []

    discounted = Decimal(amount) * (Decimal(1) - Decimal(str(haircut_percent)) / 100)
    monthly_rate = Decimal(str(annual_rate_percent)) / 1200
    principal_step = discounted / installments

    schedule: list[Installment] = []
    balance = discounted
    paid_principal = 0
    total_principal = _to_centavos(discounted)

    for number in range(1, installments + 1):
        interest = _to_centavos(balance * monthly_rate)
        if number == installments:
            principal = total_principal - paid_principal
        else:
            principal = _to_centavos(principal_step)
        paid_principal += principal

        balance = max(balance - principal_step, Decimal(0))
        schedule.append(
            Installment(
                number=number,
                due_date=add_months(start_date, grace_months + number),
                principal=principal,
                interest=interest,
                total=principal + interest,
                balance=total_principal - paid_principal,
            )
        )

    return schedule


def net_present_value(cash_flows: Sequence[int], annual_discount_percent: float) -> int:
    """
    Discount monthly cash flows, the first one month from now.

    Args:
        cash_flows: Monthly amounts in centavos
        annual_discount_percent: Annual discount rate, converted to rate / 12 monthly

    Returns:
        int: Present value in centavos
    """
    monthly_rate = Decimal(str(annual_discount_percent)) / 1200
    npv = Decimal(0)
    for month, flow in enumerate(cash_flows, start=1):
        npv += Decimal(flow) / (1 + monthly_rate) ** month
    return _to_centavos(npv)


@dataclass(frozen=True)
class WaterfallInput:
    """Liquidation inputs in centavos."""

    total_assets: int
    court_costs: int = 0
    labor_claims: int = 0
    tax_claims: int = 0
    secured_claims: int = 0
    unsecured_claims: int = 0
    small_business_claims: int = 0


def bankruptcy_waterfall(data: WaterfallInput) -> dict:
    """
    Distribute liquidation proceeds in statutory order.

    Order: labor (capped) → tax → secured → unsecured → small business,
    after court costs.

    Returns:
        dict: tiers (label, available, paid, recovery_percent), total_paid,
            average_recovery_percent
    """
    available = max(data.total_assets - data.court_costs, 0)
    tiers = [
        ("LABOR", data.labor_claims),
        ("TAX", data.tax_claims),
        ("SECURED", data.secured_claims),
        ("UNSECURED", data.unsecured_claims),
        ("SMALL_BUSINESS", data.small_business_claims),
    ]

    results = []
    total_paid = 0
    for label, claim in tiers:
        paid = max(min(available, claim), 0)
        results.append(
            {
                "label": label,
                "available": available,
                "claim": claim,
                "paid": paid,
                "recovery_percent": paid / claim * 100 if claim > 0 else 0.0,
            }
        )
        total_paid += paid
        available = max(available - paid, 0)

    total_claims = sum(claim for _, claim in tiers)
    return {
        "tiers": results,
        "total_paid": total_paid,
        "average_recovery_percent": total_paid / total_claims * 100 if total_claims > 0 else 0.0,
    }
