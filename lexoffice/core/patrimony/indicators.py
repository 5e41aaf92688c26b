"""
Financial indicators from a client's financial snapshot.

Each ratio is None when its denominator is zero or missing.

Dependencies: None (pure domain layer)
System role: Credit analysis ratios
"""

from typing import Any


def _ratio(numerator: int | None, denominator: int | None, scale: float = 1.0) -> float | None:
    if not denominator:
        return None
    return (numerator or 0) / denominator * scale


def financial_indicators(snapshot: Any) -> dict[str, float | None]:
    """
    Compute leverage, liquidity and margin ratios.

    Args:
        snapshot: Object exposing equity, total_debt, net_debt, ebitda,
            current_assets, current_liabilities, gross_profit, net_revenue
            and net_income (centavos, possibly None)

    Returns:
        dict: debt_to_equity, net_debt_to_ebitda, current_ratio and
            gross/ebitda/net margins and ROE in percent
    """
    return {
        "debt_to_equity": _ratio(snapshot.total_debt, snapshot.equity),
        "net_debt_to_ebitda": _ratio(snapshot.net_debt, snapshot.ebitda),
        "current_ratio": _ratio(snapshot.current_assets, snapshot.current_liabilities),
        "gross_margin": _ratio(snapshot.gross_profit, snapshot.net_revenue, 100),
        "ebitda_margin": _ratio(snapshot.ebitda, snapshot.net_revenue, 100),
        "net_margin": _ratio(snapshot.net_income, snapshot.net_revenue, 100),
        "roe": _ratio(snapshot.net_income, snapshot.equity, 100),
    }
