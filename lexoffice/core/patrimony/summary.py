"""
Consolidated patrimony summary.

Works over already-loaded asset rows; callers pass only active assets.

Dependencies: None (pure domain layer)
System role: Net-worth overview for restructuring analysis
"""

from typing import Any, Sequence

from lexoffice.core.enums import PropertyOwnership


def _value(asset: Any) -> int:
    return asset.estimated_value or 0


def harvest_overview(productions: Sequence[Any]) -> dict:
    """
    Aggregate the productions of the latest harvest year.

    Args:
        productions: Production rows (any harvest year)

    Returns:
        dict: harvest_year, planted_area, revenue, cost, profit, crops
    """
    if not productions:
        return {
            "harvest_year": None,
            "planted_area": 0.0,
            "revenue": 0,
            "cost": 0,
            "profit": 0,
            "crops": [],
        }

    latest_year = max(p.harvest_year for p in productions)
    current = [p for p in productions if p.harvest_year == latest_year]
    revenue = sum(p.total_revenue or 0 for p in current)
    cost = sum(p.production_cost or 0 for p in current)

    crops: list[str] = []
    for production in current:
        crop = getattr(production.crop, "value", production.crop)
        if crop not in crops:
            crops.append(crop)

    return {
        "harvest_year": latest_year,
        "planted_area": sum(p.planted_area or 0.0 for p in current),
        "revenue": revenue,
        "cost": cost,
        "profit": revenue - cost,
        "crops": crops,
    }


def summarize_patrimony(
    rural: Sequence[Any],
    urban: Sequence[Any],
    vehicles: Sequence[Any],
    participations: Sequence[Any],
    productions: Sequence[Any] = (),
) -> dict:
    """
    Sum estimated values, areas and encumbrances across active assets.

    Returns:
        dict: total_assets, total_rural_area, total_owned_area,
            total_lien_amount, free_assets, counts, current_harvest
    """
    assets = [*rural, *urban, *vehicles, *participations]
    total_assets = sum(_value(a) for a in assets)
    total_lien = sum(a.lien_amount or 0 for a in assets if a.has_lien)
    encumbered = sum(_value(a) for a in assets if a.has_lien or a.has_judicial_block)

    return {
        "total_assets": total_assets,
        "total_rural_area": sum(r.total_area or 0.0 for r in rural),
        "total_owned_area": sum(
            r.total_area or 0.0 for r in rural if r.ownership == PropertyOwnership.OWNED
        ),
        "total_lien_amount": total_lien,
        "free_assets": total_assets - encumbered,
        "counts": {
            "rural_properties": len(rural),
            "urban_properties": len(urban),
            "vehicles": len(vehicles),
            "participations": len(participations),
        },
        "current_harvest": harvest_overview(productions),
    }
