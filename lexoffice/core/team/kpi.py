"""
KPI dashboard aggregation.

Entries are monthly KPI snapshots per team member. Averages skip missing
values and are 0 when a member has none.

Dependencies: None (pure domain layer)
System role: Team KPI rankings and trends
"""

from typing import Any, Iterable, Mapping
from uuid import UUID


def _avg(values: Iterable[float | None]) -> float:
    present = [v for v in values if v is not None]
    return sum(present) / len(present) if present else 0.0


def kpi_dashboard(entries: Iterable[Any], names: Mapping[UUID, str]) -> dict:
    """
    Per-member averages, rankings and monthly team trends.

    Args:
        entries: Objects exposing user_id, period (date), billable_hours,
            utilization_rate, deadline_compliance_rate, overall_score and
            revenue_generated
        names: Member name by user id

    Returns:
        dict: member_averages (by name), rankings (by average overall score,
            highest first) and trends (one row per YYYY-MM, oldest first)
    """
    entries = list(entries)
    by_member: dict[UUID, list[Any]] = {}
    by_month: dict[str, list[Any]] = {}
    for entry in entries:
        by_member.setdefault(entry.user_id, []).append(entry)
        by_month.setdefault(entry.period.strftime("%Y-%m"), []).append(entry)

    member_averages = [
        {
            "user_id": user_id,
            "name": names.get(user_id, ""),
            "entries": len(rows),
            "avg_billable_hours": _avg(r.billable_hours for r in rows),
            "avg_utilization_rate": _avg(r.utilization_rate for r in rows),
            "avg_deadline_compliance": _avg(r.deadline_compliance_rate for r in rows),
            "avg_overall_score": _avg(r.overall_score for r in rows),
            "total_revenue_generated": sum(r.revenue_generated or 0 for r in rows),
        }
        for user_id, rows in by_member.items()
    ]
    member_averages.sort(key=lambda m: m["name"])
    rankings = sorted(member_averages, key=lambda m: m["avg_overall_score"], reverse=True)

    trends = [
        {
            "month": month,
            "avg_billable_hours": _avg(r.billable_hours for r in rows),
            "avg_utilization_rate": _avg(r.utilization_rate for r in rows),
            "avg_deadline_compliance": _avg(r.deadline_compliance_rate for r in rows),
        }
        for month, rows in sorted(by_month.items())
    ]
    return {"member_averages": member_averages, "rankings": rankings, "trends": trends}
