"""
Unit tests for OKR scoring, the KPI dashboard and fee arithmetic.

System role: Verification of team and financial domain logic
"""

import uuid
from datetime import date
from types import SimpleNamespace

import pytest

from lexoffice.core.enums import FeeStatus
from lexoffice.core.financial import fee_installments, monthly_fee_breakdown
from lexoffice.core.team import apply_checkin, kpi_dashboard, okr_progress


def _kr(target, current=0, weight=100):
    return {"title": "KR", "metric": "count", "target_value": target, "current_value": current, "weight": weight}


class TestOKRProgress:
    def test_weighted_mean(self) -> None:
        # 50% at weight 100 and 100% at weight 50
        progress = okr_progress([_kr(10, 5, 100), _kr(4, 4, 50)])

        assert progress == pytest.approx((50 * 100 + 100 * 50) / 150)

    def test_overshoot_is_capped_at_target(self) -> None:
        assert okr_progress([_kr(10, 25)]) == 100.0

    def test_zero_weight_and_target_fall_back(self) -> None:
        # weight 0 counts as 100; target 0 counts as 1
        assert okr_progress([_kr(0, 1, 0), _kr(10, 0, 100)]) == pytest.approx(50.0)

    def test_no_key_results(self) -> None:
        assert okr_progress([]) == 0.0

    def test_checkin_skips_unknown_indexes_and_copies(self) -> None:
        stored = [_kr(10, 1), _kr(10, 2)]

        updated = apply_checkin(stored, {1: 8, 5: 99})

        assert [kr["current_value"] for kr in updated] == [1, 8]
        assert stored[1]["current_value"] == 2


class TestKPIDashboard:
    def test_averages_rankings_and_trends(self) -> None:
        ana, bruno = uuid.uuid4(), uuid.uuid4()
        entries = [
            SimpleNamespace(user_id=ana, period=date(2024, 2, 1), billable_hours=100, utilization_rate=80,
                            deadline_compliance_rate=None, overall_score=70, revenue_generated=1_000),
            SimpleNamespace(user_id=ana, period=date(2024, 1, 1), billable_hours=120, utilization_rate=None,
                            deadline_compliance_rate=90, overall_score=90, revenue_generated=None),
            SimpleNamespace(user_id=bruno, period=date(2024, 2, 1), billable_hours=60, utilization_rate=50,
                            deadline_compliance_rate=100, overall_score=95, revenue_generated=500),
        ]

        result = kpi_dashboard(entries, {ana: "Ana", bruno: "Bruno"})

        averages = {m["name"]: m for m in result["member_averages"]}
        assert averages["Ana"]["avg_billable_hours"] == 110
        assert averages["Ana"]["avg_utilization_rate"] == 80
        assert averages["Ana"]["avg_overall_score"] == 80
        assert averages["Ana"]["total_revenue_generated"] == 1_000
        assert [m["name"] for m in result["rankings"]] == ["Bruno", "Ana"]
        assert [t["month"] for t in result["trends"]] == ["2024-01", "2024-02"]
        assert result["trends"][1]["avg_billable_hours"] == 80

    def test_empty(self) -> None:
        assert kpi_dashboard([], {}) == {"member_averages": [], "rankings": [], "trends": []}


class TestFeeInstallments:
    def test_single_fee_keeps_description(self) -> None:
        (part,) = fee_installments(10_000, 1, date(2024, 1, 10), "Retainer")

        assert part.amount == 10_000
        assert part.description == "Retainer"

    def test_remainder_goes_to_last_installment(self) -> None:
        parts = fee_installments(10_000, 3, date(2024, 1, 31), "Retainer")

        assert [p.amount for p in parts] == [3_333, 3_333, 3_334]
        assert [p.due_date for p in parts] == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]
        assert parts[2].description == "Retainer (3/3)"

    def test_monthly_breakdown_newest_first(self) -> None:
        fees = [
            SimpleNamespace(due_date=date(2024, 1, 5), status=FeeStatus.PAID, amount=100),
            SimpleNamespace(due_date=date(2024, 1, 20), status=FeeStatus.OVERDUE, amount=40),
            SimpleNamespace(due_date=date(2024, 2, 5), status=FeeStatus.PENDING, amount=70),
            SimpleNamespace(due_date=date(2024, 2, 6), status=FeeStatus.CANCELLED, amount=999),
        ]

        months = monthly_fee_breakdown(fees)

        assert months == [
            {"month": date(2024, 2, 1), "paid": 0, "pending": 70, "overdue": 0},
            {"month": date(2024, 1, 1), "paid": 100, "pending": 0, "overdue": 40},
        ]
