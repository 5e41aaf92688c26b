"""
Unit tests for judicial-recovery calculations.

Covers class rules, the creditor list summary, assembly voting and the
plan economics (schedule, NPV, liquidation waterfall).

System role: Verification of restructuring domain logic
"""

import uuid
from datetime import date

import pytest

from lexoffice.core.enums import CreditorClass, CreditorStatus, VoteChoice
from lexoffice.core.restructuring import (
    LABOR_CAP_CENTAVOS,
    CreditorSnapshot,
    VoteOverride,
    VoterRecord,
    WaterfallInput,
    analyze_cram_down,
    apply_class_rules,
    bankruptcy_waterfall,
    net_present_value,
    payment_schedule,
    simulate_voting,
    summarize_creditors,
)
from lexoffice.core.restructuring.payments import add_months


class TestApplyClassRules:
    def test_labor_claim_under_cap_is_fully_privileged(self) -> None:
        result = apply_class_rules(CreditorClass.CLASS_I_LABOR, 5_000_000)

        assert result.labor_capped_value == 5_000_000
        assert result.labor_excess_value == 0
        assert result.warnings == []

    def test_labor_claim_over_cap_is_split(self) -> None:
        # Arrange
        value = LABOR_CAP_CENTAVOS + 7_230_000

        # Act
        result = apply_class_rules(CreditorClass.CLASS_I_LABOR, value)

        # Assert
        assert LABOR_CAP_CENTAVOS == 22_770_000
        assert result.labor_capped_value == LABOR_CAP_CENTAVOS
        assert result.labor_excess_value == 7_230_000
        assert len(result.warnings) == 1

    def test_secured_claim_above_collateral_has_unsecured_portion(self) -> None:
        result = apply_class_rules(CreditorClass.CLASS_II_SECURED, 1_000_000, collateral_appraisal=600_000)

        assert result.unsecured_portion == 400_000
        assert len(result.warnings) == 1

    def test_secured_claim_without_appraisal_is_untouched(self) -> None:
        result = apply_class_rules(CreditorClass.CLASS_II_SECURED, 1_000_000)

        assert result.unsecured_portion == 0
        assert result.warnings == []

    def test_unsecured_class_has_no_derived_values(self) -> None:
        result = apply_class_rules(CreditorClass.CLASS_III_UNSECURED, 99_000_000, collateral_appraisal=10)

        assert result.labor_capped_value == 0
        assert result.unsecured_portion == 0


class TestSummarizeCreditors:
    def test_excluded_creditors_are_ignored(self) -> None:
        # Arrange
        creditors = [
            CreditorSnapshot(CreditorClass.CLASS_I_LABOR, CreditorStatus.LISTED, 1_000, 1_200, 10.0),
            CreditorSnapshot(CreditorClass.CLASS_III_UNSECURED, CreditorStatus.QUALIFIED, 5_000, None, 30.0),
            CreditorSnapshot(CreditorClass.CLASS_III_UNSECURED, CreditorStatus.EXCLUDED, 9_000, 9_000, 90.0),
        ]

        # Act
        summary = summarize_creditors(creditors)

        # Assert
        assert summary["total_creditors"] == 2
        assert summary["total_credit"] == 6_200
        assert summary["by_class"]["CLASS_I_LABOR"] == {"count": 1, "value": 1_200}
        assert summary["by_class"]["CLASS_III_UNSECURED"] == {"count": 1, "value": 5_000}
        assert summary["by_status"] == {"LISTED": 1, "QUALIFIED": 1}
        assert summary["mean_haircut"] == pytest.approx(20.0)

    def test_empty_list_reports_every_class(self) -> None:
        summary = summarize_creditors([])

        assert summary["total_creditors"] == 0
        assert set(summary["by_class"]) == {cls.value for cls in CreditorClass}
        assert summary["mean_haircut"] == 0.0


def _voter(name: str, creditor_class: CreditorClass, value: int, vote: VoteChoice, present: bool = True):
    return VoterRecord(
        id=uuid.uuid4(),
        name=name,
        creditor_class=creditor_class,
        value=value,
        vote=vote,
        present=present,
    )


@pytest.fixture
def assembly() -> dict[str, VoterRecord]:
    """Secured and unsecured creditors that approve the plan as recorded."""
    return {
        "bank": _voter("Bank", CreditorClass.CLASS_II_SECURED, 1_000, VoteChoice.FOR),
        "lessor": _voter("Lessor", CreditorClass.CLASS_II_SECURED, 200, VoteChoice.AGAINST),
        "supplier_a": _voter("Supplier A", CreditorClass.CLASS_III_UNSECURED, 600, VoteChoice.FOR),
        "supplier_b": _voter("Supplier B", CreditorClass.CLASS_III_UNSECURED, 100, VoteChoice.FOR),
        "supplier_c": _voter("Supplier C", CreditorClass.CLASS_III_UNSECURED, 300, VoteChoice.AGAINST),
    }


class TestSimulateVoting:
    def test_plan_approved_when_every_voting_class_approves(self, assembly) -> None:
        # Act
        outcome = simulate_voting(assembly.values())

        # Assert
        assert outcome.plan_approved is True
        assert outcome.approved_classes == 2
        assert outcome.rejected_classes == 0
        assert outcome.total_present == 5
        assert outcome.total_present_value == 2_200
        assert set(outcome.by_class) == set(CreditorClass)

    def test_unsecured_class_needs_head_and_value_majority(self, assembly) -> None:
        outcome = simulate_voting(assembly.values())
        unsecured = outcome.by_class[CreditorClass.CLASS_III_UNSECURED]

        assert unsecured.heads_for == 2
        assert unsecured.head_quorum == pytest.approx(200 / 3)
        assert unsecured.value_quorum == pytest.approx(70.0)
        assert unsecured.approved is True

    def test_tie_on_heads_rejects_head_count_class(self) -> None:
        voters = [
            _voter("Worker A", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.FOR),
            _voter("Worker B", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.AGAINST),
        ]

        outcome = simulate_voting(voters)

        assert outcome.by_class[CreditorClass.CLASS_I_LABOR].approved is False
        assert outcome.plan_approved is False

    def test_abstentions_and_absentees_do_not_count(self) -> None:
        voters = [
            _voter("Worker A", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.FOR),
            _voter("Worker B", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.ABSTAIN),
            _voter("Worker C", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.AGAINST, present=False),
        ]

        labor = simulate_voting(voters).by_class[CreditorClass.CLASS_I_LABOR]

        assert labor.present == 2
        assert labor.head_quorum == 100.0
        assert labor.approved is True

    def test_no_present_creditors_means_no_approval(self) -> None:
        voters = [_voter("Absent", CreditorClass.CLASS_III_UNSECURED, 100, VoteChoice.FOR, present=False)]

        outcome = simulate_voting(voters)

        assert outcome.plan_approved is False
        assert outcome.approved_classes == 0

    def test_override_can_flip_the_outcome(self, assembly) -> None:
        # Arrange
        overrides = {assembly["bank"].id: VoteOverride(vote=VoteChoice.AGAINST)}

        # Act
        outcome = simulate_voting(assembly.values(), overrides)

        # Assert
        assert outcome.by_class[CreditorClass.CLASS_II_SECURED].approved is False
        assert outcome.plan_approved is False

    def test_presence_override_keeps_recorded_vote(self, assembly) -> None:
        overrides = {assembly["supplier_c"].id: VoteOverride(present=False)}

        unsecured = simulate_voting(assembly.values(), overrides).by_class[CreditorClass.CLASS_III_UNSECURED]

        assert unsecured.present == 2
        assert unsecured.value_quorum == 100.0

    def test_pivotal_creditors_sorted_by_value(self, assembly) -> None:
        outcome = simulate_voting(assembly.values())

        names = [p.name for p in outcome.pivotal_creditors]
        assert names == ["Bank", "Supplier A", "Supplier B"]
        assert all(p.impact == "REJECTION" for p in outcome.pivotal_creditors)


class TestCramDown:
    def test_not_needed_when_every_class_approves(self, assembly) -> None:
        cram_down = simulate_voting(assembly.values()).cram_down

        assert cram_down.viable is False
        assert cram_down.requirements == []
        assert cram_down.blockers == ["Plan approved by every class; cram down not needed"]

    def test_viable_when_rejecting_class_has_over_a_third_in_favor(self) -> None:
        voters = [
            _voter("Bank", CreditorClass.CLASS_II_SECURED, 400, VoteChoice.FOR),
            _voter("Lessor", CreditorClass.CLASS_II_SECURED, 600, VoteChoice.AGAINST),
            _voter("Supplier", CreditorClass.CLASS_III_UNSECURED, 500, VoteChoice.FOR),
        ]

        outcome = simulate_voting(voters)

        assert outcome.plan_approved is False
        assert outcome.cram_down.viable is True
        assert [r.number for r in outcome.cram_down.requirements] == [1, 2, 3, 4, 5]
        assert outcome.cram_down.blockers == []

    def test_a_third_of_value_is_not_enough(self) -> None:
        voters = [
            _voter("Bank", CreditorClass.CLASS_II_SECURED, 100, VoteChoice.FOR),
            _voter("Lessor", CreditorClass.CLASS_II_SECURED, 200, VoteChoice.AGAINST),
            _voter("Supplier", CreditorClass.CLASS_III_UNSECURED, 500, VoteChoice.FOR),
        ]

        cram_down = simulate_voting(voters).cram_down

        assert cram_down.viable is False
        assert cram_down.requirements[1].met is False
        assert cram_down.blockers[0].startswith("CLASS_II_SECURED: only 33.3%")

    def test_rejecting_labor_class_blocks_cram_down(self) -> None:
        voters = [
            _voter("Worker A", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.FOR),
            _voter("Worker B", CreditorClass.CLASS_I_LABOR, 100, VoteChoice.AGAINST),
        ]

        cram_down = analyze_cram_down(simulate_voting(voters).by_class)

        met = {r.number: r.met for r in cram_down.requirements}
        assert met == {1: False, 2: True, 3: True, 4: False, 5: True}
        assert cram_down.viable is False
        assert len(cram_down.blockers) == 2


class TestPaymentSchedule:
    def test_last_installment_absorbs_rounding(self) -> None:
        # Act
        schedule = payment_schedule(100_000, 3, date(2024, 1, 31))

        # Assert
        assert [i.principal for i in schedule] == [33_333, 33_333, 33_334]
        assert [i.balance for i in schedule] == [66_667, 33_334, 0]
        assert all(i.interest == 0 for i in schedule)

    def test_due_dates_clamp_to_month_end(self) -> None:
        schedule = payment_schedule(100_000, 3, date(2024, 1, 31))

        assert [i.due_date for i in schedule] == [date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]

    def test_haircut_grace_and_interest(self) -> None:
        schedule = payment_schedule(
            100_000,
            2,
            date(2024, 1, 15),
            haircut_percent=50,
            grace_months=6,
            annual_rate_percent=12,
        )

        assert schedule[0].due_date == date(2024, 8, 15)
        assert schedule[0].interest == 500
        assert schedule[1].interest == 250
        assert sum(i.principal for i in schedule) == 50_000
        assert schedule[0].total == 25_500

    def test_no_installments_yields_empty_schedule(self) -> None:
        assert payment_schedule(100_000, 0, date(2024, 1, 1)) == []

    def test_add_months_rolls_over_year(self) -> None:
        assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


class TestNetPresentValue:
    def test_single_flow_discounted_one_month(self) -> None:
        assert net_present_value([10_000], 12) == 9_901

    def test_zero_rate_is_plain_sum(self) -> None:
        assert net_present_value([1_000, 2_000, 3_000], 0) == 6_000


class TestBankruptcyWaterfall:
    def test_proceeds_follow_statutory_order(self) -> None:
        # Arrange
        data = WaterfallInput(
            total_assets=1_000,
            court_costs=100,
            labor_claims=500,
            tax_claims=300,
            secured_claims=400,
            unsecured_claims=200,
        )

        # Act
        result = bankruptcy_waterfall(data)

        # Assert
        paid = {tier["label"]: tier["paid"] for tier in result["tiers"]}
        assert paid == {"LABOR": 500, "TAX": 300, "SECURED": 100, "UNSECURED": 0, "SMALL_BUSINESS": 0}
        assert result["total_paid"] == 900
        assert result["average_recovery_percent"] == pytest.approx(900 / 1_400 * 100)

    def test_court_costs_above_assets_pay_nothing(self) -> None:
        result = bankruptcy_waterfall(WaterfallInput(total_assets=100, court_costs=500, labor_claims=50))

        assert result["total_paid"] == 0
        assert result["tiers"][0]["recovery_percent"] == 0.0
