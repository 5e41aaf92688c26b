"""
Creditors' assembly voting simulation.

Quorum rules of Lei 11.101/2005 art. 45, computed over creditors present
at the assembly who voted FOR or AGAINST (abstentions do not count):
  - Class I (labor) and Class IV (small business): majority by head count
  - Class II (secured): majority by claim value
  - Class III (unsecured): majority by head count AND by claim value

The plan is approved when at least one class has present creditors and
every class with present creditors approves. When some class rejects,
the art. 58 §1 cram-down requirements are checked.

Dependencies: None (pure domain layer)
System role: Voting what-if analysis for restructuring plans
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping
from uuid import UUID

from lexoffice.core.enums import CreditorClass, VoteChoice

QUORUM_RULES: dict[CreditorClass, str] = {
    CreditorClass.CLASS_I_LABOR: "Art. 45 §2: simple majority by head count of those present",
    CreditorClass.CLASS_II_SECURED: "Art. 45 §1: simple majority by value of those present",
    CreditorClass.CLASS_III_UNSECURED: "Art. 45 §1: majority by head count AND by value of those present",
    CreditorClass.CLASS_IV_SMALL_BUSINESS: "Art. 45 §2: simple majority by head count of those present",
}

CRAM_DOWN_MIN_VALUE_PERCENT = 100 / 3


@dataclass(frozen=True)
class VoterRecord:
    """A creditor as seen by the simulator."""

    id: UUID
    name: str
    creditor_class: CreditorClass
    value: int
    vote: VoteChoice | None = None
    present: bool = False


@dataclass(frozen=True)
class VoteOverride:
    """What-if change applied to one creditor."""

    vote: VoteChoice | None = None
    present: bool | None = None


@dataclass
class ClassQuorum:
    creditor_class: CreditorClass
    total_creditors: int
    present: int
    heads_for: int
    heads_against: int
    value_for: int
    value_against: int
    present_value: int
    head_quorum: float
    value_quorum: float
    approved: bool
    rule: str


@dataclass
class PivotalCreditor:
    id: UUID
    name: str
    creditor_class: CreditorClass
    value: int
    impact: str
    reason: str


@dataclass
class CramDownRequirement:
    number: int
    description: str
    met: bool
    detail: str


@dataclass
class CramDownAnalysis:
    """Art. 58 §1 court-imposed approval check; only meaningful when a class rejected."""

    viable: bool
    requirements: list[CramDownRequirement] = field(default_factory=list)
    blockers: list[str] = field(default_factory=list)


@dataclass
class VotingOutcome:
    by_class: dict[CreditorClass, ClassQuorum]
    plan_approved: bool
    approved_classes: int
    rejected_classes: int
    total_creditors: int
    total_present: int
    total_present_value: int
    cram_down: CramDownAnalysis
    pivotal_creditors: list[PivotalCreditor] = field(default_factory=list)


def _effective(
    voters: Iterable[VoterRecord],
    overrides: Mapping[UUID, VoteOverride],
) -> list[VoterRecord]:
    effective = []
    for voter in voters:
        override = overrides.get(voter.id)
        if override is not None:
            voter = replace(
                voter,
                vote=override.vote if override.vote is not None else voter.vote,
                present=override.present if override.present is not None else voter.present,
            )
        effective.append(voter)
    return effective


def class_quorum(creditor_class: CreditorClass, voters: list[VoterRecord]) -> ClassQuorum:
    """
    Compute art. 45 quorum for one class.

    Args:
        creditor_class: Class to evaluate
        voters: Effective voter records (overrides already applied)

    Returns:
        ClassQuorum: Tallies, percentages and approval flag
    """
    members = [v for v in voters if v.creditor_class == creditor_class]
    present = [v for v in members if v.present]
    in_favor = [v for v in present if v.vote == VoteChoice.FOR]
    against = [v for v in present if v.vote == VoteChoice.AGAINST]

    heads_voting = len(in_favor) + len(against)
    value_for = sum(v.value for v in in_favor)
    value_against = sum(v.value for v in against)
    value_voting = value_for + value_against

    head_quorum = len(in_favor) / heads_voting * 100 if heads_voting else 0.0
    value_quorum = value_for / value_voting * 100 if value_voting else 0.0

    if creditor_class == CreditorClass.CLASS_II_SECURED:
        approved = value_quorum > 50
    elif creditor_class == CreditorClass.CLASS_III_UNSECURED:
        approved = head_quorum > 50 and value_quorum > 50
    else:
        approved = head_quorum > 50

    return ClassQuorum(
        creditor_class=creditor_class,
        total_creditors=len(members),
        present=len(present),
        heads_for=len(in_favor),
        heads_against=len(against),
        value_for=value_for,
        value_against=value_against,
        present_value=sum(v.value for v in present),
        head_quorum=head_quorum,
        value_quorum=value_quorum,
        approved=approved,
        rule=QUORUM_RULES[creditor_class],
    )


def analyze_cram_down(by_class: dict[CreditorClass, ClassQuorum]) -> CramDownAnalysis:
    """
    Check the Art. 58 §1 requirements for approval over a rejecting class.

    Requirements 3 (no differential treatment inside the rejecting class) and
    5 (Class IV gets no better terms) depend on plan terms and are reported
    as met pending manual review.
    """
    voting = [q for q in by_class.values() if q.present > 0]
    approved = [q for q in voting if q.approved]
    rejected = [q for q in voting if not q.approved]

    if not rejected:
        return CramDownAnalysis(
            viable=False,
            blockers=["Plan approved by every class; cram down not needed"],
        )

    requirements: list[CramDownRequirement] = []
    blockers: list[str] = []

    some_class_approved = bool(approved)
    requirements.append(
        CramDownRequirement(
            number=1,
            description="At least one class approved the plan",
            met=some_class_approved,
            detail=f"{len(approved)} class(es) approved" if approved else "No class approved the plan",
        )
    )
    if not some_class_approved:
        blockers.append("No class approved the plan")

    third_in_favor = True
    for quorum in rejected:
        value_voting = quorum.value_for + quorum.value_against
        percent_for = quorum.value_for / value_voting * 100 if value_voting else 0.0
        if percent_for <= CRAM_DOWN_MIN_VALUE_PERCENT:
            third_in_favor = False
            blockers.append(
                f"{quorum.creditor_class.value}: only {percent_for:.1f}% of value voted for (more than 33.3% required)"
            )
    requirements.append(
        CramDownRequirement(
            number=2,
            description="More than 1/3 of the voting value in each rejecting class voted for",
            met=third_in_favor,
            detail="Met in every rejecting class" if third_in_favor else "One or more rejecting classes fell short",
        )
    )

    requirements.append(
        CramDownRequirement(
            number=3,
            description="No differential treatment inside the rejecting class",
            met=True,
            detail="Manual review of the plan terms required",
        )
    )

    labor = by_class.get(CreditorClass.CLASS_I_LABOR)
    labor_ok = labor is None or labor.approved or labor.present == 0
    requirements.append(
        CramDownRequirement(
            number=4,
            description="Class I paid within one year (art. 54)",
            met=labor_ok,
            detail="Class I approved or absent" if labor_ok else "Check that the plan pays Class I within one year",
        )
    )
    if not labor_ok:
        blockers.append("Class I rejected; check art. 54 one-year payment term")

    requirements.append(
        CramDownRequirement(
            number=5,
            description="Class IV receives no better terms than the other classes",
            met=True,
            detail="Manual comparison of class terms required",
        )
    )

    return CramDownAnalysis(
        viable=all(r.met for r in requirements),
        requirements=requirements,
        blockers=blockers,
    )


def _pivotal_creditors(
    voters: list[VoterRecord],
    by_class: dict[CreditorClass, ClassQuorum],
) -> list[PivotalCreditor]:
    """Creditors whose flipped vote would flip their class outcome."""
    pivotal: list[PivotalCreditor] = []

    for creditor_class, result in by_class.items():
        if result.present == 0:
            continue
        for voter in voters:
            if voter.creditor_class != creditor_class or not voter.present:
                continue
            if voter.vote not in (VoteChoice.FOR, VoteChoice.AGAINST):
                continue

            flipped_vote = VoteChoice.AGAINST if voter.vote == VoteChoice.FOR else VoteChoice.FOR
            flipped = [replace(v, vote=flipped_vote) if v.id == voter.id else v for v in voters]
            if class_quorum(creditor_class, flipped).approved == result.approved:
                continue

            if voter.vote == VoteChoice.FOR:
                impact, reason = "REJECTION", f"Voting against would reject {creditor_class.value}"
            else:
                impact, reason = "APPROVAL", f"Voting for would approve {creditor_class.value}"
            pivotal.append(
                PivotalCreditor(
                    id=voter.id,
                    name=voter.name,
                    creditor_class=creditor_class,
                    value=voter.value,
                    impact=impact,
                    reason=reason,
                )
            )

    pivotal.sort(key=lambda p: p.value, reverse=True)
    return pivotal


def simulate_voting(
    voters: Iterable[VoterRecord],
    overrides: Mapping[UUID, VoteOverride] | None = None,
) -> VotingOutcome:
    """
    Simulate the assembly vote on a restructuring plan.

    Args:
        voters: Non-excluded creditors with their recorded vote and presence
        overrides: Optional per-creditor what-if changes

    Returns:
        VotingOutcome: Per-class quorum, plan approval, cram-down check and
            pivotal creditors
    """
    effective = _effective(voters, overrides or {})
    by_class = {cls: class_quorum(cls, effective) for cls in CreditorClass}

    voting_classes = [q for q in by_class.values() if q.present > 0]
    approved = sum(1 for q in voting_classes if q.approved)
    rejected = len(voting_classes) - approved

    return VotingOutcome(
        by_class=by_class,
        plan_approved=bool(voting_classes) and rejected == 0,
        approved_classes=approved,
        rejected_classes=rejected,
        total_creditors=len(effective),
        total_present=sum(q.present for q in by_class.values()),
        total_present_value=sum(q.present_value for q in by_class.values()),
        cram_down=analyze_cram_down(by_class),
        pivotal_creditors=_pivotal_creditors(effective, by_class),
    )
