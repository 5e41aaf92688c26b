"""
Creditor service orchestrator.

Keeps the creditor list of a judicial-recovery case and runs the
restructuring calculators over it: class rules on every write, list
summary, assembly voting simulation and plan economics.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.restructuring
System role: Judicial recovery use case orchestration
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import Mapping, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.CRUD.creditor_crud import creditor_crud
from lexoffice.boundary.db.models import CreditorModel
from lexoffice.core.enums import CreditorClass, CreditorStatus
from lexoffice.core.exceptions import NotFoundError
from lexoffice.core.restructuring import (
    CreditorSnapshot,
    VoteOverride,
    VoterRecord,
    WaterfallInput,
    apply_class_rules,
    bankruptcy_waterfall,
    net_present_value,
    payment_schedule,
    simulate_voting,
    summarize_creditors,
)

logger = logging.getLogger(__name__)


def _derived_fields(creditor_class: CreditorClass, updated_value: int, collateral_appraisal: int | None):
    rules = apply_class_rules(creditor_class, updated_value, collateral_appraisal or 0)
    fields = {
        "labor_capped_value": rules.labor_capped_value or None,
        "labor_excess_value": rules.labor_excess_value or None,
        "unsecured_portion": rules.unsecured_portion or None,
    }
    return fields, rules.warnings


class CreditorService:
    """Creditor list and restructuring calculator orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _ensure_case(self, case_id: UUID) -> None:
        if not await case_crud.exists(self.db, case_id):
            raise NotFoundError("Case", case_id)

    async def _get_creditor(self, case_id: UUID, creditor_id: UUID) -> CreditorModel:
        creditor = await creditor_crud.get_by_id(self.db, creditor_id)
        if creditor is None or creditor.case_id != case_id:
            raise NotFoundError("Creditor", creditor_id)
        return creditor

    async def list_creditors(
        self,
        case_id: UUID,
        creditor_class: CreditorClass | None = None,
        status: CreditorStatus | None = None,
    ) -> list[dict]:
        await self._ensure_case(case_id)
        creditors = await creditor_crud.list_by_case(
            self.db, case_id, creditor_class=creditor_class, status=status
        )
        return [c.to_dict() for c in creditors]

    async def create_creditor(self, case_id: UUID, **fields) -> dict:
        """
        Add a creditor to a case.

        The updated value defaults to the original value. Class rules
        fill the labor cap split (Class I) or the unsecured portion above
        the collateral appraisal (Class II).

        Returns:
            dict: creditor, warnings
        """
        await self._ensure_case(case_id)
        await check_references(self.db, fields)
        if fields.get("updated_value") is None:
            fields["updated_value"] = fields["original_value"]

        derived, warnings = _derived_fields(
            fields["creditor_class"], fields["updated_value"], fields.get("collateral_appraisal")
        )
        creditor = await creditor_crud.create(self.db, case_id=case_id, **fields, **derived)
        logger.info(
            "Creditor created",
            extra={
                "case_id": str(case_id),
                "creditor_id": str(creditor.id),
                "creditor_class": creditor.creditor_class.value,
                "warnings": len(warnings),
            },
        )
        return {"creditor": creditor.to_dict(), "warnings": warnings}

    async def update_creditor(self, case_id: UUID, creditor_id: UUID, **fields) -> dict:
        """Partial update; class rules are re-applied to the merged values."""
        creditor = await self._get_creditor(case_id, creditor_id)
        await check_references(self.db, fields)

        creditor_class = fields.get("creditor_class") or creditor.creditor_class
        updated_value = fields.get("updated_value")
        if updated_value is None:
            updated_value = creditor.updated_value or fields.get("original_value") or creditor.original_value
        appraisal = (
            fields["collateral_appraisal"] if "collateral_appraisal" in fields else creditor.collateral_appraisal
        )

        derived, warnings = _derived_fields(creditor_class, updated_value, appraisal)
        creditor = await creditor_crud.update_by_id(self.db, creditor_id, **fields, **derived)
        logger.info(
            "Creditor updated",
            extra={"case_id": str(case_id), "creditor_id": str(creditor_id), "fields": sorted(fields)},
        )
        return {"creditor": creditor.to_dict(), "warnings": warnings}

    async def delete_creditor(self, case_id: UUID, creditor_id: UUID) -> None:
        """Soft delete: the creditor stays on file as EXCLUDED."""
        await self._get_creditor(case_id, creditor_id)
        await creditor_crud.update_by_id(self.db, creditor_id, status=CreditorStatus.EXCLUDED)
        logger.info("Creditor excluded", extra={"case_id": str(case_id), "creditor_id": str(creditor_id)})

    async def summary(self, case_id: UUID) -> dict:
        await self._ensure_case(case_id)
        creditors = await creditor_crud.list_by_case(self.db, case_id, include_excluded=False)
        return summarize_creditors(
            CreditorSnapshot(
                creditor_class=c.creditor_class,
                status=c.status,
                original_value=c.original_value,
                updated_value=c.updated_value,
                haircut_percent=c.haircut_percent,
            )
            for c in creditors
        )

    async def simulate_voting(
        self,
        case_id: UUID,
        overrides: Mapping[UUID, Mapping] | None = None,
    ) -> dict:
        """
        Art. 45 assembly simulation over the non-excluded creditors.

        Args:
            case_id: Judicial recovery case
            overrides: {creditor_id: {"vote": ..., "present": ...}} what-if changes
        """
        await self._ensure_case(case_id)
        creditors = await creditor_crud.list_by_case(self.db, case_id, include_excluded=False)
        voters = [
            VoterRecord(
                id=c.id,
                name=c.name,
                creditor_class=c.creditor_class,
                value=c.effective_value,
                vote=c.vote,
                present=c.present_at_assembly,
            )
            for c in creditors
        ]
        outcome = simulate_voting(
            voters,
            {
                creditor_id: VoteOverride(vote=change.get("vote"), present=change.get("present"))
                for creditor_id, change in (overrides or {}).items()
            },
        )
        logger.info(
            "Voting simulated",
            extra={"case_id": str(case_id), "plan_approved": outcome.plan_approved, "voters": len(voters)},
        )
        result = asdict(outcome)
        result["by_class"] = list(result["by_class"].values())
        return result

    @staticmethod
    def payment_schedule(
        amount: int,
        installments: int,
        start_date: date,
        haircut_percent: float = 0.0,
        grace_months: int = 0,
        annual_rate_percent: float = 0.0,
    ) -> dict:
        schedule = payment_schedule(
            amount,
            installments,
            start_date,
            haircut_percent=haircut_percent,
            grace_months=grace_months,
            annual_rate_percent=annual_rate_percent,
        )
        principal = sum(i.principal for i in schedule)
        total_paid = sum(i.total for i in schedule)
        return {
            "principal": principal,
            "total_paid": total_paid,
            "total_interest": total_paid - principal,
            "installments": [asdict(i) for i in schedule],
        }

    @staticmethod
    def net_present_value(cash_flows: Sequence[int], annual_discount_percent: float) -> dict:
        return {
            "nominal_total": sum(cash_flows),
            "present_value": net_present_value(cash_flows, annual_discount_percent),
        }

    @staticmethod
    def waterfall(**amounts) -> dict:
        return bankruptcy_waterfall(WaterfallInput(**amounts))
