"""
Credit recovery service orchestrator.

Recovery cases (collection and enforcement of a debt against a debtor),
the intake wizard, phase/score/strategy updates, the portfolio dashboard
and model-backed analyses of a single case.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.agentic_system
System role: Credit recovery use case orchestration
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.application.services.summaries import person_summary
from lexoffice.boundary.db.CRUD.ai_usage_crud import ai_usage_crud
from lexoffice.boundary.db.CRUD.person_crud import person_crud
from lexoffice.boundary.db.CRUD.recovery_crud import joint_debtor_crud, recovery_case_crud
from lexoffice.boundary.db.models import PersonModel, RecoveryCaseModel
from lexoffice.core.agentic_system import ModelConfig, estimate_cost, tier_for_analysis
from lexoffice.core.agentic_system.agent import LegalWriterAgent
from lexoffice.core.agentic_system.prompts import RECOVERY_PROMPT, build_recovery_system_prompt
from lexoffice.core.enums import (
    ModelTier,
    PersonType,
    RecoveryAnalysisType,
    RecoveryPhase,
    RecoveryStatus,
)
from lexoffice.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

ANALYSIS_ACTION = "recovery_analysis"


def _recovery_dict(recovery: RecoveryCaseModel) -> dict:
    return {**recovery.to_dict(), "debtor": person_summary(recovery.debtor)}


def _brl(centavos: int | None) -> str:
    return f"R$ {(centavos or 0) / 100:,.2f}"


def render_case_context(recovery: RecoveryCaseModel) -> str:
    """Plain-text facts about a recovery case for the analysis prompt."""
    lines = [
        f"Code: {recovery.code}",
        f"Title: {recovery.title}",
        f"Type: {recovery.type.value}",
        f"Phase: {recovery.phase.value}",
        f"Status: {recovery.status.value}",
        f"Debtor: {recovery.debtor_name or (recovery.debtor.name if recovery.debtor else '-')}",
        f"Debtor tax id: {recovery.debtor_tax_id or '-'}",
        f"Debtor activity: {recovery.debtor_activity or '-'}",
        f"Original value: {_brl(recovery.original_value)}",
        f"Updated value: {_brl(recovery.updated_value)}",
        f"Recovered: {_brl(recovery.recovered_value)} ({recovery.recovered_percent:.1f}%)",
        f"Blocked: {_brl(recovery.blocked_value)}",
        f"Seized: {_brl(recovery.seized_value)}",
    ]
    if recovery.instrument_type:
        lines.append(f"Instrument: {recovery.instrument_type} {recovery.instrument_number or ''}".rstrip())
    if recovery.prescription_date:
        lines.append(f"Prescription date: {recovery.prescription_date.isoformat()}")
    if recovery.score is not None:
        lines.append(f"Recovery score: {recovery.score}/100")
    for joint in recovery.joint_debtors:
        lines.append(
            f"Joint debtor: {joint.name} ({joint.liability_type.value}), "
            f"estimated assets {_brl(joint.estimated_assets)}"
        )
    return "\n".join(lines)


class RecoveryService:
    """Credit recovery service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        writer: LegalWriterAgent | None = None,
        model_configs: dict[ModelTier, ModelConfig] | None = None,
    ) -> None:
        """
        Initialize recovery service.

        Args:
            db: Async SQLAlchemy session
            writer: Text-generation agent, required for analyses
            model_configs: Tier configurations, required for analyses
        """
        self.db = db
        self.writer = writer
        self.model_configs = model_configs or {}

    async def _get_model(self, recovery_id: UUID) -> RecoveryCaseModel:
        recovery = await recovery_case_crud.get_detail(self.db, recovery_id)
        if recovery is None:
            raise NotFoundError("Recovery case", recovery_id)
        return recovery

    async def list_cases(
        self,
        phase: RecoveryPhase | None = None,
        status: RecoveryStatus | None = None,
    ) -> list[dict]:
        rows = await recovery_case_crud.list_filtered(self.db, phase=phase, status=status)
        return [_recovery_dict(r) for r in rows]

    async def get_case(self, recovery_id: UUID) -> dict:
        recovery = await self._get_model(recovery_id)
        return {
            **_recovery_dict(recovery),
            "joint_debtors": [j.to_dict() for j in recovery.joint_debtors],
        }

    async def create_case(self, debtor_id: UUID, **fields) -> dict:
        """
        Open a recovery case against an existing person.

        The debtor's current data is copied onto the case as a snapshot.
        """
        debtor = await person_crud.get_by_id(self.db, debtor_id)
        if debtor is None:
            raise NotFoundError("Debtor", debtor_id)
        await check_references(self.db, fields)
        if fields.get("updated_value") is None:
            fields["updated_value"] = fields["original_value"]

        code = await recovery_case_crud.next_code(self.db, date.today().year)
        recovery = await recovery_case_crud.create(
            self.db,
            code=code,
            debtor_id=debtor.id,
            **self._debtor_snapshot(debtor),
            **fields,
        )
        logger.info("Recovery case created", extra={"recovery_id": str(recovery.id), "code": code})
        return await self.get_case(recovery.id)

    @staticmethod
    def _debtor_snapshot(debtor: PersonModel, activity: str | None = None) -> dict:
        address = ", ".join(p for p in (debtor.street, debtor.number, debtor.city, debtor.state) if p)
        return {
            "debtor_name": debtor.name,
            "debtor_tax_id": debtor.tax_id,
            "debtor_kind": debtor.subtype.value,
            "debtor_address": address or None,
            "debtor_phone": debtor.mobile or debtor.phone,
            "debtor_email": debtor.email,
            "debtor_activity": activity or debtor.profession,
        }

    async def _wizard_debtor(self, debtor: dict) -> PersonModel:
        """Reuse the given person, or one with the same tax id, else register an opposing party."""
        if debtor.get("person_id"):
            person = await person_crud.get_by_id(self.db, debtor["person_id"])
            if person is None:
                raise NotFoundError("Debtor", debtor["person_id"])
            return person

        tax_id = (debtor.get("tax_id") or "").strip() or None
        if tax_id:
            person = await person_crud.get_by_tax_id(self.db, tax_id)
            if person is not None:
                return person

        person = await person_crud.create(
            self.db,
            type=PersonType.OPPOSING_PARTY,
            subtype=debtor["subtype"],
            name=debtor["name"],
            tax_id=tax_id,
            street=debtor.get("address"),
            city=debtor.get("city"),
            state=debtor["state"].upper() if debtor.get("state") else None,
            mobile=debtor.get("phone"),
            email=(debtor.get("email") or "").strip() or None,
            profession=debtor.get("activity"),
        )
        logger.info("Debtor registered from wizard", extra={"person_id": str(person.id)})
        return person

    async def create_from_wizard(
        self,
        debtor: dict,
        original_value: int,
        monetary_correction: int = 0,
        interest: int = 0,
        analysis: dict | None = None,
        joint_debtors: list[dict] | None = None,
        **fields,
    ) -> dict:
        """
        Create a recovery case from the intake wizard.

        Runs inside the request transaction: the debtor person (reused or
        created), the case and its joint debtors commit or roll back
        together. The updated value is the original value plus monetary
        correction and interest.
        """
        await check_references(self.db, fields)
        for joint in joint_debtors or []:
            await check_references(self.db, joint)
        person = await self._wizard_debtor(debtor)
        analysis = analysis or {}
        code = await recovery_case_crud.next_code(self.db, date.today().year)

        recovery = await recovery_case_crud.create(
            self.db,
            code=code,
            debtor_id=person.id,
            phase=RecoveryPhase.INVESTIGATION,
            original_value=original_value,
            updated_value=original_value + monetary_correction + interest,
            score=analysis.get("score"),
            score_factors=analysis.get("score_factors"),
            ai_strategy=analysis.get("strategy"),
            **self._debtor_snapshot(person, activity=debtor.get("activity")),
            **fields,
        )
        for joint in joint_debtors or []:
            await joint_debtor_crud.create(self.db, recovery_case_id=recovery.id, **joint)

        logger.info(
            "Recovery case created from wizard",
            extra={
                "recovery_id": str(recovery.id),
                "code": code,
                "debtor_id": str(person.id),
                "joint_debtors": len(joint_debtors or []),
            },
        )
        return await self.get_case(recovery.id)

    async def _update(self, recovery_id: UUID, **fields) -> dict:
        recovery = await recovery_case_crud.update_by_id(self.db, recovery_id, **fields)
        if recovery is None:
            raise NotFoundError("Recovery case", recovery_id)
        return await self.get_case(recovery_id)

    async def update_phase(self, recovery_id: UUID, phase: RecoveryPhase, status: RecoveryStatus | None = None) -> dict:
        fields = {"phase": phase}
        if status is not None:
            fields["status"] = status
        result = await self._update(recovery_id, **fields)
        logger.info("Recovery phase changed", extra={"recovery_id": str(recovery_id), "phase": phase.value})
        return result

    async def update_score(self, recovery_id: UUID, score: int, score_factors: dict | None = None) -> dict:
        return await self._update(recovery_id, score=score, score_factors=score_factors)

    async def update_strategy(self, recovery_id: UUID, ai_strategy: str) -> dict:
        return await self._update(recovery_id, ai_strategy=ai_strategy)

    async def delete_case(self, recovery_id: UUID) -> None:
        if not await recovery_case_crud.delete_by_id(self.db, recovery_id):
            raise NotFoundError("Recovery case", recovery_id)
        logger.info("Recovery case deleted", extra={"recovery_id": str(recovery_id)})

    async def dashboard(self) -> dict:
        """Totals over ACTIVE cases, with count and value per phase."""
        rows = await recovery_case_crud.active_rows(self.db)
        by_phase = {phase.value: {"count": 0, "value": 0} for phase in RecoveryPhase}
        scores = [r.score for r in rows if r.score is not None]

        for row in rows:
            bucket = by_phase[row.phase.value]
            bucket["count"] += 1
            bucket["value"] += row.updated_value or row.original_value

        return {
            "total_active": len(rows),
            "total_original_value": sum(r.original_value for r in rows),
            "total_updated_value": sum(r.updated_value or r.original_value for r in rows),
            "total_recovered_value": sum(r.recovered_value for r in rows),
            "total_blocked_value": sum(r.blocked_value + r.seized_value for r in rows),
            "average_score": sum(scores) / len(scores) if scores else None,
            "by_phase": by_phase,
        }

    async def analyze(
        self,
        recovery_id: UUID,
        analysis_type: RecoveryAnalysisType,
        extra_data: str | None = None,
        user_id: UUID | None = None,
    ) -> dict:
        """
        Run one model analysis over a recovery case.

        Petition drafting and fraud detection use the premium tier. The
        model text is returned unchanged and the call is logged to the AI
        usage log.

        Raises:
            NotFoundError: If the recovery case does not exist
            ExternalServiceError: If the model provider fails
        """
        recovery = await self._get_model(recovery_id)
        config = self.model_configs[tier_for_analysis(analysis_type)]

        messages = RECOVERY_PROMPT.format_messages(
            system_prompt=build_recovery_system_prompt(
                analysis_type, render_case_context(recovery), extra_data
            ),
            analysis_type=analysis_type.value,
        )
        result = await self.writer.ainvoke(config, messages)
        cost = estimate_cost(config, result.usage.tokens_in, result.usage.tokens_out)

        await ai_usage_crud.create(
            self.db,
            user_id=user_id,
            action=ANALYSIS_ACTION,
            document_type=analysis_type.value,
            model=result.model,
            tier=result.tier,
            tokens_in=result.usage.tokens_in,
            tokens_out=result.usage.tokens_out,
            duration_ms=result.usage.duration_ms,
            estimated_cost=cost,
            case_id=recovery.case_id,
        )
        logger.info(
            "Recovery analysis completed",
            extra={
                "recovery_id": str(recovery_id),
                "analysis_type": analysis_type.value,
                "model": result.model,
                "tokens_in": result.usage.tokens_in,
                "tokens_out": result.usage.tokens_out,
            },
        )
        return {
            "analysis_type": analysis_type,
            "model": result.model,
            "tier": result.tier.value,
            "text": result.text,
            "tokens_in": result.usage.tokens_in,
            "tokens_out": result.usage.tokens_out,
            "estimated_cost": cost,
        }
