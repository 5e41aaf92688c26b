"""
Integration tests for TeamService OKRs and KPIs.

System role: Verification of OKR check-ins and KPI snapshots
"""

import uuid
from datetime import date

import pytest

from lexoffice.application.services import TeamService
from lexoffice.core.enums import OKRCategory, OKRStatus
from lexoffice.core.exceptions import NotFoundError, PreconditionFailedError, ValidationError


@pytest.fixture
def team_service(test_async_db) -> TeamService:
    return TeamService(test_async_db)


def _key_results():
    return [
        {"title": "Briefs filed", "metric": "count", "target_value": 10, "current_value": 0, "unit": None, "weight": 100},
        {"title": "Clients won", "metric": "count", "target_value": 4, "current_value": 1, "unit": None, "weight": 100},
    ]


async def _okr(team_service, user_id, **extra):
    return await team_service.create_okr(
        user_id=user_id,
        quarter=1,
        year=2024,
        objective="Grow the restructuring practice",
        category=OKRCategory.BUSINESS_DEVELOPMENT,
        key_results=_key_results(),
        **extra,
    )


class TestOKRs:
    @pytest.mark.asyncio
    async def test_create_starts_from_current_values(self, team_service, lawyer) -> None:
        okr = await _okr(team_service, lawyer["id"])

        assert okr["status"] == OKRStatus.DRAFT
        assert okr["overall_progress"] == pytest.approx(12.5)
        assert okr["user"]["name"] == "Ana Souza"

    @pytest.mark.asyncio
    async def test_unknown_member_is_not_found(self, team_service) -> None:
        with pytest.raises(NotFoundError):
            await _okr(team_service, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_check_in_recomputes_progress(self, team_service, lawyer) -> None:
        okr = await _okr(team_service, lawyer["id"])

        updated = await team_service.check_in(okr["id"], {0: 5, 1: 4, 7: 100})

        assert [kr["current_value"] for kr in updated["key_results"]] == [5, 4]
        assert updated["overall_progress"] == pytest.approx(75.0)

    @pytest.mark.asyncio
    async def test_close_freezes_score_and_blocks_check_ins(self, team_service, lawyer) -> None:
        okr = await _okr(team_service, lawyer["id"])
        await team_service.check_in(okr["id"], {0: 10})

        closed = await team_service.close_okr(okr["id"], manager_comment="Solid quarter")

        assert closed["status"] == OKRStatus.CLOSED
        assert closed["final_score"] == pytest.approx(62.5)
        assert closed["manager_comment"] == "Solid quarter"
        with pytest.raises(PreconditionFailedError):
            await team_service.check_in(okr["id"], {0: 1})

    @pytest.mark.asyncio
    async def test_children_and_parent_rules(self, team_service, lawyer) -> None:
        parent = await _okr(team_service, lawyer["id"])
        child = await _okr(team_service, lawyer["id"], parent_okr_id=parent["id"])

        detail = await team_service.get_okr(parent["id"])
        assert [c["id"] for c in detail["children"]] == [child["id"]]

        with pytest.raises(ValidationError):
            await team_service.update_okr(parent["id"], parent_okr_id=parent["id"])
        with pytest.raises(NotFoundError):
            await team_service.update_okr(child["id"], parent_okr_id=uuid.uuid4())

        await team_service.delete_okr(parent["id"])
        assert (await team_service.get_okr(child["id"]))["parent_okr_id"] is None

    @pytest.mark.asyncio
    async def test_update_key_results_and_ignored_nulls(self, team_service, lawyer) -> None:
        okr = await _okr(team_service, lawyer["id"])
        key_results = _key_results()
        key_results[0]["current_value"] = 10

        updated = await team_service.update_okr(okr["id"], key_results=key_results, objective=None)

        assert updated["overall_progress"] == pytest.approx(62.5)
        assert updated["objective"] == "Grow the restructuring practice"

    @pytest.mark.asyncio
    async def test_list_filters(self, team_service, lawyer) -> None:
        await _okr(team_service, lawyer["id"])
        await _okr(team_service, lawyer["id"], status=OKRStatus.ACTIVE)

        result = await team_service.list_okrs(user_id=lawyer["id"], status=OKRStatus.ACTIVE)

        assert result["total"] == 1
        assert result["pages"] == 1


class TestKPIs:
    @pytest.mark.asyncio
    async def test_second_entry_for_the_month_replaces_fields(self, team_service, lawyer) -> None:
        first = await team_service.record_kpi(lawyer["id"], date(2024, 3, 12), billable_hours=100, overall_score=70)

        second = await team_service.record_kpi(lawyer["id"], date(2024, 3, 28), overall_score=85)

        assert second["id"] == first["id"]
        assert second["period"] == date(2024, 3, 1)
        assert second["billable_hours"] == 100
        assert second["overall_score"] == 85
        assert (await team_service.list_kpis(user_id=lawyer["id"]))["total"] == 1

    @pytest.mark.asyncio
    async def test_unknown_member_is_not_found(self, team_service) -> None:
        with pytest.raises(NotFoundError):
            await team_service.record_kpi(uuid.uuid4(), date(2024, 3, 1))

    @pytest.mark.asyncio
    async def test_dashboard_window(self, team_service, lawyer) -> None:
        await team_service.record_kpi(lawyer["id"], date(2024, 6, 1), billable_hours=120, overall_score=90)
        await team_service.record_kpi(lawyer["id"], date(2024, 5, 1), billable_hours=100, overall_score=70)
        await team_service.record_kpi(lawyer["id"], date(2023, 1, 1), billable_hours=10, overall_score=10)

        result = await team_service.kpi_dashboard(months=6, today=date(2024, 6, 20))

        (member,) = result["member_averages"]
        assert member["name"] == "Ana Souza"
        assert member["entries"] == 2
        assert member["avg_overall_score"] == 80
        assert [t["month"] for t in result["trends"]] == ["2024-05", "2024-06"]
