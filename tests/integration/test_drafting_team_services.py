"""
Integration tests for DraftingService and TeamService.

System role: Verification of drafting context, usage logging and workload analytics
"""

from contextlib import asynccontextmanager
from datetime import date, datetime, timezone

import pytest

from lexoffice.application.services import (
    DeadlineService,
    DraftingService,
    LibraryService,
    ProjectService,
    TeamService,
    UserService,
)
from lexoffice.application.services.holiday_cache import HolidayCache
from lexoffice.configs.ai import AISettings
from lexoffice.core.agentic_system import build_model_configs
from lexoffice.core.enums import CaseType, LibraryEntryType, ModelTier, ProjectCategory, TaskStatus, UserRole
from lexoffice.core.exceptions import NotFoundError


class FakeWriter:
    """Streams two chunks and fills in usage like the real agent."""

    def __init__(self) -> None:
        self.calls = []

    async def astream(self, config, messages, usage):
        self.calls.append((config, messages))
        yield "EXCELENTISSIMO "
        yield "SENHOR JUIZ"
        usage.tokens_in = 1_000
        usage.tokens_out = 500
        usage.duration_ms = 40


@pytest.fixture
def writer():
    return FakeWriter()


@pytest.fixture
def drafting_service(test_async_db, writer):
    @asynccontextmanager
    async def session_factory():
        yield test_async_db

    configs = build_model_configs(AISettings(standard_model="std-model", premium_model="pro-model"))
    return DraftingService(test_async_db, writer=writer, model_configs=configs, session_factory=session_factory)


class TestDrafting:
    @pytest.mark.asyncio
    async def test_prepare_picks_tier_and_library_references(self, drafting_service, test_async_db, case):
        library = LibraryService(test_async_db)
        await library.create_entry(
            type=LibraryEntryType.CASE_LAW,
            title="Essential assets during the stay period",
            area=CaseType.JUDICIAL_RECOVERY,
            relevance=9,
        )
        await library.create_entry(
            type=LibraryEntryType.CASE_LAW, title="Unrelated labor ruling", area=CaseType.LITIGATION
        )

        prepared = await drafting_service.prepare(
            document_type="PLAN_OBJECTION", instructions="Focus on the haircut", case_id=case["id"]
        )

        assert prepared.config.tier == ModelTier.PREMIUM
        system, human = prepared.messages
        assert "0001234-56.2024.8.11.0001" in system.content
        assert "Agro Vale Ltda" in system.content
        assert "Essential assets during the stay period" in system.content
        assert "Unrelated labor ruling" not in system.content
        assert "Focus on the haircut" in human.content

    @pytest.mark.asyncio
    async def test_standard_documents_and_force_premium(self, drafting_service):
        standard = await drafting_service.prepare(document_type="FORMAL_EMAIL")
        unknown = await drafting_service.prepare(document_type="SOMETHING_NEW")
        forced = await drafting_service.prepare(document_type="FORMAL_EMAIL", force_premium=True)

        assert standard.config.model == "std-model"
        assert unknown.config.tier == ModelTier.STANDARD
        assert forced.config.model == "pro-model"

    @pytest.mark.asyncio
    async def test_project_context_uses_category_area(self, drafting_service, test_async_db, client_person):
        project = await ProjectService(test_async_db).create_project(
            title="Collect CPR", category=ProjectCategory.DEBT_RECOVERY, client_id=client_person["id"]
        )
        await LibraryService(test_async_db).create_entry(
            type=LibraryEntryType.TEMPLATE, title="CPR enforcement model", area=CaseType.CREDIT_RECOVERY
        )

        prepared = await drafting_service.prepare(document_type="JUDGMENT_ENFORCEMENT", project_id=project["id"])

        assert "Collect CPR" in prepared.messages[0].content
        assert "CPR enforcement model" in prepared.messages[0].content

    @pytest.mark.asyncio
    async def test_unknown_case_is_not_found(self, drafting_service, record_id):
        with pytest.raises(NotFoundError):
            await drafting_service.prepare(document_type="DEFENSE", case_id=record_id)

    @pytest.mark.asyncio
    async def test_stream_then_usage_report(self, drafting_service, lawyer):
        prepared = await drafting_service.prepare(document_type="FORMAL_EMAIL", user_id=lawyer["id"])

        chunks = [chunk async for chunk in drafting_service.stream(prepared)]
        report = await drafting_service.usage_report()

        assert "".join(chunks) == "EXCELENTISSIMO SENHOR JUIZ"
        assert report["total_requests"] == 1
        assert report["total_tokens_in"] == 1_000
        assert report["total_tokens_out"] == 500
        assert report["by_action"][0]["key"] == "generate"
        assert report["by_model"][0]["key"] == "std-model"
        assert report["total_estimated_cost"] == pytest.approx(1_000 / 1e6 * 0.30 + 500 / 1e6 * 2.50)


class TestTeamAnalytics:
    NOW = datetime(2024, 1, 3, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_counts_per_member(self, test_async_db, case, lawyer):
        intern = await UserService(test_async_db).create_user(
            name="Zeca Estagiario", email="zeca@firm.com", role=UserRole.INTERN
        )
        deadlines = DeadlineService(test_async_db, holiday_cache=HolidayCache())
        for due, title in ((date(2024, 1, 5), "Soon"), (date(2024, 1, 20), "Later"), (date(2024, 1, 1), "Late")):
            await deadlines.create_deadline(
                case_id=case["id"], due_date=due, title=title, responsible_id=lawyer["id"]
            )

        projects = ProjectService(test_async_db)
        project = await projects.create_project(title="Release")
        await projects.add_task(project["id"], title="Open", assignee_id=lawyer["id"])
        await projects.add_task(project["id"], title="Done", assignee_id=lawyer["id"], status=TaskStatus.DONE)

        result = await TeamService(test_async_db).analytics(now=self.NOW)

        members = {m["user_id"]: m for m in result["members"]}
        ana = members[lawyer["id"]]
        assert ana["pending_deadlines"] == 3
        assert ana["overdue_deadlines"] == 1
        assert ana["deadlines_next_7_days"] == 1
        assert ana["open_tasks"] == 1

        zeca = members[intern["id"]]
        assert zeca["pending_deadlines"] == 0
        assert zeca["open_tasks"] == 0

        assert [m["name"] for m in result["members"]] == ["Ana Souza", "Zeca Estagiario"]
        assert result["totals"]["members"] == 2
        assert result["totals"]["pending_deadlines"] == 3
