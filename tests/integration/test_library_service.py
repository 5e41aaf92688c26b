"""Integration tests for LibraryService search, tags and favorites."""

import uuid

import pytest

from lexoffice.application.services import LibraryService
from lexoffice.core.enums import CaseType, LibraryEntryType, LibraryOrder
from lexoffice.core.exceptions import NotFoundError


@pytest.fixture
def service(test_async_db):
    return LibraryService(test_async_db)


@pytest.fixture
async def entries(service) -> dict:
    precedent = await service.create_entry(
        type=LibraryEntryType.CASE_LAW,
        title="STJ REsp on essential assets",
        summary="Stay period protects harvest machinery",
        area=CaseType.JUDICIAL_RECOVERY,
        relevance=5,
        tags=[" stay period ", "essential assets", "stay period", ""],
    )
    statute = await service.create_entry(
        type=LibraryEntryType.STATUTE,
        title="Law 11.101 art. 49",
        area=CaseType.JUDICIAL_RECOVERY,
        relevance=3,
        tags=["claims"],
    )
    template = await service.create_entry(
        type=LibraryEntryType.TEMPLATE,
        title="Enforcement petition",
        content="Template for CPR enforcement",
        area=CaseType.CREDIT_RECOVERY,
        relevance=1,
        metadata={"court": "TJMT"},
    )
    return {"precedent": precedent, "statute": statute, "template": template}


class TestEntries:
    async def test_create_normalizes_tags_and_metadata(self, entries):
        assert entries["precedent"]["tags"] == ["essential assets", "stay period"]
        assert entries["precedent"]["metadata"] == {}
        assert entries["template"]["metadata"] == {"court": "TJMT"}
        assert entries["template"]["tags"] == []
        assert "entry_metadata" not in entries["template"]

    async def test_update_replaces_tags(self, service, entries):
        entry_id = entries["precedent"]["id"]

        updated = await service.update_entry(entry_id, tags=["stay period", "agribusiness"], relevance=4)

        assert updated["tags"] == ["agribusiness", "stay period"]
        assert updated["relevance"] == 4

    async def test_update_without_tags_keeps_them(self, service, entries):
        updated = await service.update_entry(entries["statute"]["id"], title="Law 11.101 art. 49 §3")
        assert updated["tags"] == ["claims"]
        assert updated["title"] == "Law 11.101 art. 49 §3"

    async def test_toggle_favorite(self, service, entries):
        entry_id = entries["statute"]["id"]
        assert (await service.toggle_favorite(entry_id))["favorite"] is True
        assert (await service.toggle_favorite(entry_id))["favorite"] is False

    async def test_delete_and_missing(self, service, entries):
        await service.delete_entry(entries["template"]["id"])
        with pytest.raises(NotFoundError):
            await service.get_entry(entries["template"]["id"])
        with pytest.raises(NotFoundError):
            await service.delete_entry(uuid.uuid4())
        with pytest.raises(NotFoundError):
            await service.toggle_favorite(uuid.uuid4())

    async def test_distinct_tags(self, service, entries):
        assert await service.list_tags() == ["claims", "essential assets", "stay period"]


class TestSearch:
    async def test_text_search_is_case_insensitive(self, service, entries):
        page = await service.list_entries(search="  HARVEST ")
        assert [e["id"] for e in page["items"]] == [entries["precedent"]["id"]]

        page = await service.list_entries(search="cpr")
        assert [e["id"] for e in page["items"]] == [entries["template"]["id"]]

    async def test_filters(self, service, entries):
        by_area = await service.list_entries(areas=[CaseType.JUDICIAL_RECOVERY])
        assert by_area["total"] == 2

        by_type = await service.list_entries(types=[LibraryEntryType.TEMPLATE, LibraryEntryType.STATUTE])
        assert by_type["total"] == 2

        by_tag = await service.list_entries(tags=["claims", "unknown"])
        assert [e["id"] for e in by_tag["items"]] == [entries["statute"]["id"]]

        relevant = await service.list_entries(min_relevance=3)
        assert relevant["total"] == 2

    async def test_favorite_filter(self, service, entries):
        await service.toggle_favorite(entries["template"]["id"])

        favorites = await service.list_entries(favorite=True)
        others = await service.list_entries(favorite=False)

        assert [e["id"] for e in favorites["items"]] == [entries["template"]["id"]]
        assert others["total"] == 2

    async def test_ordering_and_pages(self, service, entries):
        by_relevance = await service.list_entries(order=LibraryOrder.RELEVANCE)
        assert [e["relevance"] for e in by_relevance["items"]] == [5, 3, 1]

        by_title = await service.list_entries(order=LibraryOrder.TITLE)
        assert [e["title"] for e in by_title["items"]] == [
            "Enforcement petition",
            "Law 11.101 art. 49",
            "STJ REsp on essential assets",
        ]

        second = await service.list_entries(order=LibraryOrder.RELEVANCE, page=2, limit=2)
        assert second["total"] == 3
        assert second["pages"] == 2
        assert [e["relevance"] for e in second["items"]] == [1]

    async def test_empty_result_has_zero_pages(self, service):
        page = await service.list_entries(search="nothing")
        assert page == {"items": [], "total": 0, "page": 1, "pages": 0}
