"""
Integration tests for the user, person and case services.

Runs against in-memory SQLite with foreign keys enforced.

System role: Verification of CRM and case persistence rules
"""

import uuid

import pytest

from lexoffice.application.services import CaseService, PersonService, UserService
from lexoffice.core.enums import CaseStatus, CaseType, PersonDocumentType, PersonSubtype, PersonType, UserRole
from lexoffice.core.exceptions import ConflictError, NotFoundError, PreconditionFailedError, ValidationError


class TestUserService:
    @pytest.mark.asyncio
    async def test_email_is_normalized(self, lawyer) -> None:
        assert lawyer["email"] == "ana@firm.com"
        assert lawyer["active"] is True

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, test_async_db, lawyer) -> None:
        service = UserService(test_async_db)

        with pytest.raises(ConflictError):
            await service.create_user(name="Other", email="ANA@firm.com", role=UserRole.INTERN)

    @pytest.mark.asyncio
    async def test_deactivated_users_leave_listing(self, test_async_db, lawyer) -> None:
        # Arrange
        service = UserService(test_async_db)

        # Act
        result = await service.deactivate_user(lawyer["id"])
        active = await service.list_active()

        # Assert
        assert result["active"] is False
        assert active == []

    @pytest.mark.asyncio
    async def test_get_unknown_user_raises(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await UserService(test_async_db).get_user(uuid.uuid4())


class TestPersonService:
    @pytest.mark.asyncio
    async def test_create_normalizes_state(self, client_person) -> None:
        assert client_person["state"] == "MT"
        assert client_person["type"] == PersonType.CLIENT

    @pytest.mark.asyncio
    async def test_duplicate_tax_id_conflicts(self, test_async_db, client_person) -> None:
        with pytest.raises(ConflictError):
            await PersonService(test_async_db).create_person(
                type=PersonType.CREDITOR,
                subtype=PersonSubtype.COMPANY,
                name="Copycat",
                tax_id=client_person["tax_id"],
            )

    @pytest.mark.asyncio
    async def test_blank_tax_ids_do_not_collide(self, test_async_db) -> None:
        service = PersonService(test_async_db)

        first = await service.create_person(
            type=PersonType.WITNESS, subtype=PersonSubtype.INDIVIDUAL, name="A", tax_id="  "
        )
        second = await service.create_person(
            type=PersonType.WITNESS, subtype=PersonSubtype.INDIVIDUAL, name="B", tax_id=""
        )

        assert first["tax_id"] is None
        assert second["tax_id"] is None

    @pytest.mark.asyncio
    async def test_list_paginates_by_name_with_cursor(self, test_async_db) -> None:
        # Arrange
        service = PersonService(test_async_db)
        for name in ("Carla", "Bruno", "Alice"):
            await service.create_person(type=PersonType.CLIENT, subtype=PersonSubtype.INDIVIDUAL, name=name)

        # Act
        first_page = await service.list_persons(limit=2)
        second_page = await service.list_persons(limit=2, cursor=first_page["next_cursor"])

        # Assert
        assert [p["name"] for p in first_page["items"]] == ["Alice", "Bruno"]
        assert first_page["total"] == 3
        assert [p["name"] for p in second_page["items"]] == ["Carla"]
        assert second_page["next_cursor"] is None

    @pytest.mark.asyncio
    async def test_unknown_cursor_is_rejected(self, test_async_db) -> None:
        with pytest.raises(ValidationError):
            await PersonService(test_async_db).list_persons(limit=10, cursor=uuid.uuid4())

    @pytest.mark.asyncio
    async def test_search_matches_tax_id_and_name(self, test_async_db, client_person) -> None:
        service = PersonService(test_async_db)

        by_tax_id = await service.search_persons("0001-90")
        by_name = await service.search_persons("agro")

        assert [p["id"] for p in by_tax_id] == [client_person["id"]]
        assert [p["name"] for p in by_name] == ["Agro Vale Ltda"]

    @pytest.mark.asyncio
    async def test_referenced_person_cannot_be_deleted(self, test_async_db, client_person, case) -> None:
        with pytest.raises(PreconditionFailedError) as exc_info:
            await PersonService(test_async_db).delete_person(client_person["id"])

        assert exc_info.value.details["references"] == {"cases": 1}

    @pytest.mark.asyncio
    async def test_unreferenced_person_is_deleted_with_documents(self, test_async_db, client_person) -> None:
        # Arrange
        service = PersonService(test_async_db)
        await service.add_document(
            client_person["id"], type=PersonDocumentType.CONTRACT, title="Social contract"
        )

        # Act
        await service.delete_person(client_person["id"])

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_person(client_person["id"])

    @pytest.mark.asyncio
    async def test_detail_lists_cases_and_documents(self, test_async_db, client_person, case) -> None:
        service = PersonService(test_async_db)
        document = await service.add_document(
            client_person["id"], type=PersonDocumentType.POWER_OF_ATTORNEY, title="POA"
        )

        detail = await service.get_person(client_person["id"])

        assert [c["case_number"] for c in detail["cases"]] == [case["case_number"]]
        assert [d["id"] for d in detail["documents"]] == [document["id"]]

    @pytest.mark.asyncio
    async def test_remove_document_of_other_person_is_not_found(self, test_async_db, client_person) -> None:
        service = PersonService(test_async_db)
        document = await service.add_document(client_person["id"], type=PersonDocumentType.OTHER, title="x")

        with pytest.raises(NotFoundError):
            await service.remove_document(uuid.uuid4(), document["id"])


class TestCaseService:
    @pytest.mark.asyncio
    async def test_create_returns_detail_with_summaries(self, case, client_person, lawyer) -> None:
        assert case["status"] == CaseStatus.ACTIVE
        assert case["state"] == "MT"
        assert case["client"]["id"] == client_person["id"]
        assert case["responsible"]["id"] == lawyer["id"]
        assert case["deadlines"] == []
        assert case["creditors"] == []

    @pytest.mark.asyncio
    async def test_duplicate_case_number_conflicts(self, test_async_db, case, client_person) -> None:
        with pytest.raises(ConflictError):
            await CaseService(test_async_db).create_case(
                case_number=case["case_number"],
                type=CaseType.LITIGATION,
                client_id=client_person["id"],
            )

    @pytest.mark.asyncio
    async def test_unknown_client_is_not_found(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await CaseService(test_async_db).create_case(
                case_number="1",
                type=CaseType.LITIGATION,
                client_id=uuid.uuid4(),
            )

    @pytest.mark.asyncio
    async def test_update_and_select_listing(self, test_async_db, case) -> None:
        # Arrange
        service = CaseService(test_async_db)

        # Act
        updated = await service.update_case(case["id"], status=CaseStatus.ARCHIVED)
        selectable = await service.cases_for_select()

        # Assert
        assert updated["status"] == CaseStatus.ARCHIVED
        assert selectable == []

    @pytest.mark.asyncio
    async def test_delete_unknown_case_raises(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await CaseService(test_async_db).delete_case(uuid.uuid4())
