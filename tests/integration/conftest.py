"""
Fixtures for service-level integration tests.

Each fixture persists a minimal valid record through the services so the
tests exercise the same code path as the API.
"""

import pytest

from lexoffice.application.services import CaseService, PersonService, UserService
from lexoffice.core.enums import CaseType, PersonSubtype, PersonType, UserRole


@pytest.fixture
async def lawyer(test_async_db) -> dict:
    return await UserService(test_async_db).create_user(
        name="Ana Souza",
        email="Ana@Firm.com ",
        role=UserRole.LAWYER,
    )


@pytest.fixture
async def client_person(test_async_db) -> dict:
    return await PersonService(test_async_db).create_person(
        type=PersonType.CLIENT,
        subtype=PersonSubtype.COMPANY,
        name="Agro Vale Ltda",
        tax_id="12.345.678/0001-90",
        state="mt",
    )


@pytest.fixture
async def case(test_async_db, client_person, lawyer) -> dict:
    return await CaseService(test_async_db).create_case(
        case_number="0001234-56.2024.8.11.0001",
        type=CaseType.JUDICIAL_RECOVERY,
        client_id=client_person["id"],
        responsible_id=lawyer["id"],
        state="mt",
    )
