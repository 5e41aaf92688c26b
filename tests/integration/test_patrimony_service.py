"""
Integration tests for PatrimonyService.

System role: Verification of client assets, snapshots and the summary
"""

import uuid

import pytest

from lexoffice.application.services import PatrimonyService
from lexoffice.application.services.patrimony_service import AssetKind
from lexoffice.core.enums import CropType, FinancialPeriod, PropertyOwnership, VehicleCategory
from lexoffice.core.exceptions import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def patrimony_service(test_async_db) -> PatrimonyService:
    return PatrimonyService(test_async_db)


@pytest.fixture
async def farm(patrimony_service, client_person) -> dict:
    return await patrimony_service.create_asset(
        AssetKind.RURAL_PROPERTY,
        client_person["id"],
        name="Fazenda Boa Vista",
        state="mt",
        total_area=1_200.0,
        estimated_value=5_000_000,
        has_lien=True,
        lien_amount=2_000_000,
    )


class TestAssets:
    @pytest.mark.asyncio
    async def test_create_normalizes_state_and_defaults(self, farm) -> None:
        assert farm["state"] == "MT"
        assert farm["ownership"] == PropertyOwnership.OWNED
        assert farm["is_active"] is True

    @pytest.mark.asyncio
    async def test_unknown_client_is_not_found(self, patrimony_service) -> None:
        with pytest.raises(NotFoundError):
            await patrimony_service.create_asset(
                AssetKind.VEHICLE, uuid.uuid4(), category=VehicleCategory.TRACTOR
            )

    @pytest.mark.asyncio
    async def test_soft_deleted_asset_leaves_listing(self, patrimony_service, client_person, farm) -> None:
        # Act
        await patrimony_service.delete_asset(AssetKind.RURAL_PROPERTY, client_person["id"], farm["id"])
        listing = await patrimony_service.list_assets(AssetKind.RURAL_PROPERTY, client_person["id"])

        # Assert
        assert listing == []
        with pytest.raises(NotFoundError):
            await patrimony_service.update_asset(
                AssetKind.RURAL_PROPERTY, client_person["id"], farm["id"], name="Again"
            )

    @pytest.mark.asyncio
    async def test_asset_of_other_client_is_not_found(self, patrimony_service, farm) -> None:
        with pytest.raises(NotFoundError):
            await patrimony_service.delete_asset(AssetKind.RURAL_PROPERTY, uuid.uuid4(), farm["id"])


class TestProductions:
    @pytest.mark.asyncio
    async def test_property_must_belong_to_client(self, patrimony_service, test_async_db, farm) -> None:
        from lexoffice.application.services import PersonService
        from lexoffice.core.enums import PersonSubtype, PersonType

        other = await PersonService(test_async_db).create_person(
            type=PersonType.CLIENT, subtype=PersonSubtype.INDIVIDUAL, name="Other farmer"
        )

        with pytest.raises(ValidationError):
            await patrimony_service.create_production(
                other["id"], harvest_year="2024/2025", crop=CropType.SOY, rural_property_id=farm["id"]
            )

    @pytest.mark.asyncio
    async def test_filter_by_harvest_year(self, patrimony_service, client_person, farm) -> None:
        for year in ("2023/2024", "2024/2025"):
            await patrimony_service.create_production(
                client_person["id"], harvest_year=year, crop=CropType.CORN, rural_property_id=farm["id"]
            )

        rows = await patrimony_service.list_productions(client_person["id"], harvest_year="2024/2025")

        assert [r["harvest_year"] for r in rows] == ["2024/2025"]


class TestSnapshots:
    @pytest.mark.asyncio
    async def test_annual_snapshot_forces_quarter_zero(self, patrimony_service, client_person) -> None:
        snapshot = await patrimony_service.create_financial(
            client_person["id"], year=2023, period=FinancialPeriod.ANNUAL, quarter=3, equity=1_000, net_income=100
        )

        assert snapshot["quarter"] == 0
        assert snapshot["indicators"]["roe"] == pytest.approx(10.0)
        assert snapshot["indicators"]["current_ratio"] is None

    @pytest.mark.asyncio
    async def test_duplicate_period_conflicts(self, patrimony_service, client_person) -> None:
        await patrimony_service.create_financial(client_person["id"], year=2023)

        with pytest.raises(ConflictError):
            await patrimony_service.create_financial(client_person["id"], year=2023, quarter=2)

    @pytest.mark.asyncio
    async def test_quarters_of_same_year_coexist(self, patrimony_service, client_person) -> None:
        for quarter in (1, 2):
            await patrimony_service.create_financial(
                client_person["id"], year=2024, period=FinancialPeriod.QUARTERLY, quarter=quarter
            )

        assert len(await patrimony_service.list_financial(client_person["id"], year=2024)) == 2

    @pytest.mark.asyncio
    async def test_operational_snapshot_is_unique_per_year(self, patrimony_service, client_person) -> None:
        created = await patrimony_service.create_operational(client_person["id"], 2024, employees=40)

        with pytest.raises(ConflictError):
            await patrimony_service.create_operational(client_person["id"], 2024)

        updated = await patrimony_service.update_operational(client_person["id"], 2024, employees=45)
        assert created["employees"] == 40
        assert updated["employees"] == 45

    @pytest.mark.asyncio
    async def test_missing_operational_year_is_not_found(self, patrimony_service, client_person) -> None:
        with pytest.raises(NotFoundError):
            await patrimony_service.get_operational(client_person["id"], 1999)


class TestSummary:
    @pytest.mark.asyncio
    async def test_summary_over_active_assets(self, patrimony_service, client_person, farm) -> None:
        # Arrange
        client_id = client_person["id"]
        tractor = await patrimony_service.create_asset(
            AssetKind.VEHICLE, client_id, category=VehicleCategory.TRACTOR, estimated_value=300_000
        )
        await patrimony_service.create_asset(
            AssetKind.VEHICLE, client_id, category=VehicleCategory.PICKUP, estimated_value=100_000
        )
        await patrimony_service.delete_asset(AssetKind.VEHICLE, client_id, tractor["id"])
        await patrimony_service.create_production(
            client_id,
            harvest_year="2024/2025",
            crop=CropType.SOY,
            planted_area=800.0,
            total_revenue=900_000,
            production_cost=600_000,
        )
        await patrimony_service.create_financial(client_id, year=2024, equity=2_000_000, total_debt=1_000_000)

        # Act
        summary = await patrimony_service.summary(client_id)

        # Assert
        assert summary["total_assets"] == 5_100_000
        assert summary["total_lien_amount"] == 2_000_000
        assert summary["free_assets"] == 100_000
        assert summary["counts"]["vehicles"] == 1
        assert summary["total_owned_area"] == pytest.approx(1_200.0)
        assert summary["current_harvest"]["profit"] == 300_000
        assert summary["latest_financial"]["indicators"]["debt_to_equity"] == pytest.approx(0.5)
        assert summary["latest_operational"] is None
