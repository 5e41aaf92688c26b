"""
Unit tests for patrimony aggregation and financial indicators.

System role: Verification of patrimony domain logic
"""

from types import SimpleNamespace

import pytest

from lexoffice.core.enums import CropType, PropertyOwnership
from lexoffice.core.patrimony import financial_indicators, harvest_overview, summarize_patrimony


def _asset(value, has_lien=False, lien_amount=None, has_judicial_block=False, **extra):
    return SimpleNamespace(
        estimated_value=value,
        has_lien=has_lien,
        lien_amount=lien_amount,
        has_judicial_block=has_judicial_block,
        **extra,
    )


def _production(year, crop, area, revenue, cost):
    return SimpleNamespace(
        harvest_year=year,
        crop=crop,
        planted_area=area,
        total_revenue=revenue,
        production_cost=cost,
    )


def _snapshot(**values):
    fields = {
        "equity": None,
        "total_debt": None,
        "net_debt": None,
        "ebitda": None,
        "current_assets": None,
        "current_liabilities": None,
        "gross_profit": None,
        "net_revenue": None,
        "net_income": None,
    }
    fields.update(values)
    return SimpleNamespace(**fields)


class TestFinancialIndicators:
    def test_ratios_and_margins(self) -> None:
        # Arrange
        snapshot = _snapshot(
            equity=1_000,
            total_debt=2_000,
            net_debt=1_500,
            ebitda=500,
            current_assets=300,
            current_liabilities=200,
            gross_profit=400,
            net_revenue=2_000,
            net_income=100,
        )

        # Act
        indicators = financial_indicators(snapshot)

        # Assert
        assert indicators["debt_to_equity"] == pytest.approx(2.0)
        assert indicators["net_debt_to_ebitda"] == pytest.approx(3.0)
        assert indicators["current_ratio"] == pytest.approx(1.5)
        assert indicators["gross_margin"] == pytest.approx(20.0)
        assert indicators["ebitda_margin"] == pytest.approx(25.0)
        assert indicators["net_margin"] == pytest.approx(5.0)
        assert indicators["roe"] == pytest.approx(10.0)

    def test_zero_or_missing_denominator_gives_none(self) -> None:
        indicators = financial_indicators(_snapshot(equity=0, total_debt=500, net_income=10))

        assert indicators["debt_to_equity"] is None
        assert indicators["roe"] is None
        assert indicators["gross_margin"] is None

    def test_missing_numerator_counts_as_zero(self) -> None:
        indicators = financial_indicators(_snapshot(net_revenue=1_000))

        assert indicators["net_margin"] == 0.0


class TestHarvestOverview:
    def test_only_latest_harvest_year_is_counted(self) -> None:
        # Arrange
        productions = [
            _production("2022/2023", CropType.SOY, 100.0, 1_000, 600),
            _production("2023/2024", CropType.SOY, 120.0, 1_500, 800),
            _production("2023/2024", CropType.CORN, 80.0, 700, 500),
            _production("2023/2024", CropType.SOY, 10.0, 100, 50),
        ]

        # Act
        overview = harvest_overview(productions)

        # Assert
        assert overview["harvest_year"] == "2023/2024"
        assert overview["planted_area"] == pytest.approx(210.0)
        assert overview["revenue"] == 2_300
        assert overview["cost"] == 1_350
        assert overview["profit"] == 950
        assert overview["crops"] == ["SOY", "CORN"]

    def test_no_productions(self) -> None:
        overview = harvest_overview([])

        assert overview["harvest_year"] is None
        assert overview["crops"] == []


class TestSummarizePatrimony:
    def test_totals_liens_and_free_assets(self) -> None:
        # Arrange
        rural = [
            _asset(10_000, has_lien=True, lien_amount=4_000, total_area=500.0, ownership=PropertyOwnership.OWNED),
            _asset(3_000, total_area=200.0, ownership=PropertyOwnership.LEASED),
        ]
        urban = [_asset(2_000, has_judicial_block=True)]
        vehicles = [_asset(None)]
        participations = [_asset(1_000)]

        # Act
        summary = summarize_patrimony(rural, urban, vehicles, participations)

        # Assert
        assert summary["total_assets"] == 16_000
        assert summary["total_rural_area"] == pytest.approx(700.0)
        assert summary["total_owned_area"] == pytest.approx(500.0)
        assert summary["total_lien_amount"] == 4_000
        assert summary["free_assets"] == 4_000
        assert summary["counts"] == {
            "rural_properties": 2,
            "urban_properties": 1,
            "vehicles": 1,
            "participations": 1,
        }
        assert summary["current_harvest"]["harvest_year"] is None
