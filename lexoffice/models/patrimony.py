"""
Patrimony schemas.

Assets, productions, financial and operational snapshots, and the
patrimony summary. Money is centavos, areas are hectares.

Dependencies: pydantic
System role: Patrimony API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import (
    CropType,
    FinancialPeriod,
    HarvestSeason,
    ParticipationType,
    PropertyOwnership,
    UrbanPropertyType,
    VehicleCategory,
)
from lexoffice.models.common import ORMModel


class EncumberableFields(BaseModel):
    estimated_value: int | None = Field(None, ge=0)
    has_lien: bool | None = None
    lien_amount: int | None = Field(None, ge=0)
    lien_holder: str | None = Field(None, max_length=255)
    has_judicial_block: bool | None = None
    notes: str | None = None


class EncumberableResponse(ORMModel):
    id: uuid.UUID
    client_id: uuid.UUID
    estimated_value: int | None = None
    has_lien: bool
    lien_amount: int | None = None
    lien_holder: str | None = None
    has_judicial_block: bool
    notes: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


# Rural properties


class RuralPropertyFields(EncumberableFields):
    registry_number: str | None = Field(None, max_length=64)
    car_code: str | None = Field(None, max_length=64)
    municipality: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    total_area: float | None = Field(None, ge=0)
    productive_area: float | None = Field(None, ge=0)
    legal_reserve_area: float | None = Field(None, ge=0)


class CreateRuralPropertyRequest(RuralPropertyFields):
    name: str = Field(..., min_length=1, max_length=255)
    ownership: PropertyOwnership = PropertyOwnership.OWNED


class UpdateRuralPropertyRequest(RuralPropertyFields):
    name: str | None = Field(None, min_length=1, max_length=255)
    ownership: PropertyOwnership | None = None


class RuralPropertyResponse(EncumberableResponse):
    name: str
    registry_number: str | None = None
    car_code: str | None = None
    municipality: str | None = None
    state: str | None = None
    total_area: float | None = None
    productive_area: float | None = None
    legal_reserve_area: float | None = None
    ownership: PropertyOwnership


# Urban properties


class UrbanPropertyFields(EncumberableFields):
    description: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=128)
    state: str | None = Field(None, min_length=2, max_length=2)
    registry_number: str | None = Field(None, max_length=64)
    area: float | None = Field(None, ge=0)
    rental_income: int | None = Field(None, ge=0)


class CreateUrbanPropertyRequest(UrbanPropertyFields):
    property_type: UrbanPropertyType
    ownership: PropertyOwnership = PropertyOwnership.OWNED


class UpdateUrbanPropertyRequest(UrbanPropertyFields):
    property_type: UrbanPropertyType | None = None
    ownership: PropertyOwnership | None = None


class UrbanPropertyResponse(EncumberableResponse):
    property_type: UrbanPropertyType
    description: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    registry_number: str | None = None
    area: float | None = None
    ownership: PropertyOwnership
    rental_income: int | None = None


# Vehicles and machinery


class VehicleFields(EncumberableFields):
    brand: str | None = Field(None, max_length=128)
    model: str | None = Field(None, max_length=128)
    year: int | None = Field(None, ge=1900, le=2100)
    plate: str | None = Field(None, max_length=16)
    chassis: str | None = Field(None, max_length=64)


class CreateVehicleRequest(VehicleFields):
    category: VehicleCategory


class UpdateVehicleRequest(VehicleFields):
    category: VehicleCategory | None = None


class VehicleResponse(EncumberableResponse):
    category: VehicleCategory
    brand: str | None = None
    model: str | None = None
    year: int | None = None
    plate: str | None = None
    chassis: str | None = None


# Corporate participations


class ParticipationFields(EncumberableFields):
    company_tax_id: str | None = Field(None, max_length=20)
    percentage: float | None = Field(None, ge=0, le=100)


class CreateParticipationRequest(ParticipationFields):
    company_name: str = Field(..., min_length=1, max_length=255)
    participation_type: ParticipationType = ParticipationType.QUOTA_HOLDER


class UpdateParticipationRequest(ParticipationFields):
    company_name: str | None = Field(None, min_length=1, max_length=255)
    participation_type: ParticipationType | None = None


class ParticipationResponse(EncumberableResponse):
    company_name: str
    company_tax_id: str | None = None
    participation_type: ParticipationType
    percentage: float | None = None


# Agricultural productions


class ProductionFields(BaseModel):
    rural_property_id: uuid.UUID | None = None
    planted_area: float | None = Field(None, ge=0)
    expected_yield: float | None = Field(None, ge=0)
    actual_yield: float | None = Field(None, ge=0)
    average_price: int | None = Field(None, ge=0)
    total_revenue: int | None = Field(None, ge=0)
    production_cost: int | None = Field(None, ge=0)
    notes: str | None = None


class CreateProductionRequest(ProductionFields):
    harvest_year: str = Field(..., pattern=r"^\d{4}(/\d{4})?$", description='"2024/2025" or "2025"')
    season: HarvestSeason = HarvestSeason.MAIN
    crop: CropType


class UpdateProductionRequest(ProductionFields):
    harvest_year: str | None = Field(None, pattern=r"^\d{4}(/\d{4})?$")
    season: HarvestSeason | None = None
    crop: CropType | None = None


class ProductionResponse(ORMModel):
    id: uuid.UUID
    client_id: uuid.UUID
    rural_property_id: uuid.UUID | None = None
    harvest_year: str
    season: HarvestSeason
    crop: CropType
    planted_area: float | None = None
    expected_yield: float | None = None
    actual_yield: float | None = None
    average_price: int | None = None
    total_revenue: int | None = None
    production_cost: int | None = None
    notes: str | None = None
    created_at: datetime


# Financial snapshots


class FinancialFields(BaseModel):
    reference_date: date | None = None
    gross_revenue: int | None = None
    net_revenue: int | None = None
    gross_profit: int | None = None
    ebitda: int | None = None
    net_income: int | None = None
    total_assets: int | None = None
    current_assets: int | None = None
    current_liabilities: int | None = None
    total_debt: int | None = None
    net_debt: int | None = None
    cash: int | None = None
    equity: int | None = None
    notes: str | None = None


class CreateFinancialSnapshotRequest(FinancialFields):
    year: int = Field(..., ge=1900, le=2100)
    period: FinancialPeriod = FinancialPeriod.ANNUAL
    quarter: int = Field(0, ge=0, le=4, description="0 for annual snapshots")


class UpdateFinancialSnapshotRequest(FinancialFields):
    pass


class FinancialIndicators(BaseModel):
    debt_to_equity: float | None = None
    net_debt_to_ebitda: float | None = None
    current_ratio: float | None = None
    gross_margin: float | None = None
    ebitda_margin: float | None = None
    net_margin: float | None = None
    roe: float | None = None


class FinancialSnapshotResponse(ORMModel):
    id: uuid.UUID
    client_id: uuid.UUID
    year: int
    period: FinancialPeriod
    quarter: int
    reference_date: date | None = None
    gross_revenue: int | None = None
    net_revenue: int | None = None
    gross_profit: int | None = None
    ebitda: int | None = None
    net_income: int | None = None
    total_assets: int | None = None
    current_assets: int | None = None
    current_liabilities: int | None = None
    total_debt: int | None = None
    net_debt: int | None = None
    cash: int | None = None
    equity: int | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class FinancialSnapshotWithIndicators(FinancialSnapshotResponse):
    indicators: FinancialIndicators


# Operational snapshots


class OperationalFields(BaseModel):
    employees: int | None = Field(None, ge=0)
    planted_area: float | None = Field(None, ge=0)
    livestock_heads: int | None = Field(None, ge=0)
    storage_capacity: float | None = Field(None, ge=0)
    machinery_count: int | None = Field(None, ge=0)
    monthly_payroll: int | None = Field(None, ge=0)
    notes: str | None = None


class CreateOperationalSnapshotRequest(OperationalFields):
    year: int = Field(..., ge=1900, le=2100)


class UpdateOperationalSnapshotRequest(OperationalFields):
    pass


class OperationalSnapshotResponse(ORMModel):
    id: uuid.UUID
    client_id: uuid.UUID
    year: int
    employees: int | None = None
    planted_area: float | None = None
    livestock_heads: int | None = None
    storage_capacity: float | None = None
    machinery_count: int | None = None
    monthly_payroll: int | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


# Summary


class HarvestOverview(BaseModel):
    harvest_year: str | None = None
    planted_area: float
    revenue: int
    cost: int
    profit: int
    crops: list[str]


class PatrimonyCounts(BaseModel):
    rural_properties: int
    urban_properties: int
    vehicles: int
    participations: int


class PatrimonySummaryResponse(BaseModel):
    total_assets: int
    total_rural_area: float
    total_owned_area: float
    total_lien_amount: int
    free_assets: int
    counts: PatrimonyCounts
    current_harvest: HarvestOverview
    latest_financial: FinancialSnapshotWithIndicators | None = None
    latest_operational: OperationalSnapshotResponse | None = None
