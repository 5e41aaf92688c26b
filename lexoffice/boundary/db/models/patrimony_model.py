"""
Patrimony ORM models.

Client assets (rural and urban properties, vehicles and machinery,
corporate participations), agricultural productions and yearly
financial/operational snapshots. Assets are soft-deleted through
`is_active`; productions and snapshots are hard-deleted.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Patrimony persistence for net-worth and restructuring analysis
"""

import uuid
from datetime import date

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from lexoffice.boundary.db.base import Base, SoftDeleteMixin, TimestampMixin, UUIDMixin
from lexoffice.core.enums import (
    CropType,
    FinancialPeriod,
    HarvestSeason,
    ParticipationType,
    PropertyOwnership,
    UrbanPropertyType,
    VehicleCategory,
)


class ClientOwnedMixin:
    """Foreign key to the owning client person."""

    @declared_attr
    def client_id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(
            Uuid(as_uuid=True),
            ForeignKey("persons.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class EncumberableMixin:
    """Value, lien and judicial block columns shared by every asset."""

    estimated_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    has_lien: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    lien_amount: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    lien_holder: Mapped[str | None] = mapped_column(String(255), nullable=True)
    has_judicial_block: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class RuralPropertyModel(Base, UUIDMixin, TimestampMixin, SoftDeleteMixin, ClientOwnedMixin, EncumberableMixin):
    """
    Rural property (farm) ORM model.

    Areas are hectares. `registry_number` is the land registry record
    (matrícula); `car_code` the rural environmental registry code.
    """

    __tablename__ = "rural_properties"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    registry_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    car_code: Mapped[str | None] = mapped_column(String(64), nullable=True)
    municipality: Mapped[str | None] = mapped_column(String(128), nullable=True)
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    total_area: Mapped[float | None] = mapped_column(Float, nullable=True)
    productive_area: Mapped[float | None] = mapped_column(Float, nullable=True)
    legal_reserve_area: Mapped[float | None] = mapped_column(Float, nullable=True)
    ownership: Mapped[PropertyOwnership] = mapped_column(
        Enum(PropertyOwnership, native_enum=False),
        nullable=False,
        default=PropertyOwnership.OWNED,
    )

    productions = relationship("AgriculturalProductionModel", back_populates="rural_property")


class AgriculturalProductionModel(Base, UUIDMixin, TimestampMixin, ClientOwnedMixin):
    """Crop or livestock production for a harvest year ("2024/2025")."""

    __tablename__ = "agricultural_productions"

    rural_property_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("rural_properties.id", ondelete="SET NULL"),
        nullable=True,
    )
    harvest_year: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    season: Mapped[HarvestSeason] = mapped_column(
        Enum(HarvestSeason, native_enum=False),
        nullable=False,
        default=HarvestSeason.MAIN,
    )
    crop: Mapped[CropType] = mapped_column(Enum(CropType, native_enum=False), nullable=False)
    planted_area: Mapped[float | None] = mapped_column(Float, nullable=True)
    expected_yield: Mapped[float | None] = mapped_column(Float, nullable=True)
    actual_yield: Mapped[float | None] = mapped_column(Float, nullable=True)
    average_price: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    total_revenue: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    production_cost: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    rural_property = relationship("RuralPropertyModel", back_populates="productions")


class UrbanPropertyModel(Base, UUIDMixin, TimestampMixin, SoftDeleteMixin, ClientOwnedMixin, EncumberableMixin):
    """Urban real estate held by the client."""

    __tablename__ = "urban_properties"

    property_type: Mapped[UrbanPropertyType] = mapped_column(
        Enum(UrbanPropertyType, native_enum=False),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    registry_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    area: Mapped[float | None] = mapped_column(Float, nullable=True)
    ownership: Mapped[PropertyOwnership] = mapped_column(
        Enum(PropertyOwnership, native_enum=False),
        nullable=False,
        default=PropertyOwnership.OWNED,
    )
    rental_income: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class VehicleModel(Base, UUIDMixin, TimestampMixin, SoftDeleteMixin, ClientOwnedMixin, EncumberableMixin):
    """Vehicle, machine or equipment."""

    __tablename__ = "vehicles"

    category: Mapped[VehicleCategory] = mapped_column(
        Enum(VehicleCategory, native_enum=False),
        nullable=False,
    )
    brand: Mapped[str | None] = mapped_column(String(128), nullable=True)
    model: Mapped[str | None] = mapped_column(String(128), nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    plate: Mapped[str | None] = mapped_column(String(16), nullable=True)
    chassis: Mapped[str | None] = mapped_column(String(64), nullable=True)


class CorporateParticipationModel(
    Base, UUIDMixin, TimestampMixin, SoftDeleteMixin, ClientOwnedMixin, EncumberableMixin
):
    """Equity stake of the client in a company."""

    __tablename__ = "corporate_participations"

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_tax_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
    participation_type: Mapped[ParticipationType] = mapped_column(
        Enum(ParticipationType, native_enum=False),
        nullable=False,
        default=ParticipationType.QUOTA_HOLDER,
    )
    percentage: Mapped[float | None] = mapped_column(Float, nullable=True)


class FinancialSnapshotModel(Base, UUIDMixin, TimestampMixin, ClientOwnedMixin):
    """
    Financial statement figures for one period.

    Unique per (client, year, period, quarter). `quarter` is 0 for annual
    snapshots so the constraint also holds where NULLs would not collide.
    """

    __tablename__ = "financial_snapshots"
    __table_args__ = (
        UniqueConstraint("client_id", "year", "period", "quarter", name="uq_financial_snapshot_period"),
    )

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    period: Mapped[FinancialPeriod] = mapped_column(
        Enum(FinancialPeriod, native_enum=False),
        nullable=False,
        default=FinancialPeriod.ANNUAL,
    )
    quarter: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reference_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    gross_revenue: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    net_revenue: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    gross_profit: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    ebitda: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    net_income: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    total_assets: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    current_assets: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    current_liabilities: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    total_debt: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    net_debt: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    cash: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    equity: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class OperationalSnapshotModel(Base, UUIDMixin, TimestampMixin, ClientOwnedMixin):
    """Yearly operational figures; unique per (client, year)."""

    __tablename__ = "operational_snapshots"
    __table_args__ = (UniqueConstraint("client_id", "year", name="uq_operational_snapshot_year"),)

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    planted_area: Mapped[float | None] = mapped_column(Float, nullable=True)
    livestock_heads: Mapped[int | None] = mapped_column(Integer, nullable=True)
    storage_capacity: Mapped[float | None] = mapped_column(Float, nullable=True)
    machinery_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    monthly_payroll: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
