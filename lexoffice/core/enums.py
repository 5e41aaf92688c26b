"""
Domain enumerations.

Shared by the ORM models, the API schemas and the pure calculators. Each
enum is a ``str`` enum, stored as VARCHAR via ``native_enum=False`` and
serialized by value on the wire.

Dependencies: enum (stdlib)
System role: Controlled vocabularies for every entity
"""

import enum


class UserRole(str, enum.Enum):
    """Team member roles."""

    ADMIN = "ADMIN"
    PARTNER = "PARTNER"
    LAWYER = "LAWYER"
    PARALEGAL = "PARALEGAL"
    INTERN = "INTERN"
    ASSISTANT = "ASSISTANT"


# ---------------------------------------------------------------- persons


class PersonType(str, enum.Enum):
    """Role a person plays for the firm."""

    CLIENT = "CLIENT"
    OPPOSING_PARTY = "OPPOSING_PARTY"
    JUDGE = "JUDGE"
    APPELLATE_JUDGE = "APPELLATE_JUDGE"
    EXPERT = "EXPERT"
    JUDICIAL_ADMINISTRATOR = "JUDICIAL_ADMINISTRATOR"
    CREDITOR = "CREDITOR"
    WITNESS = "WITNESS"
    OTHER = "OTHER"


class PersonSubtype(str, enum.Enum):
    """Natural person (CPF) or legal entity (CNPJ)."""

    INDIVIDUAL = "INDIVIDUAL"
    COMPANY = "COMPANY"


class Segment(str, enum.Enum):
    """Economic segment of a client."""

    AGRO = "AGRO"
    INDUSTRY = "INDUSTRY"
    COMMERCE = "COMMERCE"
    SERVICES = "SERVICES"
    FINANCIAL = "FINANCIAL"
    GOVERNMENT = "GOVERNMENT"
    OTHER = "OTHER"


class PersonDocumentType(str, enum.Enum):
    """Kinds of documents kept on a person's record."""

    ID_CARD = "ID_CARD"
    TAX_REGISTRATION = "TAX_REGISTRATION"
    PROOF_OF_ADDRESS = "PROOF_OF_ADDRESS"
    ARTICLES_OF_ASSOCIATION = "ARTICLES_OF_ASSOCIATION"
    POWER_OF_ATTORNEY = "POWER_OF_ATTORNEY"
    FINANCIAL_STATEMENT = "FINANCIAL_STATEMENT"
    CERTIFICATE = "CERTIFICATE"
    CONTRACT = "CONTRACT"
    OTHER = "OTHER"


# ------------------------------------------------------------------ cases


class CaseType(str, enum.Enum):
    """Kind of legal matter. Also used as the library's practice area."""

    LITIGATION = "LITIGATION"
    JUDICIAL_RECOVERY = "JUDICIAL_RECOVERY"
    EXTRAJUDICIAL_RECOVERY = "EXTRAJUDICIAL_RECOVERY"
    CREDIT_RECOVERY = "CREDIT_RECOVERY"
    RESTRUCTURING = "RESTRUCTURING"
    BANKRUPTCY = "BANKRUPTCY"
    ADVISORY = "ADVISORY"
    OTHER = "OTHER"


class CaseStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    ARCHIVED = "ARCHIVED"
    CLOSED = "CLOSED"


# -------------------------------------------------------------- deadlines


class DeadlineType(str, enum.Enum):
    FATAL = "FATAL"
    ORDINARY = "ORDINARY"
    DILIGENCE = "DILIGENCE"
    HEARING = "HEARING"
    ASSEMBLY = "ASSEMBLY"


class DeadlineStatus(str, enum.Enum):
    PENDING = "PENDING"
    FULFILLED = "FULFILLED"
    MISSED = "MISSED"
    CANCELLED = "CANCELLED"


class HolidayScope(str, enum.Enum):
    NATIONAL = "NATIONAL"
    STATE = "STATE"
    MUNICIPAL = "MUNICIPAL"


# --------------------------------------------------------------- projects


class ProjectCategory(str, enum.Enum):
    JUDICIAL_ORDER_RELEASE = "JUDICIAL_ORDER_RELEASE"
    DEBT_RECOVERY = "DEBT_RECOVERY"
    RESTRUCTURING = "RESTRUCTURING"
    CORPORATE = "CORPORATE"
    COMPLIANCE = "COMPLIANCE"
    OTHER = "OTHER"


class ProjectStatus(str, enum.Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PhaseStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class Priority(str, enum.Enum):
    """Priority shared by tasks and recovery cases."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


# ------------------------------------------------------------ calendar


class EventType(str, enum.Enum):
    MEETING = "MEETING"
    HEARING = "HEARING"
    ORAL_ARGUMENT = "ORAL_ARGUMENT"
    ORAL_DISPATCH = "ORAL_DISPATCH"
    LEGAL_RESEARCH = "LEGAL_RESEARCH"
    CASE_ANALYSIS = "CASE_ANALYSIS"
    EARLY_DEADLINE = "EARLY_DEADLINE"
    FATAL_DEADLINE = "FATAL_DEADLINE"
    EMAIL_FOLLOWUP = "EMAIL_FOLLOWUP"
    GENERAL = "GENERAL"


class EventStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class SyncStatus(str, enum.Enum):
    """State of an event relative to the external calendar copy."""

    SYNCED = "SYNCED"
    PENDING_PUSH = "PENDING_PUSH"
    PENDING_PULL = "PENDING_PULL"
    CONFLICT = "CONFLICT"


class ModificationSource(str, enum.Enum):
    LOCAL = "LOCAL"
    EXTERNAL = "EXTERNAL"


class ConflictResolution(str, enum.Enum):
    KEEP_LOCAL = "KEEP_LOCAL"
    KEEP_EXTERNAL = "KEEP_EXTERNAL"
    MANUAL = "MANUAL"


class ActivityType(str, enum.Enum):
    MEETING = "MEETING"
    HEARING = "HEARING"
    ORAL_ARGUMENT = "ORAL_ARGUMENT"
    DISPATCH = "DISPATCH"
    RESEARCH = "RESEARCH"
    ANALYSIS = "ANALYSIS"
    EMAIL = "EMAIL"
    PHONE_CALL = "PHONE_CALL"
    DRAFTING = "DRAFTING"
    OTHER = "OTHER"


# ---------------------------------------------------------------- library


class LibraryEntryType(str, enum.Enum):
    CASE_LAW = "CASE_LAW"
    STATUTE = "STATUTE"
    DOCTRINE = "DOCTRINE"
    TEMPLATE = "TEMPLATE"
    ARTICLE = "ARTICLE"
    OTHER = "OTHER"


class LibraryOrder(str, enum.Enum):
    RECENT = "RECENT"
    OLDEST = "OLDEST"
    RELEVANCE = "RELEVANCE"
    TITLE = "TITLE"


# -------------------------------------------------------------- creditors


class CreditorClass(str, enum.Enum):
    """Lei 11.101/2005 art. 41 creditor classes."""

    CLASS_I_LABOR = "CLASS_I_LABOR"
    CLASS_II_SECURED = "CLASS_II_SECURED"
    CLASS_III_UNSECURED = "CLASS_III_UNSECURED"
    CLASS_IV_SMALL_BUSINESS = "CLASS_IV_SMALL_BUSINESS"


class CreditorNature(str, enum.Enum):
    LABOR = "LABOR"
    SECURED = "SECURED"
    UNSECURED = "UNSECURED"
    SMALL_BUSINESS = "SMALL_BUSINESS"
    FIDUCIARY = "FIDUCIARY"
    TAX = "TAX"
    OTHER = "OTHER"


class CreditorStatus(str, enum.Enum):
    LISTED = "LISTED"
    CONTESTED = "CONTESTED"
    QUALIFIED = "QUALIFIED"
    EXCLUDED = "EXCLUDED"


class VoteChoice(str, enum.Enum):
    FOR = "FOR"
    AGAINST = "AGAINST"
    ABSTAIN = "ABSTAIN"


# -------------------------------------------------------------- patrimony


class PropertyOwnership(str, enum.Enum):
    OWNED = "OWNED"
    LEASED = "LEASED"
    PARTNERSHIP = "PARTNERSHIP"
    LOAN_FOR_USE = "LOAN_FOR_USE"
    POSSESSION = "POSSESSION"
    CONDOMINIUM = "CONDOMINIUM"


class HarvestSeason(str, enum.Enum):
    MAIN = "MAIN"
    SECOND = "SECOND"
    WINTER = "WINTER"
    PERENNIAL = "PERENNIAL"


class CropType(str, enum.Enum):
    SOY = "SOY"
    CORN = "CORN"
    SECOND_CROP_CORN = "SECOND_CROP_CORN"
    COTTON = "COTTON"
    COFFEE = "COFFEE"
    SUGARCANE = "SUGARCANE"
    RICE = "RICE"
    BEANS = "BEANS"
    WHEAT = "WHEAT"
    SORGHUM = "SORGHUM"
    SUNFLOWER = "SUNFLOWER"
    EUCALYPTUS = "EUCALYPTUS"
    BEEF_CATTLE = "BEEF_CATTLE"
    DAIRY_CATTLE = "DAIRY_CATTLE"
    PIGS = "PIGS"
    POULTRY = "POULTRY"
    FISH = "FISH"
    FRUIT = "FRUIT"
    VEGETABLES = "VEGETABLES"
    FORESTRY = "FORESTRY"
    OTHER = "OTHER"


class UrbanPropertyType(str, enum.Enum):
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    OFFICE = "OFFICE"
    WAREHOUSE = "WAREHOUSE"
    LAND = "LAND"
    STORE = "STORE"
    COMMERCIAL_BUILDING = "COMMERCIAL_BUILDING"
    URBAN_FARM = "URBAN_FARM"
    OTHER = "OTHER"


class VehicleCategory(str, enum.Enum):
    CAR = "CAR"
    PICKUP = "PICKUP"
    TRUCK = "TRUCK"
    HEAVY_TRUCK = "HEAVY_TRUCK"
    VAN = "VAN"
    MOTORCYCLE = "MOTORCYCLE"
    TRACTOR = "TRACTOR"
    HARVESTER = "HARVESTER"
    PLANTER = "PLANTER"
    SPRAYER = "SPRAYER"
    FARM_TRAILER = "FARM_TRAILER"
    SILO = "SILO"
    DRYER = "DRYER"
    IRRIGATION_PIVOT = "IRRIGATION_PIVOT"
    GENERATOR = "GENERATOR"
    INDUSTRIAL_EQUIPMENT = "INDUSTRIAL_EQUIPMENT"
    OFFICE_EQUIPMENT = "OFFICE_EQUIPMENT"
    OTHER = "OTHER"


class ParticipationType(str, enum.Enum):
    QUOTA_HOLDER = "QUOTA_HOLDER"
    MANAGING_PARTNER = "MANAGING_PARTNER"
    CONTROLLING_SHAREHOLDER = "CONTROLLING_SHAREHOLDER"
    MINORITY_SHAREHOLDER = "MINORITY_SHAREHOLDER"
    COOPERATIVE_MEMBER = "COOPERATIVE_MEMBER"
    CONSORTIUM = "CONSORTIUM"


class FinancialPeriod(str, enum.Enum):
    ANNUAL = "ANNUAL"
    QUARTERLY = "QUARTERLY"
    MONTHLY = "MONTHLY"


# ---------------------------------------------------------------- recovery


class RecoveryType(str, enum.Enum):
    EXECUTION = "EXECUTION"
    MONITORY = "MONITORY"
    COLLECTION = "COLLECTION"
    BANKRUPTCY_CLAIM = "BANKRUPTCY_CLAIM"
    EXTRAJUDICIAL = "EXTRAJUDICIAL"
    OTHER = "OTHER"


class RecoveryPhase(str, enum.Enum):
    INVESTIGATION = "INVESTIGATION"
    NEGOTIATION = "NEGOTIATION"
    EXECUTION = "EXECUTION"
    SEIZURE = "SEIZURE"
    AGREEMENT = "AGREEMENT"
    CLOSED = "CLOSED"


class RecoveryStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


class LiabilityType(str, enum.Enum):
    MAIN_DEBTOR = "MAIN_DEBTOR"
    GUARANTOR = "GUARANTOR"
    JOINT_DEBTOR = "JOINT_DEBTOR"
    PARTNER = "PARTNER"
    SUCCESSOR = "SUCCESSOR"
    GROUP_COMPANY = "GROUP_COMPANY"


class JointDebtorStatus(str, enum.Enum):
    IDENTIFIED = "IDENTIFIED"
    INCLUDED = "INCLUDED"
    REJECTED = "REJECTED"


class RecoveryAnalysisType(str, enum.Enum):
    INITIAL_ANALYSIS = "initial_analysis"
    SCORING = "scoring"
    STRATEGY = "strategy"
    EVENT_ANALYSIS = "event_analysis"
    FRAUD_DETECTION = "fraud_detection"
    PENHORABILITY = "penhorability"
    PETITION = "petition"
    INVESTIGATION_PLAN = "investigation_plan"
    PORTFOLIO = "portfolio"


# ------------------------------------------------------------------------ AI


class ModelTier(str, enum.Enum):
    STANDARD = "standard"
    PREMIUM = "premium"


class DraftTone(str, enum.Enum):
    TECHNICAL = "TECHNICAL"
    PERSUASIVE = "PERSUASIVE"
    CONCILIATORY = "CONCILIATORY"
    ASSERTIVE = "ASSERTIVE"


class DraftLength(str, enum.Enum):
    CONCISE = "CONCISE"
    STANDARD = "STANDARD"
    DETAILED = "DETAILED"


# ---------------------------------------------------------------------- team


class OKRStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    REVIEW = "REVIEW"
    CLOSED = "CLOSED"


class OKRCategory(str, enum.Enum):
    PRODUCTIVITY = "PRODUCTIVITY"
    QUALITY = "QUALITY"
    BUSINESS_DEVELOPMENT = "BUSINESS_DEVELOPMENT"
    DEVELOPMENT = "DEVELOPMENT"
    FINANCIAL = "FINANCIAL"
    OPERATIONAL = "OPERATIONAL"


# ----------------------------------------------------------------- financial


class FeeType(str, enum.Enum):
    """How a fee is earned; RESTRUCTURING_SUCCESS is the ad exitum fee of a judicial recovery."""

    FIXED = "FIXED"
    SUCCESS = "SUCCESS"
    MONTHLY = "MONTHLY"
    PER_ACT = "PER_ACT"
    RESTRUCTURING_SUCCESS = "RESTRUCTURING_SUCCESS"


class FeeStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


class ExpenseCategory(str, enum.Enum):
    COURT_COSTS = "COURT_COSTS"
    EXPERT_FEES = "EXPERT_FEES"
    CERTIFICATES = "CERTIFICATES"
    DILIGENCE = "DILIGENCE"
    TRAVEL = "TRAVEL"
    REGISTRY = "REGISTRY"
    POSTAGE = "POSTAGE"
    COPIES = "COPIES"
    PUBLICATION = "PUBLICATION"
    OTHER = "OTHER"
