"""
Database models package.

Importing this package registers every table on Base.metadata.

Dependencies: sqlalchemy, lexoffice.boundary.db.base
System role: Database model definitions for domain entities
"""

from lexoffice.boundary.db.models.ai_usage_model import AIUsageLogModel
from lexoffice.boundary.db.models.calendar_model import ActivityModel, CalendarEventModel
from lexoffice.boundary.db.models.case_model import CaseModel
from lexoffice.boundary.db.models.creditor_model import CreditorModel
from lexoffice.boundary.db.models.deadline_model import DeadlineModel, HolidayModel
from lexoffice.boundary.db.models.financial_model import ExpenseModel, FeeModel
from lexoffice.boundary.db.models.library_model import LibraryEntryModel, LibraryEntryTagModel
from lexoffice.boundary.db.models.patrimony_model import (
    AgriculturalProductionModel,
    CorporateParticipationModel,
    FinancialSnapshotModel,
    OperationalSnapshotModel,
    RuralPropertyModel,
    UrbanPropertyModel,
    VehicleModel,
)
from lexoffice.boundary.db.models.person_model import PersonDocumentModel, PersonModel
from lexoffice.boundary.db.models.project_model import (
    ProjectMilestoneModel,
    ProjectModel,
    ProjectPhaseModel,
    ProjectTaskModel,
)
from lexoffice.boundary.db.models.recovery_model import JointDebtorModel, RecoveryCaseModel
from lexoffice.boundary.db.models.team_model import KPIEntryModel, OKRModel
from lexoffice.boundary.db.models.user_model import UserModel

__all__ = [
    "AIUsageLogModel",
    "ActivityModel",
    "AgriculturalProductionModel",
    "CalendarEventModel",
    "CaseModel",
    "CorporateParticipationModel",
    "CreditorModel",
    "DeadlineModel",
    "ExpenseModel",
    "FeeModel",
    "FinancialSnapshotModel",
    "HolidayModel",
    "JointDebtorModel",
    "KPIEntryModel",
    "LibraryEntryModel",
    "LibraryEntryTagModel",
    "OKRModel",
    "OperationalSnapshotModel",
    "PersonDocumentModel",
    "PersonModel",
    "ProjectMilestoneModel",
    "ProjectModel",
    "ProjectPhaseModel",
    "ProjectTaskModel",
    "RecoveryCaseModel",
    "RuralPropertyModel",
    "UrbanPropertyModel",
    "UserModel",
    "VehicleModel",
]
