"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from lexoffice.boundary.db.CRUD import case_crud, person_crud

    # Use singleton instances
    case = await case_crud.get_detail(db, case_id)

    # Or instantiate classes directly for custom behavior
    from lexoffice.boundary.db.CRUD import CaseCRUD
    custom_crud = CaseCRUD()
"""

from lexoffice.boundary.db.CRUD.ai_usage_crud import AIUsageLogCRUD, ai_usage_crud
from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD, Page
from lexoffice.boundary.db.CRUD.calendar_crud import (
    ActivityCRUD,
    CalendarEventCRUD,
    activity_crud,
    calendar_event_crud,
)
from lexoffice.boundary.db.CRUD.case_crud import CaseCRUD, case_crud
from lexoffice.boundary.db.CRUD.creditor_crud import CreditorCRUD, creditor_crud
from lexoffice.boundary.db.CRUD.deadline_crud import DeadlineCRUD, HolidayCRUD, deadline_crud, holiday_crud
from lexoffice.boundary.db.CRUD.financial_crud import ExpenseCRUD, FeeCRUD, expense_crud, fee_crud
from lexoffice.boundary.db.CRUD.library_crud import LibraryEntryCRUD, library_crud
from lexoffice.boundary.db.CRUD.patrimony_crud import (
    AssetCRUD,
    financial_snapshot_crud,
    operational_snapshot_crud,
    participation_crud,
    production_crud,
    rural_property_crud,
    urban_property_crud,
    vehicle_crud,
)
from lexoffice.boundary.db.CRUD.person_crud import PersonCRUD, person_crud, person_document_crud
from lexoffice.boundary.db.CRUD.project_crud import (
    ProjectCRUD,
    project_crud,
    project_milestone_crud,
    project_phase_crud,
    project_task_crud,
)
from lexoffice.boundary.db.CRUD.recovery_crud import RecoveryCaseCRUD, joint_debtor_crud, recovery_case_crud
from lexoffice.boundary.db.CRUD.team_crud import KPIEntryCRUD, OKRCRUD, kpi_entry_crud, okr_crud
from lexoffice.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "AIUsageLogCRUD",
    "ActivityCRUD",
    "AssetCRUD",
    "BaseCRUD",
    "CalendarEventCRUD",
    "CaseCRUD",
    "CreditorCRUD",
    "DeadlineCRUD",
    "ExpenseCRUD",
    "FeeCRUD",
    "HolidayCRUD",
    "KPIEntryCRUD",
    "LibraryEntryCRUD",
    "OKRCRUD",
    "Page",
    "PersonCRUD",
    "ProjectCRUD",
    "RecoveryCaseCRUD",
    "UserCRUD",
    "activity_crud",
    "ai_usage_crud",
    "calendar_event_crud",
    "case_crud",
    "creditor_crud",
    "deadline_crud",
    "expense_crud",
    "fee_crud",
    "financial_snapshot_crud",
    "holiday_crud",
    "joint_debtor_crud",
    "kpi_entry_crud",
    "library_crud",
    "okr_crud",
    "operational_snapshot_crud",
    "participation_crud",
    "person_crud",
    "person_document_crud",
    "production_crud",
    "project_crud",
    "project_milestone_crud",
    "project_phase_crud",
    "project_task_crud",
    "recovery_case_crud",
    "rural_property_crud",
    "urban_property_crud",
    "user_crud",
    "vehicle_crud",
]
