"""
Application services.

One orchestrator class per module; each takes the request's AsyncSession
and returns plain dicts shaped like the response schemas.
"""

from lexoffice.application.services.calendar_service import CalendarService
from lexoffice.application.services.case_service import CaseService
from lexoffice.application.services.creditor_service import CreditorService
from lexoffice.application.services.deadline_service import DeadlineService
from lexoffice.application.services.drafting_service import DraftingService, PreparedDraft
from lexoffice.application.services.financial_service import FinancialService
from lexoffice.application.services.library_service import LibraryService
from lexoffice.application.services.patrimony_service import AssetKind, PatrimonyService
from lexoffice.application.services.person_service import PersonService
from lexoffice.application.services.project_service import ProjectService
from lexoffice.application.services.recovery_service import RecoveryService
from lexoffice.application.services.team_service import TeamService
from lexoffice.application.services.user_service import UserService

__all__ = [
    "AssetKind",
    "CalendarService",
    "CaseService",
    "CreditorService",
    "DeadlineService",
    "DraftingService",
    "FinancialService",
    "LibraryService",
    "PatrimonyService",
    "PersonService",
    "PreparedDraft",
    "ProjectService",
    "RecoveryService",
    "TeamService",
    "UserService",
]
