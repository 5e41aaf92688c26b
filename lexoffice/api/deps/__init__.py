"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_calendar_service,
    get_case_service,
    get_creditor_service,
    get_deadline_service,
    get_drafting_service,
    get_financial_service,
    get_library_service,
    get_patrimony_service,
    get_person_service,
    get_project_service,
    get_recovery_service,
    get_service_cache,
    get_team_service,
    get_user_service,
)

__all__ = [
    "get_calendar_service",
    "get_case_service",
    "get_creditor_service",
    "get_deadline_service",
    "get_drafting_service",
    "get_financial_service",
    "get_library_service",
    "get_patrimony_service",
    "get_person_service",
    "get_project_service",
    "get_recovery_service",
    "get_service_cache",
    "get_team_service",
    "get_user_service",
]
