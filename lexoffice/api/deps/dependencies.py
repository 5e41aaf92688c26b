"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: lexoffice.configs, lexoffice.application, lexoffice.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services import (
    CalendarService,
    CaseService,
    CreditorService,
    DeadlineService,
    DraftingService,
    FinancialService,
    LibraryService,
    PatrimonyService,
    PersonService,
    ProjectService,
    RecoveryService,
    TeamService,
    UserService,
)
from lexoffice.application.services.holiday_cache import get_holiday_cache
from lexoffice.boundary.db import get_async_db, get_async_session_factory
from lexoffice.configs import get_settings


class ServiceCache:
    """Container for process-wide objects shared across requests."""

    def __init__(self):
        self._writer = None
        self._model_configs = None

    @property
    def writer(self):
        """Get cached legal writer agent."""
        if self._writer is None:
            from lexoffice.core.agentic_system.agent import LegalWriterAgent

            settings = get_settings()
            self._writer = LegalWriterAgent(
                api_key=settings.ai.google_api_key,
                timeout=settings.ai.request_timeout,
            )
        return self._writer

    @property
    def model_configs(self):
        """Get cached model tier configurations."""
        if self._model_configs is None:
            from lexoffice.core.agentic_system import build_model_configs

            self._model_configs = build_model_configs(get_settings().ai)
        return self._model_configs

    def clear(self):
        """Drop cached instances and the holiday cache."""
        self._writer = None
        self._model_configs = None
        get_holiday_cache().clear()


_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get the global service cache."""
    return _service_cache


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get UserService instance.

    Args:
        db: Async database session

    Returns:
        UserService: Service for team member operations
    """
    return UserService(db=db)


def get_person_service(db: AsyncSession = Depends(get_async_db)) -> PersonService:
    """
    Get PersonService instance.

    Args:
        db: Async database session

    Returns:
        PersonService: Service for person/CRM operations
    """
    return PersonService(db=db)


def get_case_service(db: AsyncSession = Depends(get_async_db)) -> CaseService:
    """
    Get CaseService instance.

    Args:
        db: Async database session

    Returns:
        CaseService: Service for case operations
    """
    return CaseService(db=db)


def get_deadline_service(db: AsyncSession = Depends(get_async_db)) -> DeadlineService:
    """
    Get DeadlineService instance sharing the process-wide holiday cache.

    Args:
        db: Async database session

    Returns:
        DeadlineService: Service for deadline and holiday operations
    """
    return DeadlineService(db=db, holiday_cache=get_holiday_cache())


def get_project_service(db: AsyncSession = Depends(get_async_db)) -> ProjectService:
    """Get ProjectService instance."""
    return ProjectService(db=db)


def get_calendar_service(db: AsyncSession = Depends(get_async_db)) -> CalendarService:
    """Get CalendarService instance."""
    return CalendarService(db=db)


def get_library_service(db: AsyncSession = Depends(get_async_db)) -> LibraryService:
    """Get LibraryService instance."""
    return LibraryService(db=db)


def get_creditor_service(db: AsyncSession = Depends(get_async_db)) -> CreditorService:
    """Get CreditorService instance."""
    return CreditorService(db=db)


def get_patrimony_service(db: AsyncSession = Depends(get_async_db)) -> PatrimonyService:
    """Get PatrimonyService instance."""
    return PatrimonyService(db=db)


def get_recovery_service(db: AsyncSession = Depends(get_async_db)) -> RecoveryService:
    """
    Get RecoveryService instance.

    Args:
        db: Async database session

    Returns:
        RecoveryService: Service with the cached writer for AI analyses
    """
    cache = get_service_cache()
    return RecoveryService(
        db=db,
        writer=cache.writer,
        model_configs=cache.model_configs,
    )


def get_drafting_service(db: AsyncSession = Depends(get_async_db)) -> DraftingService:
    """
    Get DraftingService instance.

    The usage log is written once streaming finishes, through a session
    of its own from the shared session factory.

    Args:
        db: Async database session

    Returns:
        DraftingService: Service for AI document drafting
    """
    cache = get_service_cache()
    return DraftingService(
        db=db,
        writer=cache.writer,
        model_configs=cache.model_configs,
        session_factory=get_async_session_factory(),
    )


def get_team_service(db: AsyncSession = Depends(get_async_db)) -> TeamService:
    """Get TeamService instance."""
    return TeamService(db=db)


def get_financial_service(db: AsyncSession = Depends(get_async_db)) -> FinancialService:
    """Get FinancialService instance."""
    return FinancialService(db=db)
