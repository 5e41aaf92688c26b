"""API routers."""

from .activities import router as activities_router
from .calendar import router as calendar_router
from .cases import router as cases_router
from .creditors import router as creditors_router
from .deadlines import router as deadlines_router
from .drafting import router as drafting_router
from .financial import router as financial_router
from .health import router as health_router
from .holidays import router as holidays_router
from .library import router as library_router
from .patrimony import router as patrimony_router
from .persons import router as persons_router
from .projects import router as projects_router
from .recovery import router as recovery_router
from .team import router as team_router
from .users import router as users_router

__all__ = [
    "activities_router",
    "calendar_router",
    "cases_router",
    "creditors_router",
    "deadlines_router",
    "drafting_router",
    "financial_router",
    "health_router",
    "holidays_router",
    "library_router",
    "patrimony_router",
    "persons_router",
    "projects_router",
    "recovery_router",
    "team_router",
    "users_router",
]
