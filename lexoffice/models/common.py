"""
Common response models and utilities.

Shared response base, constants and field types used by every router.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict

# Pagination bounds shared by cursor-paginated listings
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


def assume_utc(value: datetime) -> datetime:
    """Read offset-less timestamps as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


# Always timezone-aware, so request timestamps compare safely with each other
UTCDateTime = Annotated[datetime, AfterValidator(assume_utc)]


class ORMModel(BaseModel):
    """Response base that also accepts ORM instances."""

    model_config = ConfigDict(from_attributes=True)
