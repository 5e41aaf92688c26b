"""
User (team member) schemas.

Dependencies: pydantic
System role: Team member API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from lexoffice.core.enums import UserRole
from lexoffice.models.common import EMAIL_PATTERN, ORMModel


class CreateUserRequest(BaseModel):
    """Request schema for creating a team member."""

    name: str = Field(..., min_length=2, max_length=255)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    role: UserRole = UserRole.LAWYER
    oab_number: str | None = Field(None, max_length=32)
    phone: str | None = Field(None, max_length=32)
    avatar_url: str | None = Field(None, max_length=1024)


class UpdateUserRequest(BaseModel):
    """Request schema for updating a team member; only sent fields change."""

    name: str | None = Field(None, min_length=2, max_length=255)
    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    role: UserRole | None = None
    oab_number: str | None = Field(None, max_length=32)
    phone: str | None = Field(None, max_length=32)
    avatar_url: str | None = Field(None, max_length=1024)
    active: bool | None = None


class UserSummary(ORMModel):
    id: uuid.UUID
    name: str
    email: str
    role: UserRole


class UserResponse(UserSummary):
    oab_number: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    active: bool
    created_at: datetime
    updated_at: datetime
