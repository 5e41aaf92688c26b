"""
Team member API endpoints.

Routes:
- GET /users - List active members
- POST /users - Create member
- GET /users/{id} - Get member
- PATCH /users/{id} - Update member
- DELETE /users/{id} - Deactivate member

Dependencies: lexoffice.application.services, lexoffice.models
System role: Team member HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from lexoffice.api.deps.dependencies import get_user_service
from lexoffice.application.services import UserService
from lexoffice.models.user import CreateUserRequest, UpdateUserRequest, UserResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
@handle_service_errors
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[dict]:
    """List active team members ordered by name."""
    return await user_service.list_active()


@router.post("", response_model=UserResponse, status_code=201)
@handle_service_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """
    Create a team member.

    Args:
        request: CreateUserRequest with name, email and role
        user_service: Injected UserService

    Returns:
        UserResponse: Created member

    Raises:
        HTTPException(409): Email already in use
    """
    logger.info("Creating user", extra={"role": request.role.value})
    return await user_service.create_user(**request.model_dump())


@router.get("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """Get a team member by id."""
    return await user_service.get_user(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """
    Update a team member; only the fields sent are changed.

    Raises:
        HTTPException(404): Member not found
        HTTPException(409): Email already in use
    """
    return await user_service.update_user(user_id, **request.model_dump(exclude_unset=True))


@router.delete("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def deactivate_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """Deactivate a team member (the record is kept)."""
    logger.info("Deactivating user", extra={"user_id": str(user_id)})
    return await user_service.deactivate_user(user_id)
