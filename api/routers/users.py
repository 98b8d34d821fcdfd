"""
Users router for user CRUD.

This router contains endpoints for:
- POST /api/users - Create a user
- GET /api/users/{user_id} - Get a user
- PUT /api/users/{user_id} - Update a user
- DELETE /api/users/{user_id} - Delete a user

Requests are validated here before they reach the registry. Registry
outcomes are translated to HTTP status codes:
- validation failure or INVALID_INPUT -> 400
- NOT_FOUND -> 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.deps import get_settings, get_user_registry
from application.ports import RegistryResult, UserRegistry
from backend.settings import Settings
from domain.models import UserDTO
from domain.services import FieldViolation, validate_user_dto

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)


# =============================================================================
# Helpers
# =============================================================================


def _bad_request(message: str, violations: List[FieldViolation]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "message": message,
            "errors": [v.to_dict() for v in violations],
        },
    )


def _raise_for_result(result: RegistryResult) -> None:
    """Translate a failed registry outcome into an HTTPException."""
    if result.success:
        return
    if result.not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    # INVALID_INPUT is the only other code
    raise _bad_request(result.error or "Invalid input", [])


# =============================================================================
# User Endpoints
# =============================================================================


@router.post("", response_model=UserDTO)
def create_user_endpoint(
    user: UserDTO,
    registry: UserRegistry = Depends(get_user_registry),
    settings: Settings = Depends(get_settings),
):
    """
    Create a user.

    The id is assigned by the server; any id in the request body is ignored.
    The first letter of the username is upper-cased.

    Returns:
        The stored user including its id
    """
    logger.info("Creating user: %s", user.username)

    violations = validate_user_dto(user, settings=settings)
    if violations:
        logger.warning("User create rejected: %d validation error(s)", len(violations))
        raise _bad_request("Validation failed", violations)

    result = registry.create(user)
    _raise_for_result(result)

    logger.info("User created successfully with ID: %s", result.user.id)
    return result.user


@router.get("/{user_id}", response_model=UserDTO)
def get_user_endpoint(
    user_id: int,
    registry: UserRegistry = Depends(get_user_registry),
):
    """
    Get a user by id.

    Args:
        user_id: Id assigned at creation
    """
    logger.info("Fetching user with ID: %s", user_id)

    result = registry.read(user_id)
    _raise_for_result(result)
    return result.user


@router.put("/{user_id}", response_model=UserDTO)
def update_user_endpoint(
    user_id: int,
    user: UserDTO,
    registry: UserRegistry = Depends(get_user_registry),
    settings: Settings = Depends(get_settings),
):
    """
    Update a user.

    The body is validated like a create: username and email are required.
    An omitted or null bio keeps its stored value. The id never changes and
    the username is stored as sent, without capitalization.
    """
    logger.info("Updating user with ID: %s", user_id)

    violations = validate_user_dto(user, settings=settings)
    if violations:
        logger.warning("User %s update rejected: %d validation error(s)", user_id, len(violations))
        raise _bad_request("Validation failed", violations)

    result = registry.update(user_id, user)
    _raise_for_result(result)
    return result.user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_endpoint(
    user_id: int,
    registry: UserRegistry = Depends(get_user_registry),
):
    """Delete a user. Its id is not reused."""
    logger.info("Deleting user with ID: %s", user_id)

    result = registry.delete(user_id)
    _raise_for_result(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
