"""
In-memory implementation of UserRegistry.

Holds users in a dict keyed by id for the lifetime of the process. Nothing
is persisted; a restart starts again from an empty store and id 1.
"""

import logging
from threading import Lock
from typing import Dict

from application.ports import RegistryErrorCode, RegistryResult
from domain.converters import to_dto, to_entity, update_entity_from_dto
from domain.models import User, UserDTO
from domain.services import capitalize, is_blank

logger = logging.getLogger(__name__)


class InMemoryUserRegistry:
    """
    Process-local user registry.

    Every operation runs under a single lock, so the store and the id
    counter always change together. The store itself is never handed out:
    callers only ever see UserDTO copies.

    Usage:
        registry = InMemoryUserRegistry()
        result = registry.create(UserDTO(username="johndoe", email="john@example.com"))
        result.user.id  # 1
    """

    def __init__(self):
        """Initialize with an empty store; the first id handed out is 1."""
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = Lock()

    def create(self, dto: UserDTO) -> RegistryResult:
        """Store a new user, assigning the next id and capitalizing the username."""
        # Blank usernames never reach the store, validated or not
        if is_blank(dto.username):
            logger.warning("Rejected user create: blank username")
            return RegistryResult(
                success=False,
                error="Username must not be blank",
                error_code=RegistryErrorCode.INVALID_INPUT,
            )

        with self._lock:
            user = to_entity(dto)
            user.id = self._next_id
            self._next_id += 1
            user.username = capitalize(user.username)
            self._users[user.id] = user
            return RegistryResult(success=True, user=to_dto(user))

    def read(self, user_id: int) -> RegistryResult:
        """Look up a user by id."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return _not_found(user_id)
            return RegistryResult(success=True, user=to_dto(user))

    def update(self, user_id: int, dto: UserDTO) -> RegistryResult:
        """Merge supplied fields into an existing user. Username is not re-capitalized."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return _not_found(user_id)
            update_entity_from_dto(dto, user)
            return RegistryResult(success=True, user=to_dto(user))

    def delete(self, user_id: int) -> RegistryResult:
        """Remove a user. Its id is never handed out again."""
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return _not_found(user_id)
            return RegistryResult(success=True)

    def count(self) -> int:
        """Number of stored users."""
        with self._lock:
            return len(self._users)


def _not_found(user_id: int) -> RegistryResult:
    return RegistryResult(
        success=False,
        error=f"User {user_id} not found",
        error_code=RegistryErrorCode.NOT_FOUND,
    )
