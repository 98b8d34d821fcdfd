"""
User Registry Interface (Port).

Defines the contract for keyed user storage with create/read/update/delete
semantics. Domain failures are returned as RegistryResult outcomes rather
than raised, so callers translate them into responses explicitly.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from domain.models import UserDTO


class RegistryErrorCode(str, Enum):
    """Reasons a registry operation can be rejected."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "USER_NOT_FOUND"


@dataclass
class RegistryResult:
    """Outcome of a single registry operation."""
    success: bool
    user: Optional[UserDTO] = None
    error: Optional[str] = None
    error_code: Optional[RegistryErrorCode] = None

    @property
    def not_found(self) -> bool:
        return self.error_code == RegistryErrorCode.NOT_FOUND

    @property
    def invalid_input(self) -> bool:
        return self.error_code == RegistryErrorCode.INVALID_INPUT


class UserRegistry(Protocol):
    """
    Abstract interface for the user registry.

    Implementations own the store and the id counter exclusively:
    - ids start at 1, increase strictly, and are never reused
    - a rejected create consumes no id
    - update never changes an id and never creates a missing entry
    """

    def create(
        self,
        dto: UserDTO,
    ) -> RegistryResult:
        """
        Store a new user.

        Args:
            dto: Validated user record without id

        Returns:
            RegistryResult with the stored user (including assigned id),
            or INVALID_INPUT when the username is blank.
        """
        ...

    def read(
        self,
        user_id: int,
    ) -> RegistryResult:
        """
        Look up a user by id.

        Returns:
            RegistryResult with the user, or NOT_FOUND.
        """
        ...

    def update(
        self,
        user_id: int,
        dto: UserDTO,
    ) -> RegistryResult:
        """
        Merge supplied fields into an existing user.

        Args:
            user_id: Id of the user to update
            dto: Record whose non-None fields overwrite stored values

        Returns:
            RegistryResult with the updated user, or NOT_FOUND.
        """
        ...

    def delete(
        self,
        user_id: int,
    ) -> RegistryResult:
        """
        Remove a user.

        Returns:
            RegistryResult with success=True, or NOT_FOUND.
        """
        ...
