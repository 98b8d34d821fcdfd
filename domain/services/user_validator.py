"""
Boundary validation for user records.

Runs before a DTO reaches the registry and reports every field-level
problem at once instead of stopping at the first one:

- username: required, non-blank, length within configured bounds
- email: required, syntactically valid address
- bio: optional, bounded length

Create and update bodies go through the same checks.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from backend.settings import Settings, get_settings
from domain.models import UserDTO
from domain.services.text import is_blank

logger = logging.getLogger(__name__)


class ViolationCode(str, Enum):
    """Machine-readable reason for a field violation."""

    REQUIRED = "required"
    BLANK = "blank"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_EMAIL = "invalid_email"


@dataclass
class FieldViolation:
    """A single field-level validation failure."""

    field: str
    message: str
    code: ViolationCode

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "code": self.code.value}


def validate_user_dto(
    dto: UserDTO,
    *,
    settings: Optional[Settings] = None,
) -> List[FieldViolation]:
    """
    Validate a user record before it is handed to the registry.

    Args:
        dto: Incoming user record
        settings: Length bounds; defaults to get_settings()

    Returns:
        List of violations, empty when the record is acceptable
    """
    if settings is None:
        settings = get_settings()

    violations: List[FieldViolation] = []
    violations.extend(_check_username(dto.username, settings))
    violations.extend(_check_email(dto.email))
    violations.extend(_check_bio(dto.bio, settings))

    if violations:
        logger.debug(
            "User record rejected: %s",
            ", ".join(f"{v.field}={v.code.value}" for v in violations),
        )
    return violations


def _check_username(
    username: Optional[str],
    settings: Settings,
) -> List[FieldViolation]:
    if username is None:
        return [FieldViolation("username", "Username is required", ViolationCode.REQUIRED)]

    if is_blank(username):
        return [FieldViolation("username", "Username must not be blank", ViolationCode.BLANK)]

    if len(username) < settings.username_min_length:
        return [
            FieldViolation(
                "username",
                f"Username must be at least {settings.username_min_length} characters",
                ViolationCode.TOO_SHORT,
            )
        ]
    if len(username) > settings.username_max_length:
        return [
            FieldViolation(
                "username",
                f"Username must be at most {settings.username_max_length} characters",
                ViolationCode.TOO_LONG,
            )
        ]
    return []


def _check_email(email: Optional[str]) -> List[FieldViolation]:
    if email is None:
        return [FieldViolation("email", "Email is required", ViolationCode.REQUIRED)]

    if is_blank(email):
        return [FieldViolation("email", "Email must not be blank", ViolationCode.BLANK)]

    try:
        # Syntax only, no DNS lookups
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        return [FieldViolation("email", f"Email is not valid: {e}", ViolationCode.INVALID_EMAIL)]
    return []


def _check_bio(bio: Optional[str], settings: Settings) -> List[FieldViolation]:
    if bio is not None and len(bio) > settings.bio_max_length:
        return [
            FieldViolation(
                "bio",
                f"Bio must be at most {settings.bio_max_length} characters",
                ViolationCode.TOO_LONG,
            )
        ]
    return []
