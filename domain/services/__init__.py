"""
Domain services for user records.

- user_validator: boundary validation returning field-level violations
- text: string helpers (blank check, first-letter capitalization)
"""

from domain.services.text import capitalize, is_blank
from domain.services.user_validator import (
    FieldViolation,
    ViolationCode,
    validate_user_dto,
)

__all__ = [
    "capitalize",
    "is_blank",
    "FieldViolation",
    "ViolationCode",
    "validate_user_dto",
]
