"""
Domain layer for the User Registry API.

This package contains pure domain models, converters, and validation that
are independent of infrastructure concerns (storage, HTTP).
"""

from domain.models import User, UserDTO

__all__ = [
    "User",
    "UserDTO",
]
