"""
Domain models for the User Registry API.

This package contains pure domain models that are independent of
infrastructure concerns (storage, HTTP, external services):

- User: the stored entity with its server-assigned id
- UserDTO: the boundary record used for requests and responses

Usage:
    >>> from domain.models import User, UserDTO

    >>> dto = UserDTO(username="johndoe", email="john@example.com")
    >>> dto.model_dump(exclude_none=True)
    {'username': 'johndoe', 'email': 'john@example.com'}
"""

from domain.models.user import User, UserDTO

__all__ = [
    "User",
    "UserDTO",
]
