"""
Domain converters between the boundary record and the stored entity.

- to_entity: UserDTO -> User (id unset)
- to_dto: User -> UserDTO
- update_entity_from_dto: in-place merge of supplied fields

All converters are side-effect free apart from the explicit in-place merge.

Examples:
    >>> from domain.converters import to_entity, to_dto
    >>> from domain.models import UserDTO

    >>> user = to_entity(UserDTO(username="jane", email="jane@example.com"))
    >>> to_dto(user).username
    'jane'
"""

from domain.converters.user_mapper import (
    to_dto,
    to_entity,
    update_entity_from_dto,
)

__all__ = [
    "to_entity",
    "to_dto",
    "update_entity_from_dto",
]
