"""
Converters: UserDTO <-> User entity.

Three pure functions with fixed field-copy semantics:

- to_entity: DTO -> new entity, id left unset
- to_dto: entity -> DTO, all four fields including id
- update_entity_from_dto: merge supplied DTO fields into an existing entity

No validation happens here; malformed input is rejected upstream.
"""

from domain.models import User, UserDTO

# Fields a DTO may overwrite on an existing entity; id is never merged.
MERGEABLE_FIELDS = ("username", "email", "bio")


def to_entity(dto: UserDTO) -> User:
    """
    Build a new User entity from a DTO.

    Args:
        dto: Incoming user record

    Returns:
        User with id unset and username, email, bio copied verbatim
    """
    return User(
        username=dto.username,
        email=dto.email,
        bio=dto.bio,
    )


def to_dto(user: User) -> UserDTO:
    """Copy all four fields of an entity into a new DTO."""
    return UserDTO(
        id=user.id,
        username=user.username,
        email=user.email,
        bio=user.bio,
    )


def update_entity_from_dto(dto: UserDTO, user: User) -> None:
    """
    Merge a DTO into an existing entity in place.

    Only fields whose DTO value is not None are written; None means the
    caller did not supply the field and the stored value is kept. The
    entity id is never touched.

    Args:
        dto: Partial or full user record
        user: Stored entity to mutate
    """
    for field_name in MERGEABLE_FIELDS:
        value = getattr(dto, field_name)
        if value is not None:
            setattr(user, field_name, value)
