"""
User entity and boundary record.

Two shapes of the same user profile:
- User: the stored entity, carrying the server-assigned id
- UserDTO: the record exchanged with callers; id is absent on create
  requests and present on responses

Neither model enforces field rules. Structural checks (blank username,
malformed email, length bounds) belong to domain.services.user_validator.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    Stored user profile.

    Mutable: updates are merged into the stored instance field by field.
    The id is assigned once by the registry and never rewritten.

    Examples:
        >>> user = User(username="Johndoe", email="john@example.com")
        >>> user.id is None
        True
    """

    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    username: Optional[str] = Field(default=None, description="Display username")
    email: Optional[str] = Field(default=None, description="Contact email address")
    bio: Optional[str] = Field(default=None, description="Free-text biography")


class UserDTO(BaseModel):
    """
    User record as seen by API callers.

    Every field is optional at the type level: a None field means "not
    supplied", and the validator decides which fields are required.
    """

    id: Optional[int] = Field(default=None, description="Assigned identifier (responses only)")
    username: Optional[str] = Field(default=None, description="Username as supplied")
    email: Optional[str] = Field(default=None, description="Email address")
    bio: Optional[str] = Field(default=None, description="Optional biography")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"username": "johndoe", "email": "john@example.com", "bio": "Developer"},
            ]
        },
    }
