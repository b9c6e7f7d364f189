# =============================================================================
# core/models/actor.py - Actor Schemas
# =============================================================================
# An actor is the resolved caller of a settings operation:
# - AuthIdentity: what the identity provider tells us (opaque token id)
# - ActorIdentity: the matching row of the users table
#
# Neither is persisted by this service; the users table is read-only here.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class UserRole(str, Enum):
    """
    Well-known values of the users.role column.

    The column is free text: any value other than ADMIN (including a
    missing role) grants no settings access.
    """
    ADMIN = "admin"
    USER = "user"


class AuthIdentity(BaseModel):
    """
    Identity extracted from a verified access token.

    This is the minimal info available from the token itself,
    without querying the database.
    """
    token_identifier: str = Field(
        ...,
        min_length=1,
        description="Opaque identifier of the caller ('sub' claim)"
    )
    email: str | None = None


class ActorIdentity(BaseModel):
    """
    User row resolved from an AuthIdentity via the token_identifier lookup.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "token_identifier": "7c1e...",
            "role": "admin",
            "is_super_admin": false
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="User row id")
    token_identifier: str
    role: str | None = Field(
        default=None,
        description="Stored role (free text); None for users created before roles existed"
    )
    is_super_admin: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else value

    @field_validator("is_super_admin", mode="before")
    @classmethod
    def _null_is_false(cls, value):
        # Column is nullable
        return bool(value) if value is not None else False

    @property
    def is_admin(self) -> bool:
        """True if the actor may manage settings."""
        return self.role == UserRole.ADMIN.value or self.is_super_admin


class ActorResponse(BaseModel):
    """Returned by GET /auth/me."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    role: str | None = None
    is_super_admin: bool = False
    is_admin: bool = False
