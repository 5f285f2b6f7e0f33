"""Request/response schemas for auth endpoints and JWT claim sets."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class CredentialsRequest(CamelModel):
    """Email and password for register and login. Presence is checked by the route."""

    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password")


class ProfileUpdateRequest(CamelModel):
    """Profile changes; omitted fields are left untouched, avatar null removes it."""

    username: str | None = Field(default=None, description="New display name")
    avatar: str | None = Field(default=None, description="Avatar URL or data URI")


class UserPublic(CamelModel):
    """Public projection of a user. Never includes the password hash."""

    id: str
    email: str
    username: str
    avatar: str | None = None
    created_at: datetime | None = None


class UserResponse(CamelModel):
    """Envelope for auth responses: {"user": {...}}."""

    user: UserPublic


class CurrentUser(CamelModel):
    """Authenticated identity resolved from the access token (id, email, username)."""

    id: str
    email: str
    username: str


class AccessTokenClaims(CamelModel):
    """Claims carried by the access token, besides iat/exp."""

    user_id: str = Field(..., min_length=1)
    email: str
    username: str


class RefreshTokenClaims(CamelModel):
    """Claims carried by the refresh token, besides iat/exp."""

    user_id: str = Field(..., min_length=1)
