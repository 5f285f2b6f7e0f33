"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AccessTokenClaims,
    CredentialsRequest,
    CurrentUser,
    ProfileUpdateRequest,
    RefreshTokenClaims,
    UserPublic,
    UserResponse,
)
from app.schemas.base import CamelModel, SuccessResponse
from app.schemas.health import HealthResponse

__all__ = [
    "AccessTokenClaims",
    "CamelModel",
    "CredentialsRequest",
    "CurrentUser",
    "HealthResponse",
    "ProfileUpdateRequest",
    "RefreshTokenClaims",
    "SuccessResponse",
    "UserPublic",
    "UserResponse",
]
