"""Schemas for stored credentials. Passwords are stored and returned as plain text."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

CredentialCategory = Literal[
    "streaming", "gaming", "social", "email", "finance", "shopping", "other"
]


class CredentialCreate(CamelModel):
    """Body for POST /credentials."""

    name: str = Field(..., min_length=1, max_length=255)
    category: CredentialCategory
    username: str | None = None
    email: str | None = None
    password: str = Field(..., min_length=1)
    url: str | None = None
    notes: str | None = None
    icon: str | None = None


class CredentialUpdate(CamelModel):
    """Body for PATCH /credentials/{id}."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: CredentialCategory | None = None
    username: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, min_length=1)
    url: str | None = None
    notes: str | None = None
    icon: str | None = None


class CredentialRead(CamelModel):
    id: str
    user_id: str
    name: str
    category: str
    username: str | None = None
    email: str | None = None
    password: str
    url: str | None = None
    notes: str | None = None
    icon: str | None = None
    last_updated: datetime | None = None
    created_at: datetime | None = None
