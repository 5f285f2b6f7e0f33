"""Schemas for K-dramas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

KDramaStatus = Literal["watching", "completed", "planning", "dropped", "on-hold"]


class KDramaCreate(CamelModel):
    """Body for POST /kdrama."""

    title: str = Field(..., min_length=1, max_length=500)
    title_korean: str | None = None
    poster_image: str = Field(..., min_length=1)
    episodes: int = Field(default=0, ge=0)
    episodes_watched: int = Field(default=0, ge=0)
    status: KDramaStatus
    score: int | None = Field(default=None, ge=1, le=10)
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    network: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    cast: list[str] | None = None
    notes: str | None = None


class KDramaUpdate(CamelModel):
    """Body for PATCH /kdrama/{id}."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    title_korean: str | None = None
    poster_image: str | None = Field(default=None, min_length=1)
    episodes: int | None = Field(default=None, ge=0)
    episodes_watched: int | None = Field(default=None, ge=0)
    status: KDramaStatus | None = None
    score: int | None = Field(default=None, ge=1, le=10)
    genres: list[str] | None = None
    synopsis: str | None = None
    network: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    cast: list[str] | None = None
    notes: str | None = None


class KDramaRead(CamelModel):
    """K-drama as returned to the owner."""

    id: str
    user_id: str
    title: str
    title_korean: str | None = None
    poster_image: str
    episodes: int = 0
    episodes_watched: int = 0
    status: str
    score: int | None = None
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    network: str | None = None
    year: int | None = None
    cast: list[str] | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
