"""Schemas for movies."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

MovieStatus = Literal["watched", "planning", "rewatching"]
ReviewType = Literal["Good", "Okay", "Onetime watch", "Not Good"]


class MovieCreate(CamelModel):
    """Body for POST /movies."""

    title: str = Field(..., min_length=1, max_length=500)
    poster_image: str = Field(..., min_length=1)
    backdrop_image: str | None = None
    release_date: str = Field(..., min_length=1)
    status: MovieStatus
    review_type: ReviewType | None = None
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    notes: str | None = None


class MovieUpdate(CamelModel):
    """Body for PATCH /movies/{id}."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    poster_image: str | None = Field(default=None, min_length=1)
    backdrop_image: str | None = None
    release_date: str | None = Field(default=None, min_length=1)
    status: MovieStatus | None = None
    review_type: ReviewType | None = None
    genres: list[str] | None = None
    synopsis: str | None = None
    notes: str | None = None


class MovieRead(CamelModel):
    """Movie as returned to the owner. review_type is absent on a drifted schema."""

    id: str
    user_id: str
    title: str
    poster_image: str
    backdrop_image: str | None = None
    release_date: str
    status: str
    review_type: str | None = None
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
