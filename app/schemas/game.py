"""Schemas for games."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

GameStatus = Literal["playing", "completed", "planning", "dropped", "on-hold"]
GamePlatform = Literal["PC", "PlayStation", "Xbox", "Nintendo", "Mobile", "Other"]


class GameCreate(CamelModel):
    """Body for POST /games."""

    title: str = Field(..., min_length=1, max_length=500)
    cover_image: str = Field(..., min_length=1)
    platform: list[GamePlatform] = Field(default_factory=list)
    status: GameStatus
    game_type: str | None = None
    download_url: str | None = None
    genres: list[str] = Field(default_factory=list)
    release_date: str | None = None
    notes: str | None = None


class GameUpdate(CamelModel):
    """Body for PATCH /games/{id}."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    cover_image: str | None = Field(default=None, min_length=1)
    platform: list[GamePlatform] | None = None
    status: GameStatus | None = None
    game_type: str | None = None
    download_url: str | None = None
    genres: list[str] | None = None
    release_date: str | None = None
    notes: str | None = None


class GameRead(CamelModel):
    """Game as returned to the owner. game_type/download_url are absent on a drifted schema."""

    id: str
    user_id: str
    title: str
    cover_image: str
    platform: list[str] = Field(default_factory=list)
    status: str
    game_type: str | None = None
    download_url: str | None = None
    genres: list[str] = Field(default_factory=list)
    release_date: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
