"""Schemas for anime entries."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

AnimeType = Literal["Anime", "Donghua"]
AiringStatus = Literal["YTA", "Airing", "Completed"]
WatchStatus = Literal["YTW", "Watching", "Watch Later", "Completed", "On Hold", "Dropped"]
DayOfWeek = Literal[
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]


class AnimeCreate(CamelModel):
    """Body for POST /anime."""

    title: str = Field(..., min_length=1, max_length=500)
    title_japanese: str | None = None
    anime_other_name: str | None = None
    anime_type: AnimeType | None = None
    airing_status: AiringStatus | None = None
    watch_status: WatchStatus
    website_link: str | None = None
    episode_on: DayOfWeek | None = None
    cover_image: str = Field(..., min_length=1)
    banner_image: str | None = None
    episodes: int = Field(default=0, ge=0)
    episodes_watched: int = Field(default=0, ge=0)
    score: int | None = Field(default=None, ge=1, le=10)
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    season: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    start_date: str | None = None
    end_date: str | None = None
    notes: str | None = None


class AnimeUpdate(CamelModel):
    """Body for PATCH /anime/{id}; only fields present in the body are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    title_japanese: str | None = None
    anime_other_name: str | None = None
    anime_type: AnimeType | None = None
    airing_status: AiringStatus | None = None
    watch_status: WatchStatus | None = None
    website_link: str | None = None
    episode_on: DayOfWeek | None = None
    cover_image: str | None = Field(default=None, min_length=1)
    banner_image: str | None = None
    episodes: int | None = Field(default=None, ge=0)
    episodes_watched: int | None = Field(default=None, ge=0)
    score: int | None = Field(default=None, ge=1, le=10)
    genres: list[str] | None = None
    synopsis: str | None = None
    season: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    start_date: str | None = None
    end_date: str | None = None
    notes: str | None = None


class AnimeRead(CamelModel):
    """Anime entry as returned to the owner."""

    id: str
    user_id: str
    title: str
    title_japanese: str | None = None
    anime_other_name: str | None = None
    anime_type: str | None = None
    airing_status: str | None = None
    watch_status: str
    website_link: str | None = None
    episode_on: str | None = None
    cover_image: str
    banner_image: str | None = None
    episodes: int = 0
    episodes_watched: int = 0
    score: int | None = None
    genres: list[str] = Field(default_factory=list)
    synopsis: str | None = None
    season: str | None = None
    year: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
