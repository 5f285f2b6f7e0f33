"""Schemas for the anime statistics and dashboard summary endpoints."""

from pydantic import BaseModel

from app.schemas.base import CamelModel


class WatchStatusCounts(CamelModel):
    ytw: int = 0
    watching: int = 0
    watch_later: int = 0
    completed: int = 0
    on_hold: int = 0
    dropped: int = 0


class AiringStatusCounts(CamelModel):
    yta: int = 0
    airing: int = 0
    completed: int = 0


class GenreCount(BaseModel):
    name: str
    value: int


class ScoreCount(BaseModel):
    score: int
    count: int


class MonthCount(BaseModel):
    month: str
    count: int


class AnimeStats(CamelModel):
    """Aggregates over the caller's anime list."""

    total_anime: int
    total_episodes: int
    mean_score: float
    watch_status_counts: WatchStatusCounts
    airing_status_counts: AiringStatusCounts
    genre_distribution: list[GenreCount]
    score_distribution: list[ScoreCount]
    monthly_activity: list[MonthCount]


class DashboardStats(CamelModel):
    """Per-collection totals plus the count currently in progress."""

    anime: dict[str, int]
    movies: dict[str, int]
    kdrama: dict[str, int]
    games: dict[str, int]
