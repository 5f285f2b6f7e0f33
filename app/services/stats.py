"""Aggregates for the anime statistics page and the dashboard summary."""

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from app.schemas.stats import (
    AiringStatusCounts,
    AnimeStats,
    DashboardStats,
    GenreCount,
    MonthCount,
    ScoreCount,
    WatchStatusCounts,
)

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
TOP_GENRES = 8
ACTIVITY_MONTHS = 6

WATCH_STATUS_FIELDS = {
    "YTW": "ytw",
    "Watching": "watching",
    "Watch Later": "watch_later",
    "Completed": "completed",
    "On Hold": "on_hold",
    "Dropped": "dropped",
}
AIRING_STATUS_FIELDS = {"YTA": "yta", "Airing": "airing", "Completed": "completed"}


def _last_months(now: datetime, count: int) -> list[tuple[int, int]]:
    """(year, month) pairs for the last `count` calendar months, oldest first."""
    months = []
    year, month = now.year, now.month
    for _ in range(count):
        months.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


def _round_half_up(value: float) -> float:
    """One decimal, halves rounded up: 7.25 -> 7.3."""
    return math.floor(value * 10 + 0.5) / 10


def _as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def build_anime_stats(
    items: Iterable[Mapping[str, Any]],
    now: datetime | None = None,
) -> AnimeStats:
    """
    Compute anime statistics from rows with snake_case keys.

    meanScore averages only scored entries and is rounded half up to one decimal.
    genreDistribution keeps the 8 most common genres; ties keep first-seen order.
    monthlyActivity counts entries created in each of the last 6 calendar months.
    """
    rows = list(items)
    now = now or datetime.now(UTC)

    total_episodes = sum(row.get("episodes_watched") or 0 for row in rows)
    scores = [row["score"] for row in rows if row.get("score")]
    mean_score = _round_half_up(sum(scores) / len(scores)) if scores else 0.0

    watch_counts: Counter[str] = Counter()
    airing_counts: Counter[str] = Counter()
    genre_counts: Counter[str] = Counter()
    score_counts: Counter[int] = Counter()
    month_counts: Counter[tuple[int, int]] = Counter()

    for row in rows:
        watch_field = WATCH_STATUS_FIELDS.get(row.get("watch_status") or "")
        if watch_field:
            watch_counts[watch_field] += 1
        airing_field = AIRING_STATUS_FIELDS.get(row.get("airing_status") or "")
        if airing_field:
            airing_counts[airing_field] += 1
        for genre in row.get("genres") or []:
            genre_counts[genre] += 1
        if row.get("score"):
            score_counts[row["score"]] += 1
        created = _as_datetime(row.get("created_at"))
        if created is not None:
            month_counts[(created.year, created.month)] += 1

    return AnimeStats(
        total_anime=len(rows),
        total_episodes=total_episodes,
        mean_score=mean_score,
        watch_status_counts=WatchStatusCounts(**watch_counts),
        airing_status_counts=AiringStatusCounts(**airing_counts),
        genre_distribution=[
            GenreCount(name=name, value=value)
            for name, value in genre_counts.most_common(TOP_GENRES)
        ],
        score_distribution=[
            ScoreCount(score=score, count=score_counts[score]) for score in range(1, 11)
        ],
        monthly_activity=[
            MonthCount(month=MONTH_NAMES[month - 1], count=month_counts[(year, month)])
            for year, month in _last_months(now, ACTIVITY_MONTHS)
        ],
    )


def build_dashboard_stats(
    anime: Iterable[Mapping[str, Any]],
    movies: Iterable[Mapping[str, Any]],
    kdrama: Iterable[Mapping[str, Any]],
    games: Iterable[Mapping[str, Any]],
) -> DashboardStats:
    """Totals per collection plus how many entries are currently in progress."""
    anime, movies, kdrama, games = list(anime), list(movies), list(kdrama), list(games)
    return DashboardStats(
        anime={
            "total": len(anime),
            "watching": sum(1 for a in anime if a.get("watch_status") == "Watching"),
        },
        movies={
            "total": len(movies),
            "watched": sum(1 for m in movies if m.get("status") == "watched"),
        },
        kdrama={
            "total": len(kdrama),
            "watching": sum(1 for k in kdrama if k.get("status") == "watching"),
        },
        games={
            "total": len(games),
            "playing": sum(1 for g in games if g.get("status") == "playing"),
        },
    )
