"""Anime list endpoints plus the per-user statistics view."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import UserDep, repository
from app.api.routes.crud import build_crud_router
from app.repositories import AnimeRepository
from app.schemas.anime import AnimeCreate, AnimeRead, AnimeUpdate
from app.schemas.stats import AnimeStats
from app.services.stats import build_anime_stats

router = APIRouter()


# Declared before the item routes so "/stats" is not matched as an id.
@router.get("/stats", response_model=AnimeStats)
def get_anime_stats(
    user: UserDep,
    repo: Annotated[AnimeRepository, Depends(repository(AnimeRepository))],
) -> AnimeStats:
    """Episode totals, mean score, status counts, top genres and the last 6 months of activity."""
    return build_anime_stats(repo.list_for_owner(user.id))


build_crud_router(
    repository_cls=AnimeRepository,
    create_schema=AnimeCreate,
    update_schema=AnimeUpdate,
    read_schema=AnimeRead,
    label="Anime",
    router=router,
)
