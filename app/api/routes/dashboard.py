"""Dashboard summary across the media collections."""

from fastapi import APIRouter

from app.api.deps import CapabilitiesDep, DbDep, UserDep
from app.repositories import AnimeRepository, GameRepository, KDramaRepository, MovieRepository
from app.schemas.stats import DashboardStats
from app.services.stats import build_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(user: UserDep, db: DbDep, capabilities: CapabilitiesDep) -> DashboardStats:
    return build_dashboard_stats(
        anime=AnimeRepository(db, capabilities).list_for_owner(user.id),
        movies=MovieRepository(db, capabilities).list_for_owner(user.id),
        kdrama=KDramaRepository(db, capabilities).list_for_owner(user.id),
        games=GameRepository(db, capabilities).list_for_owner(user.id),
    )
