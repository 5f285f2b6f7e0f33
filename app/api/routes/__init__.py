"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api.routes import (
    anime,
    auth,
    credentials,
    dashboard,
    games,
    genshin,
    health,
    kdrama,
    movies,
    websites,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(anime.router, prefix="/anime", tags=["anime"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(kdrama.router, prefix="/kdrama", tags=["kdrama"])
router.include_router(games.router, prefix="/games", tags=["games"])
router.include_router(genshin.router, prefix="/genshin", tags=["genshin"])
router.include_router(credentials.router, prefix="/credentials", tags=["credentials"])
router.include_router(websites.router, prefix="/websites", tags=["websites"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
