"""K-drama endpoints."""

from app.api.routes.crud import build_crud_router
from app.repositories import KDramaRepository
from app.schemas.kdrama import KDramaCreate, KDramaRead, KDramaUpdate

router = build_crud_router(
    repository_cls=KDramaRepository,
    create_schema=KDramaCreate,
    update_schema=KDramaUpdate,
    read_schema=KDramaRead,
    label="K-Drama",
)
