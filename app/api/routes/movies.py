"""Movie endpoints. review_type is left out when the database predates it."""

from app.api.routes.crud import build_crud_router
from app.repositories import MovieRepository
from app.schemas.movie import MovieCreate, MovieRead, MovieUpdate

router = build_crud_router(
    repository_cls=MovieRepository,
    create_schema=MovieCreate,
    update_schema=MovieUpdate,
    read_schema=MovieRead,
    label="Movie",
    omit_missing_columns=True,
)
