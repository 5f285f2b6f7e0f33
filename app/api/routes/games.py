"""Game endpoints. game_type/download_url are left out when the database predates them."""

from app.api.routes.crud import build_crud_router
from app.repositories import GameRepository
from app.schemas.game import GameCreate, GameRead, GameUpdate

router = build_crud_router(
    repository_cls=GameRepository,
    create_schema=GameCreate,
    update_schema=GameUpdate,
    read_schema=GameRead,
    label="Game",
    omit_missing_columns=True,
)
