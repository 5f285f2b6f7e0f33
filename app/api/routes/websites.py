"""Website bookmark endpoints."""

from app.api.routes.crud import build_crud_router
from app.repositories import WebsiteRepository
from app.schemas.website import WebsiteCreate, WebsiteRead, WebsiteUpdate

router = build_crud_router(
    repository_cls=WebsiteRepository,
    create_schema=WebsiteCreate,
    update_schema=WebsiteUpdate,
    read_schema=WebsiteRead,
    label="Website",
)
