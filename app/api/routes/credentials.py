"""Stored-credential endpoints (plain-text passwords, owner-scoped like everything else)."""

from app.api.routes.crud import build_crud_router
from app.repositories import CredentialRepository
from app.schemas.credential import CredentialCreate, CredentialRead, CredentialUpdate

router = build_crud_router(
    repository_cls=CredentialRepository,
    create_schema=CredentialCreate,
    update_schema=CredentialUpdate,
    read_schema=CredentialRead,
    label="Credential",
)
