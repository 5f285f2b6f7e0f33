"""Request dependencies: settings, DB session, current-user resolution, accessors."""

from collections.abc import Callable
from typing import Annotated, TypeVar

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.cookies import get_auth_cookies
from app.core.database import get_db
from app.core.schema_probe import SchemaCapabilities
from app.core.security import verify_access_token
from app.repositories.owned import OwnedRepository
from app.schemas.auth import CurrentUser

SettingsDep = Annotated[Settings, Depends(get_settings)]
DbDep = Annotated[Session, Depends(get_db)]

RepoT = TypeVar("RepoT", bound=OwnedRepository)


def get_current_user(request: Request, settings: SettingsDep) -> CurrentUser | None:
    """
    Resolve the caller from the access-token cookie.

    Stateless: the signed claims are trusted without a database round-trip.
    Returns None for a missing, expired or tampered token; never raises.
    """
    cookies = get_auth_cookies(request, settings)
    claims = verify_access_token(cookies.access_token, settings)
    if claims is None:
        return None
    return CurrentUser(id=claims.user_id, email=claims.email, username=claims.username)


def require_user(
    user: Annotated[CurrentUser | None, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency for protected routes: 401 before any data accessor is touched."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user


UserDep = Annotated[CurrentUser, Depends(require_user)]


def get_schema_capabilities(request: Request) -> SchemaCapabilities:
    """Snapshot taken by the startup probe; assumes a fully migrated schema if none ran."""
    capabilities = getattr(request.app.state, "schema_capabilities", None)
    return capabilities if capabilities is not None else SchemaCapabilities()


CapabilitiesDep = Annotated[SchemaCapabilities, Depends(get_schema_capabilities)]


def repository(repository_cls: type[RepoT]) -> Callable[[Session, SchemaCapabilities], RepoT]:
    """Build a dependency that yields `repository_cls` bound to the request's session."""

    def dependency(db: DbDep, capabilities: CapabilitiesDep) -> RepoT:
        return repository_cls(db, capabilities)

    return dependency
