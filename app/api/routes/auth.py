"""Registration, login, token refresh, logout and profile endpoints."""

import logging
import re
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.api.deps import DbDep, SettingsDep, get_current_user
from app.core.config import Settings
from app.core.cookies import clear_auth_cookies, get_auth_cookies, set_auth_cookies
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
    verify_refresh_token,
)
from app.models import User
from app.repositories import UserRepository
from app.schemas.auth import (
    AccessTokenClaims,
    CredentialsRequest,
    CurrentUser,
    ProfileUpdateRequest,
    UserPublic,
    UserResponse,
)
from app.schemas.base import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"
AVATAR_MAX_LEN = 5 * 1024 * 1024


def _require_credentials(body: CredentialsRequest) -> tuple[str, str]:
    if not body.email or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )
    return body.email, body.password


def _validate_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email format",
        )


def _validate_password(password: str) -> None:
    if len(password) < PASSWORD_MIN_LEN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {PASSWORD_MIN_LEN} characters long",
        )
    if len(password) > PASSWORD_MAX_LEN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at most {PASSWORD_MAX_LEN} characters long",
        )


def default_avatar_url(seed: str) -> str:
    """Deterministic placeholder avatar for a new account."""
    return AVATAR_URL_TEMPLATE.format(seed=quote(seed, safe=""))


def _issue_session(user: User, response: Response, settings: Settings) -> None:
    """Mint a fresh access/refresh pair for `user` and set both cookies."""
    access_token = create_access_token(
        AccessTokenClaims(user_id=user.id, email=user.email, username=user.username),
        settings,
    )
    refresh_token = create_refresh_token(user.id, settings)
    set_auth_cookies(response, access_token, refresh_token, settings)


def _rejected(message: str, settings: Settings) -> JSONResponse:
    """401 that also expires both cookies so the client cannot retry a dead token."""
    response = JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": message},
    )
    clear_auth_cookies(response, settings)
    return response


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: CredentialsRequest,
    response: Response,
    db: DbDep,
    settings: SettingsDep,
) -> UserResponse:
    """
    Create an account and start a session.

    The username defaults to the email local-part and the avatar to a
    placeholder seeded by it. Emails are matched exactly (no case folding).
    """
    email, password = _require_credentials(body)
    _validate_email(email)
    _validate_password(password)

    users = UserRepository(db)
    if users.get_by_email(email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )

    username = email.split("@")[0]
    try:
        user = users.create(
            email=email,
            username=username,
            password_hash=hash_password(password, rounds=settings.BCRYPT_ROUNDS),
            avatar=default_avatar_url(username),
        )
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email.
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )
    logger.info("Registered user id=%s", user.id)

    _issue_session(user, response, settings)
    return UserResponse(user=UserPublic.model_validate(user))


@router.post("/login", response_model=UserResponse)
def login(
    body: CredentialsRequest,
    response: Response,
    db: DbDep,
    settings: SettingsDep,
) -> UserResponse:
    """Check email and password and start a session. Unknown email and wrong password look the same."""
    email, password = _require_credentials(body)

    user = UserRepository(db).get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login for %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    _issue_session(user, response, settings)
    return UserResponse(user=UserPublic.model_validate(user))


@router.post(
    "/refresh",
    response_model=UserResponse,
    responses={401: {"description": "Missing, invalid or orphaned refresh token"}},
)
def refresh(
    request: Request,
    response: Response,
    db: DbDep,
    settings: SettingsDep,
) -> UserResponse | JSONResponse:
    """
    Exchange the refresh-token cookie for a new access/refresh pair.

    No cookie: 401 and cookies untouched. Invalid/expired token or a user that
    no longer exists: 401 and both cookies cleared. The previous refresh token
    is not revoked; it stays valid until it expires.
    """
    refresh_token = get_auth_cookies(request, settings).refresh_token
    if not refresh_token:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "No refresh token provided"},
        )

    claims = verify_refresh_token(refresh_token, settings)
    if claims is None:
        logger.info("Refresh rejected: invalid or expired token")
        return _rejected("Invalid or expired refresh token", settings)

    user = UserRepository(db).get_by_id(claims.user_id)
    if user is None:
        logger.info("Refresh rejected: user %s no longer exists", claims.user_id)
        return _rejected("User not found", settings)

    _issue_session(user, response, settings)
    return UserResponse(user=UserPublic.model_validate(user))


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response, settings: SettingsDep) -> SuccessResponse:
    """End the session by expiring both cookies. Idempotent; tokens are not revoked."""
    clear_auth_cookies(response, settings)
    return SuccessResponse()


def _load_profile(user: CurrentUser | None, db: DbDep) -> User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    row = UserRepository(db).get_by_id(user.id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return row


@router.get("/me", response_model=UserResponse)
@router.get("/profile", response_model=UserResponse)
def get_profile(
    user: Annotated[CurrentUser | None, Depends(get_current_user)],
    db: DbDep,
) -> UserResponse:
    """Current user's stored profile (fresh from the database, unlike the token claims)."""
    return UserResponse(user=UserPublic.model_validate(_load_profile(user, db)))


@router.patch("/profile", response_model=UserResponse)
def update_profile(
    body: ProfileUpdateRequest,
    user: Annotated[CurrentUser | None, Depends(get_current_user)],
    db: DbDep,
) -> UserResponse:
    """
    Change username and/or avatar.

    Fields absent from the body are left alone; avatar null or "" removes it.
    The access token keeps the old username until the next refresh.
    """
    row = _load_profile(user, db)
    update_data: dict[str, str | None] = {}

    if "username" in body.model_fields_set:
        username = (body.username or "").strip()
        if not username:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username cannot be empty",
            )
        if len(username) > USERNAME_MAX_LEN:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Username must be less than {USERNAME_MAX_LEN} characters",
            )
        update_data["username"] = username

    if "avatar" in body.model_fields_set:
        if not body.avatar:
            update_data["avatar"] = None
        elif len(body.avatar) > AVATAR_MAX_LEN:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Avatar image is too large",
            )
        else:
            update_data["avatar"] = body.avatar

    updated = UserRepository(db).update_profile(row, update_data)
    return UserResponse(user=UserPublic.model_validate(updated))
