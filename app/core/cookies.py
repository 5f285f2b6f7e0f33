"""Auth cookie helpers: write, read and clear the access/refresh token pair."""

from typing import TYPE_CHECKING, NamedTuple

from fastapi import Request, Response

if TYPE_CHECKING:
    from app.core.config import Settings


class AuthCookies(NamedTuple):
    access_token: str | None
    refresh_token: str | None


def set_auth_cookies(
    response: Response,
    access_token: str,
    refresh_token: str,
    settings: "Settings",
) -> None:
    """Set both token cookies: HTTP-only, SameSite=Lax, secure in production."""
    response.set_cookie(
        settings.ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    response.set_cookie(
        settings.REFRESH_TOKEN_COOKIE,
        refresh_token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def get_auth_cookies(request: Request, settings: "Settings") -> AuthCookies:
    """Read both token cookies from the incoming request."""
    return AuthCookies(
        access_token=request.cookies.get(settings.ACCESS_TOKEN_COOKIE),
        refresh_token=request.cookies.get(settings.REFRESH_TOKEN_COOKIE),
    )


def clear_auth_cookies(response: Response, settings: "Settings") -> None:
    """Expire both token cookies. Safe to call when they are already gone."""
    for name in (settings.ACCESS_TOKEN_COOKIE, settings.REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            name,
            path="/",
            httponly=True,
            secure=settings.is_production,
            samesite="lax",
        )
