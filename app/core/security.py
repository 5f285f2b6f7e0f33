"""Password hashing and JWT creation/verification for cookie-based sessions."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.schemas.auth import AccessTokenClaims, RefreshTokenClaims

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds) used when no settings value is supplied.
BCRYPT_ROUNDS = 12

# Registration / profile validation limits.
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128
USERNAME_MAX_LEN = 50


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _encode(payload: dict[str, Any], secret: str, lifetime: timedelta, algorithm: str) -> str:
    now = datetime.now(UTC)
    claims = {**payload, "iat": now, "exp": now + lifetime}
    return jwt.encode(claims, secret, algorithm=algorithm)


def _decode(token: str, secret: str, algorithm: str) -> dict[str, Any] | None:
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.PyJWTError as e:
        logger.debug("Token rejected: %s", e)
        return None


def create_access_token(claims: AccessTokenClaims, settings: "Settings") -> str:
    """Create a short-lived access token carrying userId, email and username."""
    return _encode(
        claims.model_dump(by_alias=True),
        settings.JWT_SECRET.get_secret_value(),
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        settings.JWT_ALGORITHM,
    )


def create_refresh_token(user_id: str, settings: "Settings") -> str:
    """Create a long-lived refresh token carrying only userId."""
    return _encode(
        RefreshTokenClaims(user_id=user_id).model_dump(by_alias=True),
        settings.JWT_REFRESH_SECRET.get_secret_value(),
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        settings.JWT_ALGORITHM,
    )


def verify_access_token(token: str | None, settings: "Settings") -> AccessTokenClaims | None:
    """
    Verify signature, expiry and claim shape of an access token.

    Returns the claims, or None for any failure. Never raises, so callers can
    treat a bad token exactly like a missing one.
    """
    if not token:
        return None
    payload = _decode(token, settings.JWT_SECRET.get_secret_value(), settings.JWT_ALGORITHM)
    if payload is None:
        return None
    try:
        return AccessTokenClaims.model_validate(payload)
    except ValidationError:
        logger.debug("Access token has an unexpected claim set")
        return None


def verify_refresh_token(token: str | None, settings: "Settings") -> RefreshTokenClaims | None:
    """Verify a refresh token; same contract as verify_access_token."""
    if not token:
        return None
    payload = _decode(
        token, settings.JWT_REFRESH_SECRET.get_secret_value(), settings.JWT_ALGORITHM
    )
    if payload is None:
        return None
    try:
        return RefreshTokenClaims.model_validate(payload)
    except ValidationError:
        logger.debug("Refresh token has an unexpected claim set")
        return None
