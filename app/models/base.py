"""SQLAlchemy declarative Base and shared model configuration."""

import secrets

from sqlalchemy.orm import DeclarativeBase


def generate_id() -> str:
    """Random URL-safe primary key (22 chars), used for every table."""
    return secrets.token_urlsafe(16)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
