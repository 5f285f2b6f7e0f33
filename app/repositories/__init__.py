"""Owner-scoped data accessors, one per entity kind."""

from app.repositories.collections import (
    AnimeRepository,
    CredentialRepository,
    GameRepository,
    GenshinCharacterRepository,
    KDramaRepository,
    MovieRepository,
    WebsiteRepository,
)
from app.repositories.genshin import GenshinAccountRepository
from app.repositories.owned import OwnedRepository
from app.repositories.user import UserRepository

__all__ = [
    "AnimeRepository",
    "CredentialRepository",
    "GameRepository",
    "GenshinAccountRepository",
    "GenshinCharacterRepository",
    "KDramaRepository",
    "MovieRepository",
    "OwnedRepository",
    "UserRepository",
    "WebsiteRepository",
]
