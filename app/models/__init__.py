"""SQLAlchemy ORM models."""

from app.models.base import Base, generate_id
from app.models.bookmarks import Credential, Website
from app.models.genshin import GenshinAccount, GenshinCharacter
from app.models.media import Anime, Game, KDrama, Movie
from app.models.user import User

__all__ = [
    "Anime",
    "Base",
    "Credential",
    "Game",
    "GenshinAccount",
    "GenshinCharacter",
    "KDrama",
    "Movie",
    "User",
    "Website",
    "generate_id",
]
