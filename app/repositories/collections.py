"""Data accessors for the per-user collections."""

from typing import Any

from sqlalchemy import ColumnElement, select

from app.models import (
    Anime,
    Credential,
    Game,
    GenshinAccount,
    GenshinCharacter,
    KDrama,
    Movie,
    Website,
)
from app.repositories.owned import OwnedRepository


class AnimeRepository(OwnedRepository):
    model = Anime
    json_fields = frozenset({"genres"})


class MovieRepository(OwnedRepository):
    model = Movie
    json_fields = frozenset({"genres"})


class KDramaRepository(OwnedRepository):
    model = KDrama
    json_fields = frozenset({"genres", "cast"})
    nullable_json_fields = frozenset({"cast"})


class GameRepository(OwnedRepository):
    model = Game
    json_fields = frozenset({"platform", "genres"})


class CredentialRepository(OwnedRepository):
    model = Credential


class WebsiteRepository(OwnedRepository):
    model = Website


class GenshinCharacterRepository(OwnedRepository):
    """Characters are owned through their account, so ownership is a subquery on account_id."""

    model = GenshinCharacter

    def _owner_clause(self, user_id: str) -> ColumnElement[bool]:
        owned_accounts = select(GenshinAccount.id).where(GenshinAccount.user_id == user_id)
        return GenshinCharacter.account_id.in_(owned_accounts)

    def _owner_values(self, user_id: str) -> dict[str, Any]:
        account_id = self.session.execute(
            select(GenshinAccount.id).where(GenshinAccount.user_id == user_id)
        ).scalar_one_or_none()
        if account_id is None:
            raise LookupError("Genshin account not found")
        return {"account_id": account_id}
