"""In-memory cache of the signed-in user's collections, kept in sync with the API."""

from functools import partialmethod
from typing import Any

from app.client.api import ApiClient
from app.schemas.anime import AnimeRead
from app.schemas.stats import AnimeStats
from app.services.stats import build_anime_stats

COLLECTIONS = ("anime", "movies", "kdrama", "games", "credentials", "websites")


class TrackerStore:
    """
    Local mirror of each collection.

    Every mutation goes to the server first; the cache is only updated from
    the server's response, so a failed call (ApiError) leaves it untouched.
    """

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self.items: dict[str, list[dict[str, Any]]] = {name: [] for name in COLLECTIONS}
        self.genshin: dict[str, Any] | None = None

    def _check(self, collection: str) -> None:
        if collection not in self.items:
            raise KeyError(f"Unknown collection: {collection}")

    def load(self, collection: str) -> list[dict[str, Any]]:
        self._check(collection)
        self.items[collection] = self.api.list_items(collection)
        return self.items[collection]

    def add(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        self._check(collection)
        created = self.api.create(collection, data)
        self.items[collection].append(created)
        return created

    def update(self, collection: str, item_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        self._check(collection)
        updated = self.api.update(collection, item_id, changes)
        self.items[collection] = [
            updated if item["id"] == item_id else item for item in self.items[collection]
        ]
        return updated

    def delete(self, collection: str, item_id: str) -> None:
        self._check(collection)
        self.api.delete(collection, item_id)
        self.items[collection] = [item for item in self.items[collection] if item["id"] != item_id]

    load_anime = partialmethod(load, "anime")
    add_anime = partialmethod(add, "anime")
    update_anime = partialmethod(update, "anime")
    delete_anime = partialmethod(delete, "anime")
    load_movies = partialmethod(load, "movies")
    add_movie = partialmethod(add, "movies")
    update_movie = partialmethod(update, "movies")
    delete_movie = partialmethod(delete, "movies")
    load_kdrama = partialmethod(load, "kdrama")
    add_kdrama = partialmethod(add, "kdrama")
    update_kdrama = partialmethod(update, "kdrama")
    delete_kdrama = partialmethod(delete, "kdrama")
    load_games = partialmethod(load, "games")
    add_game = partialmethod(add, "games")
    update_game = partialmethod(update, "games")
    delete_game = partialmethod(delete, "games")
    load_credentials = partialmethod(load, "credentials")
    add_credential = partialmethod(add, "credentials")
    update_credential = partialmethod(update, "credentials")
    delete_credential = partialmethod(delete, "credentials")
    load_websites = partialmethod(load, "websites")
    add_website = partialmethod(add, "websites")
    update_website = partialmethod(update, "websites")
    delete_website = partialmethod(delete, "websites")

    # --- genshin ---

    def load_genshin(self) -> dict[str, Any] | None:
        self.genshin = self.api.get_genshin()
        return self.genshin

    def save_genshin(self, account: dict[str, Any]) -> dict[str, Any]:
        self.genshin = self.api.save_genshin(account)
        return self.genshin

    def add_character(self, data: dict[str, Any]) -> dict[str, Any]:
        character = self.api.add_character(data)
        if self.genshin is not None:
            self.genshin["characters"].append(character)
        return character

    def update_character(self, character_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        character = self.api.update_character(character_id, changes)
        if self.genshin is not None:
            self.genshin["characters"] = [
                character if c["id"] == character_id else c for c in self.genshin["characters"]
            ]
        return character

    def delete_character(self, character_id: str) -> None:
        self.api.delete_character(character_id)
        if self.genshin is not None:
            self.genshin["characters"] = [
                c for c in self.genshin["characters"] if c["id"] != character_id
            ]

    # --- derived ---

    def anime_stats(self) -> AnimeStats:
        """Same figures as GET /anime/stats, computed from the cached list."""
        rows = [AnimeRead.model_validate(item).model_dump() for item in self.items["anime"]]
        return build_anime_stats(rows)
