"""Shared fixtures for API tests: fresh schema per test and cookie-carrying clients."""

import unittest
from typing import Any

from fastapi.testclient import TestClient

from app.core.database import engine
from app.main import app
from app.models import Base

ANIME = {
    "title": "Frieren",
    "watchStatus": "Watching",
    "coverImage": "https://img.example/frieren.jpg",
    "episodes": 28,
    "episodesWatched": 10,
    "score": 9,
    "genres": ["Fantasy", "Adventure"],
}
MOVIE = {
    "title": "Perfect Days",
    "posterImage": "https://img.example/perfect-days.jpg",
    "releaseDate": "2023-12-21",
    "status": "watched",
    "reviewType": "Good",
    "genres": ["Drama"],
}
KDRAMA = {
    "title": "Move to Heaven",
    "posterImage": "https://img.example/move-to-heaven.jpg",
    "episodes": 10,
    "status": "completed",
    "cast": ["Lee Je-hoon", "Tang Jun-sang"],
}
GAME = {
    "title": "Hollow Knight",
    "coverImage": "https://img.example/hollow-knight.jpg",
    "platform": ["PC", "Nintendo"],
    "status": "playing",
    "gameType": "Metroidvania",
    "genres": ["Action"],
}
CREDENTIAL = {
    "name": "Crunchyroll",
    "category": "streaming",
    "email": "alice@example.com",
    "password": "hunter2",
}
WEBSITE = {
    "name": "MyAnimeList",
    "url": "https://myanimelist.net",
    "category": "anime",
}
GENSHIN_ACCOUNT = {"uid": "812345678", "adventureRank": 55, "worldLevel": 8}
CHARACTER = {
    "name": "Furina",
    "element": "Hydro",
    "weapon": "Sword",
    "rarity": 5,
    "image": "https://img.example/furina.png",
}

# collection path -> minimal valid create body
COLLECTION_BODIES = {
    "anime": ANIME,
    "movies": MOVIE,
    "kdrama": KDRAMA,
    "games": GAME,
    "credentials": CREDENTIAL,
    "websites": WEBSITE,
}


def reset_database() -> None:
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)


def set_cookie_headers(response: Any) -> list[str]:
    return response.headers.get_list("set-cookie")


class ApiTestCase(unittest.TestCase):
    """Recreates every table and opens a client (with lifespan) per test."""

    def setUp(self) -> None:
        reset_database()
        self.client = self.open_client()

    def open_client(self, **kwargs: Any) -> TestClient:
        client = TestClient(app, **kwargs)
        client.__enter__()
        self.addCleanup(client.__exit__, None, None, None)
        return client

    def register(self, client: TestClient, email: str, password: str = "secret1") -> dict[str, Any]:
        response = client.post("/api/auth/register", json={"email": email, "password": password})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["user"]
