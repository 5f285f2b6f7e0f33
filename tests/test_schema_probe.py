"""Tests for the startup schema probe and how accessors and routes behave on a drifted schema."""

import unittest

from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.database import build_engine, engine
from app.core.schema_probe import SchemaCapabilities, probe_schema
from app.models import Base, Game, User
from app.repositories import GameRepository, MovieRepository
from support import GAME, MOVIE, ApiTestCase

# games table as it looked before game_type/download_url existed
LEGACY_GAMES_DDL = """
CREATE TABLE games (
    id VARCHAR(32) PRIMARY KEY,
    user_id VARCHAR(32) NOT NULL REFERENCES users (id),
    title TEXT NOT NULL,
    cover_image TEXT NOT NULL,
    platform TEXT NOT NULL DEFAULT '[]',
    status VARCHAR(32) NOT NULL,
    genres TEXT NOT NULL DEFAULT '[]',
    release_date VARCHAR(32),
    notes TEXT,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


def _install_legacy_games_table(target) -> None:
    Game.__table__.drop(target, checkfirst=True)
    with target.begin() as conn:
        conn.execute(text(LEGACY_GAMES_DDL))


class TestProbeSchema(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        self.addCleanup(self.engine.dispose)

    def test_fully_migrated_schema_has_nothing_missing(self) -> None:
        Base.metadata.create_all(self.engine)
        capabilities = probe_schema(self.engine)
        self.assertEqual(capabilities.describe_missing(), [])

    def test_reports_missing_optional_columns(self) -> None:
        Base.metadata.create_all(self.engine)
        _install_legacy_games_table(self.engine)
        capabilities = probe_schema(self.engine)
        self.assertEqual(
            capabilities.missing_columns("games"), frozenset({"game_type", "download_url"})
        )
        self.assertEqual(capabilities.missing_columns("movies"), frozenset())

    def test_missing_table_counts_as_missing_columns(self) -> None:
        User.__table__.create(self.engine)
        capabilities = probe_schema(self.engine)
        self.assertEqual(
            capabilities.describe_missing(),
            ["games.download_url", "games.game_type", "movies.review_type"],
        )


class TestRepositoryOnDriftedSchema(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        self.addCleanup(self.engine.dispose)
        Base.metadata.create_all(self.engine)
        _install_legacy_games_table(self.engine)
        self.session = Session(self.engine)
        self.addCleanup(self.session.close)
        self.session.add(User(id="u1", email="alice@example.com", username="alice", password_hash="x"))
        self.session.commit()
        self.capabilities = probe_schema(self.engine)

    def test_create_and_list_skip_missing_columns(self) -> None:
        repo = GameRepository(self.session, self.capabilities)
        created = repo.create(
            "u1",
            {"title": "Celeste", "cover_image": "c.jpg", "status": "playing", "game_type": "Platformer"},
        )
        self.assertNotIn("game_type", created)
        self.assertEqual([row["title"] for row in repo.list_for_owner("u1")], ["Celeste"])

    def test_update_of_only_missing_columns_is_a_no_op(self) -> None:
        repo = GameRepository(self.session, self.capabilities)
        created = repo.create("u1", {"title": "Celeste", "cover_image": "c.jpg", "status": "playing"})
        updated = repo.update(created["id"], "u1", {"download_url": "https://example.com"})
        self.assertEqual(updated["title"], "Celeste")

    def test_without_probe_result_queries_fail(self) -> None:
        repo = GameRepository(self.session, SchemaCapabilities())
        with self.assertRaises(OperationalError):
            repo.create("u1", {"title": "Celeste", "cover_image": "c.jpg", "status": "playing"})
        self.session.rollback()

    def test_other_tables_unaffected(self) -> None:
        repo = MovieRepository(self.session, self.capabilities)
        created = repo.create(
            "u1",
            {
                "title": "Up",
                "poster_image": "p.jpg",
                "release_date": "2009",
                "status": "watched",
                "review_type": "Good",
            },
        )
        self.assertEqual(created["review_type"], "Good")


class TestApiOnDriftedSchema(ApiTestCase):
    """The app probes at startup, so the legacy table must exist before the client opens."""

    def setUp(self) -> None:
        super().setUp()
        _install_legacy_games_table(engine)
        self.client = self.open_client()
        self.register(self.client, "alice@example.com")

    def test_games_work_and_omit_missing_fields(self) -> None:
        created = self.client.post("/api/games", json=GAME)
        self.assertEqual(created.status_code, 201, created.text)
        self.assertNotIn("gameType", created.json())
        listed = self.client.get("/api/games").json()
        self.assertEqual(len(listed), 1)
        self.assertNotIn("downloadUrl", listed[0])

    def test_migrated_tables_keep_optional_fields(self) -> None:
        created = self.client.post("/api/movies", json=MOVIE).json()
        self.assertEqual(created["reviewType"], "Good")

    def test_health_reports_missing_columns(self) -> None:
        body = self.client.get("/api/health").json()
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["missingColumns"], ["games.download_url", "games.game_type"])


if __name__ == "__main__":
    unittest.main()
