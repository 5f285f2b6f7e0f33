"""API tests for the per-user collections: CRUD behaviour and ownership isolation."""

import json
import unittest

from sqlalchemy import text

from app.core.database import engine
from support import (
    ANIME,
    CHARACTER,
    COLLECTION_BODIES,
    GAME,
    GENSHIN_ACCOUNT,
    KDRAMA,
    ApiTestCase,
)


class TestCrud(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.register(self.client, "alice@example.com")

    def test_every_collection_round_trip(self) -> None:
        for path, body in COLLECTION_BODIES.items():
            with self.subTest(collection=path):
                created = self.client.post(f"/api/{path}", json=body)
                self.assertEqual(created.status_code, 201, created.text)
                item = created.json()
                self.assertTrue(item["id"])

                listed = self.client.get(f"/api/{path}").json()
                self.assertEqual([row["id"] for row in listed], [item["id"]])

                fetched = self.client.get(f"/api/{path}/{item['id']}")
                self.assertEqual(fetched.status_code, 200)
                self.assertEqual(fetched.json()["id"], item["id"])

                deleted = self.client.delete(f"/api/{path}/{item['id']}")
                self.assertEqual(deleted.json(), {"success": True})
                self.assertEqual(self.client.get(f"/api/{path}/{item['id']}").status_code, 404)

    def test_response_is_camel_case_and_owner_set_by_server(self) -> None:
        item = self.client.post("/api/anime", json={**ANIME, "userId": "someone-else"}).json()
        me = self.client.get("/api/auth/me").json()["user"]
        self.assertEqual(item["userId"], me["id"])
        self.assertEqual(item["episodesWatched"], 10)
        self.assertNotIn("episodes_watched", item)

    def test_array_fields_are_json_text_in_storage(self) -> None:
        item = self.client.post("/api/games", json=GAME).json()
        self.assertEqual(item["platform"], ["PC", "Nintendo"])
        with engine.connect() as conn:
            raw = conn.execute(
                text("SELECT platform FROM games WHERE id = :id"), {"id": item["id"]}
            ).scalar_one()
        self.assertEqual(json.loads(raw), ["PC", "Nintendo"])

    def test_non_string_array_values_are_dropped(self) -> None:
        item = self.client.post("/api/anime", json=ANIME).json()
        with engine.begin() as conn:
            conn.execute(
                text("UPDATE anime SET genres = :genres WHERE id = :id"),
                {"genres": '[1, "Drama", null]', "id": item["id"]},
            )
        response = self.client.get("/api/anime")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["genres"], ["Drama"])

    def test_kdrama_cast_may_be_null(self) -> None:
        body = {key: value for key, value in KDRAMA.items() if key != "cast"}
        item = self.client.post("/api/kdrama", json=body).json()
        self.assertIsNone(item["cast"])
        self.assertEqual(item["genres"], [])

    def test_patch_changes_only_given_fields(self) -> None:
        item = self.client.post("/api/anime", json=ANIME).json()
        response = self.client.patch(f"/api/anime/{item['id']}", json={"episodesWatched": 11})
        self.assertEqual(response.status_code, 200)
        updated = response.json()
        self.assertEqual(updated["episodesWatched"], 11)
        self.assertEqual(updated["title"], "Frieren")
        self.assertEqual(updated["genres"], ["Fantasy", "Adventure"])

    def test_patch_null_on_required_field_is_rejected(self) -> None:
        item = self.client.post("/api/anime", json=ANIME).json()
        response = self.client.patch(f"/api/anime/{item['id']}", json={"title": None})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "title cannot be null")

    def test_patch_null_clears_optional_field(self) -> None:
        item = self.client.post("/api/anime", json=ANIME).json()
        response = self.client.patch(f"/api/anime/{item['id']}", json={"score": None})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["score"])

    def test_bad_enum_is_400(self) -> None:
        response = self.client.post("/api/anime", json={**ANIME, "watchStatus": "Binging"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("watchStatus", response.json()["error"])

    def test_out_of_range_score_is_400(self) -> None:
        response = self.client.post("/api/anime", json={**ANIME, "score": 11})
        self.assertEqual(response.status_code, 400)

    def test_missing_item_messages(self) -> None:
        self.assertEqual(
            self.client.get("/api/anime/nope").json(), {"error": "Anime not found"}
        )
        self.assertEqual(self.client.delete("/api/games/nope").status_code, 404)
        self.assertEqual(
            self.client.patch("/api/websites/nope", json={"name": "x"}).json(),
            {"error": "Website not found"},
        )

    def test_collections_require_session(self) -> None:
        anonymous = self.open_client()
        for path in COLLECTION_BODIES:
            with self.subTest(collection=path):
                self.assertEqual(anonymous.get(f"/api/{path}").status_code, 401)
        self.assertEqual(anonymous.get("/api/genshin").status_code, 401)
        self.assertEqual(anonymous.get("/api/dashboard/stats").status_code, 401)


class TestOwnershipIsolation(ApiTestCase):
    """Another user's rows behave exactly like missing rows."""

    def setUp(self) -> None:
        super().setUp()
        self.register(self.client, "alice@example.com")
        self.bob = self.open_client()
        self.register(self.bob, "bob@example.com")

    def test_other_users_items_are_invisible(self) -> None:
        for path, body in COLLECTION_BODIES.items():
            with self.subTest(collection=path):
                item_id = self.client.post(f"/api/{path}", json=body).json()["id"]

                self.assertEqual(self.bob.get(f"/api/{path}").json(), [])
                self.assertEqual(self.bob.get(f"/api/{path}/{item_id}").status_code, 404)
                self.assertEqual(
                    self.bob.patch(f"/api/{path}/{item_id}", json={}).status_code, 404
                )
                self.assertEqual(self.bob.delete(f"/api/{path}/{item_id}").status_code, 404)

                self.assertEqual(self.client.get(f"/api/{path}/{item_id}").status_code, 200)

    def test_other_users_characters_are_invisible(self) -> None:
        self.client.put("/api/genshin", json=GENSHIN_ACCOUNT)
        character_id = self.client.post("/api/genshin/characters", json=CHARACTER).json()["id"]
        self.bob.put("/api/genshin", json={"uid": "700000001"})

        response = self.bob.patch(f"/api/genshin/characters/{character_id}", json={"level": 90})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Character not found"})
        self.assertEqual(
            self.bob.delete(f"/api/genshin/characters/{character_id}").status_code, 404
        )
        self.assertEqual(self.bob.get("/api/genshin").json()["characters"], [])
        self.assertEqual(len(self.client.get("/api/genshin").json()["characters"]), 1)


class TestGenshin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.register(self.client, "alice@example.com")

    def test_no_account_is_null(self) -> None:
        response = self.client.get("/api/genshin")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_patch_without_account_is_404(self) -> None:
        response = self.client.patch("/api/genshin", json={"primogems": 160})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Account not found"})

    def test_character_without_account_is_404(self) -> None:
        response = self.client.post("/api/genshin/characters", json=CHARACTER)
        self.assertEqual(response.status_code, 404)

    def test_put_creates_then_replaces(self) -> None:
        created = self.client.put("/api/genshin", json=GENSHIN_ACCOUNT).json()
        self.assertEqual(created["adventureRank"], 55)
        self.assertEqual(created["primogems"], 0)
        replaced = self.client.put("/api/genshin", json={"uid": "812345678", "primogems": 1600})
        self.assertEqual(replaced.json()["adventureRank"], 1)
        self.assertEqual(replaced.json()["primogems"], 1600)

    def test_patch_updates_stats(self) -> None:
        self.client.put("/api/genshin", json=GENSHIN_ACCOUNT)
        response = self.client.patch("/api/genshin", json={"intertwined": 12})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["intertwined"], 12)
        self.assertEqual(response.json()["adventureRank"], 55)

    def test_character_lifecycle(self) -> None:
        self.client.put("/api/genshin", json=GENSHIN_ACCOUNT)
        created = self.client.post("/api/genshin/characters", json=CHARACTER)
        self.assertEqual(created.status_code, 201)
        character = created.json()
        self.assertEqual(character["level"], 1)
        self.assertTrue(character["obtained"])

        updated = self.client.patch(
            f"/api/genshin/characters/{character['id']}",
            json={"constellation": 2, "buildNotes": "HP sands"},
        ).json()
        self.assertEqual(updated["constellation"], 2)
        self.assertEqual(updated["buildNotes"], "HP sands")

        account = self.client.get("/api/genshin").json()
        self.assertEqual([c["name"] for c in account["characters"]], ["Furina"])

        deleted = self.client.delete(f"/api/genshin/characters/{character['id']}")
        self.assertEqual(deleted.json(), {"success": True})
        self.assertEqual(self.client.get("/api/genshin").json()["characters"], [])

    def test_invalid_constellation_is_400(self) -> None:
        self.client.put("/api/genshin", json=GENSHIN_ACCOUNT)
        response = self.client.post(
            "/api/genshin/characters", json={**CHARACTER, "constellation": 7}
        )
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
