"""Tests for the {"error": ...} envelope produced by app.core.errors."""

import unittest
from unittest.mock import patch

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.config import Settings
from app.core.errors import error_body, register_exception_handlers


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("kaput")

    @app.get("/db")
    def db() -> None:
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/teapot")
    def teapot() -> None:
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.get("/items/{item_id}")
    def item(item_id: int) -> dict[str, int]:
        return {"id": item_id}

    return app


def _prod_settings() -> Settings:
    return Settings(
        APP_ENV="prod",
        DATABASE_URL="sqlite://",
        JWT_SECRET="a-secret",
        JWT_REFRESH_SECRET="b-secret",
    )


class TestErrorEnvelope(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(_app(), raise_server_exceptions=False)

    def test_unexpected_error_is_500_with_details_outside_prod(self) -> None:
        response = self.client.get("/boom")
        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertEqual(body["error"], "Internal server error")
        self.assertIn("kaput", body["details"])

    def test_details_hidden_in_prod(self) -> None:
        with patch("app.core.errors.get_settings", return_value=_prod_settings()):
            response = self.client.get("/boom")
        self.assertEqual(response.json(), {"error": "Internal server error"})

    def test_database_error(self) -> None:
        response = self.client.get("/db")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Database error")

    def test_http_exception_detail_becomes_error(self) -> None:
        response = self.client.get("/teapot")
        self.assertEqual(response.status_code, 418)
        self.assertEqual(response.json(), {"error": "I'm a teapot"})

    def test_unknown_route_uses_envelope(self) -> None:
        response = self.client.get("/nowhere")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Not Found"})

    def test_validation_error_is_400(self) -> None:
        response = self.client.get("/items/abc")
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("path.item_id:"))


class TestErrorBody(unittest.TestCase):
    def test_no_details_key_without_details(self) -> None:
        self.assertEqual(error_body("Nope"), {"error": "Nope"})


if __name__ == "__main__":
    unittest.main()
