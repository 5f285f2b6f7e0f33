"""Tests for the create_user CLI script."""

import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO

from app.core.database import SessionLocal
from app.core.security import verify_password
from app.repositories import UserRepository
from app.scripts.create_user import main
from support import reset_database


def _run(*argv: str) -> int:
    with redirect_stdout(StringIO()), redirect_stderr(StringIO()):
        return main(list(argv))


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()

    def test_creates_user_with_hashed_password(self) -> None:
        self.assertEqual(_run("carol@example.com", "secret1"), 0)
        with SessionLocal() as db:
            user = UserRepository(db).get_by_email("carol@example.com")
        self.assertIsNotNone(user)
        self.assertEqual(user.username, "carol")
        self.assertTrue(verify_password("secret1", user.password_hash))

    def test_custom_username(self) -> None:
        self.assertEqual(_run("carol@example.com", "secret1", "--username", "Carol"), 0)
        with SessionLocal() as db:
            self.assertEqual(UserRepository(db).get_by_email("carol@example.com").username, "Carol")

    def test_duplicate_email_fails(self) -> None:
        _run("carol@example.com", "secret1")
        self.assertEqual(_run("carol@example.com", "secret1"), 1)

    def test_invalid_input_fails(self) -> None:
        self.assertEqual(_run("not-an-email", "secret1"), 1)
        self.assertEqual(_run("carol@example.com", "abc"), 1)


if __name__ == "__main__":
    unittest.main()
