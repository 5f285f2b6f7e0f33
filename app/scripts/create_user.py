"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [--username NAME]
Example:
  python -m app.scripts.create_user alice@example.com secret1
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from app.api.routes.auth import EMAIL_PATTERN, default_avatar_url
from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    hash_password,
)
from app.repositories import UserRepository

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Entertainment Tracker user.")
    parser.add_argument("email", help="Email address (login name)")
    parser.add_argument(
        "password",
        help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)",
    )
    parser.add_argument(
        "--username",
        help="Display name (defaults to the part of the email before '@')",
    )
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not EMAIL_PATTERN.match(email):
        print("Invalid email format.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1
    username = (args.username or email.split("@")[0]).strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        users = UserRepository(db)
        if users.get_by_email(email) is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = users.create(
            email=email,
            username=username,
            password_hash=hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
            avatar=default_avatar_url(username),
        )
        logger.info("Created user id=%s", user.id)
        print(f"Created user '{email}' (username '{username}').")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    sys.exit(main())
