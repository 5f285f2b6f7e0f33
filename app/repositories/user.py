"""Data accessor for user accounts."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import User

# Profile fields a user may change about themselves.
PROFILE_FIELDS = frozenset({"username", "avatar"})


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: str) -> User | None:
        """Retrieves a User by their primary ID."""
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        """Retrieves a User by exact email (case-sensitive, not normalized)."""
        stmt = select(User).where(User.email == email)
        return self.session.scalars(stmt).one_or_none()

    def create(self, email: str, username: str, password_hash: str, avatar: str | None) -> User:
        user = User(email=email, username=username, password_hash=password_hash, avatar=avatar)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def update_profile(self, user: User, update_data: dict[str, Any]) -> User:
        for key, value in update_data.items():
            if key in PROFILE_FIELDS:
                setattr(user, key, value)
        self.session.commit()
        self.session.refresh(user)
        return user
