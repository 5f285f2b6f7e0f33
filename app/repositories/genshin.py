"""Data accessor for the single Genshin account each user may own."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import GenshinAccount
from app.repositories.owned import PROTECTED_FIELDS

ACCOUNT_FIELDS = ("uid", "adventure_rank", "world_level", "primogems", "intertwined", "acquaint")


class GenshinAccountRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_for_owner(self, user_id: str) -> GenshinAccount | None:
        stmt = select(GenshinAccount).where(GenshinAccount.user_id == user_id)
        return self.session.scalars(stmt).one_or_none()

    def upsert(self, user_id: str, data: dict[str, Any]) -> GenshinAccount:
        """Create the user's account, or overwrite every stat of the existing one."""
        account = self.get_for_owner(user_id)
        if account is None:
            account = GenshinAccount(user_id=user_id)
            self.session.add(account)
        self._apply(account, data)
        self.session.commit()
        self.session.refresh(account)
        return account

    def update(self, user_id: str, data: dict[str, Any]) -> GenshinAccount | None:
        account = self.get_for_owner(user_id)
        if account is None:
            return None
        self._apply(account, data)
        self.session.commit()
        self.session.refresh(account)
        return account

    @staticmethod
    def _apply(account: GenshinAccount, data: dict[str, Any]) -> None:
        for key, value in data.items():
            if key in PROTECTED_FIELDS or key not in ACCOUNT_FIELDS:
                continue
            setattr(account, key, value)
