"""Generic owner-scoped data accessor shared by every per-user collection."""

import json
import logging
from typing import Any, ClassVar

from sqlalchemy import ColumnElement, delete, insert, select, update
from sqlalchemy.orm import Session

from app.core.schema_probe import SchemaCapabilities
from app.models import generate_id

logger = logging.getLogger(__name__)

# Never writable through create/update payloads.
PROTECTED_FIELDS = frozenset({"id", "user_id", "account_id", "created_at"})


class OwnedRepository:
    """
    CRUD for a table whose rows belong to one user.

    Every statement is conjoined with the owner predicate from _owner_clause,
    so a row of another user behaves exactly like a missing row. Rows are
    returned as plain dicts with JSON array columns already decoded.
    """

    model: ClassVar[Any]
    # Columns stored as JSON-encoded text and exposed as lists.
    json_fields: ClassVar[frozenset[str]] = frozenset()
    # JSON columns where NULL means "not set" rather than an empty list.
    nullable_json_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: Session, capabilities: SchemaCapabilities | None = None):
        self.session = session
        self.capabilities = capabilities or SchemaCapabilities()

    # --- column handling ---

    def _available_columns(self) -> list[Any]:
        """Mapped columns that exist in the live database."""
        missing = self.capabilities.missing_columns(self.model.__tablename__)
        return [col for col in self.model.__table__.columns if col.name not in missing]

    def _writable(self, data: dict[str, Any]) -> dict[str, Any]:
        """Keep only columns that exist and may be written; encode JSON arrays."""
        names = {col.name for col in self._available_columns()}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key in PROTECTED_FIELDS or key not in names:
                continue
            if key in self.json_fields:
                value = self._encode_list(key, value)
            values[key] = value
        return values

    def _encode_list(self, key: str, value: Any) -> str | None:
        if value is None:
            return None if key in self.nullable_json_fields else "[]"
        return json.dumps(list(value))

    def _decode_row(self, row: Any) -> dict[str, Any]:
        item = dict(row)
        for key in self.json_fields:
            if key not in item:
                continue
            raw = item[key]
            if raw is None or raw == "":
                item[key] = None if key in self.nullable_json_fields else []
                continue
            try:
                decoded = json.loads(raw)
            except (TypeError, ValueError):
                logger.warning(
                    "Unreadable JSON in %s.%s for id=%s; returning empty list",
                    self.model.__tablename__,
                    key,
                    item.get("id"),
                )
                decoded = []
            if not isinstance(decoded, list):
                decoded = []
            values = [value for value in decoded if isinstance(value, str)]
            if len(values) != len(decoded):
                logger.warning(
                    "Dropped %d non-string value(s) from %s.%s for id=%s",
                    len(decoded) - len(values),
                    self.model.__tablename__,
                    key,
                    item.get("id"),
                )
            item[key] = values
        return item

    # --- ownership ---

    def _owner_clause(self, user_id: str) -> ColumnElement[bool]:
        return self.model.user_id == user_id

    def _owner_values(self, user_id: str) -> dict[str, Any]:
        """Foreign-key values that attach a new row to its owner."""
        return {"user_id": user_id}

    # --- operations ---

    def list_for_owner(self, user_id: str) -> list[dict[str, Any]]:
        stmt = (
            select(*self._available_columns())
            .where(self._owner_clause(user_id))
            .order_by(self.model.created_at, self.model.id)
        )
        return [self._decode_row(row) for row in self.session.execute(stmt).mappings()]

    def get(self, item_id: str, user_id: str) -> dict[str, Any] | None:
        stmt = select(*self._available_columns()).where(
            self.model.id == item_id, self._owner_clause(user_id)
        )
        row = self.session.execute(stmt).mappings().first()
        return self._decode_row(row) if row is not None else None

    def create(self, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        item_id = generate_id()
        values = {**self._writable(data), "id": item_id, **self._owner_values(user_id)}
        self.session.execute(insert(self.model).values(**values))
        self.session.commit()
        created = self.get(item_id, user_id)
        if created is None:
            raise RuntimeError(f"{self.model.__tablename__} row {item_id} vanished after insert")
        return created

    def update(self, item_id: str, user_id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update; returns None when the row does not exist for this owner."""
        values = self._writable(data)
        if not values:
            return self.get(item_id, user_id)
        stmt = (
            update(self.model)
            .where(self.model.id == item_id, self._owner_clause(user_id))
            .values(**values)
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            self.session.rollback()
            return None
        self.session.commit()
        return self.get(item_id, user_id)

    def delete(self, item_id: str, user_id: str) -> bool:
        stmt = delete(self.model).where(self.model.id == item_id, self._owner_clause(user_id))
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount > 0
