"""Startup capability probe for optional columns added by later migrations.

A database that has not run every migration lacks some columns the models
declare. Instead of failing on each request, the app inspects the live schema
once and the data accessors leave the missing columns out of their statements.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy import Engine, inspect
from sqlalchemy.exc import SQLAlchemyError

from app.models import Game, Movie

logger = logging.getLogger(__name__)

# table name -> columns that may legitimately be absent
OPTIONAL_COLUMNS: dict[str, frozenset[str]] = {
    Game.__tablename__: frozenset({"game_type", "download_url"}),
    Movie.__tablename__: frozenset({"review_type"}),
}


@dataclass(frozen=True)
class SchemaCapabilities:
    """Which optional columns are missing, per table. Empty means fully migrated."""

    missing: dict[str, frozenset[str]] = field(default_factory=dict)

    def missing_columns(self, table: str) -> frozenset[str]:
        return self.missing.get(table, frozenset())

    def describe_missing(self) -> list[str]:
        return sorted(f"{table}.{col}" for table, cols in self.missing.items() for col in cols)


def probe_schema(engine: Engine) -> SchemaCapabilities:
    """
    Inspect the database once and record which optional columns are absent.

    A missing table is reported as missing all its optional columns. An
    unreachable database is logged and treated as fully migrated, so startup
    never fails here; requests will surface the connection error instead.
    """
    try:
        inspector = inspect(engine)
        existing_tables = set(inspector.get_table_names())
        missing: dict[str, frozenset[str]] = {}
        for table, optional in OPTIONAL_COLUMNS.items():
            if table not in existing_tables:
                present: set[str] = set()
            else:
                present = {col["name"] for col in inspector.get_columns(table)}
            absent = optional - present
            if absent:
                missing[table] = frozenset(absent)
    except SQLAlchemyError as e:
        logger.warning("Schema probe skipped, database not reachable: %s", e)
        return SchemaCapabilities()

    capabilities = SchemaCapabilities(missing=missing)
    if missing:
        logger.warning(
            "Database schema is behind the models; optional columns disabled: %s",
            ", ".join(capabilities.describe_missing()),
        )
    else:
        logger.info("Schema probe: all optional columns present")
    return capabilities
