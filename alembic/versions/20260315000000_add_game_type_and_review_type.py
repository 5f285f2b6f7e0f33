"""Add games.game_type, games.download_url and movies.review_type.

Databases that have not run this revision keep working; the startup schema
probe leaves these columns out of queries.

Revision ID: 20260315000000
Revises: 20260301000000
Create Date: 2026-03-15

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20260315000000"
down_revision: Union[str, None] = "20260301000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column("games", sa.Column("game_type", sa.String(length=100), nullable=True))
    op.add_column("games", sa.Column("download_url", sa.Text(), nullable=True))
    op.add_column("movies", sa.Column("review_type", sa.String(length=32), nullable=True))


def downgrade() -> None:
    op.drop_column("movies", "review_type")
    op.drop_column("games", "download_url")
    op.drop_column("games", "game_type")
