"""Initial schema: users and every per-user collection.

Revision ID: 20260301000000
Revises:
Create Date: 2026-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20260301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(length=32), nullable=False)


def _owner() -> sa.Column:
    return sa.Column("user_id", sa.String(length=32), nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def _owner_fk() -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE")


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "anime",
        _id(),
        _owner(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("title_japanese", sa.Text(), nullable=True),
        sa.Column("anime_other_name", sa.Text(), nullable=True),
        sa.Column("anime_type", sa.String(length=32), nullable=True),
        sa.Column("airing_status", sa.String(length=32), nullable=True),
        sa.Column("watch_status", sa.String(length=32), nullable=False),
        sa.Column("website_link", sa.Text(), nullable=True),
        sa.Column("episode_on", sa.String(length=16), nullable=True),
        sa.Column("cover_image", sa.Text(), nullable=False),
        sa.Column("banner_image", sa.Text(), nullable=True),
        sa.Column("episodes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("episodes_watched", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("genres", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column("season", sa.String(length=32), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("start_date", sa.String(length=32), nullable=True),
        sa.Column("end_date", sa.String(length=32), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_anime_user_id"), "anime", ["user_id"], unique=False)

    op.create_table(
        "movies",
        _id(),
        _owner(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("poster_image", sa.Text(), nullable=False),
        sa.Column("backdrop_image", sa.Text(), nullable=True),
        sa.Column("release_date", sa.String(length=32), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("genres", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_movies_user_id"), "movies", ["user_id"], unique=False)

    op.create_table(
        "kdrama",
        _id(),
        _owner(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("title_korean", sa.Text(), nullable=True),
        sa.Column("poster_image", sa.Text(), nullable=False),
        sa.Column("episodes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("episodes_watched", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("genres", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column("network", sa.String(length=255), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("cast", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_kdrama_user_id"), "kdrama", ["user_id"], unique=False)

    op.create_table(
        "games",
        _id(),
        _owner(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("cover_image", sa.Text(), nullable=False),
        sa.Column("platform", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("genres", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("release_date", sa.String(length=32), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_games_user_id"), "games", ["user_id"], unique=False)

    op.create_table(
        "genshin_accounts",
        _id(),
        _owner(),
        sa.Column("uid", sa.String(length=32), nullable=False),
        sa.Column("adventure_rank", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("world_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("primogems", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("intertwined", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("acquaint", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "genshin_characters",
        _id(),
        sa.Column("account_id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("element", sa.String(length=16), nullable=False),
        sa.Column("weapon", sa.String(length=16), nullable=False),
        sa.Column("rarity", sa.Integer(), nullable=False),
        sa.Column("constellation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("friendship", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column("obtained", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("tier", sa.String(length=16), nullable=True),
        sa.Column("type", sa.String(length=64), nullable=True),
        sa.Column("type2", sa.String(length=64), nullable=True),
        sa.Column("build_notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["account_id"], ["genshin_accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_genshin_characters_account_id"),
        "genshin_characters",
        ["account_id"],
        unique=False,
    )

    op.create_table(
        "credentials",
        _id(),
        _owner(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("icon", sa.Text(), nullable=True),
        _timestamp("last_updated"),
        _timestamp("created_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_credentials_user_id"), "credentials", ["user_id"], unique=False)

    op.create_table(
        "websites",
        _id(),
        _owner(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("favicon", sa.Text(), nullable=True),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("last_visited", sa.DateTime(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _owner_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_websites_user_id"), "websites", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_websites_user_id"), table_name="websites")
    op.drop_table("websites")
    op.drop_index(op.f("ix_credentials_user_id"), table_name="credentials")
    op.drop_table("credentials")
    op.drop_index(op.f("ix_genshin_characters_account_id"), table_name="genshin_characters")
    op.drop_table("genshin_characters")
    op.drop_table("genshin_accounts")
    op.drop_index(op.f("ix_games_user_id"), table_name="games")
    op.drop_table("games")
    op.drop_index(op.f("ix_kdrama_user_id"), table_name="kdrama")
    op.drop_table("kdrama")
    op.drop_index(op.f("ix_movies_user_id"), table_name="movies")
    op.drop_table("movies")
    op.drop_index(op.f("ix_anime_user_id"), table_name="anime")
    op.drop_table("anime")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
