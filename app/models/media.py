"""ORM models for tracked media: anime, movies, K-dramas and games."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from app.models.base import Base, generate_id


def _owner_column() -> Column:
    return Column(
        String(32),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def _created_at() -> Column:
    return Column(DateTime(timezone=True), nullable=False, server_default=func.now())


def _updated_at() -> Column:
    return Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class Anime(Base):
    """Anime or donghua on the user's list. genres is a JSON-encoded array."""

    __tablename__ = "anime"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = _owner_column()
    title = Column(Text, nullable=False)
    title_japanese = Column(Text, nullable=True)
    anime_other_name = Column(Text, nullable=True)
    anime_type = Column(String(32), nullable=True)
    airing_status = Column(String(32), nullable=True)
    watch_status = Column(String(32), nullable=False)
    website_link = Column(Text, nullable=True)
    episode_on = Column(String(16), nullable=True)
    cover_image = Column(Text, nullable=False)
    banner_image = Column(Text, nullable=True)
    episodes = Column(Integer, nullable=False, default=0)
    episodes_watched = Column(Integer, nullable=False, default=0)
    score = Column(Integer, nullable=True)
    genres = Column(Text, nullable=False, default="[]")
    synopsis = Column(Text, nullable=True)
    season = Column(String(32), nullable=True)
    year = Column(Integer, nullable=True)
    start_date = Column(String(32), nullable=True)
    end_date = Column(String(32), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()


class Movie(Base):
    """
    Movie on the user's list.

    review_type was added by a later migration and may be missing on older
    databases; see app.core.schema_probe.
    """

    __tablename__ = "movies"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = _owner_column()
    title = Column(Text, nullable=False)
    poster_image = Column(Text, nullable=False)
    backdrop_image = Column(Text, nullable=True)
    release_date = Column(String(32), nullable=False)
    status = Column(String(32), nullable=False)
    review_type = Column(String(32), nullable=True)
    genres = Column(Text, nullable=False, default="[]")
    synopsis = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()


class KDrama(Base):
    """K-drama on the user's list. genres and cast are JSON-encoded arrays."""

    __tablename__ = "kdrama"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = _owner_column()
    title = Column(Text, nullable=False)
    title_korean = Column(Text, nullable=True)
    poster_image = Column(Text, nullable=False)
    episodes = Column(Integer, nullable=False, default=0)
    episodes_watched = Column(Integer, nullable=False, default=0)
    status = Column(String(32), nullable=False)
    score = Column(Integer, nullable=True)
    genres = Column(Text, nullable=False, default="[]")
    synopsis = Column(Text, nullable=True)
    network = Column(String(255), nullable=True)
    year = Column(Integer, nullable=True)
    cast = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()


class Game(Base):
    """
    Game on the user's list. platform and genres are JSON-encoded arrays.

    game_type and download_url were added by a later migration.
    """

    __tablename__ = "games"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = _owner_column()
    title = Column(Text, nullable=False)
    cover_image = Column(Text, nullable=False)
    platform = Column(Text, nullable=False, default="[]")
    status = Column(String(32), nullable=False)
    game_type = Column(String(100), nullable=True)
    download_url = Column(Text, nullable=True)
    genres = Column(Text, nullable=False, default="[]")
    release_date = Column(String(32), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()
