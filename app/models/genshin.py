"""ORM models for the Genshin Impact account (one per user) and its characters."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.models.base import Base, generate_id


class GenshinAccount(Base):
    __tablename__ = "genshin_accounts"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(
        String(32),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    uid = Column(String(32), nullable=False)
    adventure_rank = Column(Integer, nullable=False, default=1)
    world_level = Column(Integer, nullable=False, default=0)
    primogems = Column(Integer, nullable=False, default=0)
    intertwined = Column(Integer, nullable=False, default=0)
    acquaint = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class GenshinCharacter(Base):
    """Character on an account. Ownership is reached through account_id -> user_id."""

    __tablename__ = "genshin_characters"

    id = Column(String(32), primary_key=True, default=generate_id)
    account_id = Column(
        String(32),
        ForeignKey("genshin_accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    element = Column(String(16), nullable=False)
    weapon = Column(String(16), nullable=False)
    rarity = Column(Integer, nullable=False)
    constellation = Column(Integer, nullable=False, default=0)
    level = Column(Integer, nullable=False, default=1)
    friendship = Column(Integer, nullable=False, default=0)
    image = Column(Text, nullable=False)
    obtained = Column(Boolean, nullable=False, default=True)
    tier = Column(String(16), nullable=True)
    type = Column(String(64), nullable=True)
    type2 = Column(String(64), nullable=True)
    build_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
