"""ORM model for application users."""

from sqlalchemy import Column, DateTime, String, Text, func

from app.models.base import Base, generate_id


class User(Base):
    """
    User account for cookie-based JWT authentication.

    Owns every per-entity collection through user_id foreign keys.
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    username = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
    # May hold a data URI, hence Text.
    avatar = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
