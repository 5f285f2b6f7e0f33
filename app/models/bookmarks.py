"""ORM models for stored credentials and website bookmarks."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text, func

from app.models.base import Base, generate_id


class Credential(Base):
    """
    Stored login for a third-party service.

    The password column is plain text; there is no encryption layer.
    """

    __tablename__ = "credentials"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(
        String(32),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    category = Column(String(32), nullable=False)
    username = Column(String(255), nullable=True)
    email = Column(String(320), nullable=True)
    password = Column(Text, nullable=False)
    url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    icon = Column(Text, nullable=True)
    last_updated = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Website(Base):
    __tablename__ = "websites"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(
        String(32),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)
    category = Column(String(32), nullable=False)
    description = Column(Text, nullable=True)
    favicon = Column(Text, nullable=True)
    is_favorite = Column(Boolean, nullable=False, default=False)
    last_visited = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
