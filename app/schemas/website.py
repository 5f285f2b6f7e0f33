"""Schemas for website bookmarks."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

WebsiteCategory = Literal[
    "anime", "movies", "gaming", "productivity", "social", "news", "tools", "other"
]


class WebsiteCreate(CamelModel):
    """Body for POST /websites."""

    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=2048)
    category: WebsiteCategory
    description: str | None = None
    favicon: str | None = None
    is_favorite: bool = False
    last_visited: datetime | None = None


class WebsiteUpdate(CamelModel):
    """Body for PATCH /websites/{id}."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = Field(default=None, min_length=1, max_length=2048)
    category: WebsiteCategory | None = None
    description: str | None = None
    favicon: str | None = None
    is_favorite: bool | None = None
    last_visited: datetime | None = None


class WebsiteRead(CamelModel):
    id: str
    user_id: str
    name: str
    url: str
    category: str
    description: str | None = None
    favicon: str | None = None
    is_favorite: bool = False
    last_visited: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
