"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel


class HealthResponse(CamelModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )
    missing_columns: list[str] = Field(
        default_factory=list,
        description="Optional columns the startup schema probe did not find (table.column)",
    )
