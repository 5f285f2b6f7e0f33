"""Health check endpoint with database connectivity and schema probe result."""

from fastapi import APIRouter

from app.api.deps import CapabilitiesDep, DbDep, SettingsDep
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbDep, settings: SettingsDep, capabilities: CapabilitiesDep) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring. Does not require a session.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        missing_columns=capabilities.describe_missing(),
    )
