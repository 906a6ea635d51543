# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.config import settings
from app.dependencies import get_cloudinary_client, get_supabase_client
from lib.cloudinary_client import CloudinaryClient
from lib.supabase_client import SupabaseClient, is_missing_table_error

router = APIRouter()

API_VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str
    asset_host: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(
    db: SupabaseClient | None = Depends(get_supabase_client),
    host: CloudinaryClient | None = Depends(get_cloudinary_client),
):
    """
    Readiness check endpoint.

    Checks database connectivity and whether image uploads are configured.
    A missing projects table still counts as a reachable database.
    """
    checks = ChecksResponse(database="unknown", asset_host="unknown")

    if db is None:
        checks.database = "not configured"
    else:
        try:
            db.table("projects").select("id").limit(1).execute()
            checks.database = "healthy"
        except Exception as e:
            if is_missing_table_error(e):
                checks.database = "healthy"
            else:
                checks.database = f"unhealthy: {str(e)[:50]}"

    checks.asset_host = "configured" if host is not None else "not configured"

    all_healthy = checks.database == "healthy" and checks.asset_host == "configured"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
