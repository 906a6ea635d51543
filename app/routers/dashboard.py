# =============================================================================
# app/routers/dashboard.py - Admin Dashboard Endpoint
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.auth import CurrentUser
from app.dependencies import DashboardServiceDep
from core.models.dashboard import DashboardStats

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_dashboard(
    user: CurrentUser,
    service: DashboardServiceDep,
):
    """
    Counts and recent activity for the admin dashboard.

    The response always carries every key. Failed sub-queries count as 0
    or []; an unexpected failure returns 500 with the same zeroed shape.
    """
    try:
        return service.get_stats().to_response()
    except Exception as e:
        logger.error(f"Dashboard aggregation failed: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": str(e) or "Internal server error",
                **DashboardStats().to_response(),
            },
        )
