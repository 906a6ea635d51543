# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The backend clients are built once in the lifespan (app/main.py), stored on
# app.state, and handed to route handlers through Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.exceptions import BackendNotConfiguredError
from core.services import DashboardService, LeadService, PostService, ProjectService
from lib.cloudinary_client import CloudinaryClient
from lib.supabase_client import SupabaseClient


def get_supabase_client(request: Request) -> SupabaseClient | None:
    """Return the startup-built Supabase wrapper, or None if unconfigured."""
    return getattr(request.app.state, "supabase", None)


def get_cloudinary_client(request: Request) -> CloudinaryClient | None:
    """Return the startup-built Cloudinary wrapper, or None if unconfigured."""
    return getattr(request.app.state, "cloudinary", None)


def require_supabase(
    client: SupabaseClient | None = Depends(get_supabase_client),
) -> SupabaseClient:
    """
    Get the Supabase client, failing the request if it is not configured.

    Raises:
        BackendNotConfiguredError: 500 when credentials are missing
    """
    if client is None:
        raise BackendNotConfiguredError("Supabase")
    return client


SupabaseDep = Annotated[SupabaseClient, Depends(require_supabase)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------

def get_project_service(db: SupabaseDep) -> ProjectService:
    return ProjectService(db)


def get_post_service(db: SupabaseDep) -> PostService:
    return PostService(db)


def get_lead_service(db: SupabaseDep) -> LeadService:
    return LeadService(db)


def get_dashboard_service(db: SupabaseDep) -> DashboardService:
    return DashboardService(db)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
LeadServiceDep = Annotated[LeadService, Depends(get_lead_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
