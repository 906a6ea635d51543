# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Lumen Sphere API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 4000
#   lumen-sphere-api            (standalone server, see app/server.py)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    LumenSphereException,
    http_exception_handler,
    lumensphere_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import dashboard, health, leads, posts, projects, upload
from app.routing import LogicalPathMiddleware
from lib.cloudinary_client import CloudinaryClient
from lib.supabase_client import SupabaseClient, SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_ENDPOINTS = ["/projects", "/posts", "/upload", "/leads", "/dashboard"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Build the Supabase and Cloudinary clients and attach them to app.state
    - Shutdown: Drop the clients
    """
    # Startup
    logger.info(f"Starting Lumen Sphere API in {settings.ENVIRONMENT} mode")
    logger.info(f"SUPABASE_URL present: {bool(settings.supabase_url)}")
    logger.info(f"SERVICE ROLE present: {bool(settings.SUPABASE_SERVICE_ROLE_KEY)}")

    try:
        app.state.supabase = SupabaseClient.from_settings(settings)
    except SupabaseClientError as e:
        logger.error(str(e))
        app.state.supabase = None

    app.state.cloudinary = CloudinaryClient.from_settings(settings)

    yield

    # Shutdown
    logger.info("Shutting down Lumen Sphere API")
    app.state.supabase = None
    app.state.cloudinary = None


# Create FastAPI application
app = FastAPI(
    title="Lumen Sphere API",
    description="""
## Studio Content API

Backend for the studio marketing site and its admin dashboard.

| Resource | Public | Admin |
|----------|--------|-------|
| **Projects** | list, get | create, update, delete |
| **Posts** | list, get | create, update, delete |
| **Leads** | submit | list, get, delete |
| **Dashboard** | | counts and recent activity |
| **Upload** | | image upload to Cloudinary |

Admin endpoints need `Authorization: Bearer <Supabase access token>`.
Every route is also reachable under `/api`.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Projects", "description": "Portfolio case studies"},
        {"name": "Posts", "description": "Blog posts"},
        {"name": "Leads", "description": "Contact form submissions"},
        {"name": "Dashboard", "description": "Admin overview"},
        {"name": "Upload", "description": "Image hosting"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Registered before CORS so it sits inside it: a 500 from an unhandled error
# still carries CORS headers. The Exception handler below only sees errors
# raised by the outer middleware.
@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list or ["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

# Strip /api and expand catch-all ?path= segments before routing
app.add_middleware(LogicalPathMiddleware, prefix=settings.API_PREFIX)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(LumenSphereException, lumensphere_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

app.include_router(projects.router, prefix="/projects", tags=["Projects"])
app.include_router(posts.router, prefix="/posts", tags=["Posts"])
app.include_router(upload.router, prefix="/upload", tags=["Upload"])
app.include_router(leads.router, prefix="/leads", tags=["Leads"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
app.include_router(health.router, tags=["Health"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    API index - lists the resource endpoints.
    """
    return {
        "message": "Lumen Sphere API running",
        "endpoints": [f"{settings.API_PREFIX}{path}" for path in API_ENDPOINTS],
    }
