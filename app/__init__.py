# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - server.py: Standalone uvicorn entry point
# - config.py: Environment variable loading and settings
# - routing.py: /api prefix and catch-all path normalization
# - auth/: Bearer-token gate backed by Supabase Auth
# - routers/: API endpoint definitions organized by resource
#
# The app layer is thin - it handles HTTP concerns and delegates
# table operations to the core/ package.
# =============================================================================
