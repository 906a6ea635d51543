# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the content-management logic:
# - models/: Pydantic schemas for projects, posts, leads and the dashboard
# - services/: Table operations over the injected Supabase client
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable and reusable.
# =============================================================================
