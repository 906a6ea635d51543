# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - projects.py: Portfolio project CRUD
# - posts.py: Blog post CRUD
# - leads.py: Contact form submissions and lead management
# - dashboard.py: Admin dashboard aggregate
# - upload.py: Image upload to Cloudinary
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import projects
from . import posts
from . import leads
from . import dashboard
from . import upload

__all__ = [
    "health",
    "projects",
    "posts",
    "leads",
    "dashboard",
    "upload",
]
