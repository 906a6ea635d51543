# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .resource_service import ResourceService
from .project_service import ProjectService
from .post_service import PostService
from .lead_service import LeadService
from .dashboard_service import DashboardService

__all__ = [
    "ResourceService",
    "ProjectService",
    "PostService",
    "LeadService",
    "DashboardService",
]
