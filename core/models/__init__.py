# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - project.py: Portfolio project request body and read defaults
# - post.py: Blog post request body
# - lead.py: Contact form submission
# - dashboard.py: Admin dashboard aggregate
#
# These models define the "contract" between API and clients.
# =============================================================================

from .project import (
    PROJECT_READ_DEFAULTS,
    PROJECT_REQUIRED_FIELDS,
    ProjectInput,
    ProjectMetrics,
    apply_project_defaults,
)
from .post import POST_REQUIRED_FIELDS, PostInput
from .lead import LeadInput
from .dashboard import DashboardStats, LeadCounts, RecentActivity, ResourceCounts

__all__ = [
    # Project
    "PROJECT_READ_DEFAULTS",
    "PROJECT_REQUIRED_FIELDS",
    "ProjectInput",
    "ProjectMetrics",
    "apply_project_defaults",
    # Post
    "POST_REQUIRED_FIELDS",
    "PostInput",
    # Lead
    "LeadInput",
    # Dashboard
    "DashboardStats",
    "LeadCounts",
    "RecentActivity",
    "ResourceCounts",
]
