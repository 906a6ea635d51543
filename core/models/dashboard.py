# =============================================================================
# core/models/dashboard.py - Admin Dashboard Schemas
# =============================================================================
# The dashboard aggregate is never stored. Every field has a zero/empty
# default so a partially failed aggregation still has the full shape.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ResourceCounts(BaseModel):
    """Total rows and rows created since UTC midnight."""
    total: int = 0
    today: int = 0


class LeadCounts(ResourceCounts):
    """Lead counts also track the trailing seven days."""
    this_week: int = Field(default=0, serialization_alias="thisWeek")


class RecentActivity(BaseModel):
    """Five newest rows per table, newest first."""
    projects: list[dict[str, Any]] = Field(default_factory=list)
    posts: list[dict[str, Any]] = Field(default_factory=list)
    leads: list[dict[str, Any]] = Field(default_factory=list)


class DashboardStats(BaseModel):
    """
    Response of GET /dashboard.

    Example:
        {
            "projects": {"total": 12, "today": 1},
            "posts": {"total": 4, "today": 0},
            "leads": {"total": 30, "today": 2, "thisWeek": 7},
            "recent": {"projects": [...], "posts": [...], "leads": [...]}
        }
    """
    projects: ResourceCounts = Field(default_factory=ResourceCounts)
    posts: ResourceCounts = Field(default_factory=ResourceCounts)
    leads: LeadCounts = Field(default_factory=LeadCounts)
    recent: RecentActivity = Field(default_factory=RecentActivity)

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
