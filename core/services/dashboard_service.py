# =============================================================================
# core/services/dashboard_service.py - Admin Dashboard Aggregation
# =============================================================================
# Builds the admin overview from independent count and "recent" queries.
# Each query fails on its own: a count falls back to 0, a recent list to [].
# The sub-queries do not depend on each other and run one after another.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from core.models.dashboard import (
    DashboardStats,
    LeadCounts,
    RecentActivity,
    ResourceCounts,
)
from lib.supabase_client import SupabaseClient, is_missing_table_error

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5

# Columns shown in the dashboard's "recent" panels
RECENT_COLUMNS = {
    "projects": "id, title, created_at",
    "blog_posts": "id, title, created_at, published_at",
    "leads": "id, name, email, created_at",
}


class DashboardService:
    """Service computing the DashboardStats aggregate."""

    def __init__(self, db: SupabaseClient):
        self.db = db

    def count(self, table: str, since: datetime | None = None) -> int:
        """
        Count rows in a table, optionally only those created since a time.

        Never raises: any failure counts as 0.
        """
        try:
            query = self.db.table(table).select("*", count="exact", head=True)
            if since is not None:
                query = query.gte("created_at", since.isoformat())
            response = query.execute()
        except Exception as e:
            if not is_missing_table_error(e):
                logger.warning(f"Count error on {table}: {e}")
            return 0

        return response.count or 0

    def recent(self, table: str, limit: int = RECENT_LIMIT) -> list[dict[str, Any]]:
        """Newest rows of a table. Never raises: any failure is an empty list."""
        try:
            response = (
                self.db.table(table)
                .select(RECENT_COLUMNS[table])
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            logger.warning(f"Recent rows query failed on {table}: {e}")
            return []

        return response.data or []

    def get_stats(self, now: datetime | None = None) -> DashboardStats:
        """
        Compute the full dashboard aggregate.

        Args:
            now: Reference time (UTC); defaults to the current time

        Returns:
            DashboardStats with every field populated
        """
        now = now or datetime.now(timezone.utc)
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_ago = now - timedelta(days=7)

        return DashboardStats(
            projects=ResourceCounts(
                total=self.count("projects"),
                today=self.count("projects", since=today),
            ),
            posts=ResourceCounts(
                total=self.count("blog_posts"),
                today=self.count("blog_posts", since=today),
            ),
            leads=LeadCounts(
                total=self.count("leads"),
                today=self.count("leads", since=today),
                this_week=self.count("leads", since=week_ago),
            ),
            recent=RecentActivity(
                projects=self.recent("projects"),
                posts=self.recent("blog_posts"),
                leads=self.recent("leads"),
            ),
        )
