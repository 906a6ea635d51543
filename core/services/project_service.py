# =============================================================================
# core/services/project_service.py - Portfolio Project Logic
# =============================================================================

from typing import Any

from core.models.project import apply_project_defaults
from core.services.resource_service import ResourceService


class ProjectService(ResourceService):
    """
    Service for the `projects` table.

    Reads fill in defaults for the featured columns, which older
    databases may not have yet.
    """

    table = "projects"
    resource_name = "Project"

    def normalize_row(self, row: dict[str, Any]) -> dict[str, Any]:
        return apply_project_defaults(row)

    def list_projects(
        self,
        category: str | None = None,
        featured: bool | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        List projects.

        Featured listings come back in their curated order (featured_order
        ascending); everything else newest first.
        """
        filters: dict[str, Any] = {"category": category}
        if featured is not None:
            filters["is_featured"] = "true" if featured else "false"

        if featured:
            return self.fetch_all(filters, order_by="featured_order", descending=False, limit=limit)
        return self.fetch_all(filters, limit=limit)
