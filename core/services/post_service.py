# =============================================================================
# core/services/post_service.py - Blog Post Logic
# =============================================================================

from typing import Any

from core.services.resource_service import ResourceService


class PostService(ResourceService):
    """Service for the `blog_posts` table. Lists sort by publish date."""

    table = "blog_posts"
    resource_name = "Post"
    default_order = "published_at"

    def list_posts(
        self,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self.fetch_all({"category": category}, limit=limit)
