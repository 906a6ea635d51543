# =============================================================================
# core/models/post.py - Blog Post Schemas
# =============================================================================
# Request body for blog posts. Rows live in the `blog_posts` table.
# =============================================================================

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from lib.utils import clean_optional_text, split_list_field

POST_REQUIRED_FIELDS = ("title", "excerpt", "category", "content")


class PostInput(BaseModel):
    """
    Request body for creating or updating a blog post.

    Example:
        {
            "title": "Why we ship on Fridays",
            "excerpt": "A short defence of small releases",
            "category": "Process",
            "content": "...",
            "readTime": "6 min read",
            "tags": ["process", "deploys"],
            "publishedAt": "2025-03-01T09:00:00Z"
        }
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str | None = None
    excerpt: str | None = None
    category: str | None = None
    content: str | None = None
    read_time: str | None = None
    tags: list[str] = Field(default_factory=list)
    hero_image: str | None = None
    published_at: datetime | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> list[str]:
        return split_list_field(value)

    @field_validator("published_at", mode="before")
    @classmethod
    def blank_date_is_none(cls, value: Any) -> Any:
        # Forms submit an empty string for "not published yet"
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self, partial: bool = False) -> dict[str, Any]:
        """
        Normalize into a `blog_posts` row.

        Raises:
            ValueError: If a required field is missing on create
        """
        if not partial:
            missing = [
                name for name in POST_REQUIRED_FIELDS
                if not (getattr(self, name) or "").strip()
            ]
            if missing:
                raise ValueError(
                    f"Missing required fields: {', '.join(POST_REQUIRED_FIELDS)}"
                )

        record = {
            "title": self.title,
            "excerpt": self.excerpt,
            "category": self.category,
            "content": self.content,
            "read_time": clean_optional_text(self.read_time),
            "tags": self.tags,
            "hero_image": clean_optional_text(self.hero_image),
            "published_at": _to_utc_iso(self.published_at),
        }

        if partial:
            return {key: value for key, value in record.items() if key in self.model_fields_set}
        return record


def _to_utc_iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()
