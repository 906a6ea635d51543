# =============================================================================
# core/models/project.py - Portfolio Project Schemas
# =============================================================================
# These models define the API contract for portfolio projects:
# - ProjectMetrics: The headline result shown on a case study card
# - ProjectInput: Request body for create/update (camelCase or snake_case)
#
# Rows are stored in the `projects` table with snake_case columns.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from lib.utils import clean_optional_text, coerce_optional_int, split_list_field

PROJECT_REQUIRED_FIELDS = ("title", "description", "category", "image")

# Columns added by later migrations may be absent from older rows
PROJECT_READ_DEFAULTS: dict[str, Any] = {
    "mobile_image": None,
    "gallery": [],
    "metrics": None,
    "long_description": None,
    "website_url": None,
    "video_src": None,
    "is_featured": False,
    "featured_order": None,
}


class ProjectMetrics(BaseModel):
    """
    Headline metric for a project.

    Example:
        {"improvement": "Conversion rate", "metric": "+42%"}
    """
    improvement: str = ""
    metric: str = ""


class ProjectInput(BaseModel):
    """
    Request body for creating or updating a project.

    Every field is optional at the schema level. Create-time requirements
    are enforced by to_record() so the client gets one readable message.

    Example:
        {
            "title": "Northwind Rebrand",
            "description": "New identity and storefront",
            "category": "E-commerce",
            "tags": "Branding, Shopify",
            "image": "https://res.cloudinary.com/.../hero.webp",
            "isFeatured": true,
            "featuredOrder": "2"
        }
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str | None = None
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    image: str | None = None
    mobile_image: str | None = None
    gallery: list[str] = Field(default_factory=list)
    metrics: ProjectMetrics | None = None
    long_description: str | None = None
    website_url: str | None = None
    video_src: str | None = None
    is_featured: bool | None = None
    featured_order: int | None = Field(
        default=None,
        description="Position on the home page; numeric strings are accepted"
    )

    @field_validator("tags", "gallery", mode="before")
    @classmethod
    def split_list(cls, value: Any) -> list[str]:
        # Arrays or comma-separated strings; any other shape is an empty list
        return split_list_field(value)

    @field_validator("featured_order", mode="before")
    @classmethod
    def coerce_order(cls, value: Any) -> int | None:
        return coerce_optional_int(value)

    def to_record(self, partial: bool = False) -> dict[str, Any]:
        """
        Normalize into a `projects` row.

        Args:
            partial: Only return the fields the client actually sent,
                and skip the required-field check

        Raises:
            ValueError: If a required field is missing on create
        """
        if not partial:
            missing = [
                name for name in PROJECT_REQUIRED_FIELDS
                if not (getattr(self, name) or "").strip()
            ]
            if missing:
                raise ValueError(
                    f"Missing required fields: {', '.join(PROJECT_REQUIRED_FIELDS)}"
                )

        record = {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "tags": self.tags,
            "image": self.image,
            "mobile_image": clean_optional_text(self.mobile_image),
            "gallery": self.gallery,
            "metrics": self.metrics.model_dump() if self.metrics else None,
            "long_description": clean_optional_text(self.long_description),
            "website_url": clean_optional_text(self.website_url),
            "video_src": clean_optional_text(self.video_src),
            "is_featured": bool(self.is_featured),
            "featured_order": self.featured_order,
        }

        if partial:
            return {key: value for key, value in record.items() if key in self.model_fields_set}
        return record


def apply_project_defaults(row: dict[str, Any]) -> dict[str, Any]:
    """Fill columns missing or null on a stored row with their defaults."""
    result = dict(row)
    for key, default in PROJECT_READ_DEFAULTS.items():
        if result.get(key) is None:
            result[key] = list(default) if isinstance(default, list) else default
    return result
