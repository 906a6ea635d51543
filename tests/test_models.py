# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request and response models to ensure:
# - camelCase and snake_case request keys are both accepted
# - Create-time required fields produce one readable error
# - Partial records only carry the fields the client sent
# - Defaults fill columns absent from older rows
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    DashboardStats,
    LeadCounts,
    LeadInput,
    PostInput,
    ProjectInput,
    apply_project_defaults,
)


# =============================================================================
# Project Model Tests
# =============================================================================

class TestProjectInput:
    """Tests for ProjectInput.to_record()"""

    def test_full_record_from_camel_case(self, sample_project_payload):
        """Form-style input is normalized into a complete row."""
        # Arrange
        model = ProjectInput.model_validate(sample_project_payload)

        # Act
        record = model.to_record()

        # Assert
        assert record["tags"] == ["Branding", "Shopify", "Motion"]
        assert record["gallery"] == ["https://cdn.example.com/1.webp", "https://cdn.example.com/2.webp"]
        assert record["is_featured"] is True
        assert record["featured_order"] == 2
        assert record["mobile_image"] is None
        assert set(record) == {
            "title", "description", "category", "tags", "image", "mobile_image",
            "gallery", "metrics", "long_description", "website_url", "video_src",
            "is_featured", "featured_order",
        }

    def test_missing_required_lists_all_required_fields(self):
        """The message names every required field, not only the missing ones."""
        model = ProjectInput(title="T", description="D", category="  ")

        with pytest.raises(ValueError) as exc_info:
            model.to_record()

        assert str(exc_info.value) == "Missing required fields: title, description, category, image"

    def test_is_featured_defaults_false_on_create(self):
        model = ProjectInput(title="T", description="D", category="C", image="I")

        record = model.to_record()

        assert record["is_featured"] is False
        assert record["featured_order"] is None
        assert record["tags"] == []

    def test_partial_record_only_has_sent_fields(self):
        model = ProjectInput.model_validate({"featuredOrder": "", "tags": "a,b"})

        assert model.to_record(partial=True) == {"featured_order": None, "tags": ["a", "b"]}

    def test_partial_record_empty_body(self):
        assert ProjectInput.model_validate({}).to_record(partial=True) == {}

    def test_unknown_keys_ignored(self):
        model = ProjectInput.model_validate({"title": "T", "id": "forged", "created_at": "x"})

        assert model.to_record(partial=True) == {"title": "T"}

    def test_metrics_must_be_object(self):
        with pytest.raises(ValidationError):
            ProjectInput.model_validate({"metrics": "lots"})

    @pytest.mark.parametrize("tags,expected", [
        (5, []),
        ({"a": 1}, []),
        (["ui", 2025, None, " "], ["ui", "2025"]),
    ])
    def test_odd_list_shapes_are_coerced(self, tags, expected):
        """Non-list scalars become [] and array items are stringified."""
        model = ProjectInput.model_validate({"tags": tags, "gallery": tags})

        assert model.tags == expected
        assert model.gallery == expected

    @pytest.mark.parametrize("value", [{}, [], "soon", "  "])
    def test_unusable_featured_order_is_none(self, value):
        model = ProjectInput.model_validate({"featuredOrder": value})

        assert model.to_record(partial=True) == {"featured_order": None}


class TestApplyProjectDefaults:
    """Tests for apply_project_defaults()"""

    def test_fills_missing_columns(self):
        row = apply_project_defaults({"id": "p1", "title": "T"})

        assert row["is_featured"] is False
        assert row["gallery"] == []
        assert row["featured_order"] is None
        assert row["title"] == "T"

    def test_keeps_stored_values(self):
        row = apply_project_defaults({"id": "p1", "is_featured": True, "gallery": ["a"]})

        assert row["is_featured"] is True
        assert row["gallery"] == ["a"]

    def test_defaults_not_shared_between_rows(self):
        first = apply_project_defaults({"id": "a"})
        first["gallery"].append("mutated")

        assert apply_project_defaults({"id": "b"})["gallery"] == []


# =============================================================================
# Post Model Tests
# =============================================================================

class TestPostInput:
    """Tests for PostInput.to_record()"""

    def test_naive_datetime_treated_as_utc(self, sample_post_payload):
        body = dict(sample_post_payload, publishedAt="2025-03-01T09:00:00")

        record = PostInput.model_validate(body).to_record()

        assert record["published_at"] == "2025-03-01T09:00:00+00:00"

    def test_offset_converted_to_utc(self, sample_post_payload):
        body = dict(sample_post_payload, publishedAt="2025-03-01T11:00:00+02:00")

        record = PostInput.model_validate(body).to_record()

        assert record["published_at"] == "2025-03-01T09:00:00+00:00"

    def test_invalid_date_rejected(self, sample_post_payload):
        with pytest.raises(ValidationError):
            PostInput.model_validate(dict(sample_post_payload, publishedAt="someday"))

    def test_missing_required(self):
        with pytest.raises(ValueError, match="title, excerpt, category, content"):
            PostInput(title="T").to_record()

    def test_mixed_type_tags_are_stringified(self, sample_post_payload):
        record = PostInput.model_validate(dict(sample_post_payload, tags=["ui", 2025])).to_record()

        assert record["tags"] == ["ui", "2025"]


# =============================================================================
# Lead Model Tests
# =============================================================================

class TestLeadInput:
    """Tests for LeadInput.to_record()"""

    def test_normalizes(self):
        record = LeadInput(name=" Jo ", email="Jo@X.com ", budget=" ", message=" Hi ").to_record()

        assert record == {
            "name": "Jo",
            "email": "jo@x.com",
            "budget": None,
            "timeline": None,
            "message": "Hi",
        }

    def test_first_problem_wins(self):
        """Name is checked before the email format."""
        with pytest.raises(ValueError, match="Name is required"):
            LeadInput(email="bad", message="m").to_record()


# =============================================================================
# Dashboard Model Tests
# =============================================================================

class TestDashboardStats:
    """Tests for DashboardStats serialization"""

    def test_empty_stats_have_full_shape(self):
        assert DashboardStats().to_response() == {
            "projects": {"total": 0, "today": 0},
            "posts": {"total": 0, "today": 0},
            "leads": {"total": 0, "today": 0, "thisWeek": 0},
            "recent": {"projects": [], "posts": [], "leads": []},
        }

    def test_this_week_uses_camel_case_key(self):
        stats = DashboardStats(leads=LeadCounts(total=5, today=1, this_week=3))

        assert stats.to_response()["leads"]["thisWeek"] == 3
