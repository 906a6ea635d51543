# =============================================================================
# app/routers/posts.py - Blog Post Endpoints
# =============================================================================
# Reads are public; writes need an admin.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.auth import CurrentUser
from app.dependencies import PostServiceDep
from core.models.post import PostInput

router = APIRouter()


@router.get("")
async def list_posts(
    service: PostServiceDep,
    category: Annotated[str | None, Query(description="Only this category")] = None,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Maximum results")] = None,
):
    """List posts, most recently published first. [] if the table is missing."""
    return service.list_posts(category=category, limit=limit)


@router.get("/{post_id}")
async def get_post(
    post_id: Annotated[str, Path(description="Post ID")],
    service: PostServiceDep,
):
    return service.fetch_one(post_id)


@router.post("", status_code=201)
async def create_post(
    payload: PostInput,
    user: CurrentUser,
    service: PostServiceDep,
):
    """Create a post. Requires title, excerpt, category and content."""
    return service.create_from(payload)


@router.put("/{post_id}")
async def update_post(
    post_id: Annotated[str, Path(description="Post ID")],
    payload: PostInput,
    user: CurrentUser,
    service: PostServiceDep,
):
    """Update the fields present in the body."""
    return service.update_from(post_id, payload)


@router.delete("/{post_id}")
async def delete_post(
    post_id: Annotated[str, Path(description="Post ID")],
    user: CurrentUser,
    service: PostServiceDep,
):
    return service.delete(post_id)
