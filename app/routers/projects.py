# =============================================================================
# app/routers/projects.py - Portfolio Project Endpoints
# =============================================================================
# Reads are public (the marketing site renders them); writes need an admin.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.auth import CurrentUser
from app.dependencies import ProjectServiceDep
from core.models.project import ProjectInput

router = APIRouter()


@router.get("")
async def list_projects(
    service: ProjectServiceDep,
    category: Annotated[str | None, Query(description="Only this category")] = None,
    featured: Annotated[bool | None, Query(description="Only (non-)featured projects")] = None,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Maximum results")] = None,
):
    """
    List projects, newest first.

    With featured=true the home page order (featured_order) is used instead.
    Returns [] if the projects table does not exist yet.
    """
    return service.list_projects(category=category, featured=featured, limit=limit)


@router.get("/{project_id}")
async def get_project(
    project_id: Annotated[str, Path(description="Project ID")],
    service: ProjectServiceDep,
):
    """Get one project. 404 {"error": "Project not found"} if unknown."""
    return service.fetch_one(project_id)


@router.post("", status_code=201)
async def create_project(
    payload: ProjectInput,
    user: CurrentUser,
    service: ProjectServiceDep,
):
    """
    Create a project.

    Requires title, description, category and image. Tags and gallery may
    be arrays or comma-separated strings.
    """
    return service.create_from(payload)


@router.put("/{project_id}")
async def update_project(
    project_id: Annotated[str, Path(description="Project ID")],
    payload: ProjectInput,
    user: CurrentUser,
    service: ProjectServiceDep,
):
    """
    Update a project.

    Only the fields present in the body are changed; sending an explicit
    null clears an optional field.
    """
    return service.update_from(project_id, payload)


@router.delete("/{project_id}")
async def delete_project(
    project_id: Annotated[str, Path(description="Project ID")],
    user: CurrentUser,
    service: ProjectServiceDep,
):
    """Delete a project and return the deleted row."""
    return service.delete(project_id)
