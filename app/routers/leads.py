# =============================================================================
# app/routers/leads.py - Contact Lead Endpoints
# =============================================================================
# POST is the public contact form. Everything else is for admins.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.auth import CurrentUser
from app.dependencies import LeadServiceDep
from core.models.lead import LeadInput

router = APIRouter()


@router.post("", status_code=201)
async def submit_lead(
    payload: LeadInput,
    service: LeadServiceDep,
):
    """
    Submit the contact form.

    Name, email and message are required; the email is stored trimmed
    and lower-cased.
    """
    return service.submit(payload)


@router.get("")
async def list_leads(
    user: CurrentUser,
    service: LeadServiceDep,
    limit: Annotated[int | None, Query(ge=1, le=500, description="Maximum results")] = None,
):
    """List leads, newest first."""
    return service.fetch_all(limit=limit)


@router.delete("")
async def delete_leads(
    user: CurrentUser,
    service: LeadServiceDep,
    ids: Annotated[list[str] | None, Query(alias="id", description="Lead IDs to delete")] = None,
):
    """
    Delete several leads: DELETE /leads?id=a&id=b.

    Returns the deleted rows. Unknown ids are skipped.
    """
    return service.delete_many(ids or [])


@router.get("/{lead_id}")
async def get_lead(
    lead_id: Annotated[str, Path(description="Lead ID")],
    user: CurrentUser,
    service: LeadServiceDep,
):
    return service.fetch_one(lead_id)


@router.delete("/{lead_id}")
async def delete_lead(
    lead_id: Annotated[str, Path(description="Lead ID")],
    user: CurrentUser,
    service: LeadServiceDep,
):
    return service.delete(lead_id)
