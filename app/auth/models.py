# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Identity resolved by Supabase Auth for a bearer token.

    Only what the handlers need; the full Supabase user is not kept.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None

    @classmethod
    def from_supabase_user(cls, user) -> "AuthUser":
        """Build from the user object returned by auth.get_user()."""
        return cls(id=user.id, email=getattr(user, "email", None))
