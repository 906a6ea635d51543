# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Bearer-token authentication delegated to Supabase Auth.
#
# Usage:
#   from app.auth import require_user, AuthUser
#
#   @router.delete("/{id}")
#   async def remove(id: str, user: AuthUser = Depends(require_user)):
#       ...
# =============================================================================

from app.auth.dependencies import CurrentUser, require_user
from app.auth.models import AuthUser

__all__ = [
    "CurrentUser",
    "require_user",
    "AuthUser",
]
