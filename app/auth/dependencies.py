# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# The auth gate for every admin endpoint.
#
# Tokens are not decoded locally: Supabase Auth is asked who owns the token
# (auth.get_user), so revoked sessions are rejected immediately.
#
# Usage:
#   from app.auth import require_user, AuthUser
#
#   @router.post("")
#   async def create(user: AuthUser = Depends(require_user)):
#       ...
# =============================================================================

import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.models import AuthUser
from app.config import settings
from app.dependencies import get_supabase_client
from app.exceptions import BackendNotConfiguredError, UnauthorizedError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; a missing header is handled below as 401
security = HTTPBearer(auto_error=False)


async def require_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    client: Optional[SupabaseClient] = Depends(get_supabase_client),
) -> AuthUser:
    """
    Resolve the admin identity behind the Authorization header.

    This dependency:
    1. Rejects a missing or non-Bearer Authorization header
    2. Asks Supabase Auth to verify the token
    3. Checks the email against ADMIN_ALLOWLIST (when one is set)
    4. Returns an AuthUser with the user's ID and email

    Raises:
        UnauthorizedError: 401 for any of the failures above
        BackendNotConfiguredError: 500 if Supabase is not configured
    """
    if credentials is None or not credentials.credentials.strip():
        raise UnauthorizedError()

    if client is None:
        raise BackendNotConfiguredError("Supabase")

    user = client.verify_token(credentials.credentials.strip())
    if user is None:
        raise UnauthorizedError()

    try:
        auth_user = AuthUser.from_supabase_user(user)
    except ValueError:
        logger.warning(f"Supabase returned a malformed user id: {getattr(user, 'id', None)}")
        raise UnauthorizedError()

    allowlist = settings.admin_allowlist
    if allowlist and (auth_user.email or "").lower() not in allowlist:
        logger.warning(f"Rejected non-admin user: {auth_user.email}")
        raise UnauthorizedError()

    logger.debug(f"Authenticated user: {auth_user.id}")
    return auth_user


CurrentUser = Annotated[AuthUser, Depends(require_user)]
