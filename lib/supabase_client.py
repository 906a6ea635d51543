# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module wraps the supabase-py client used for every data operation:
# - table queries (select/insert/update/delete) through PostgREST
# - bearer-token verification through Supabase Auth
#
# One wrapper is built at application startup and injected into the request
# handlers (see app/dependencies.py); nothing here is a module-level singleton.
#
# It also classifies PostgREST errors, since handlers treat "no rows" and
# "table does not exist" differently from every other failure.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   db = SupabaseClient.from_settings(settings)
#   rows = db.table("projects").select("*").execute().data
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"

# Postgres undefined_table, and PostgREST's schema-cache miss for a table
MISSING_TABLE_CODES = {"42P01", "PGRST205"}

# Postgres invalid_text_representation, e.g. a malformed uuid in an id filter
INVALID_ID_CODE = "22P02"


class SupabaseClientError(Exception):
    """Raised when the Supabase client cannot be created."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = self.message
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


# =============================================================================
# Error Classification
# =============================================================================

def error_code(exc: BaseException) -> str | None:
    """Return the PostgREST/Postgres error code carried by an exception."""
    code = getattr(exc, "code", None)
    return str(code) if code is not None else None


def error_message(exc: BaseException) -> str:
    """Return the human-readable message of a backend error."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__


def is_no_rows_error(exc: BaseException) -> bool:
    """True when a .single() query matched zero rows."""
    return error_code(exc) == NO_ROWS_CODE or NO_ROWS_CODE in str(exc)


def is_invalid_id_error(exc: BaseException) -> bool:
    """True when the id filter could not be cast to the column type."""
    return error_code(exc) == INVALID_ID_CODE


def is_missing_table_error(exc: BaseException) -> bool:
    """
    True when the queried table has not been created yet.

    Handlers use this to tolerate a schema that has not been migrated.
    """
    if error_code(exc) in MISSING_TABLE_CODES:
        return True
    return "does not exist" in error_message(exc)


# =============================================================================
# Client Wrapper
# =============================================================================

class SupabaseClient:
    """
    Thin wrapper over a supabase-py Client.

    Example:
        db = SupabaseClient.from_settings(settings)
        user = db.verify_token(token)
        row = db.table("leads").insert({...}).execute().data[0]
    """

    def __init__(self, client: Client):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Any) -> SupabaseClient | None:
        """
        Build the wrapper from application settings.

        Uses the service_role key, which bypasses Row Level Security.
        Returns None when the credentials are not configured.

        Raises:
            SupabaseClientError: If the credentials are present but rejected
        """
        if not settings.has_supabase_credentials:
            logger.error("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY environment variables")
            logger.error(f"SUPABASE_URL: {'set' if settings.supabase_url else 'missing'}")
            logger.error(
                f"SUPABASE_SERVICE_ROLE_KEY: {'set' if settings.SUPABASE_SERVICE_ROLE_KEY else 'missing'}"
            )
            return None

        try:
            client = create_client(settings.supabase_url, settings.SUPABASE_SERVICE_ROLE_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase client: {e}",
                suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in your .env file",
            ) from e

        logger.info("Supabase client initialized successfully")
        return cls(client)

    def table(self, name: str):
        """Start a PostgREST query against a table."""
        return self._client.table(name)

    def verify_token(self, token: str) -> Any | None:
        """
        Ask Supabase Auth who owns an access token.

        Returns:
            The Supabase user object, or None if the token is not valid

        Any auth-side failure counts as an invalid token.
        """
        try:
            response = self._client.auth.get_user(token)
        except Exception as e:
            logger.warning(f"Token verification failed: {e}")
            return None

        return getattr(response, "user", None) if response else None
