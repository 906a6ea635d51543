# =============================================================================
# app/server.py - Standalone Server Entry Point
# =============================================================================
# Runs the API under uvicorn for local development or a plain VM deploy.
#
# Usage:
#   lumen-sphere-api
#   python -m app.server
#
# Prerequisites:
#   - SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY set (env or .env file)
# =============================================================================

import logging
import sys

import uvicorn

from app.config import settings
from app.main import app

logger = logging.getLogger(__name__)


def main():
    """Start the API server, or exit 1 if the database is not configured."""
    if not settings.has_supabase_credentials:
        logger.critical(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set to start the API server"
        )
        sys.exit(1)

    logger.info(f"API server listening on http://localhost:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
