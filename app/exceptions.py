# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as {"error": <message>, ...context}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class LumenSphereException(Exception):
    """
    Base exception for the Lumen Sphere API.

    All custom exceptions inherit from this class. Handlers raise them and
    the registered exception handler turns them into JSON responses.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message, **self.context}


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidPayloadError(LumenSphereException):
    """Raised when a request body is missing required fields or is malformed."""

    def __init__(self, message: str = "Invalid payload"):
        super().__init__(message=message, status_code=400)


class UnauthorizedError(LumenSphereException):
    """Raised when the bearer token is missing, invalid, or not an admin's."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message, status_code=401)


class ResourceNotFoundError(LumenSphereException):
    """Raised when a single-row lookup finds nothing."""

    def __init__(self, resource: str):
        super().__init__(message=f"{resource} not found", status_code=404)


# =============================================================================
# Backend Exceptions
# =============================================================================

class DatabaseError(LumenSphereException):
    """Raised for database failures. The raw backend message is surfaced."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)


class BackendNotConfiguredError(LumenSphereException):
    """Raised when a handler needs a backend whose credentials are missing."""

    def __init__(self, service: str = "Supabase"):
        super().__init__(
            message=f"{service} is not configured on the server. Check environment variables.",
            status_code=500,
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class MissingFileError(LumenSphereException):
    """Raised when the multipart request has no image field."""

    def __init__(self):
        super().__init__(message="No image file provided", status_code=400)


class InvalidFileTypeError(LumenSphereException):
    """Raised when uploaded file is not an image."""

    def __init__(self, content_type: str | None):
        super().__init__(
            message="Only image files are allowed",
            status_code=400,
            context={"content_type": content_type},
        )


class FileTooLargeError(LumenSphereException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            status_code=400,
            context={"max_mb": max_mb},
        )


class AssetUploadError(LumenSphereException):
    """Raised when the asset host rejects or fails an upload."""

    def __init__(self, error: str):
        super().__init__(message=error, status_code=500)


# =============================================================================
# Exception Handlers
# =============================================================================

async def lumensphere_exception_handler(
    request: Request,
    exc: LumenSphereException
) -> JSONResponse:
    """Convert LumenSphereException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed bodies are client input errors, so they map to 400 rather
    than FastAPI's default 422.
    """
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))

    return JSONResponse(
        status_code=400,
        content={"error": "Invalid payload", "details": details},
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing-level HTTP errors.

    An unmatched path reports the logical path and method that were tried.
    """
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not found",
                "path": request.url.path,
                "method": request.method,
            },
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Final safety net: nothing escapes without a JSON body."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) or exc.__class__.__name__,
        },
    )
