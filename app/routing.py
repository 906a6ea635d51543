# =============================================================================
# app/routing.py - Catch-all Path Normalization
# =============================================================================
# The API is reachable three ways and all of them route identically:
#
#   /projects/123                      (direct)
#   /api/projects/123                  (prefixed, as behind the site's /api)
#   /api?path=projects&path=123        (serverless catch-all segments)
#
# LogicalPathMiddleware rewrites each request to its logical path
# ("/projects/123") before FastAPI matches routes, so routers are mounted
# without any prefix and a 404 reports the path that was actually tried.
# =============================================================================

import logging
from typing import Iterable
from urllib.parse import parse_qsl, urlencode

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

SEGMENT_PARAM = "path"


def resolve_logical_path(
    segments: str | Iterable[str] | None,
    raw_url: str | None,
    prefix: str = "/api",
) -> str:
    """
    Compute the logical path of a request.

    Args:
        segments: Catch-all path segments, as a list or a single string
        raw_url: The request URL path (a query string is ignored)
        prefix: Prefix to strip from raw_url

    Returns:
        A path beginning with "/"

    Example:
        resolve_logical_path(["projects", "123"], None) -> "/projects/123"
        resolve_logical_path(None, "/api/posts?limit=3") -> "/posts"
        resolve_logical_path(None, "/api") -> "/"
    """
    if segments:
        parts = [segments] if isinstance(segments, str) else list(segments)
        cleaned = [part.strip("/") for part in parts if part and part.strip("/")]
        if cleaned:
            return "/" + "/".join(cleaned)

    path = (raw_url or "/").split("?", 1)[0] or "/"
    prefix = (prefix or "").rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix):]
    return path or "/"


class LogicalPathMiddleware:
    """
    ASGI middleware that rewrites scope["path"] to the logical path.

    Catch-all `path` query parameters are only honoured when the request
    hits the API root, and they are removed from the forwarded query string.
    """

    def __init__(self, app: ASGIApp, prefix: str = "/api"):
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        original = scope["path"]
        query = parse_qsl(scope.get("query_string", b"").decode("latin-1"), keep_blank_values=True)

        segments: list[str] = []
        if resolve_logical_path(None, original, self.prefix) == "/":
            segments = [value for key, value in query if key == SEGMENT_PARAM]

        logical = resolve_logical_path(segments, original, self.prefix)
        if logical != original or segments:
            scope = dict(scope)
            scope["path"] = logical
            scope["raw_path"] = logical.encode("utf-8")
            if segments:
                remaining = [(key, value) for key, value in query if key != SEGMENT_PARAM]
                scope["query_string"] = urlencode(remaining).encode("latin-1")
            logger.debug(f"Routing {scope.get('method')} {original} as {logical}")

        await self.app(scope, receive, send)
