"""
Single entrypoint Lambda that routes HTTP API requests to handler modules.

The chat endpoint does its own method handling (preflight, 405), so it is
matched on path alone.
"""

from typing import Callable, Tuple

from . import chat, health_check
from utils.error_handling import NotFoundError, to_response


def _path_matches(path: str, route_path: str) -> bool:
    """Match a route path exactly or as a parent segment."""
    return path == route_path or path.startswith(route_path + "/")


def lambda_handler(event, context):
    """Entry point invoked by API Gateway HTTP API."""
    http = event.get("requestContext", {}).get("http", {})
    method = (http.get("method") or event.get("httpMethod") or "").upper()
    path = http.get("path") or event.get("path") or ""

    # (method or "*", route path, handler)
    route_table: Tuple[Tuple[str, str, Callable], ...] = (
        ("GET", "/health", health_check.lambda_handler),
        ("*", "/api/chat", chat.lambda_handler),
    )

    for route_method, route_path, handler in route_table:
        if route_method in ("*", method) and _path_matches(path, route_path):
            return handler(event, context)

    return to_response(NotFoundError(f"Route not found: {method} {path}"))
