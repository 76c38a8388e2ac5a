"""HTTP API response helpers."""

import json
from typing import Any, Dict, Optional

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def build_response(status: int, body: Optional[Any] = None) -> Dict[str, Any]:
    """Format an API Gateway HTTP API response with CORS headers.

    A ``None`` body produces an empty response (used for preflight).
    Strings are passed through untouched; anything else is JSON encoded.
    """
    headers = dict(CORS_HEADERS)
    if body is None:
        payload = ""
    elif isinstance(body, str):
        payload = body
        headers["Content-Type"] = "application/json"
    else:
        payload = json.dumps(body)
        headers["Content-Type"] = "application/json"
    return {"statusCode": status, "headers": headers, "body": payload}
